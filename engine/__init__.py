"""engine

Turn pipeline, session tracking and persistence on top of core.
"""
