"""core

Pure domain layer for Grow or Die (no UI, no storage).
"""
