"""
Shared fixtures: a scripted random source so turn outcomes are exact.
"""

from dataclasses import replace

import pytest

from core.state import Stats, default_start_state


class ScriptedRandom:
    """random() pops scripted values, then returns `default`; choice() picks by index."""

    def __init__(self, values=None, default=0.99, choice_index=0):
        self.values = list(values or [])
        self.default = default
        self.choice_index = choice_index
        self.random_calls = 0

    def random(self):
        self.random_calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default

    def choice(self, seq):
        return seq[self.choice_index % len(seq)]


@pytest.fixture
def calm_rng():
    """Never triggers events and never grants the seasonal bonus."""
    return ScriptedRandom()


@pytest.fixture
def make_state():
    def _make(health=100, water=50, sunlight=50, nutrients=50, **kwargs):
        base = default_start_state()
        return replace(
            base,
            stats=Stats(health=health, water=water, sunlight=sunlight, nutrients=nutrients),
            **kwargs,
        )

    return _make
