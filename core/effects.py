"""
core.effects
Stat rules:
- clamp-on-apply deltas
- passive per-turn decay
- low-resource health penalty
"""

from __future__ import annotations

from typing import Mapping

from .state import RESOURCE_STATS, STAT_MAX, STAT_MIN, Stats, Upgrades, clamp
from .upgrades import water_decay

SUNLIGHT_DECAY = 6
NUTRIENTS_DECAY = 7

LOW_RESOURCE_THRESHOLD = 20
LOW_RESOURCE_HEALTH_PENALTY = 10


def apply_stat(value: int, amount: int) -> int:
    """Add `amount` to a single stat value and clamp to 0..100."""
    return clamp(int(value) + int(amount), STAT_MIN, STAT_MAX)


def apply_delta(stats: Stats, delta: Mapping[str, int]) -> Stats:
    """Apply delta with clamp rules (pure function)."""
    return Stats(
        health=apply_stat(stats.health, delta.get("health", 0)),
        water=apply_stat(stats.water, delta.get("water", 0)),
        sunlight=apply_stat(stats.sunlight, delta.get("sunlight", 0)),
        nutrients=apply_stat(stats.nutrients, delta.get("nutrients", 0)),
    )


def is_starving(stats: Stats) -> bool:
    return any(int(getattr(stats, k)) < LOW_RESOURCE_THRESHOLD for k in RESOURCE_STATS)


def decay_all(stats: Stats, upgrades: Upgrades) -> Stats:
    """Passive decay for one turn.

    Resources drain first; if any resource ends below the threshold the plant
    also loses health.
    """
    s = apply_delta(
        stats,
        {
            "water": -water_decay(upgrades),
            "sunlight": -SUNLIGHT_DECAY,
            "nutrients": -NUTRIENTS_DECAY,
        },
    )
    if is_starving(s):
        s = apply_delta(s, {"health": -LOW_RESOURCE_HEALTH_PENALTY})
    return s
