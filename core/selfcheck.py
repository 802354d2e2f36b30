"""
core.selfcheck
Minimal "it runs" proof for the core rules.

Exercises the stat helpers, events and specials directly. Turn order, scoring
and level-ups live in engine.pipeline and are covered there.

Run:
  python -m core.selfcheck
"""

from __future__ import annotations

from dataclasses import asdict

from .effects import apply_delta, decay_all
from .events import advance_event, roll_event
from .levels import LEVELS
from .rng import rng_from
from .specials import activate_special, is_ready
from .state import RESOURCE_STATS, STAT_NAMES, Stats, Upgrades


def run_smoke(turns: int = 60) -> Stats:
    rng = rng_from("selfcheck", base_seed=42)
    stats = Stats(health=100, water=50, sunlight=50, nutrients=50)
    upgrades = Upgrades(strongRoots=1, thickBark=1)
    special = LEVELS[1].special
    cooldown = 0
    event = None

    for t in range(1, turns + 1):
        if is_ready(cooldown):
            res = activate_special(special, stats, cooldown)
            assert res.activated and res.cooldown == 3, res
            stats, cooldown = res.stats, res.cooldown
        else:
            # alternate resource top-ups
            target = RESOURCE_STATS[t % len(RESOURCE_STATS)]
            stats = apply_delta(stats, {target: 20, "health": 5})
        cooldown = max(0, cooldown - 1)
        stats = decay_all(stats, upgrades)

        event = event or roll_event(rng)
        if event is not None:
            stats, event = advance_event(event, stats, upgrades)

        # invariants
        for k in STAT_NAMES:
            v = getattr(stats, k)
            assert 0 <= v <= 100, (k, v)
            assert isinstance(v, int), (k, v)

    print("OK: core smoke test passed.")
    print("Final stats:", asdict(stats))
    return stats


if __name__ == "__main__":
    run_smoke()
