"""engine.sim_runner

Headless runner for quick sanity checks.

This keeps tests deterministic and CI-friendly: a tiny built-in policy plays
the game through GameSession with an in-memory store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from core.levels import get_level
from core.specials import can_activate
from core.state import RESOURCE_STATS, SessionState, stats_to_dict
from core.upgrades import STRONG_ROOTS, THICK_BARK

from .config import EngineConfig
from .notifications import LevelUpAvailable
from .pipeline import REST, SPECIAL
from .session import GameSession
from .storage import MemoryStore


@dataclass
class GreedyGardener:
    """Deterministic policy for tests: tops up the weakest resource."""

    rest_below: int = 40

    def pick_action(self, state: SessionState) -> str:
        if can_activate(get_level(state.growth_index).special, state.special_cooldown):
            return SPECIAL
        stats = stats_to_dict(state.stats)
        weakest = min(RESOURCE_STATS, key=lambda k: stats[k])
        if stats["health"] < self.rest_below and stats[weakest] >= 40:
            return REST
        return weakest

    def pick_upgrade(self, state: SessionState) -> str:
        # alternate, roots first
        return STRONG_ROOTS if state.growth_index % 2 == 0 else THICK_BARK


def run_headless_sim(max_turns: int = 200, base_seed: int = 123) -> Dict[str, Any]:
    """Run a deterministic simulation and return summary."""
    session = GameSession(config=EngineConfig(base_seed=base_seed), store=MemoryStore())
    policy = GreedyGardener()
    upgrades: List[str] = []

    for _ in range(max_turns):
        if session.state.is_over:
            break
        notes = session.take_turn(policy.pick_action(session.state))
        if any(isinstance(n, LevelUpAvailable) for n in notes):
            kind = policy.pick_upgrade(session.state)
            session.choose_upgrade(kind)
            upgrades.append(kind)

    return {
        "turns": session.state.turns,
        "final": session.state,
        "upgrades": upgrades,
        "high_score": session.high_score,
        "logs": session.turn_logs,
    }
