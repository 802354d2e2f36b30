"""
core.state
Core domain data models (UI/storage independent).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Mapping, Optional

STAT_MIN = 0
STAT_MAX = 100

STAT_NAMES = ("health", "water", "sunlight", "nutrients")
RESOURCE_STATS = ("water", "sunlight", "nutrients")

TERMINAL_NONE = "none"
TERMINAL_WON = "won"
TERMINAL_LOST = "lost"


def clamp(x: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, x))


Delta = Dict[str, int]


@dataclass(frozen=True)
class Stats:
    """The four bounded plant resources.

    All values are integers in 0..100; clamping is applied by core.effects.apply_delta().
    """

    health: int
    water: int
    sunlight: int
    nutrients: int


@dataclass(frozen=True)
class Upgrades:
    """Permanent upgrade counts, one point per level transition."""

    strongRoots: int = 0
    wideLeaves: int = 0
    thickBark: int = 0


@dataclass(frozen=True)
class ActiveEvent:
    kind: str
    remaining_turns: int


@dataclass(frozen=True)
class SessionState:
    """Full snapshot of one run.

    Only engine.pipeline produces new snapshots; readers never mutate.
    """

    growth_index: int
    stats: Stats
    upgrades: Upgrades = field(default_factory=Upgrades)
    score: int = 0
    turns: int = 0
    turns_in_level: int = 0
    active_event: Optional[ActiveEvent] = None
    special_cooldown: int = 0
    terminal: str = TERMINAL_NONE

    @property
    def is_over(self) -> bool:
        return self.terminal != TERMINAL_NONE


def stats_from_mapping(d: Mapping[str, Any]) -> Stats:
    return Stats(
        health=clamp(int(d.get("health", STAT_MAX)), STAT_MIN, STAT_MAX),
        water=clamp(int(d.get("water", 50)), STAT_MIN, STAT_MAX),
        sunlight=clamp(int(d.get("sunlight", 50)), STAT_MIN, STAT_MAX),
        nutrients=clamp(int(d.get("nutrients", 50)), STAT_MIN, STAT_MAX),
    )


def stats_to_dict(s: Stats) -> Dict[str, int]:
    return {
        "health": int(s.health),
        "water": int(s.water),
        "sunlight": int(s.sunlight),
        "nutrients": int(s.nutrients),
    }


def state_to_dict(state: SessionState) -> Dict[str, Any]:
    return asdict(state)


def state_from_dict(d: Mapping[str, Any]) -> SessionState:
    """Rebuild a snapshot from state_to_dict() output (run export / import)."""
    ev = d.get("active_event")
    active = None
    if ev:
        active = ActiveEvent(kind=str(ev["kind"]), remaining_turns=int(ev["remaining_turns"]))
    up = dict(d.get("upgrades") or {})
    return SessionState(
        growth_index=int(d.get("growth_index", 0)),
        stats=stats_from_mapping(d.get("stats") or {}),
        upgrades=Upgrades(
            strongRoots=int(up.get("strongRoots", 0)),
            wideLeaves=int(up.get("wideLeaves", 0)),
            thickBark=int(up.get("thickBark", 0)),
        ),
        score=int(d.get("score", 0)),
        turns=int(d.get("turns", 0)),
        turns_in_level=int(d.get("turns_in_level", 0)),
        active_event=active,
        special_cooldown=int(d.get("special_cooldown", 0)),
        terminal=str(d.get("terminal", TERMINAL_NONE)),
    )


def default_start_state() -> SessionState:
    """Baseline start state.

    Keep it in core so headless tests and UI share the same baseline.
    """
    return SessionState(
        growth_index=0,
        stats=Stats(health=100, water=50, sunlight=50, nutrients=50),
        upgrades=Upgrades(),
        score=0,
        turns=0,
        turns_in_level=0,
        active_event=None,
        special_cooldown=0,
        terminal=TERMINAL_NONE,
    )
