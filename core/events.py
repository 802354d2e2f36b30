"""
core.events
Random weather/pest events.

Data (EVENT_CATALOG) and behavior (per-turn effect table) are kept apart:
each kind maps to a pure function (upgrades) -> delta.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from .effects import apply_delta
from .rng import RandomSource
from .state import ActiveEvent, Delta, Stats, Upgrades
from .upgrades import pest_damage

EVENT_CHANCE = 0.15


class EventKind(str, Enum):
    PESTS = "pests"
    DROUGHT = "drought"
    RAINSTORM = "rainstorm"
    HEATWAVE = "heatwave"


@dataclass(frozen=True)
class EventSpec:
    kind: EventKind
    icon: str
    text: str
    duration: int


EVENT_CATALOG: Dict[EventKind, EventSpec] = {
    EventKind.PESTS: EventSpec(EventKind.PESTS, "🐛", "Pests are attacking!", 3),
    EventKind.DROUGHT: EventSpec(EventKind.DROUGHT, "☀️", "Severe drought! Water is scarce.", 2),
    EventKind.RAINSTORM: EventSpec(EventKind.RAINSTORM, "🌧️", "Heavy rainstorm!", 2),
    EventKind.HEATWAVE: EventSpec(EventKind.HEATWAVE, "🔥", "Extreme heatwave!", 2),
}


def _pests(upgrades: Upgrades) -> Delta:
    return {"health": -pest_damage(upgrades)}


def _drought(upgrades: Upgrades) -> Delta:
    return {"water": -15}


def _rainstorm(upgrades: Upgrades) -> Delta:
    return {"water": 25, "sunlight": -10}


def _heatwave(upgrades: Upgrades) -> Delta:
    return {"water": -20, "sunlight": 15}


EVENT_EFFECTS: Dict[EventKind, Callable[[Upgrades], Delta]] = {
    EventKind.PESTS: _pests,
    EventKind.DROUGHT: _drought,
    EventKind.RAINSTORM: _rainstorm,
    EventKind.HEATWAVE: _heatwave,
}


def get_event_spec(kind: str) -> EventSpec:
    return EVENT_CATALOG[EventKind(kind)]


def event_delta(kind: str, upgrades: Upgrades) -> Delta:
    return EVENT_EFFECTS[EventKind(kind)](upgrades)


def roll_event(rng: RandomSource, chance: float = EVENT_CHANCE) -> Optional[ActiveEvent]:
    """One trigger roll; on success pick a kind uniformly from the catalog."""
    if rng.random() >= chance:
        return None
    kinds: List[EventKind] = list(EVENT_CATALOG.keys())
    kind = rng.choice(kinds)
    spec = EVENT_CATALOG[EventKind(kind)]
    return ActiveEvent(kind=spec.kind.value, remaining_turns=int(spec.duration))


def advance_event(event: ActiveEvent, stats: Stats, upgrades: Upgrades) -> Tuple[Stats, Optional[ActiveEvent]]:
    """Apply one turn of an active event.

    Returns (new_stats, event_or_None); None means the event just ended.
    """
    s = apply_delta(stats, event_delta(event.kind, upgrades))
    remaining = int(event.remaining_turns) - 1
    if remaining <= 0:
        return s, None
    return s, ActiveEvent(kind=event.kind, remaining_turns=remaining)
