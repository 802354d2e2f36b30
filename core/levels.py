"""
core.levels
Growth level table.

Kept in core so balancing lives in one place, but UI can still display icons/backgrounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .state import SessionState


@dataclass(frozen=True)
class GrowthLevel:
    name: str
    icon: str
    turns_to_next: int
    background: str
    special: Optional[str] = None


# index = growth index; the last entry is the terminal "max" level
LEVELS: Tuple[GrowthLevel, ...] = (
    GrowthLevel(name="Seed", icon="🌱", turns_to_next=5, background="soil", special=None),
    GrowthLevel(name="Sprout", icon="🌿", turns_to_next=8, background="grassland", special="photosynthesis"),
    GrowthLevel(name="Sapling", icon="🌳", turns_to_next=10, background="forest", special="root_network"),
    GrowthLevel(name="Young Tree", icon="🌲", turns_to_next=12, background="forest", special="seasonal_cycle"),
    GrowthLevel(name="Mature Tree", icon="🌳", turns_to_next=15, background="forest", special="ecosystem"),
    GrowthLevel(name="Ancient Tree", icon="🌲", turns_to_next=0, background="forest", special="immortal"),
)

MAX_LEVEL_INDEX = len(LEVELS) - 1


def get_level(index: int) -> GrowthLevel:
    return LEVELS[max(0, min(MAX_LEVEL_INDEX, int(index)))]


def is_max_level(index: int) -> bool:
    return int(index) >= MAX_LEVEL_INDEX


def can_level_up(state: SessionState) -> bool:
    """True when the current level's turn threshold is met and a higher level exists."""
    if state.is_over or is_max_level(state.growth_index):
        return False
    return state.turns_in_level >= get_level(state.growth_index).turns_to_next


def has_won(state: SessionState) -> bool:
    """Surviving the threshold of the final level wins the run."""
    if not is_max_level(state.growth_index):
        return False
    return state.turns_in_level >= get_level(state.growth_index).turns_to_next
