"""
core.specials
Level special abilities:
- passive bonus on resource actions (depends on the level's tag)
- manually triggered one-shot effect with a cooldown
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .effects import apply_delta
from .rng import RandomSource
from .state import Delta, Stats

PHOTOSYNTHESIS = "photosynthesis"
ROOT_NETWORK = "root_network"
SEASONAL_CYCLE = "seasonal_cycle"
ECOSYSTEM = "ecosystem"
IMMORTAL = "immortal"

SPECIAL_COOLDOWN = 3
SEASONAL_BONUS_CHANCE = 0.3
SEASONAL_BONUS = 15


@dataclass(frozen=True)
class SpecialEffect:
    text: str
    delta: Delta
    score: int


SPECIAL_EFFECTS: Dict[str, SpecialEffect] = {
    PHOTOSYNTHESIS: SpecialEffect("☀️ Enhanced Photosynthesis!", {"sunlight": 30, "health": 10}, 25),
    ROOT_NETWORK: SpecialEffect("🌿 Root Network Activated!", {"water": 25, "nutrients": 15}, 20),
    SEASONAL_CYCLE: SpecialEffect(
        "🍂 Seasonal Growth!",
        {"health": 15, "water": 15, "sunlight": 15, "nutrients": 15},
        30,
    ),
    ECOSYSTEM: SpecialEffect("🌍 Ecosystem Harmony!", {"health": 25}, 35),
    IMMORTAL: SpecialEffect(
        "🌲 Ancient Wisdom!",
        {"health": 30, "water": 20, "sunlight": 20, "nutrients": 20},
        50,
    ),
}


@dataclass(frozen=True)
class SpecialResult:
    stats: Stats
    cooldown: int
    score: int
    text: Optional[str] = None

    @property
    def activated(self) -> bool:
        return self.text is not None


def bonus_for(action: str, special: Optional[str], rng: RandomSource) -> int:
    """Extra gain on top of the base resource gain for the current level's tag."""
    if special == PHOTOSYNTHESIS:
        return 10 if action == "sunlight" else 0
    if special == ROOT_NETWORK:
        return 8 if action == "water" else 0
    if special == SEASONAL_CYCLE:
        # independent draw, not tied to the event roll
        return SEASONAL_BONUS if rng.random() < SEASONAL_BONUS_CHANCE else 0
    if special == ECOSYSTEM:
        return 12 if action == "nutrients" else 0
    if special == IMMORTAL:
        return 5
    return 0


def is_ready(cooldown: int) -> bool:
    return int(cooldown) <= 0


def can_activate(special: Optional[str], cooldown: int) -> bool:
    """True when pressing special would fire an actual effect."""
    return special in SPECIAL_EFFECTS and is_ready(cooldown)


def activate_special(special: Optional[str], stats: Stats, cooldown: int) -> SpecialResult:
    """Fire the level's one-shot effect.

    No-op (same stats/cooldown, no text) while cooling down. A level without a
    tag still spends the cooldown but has no effect.
    """
    if not is_ready(cooldown):
        return SpecialResult(stats=stats, cooldown=int(cooldown), score=0)
    effect = SPECIAL_EFFECTS.get(str(special)) if special else None
    if effect is None:
        return SpecialResult(stats=stats, cooldown=SPECIAL_COOLDOWN, score=0)
    return SpecialResult(
        stats=apply_delta(stats, effect.delta),
        cooldown=SPECIAL_COOLDOWN,
        score=int(effect.score),
        text=effect.text,
    )
