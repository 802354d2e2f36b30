"""
core.upgrades
Permanent upgrades and the modifiers they apply to decay and damage.

One upgrade point is granted per level transition; the player picks exactly one kind.
wideLeaves is tracked but has no effect on any rule yet.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Tuple

from .state import Upgrades

STRONG_ROOTS = "strongRoots"
WIDE_LEAVES = "wideLeaves"
THICK_BARK = "thickBark"

UPGRADE_KINDS: Tuple[str, ...] = (STRONG_ROOTS, WIDE_LEAVES, THICK_BARK)

UPGRADE_LABELS = {
    STRONG_ROOTS: "Strong Roots",
    WIDE_LEAVES: "Wide Leaves",
    THICK_BARK: "Thick Bark",
}

UPGRADE_DESCRIPTIONS = {
    STRONG_ROOTS: "Water drains slower.",
    WIDE_LEAVES: "Broader leaves for a stronger canopy.",
    THICK_BARK: "Pests do less damage.",
}

BASE_WATER_DECAY = 8
WATER_DECAY_PER_ROOT = 2

BASE_PEST_DAMAGE = 15
PEST_DAMAGE_PER_BARK = 3
MIN_PEST_DAMAGE = 5


def add_upgrade(upgrades: Upgrades, kind: str) -> Upgrades:
    """Return upgrades with `kind` incremented by one (unknown kinds are ignored)."""
    if kind not in UPGRADE_KINDS:
        return upgrades
    return replace(upgrades, **{kind: int(getattr(upgrades, kind)) + 1})


def water_decay(upgrades: Upgrades) -> int:
    return max(0, BASE_WATER_DECAY - WATER_DECAY_PER_ROOT * int(upgrades.strongRoots))


def pest_damage(upgrades: Upgrades) -> int:
    return max(MIN_PEST_DAMAGE, BASE_PEST_DAMAGE - PEST_DAMAGE_PER_BARK * int(upgrades.thickBark))
