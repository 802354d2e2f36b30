"""content.tips

Static tip texts. One tip is shown at most once per installation.
"""

from __future__ import annotations

from typing import Tuple

from core.rng import RandomSource

TIPS: Tuple[str, ...] = (
    "💡 Tip: Keep all stats between 40-70 for optimal growth!",
    "💡 Tip: Use Rest when Health is below 70 and other stats are safe.",
    "💡 Tip: Water drains fastest - prioritize it when low!",
    "💡 Tip: Choose Strong Roots upgrade first - it helps the most!",
    "💡 Tip: React immediately to events - they can be dangerous!",
    "💡 Tip: Higher levels have special abilities - use them wisely!",
)


def pick_tip(rng: RandomSource) -> str:
    return rng.choice(list(TIPS))
