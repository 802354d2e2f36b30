"""engine.pipeline

Core turn flow (headless).

Responsibilities:
- Resolve one player action into the next SessionState
- Apply passive decay and the active random event
- Detect win/loss and level-up eligibility
- Advance the growth level once an upgrade is chosen

This layer is UI-agnostic and never touches storage: the high score is passed
in and only reported back through RunEnded.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Tuple

from core.effects import apply_delta, decay_all
from core.events import advance_event, get_event_spec, roll_event
from core.levels import can_level_up, get_level, has_won
from core.rng import RandomSource
from core.specials import activate_special, bonus_for, is_ready
from core.state import TERMINAL_LOST, TERMINAL_WON, SessionState
from core.upgrades import UPGRADE_KINDS, add_upgrade

from .notifications import (
    EventEnded,
    EventStarted,
    LevelUpAvailable,
    Notification,
    RunEnded,
    SpecialEffectShown,
)

WATER = "water"
SUNLIGHT = "sunlight"
NUTRIENTS = "nutrients"
REST = "rest"
SPECIAL = "special"

RESOURCE_ACTIONS = (WATER, SUNLIGHT, NUTRIENTS)
ALLOWED_ACTIONS = (WATER, SUNLIGHT, NUTRIENTS, REST, SPECIAL)

BASE_GAIN = 20
ACTION_HEALTH_GAIN = 5
ACTION_SCORE = 10
BONUS_SCORE = 5

REST_HEALTH_GAIN = 15
REST_RESOURCE_COST = 5
REST_SCORE = 5


def is_valid_action(state: SessionState, action: str) -> bool:
    """Commands that would be silent no-ops return False."""
    if state.is_over or action not in ALLOWED_ACTIONS:
        return False
    if action == SPECIAL:
        return is_ready(state.special_cooldown)
    return True


def _resolve_action(
    state: SessionState,
    action: str,
    rng: RandomSource,
) -> Tuple[SessionState, List[Notification]]:
    level = get_level(state.growth_index)
    out: List[Notification] = []

    if action in RESOURCE_ACTIONS:
        bonus = bonus_for(action, level.special, rng)
        stats = apply_delta(state.stats, {action: BASE_GAIN + bonus, "health": ACTION_HEALTH_GAIN})
        gained = ACTION_SCORE + (BONUS_SCORE if bonus > 0 else 0)
        return replace(state, stats=stats, score=state.score + gained), out

    if action == REST:
        stats = apply_delta(
            state.stats,
            {
                "health": REST_HEALTH_GAIN,
                "water": -REST_RESOURCE_COST,
                "sunlight": -REST_RESOURCE_COST,
                "nutrients": -REST_RESOURCE_COST,
            },
        )
        return replace(state, stats=stats, score=state.score + REST_SCORE), out

    # special
    res = activate_special(level.special, state.stats, state.special_cooldown)
    if res.activated:
        out.append(SpecialEffectShown(text=str(res.text)))
    return replace(state, stats=res.stats, special_cooldown=res.cooldown, score=state.score + res.score), out


def _resolve_event(state: SessionState, rng: RandomSource) -> Tuple[SessionState, List[Notification]]:
    out: List[Notification] = []
    event = state.active_event
    if event is None:
        event = roll_event(rng)
        if event is not None:
            spec = get_event_spec(event.kind)
            out.append(EventStarted(event=spec.kind.value, icon=spec.icon, text=spec.text))

    # a freshly triggered event already bites on its first turn
    if event is None:
        return state, out

    stats, remaining = advance_event(event, state.stats, state.upgrades)
    if remaining is None:
        out.append(EventEnded(event=event.kind))
    return replace(state, stats=stats, active_event=remaining), out


def take_turn(
    state: SessionState,
    action: str,
    rng: RandomSource,
    *,
    high_score: int = 0,
) -> Tuple[SessionState, List[Notification]]:
    """Resolve one turn.

    Order: counters -> action -> cooldown -> decay -> event -> end check -> level-up check.
    Returns (new_state, notifications). Invalid commands return the same state and [].
    """
    if not is_valid_action(state, action):
        return state, []

    s = replace(state, turns=state.turns + 1, turns_in_level=state.turns_in_level + 1)

    # 1) player action
    s, notes = _resolve_action(s, action, rng)

    # 2) cooldown ticks every turn, including the one that just set it
    s = replace(s, special_cooldown=max(0, s.special_cooldown - 1))

    # 3) passive decay
    s = replace(s, stats=decay_all(s.stats, s.upgrades))

    # 4) random event
    s, ev_notes = _resolve_event(s, rng)
    notes.extend(ev_notes)

    # 5) end conditions
    if s.stats.health <= 0:
        s = replace(s, terminal=TERMINAL_LOST)
    elif has_won(s):
        s = replace(s, terminal=TERMINAL_WON)

    if s.is_over:
        best = max(int(high_score), s.score)
        notes.append(
            RunEnded(
                won=s.terminal == TERMINAL_WON,
                score=s.score,
                high_score=best,
                new_high_score=s.score > int(high_score),
            )
        )
        return s, notes

    # 6) level-up is offered, never applied here
    if can_level_up(s):
        notes.append(LevelUpAvailable(growth_index=s.growth_index))

    return s, notes


def choose_upgrade(state: SessionState, kind: str) -> SessionState:
    """Spend a pending level-up on one upgrade and advance to the next level.

    No-op unless a level-up is available and `kind` is a known upgrade.
    """
    if kind not in UPGRADE_KINDS or not can_level_up(state):
        return state
    return replace(
        state,
        upgrades=add_upgrade(state.upgrades, kind),
        growth_index=state.growth_index + 1,
        turns_in_level=0,
    )
