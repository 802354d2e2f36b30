"""engine.session

Session / score tracker.

GameSession is the single writer of the current SessionState. It wires the
pure pipeline to a random source and to the persistence collaborator, and
keeps the per-turn log of the current run.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Mapping, Optional

from content.tips import pick_tip
from core.levels import can_level_up
from core.rng import RandomSource, rng_from, run_rng
from core.state import SessionState, default_start_state, state_from_dict

from .config import EngineConfig
from .logging import make_run_export, make_turn_log
from .notifications import Notification, RunEnded, StateChanged, TipShown
from .pipeline import choose_upgrade, take_turn
from .storage import FlagStore, MemoryStore

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        store: Optional[FlagStore] = None,
        rng: Optional[RandomSource] = None,
        tip_rng: Optional[RandomSource] = None,
    ):
        self.config = config or EngineConfig()
        self.store = store if store is not None else MemoryStore()
        flags = self.store.load()
        self.high_score = int(flags.high_score)
        self.tips_used = bool(flags.tips_used)
        self.run_number = 1
        self._fixed_rng = rng
        self.rng: RandomSource = rng if rng is not None else run_rng(self.config.base_seed, self.run_number)
        # tips draw from their own stream so showing one never shifts the run
        self.tip_rng: RandomSource = tip_rng if tip_rng is not None else rng_from("tip", base_seed=self.config.base_seed)
        self.initial_state = default_start_state()
        self.state = self.initial_state
        self.turn_logs: List[Dict[str, Any]] = []

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def take_turn(self, action: str) -> List[Notification]:
        before = self.state
        after, notes = take_turn(before, action, self.rng, high_score=self.high_score)
        if after is before:
            return []

        for n in notes:
            if isinstance(n, RunEnded) and n.new_high_score:
                self.high_score = n.score
                self.store.save_high_score(n.score)

        self.state = after
        self.turn_logs.append(make_turn_log(before=before, after=after, action=action, notifications=notes))
        return [*notes, StateChanged()]

    def choose_upgrade(self, kind: str) -> List[Notification]:
        new_state = choose_upgrade(self.state, kind)
        if new_state is self.state:
            return []
        self.state = new_state
        return [StateChanged()]

    def show_tip(self) -> List[Notification]:
        if self.tips_used:
            return []
        text = pick_tip(self.tip_rng)
        self.tips_used = True
        self.store.mark_tips_used()
        return [TipShown(text=text), StateChanged()]

    def reset(self) -> List[Notification]:
        """Start a fresh run; high score and the tips flag survive."""
        self.run_number += 1
        if self._fixed_rng is None:
            self.rng = run_rng(self.config.base_seed, self.run_number)
        self.initial_state = default_start_state()
        self.state = self.initial_state
        self.turn_logs = []
        logger.info("Run reset (run #%d, high score %d)", self.run_number, self.high_score)
        return [StateChanged()]

    def restore_run(self, data: Mapping[str, Any]) -> List[Notification]:
        """Continue from an export_run() payload (initial and final snapshot plus logs)."""
        initial = state_from_dict(data["initial_state"])
        final = state_from_dict(data["final_state"])
        logs = [dict(t) for t in (data.get("turn_logs") or [])]
        self.initial_state = initial
        self.state = final
        self.turn_logs = logs
        logger.info("Run restored at turn %d (score %d)", final.turns, final.score)
        return [StateChanged()]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def score(self) -> int:
        return int(self.state.score)

    @property
    def level_up_pending(self) -> bool:
        return can_level_up(self.state)

    def export_run(self) -> Dict[str, Any]:
        return make_run_export(
            seed=self.config.base_seed,
            config=asdict(self.config),
            initial_state=self.initial_state,
            final_state=self.state,
            turn_logs=self.turn_logs,
        )
