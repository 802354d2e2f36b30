"""engine.logging

Small helpers for storing run logs.

A run log is JSON-serializable so it can be exported/imported later.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from core.state import SessionState, state_to_dict, stats_to_dict

from .notifications import Notification


def make_turn_log(
    *,
    before: SessionState,
    after: SessionState,
    action: str,
    notifications: Sequence[Notification],
) -> Dict[str, Any]:
    return {
        "turn": int(after.turns),
        "action": str(action),
        "growth_index": int(before.growth_index),
        "before": stats_to_dict(before.stats),
        "after": stats_to_dict(after.stats),
        "score_delta": int(after.score) - int(before.score),
        "notifications": [n.to_dict() for n in notifications],
    }


def make_run_export(*, seed: int, config: Dict[str, Any], initial_state: SessionState, final_state: SessionState, turn_logs: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "version": 1,
        "seed": int(seed),
        "config": dict(config),
        "initial_state": state_to_dict(initial_state),
        "final_state": state_to_dict(final_state),
        "turn_logs": list(turn_logs),
    }


def dumps_run_export(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2, sort_keys=True)
