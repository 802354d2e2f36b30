"""engine.storage

Persistence for the two values that outlive a run: the high score and the
one-time tips flag. Everything else about a run is in-memory only.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Protocol

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "highScore"
TIPS_USED_KEY = "tipsUsed"


@dataclass(frozen=True)
class PersistedFlags:
    high_score: int = 0
    tips_used: bool = False


class FlagStore(Protocol):
    def load(self) -> PersistedFlags: ...

    def save_high_score(self, score: int) -> None: ...

    def mark_tips_used(self) -> None: ...


class MemoryStore:
    """In-process store for tests and headless runs."""

    def __init__(self, high_score: int = 0, tips_used: bool = False):
        self.flags = PersistedFlags(high_score=int(high_score), tips_used=bool(tips_used))

    def load(self) -> PersistedFlags:
        return self.flags

    def save_high_score(self, score: int) -> None:
        self.flags = PersistedFlags(high_score=int(score), tips_used=self.flags.tips_used)

    def mark_tips_used(self) -> None:
        self.flags = PersistedFlags(high_score=self.flags.high_score, tips_used=True)


class ScoreStore:
    """JSON file store: {"highScore": int, "tipsUsed": bool}."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, using defaults: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed store file %s", self.path)
            return {}
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def load(self) -> PersistedFlags:
        data = self._read()
        try:
            high = max(0, int(data.get(HIGH_SCORE_KEY, 0) or 0))
        except (TypeError, ValueError):
            high = 0
        return PersistedFlags(high_score=high, tips_used=data.get(TIPS_USED_KEY) is True)

    def save_high_score(self, score: int) -> None:
        data = self._read()
        data[HIGH_SCORE_KEY] = int(score)
        self._write(data)
        logger.info("New high score saved: %d", int(score))

    def mark_tips_used(self) -> None:
        data = self._read()
        data[TIPS_USED_KEY] = True
        self._write(data)
