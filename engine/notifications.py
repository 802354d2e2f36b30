"""engine.notifications

Post-condition messages emitted by the engine and the session.

The presentation layer renders them; the persistence collaborator reacts to
RunEnded / TipShown. None of them carry behavior.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict


@dataclass(frozen=True)
class Notification:
    kind: ClassVar[str] = "notification"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class EventStarted(Notification):
    kind: ClassVar[str] = "eventStarted"
    event: str
    icon: str
    text: str


@dataclass(frozen=True)
class EventEnded(Notification):
    kind: ClassVar[str] = "eventEnded"
    event: str


@dataclass(frozen=True)
class SpecialEffectShown(Notification):
    kind: ClassVar[str] = "specialEffectShown"
    text: str


@dataclass(frozen=True)
class LevelUpAvailable(Notification):
    kind: ClassVar[str] = "levelUpAvailable"
    growth_index: int


@dataclass(frozen=True)
class RunEnded(Notification):
    kind: ClassVar[str] = "runEnded"
    won: bool
    score: int
    high_score: int
    new_high_score: bool = False


@dataclass(frozen=True)
class TipShown(Notification):
    kind: ClassVar[str] = "tipShown"
    text: str


@dataclass(frozen=True)
class StateChanged(Notification):
    kind: ClassVar[str] = "stateChanged"
