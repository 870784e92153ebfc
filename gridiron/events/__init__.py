"""Event system for game and season simulation."""

from gridiron.events.bus import EventBus
from gridiron.events.types import (
    CommitSkippedEvent,
    GameCommittedEvent,
    GameEndEvent,
    GameEvent,
    ScoringEvent,
    TurnoverEvent,
    WeekCompletedEvent,
)

__all__ = [
    "CommitSkippedEvent",
    "EventBus",
    "GameCommittedEvent",
    "GameEndEvent",
    "GameEvent",
    "ScoringEvent",
    "TurnoverEvent",
    "WeekCompletedEvent",
]
