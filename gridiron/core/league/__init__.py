"""League structure and schedule."""

from gridiron.core.league.league import League
from gridiron.core.league.schedule import (
    GameRef,
    Schedule,
    ScheduledGame,
    ScheduleFormat,
    Week,
)

__all__ = [
    "GameRef",
    "League",
    "Schedule",
    "ScheduledGame",
    "ScheduleFormat",
    "Week",
]
