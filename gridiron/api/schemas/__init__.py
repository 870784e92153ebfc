"""Pydantic schemas for API request/response models."""

from gridiron.api.schemas.league import (
    CreateLeagueRequest,
    GameResultSchema,
    LeagueSummary,
    ScheduledGameSchema,
    ScheduleResponse,
    SimWeekRequest,
    SimWeekResponse,
    StandingEntry,
    StandingsResponse,
    WeekResultsResponse,
    WeekSchema,
)

__all__ = [
    "CreateLeagueRequest",
    "GameResultSchema",
    "LeagueSummary",
    "ScheduledGameSchema",
    "ScheduleResponse",
    "SimWeekRequest",
    "SimWeekResponse",
    "StandingEntry",
    "StandingsResponse",
    "WeekResultsResponse",
    "WeekSchema",
]
