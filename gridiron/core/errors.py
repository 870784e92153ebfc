"""Exceptions raised by the season engine."""

from typing import Optional


class GridironError(Exception):
    """Base exception for season simulation errors."""

    pass


class SchedulingInfeasible(GridironError):
    """
    No legal schedule exists for the requested league shape.

    Raised up front when team count, weeks and meetings are inconsistent,
    and by the repair pass when its retry budget runs out.
    """

    def __init__(
        self,
        message: str,
        teams: int = 0,
        weeks: int = 0,
        meetings: int = 0,
        errors: Optional[list[str]] = None,
    ) -> None:
        super().__init__(message)
        self.teams = teams
        self.weeks = weeks
        self.meetings = meetings
        self.errors = errors or []


class WorkerUnavailable(GridironError):
    """The worker bridge was used after it was shut down."""

    pass
