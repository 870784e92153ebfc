"""Leagues API router - REST endpoints for league creation and simulation."""

import asyncio

from fastapi import APIRouter, HTTPException, status

from gridiron.api.schemas.league import (
    CreateLeagueRequest,
    LeagueSummary,
    ScheduleResponse,
    SimWeekRequest,
    SimWeekResponse,
    StandingsResponse,
    WeekResultsResponse,
)
from gridiron.api.services.league_service import league_service
from gridiron.core.errors import SchedulingInfeasible
from gridiron.core.league.league import League

router = APIRouter(prefix="/leagues", tags=["leagues"])


def _get_league_or_404(league_id: str) -> League:
    league = league_service.get_league(league_id)
    if league is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"League {league_id} not found",
        )
    return league


@router.post("", response_model=LeagueSummary, status_code=status.HTTP_201_CREATED)
async def create_league(request: CreateLeagueRequest) -> LeagueSummary:
    """
    Create a generated league with a full season schedule.

    Returns 422 when the teams, weeks and meetings cannot form a schedule.
    """
    try:
        return await asyncio.to_thread(league_service.create_league, request)
    except SchedulingInfeasible as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(e), "errors": e.errors},
        )


@router.get("/{league_id}", response_model=LeagueSummary)
async def get_league(league_id: str) -> LeagueSummary:
    """Get league summary."""
    return league_service.summary(_get_league_or_404(league_id))


@router.get("/{league_id}/schedule", response_model=ScheduleResponse)
async def get_schedule(league_id: str) -> ScheduleResponse:
    """Get the full season schedule."""
    return league_service.schedule(_get_league_or_404(league_id))


@router.post("/{league_id}/sim-week", response_model=SimWeekResponse)
async def sim_week(league_id: str, request: SimWeekRequest | None = None) -> SimWeekResponse:
    """
    Simulate the league's current week.

    Runs in the worker; if the worker fails the week is simulated
    synchronously instead.
    """
    league = _get_league_or_404(league_id)
    seed = request.seed if request else None
    return await asyncio.to_thread(league_service.sim_week, league, seed)


@router.get("/{league_id}/standings", response_model=StandingsResponse)
async def get_standings(league_id: str) -> StandingsResponse:
    """Get league standings."""
    return league_service.standings(_get_league_or_404(league_id))


@router.get("/{league_id}/weeks/{week}/results", response_model=WeekResultsResponse)
async def get_week_results(league_id: str, week: int) -> WeekResultsResponse:
    """Get results committed for a week."""
    league = _get_league_or_404(league_id)
    if not 1 <= week <= league.schedule.num_weeks:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Week {week} is outside the {league.schedule.num_weeks}-week schedule",
        )
    return league_service.week_results(league, week)
