"""Pydantic schemas for league, schedule and results endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class CreateLeagueRequest(BaseModel):
    """Request to create a generated league with a schedule."""

    name: str = "Gridiron League"
    season: int = Field(default=2025, ge=1900, le=2200)
    num_teams: int = Field(default=16, ge=2, le=32)
    weeks: Optional[int] = Field(default=None, ge=1)
    meetings: Optional[int] = Field(default=None, ge=1)
    min_rematch_gap: Optional[int] = Field(default=None, ge=0)
    parity_mode: bool = False
    seed: Optional[int] = None


class LeagueSummary(BaseModel):
    """High-level league state."""

    id: str
    name: str
    season: int
    week: int
    num_weeks: int
    num_teams: int
    games_played: int
    games_remaining: int
    is_complete: bool


class ScheduledGameSchema(BaseModel):
    """One game on the schedule."""

    week: int
    game_index: int
    home: int
    away: int
    played: bool = False
    home_score: Optional[int] = None
    away_score: Optional[int] = None


class WeekSchema(BaseModel):
    """One week of the schedule."""

    week: int
    games: list[ScheduledGameSchema] = Field(default_factory=list)
    byes: list[int] = Field(default_factory=list)


class ScheduleResponse(BaseModel):
    """Full season schedule."""

    league_id: str
    weeks: list[WeekSchema] = Field(default_factory=list)


class SimWeekRequest(BaseModel):
    """Options for simulating the current week."""

    seed: Optional[int] = None


class GameResultSchema(BaseModel):
    """Final score of a simulated game."""

    week: Optional[int] = None
    game_index: Optional[int] = None
    home: int
    away: int
    score_home: int
    score_away: int
    is_overtime: bool = False
    winner: Optional[int] = None
    seed: Optional[int] = None
    plays: int = 0


class SimWeekResponse(BaseModel):
    """Outcome of a week simulation."""

    week: int
    games: list[GameResultSchema] = Field(default_factory=list)
    via_worker: bool = False
    current_week: int
    season_complete: bool = False


class StandingEntry(BaseModel):
    """One row of the standings table."""

    rank: int
    team_id: int
    abbreviation: str
    name: str
    record: str
    wins: int
    losses: int
    ties: int
    win_pct: float
    points_for: int
    points_against: int
    point_diff: int


class StandingsResponse(BaseModel):
    """League standings."""

    league_id: str
    week: int
    standings: list[StandingEntry] = Field(default_factory=list)


class WeekResultsResponse(BaseModel):
    """Results committed for one week."""

    league_id: str
    week: int
    games: list[GameResultSchema] = Field(default_factory=list)
