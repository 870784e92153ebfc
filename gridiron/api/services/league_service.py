"""
Service layer for league endpoints.

Holds leagues in memory for the lifetime of the process and converts
between core models and API schemas.
"""

import logging
import threading
from concurrent.futures import Executor
from typing import Optional

from gridiron.api.schemas.league import (
    CreateLeagueRequest,
    GameResultSchema,
    LeagueSummary,
    ScheduledGameSchema,
    ScheduleResponse,
    SimWeekResponse,
    StandingEntry,
    StandingsResponse,
    WeekResultsResponse,
    WeekSchema,
)
from gridiron.config import SimulationConfig, get_config
from gridiron.core.league.league import League
from gridiron.core.models.result import GameResult
from gridiron.generators.league import generate_league_with_schedule
from gridiron.simulation.season import SeasonSimulator
from gridiron.simulation.worker import WorkerBridge

logger = logging.getLogger(__name__)


def result_to_schema(result: GameResult) -> GameResultSchema:
    return GameResultSchema(
        week=result.week,
        game_index=result.game_index,
        home=result.home,
        away=result.away,
        score_home=result.score_home,
        score_away=result.score_away,
        is_overtime=result.is_overtime,
        winner=result.winner,
        seed=result.seed,
        plays=len(result.log),
    )


class LeagueService:
    """
    In-memory league store plus the operations the API exposes.

    Week simulations for one league are serialized by a per-league lock, so
    week W+1 never starts before week W has been merged.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self.config = config or get_config()
        self._executor = executor
        self._bridge: Optional[WorkerBridge] = None
        self._leagues: dict[str, League] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._store_lock = threading.Lock()

    @property
    def bridge(self) -> WorkerBridge:
        if self._bridge is None:
            self._bridge = WorkerBridge(executor=self._executor, config=self.config)
        return self._bridge

    def use_executor(self, executor: Optional[Executor]) -> None:
        """Swap the executor week simulations run on (None restores the process pool)."""
        self.shutdown()
        self._executor = executor

    @property
    def active_leagues(self) -> list[str]:
        return list(self._leagues.keys())

    def get_league(self, league_id: str) -> Optional[League]:
        return self._leagues.get(league_id)

    def add_league(self, league: League) -> str:
        league_id = str(league.id)
        with self._store_lock:
            self._leagues[league_id] = league
            self._locks[league_id] = threading.Lock()
        return league_id

    def create_league(self, request: CreateLeagueRequest) -> LeagueSummary:
        """
        Generate a league and its schedule.

        Raises:
            SchedulingInfeasible: If the requested shape has no schedule
        """
        league = generate_league_with_schedule(
            num_teams=request.num_teams,
            weeks=request.weeks,
            meetings=request.meetings,
            min_rematch_gap=request.min_rematch_gap,
            seed=request.seed,
            config=self.config,
            season=request.season,
            name=request.name,
            parity_mode=request.parity_mode,
        )
        self.add_league(league)
        logger.info(f"Created league {league.id}: {league}")
        return self.summary(league)

    def summary(self, league: League) -> LeagueSummary:
        total = league.schedule.total_games
        remaining = len(league.schedule.unplayed())
        return LeagueSummary(
            id=str(league.id),
            name=league.name,
            season=league.season,
            week=league.week,
            num_weeks=league.schedule.num_weeks,
            num_teams=len(league.teams),
            games_played=total - remaining,
            games_remaining=remaining,
            is_complete=league.is_season_complete,
        )

    def schedule(self, league: League) -> ScheduleResponse:
        weeks = []
        for ref_week, week in enumerate(league.schedule.weeks, start=1):
            weeks.append(WeekSchema(
                week=ref_week,
                games=[
                    ScheduledGameSchema(
                        week=ref_week,
                        game_index=index,
                        home=game.home,
                        away=game.away,
                        played=game.played,
                        home_score=game.home_score,
                        away_score=game.away_score,
                    )
                    for index, game in enumerate(week.games)
                ],
                byes=list(week.byes),
            ))
        return ScheduleResponse(league_id=str(league.id), weeks=weeks)

    def sim_week(self, league: League, seed: Optional[int] = None) -> SimWeekResponse:
        """Simulate the league's current week through the worker bridge."""
        with self._locks[str(league.id)]:
            simulator = SeasonSimulator(league, bridge=self.bridge, config=self.config, seed=seed)
            week_result = simulator.simulate_week()
        return SimWeekResponse(
            week=week_result.week,
            games=[result_to_schema(r) for r in week_result.games],
            via_worker=week_result.via_worker,
            current_week=league.week,
            season_complete=league.is_season_complete,
        )

    def standings(self, league: League) -> StandingsResponse:
        rows = []
        for rank, team in enumerate(league.standings(), start=1):
            rows.append(StandingEntry(
                rank=rank,
                team_id=team.id,
                abbreviation=team.abbreviation,
                name=team.full_name,
                record=team.record.record_string,
                wins=team.record.wins,
                losses=team.record.losses,
                ties=team.record.ties,
                win_pct=team.record.win_pct,
                points_for=team.season_stats.points_for,
                points_against=team.season_stats.points_against,
                point_diff=team.season_stats.point_diff,
            ))
        return StandingsResponse(league_id=str(league.id), week=league.week, standings=rows)

    def week_results(self, league: League, week: int) -> WeekResultsResponse:
        return WeekResultsResponse(
            league_id=str(league.id),
            week=week,
            games=[result_to_schema(r) for r in league.results_for_week(week)],
        )

    def shutdown(self) -> None:
        if self._bridge is not None:
            self._bridge.shutdown()
            self._bridge = None


# Global service instance
league_service = LeagueService()
