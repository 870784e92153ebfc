"""
Season Simulation - Orchestrates simulating games across weeks.

This module provides the SeasonSimulator class which:
- Runs each week through the worker bridge when one is supplied
- Falls back to a synchronous batch when the worker fails
- Advances the league week by week until the schedule is exhausted
- Reports standings and per-week results
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from gridiron.config import SimulationConfig, get_config
from gridiron.core.injury import EligibilityProvider
from gridiron.core.league.league import League
from gridiron.core.models.result import GameResult
from gridiron.events.bus import EventBus
from gridiron.events.types import WeekCompletedEvent
from gridiron.simulation.batch import BatchCoordinator
from gridiron.simulation.worker import WorkerBridge, merge_delta

logger = logging.getLogger(__name__)


@dataclass
class WeekResult:
    """Results from simulating a week of games."""

    week: int
    games: list[GameResult] = field(default_factory=list)
    via_worker: bool = False

    @property
    def total_games(self) -> int:
        return len(self.games)

    def get_team_result(self, team_id: int) -> Optional[GameResult]:
        """Get the result for a specific team's game this week."""
        for game in self.games:
            if game.home == team_id or game.away == team_id:
                return game
        return None

    def __str__(self) -> str:
        lines = [f"Week {self.week} Results ({self.total_games} games):"]
        for game in self.games:
            lines.append(f"  {game}")
        return "\n".join(lines)


class SeasonSimulator:
    """
    Orchestrates season-level game simulation.

    Bridges the batch coordinator (one week of games) with the League
    (schedule, standings, teams) to simulate entire weeks or seasons.
    """

    def __init__(
        self,
        league: League,
        bridge: Optional[WorkerBridge] = None,
        config: Optional[SimulationConfig] = None,
        eligibility: Optional[EligibilityProvider] = None,
        event_bus: Optional[EventBus] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize season simulator.

        Args:
            league: The League to simulate
            bridge: Worker bridge; weeks run in-process when None
            config: Simulation settings
            eligibility: Injury collaborator for in-process runs
            event_bus: Event bus shared with the coordinator
            seed: Base seed; fixes every game of the season when set
        """
        self.league = league
        self.bridge = bridge
        self.config = config or get_config()
        self.event_bus = event_bus or EventBus()
        self.seed = seed
        self.coordinator = BatchCoordinator(
            config=self.config,
            eligibility=eligibility,
            event_bus=self.event_bus,
            seed=seed,
        )

        # Callbacks for UI integration
        self._on_game_complete: list[Callable[[GameResult], None]] = []
        self._on_week_complete: list[Callable[[WeekResult], None]] = []

    def on_game_complete(self, callback: Callable[[GameResult], None]) -> None:
        """Register callback for when each game completes."""
        self._on_game_complete.append(callback)

    def on_week_complete(self, callback: Callable[[WeekResult], None]) -> None:
        """Register callback for when a week completes."""
        self._on_week_complete.append(callback)

    def simulate_week(self) -> WeekResult:
        """
        Simulate all unplayed games of the league's current week.

        Returns:
            WeekResult with the games simulated by this call
        """
        week = self.league.week
        if not self.league.schedule.unplayed(week):
            logger.debug(f"Week {week} has nothing left to play")
            self.league.advance_week()
            return WeekResult(week=week)

        week_result = None
        if self.bridge is not None:
            week_result = self._simulate_week_in_worker(week)
        if week_result is None:
            week_result = WeekResult(week=week, games=self.coordinator.run_week(self.league, week))

        for result in week_result.games:
            for callback in self._on_game_complete:
                callback(result)
        for callback in self._on_week_complete:
            callback(week_result)

        return week_result

    def _simulate_week_in_worker(self, week: int) -> Optional[WeekResult]:
        response = self.bridge.sim_week(self.league, seed=self.seed, config=self.config)
        if response is None:
            logger.info(f"Week {week} request was superseded")
            return WeekResult(week=week, via_worker=True)
        if not response.success:
            logger.warning(f"Worker failed on week {week}, simulating synchronously: {response.error}")
            return None

        merge_delta(self.league, response)
        schedule_week = self.league.schedule.get_week(week)
        if schedule_week is not None and schedule_week.is_complete:
            self.league.advance_week()
            self.event_bus.emit(WeekCompletedEvent(week=week, games=len(schedule_week.games)))
        return WeekResult(week=week, games=response.results, via_worker=True)

    def simulate_to_week(self, target_week: int) -> list[WeekResult]:
        """
        Simulate from the current week through target week (inclusive).

        Args:
            target_week: Last week to simulate

        Returns:
            List of WeekResults for all simulated weeks
        """
        results = []
        target_week = min(target_week, self.league.schedule.num_weeks)
        while self.league.week <= target_week and not self.league.is_season_complete:
            before = self.league.week
            results.append(self.simulate_week())
            if self.league.week == before:
                # Last week of the schedule, or a superseded request
                break
        return results

    def simulate_remaining_season(self) -> list[WeekResult]:
        """
        Simulate remaining games from current week to end of season.

        Returns:
            List of WeekResults for remaining weeks
        """
        return self.simulate_to_week(self.league.schedule.num_weeks)

    def get_standings_summary(self) -> list[dict]:
        """
        Get current standings.

        Returns:
            Teams ordered by win percentage, then point differential
        """
        return [
            {
                "rank": i + 1,
                "team_id": team.id,
                "abbreviation": team.abbreviation,
                "record": team.record.record_string,
                "win_pct": team.record.win_pct,
                "points_for": team.season_stats.points_for,
                "points_against": team.season_stats.points_against,
                "point_diff": team.season_stats.point_diff,
            }
            for i, team in enumerate(self.league.standings())
        ]
