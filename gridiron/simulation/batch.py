"""
Batch coordinator.

Runs a set of scheduled games against a league: simulate, then commit, in
schedule order. The lookup index used for commits lives only for the
duration of one batch.
"""

import logging
import random
from typing import Iterable, Optional

from gridiron.config import SimulationConfig, get_config
from gridiron.core.injury import EligibilityProvider
from gridiron.core.league.league import League
from gridiron.core.league.schedule import GameRef
from gridiron.core.models.result import GameResult
from gridiron.events.bus import EventBus
from gridiron.events.types import WeekCompletedEvent
from gridiron.simulation.committer import CommitOutcome, LookupIndex, ResultCommitter
from gridiron.simulation.engine import GameSimulator

logger = logging.getLogger(__name__)


def derive_seed(base_seed: int, ref: GameRef) -> int:
    """Per-game seed that depends only on the batch seed and the game's slot."""
    return random.Random(f"{base_seed}:{ref.week}:{ref.game_index}").randrange(2**63)


class BatchCoordinator:
    """
    Simulates and commits batches of games.

    Example:
        coordinator = BatchCoordinator(seed=7)
        results = coordinator.run_week(league)
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        eligibility: Optional[EligibilityProvider] = None,
        event_bus: Optional[EventBus] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or get_config()
        self.event_bus = event_bus or EventBus()
        self.simulator = GameSimulator(self.config, eligibility, self.event_bus)
        self.committer = ResultCommitter(self.event_bus)
        self.seed = seed

    def run_batch(
        self,
        league: League,
        games: Iterable[GameRef],
        stop_at: Optional[int] = None,
    ) -> list[GameResult]:
        """
        Simulate and commit a batch of scheduled games.

        Args:
            league: League to simulate against (mutated)
            games: Refs of the games to play
            stop_at: Play at most this many games

        Returns:
            Results that were committed, in schedule order
        """
        refs = sorted(set(games), key=lambda r: (r.week, r.game_index))
        if stop_at is not None:
            refs = refs[:stop_at]

        index = LookupIndex.build(league)
        results: list[GameResult] = []
        try:
            for ref in refs:
                game = league.schedule.game_at(ref)
                if game is None:
                    logger.warning(f"No scheduled game at week {ref.week} index {ref.game_index}")
                    continue
                if game.played:
                    continue

                home = index.teams_by_id.get(game.home)
                away = index.teams_by_id.get(game.away)
                if home is None or away is None:
                    logger.warning(f"Week {ref.week}: {game.away} @ {game.home} references an unknown team")
                    continue

                seed = derive_seed(self.seed, ref) if self.seed is not None else None
                result = self.simulator.simulate(
                    home, away, seed=seed, week=ref.week, game_index=ref.game_index,
                )
                if self.committer.commit(league, result, index) == CommitOutcome.COMMITTED:
                    results.append(result)
        finally:
            index.teams_by_id.clear()
            index.games_by_key.clear()

        return results

    def run_week(
        self,
        league: League,
        week: Optional[int] = None,
        stop_at: Optional[int] = None,
    ) -> list[GameResult]:
        """
        Simulate every unplayed game of a week.

        The league advances to the next week once the simulated week is
        complete.

        Args:
            league: League to simulate against (mutated)
            week: 1-based week (defaults to ``league.week``)
            stop_at: Play at most this many games

        Returns:
            Results committed this call
        """
        week = week if week is not None else league.week
        schedule_week = league.schedule.get_week(week)
        if schedule_week is None:
            logger.info(f"Week {week} is outside the {league.schedule.num_weeks}-week schedule")
            return []

        results = self.run_batch(league, league.schedule.unplayed(week), stop_at=stop_at)

        if schedule_week.is_complete:
            if week == league.week:
                league.advance_week()
            if results:
                logger.info(f"Week {week} complete: {len(results)} games simulated")
                self.event_bus.emit(WeekCompletedEvent(week=week, games=len(schedule_week.games)))
        return results
