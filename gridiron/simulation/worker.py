"""
Worker bridge.

Runs a week of games in an isolated executor so the caller stays
responsive. The worker gets a serialized copy of the league, simulates on
that copy and sends back only what changed: the results, the teams that
played and refs to the schedule entries that are now final. The caller
merges that delta into its own league.

Only one request per league is live at a time. Each request carries a
generation number; submitting again for the same league supersedes the
earlier request, and any response whose generation is no longer current
is dropped.
"""

import logging
import threading
from concurrent.futures import Executor, Future, ProcessPoolExecutor
from dataclasses import asdict, dataclass, field
from typing import Any, Optional
from uuid import UUID

from gridiron.config import SimulationConfig, get_config
from gridiron.core.errors import WorkerUnavailable
from gridiron.core.injury import EligibilityProvider, InjuryEligibility, NominalEligibility
from gridiron.core.league.league import League
from gridiron.core.league.schedule import GameRef
from gridiron.core.models.result import GameResult
from gridiron.core.models.team import Team
from gridiron.simulation.batch import BatchCoordinator

logger = logging.getLogger(__name__)

SIM_WEEK = "SIM_WEEK"
SIM_COMPLETE = "SIM_COMPLETE"


# =============================================================================
# Messages
# =============================================================================


@dataclass
class SimWeekRequest:
    """Message sent to the worker."""

    league: dict
    generation: int
    seed: Optional[int] = None
    stop_at: Optional[int] = None
    injuries: bool = False
    config: Optional[dict] = None

    def to_dict(self) -> dict:
        options: dict[str, Any] = {}
        if self.seed is not None:
            options["seed"] = self.seed
        if self.stop_at is not None:
            options["stop_at"] = self.stop_at
        if self.injuries:
            options["injuries"] = True
        if self.config is not None:
            options["config"] = self.config
        return {
            "type": SIM_WEEK,
            "league": self.league,
            "options": options,
            "generation": self.generation,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SimWeekRequest":
        if data.get("type") != SIM_WEEK:
            raise ValueError(f"Unexpected message type: {data.get('type')!r}")
        options = data.get("options") or {}
        return cls(
            league=data["league"],
            generation=data.get("generation", 0),
            seed=options.get("seed"),
            stop_at=options.get("stop_at"),
            injuries=bool(options.get("injuries", False)),
            config=options.get("config"),
        )


@dataclass
class SimCompleteResponse:
    """Message sent back by the worker."""

    success: bool
    week: int
    generation: int
    results: list[GameResult] = field(default_factory=list)
    updated_teams: list[Team] = field(default_factory=list)
    schedule_updates: list[GameRef] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "type": SIM_COMPLETE,
            "success": self.success,
            "week": self.week,
            "results": [r.to_dict() for r in self.results],
            "updated_teams": [t.to_dict() for t in self.updated_teams],
            "schedule_updates": [ref.to_dict() for ref in self.schedule_updates],
            "generation": self.generation,
        }
        if self.error is not None:
            data["error"] = self.error
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SimCompleteResponse":
        return cls(
            success=data.get("success", False),
            week=data.get("week", 0),
            generation=data.get("generation", 0),
            results=[GameResult.from_dict(r) for r in data.get("results", [])],
            updated_teams=[Team.from_dict(t) for t in data.get("updated_teams", [])],
            schedule_updates=[GameRef.from_dict(u) for u in data.get("schedule_updates", [])],
            error=data.get("error"),
        )


# =============================================================================
# Worker side
# =============================================================================


def run_sim_week(payload: dict) -> dict:
    """
    Worker entry point: simulate one week on a private copy of the league.

    Runs inside the executor, so it takes and returns plain dicts. Failures
    come back as ``success=False`` responses rather than exceptions.
    """
    generation = payload.get("generation", 0)
    week = 0
    try:
        request = SimWeekRequest.from_dict(payload)
        league = League.from_dict(request.league)
        week = league.week
        eligibility: EligibilityProvider = (
            InjuryEligibility() if request.injuries else NominalEligibility()
        )
        config = SimulationConfig(**request.config) if request.config is not None else None
        coordinator = BatchCoordinator(config=config, eligibility=eligibility, seed=request.seed)
        results = coordinator.run_week(league, week, stop_at=request.stop_at)

        played = set()
        for result in results:
            played.add(result.home)
            played.add(result.away)
        response = SimCompleteResponse(
            success=True,
            week=week,
            generation=generation,
            results=results,
            updated_teams=[team for team in league.teams if team.id in played],
            schedule_updates=[GameRef(r.week, r.game_index) for r in results],
        )
    except Exception as e:
        logger.exception(f"Worker failed simulating week {week}")
        response = SimCompleteResponse(success=False, week=week, generation=generation, error=str(e))
    return response.to_dict()


# =============================================================================
# Caller side
# =============================================================================


@dataclass
class PendingWeek:
    """A request in flight."""

    league_id: UUID
    generation: int
    week: int
    future: Future


class WorkerBridge:
    """
    Ships week simulations to an executor and merges what comes back.

    Args:
        executor: Executor to run on (a single-process pool if None)
        config: Default simulation settings shipped to the worker; also
            supplies the response timeout
        injuries: Use injury-aware eligibility in the worker
    """

    def __init__(
        self,
        executor: Optional[Executor] = None,
        config: Optional[SimulationConfig] = None,
        injuries: bool = False,
    ) -> None:
        self.config = config or get_config()
        self.injuries = injuries
        self._executor = executor
        self._owns_executor = executor is None
        self._lock = threading.Lock()
        self._generations: dict[UUID, int] = {}
        self._pending: dict[UUID, PendingWeek] = {}
        self._closed = False

    @property
    def executor(self) -> Executor:
        if self._executor is None:
            self._executor = ProcessPoolExecutor(max_workers=1)
        return self._executor

    def current_generation(self, league_id: UUID) -> int:
        with self._lock:
            return self._generations.get(league_id, 0)

    def submit(
        self,
        league: League,
        seed: Optional[int] = None,
        stop_at: Optional[int] = None,
        config: Optional[SimulationConfig] = None,
    ) -> PendingWeek:
        """
        Start simulating the league's current week.

        Supersedes (and tries to cancel) any request already in flight for
        the same league. The worker simulates with ``config`` when given,
        otherwise with the bridge's own config.
        """
        if self._closed:
            raise WorkerUnavailable("Worker bridge has been shut down")

        with self._lock:
            generation = self._generations.get(league.id, 0) + 1
            self._generations[league.id] = generation
            previous = self._pending.pop(league.id, None)
        if previous is not None:
            previous.future.cancel()
            logger.debug(f"League {league.id}: generation {previous.generation} superseded by {generation}")

        request = SimWeekRequest(
            league=league.to_dict(),
            generation=generation,
            seed=seed,
            stop_at=stop_at,
            injuries=self.injuries,
            config=asdict(config or self.config),
        )
        future = self.executor.submit(run_sim_week, request.to_dict())
        pending = PendingWeek(league_id=league.id, generation=generation, week=league.week, future=future)
        with self._lock:
            self._pending[league.id] = pending
        return pending

    def collect(self, pending: PendingWeek, timeout: Optional[float] = None) -> Optional[SimCompleteResponse]:
        """
        Wait for a request to finish.

        Returns:
            The response, a ``success=False`` response on failure or
            timeout, or None when the request has been superseded
        """
        timeout = timeout if timeout is not None else self.config.worker_timeout_seconds
        try:
            response = SimCompleteResponse.from_dict(pending.future.result(timeout=timeout))
        except Exception as e:
            logger.warning(f"Worker request for week {pending.week} failed: {e!r}")
            response = SimCompleteResponse(
                success=False,
                week=pending.week,
                generation=pending.generation,
                error=str(e) or type(e).__name__,
            )
        finally:
            with self._lock:
                if self._pending.get(pending.league_id) is pending:
                    del self._pending[pending.league_id]

        if response.generation != self.current_generation(pending.league_id):
            logger.debug(f"Dropping stale response for generation {response.generation}")
            return None
        return response

    def sim_week(
        self,
        league: League,
        seed: Optional[int] = None,
        stop_at: Optional[int] = None,
        config: Optional[SimulationConfig] = None,
    ) -> Optional[SimCompleteResponse]:
        """Submit and wait; see ``collect`` for the return value."""
        return self.collect(self.submit(league, seed=seed, stop_at=stop_at, config=config))

    def shutdown(self) -> None:
        """Stop accepting work and release an executor this bridge created."""
        self._closed = True
        with self._lock:
            pending = list(self._pending.values())
            self._pending.clear()
        for item in pending:
            item.future.cancel()
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None


def merge_delta(league: League, response: SimCompleteResponse) -> int:
    """
    Merge a worker response into the caller's league.

    Replaces teams by id, appends results to their week and marks the
    referenced schedule entries played. Nothing else is touched.

    Returns:
        Number of results merged
    """
    if not response.success:
        return 0

    replacements = {team.id: team for team in response.updated_teams}
    league.teams = [replacements.get(team.id, team) for team in league.teams]

    league.ensure_results_by_week()
    scores = {(r.week, r.game_index): r for r in response.results}
    for result in response.results:
        week = result.week if result.week is not None else response.week
        while len(league.results_by_week) < week:
            league.results_by_week.append([])
        league.results_by_week[week - 1].append(result)

    for ref in response.schedule_updates:
        game = league.schedule.game_at(ref)
        if game is None:
            logger.warning(f"Schedule update for missing game at week {ref.week} index {ref.game_index}")
            continue
        result = scores.get((ref.week, ref.game_index))
        if result is not None:
            game.mark_played(result.score_home, result.score_away)
        else:
            game.played = True

    return len(response.results)
