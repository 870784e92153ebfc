"""Tests for the worker bridge and delta merging."""

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import asdict

import pytest
from uuid import uuid4

from gridiron.config import SimulationConfig
from gridiron.core.errors import WorkerUnavailable
from gridiron.core.league.schedule import GameRef
from gridiron.core.models.result import GameResult
from gridiron.core.models.team import Team
from gridiron.simulation.worker import (
    SIM_COMPLETE,
    SIM_WEEK,
    SimCompleteResponse,
    SimWeekRequest,
    WorkerBridge,
    merge_delta,
    run_sim_week,
)


class FailingExecutor(Executor):
    """Executor whose every task fails."""

    def submit(self, fn, *args, **kwargs):
        future = Future()
        future.set_exception(RuntimeError("worker crashed"))
        return future


class StalledExecutor(Executor):
    """Executor whose tasks never finish."""

    def submit(self, fn, *args, **kwargs):
        return Future()


@pytest.fixture
def thread_bridge(config):
    executor = ThreadPoolExecutor(max_workers=1)
    bridge = WorkerBridge(executor=executor, config=config)
    yield bridge
    bridge.shutdown()
    executor.shutdown(wait=True)


# =============================================================================
# Messages
# =============================================================================


class TestMessages:
    """Tests for the request and response messages."""

    def test_request_shape(self):
        data = SimWeekRequest(league={"name": "x"}, generation=3, seed=9).to_dict()
        assert data["type"] == SIM_WEEK
        assert data["options"] == {"seed": 9}
        assert data["generation"] == 3

    def test_request_round_trip(self):
        request = SimWeekRequest(league={}, generation=2, seed=1, stop_at=4, injuries=True)
        assert SimWeekRequest.from_dict(request.to_dict()) == request

    def test_request_carries_config(self):
        request = SimWeekRequest(league={}, generation=1, config={"max_plays": 20, "overtime": False})
        data = request.to_dict()
        assert data["options"]["config"] == {"max_plays": 20, "overtime": False}
        assert SimWeekRequest.from_dict(data) == request

    def test_request_wrong_type(self):
        with pytest.raises(ValueError):
            SimWeekRequest.from_dict({"type": SIM_COMPLETE, "league": {}})

    def test_response_round_trip(self, fixed_schedule_league):
        response = SimCompleteResponse(
            success=True,
            week=1,
            generation=5,
            results=[GameResult(home=1, away=2, score_home=7, score_away=3, week=1, game_index=0)],
            updated_teams=[fixed_schedule_league.get_team(1)],
            schedule_updates=[GameRef(1, 0)],
        )
        data = response.to_dict()
        assert data["type"] == SIM_COMPLETE
        assert "error" not in data

        restored = SimCompleteResponse.from_dict(data)
        assert restored.schedule_updates == [GameRef(1, 0)]
        assert restored.updated_teams[0].id == 1
        assert restored.results[0].score_home == 7


class TestRunSimWeek:
    """Tests for the worker entry point."""

    def test_returns_delta(self, fixed_schedule_league):
        league = fixed_schedule_league
        before = league.to_dict()
        payload = SimWeekRequest(league=league.to_dict(), generation=1, seed=4).to_dict()

        response = SimCompleteResponse.from_dict(run_sim_week(payload))

        assert response.success
        assert response.week == 1
        assert response.generation == 1
        assert len(response.results) == 2
        assert sorted(t.id for t in response.updated_teams) == [1, 2, 3, 4]
        assert response.schedule_updates == [GameRef(1, 0), GameRef(1, 1)]
        assert league.to_dict() == before

    def test_delta_only_has_teams_that_played(self, bye_league):
        week = bye_league.schedule.weeks[0]
        payload = SimWeekRequest(league=bye_league.to_dict(), generation=1, seed=4).to_dict()

        response = SimCompleteResponse.from_dict(run_sim_week(payload))

        assert sorted(t.id for t in response.updated_teams) == sorted(
            t for g in week.games for t in (g.home, g.away)
        )
        assert not set(week.byes) & {t.id for t in response.updated_teams}

    def test_simulates_with_shipped_config(self, fixed_schedule_league):
        """The worker should honour the settings sent with the request."""
        capped = asdict(SimulationConfig(max_plays=20, overtime=False))
        payload = SimWeekRequest(
            league=fixed_schedule_league.to_dict(), generation=1, seed=9, config=capped
        ).to_dict()

        response = SimCompleteResponse.from_dict(run_sim_week(payload))

        assert response.success
        # A snap may add a conversion try, so the log can pass the cap by one
        assert all(len(r.log) <= 21 for r in response.results)
        assert not any(r.is_overtime for r in response.results)

    def test_bad_payload_reports_failure(self):
        response = SimCompleteResponse.from_dict(run_sim_week({"type": SIM_WEEK, "generation": 2}))
        assert not response.success
        assert response.generation == 2
        assert response.error


# =============================================================================
# Merging
# =============================================================================


class TestMergeDelta:
    """Tests for folding a worker response into the caller's league."""

    def test_replaces_only_updated_teams(self, fixed_schedule_league):
        league = fixed_schedule_league
        untouched = league.get_team(1)
        replacement = Team.from_dict(league.get_team(3).to_dict())
        replacement.record.wins = 1
        response = SimCompleteResponse(
            success=True,
            week=1,
            generation=1,
            results=[GameResult(home=3, away=4, score_home=10, score_away=7, week=1, game_index=1)],
            updated_teams=[replacement],
            schedule_updates=[GameRef(1, 1)],
        )

        assert merge_delta(league, response) == 1

        assert league.get_team(3) is replacement
        assert league.get_team(1) is untouched
        assert [t.id for t in league.teams] == [1, 2, 3, 4]
        game = league.schedule.weeks[0].games[1]
        assert game.played
        assert (game.home_score, game.away_score) == (10, 7)
        assert not league.schedule.weeks[0].games[0].played
        assert len(league.results_for_week(1)) == 1

    def test_failed_response_changes_nothing(self, fixed_schedule_league):
        before = fixed_schedule_league.to_dict()
        response = SimCompleteResponse(success=False, week=1, generation=1, error="boom")
        assert merge_delta(fixed_schedule_league, response) == 0
        assert fixed_schedule_league.to_dict() == before

    def test_missing_schedule_ref_ignored(self, fixed_schedule_league):
        response = SimCompleteResponse(success=True, week=1, generation=1,
                                       schedule_updates=[GameRef(8, 0)])
        assert merge_delta(fixed_schedule_league, response) == 0


# =============================================================================
# Bridge
# =============================================================================


class TestWorkerBridge:
    """Tests for WorkerBridge."""

    def test_sim_week_round_trip(self, thread_bridge, fixed_schedule_league):
        league = fixed_schedule_league
        response = thread_bridge.sim_week(league, seed=6)

        assert response.success
        assert len(response.results) == 2
        # The bridge itself never touches the caller's league
        assert league.schedule.unplayed(1) == [GameRef(1, 0), GameRef(1, 1)]

        merge_delta(league, response)
        assert league.schedule.weeks[0].is_complete

    def test_bridge_ships_its_config(self, fixed_schedule_league):
        executor = ThreadPoolExecutor(max_workers=1)
        bridge = WorkerBridge(executor=executor, config=SimulationConfig(max_plays=20))
        try:
            response = bridge.sim_week(fixed_schedule_league, seed=9)
        finally:
            bridge.shutdown()
            executor.shutdown(wait=True)

        assert response.success
        assert all(len(r.log) <= 21 for r in response.results)

    def test_per_call_config_wins(self, thread_bridge, fixed_schedule_league):
        response = thread_bridge.sim_week(
            fixed_schedule_league, seed=9, config=SimulationConfig(max_plays=20)
        )
        assert all(len(r.log) <= 21 for r in response.results)

    def test_generation_increments(self, thread_bridge, fixed_schedule_league):
        league = fixed_schedule_league
        assert thread_bridge.current_generation(league.id) == 0
        thread_bridge.sim_week(league, seed=1)
        thread_bridge.sim_week(league, seed=1)
        assert thread_bridge.current_generation(league.id) == 2

    def test_stale_response_dropped(self, thread_bridge, fixed_schedule_league):
        """A superseded request should yield nothing even if it finished."""
        league = fixed_schedule_league
        first = thread_bridge.submit(league, seed=1)
        second = thread_bridge.submit(league, seed=1)

        assert thread_bridge.collect(first) is None
        latest = thread_bridge.collect(second)
        assert latest is not None
        assert latest.generation == 2

    def test_leagues_have_separate_generations(self, thread_bridge, fixed_schedule_league):
        other = fixed_schedule_league.copy()
        other.id = uuid4()
        first = thread_bridge.submit(fixed_schedule_league, seed=1)
        second = thread_bridge.submit(other, seed=1)

        assert thread_bridge.collect(first).success
        assert thread_bridge.collect(second).success

    def test_failure_becomes_response(self, config, fixed_schedule_league):
        bridge = WorkerBridge(executor=FailingExecutor(), config=config)
        response = bridge.sim_week(fixed_schedule_league)

        assert not response.success
        assert "worker crashed" in response.error
        assert response.week == 1

    def test_timeout_becomes_response(self, config, fixed_schedule_league):
        bridge = WorkerBridge(executor=StalledExecutor(), config=config)
        pending = bridge.submit(fixed_schedule_league)

        response = bridge.collect(pending, timeout=0.01)

        assert not response.success
        assert response.error

    def test_shutdown_rejects_work(self, config, fixed_schedule_league):
        bridge = WorkerBridge(executor=StalledExecutor(), config=config)
        pending = bridge.submit(fixed_schedule_league)
        bridge.shutdown()

        assert pending.future.cancelled()
        with pytest.raises(WorkerUnavailable):
            bridge.submit(fixed_schedule_league)

    def test_owned_pool_is_lazy(self, config):
        bridge = WorkerBridge(config=config)
        assert bridge._executor is None
        bridge.shutdown()
        assert bridge._executor is None
