"""Tests for SeasonSimulator."""

from concurrent.futures import Executor, Future, ThreadPoolExecutor

import pytest

from gridiron.config import SimulationConfig
from gridiron.events.types import WeekCompletedEvent
from gridiron.simulation.season import SeasonSimulator, WeekResult
from gridiron.simulation.worker import WorkerBridge


class BrokenExecutor(Executor):
    def submit(self, fn, *args, **kwargs):
        future = Future()
        future.set_exception(OSError("pool unavailable"))
        return future


@pytest.fixture
def thread_bridge(config):
    executor = ThreadPoolExecutor(max_workers=1)
    bridge = WorkerBridge(executor=executor, config=config)
    yield bridge
    bridge.shutdown()
    executor.shutdown(wait=True)


def _summary(league) -> list[tuple]:
    return [
        (r.week, r.game_index, r.home, r.away, r.score_home, r.score_away)
        for week in league.results_by_week
        for r in week
    ]


# =============================================================================
# Week by week
# =============================================================================


class TestSimulateWeek:
    """Tests for simulate_week."""

    def test_simulates_current_week(self, config, small_league):
        simulator = SeasonSimulator(small_league, config=config, seed=1)
        week_result = simulator.simulate_week()

        assert week_result.week == 1
        assert week_result.total_games == 2
        assert not week_result.via_worker
        assert small_league.week == 2

    def test_callbacks(self, config, small_league):
        simulator = SeasonSimulator(small_league, config=config, seed=1)
        games, weeks = [], []
        simulator.on_game_complete(games.append)
        simulator.on_week_complete(weeks.append)

        week_result = simulator.simulate_week()

        assert games == week_result.games
        assert weeks == [week_result]

    def test_bye_teams_have_no_result(self, config, bye_league):
        simulator = SeasonSimulator(bye_league, config=config, seed=2)
        week = bye_league.schedule.weeks[0]
        week_result = simulator.simulate_week()

        for team_id in week.byes:
            assert week_result.get_team_result(team_id) is None
        for game in week.games:
            assert week_result.get_team_result(game.home) is not None

    def test_nothing_left_to_play(self, config, small_league):
        simulator = SeasonSimulator(small_league, config=config, seed=1)
        simulator.simulate_remaining_season()

        week_result = simulator.simulate_week()
        assert week_result.games == []
        assert small_league.week == 3


class TestWorkerPath:
    """Tests for weeks run through the worker bridge."""

    def test_week_via_worker(self, config, small_league, thread_bridge):
        simulator = SeasonSimulator(small_league, bridge=thread_bridge, config=config, seed=4)
        completed: list[WeekCompletedEvent] = []
        simulator.event_bus.subscribe(WeekCompletedEvent, completed.append)

        week_result = simulator.simulate_week()

        assert week_result.via_worker
        assert week_result.total_games == 2
        assert small_league.schedule.weeks[0].is_complete
        assert small_league.week == 2
        assert [e.week for e in completed] == [1]

    def test_worker_matches_in_process(self, small_league, thread_bridge):
        """The same base seed and settings should produce the same season either way."""
        capped = SimulationConfig(max_plays=20, overtime=False, home_advantage=4.0)
        in_process = small_league.copy()

        SeasonSimulator(small_league, bridge=thread_bridge, config=capped, seed=9).simulate_remaining_season()
        SeasonSimulator(in_process, config=capped, seed=9).simulate_remaining_season()

        plays = [len(r.log) for week in small_league.results_by_week for r in week]
        assert plays and all(n <= 21 for n in plays)

        assert _summary(small_league) == _summary(in_process)
        assert [t.record.to_dict() for t in small_league.teams] == [
            t.record.to_dict() for t in in_process.teams
        ]

    def test_falls_back_when_worker_fails(self, config, small_league):
        bridge = WorkerBridge(executor=BrokenExecutor(), config=config)
        simulator = SeasonSimulator(small_league, bridge=bridge, config=config, seed=4)

        week_result = simulator.simulate_week()

        assert not week_result.via_worker
        assert week_result.total_games == 2
        assert small_league.schedule.weeks[0].is_complete
        assert small_league.week == 2


# =============================================================================
# Whole season
# =============================================================================


class TestSeason:
    """Tests for multi-week simulation."""

    def test_simulate_to_week(self, config, small_league):
        simulator = SeasonSimulator(small_league, config=config, seed=3)
        results = simulator.simulate_to_week(2)

        assert [r.week for r in results] == [1, 2]
        assert small_league.week == 3
        assert small_league.schedule.unplayed() == small_league.schedule.unplayed(3)

    def test_full_season(self, config, bye_league):
        simulator = SeasonSimulator(bye_league, config=config, seed=3)
        results = simulator.simulate_remaining_season()

        assert len(results) == 6
        assert bye_league.is_season_complete
        assert bye_league.week == 6
        for team in bye_league.teams:
            assert team.record.games_played == 5
            assert team.season_stats.games_played == 5

    def test_records_balance(self, config, bye_league):
        """Wins equal losses and points for equal points against league-wide."""
        SeasonSimulator(bye_league, config=config, seed=8).simulate_remaining_season()
        teams = bye_league.teams

        assert sum(t.record.wins for t in teams) == sum(t.record.losses for t in teams)
        assert sum(t.season_stats.points_for for t in teams) == sum(
            t.season_stats.points_against for t in teams
        )

    def test_results_match_schedule(self, config, small_league):
        SeasonSimulator(small_league, config=config, seed=8).simulate_remaining_season()
        for ref, game in small_league.schedule.iter_games():
            result = small_league.results_for_week(ref.week)[ref.game_index]
            assert (result.home, result.away) == (game.home, game.away)
            assert (result.score_home, result.score_away) == (game.home_score, game.away_score)

    def test_standings_summary(self, config, small_league):
        simulator = SeasonSimulator(small_league, config=config, seed=3)
        simulator.simulate_remaining_season()
        summary = simulator.get_standings_summary()

        assert [row["rank"] for row in summary] == [1, 2, 3, 4]
        pcts = [row["win_pct"] for row in summary]
        assert pcts == sorted(pcts, reverse=True)
        assert {row["team_id"] for row in summary} == {1, 2, 3, 4}


class TestWeekResult:
    def test_str(self):
        assert str(WeekResult(week=4)).startswith("Week 4 Results (0 games)")
