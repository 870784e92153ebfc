"""Shared pytest fixtures for Gridiron tests."""

import random

import pytest

from gridiron.config import SimulationConfig, set_config
from gridiron.core.enums import Position
from gridiron.core.league.league import League
from gridiron.core.league.schedule import Schedule, ScheduledGame, Week
from gridiron.core.models.player import Player
from gridiron.core.models.team import Team
from gridiron.generators import generate_league_with_schedule, generate_team


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Keep environment overrides and the global config from leaking between tests."""
    for name in (
        "GRIDIRON_WEEKS",
        "GRIDIRON_MEETINGS",
        "GRIDIRON_MIN_REMATCH_GAP",
        "GRIDIRON_RETRY_BUDGET",
        "GRIDIRON_MAX_PLAYS",
        "GRIDIRON_OVERTIME",
        "GRIDIRON_WORKER_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def config() -> SimulationConfig:
    """Explicit simulation config independent of the environment."""
    return SimulationConfig(
        weeks=18,
        meetings=1,
        min_rematch_gap=2,
        retry_budget=200,
        max_plays=200,
        overtime=True,
        worker_timeout_seconds=30,
    )


# =============================================================================
# Player & Team Fixtures
# =============================================================================


@pytest.fixture
def make_player():
    """Factory for players with a given position and overall."""
    def _make(position: Position = Position.QB, overall: int = 70, **kwargs) -> Player:
        return Player(
            first_name=kwargs.pop("first_name", "Test"),
            last_name=kwargs.pop("last_name", position.value),
            position=position,
            overall=overall,
            **kwargs,
        )
    return _make


@pytest.fixture
def home_team() -> Team:
    """Generated home team with a full roster."""
    return generate_team(1, "Eagles", "Philadelphia", "PHI", rng=random.Random(101))


@pytest.fixture
def away_team() -> Team:
    """Generated away team with a full roster."""
    return generate_team(2, "Cowboys", "Dallas", "DAL", rng=random.Random(202))


# =============================================================================
# League Fixtures
# =============================================================================


@pytest.fixture
def small_league(config) -> League:
    """Four teams, three weeks, every pair meets once, no byes."""
    return generate_league_with_schedule(
        num_teams=4,
        weeks=3,
        meetings=1,
        min_rematch_gap=0,
        seed=7,
        config=config,
    )


@pytest.fixture
def bye_league(config) -> League:
    """Six teams over six weeks, so every team has exactly one bye."""
    return generate_league_with_schedule(
        num_teams=6,
        weeks=6,
        meetings=1,
        min_rematch_gap=0,
        seed=11,
        config=config,
    )


@pytest.fixture
def fixed_schedule_league(home_team, away_team) -> League:
    """
    Four teams with a hand-written schedule.

    Week 1: 1 v 2, 3 v 4. Week 2: 1 v 3, 2 v 4. Week 3: 1 v 4, 2 v 3.
    """
    third = generate_team(3, "Giants", "New York", "NYG", rng=random.Random(303))
    fourth = generate_team(4, "Commanders", "Washington", "WAS", rng=random.Random(404))
    schedule = Schedule(weeks=[
        Week(1, games=[ScheduledGame(1, 1, 2), ScheduledGame(1, 3, 4)]),
        Week(2, games=[ScheduledGame(2, 1, 3), ScheduledGame(2, 2, 4)]),
        Week(3, games=[ScheduledGame(3, 1, 4), ScheduledGame(3, 2, 3)]),
    ])
    league = League(teams=[home_team, away_team, third, fourth], schedule=schedule)
    league.ensure_results_by_week()
    return league
