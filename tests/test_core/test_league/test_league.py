"""Tests for the League container."""

from gridiron.core.league.league import League
from gridiron.core.models.result import GameResult


class TestLeagueWeek:
    """Tests for week bookkeeping."""

    def test_ensure_results_by_week(self, fixed_schedule_league):
        assert len(fixed_schedule_league.results_by_week) == 3

    def test_advance_week_capped(self, fixed_schedule_league):
        """advance_week should never move past the last scheduled week."""
        league = fixed_schedule_league
        assert league.advance_week() == 2
        assert league.advance_week() == 3
        assert league.advance_week() == 3

    def test_results_for_week_out_of_range(self, fixed_schedule_league):
        assert fixed_schedule_league.results_for_week(0) == []
        assert fixed_schedule_league.results_for_week(4) == []

    def test_season_complete(self, fixed_schedule_league):
        league = fixed_schedule_league
        assert not league.is_season_complete
        for _, game in league.schedule.iter_games():
            game.mark_played(7, 3)
        assert league.is_season_complete

    def test_empty_schedule_never_complete(self):
        assert not League().is_season_complete


class TestStandings:
    """Tests for standings ordering."""

    def test_win_pct_then_point_diff(self, fixed_schedule_league):
        league = fixed_schedule_league
        one, two, three, four = (league.get_team(i) for i in (1, 2, 3, 4))
        one.record.wins = 2
        two.record.wins = 1
        two.record.losses = 1
        three.record.wins = 1
        three.record.losses = 1
        three.season_stats.points_for = 40
        four.record.losses = 2

        assert [t.id for t in league.standings()] == [1, 3, 2, 4]


class TestLeagueSerialization:
    """Tests for saving and loading leagues."""

    def test_round_trip(self, fixed_schedule_league):
        league = fixed_schedule_league
        league.results_by_week[0].append(
            GameResult(home=1, away=2, score_home=21, score_away=14, week=1, game_index=0)
        )
        restored = League.from_dict(league.to_dict())

        assert restored.id == league.id
        assert restored.team_ids == [1, 2, 3, 4]
        assert restored.schedule.total_games == 6
        assert restored.results_by_week[0][0].score_home == 21

    def test_camel_case_results_alias(self, fixed_schedule_league):
        data = fixed_schedule_league.to_dict()
        data["resultsByWeek"] = data.pop("results_by_week")
        data["resultsByWeek"][1] = [GameResult(home=1, away=3, score_home=3, score_away=0).to_dict()]

        restored = League.from_dict(data)
        assert restored.results_for_week(2)[0].home == 1

    def test_loads_legacy_flat_schedule(self, fixed_schedule_league):
        """A league saved with a flat game list should load with byes filled in."""
        data = fixed_schedule_league.to_dict()
        data.pop("results_by_week")
        data["schedule"] = [
            {"week": 1, "home": 1, "away": 2},
            {"week": 2, "home": 3, "away": 4},
        ]
        restored = League.from_dict(data)

        assert restored.schedule.num_weeks == 2
        assert restored.schedule.weeks[0].byes == [3, 4]
        assert len(restored.results_by_week) == 2

    def test_save_and_load(self, fixed_schedule_league, tmp_path):
        path = tmp_path / "league.json"
        fixed_schedule_league.save(path)
        assert League.load(path).name == fixed_schedule_league.name

    def test_copy_is_independent(self, fixed_schedule_league):
        clone = fixed_schedule_league.copy()
        clone.get_team(1).record.wins = 5
        assert fixed_schedule_league.get_team(1).record.wins == 0
