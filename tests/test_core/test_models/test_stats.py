"""Tests for box score statistics."""

from uuid import uuid4

from gridiron.core.models.stats import (
    DefensiveStats,
    KickingStats,
    PassingStats,
    PlayerGameStats,
    PlayerSeasonStats,
    PlayerStatBook,
    TeamGameStats,
    TeamSeasonStats,
    box_score_points,
)


def _line(team_id: int = 1, **kwargs) -> PlayerGameStats:
    return PlayerGameStats(
        player_id=uuid4(),
        player_name="Test Player",
        team_id=team_id,
        position=kwargs.pop("position", "RB"),
        **kwargs,
    )


class TestPlayerGameStats:
    """Tests for a single player's game line."""

    def test_scoring_touchdowns_excludes_passing(self):
        """Passing TDs belong to the receiver, not the passer."""
        stats = _line(passing=PassingStats(attempts=10, completions=6, touchdowns=3))
        assert stats.scoring_touchdowns == 0
        assert stats.points == 0

    def test_points_from_every_source(self):
        """points should add touchdowns, kicks, safeties and conversions."""
        stats = _line(
            defense=DefensiveStats(interception_tds=1, safeties=1),
            kicking=KickingStats(fg_made=2, xp_made=1),
            two_point_conversions=1,
        )
        assert stats.points == 6 + 2 + 6 + 1 + 2

    def test_round_trip_keeps_conversions(self):
        """from_dict(to_dict()) should keep two-point conversions."""
        stats = _line(two_point_conversions=2)
        restored = PlayerGameStats.from_dict(stats.to_dict())
        assert restored.two_point_conversions == 2
        assert restored.player_id == stats.player_id


class TestBoxScorePoints:
    """Tests for reconstructing a score from the box score."""

    def test_worked_example(self):
        """One rushing TD, one receiving TD, one FG and two XPs make 17."""
        rusher = _line()
        rusher.rushing.touchdowns = 1
        receiver = _line(position="WR")
        receiver.receiving.touchdowns = 1
        kicker = _line(position="K", kicking=KickingStats(fg_made=1, xp_made=2))

        stats = {str(p.player_id): p for p in (rusher, receiver, kicker)}
        assert box_score_points(stats) == 17

    def test_filters_by_team(self):
        """Only players on the requested team should count."""
        ours = _line(team_id=1, kicking=KickingStats(fg_made=1))
        theirs = _line(team_id=2, kicking=KickingStats(fg_made=2))
        stats = {str(p.player_id): p for p in (ours, theirs)}

        assert box_score_points(stats, 1) == 3
        assert box_score_points(stats, 2) == 6
        assert box_score_points(stats) == 9

    def test_empty(self):
        assert box_score_points({}) == 0


class TestKickingStats:
    """Tests for KickingStats."""

    def test_points(self):
        assert KickingStats(fg_made=3, xp_made=4).points == 13

    def test_fg_pct_without_attempts(self):
        assert KickingStats().fg_pct == 0.0

    def test_add_keeps_longest(self):
        """add should sum counts and keep the longest make."""
        total = KickingStats(fg_attempts=2, fg_made=1, fg_longest=48)
        total.add(KickingStats(fg_attempts=1, fg_made=1, fg_longest=33))
        assert total.fg_attempts == 3
        assert total.fg_made == 2
        assert total.fg_longest == 48


class TestSeasonStats:
    """Tests for season accumulation."""

    def test_player_season_totals(self):
        """add_game should accumulate categories and count games."""
        season = PlayerSeasonStats()
        game = _line()
        game.rushing.yards = 80
        game.rushing.touchdowns = 1
        season.add_game(game)
        season.add_game(game)

        assert season.games_played == 2
        assert season.rushing.yards == 160
        assert season.total_touchdowns == 2

    def test_stat_book_round_trip(self):
        book = PlayerStatBook()
        game = _line()
        game.receiving.receptions = 5
        book.add_game(game)

        restored = PlayerStatBook.from_dict(book.to_dict())
        assert restored.to_dict() == book.to_dict()

    def test_team_season_add_game(self):
        """add_game should take points for and against from both box scores."""
        season = TeamSeasonStats()
        own = TeamGameStats(team_id=1, points=24, turnovers=1, passing_yards=200)
        opponent = TeamGameStats(team_id=2, points=17, turnovers=3)
        season.add_game(own, opponent)

        assert season.points_for == 24
        assert season.points_against == 17
        assert season.point_diff == 7
        assert season.takeaways == 3
        assert season.turnovers == 1
        assert season.total_yards == 200
