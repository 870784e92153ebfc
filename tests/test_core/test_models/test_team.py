"""Tests for Team and TeamRecord models."""

import pytest

from gridiron.core.enums import Position
from gridiron.core.models.team import Team, TeamRecord


class TestTeamRecord:
    """Tests for TeamRecord."""

    def test_record_game(self):
        """record_game should count wins, losses and ties."""
        record = TeamRecord()
        record.record_game(24, 17)
        record.record_game(10, 13)
        record.record_game(20, 20)

        assert (record.wins, record.losses, record.ties) == (1, 1, 1)
        assert record.games_played == 3

    def test_record_string(self):
        record = TeamRecord(wins=10, losses=7)
        assert record.record_string == "10-7"

        record.ties = 1
        assert record.record_string == "10-7-1"

    def test_win_pct_counts_ties_as_half(self):
        record = TeamRecord(wins=2, losses=1, ties=1)
        assert record.win_pct == pytest.approx(0.625)

    def test_win_pct_no_games(self):
        assert TeamRecord().win_pct == 0.0


class TestTeam:
    """Tests for Team."""

    def test_get_player(self, home_team):
        player = home_team.roster[0]
        assert home_team.get_player(player.id) is player

    def test_get_player_missing(self, home_team, away_team):
        assert home_team.get_player(away_team.roster[0].id) is None

    def test_players_at_sorted_by_overall(self, home_team):
        """players_at should list the best player first."""
        receivers = home_team.players_at(Position.WR)
        assert receivers
        overalls = [p.overall for p in receivers]
        assert overalls == sorted(overalls, reverse=True)

    def test_round_trip(self, home_team):
        """from_dict(to_dict()) should preserve roster and record."""
        home_team.record.record_game(21, 14)
        restored = Team.from_dict(home_team.to_dict())

        assert restored.id == home_team.id
        assert restored.full_name == "Philadelphia Eagles"
        assert [p.id for p in restored.roster] == [p.id for p in home_team.roster]
        assert restored.record.wins == 1
