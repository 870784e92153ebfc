"""Tests for eligibility providers."""

from gridiron.core.enums import Position
from gridiron.core.injury import InjuryEligibility, NominalEligibility
from gridiron.core.models.player import Injury


class TestNominalEligibility:
    """Tests for the default provider."""

    def test_everyone_plays_at_overall(self, make_player):
        player = make_player(Position.RB, overall=81, injuries=[Injury(weeks_remaining=4, impact=0.5)])
        provider = NominalEligibility()
        assert provider.is_eligible_to_play(player)
        assert provider.effective_rating(player) == 81.0


class TestInjuryEligibility:
    """Tests for injury-aware eligibility."""

    def test_active_injury_sits_out(self, make_player):
        player = make_player(injuries=[Injury(weeks_remaining=1, impact=0.1)])
        assert not InjuryEligibility().is_eligible_to_play(player)

    def test_healed_injury_plays(self, make_player):
        player = make_player(overall=75, injuries=[Injury(weeks_remaining=0, impact=0.3)])
        provider = InjuryEligibility()
        assert provider.is_eligible_to_play(player)
        assert provider.effective_rating(player) == 75.0

    def test_rating_reduced_by_impact(self, make_player):
        player = make_player(overall=80, injuries=[Injury(weeks_remaining=2, impact=0.25)])
        assert InjuryEligibility().effective_rating(player) == 60.0

    def test_impact_capped_with_floor(self, make_player):
        """Stacked injuries should cap the loss and never go under the floor."""
        player = make_player(
            overall=90,
            injuries=[Injury(weeks_remaining=2, impact=0.6), Injury(weeks_remaining=1, impact=0.6)],
        )
        assert InjuryEligibility().effective_rating(player) == 40.0
