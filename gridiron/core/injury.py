"""
Injury collaborator interface.

The game simulator asks an eligibility provider two questions about each
rostered player: may they play, and how good are they today. Anything that
answers both can be plugged in; when nothing is supplied the simulator uses
``NominalEligibility``.
"""

from abc import ABC, abstractmethod

from gridiron.core.models.player import Player

# Cap on the fraction of overall an injured player can lose
MAX_INJURY_IMPACT = 0.85
# Floor for an injured player's effective rating
MIN_EFFECTIVE_RATING = 40


class EligibilityProvider(ABC):
    """Answers availability and rating questions for the game simulator."""

    @abstractmethod
    def is_eligible_to_play(self, player: Player) -> bool:
        """Whether the player may take the field this game."""
        ...

    @abstractmethod
    def effective_rating(self, player: Player) -> float:
        """The player's rating for this game, after any adjustments."""
        ...


class NominalEligibility(EligibilityProvider):
    """Everyone plays, everyone at their listed overall."""

    def is_eligible_to_play(self, player: Player) -> bool:
        return True

    def effective_rating(self, player: Player) -> float:
        return float(player.overall)


class InjuryEligibility(EligibilityProvider):
    """
    Eligibility from the player's injury list.

    A player with any injury that still has weeks remaining sits out.
    Active injuries reduce the effective rating by their summed impact,
    capped at 85%, with a floor of 40.
    """

    def is_eligible_to_play(self, player: Player) -> bool:
        return not player.is_injured

    def effective_rating(self, player: Player) -> float:
        active = [injury for injury in player.injuries if injury.is_active]
        if not active:
            return float(player.overall)

        impact = min(sum(injury.impact for injury in active), MAX_INJURY_IMPACT)
        return float(max(MIN_EFFECTIVE_RATING, round(player.overall * (1 - impact))))
