"""Content generators."""

from gridiron.generators.player import generate_player, generate_team
from gridiron.generators.league import generate_league, generate_league_with_schedule

__all__ = [
    # Player generation
    "generate_player",
    "generate_team",
    # League generation
    "generate_league",
    "generate_league_with_schedule",
]
