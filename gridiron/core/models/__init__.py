"""Core season models."""

from gridiron.core.models.play import Play
from gridiron.core.models.player import Injury, Player
from gridiron.core.models.result import GameResult
from gridiron.core.models.stats import (
    DefensiveStats,
    KickingStats,
    PassingStats,
    PlayerGameStats,
    PlayerSeasonStats,
    PlayerStatBook,
    ReceivingStats,
    RushingStats,
    TeamGameStats,
    TeamSeasonStats,
    box_score_points,
)
from gridiron.core.models.team import Team, TeamRecord

__all__ = [
    "DefensiveStats",
    "GameResult",
    "Injury",
    "KickingStats",
    "PassingStats",
    "Play",
    "Player",
    "PlayerGameStats",
    "PlayerSeasonStats",
    "PlayerStatBook",
    "ReceivingStats",
    "RushingStats",
    "Team",
    "TeamGameStats",
    "TeamRecord",
    "TeamSeasonStats",
    "box_score_points",
]
