"""Simulated game results."""

from dataclasses import dataclass, field
from typing import Optional

from gridiron.core.models.play import Play
from gridiron.core.models.stats import PlayerGameStats, TeamGameStats, box_score_points


@dataclass
class GameResult:
    """
    Outcome of one simulated game.

    Created once by the game simulator and never modified afterwards.
    ``score_home`` equals both the home points in ``log`` and the points
    reconstructable from home ``player_stats``.
    """

    home: int
    away: int
    score_home: int
    score_away: int
    week: Optional[int] = None
    game_index: Optional[int] = None
    is_overtime: bool = False
    seed: Optional[int] = None

    home_stats: TeamGameStats = field(default_factory=lambda: TeamGameStats(team_id=0))
    away_stats: TeamGameStats = field(default_factory=lambda: TeamGameStats(team_id=0))

    # Player stats (keyed by player_id string)
    player_stats: dict[str, PlayerGameStats] = field(default_factory=dict)
    log: list[Play] = field(default_factory=list)

    @property
    def winner(self) -> Optional[int]:
        """Winning team id, None if tie."""
        if self.score_home > self.score_away:
            return self.home
        elif self.score_away > self.score_home:
            return self.away
        return None

    @property
    def loser(self) -> Optional[int]:
        """Losing team id, None if tie."""
        if self.score_home > self.score_away:
            return self.away
        elif self.score_away > self.score_home:
            return self.home
        return None

    @property
    def is_tie(self) -> bool:
        return self.score_home == self.score_away

    def log_points(self, team_id: int) -> int:
        """Sum of scoring plays credited to a team in the play log."""
        return sum(play.points for play in self.log if play.scoring_team_id == team_id)

    def box_points(self, team_id: int) -> int:
        """Points reconstructed from a team's player box score."""
        return box_score_points(self.player_stats, team_id)

    def stats_for_team(self, team_id: int) -> dict[str, PlayerGameStats]:
        return {k: v for k, v in self.player_stats.items() if v.team_id == team_id}

    def to_dict(self) -> dict:
        return {
            "home": self.home,
            "away": self.away,
            "score_home": self.score_home,
            "score_away": self.score_away,
            "week": self.week,
            "game_index": self.game_index,
            "is_overtime": self.is_overtime,
            "seed": self.seed,
            "home_stats": self.home_stats.to_dict(),
            "away_stats": self.away_stats.to_dict(),
            "player_stats": {k: v.to_dict() for k, v in self.player_stats.items()},
            "log": [play.to_dict() for play in self.log],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameResult":
        return cls(
            home=data["home"],
            away=data["away"],
            score_home=data["score_home"],
            score_away=data["score_away"],
            week=data.get("week"),
            game_index=data.get("game_index"),
            is_overtime=data.get("is_overtime", False),
            seed=data.get("seed"),
            home_stats=TeamGameStats.from_dict(data.get("home_stats", {"team_id": data["home"]})),
            away_stats=TeamGameStats.from_dict(data.get("away_stats", {"team_id": data["away"]})),
            player_stats={
                k: PlayerGameStats.from_dict(v) for k, v in data.get("player_stats", {}).items()
            },
            log=[Play.from_dict(p) for p in data.get("log", [])],
        )

    def __str__(self) -> str:
        ot = " (OT)" if self.is_overtime else ""
        return f"{self.away} {self.score_away} @ {self.home} {self.score_home}{ot}"
