"""Player and team statistics models."""

from dataclasses import asdict, dataclass, field, fields
from typing import Optional
from uuid import UUID

# Point values used to reconstruct a score from a box score
TOUCHDOWN_POINTS = 6
FIELD_GOAL_POINTS = 3
EXTRA_POINT_POINTS = 1
SAFETY_POINTS = 2
TWO_POINT_POINTS = 2


class StatLine:
    """
    Base for a category of counting stats.

    Every field is summed when lines are combined, except the ones listed
    in ``_max_fields``, which keep the larger value (longest plays).
    """

    _max_fields: tuple[str, ...] = ()

    def add(self, other: "StatLine") -> None:
        for f in fields(self):
            mine, theirs = getattr(self, f.name), getattr(other, f.name)
            if f.name in self._max_fields:
                setattr(self, f.name, max(mine, theirs))
            else:
                setattr(self, f.name, mine + theirs)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict):
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass
class PassingStats(StatLine):
    attempts: int = 0
    completions: int = 0
    yards: int = 0
    touchdowns: int = 0
    interceptions: int = 0
    sacks: int = 0
    sack_yards: int = 0
    longest: int = 0

    _max_fields = ("longest",)


@dataclass
class RushingStats(StatLine):
    attempts: int = 0
    yards: int = 0
    touchdowns: int = 0
    fumbles_lost: int = 0
    longest: int = 0

    _max_fields = ("longest",)


@dataclass
class ReceivingStats(StatLine):
    targets: int = 0
    receptions: int = 0
    yards: int = 0
    touchdowns: int = 0
    longest: int = 0

    _max_fields = ("longest",)


@dataclass
class DefensiveStats(StatLine):
    tackles: int = 0
    sacks: int = 0
    interceptions: int = 0
    interception_tds: int = 0
    forced_fumbles: int = 0
    fumble_recoveries: int = 0
    safeties: int = 0


@dataclass
class KickingStats(StatLine):
    """Field goals, extra points and punts."""

    fg_attempts: int = 0
    fg_made: int = 0
    fg_longest: int = 0
    xp_attempts: int = 0
    xp_made: int = 0
    punts: int = 0
    punt_yards: int = 0

    _max_fields = ("fg_longest",)

    @property
    def fg_pct(self) -> float:
        return (self.fg_made / self.fg_attempts * 100) if self.fg_attempts > 0 else 0.0

    @property
    def points(self) -> int:
        return self.fg_made * FIELD_GOAL_POINTS + self.xp_made * EXTRA_POINT_POINTS


# Stat line attribute name -> category type, shared by game and season lines
CATEGORIES: dict[str, type[StatLine]] = {
    "passing": PassingStats,
    "rushing": RushingStats,
    "receiving": ReceivingStats,
    "defense": DefensiveStats,
    "kicking": KickingStats,
}


def _categories_to_dict(line) -> dict:
    return {name: getattr(line, name).to_dict() for name in CATEGORIES}


def _categories_from_dict(data: dict) -> dict:
    return {name: kind.from_dict(data.get(name, {})) for name, kind in CATEGORIES.items()}


@dataclass
class PlayerGameStats:
    """
    Complete statistics for a player in a single game.

    Two-point conversions are credited to the player who carried or caught
    the ball, so ``points`` over a team's box score reproduces its score.
    """

    player_id: UUID
    player_name: str
    team_id: int
    position: str

    # Stats by category
    passing: PassingStats = field(default_factory=PassingStats)
    rushing: RushingStats = field(default_factory=RushingStats)
    receiving: ReceivingStats = field(default_factory=ReceivingStats)
    defense: DefensiveStats = field(default_factory=DefensiveStats)
    kicking: KickingStats = field(default_factory=KickingStats)
    two_point_conversions: int = 0

    @property
    def scoring_touchdowns(self) -> int:
        """Touchdowns this player scored (passing TDs belong to the receiver)."""
        return (
            self.rushing.touchdowns +
            self.receiving.touchdowns +
            self.defense.interception_tds
        )

    @property
    def points(self) -> int:
        """Points this player put on the board."""
        return (
            self.scoring_touchdowns * TOUCHDOWN_POINTS +
            self.kicking.points +
            self.defense.safeties * SAFETY_POINTS +
            self.two_point_conversions * TWO_POINT_POINTS
        )

    @property
    def total_yards(self) -> int:
        """Total yards from scrimmage."""
        return self.rushing.yards + self.receiving.yards

    def to_dict(self) -> dict:
        return {
            "player_id": str(self.player_id),
            "player_name": self.player_name,
            "team_id": self.team_id,
            "position": self.position,
            **_categories_to_dict(self),
            "two_point_conversions": self.two_point_conversions,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerGameStats":
        return cls(
            player_id=UUID(data["player_id"]),
            player_name=data["player_name"],
            team_id=data["team_id"],
            position=data["position"],
            **_categories_from_dict(data),
            two_point_conversions=data.get("two_point_conversions", 0),
        )


@dataclass
class PlayerSeasonStats:
    """Accumulated statistics for a player over a span of games."""

    games_played: int = 0

    passing: PassingStats = field(default_factory=PassingStats)
    rushing: RushingStats = field(default_factory=RushingStats)
    receiving: ReceivingStats = field(default_factory=ReceivingStats)
    defense: DefensiveStats = field(default_factory=DefensiveStats)
    kicking: KickingStats = field(default_factory=KickingStats)
    two_point_conversions: int = 0

    def add_game(self, game_stats: PlayerGameStats) -> None:
        """Add a game's stats to the running totals."""
        self.games_played += 1
        for name in CATEGORIES:
            getattr(self, name).add(getattr(game_stats, name))
        self.two_point_conversions += game_stats.two_point_conversions

    @property
    def total_touchdowns(self) -> int:
        """Total touchdowns scored."""
        return (
            self.rushing.touchdowns +
            self.receiving.touchdowns +
            self.defense.interception_tds
        )

    def to_dict(self) -> dict:
        return {
            "games_played": self.games_played,
            **_categories_to_dict(self),
            "two_point_conversions": self.two_point_conversions,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerSeasonStats":
        return cls(
            games_played=data.get("games_played", 0),
            **_categories_from_dict(data),
            two_point_conversions=data.get("two_point_conversions", 0),
        )


@dataclass
class PlayerStatBook:
    """A player's season and career stat lines."""

    season: PlayerSeasonStats = field(default_factory=PlayerSeasonStats)
    career: PlayerSeasonStats = field(default_factory=PlayerSeasonStats)

    def add_game(self, game_stats: PlayerGameStats) -> None:
        """Fold one game into both the season and career lines."""
        self.season.add_game(game_stats)
        self.career.add_game(game_stats)

    def to_dict(self) -> dict:
        return {
            "season": self.season.to_dict(),
            "career": self.career.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerStatBook":
        return cls(
            season=PlayerSeasonStats.from_dict(data.get("season", {})),
            career=PlayerSeasonStats.from_dict(data.get("career", {})),
        )


@dataclass
class TeamGameStats:
    """Team statistics for a single game."""

    team_id: int

    passing_yards: int = 0
    rushing_yards: int = 0
    first_downs: int = 0
    turnovers: int = 0
    sacks_allowed: int = 0
    plays: int = 0

    # Scoring
    points: int = 0
    touchdowns: int = 0
    field_goals: int = 0

    @property
    def total_yards(self) -> int:
        return self.passing_yards + self.rushing_yards

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TeamGameStats":
        return cls(**data)


@dataclass
class TeamSeasonStats:
    """Cumulative team statistics for a season."""

    games_played: int = 0
    points_for: int = 0
    points_against: int = 0
    passing_yards: int = 0
    rushing_yards: int = 0
    turnovers: int = 0
    takeaways: int = 0
    touchdowns: int = 0
    field_goals: int = 0

    @property
    def total_yards(self) -> int:
        return self.passing_yards + self.rushing_yards

    @property
    def point_diff(self) -> int:
        """Point differential."""
        return self.points_for - self.points_against

    def add_game(self, own: TeamGameStats, opponent: TeamGameStats) -> None:
        """Add one game's team box score to the season totals."""
        self.games_played += 1
        self.points_for += own.points
        self.points_against += opponent.points
        self.passing_yards += own.passing_yards
        self.rushing_yards += own.rushing_yards
        self.turnovers += own.turnovers
        self.takeaways += opponent.turnovers
        self.touchdowns += own.touchdowns
        self.field_goals += own.field_goals

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TeamSeasonStats":
        return cls(**data)


def box_score_points(
    player_stats: dict[str, PlayerGameStats],
    team_id: Optional[int] = None,
) -> int:
    """
    Reconstruct a team's score from its players' box score lines.

    Args:
        player_stats: Player stat lines keyed by player id string
        team_id: Only count players on this team (None counts everyone)

    Returns:
        TD*6 + FG*3 + XP + safeties*2 + two-point conversions*2
    """
    return sum(
        stats.points
        for stats in player_stats.values()
        if team_id is None or stats.team_id == team_id
    )
