"""Team and record models."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from gridiron.core.enums import Position
from gridiron.core.models.player import Player
from gridiron.core.models.stats import TeamSeasonStats


@dataclass
class TeamRecord:
    """Win/loss/tie record for a team."""

    wins: int = 0
    losses: int = 0
    ties: int = 0

    @property
    def games_played(self) -> int:
        """Total games played."""
        return self.wins + self.losses + self.ties

    @property
    def win_pct(self) -> float:
        """Winning percentage (ties count half)."""
        if self.games_played == 0:
            return 0.0
        return (self.wins + 0.5 * self.ties) / self.games_played

    @property
    def record_string(self) -> str:
        """Format record as string (e.g., '10-7' or '9-7-1')."""
        if self.ties > 0:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"

    def record_game(self, points_for: int, points_against: int) -> None:
        """Add a single game outcome to the record."""
        if points_for > points_against:
            self.wins += 1
        elif points_for < points_against:
            self.losses += 1
        else:
            self.ties += 1

    def to_dict(self) -> dict:
        return {"wins": self.wins, "losses": self.losses, "ties": self.ties}

    @classmethod
    def from_dict(cls, data: dict) -> "TeamRecord":
        return cls(**data)


@dataclass
class Team:
    """
    A team in the league.

    ``id`` is unique and stable for the season. The roster belongs to this
    team alone; players are never shared between two Team objects.
    """

    id: int
    abbreviation: str = ""
    name: str = ""
    city: str = ""
    roster: list[Player] = field(default_factory=list)
    record: TeamRecord = field(default_factory=TeamRecord)
    season_stats: TeamSeasonStats = field(default_factory=TeamSeasonStats)

    @property
    def full_name(self) -> str:
        return f"{self.city} {self.name}".strip()

    def get_player(self, player_id: UUID) -> Optional[Player]:
        """Get a rostered player by ID."""
        for player in self.roster:
            if player.id == player_id:
                return player
        return None

    def players_at(self, position: Position) -> list[Player]:
        """Rostered players at a position, best overall first."""
        players = [p for p in self.roster if p.position == position]
        return sorted(players, key=lambda p: (-p.overall, str(p.id)))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "abbreviation": self.abbreviation,
            "name": self.name,
            "city": self.city,
            "roster": [p.to_dict() for p in self.roster],
            "record": self.record.to_dict(),
            "season_stats": self.season_stats.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Team":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            abbreviation=data.get("abbreviation", ""),
            name=data.get("name", ""),
            city=data.get("city", ""),
            roster=[Player.from_dict(p) for p in data.get("roster", [])],
            record=TeamRecord.from_dict(data.get("record", {})),
            season_stats=TeamSeasonStats.from_dict(data.get("season_stats", {})),
        )

    def __str__(self) -> str:
        return f"{self.abbreviation} {self.full_name} ({self.record.record_string})"
