"""Player model."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from gridiron.core.enums import Position
from gridiron.core.models.stats import PlayerStatBook


@dataclass
class Injury:
    """An injury a player is carrying."""

    name: str = "Other"
    weeks_remaining: int = 0
    impact: float = 0.0  # Fraction of overall lost while active (0-1)

    @property
    def is_active(self) -> bool:
        return self.weeks_remaining > 0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "weeks_remaining": self.weeks_remaining,
            "impact": self.impact,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Injury":
        return cls(**data)


@dataclass
class Player:
    """
    Represents an individual football player.

    Only the fields the season engine reads are modelled here. ``stats`` is
    mutated exclusively by the result committer; the game simulator reads
    players but never writes to them.
    """

    id: UUID = field(default_factory=uuid4)
    first_name: str = ""
    last_name: str = ""
    position: Position = Position.QB
    overall: int = 60
    age: int = 22
    jersey_number: int = 0

    injuries: list[Injury] = field(default_factory=list)
    stats: PlayerStatBook = field(default_factory=PlayerStatBook)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_injured(self) -> bool:
        """True while any injury still has weeks remaining."""
        return any(injury.is_active for injury in self.injuries)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "position": self.position.value,
            "overall": self.overall,
            "age": self.age,
            "jersey_number": self.jersey_number,
            "injuries": [injury.to_dict() for injury in self.injuries],
            "stats": self.stats.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        """Create from dictionary."""
        return cls(
            id=UUID(data["id"]) if "id" in data else uuid4(),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            position=Position(data.get("position", "QB")),
            overall=data.get("overall", 60),
            age=data.get("age", 22),
            jersey_number=data.get("jersey_number", 0),
            injuries=[Injury.from_dict(i) for i in data.get("injuries", [])],
            stats=PlayerStatBook.from_dict(data.get("stats", {})),
        )

    def __str__(self) -> str:
        return f"{self.position.value} {self.full_name} ({self.overall})"
