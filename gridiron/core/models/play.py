"""Play-by-play log entries."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from gridiron.core.enums import PlayOutcome, PlayType, ScoringType


def _uuid_or_none(value: Optional[str]) -> Optional[UUID]:
    return UUID(value) if value else None


def _str_or_none(value: Optional[UUID]) -> Optional[str]:
    return str(value) if value else None


@dataclass
class Play:
    """
    A single snap in the game log.

    ``ball_on`` is the line of scrimmage before the snap on the absolute
    field scale: 0 is the home end zone and 100 is the away end zone.
    """

    number: int
    quarter: int
    clock: int  # Seconds left in the quarter at the snap
    offense_id: int
    play_type: PlayType
    outcome: PlayOutcome
    down: int = 1
    distance: int = 10
    ball_on: int = 25
    yards: int = 0

    # Scoring
    points: int = 0
    scoring_type: Optional[ScoringType] = None
    scoring_team_id: Optional[int] = None

    # Involved players
    passer_id: Optional[UUID] = None
    rusher_id: Optional[UUID] = None
    receiver_id: Optional[UUID] = None
    kicker_id: Optional[UUID] = None
    defender_id: Optional[UUID] = None

    description: str = ""

    @property
    def is_scoring(self) -> bool:
        return self.points > 0

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "quarter": self.quarter,
            "clock": self.clock,
            "offense_id": self.offense_id,
            "play_type": self.play_type.value,
            "outcome": self.outcome.value,
            "down": self.down,
            "distance": self.distance,
            "ball_on": self.ball_on,
            "yards": self.yards,
            "points": self.points,
            "scoring_type": self.scoring_type.value if self.scoring_type else None,
            "scoring_team_id": self.scoring_team_id,
            "passer_id": _str_or_none(self.passer_id),
            "rusher_id": _str_or_none(self.rusher_id),
            "receiver_id": _str_or_none(self.receiver_id),
            "kicker_id": _str_or_none(self.kicker_id),
            "defender_id": _str_or_none(self.defender_id),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Play":
        scoring_type = data.get("scoring_type")
        return cls(
            number=data["number"],
            quarter=data["quarter"],
            clock=data["clock"],
            offense_id=data["offense_id"],
            play_type=PlayType(data["play_type"]),
            outcome=PlayOutcome(data["outcome"]),
            down=data.get("down", 1),
            distance=data.get("distance", 10),
            ball_on=data.get("ball_on", 25),
            yards=data.get("yards", 0),
            points=data.get("points", 0),
            scoring_type=ScoringType(scoring_type) if scoring_type else None,
            scoring_team_id=data.get("scoring_team_id"),
            passer_id=_uuid_or_none(data.get("passer_id")),
            rusher_id=_uuid_or_none(data.get("rusher_id")),
            receiver_id=_uuid_or_none(data.get("receiver_id")),
            kicker_id=_uuid_or_none(data.get("kicker_id")),
            defender_id=_uuid_or_none(data.get("defender_id")),
            description=data.get("description", ""),
        )
