"""Event types for game and season simulation."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class GameEvent:
    """Base class for all events."""

    timestamp: datetime = field(default_factory=datetime.now)
    home_id: Optional[int] = None
    away_id: Optional[int] = None

    # Game context at time of event
    quarter: int = 1
    clock: int = 900
    home_score: int = 0
    away_score: int = 0


@dataclass
class ScoringEvent(GameEvent):
    """Fired when points are scored."""

    team_id: Optional[int] = None
    points: int = 0
    scoring_type: str = ""  # "TD", "FG", "SAFETY", "XP", "2PT"
    scorer_id: Optional[UUID] = None
    description: str = ""


@dataclass
class TurnoverEvent(GameEvent):
    """Fired on turnovers."""

    losing_team_id: Optional[int] = None
    gaining_team_id: Optional[int] = None
    turnover_type: str = ""  # "INT", "FUMBLE", "DOWNS", "MISSED_FG"
    player_who_lost_id: Optional[UUID] = None
    player_who_gained_id: Optional[UUID] = None


@dataclass
class GameEndEvent(GameEvent):
    """Fired when game ends."""

    winner_id: Optional[int] = None  # None if tie
    is_overtime: bool = False
    plays: int = 0


@dataclass
class GameCommittedEvent(GameEvent):
    """Fired when a result has been folded into the league."""

    week: int = 0
    game_index: int = 0


@dataclass
class CommitSkippedEvent(GameEvent):
    """Fired when a result could not be matched to the league and was skipped."""

    week: Optional[int] = None
    reason: str = ""


@dataclass
class WeekCompletedEvent(GameEvent):
    """Fired when every game of a week has been simulated."""

    week: int = 0
    games: int = 0
