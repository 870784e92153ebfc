"""Enumerations shared by the season engine."""

from enum import Enum, auto


class PositionGroup(Enum):
    """High-level position groupings."""

    OFFENSE = auto()
    DEFENSE = auto()
    SPECIAL_TEAMS = auto()


class Position(Enum):
    """Roster positions."""

    QB = "QB"  # Quarterback
    RB = "RB"  # Running Back
    WR = "WR"  # Wide Receiver
    TE = "TE"  # Tight End
    OL = "OL"  # Offensive Line

    DL = "DL"  # Defensive Line
    LB = "LB"  # Linebacker
    CB = "CB"  # Cornerback
    S = "S"  # Safety

    K = "K"  # Kicker
    P = "P"  # Punter

    @property
    def group(self) -> PositionGroup:
        """Get the position group for this position."""
        if self in (Position.QB, Position.RB, Position.WR, Position.TE, Position.OL):
            return PositionGroup.OFFENSE
        if self in (Position.DL, Position.LB, Position.CB, Position.S):
            return PositionGroup.DEFENSE
        return PositionGroup.SPECIAL_TEAMS


class PlayType(Enum):
    """Type of play called."""

    RUN = "RUN"
    PASS = "PASS"
    PUNT = "PUNT"
    FIELD_GOAL = "FIELD_GOAL"
    EXTRA_POINT = "EXTRA_POINT"
    TWO_POINT = "TWO_POINT"


class PlayOutcome(Enum):
    """Possible outcomes of a play."""

    # Passing outcomes
    COMPLETE = "COMPLETE"
    INCOMPLETE = "INCOMPLETE"
    INTERCEPTION = "INTERCEPTION"
    SACK = "SACK"

    # Rushing outcomes
    RUSH = "RUSH"
    FUMBLE_LOST = "FUMBLE_LOST"

    # Kicking outcomes
    PUNT = "PUNT"
    FIELD_GOAL_GOOD = "FIELD_GOAL_GOOD"
    FIELD_GOAL_MISSED = "FIELD_GOAL_MISSED"
    EXTRA_POINT_GOOD = "EXTRA_POINT_GOOD"
    EXTRA_POINT_MISSED = "EXTRA_POINT_MISSED"
    TWO_POINT_GOOD = "TWO_POINT_GOOD"
    TWO_POINT_FAILED = "TWO_POINT_FAILED"

    @property
    def is_turnover(self) -> bool:
        return self in (PlayOutcome.INTERCEPTION, PlayOutcome.FUMBLE_LOST)


class ScoringType(Enum):
    """Ways to put points on the board."""

    TOUCHDOWN = "TD"
    FIELD_GOAL = "FG"
    SAFETY = "SAFETY"
    EXTRA_POINT = "XP"
    TWO_POINT = "2PT"

    @property
    def points(self) -> int:
        return {
            ScoringType.TOUCHDOWN: 6,
            ScoringType.FIELD_GOAL: 3,
            ScoringType.SAFETY: 2,
            ScoringType.EXTRA_POINT: 1,
            ScoringType.TWO_POINT: 2,
        }[self]
