"""
Season schedule models.

A schedule is an ordered list of weeks. Each week holds the games played
that week and the teams on bye. Every team has exactly one activity (a
game or a bye) per week.

Saved schedules have come in three shapes over time:
- nested: ``{"weeks": [{"week_number": 1, "games": [...]}, ...]}``
- week list: the same list of weeks without the wrapping dict
- legacy flat: a single list of game dicts, each carrying its ``week``

All three are normalized to the canonical nested form by
``Schedule.from_raw`` when a league is loaded.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, Optional


class ScheduleFormat(Enum):
    """Shapes a stored schedule can take."""

    NESTED = "nested"
    WEEK_LIST = "week_list"
    LEGACY_FLAT = "legacy_flat"


def _team_ref(value: Any) -> int:
    """Resolve a stored team reference (bare id or embedded team dict)."""
    if isinstance(value, dict):
        return int(value["id"])
    return int(value)


@dataclass(frozen=True)
class GameRef:
    """Address of one scheduled game: 1-based week and index within it."""

    week: int
    game_index: int

    def to_dict(self) -> dict:
        return {"week": self.week, "game_index": self.game_index}

    @classmethod
    def from_dict(cls, data: dict) -> "GameRef":
        return cls(week=data["week"], game_index=data.get("game_index", data.get("gameIndex", 0)))


@dataclass
class ScheduledGame:
    """
    A scheduled game between two teams.

    Can be in the future (not played) or in the past (with scores).
    """

    week: int
    home: int
    away: int
    played: bool = False
    home_score: Optional[int] = None
    away_score: Optional[int] = None

    @property
    def key(self) -> tuple[int, int, int]:
        """Lookup key shared by every game resolution strategy."""
        return (self.week, self.home, self.away)

    def involves(self, team_id: int) -> bool:
        return self.home == team_id or self.away == team_id

    def opponent_of(self, team_id: int) -> Optional[int]:
        if self.home == team_id:
            return self.away
        if self.away == team_id:
            return self.home
        return None

    def mark_played(self, home_score: int, away_score: int) -> None:
        self.played = True
        self.home_score = home_score
        self.away_score = away_score

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "week": self.week,
            "home": self.home,
            "away": self.away,
            "played": self.played,
            "home_score": self.home_score,
            "away_score": self.away_score,
        }

    @classmethod
    def from_dict(cls, data: dict, week: Optional[int] = None) -> "ScheduledGame":
        """Create from dictionary, accepting legacy camelCase keys."""
        home_score = data.get("home_score", data.get("homeScore"))
        away_score = data.get("away_score", data.get("awayScore"))
        played = data.get("played", data.get("finalized", False))
        return cls(
            week=week if week is not None else int(data.get("week", 0)),
            home=_team_ref(data["home"]),
            away=_team_ref(data["away"]),
            played=bool(played),
            home_score=home_score,
            away_score=away_score,
        )

    def __str__(self) -> str:
        if self.played:
            return f"Week {self.week}: {self.away} {self.away_score} @ {self.home} {self.home_score}"
        return f"Week {self.week}: {self.away} @ {self.home}"


@dataclass
class Week:
    """One week of the season: its games and the teams on bye."""

    week_number: int
    games: list[ScheduledGame] = field(default_factory=list)
    byes: list[int] = field(default_factory=list)

    @property
    def active_teams(self) -> list[int]:
        """Every team with an activity this week (playing or on bye)."""
        teams = []
        for game in self.games:
            teams.append(game.home)
            teams.append(game.away)
        teams.extend(self.byes)
        return teams

    @property
    def is_complete(self) -> bool:
        return all(game.played for game in self.games)

    def find_game(self, home: int, away: int) -> Optional[int]:
        """Index of the game with this home/away pairing, if any."""
        for index, game in enumerate(self.games):
            if game.home == home and game.away == away:
                return index
        return None

    def game_for_team(self, team_id: int) -> Optional[ScheduledGame]:
        for game in self.games:
            if game.involves(team_id):
                return game
        return None

    def to_dict(self) -> dict:
        games: list[dict] = [game.to_dict() for game in self.games]
        if self.byes:
            games.append({"bye": list(self.byes)})
        return {"week_number": self.week_number, "games": games}

    @classmethod
    def from_dict(cls, data: dict, position: int) -> "Week":
        """
        Create from dictionary.

        Args:
            data: Stored week (``games`` may contain ``{"bye": [...]}`` entries)
            position: 1-based position of the week in the season
        """
        number = data.get("week_number", data.get("weekNumber", position))
        week = cls(week_number=number)
        for entry in data.get("games", []):
            if entry is None:
                continue
            if "bye" in entry:
                week.byes.extend(_team_ref(t) for t in entry["bye"])
            elif "home" in entry and "away" in entry:
                week.games.append(ScheduledGame.from_dict(entry, week=number))
        week.byes.extend(_team_ref(t) for t in data.get("byes", []))
        return week


@dataclass
class Schedule:
    """
    A full season schedule.

    Mutated after generation only by marking games played.
    """

    weeks: list[Week] = field(default_factory=list)

    @property
    def num_weeks(self) -> int:
        return len(self.weeks)

    @property
    def total_games(self) -> int:
        return sum(len(week.games) for week in self.weeks)

    def get_week(self, week_number: int) -> Optional[Week]:
        """Get a week by its 1-based position."""
        if 1 <= week_number <= len(self.weeks):
            return self.weeks[week_number - 1]
        return None

    def game_at(self, ref: GameRef) -> Optional[ScheduledGame]:
        week = self.get_week(ref.week)
        if week is None or not 0 <= ref.game_index < len(week.games):
            return None
        return week.games[ref.game_index]

    def iter_games(self) -> Iterator[tuple[GameRef, ScheduledGame]]:
        """Every game in schedule order (week, then game index)."""
        for week_pos, week in enumerate(self.weeks, start=1):
            for index, game in enumerate(week.games):
                yield GameRef(week_pos, index), game

    def unplayed(self, week_number: Optional[int] = None) -> list[GameRef]:
        """Refs to unplayed games, optionally limited to one week."""
        return [
            ref for ref, game in self.iter_games()
            if not game.played and (week_number is None or ref.week == week_number)
        ]

    def team_schedule(self, team_id: int) -> list[ScheduledGame]:
        """All games for a specific team."""
        return [game for _, game in self.iter_games() if game.involves(team_id)]

    def meetings(self, team_a: int, team_b: int) -> int:
        """Number of games scheduled between two teams, either venue."""
        return sum(
            1 for _, game in self.iter_games()
            if game.involves(team_a) and game.involves(team_b)
        )

    def team_ids(self) -> list[int]:
        """Every team mentioned anywhere in the schedule, sorted."""
        ids: set[int] = set()
        for week in self.weeks:
            ids.update(week.active_teams)
        return sorted(ids)

    def copy(self) -> "Schedule":
        return Schedule.from_dict(self.to_dict())

    def to_dict(self) -> dict:
        return {"weeks": [week.to_dict() for week in self.weeks]}

    @classmethod
    def from_dict(cls, data: dict) -> "Schedule":
        return cls(weeks=[
            Week.from_dict(w, position) for position, w in enumerate(data.get("weeks", []), start=1)
        ])

    # ==========================================================================
    # Normalization of stored shapes
    # ==========================================================================

    @staticmethod
    def detect_format(raw: Any) -> ScheduleFormat:
        """Work out which stored shape a raw schedule uses."""
        if isinstance(raw, dict):
            if "weeks" not in raw:
                raise ValueError("Schedule dict has no 'weeks' key")
            return ScheduleFormat.NESTED
        if isinstance(raw, list):
            entries = [e for e in raw if e]
            if not entries or any("games" in e for e in entries):
                return ScheduleFormat.WEEK_LIST
            return ScheduleFormat.LEGACY_FLAT
        raise ValueError(f"Unrecognized schedule shape: {type(raw).__name__}")

    @classmethod
    def from_raw(
        cls,
        raw: Any,
        team_ids: Optional[Iterable[int]] = None,
    ) -> "Schedule":
        """
        Normalize any stored schedule shape to the canonical nested form.

        Args:
            raw: Stored schedule (nested dict, list of weeks, or flat games)
            team_ids: League teams, used to fill in byes that legacy flat
                schedules never recorded

        Returns:
            Canonical Schedule
        """
        if raw is None:
            return cls()

        fmt = cls.detect_format(raw)
        if fmt == ScheduleFormat.NESTED:
            schedule = cls.from_dict(raw)
        elif fmt == ScheduleFormat.WEEK_LIST:
            schedule = cls.from_dict({"weeks": [e for e in raw if e]})
        else:
            schedule = cls._from_flat(raw)

        if team_ids is not None:
            schedule._fill_missing_byes(list(team_ids))
        return schedule

    @classmethod
    def _from_flat(cls, games: list[dict]) -> "Schedule":
        by_week: dict[int, list[dict]] = defaultdict(list)
        byes: dict[int, list[int]] = defaultdict(list)
        for entry in games:
            if not entry:
                continue
            week = int(entry.get("week", 0))
            if week < 1:
                raise ValueError(f"Legacy schedule entry without a week: {entry}")
            if "bye" in entry:
                byes[week].extend(_team_ref(t) for t in entry["bye"])
            else:
                by_week[week].append(entry)

        last_week = max(list(by_week) + list(byes), default=0)
        schedule = cls()
        for number in range(1, last_week + 1):
            week = Week(week_number=number)
            week.games = [ScheduledGame.from_dict(g, week=number) for g in by_week.get(number, [])]
            week.byes = list(byes.get(number, []))
            schedule.weeks.append(week)
        return schedule

    def _fill_missing_byes(self, team_ids: list[int]) -> None:
        for week in self.weeks:
            active = set(week.active_teams)
            week.byes.extend(t for t in sorted(team_ids) if t not in active)
