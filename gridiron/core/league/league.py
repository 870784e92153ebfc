"""
League Container.

This module provides the League class - the authoritative state a season
is simulated against. It holds:
- Teams with their rosters, records and season stats
- The season schedule
- The current week
- Results grouped by week
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from uuid import UUID, uuid4

from gridiron.core.league.schedule import Schedule
from gridiron.core.models.result import GameResult
from gridiron.core.models.team import Team


@dataclass
class League:
    """
    The top-level container for a season.

    ``week`` is a 1-based index into ``schedule.weeks`` and
    ``results_by_week[i]`` holds the results of ``schedule.weeks[i]``.
    Serializing this captures the entire league state.
    """

    id: UUID = field(default_factory=uuid4)
    name: str = "Gridiron League"
    season: int = 2025
    week: int = 1

    teams: list[Team] = field(default_factory=list)
    schedule: Schedule = field(default_factory=Schedule)
    results_by_week: list[list[GameResult]] = field(default_factory=list)

    # Commit misses from this session (not persisted)
    diagnostics: list = field(default_factory=list)

    # ==========================================================================
    # Team Management
    # ==========================================================================

    def get_team(self, team_id: int) -> Optional[Team]:
        """Get a team by ID."""
        for team in self.teams:
            if team.id == team_id:
                return team
        return None

    def get_team_by_abbr(self, abbreviation: str) -> Optional[Team]:
        """Get a team by abbreviation."""
        for team in self.teams:
            if team.abbreviation == abbreviation:
                return team
        return None

    @property
    def team_ids(self) -> list[int]:
        return [team.id for team in self.teams]

    # ==========================================================================
    # Standings
    # ==========================================================================

    def standings(self) -> list[Team]:
        """Teams ordered by win percentage, then point differential."""
        return sorted(
            self.teams,
            key=lambda t: (-t.record.win_pct, -t.season_stats.point_diff, t.id),
        )

    # ==========================================================================
    # Schedule & Results
    # ==========================================================================

    def ensure_results_by_week(self) -> None:
        """Size ``results_by_week`` to match the schedule."""
        while len(self.results_by_week) < self.schedule.num_weeks:
            self.results_by_week.append([])

    def results_for_week(self, week: int) -> list[GameResult]:
        if 1 <= week <= len(self.results_by_week):
            return self.results_by_week[week - 1]
        return []

    @property
    def is_season_complete(self) -> bool:
        return self.schedule.num_weeks > 0 and not self.schedule.unplayed()

    def advance_week(self) -> int:
        """Move to the next week, staying within the schedule."""
        if self.week < self.schedule.num_weeks:
            self.week += 1
        return self.week

    # ==========================================================================
    # Serialization
    # ==========================================================================

    def to_dict(self) -> dict:
        """Convert the entire league to a dictionary for saving."""
        return {
            "id": str(self.id),
            "name": self.name,
            "season": self.season,
            "week": self.week,
            "teams": [team.to_dict() for team in self.teams],
            "schedule": self.schedule.to_dict(),
            "results_by_week": [
                [result.to_dict() for result in week] for week in self.results_by_week
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "League":
        """Create a league from a dictionary (for loading saves)."""
        teams = [Team.from_dict(t) for t in data.get("teams", [])]
        league = cls(
            id=UUID(data["id"]) if "id" in data else uuid4(),
            name=data.get("name", "Gridiron League"),
            season=data.get("season", 2025),
            week=data.get("week", 1),
            teams=teams,
            schedule=Schedule.from_raw(data.get("schedule"), team_ids=[t.id for t in teams]),
        )
        league.results_by_week = [
            [GameResult.from_dict(r) for r in week]
            for week in data.get("results_by_week", data.get("resultsByWeek", []))
        ]
        league.ensure_results_by_week()
        return league

    def copy(self) -> "League":
        """Deep copy through the serialized form."""
        return League.from_dict(self.to_dict())

    def save(self, path: Path) -> None:
        """Save the league to a JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "League":
        """Load a league from a JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    def __str__(self) -> str:
        return f"{self.name} ({self.season}) - Week {self.week}, {len(self.teams)} teams"
