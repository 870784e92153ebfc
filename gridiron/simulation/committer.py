"""
Result committer.

Folds a finished GameResult into the league: the scheduled game is marked
played, the result is stored by week, and team records, team season stats
and player stat books are all updated. Resolution of the scheduled game
uses one key, ``(week, home, away)``, whether it goes through a prebuilt
LookupIndex or one of the linear fallback scans.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from gridiron.core.league.league import League
from gridiron.core.league.schedule import GameRef
from gridiron.core.models.result import GameResult
from gridiron.core.models.team import Team
from gridiron.events.bus import EventBus
from gridiron.events.types import CommitSkippedEvent, GameCommittedEvent

logger = logging.getLogger(__name__)


class CommitOutcome(Enum):
    """What happened to a result handed to the committer."""

    COMMITTED = "committed"
    ALREADY_PLAYED = "already_played"
    SKIPPED = "skipped"


@dataclass
class CommitMiss:
    """Diagnostic record for a result that matched no scheduled game or team."""

    week: int
    home: int
    away: int
    reason: str

    def to_dict(self) -> dict:
        return {"week": self.week, "home": self.home, "away": self.away, "reason": self.reason}


@dataclass
class LookupIndex:
    """
    Short-lived maps for O(1) resolution during a batch.

    Owned by whoever built it and never stored on the league.
    """

    teams_by_id: dict[int, Team] = field(default_factory=dict)
    games_by_key: dict[tuple[int, int, int], GameRef] = field(default_factory=dict)

    @classmethod
    def build(cls, league: League) -> "LookupIndex":
        index = cls(teams_by_id={team.id: team for team in league.teams})
        for ref, game in league.schedule.iter_games():
            index.games_by_key.setdefault((ref.week, game.home, game.away), ref)
        return index


class ResultCommitter:
    """Commits simulated results into league state."""

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self.event_bus = event_bus or EventBus()

    def commit(
        self,
        league: League,
        result: GameResult,
        index: Optional[LookupIndex] = None,
    ) -> CommitOutcome:
        """
        Fold one result into the league.

        Args:
            league: League to mutate
            result: Finished game
            index: Batch lookup index; linear scans are used when None

        Returns:
            COMMITTED, ALREADY_PLAYED for a game already marked played,
            or SKIPPED when the game or a team could not be found
        """
        week = result.week if result.week is not None else league.week

        ref = self._resolve_game(league, week, result.home, result.away, index)
        if ref is None:
            return self._miss(league, week, result, "no scheduled game matches")

        game = league.schedule.game_at(ref)
        if game.played:
            logger.debug(f"Week {week}: {result.away} @ {result.home} already played")
            return CommitOutcome.ALREADY_PLAYED

        home_team = self._resolve_team(league, result.home, index)
        away_team = self._resolve_team(league, result.away, index)
        if home_team is None or away_team is None:
            return self._miss(league, week, result, "team not in league")

        game.mark_played(result.score_home, result.score_away)
        if result.week is None:
            result.week = ref.week
        if result.game_index is None:
            result.game_index = ref.game_index

        league.ensure_results_by_week()
        while len(league.results_by_week) < ref.week:
            league.results_by_week.append([])
        league.results_by_week[ref.week - 1].append(result)

        home_team.record.record_game(result.score_home, result.score_away)
        away_team.record.record_game(result.score_away, result.score_home)
        home_team.season_stats.add_game(result.home_stats, result.away_stats)
        away_team.season_stats.add_game(result.away_stats, result.home_stats)

        self._fold_player_stats(result, home_team, away_team)

        logger.debug(f"Committed week {ref.week} game {ref.game_index}: {result}")
        self.event_bus.emit(GameCommittedEvent(
            home_id=result.home,
            away_id=result.away,
            home_score=result.score_home,
            away_score=result.score_away,
            week=ref.week,
            game_index=ref.game_index,
        ))
        return CommitOutcome.COMMITTED

    # ==========================================================================
    # Resolution
    # ==========================================================================

    def _resolve_game(
        self,
        league: League,
        week: int,
        home: int,
        away: int,
        index: Optional[LookupIndex],
    ) -> Optional[GameRef]:
        key = (week, home, away)
        if index is not None:
            return index.games_by_key.get(key)

        # Positional: the week at its 1-based slot
        schedule_week = league.schedule.get_week(week)
        if schedule_week is not None:
            game_index = schedule_week.find_game(home, away)
            if game_index is not None:
                return GameRef(week, game_index)

        # Flat scan: games carrying the week themselves
        for ref, game in league.schedule.iter_games():
            if game.key == key:
                return ref

        # Exhaustive: weeks labelled with the week number
        for position, candidate in enumerate(league.schedule.weeks, start=1):
            if candidate.week_number != week:
                continue
            game_index = candidate.find_game(home, away)
            if game_index is not None:
                return GameRef(position, game_index)
        return None

    def _resolve_team(
        self,
        league: League,
        team_id: int,
        index: Optional[LookupIndex],
    ) -> Optional[Team]:
        if index is not None:
            return index.teams_by_id.get(team_id)
        return league.get_team(team_id)

    def _miss(self, league: League, week: int, result: GameResult, reason: str) -> CommitOutcome:
        miss = CommitMiss(week=week, home=result.home, away=result.away, reason=reason)
        logger.warning(f"Skipping result for week {week}, {result.away} @ {result.home}: {reason}")
        league.diagnostics.append(miss)
        self.event_bus.emit(CommitSkippedEvent(
            home_id=result.home,
            away_id=result.away,
            home_score=result.score_home,
            away_score=result.score_away,
            week=week,
            reason=reason,
        ))
        return CommitOutcome.SKIPPED

    # ==========================================================================
    # Player stats
    # ==========================================================================

    def _fold_player_stats(self, result: GameResult, home: Team, away: Team) -> None:
        teams = {home.id: home, away.id: away}
        for line in result.player_stats.values():
            team = teams.get(line.team_id)
            player = team.get_player(line.player_id) if team else None
            if player is None:
                logger.debug(f"Stat line for {line.player_name} has no rostered player")
                continue
            player.stats.add_game(line)
