"""
Game simulation engine.

GameSimulator plays one game snap by snap and returns a GameResult. It
never mutates the teams it is given: every stat goes into the result's
per-game box score, which the result committer later folds into the
league.

Field position uses an absolute 0-100 scale: 0 is the home end zone and
100 is the away end zone, so the home offense drives toward 100 and the
away offense toward 0.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from gridiron.config import SimulationConfig, get_config
from gridiron.core.enums import PlayOutcome, PlayType, Position, PositionGroup, ScoringType
from gridiron.core.injury import EligibilityProvider, NominalEligibility
from gridiron.core.models.play import Play
from gridiron.core.models.player import Player
from gridiron.core.models.result import GameResult
from gridiron.core.models.stats import PlayerGameStats, TeamGameStats
from gridiron.core.models.team import Team
from gridiron.events.bus import EventBus
from gridiron.events.types import GameEndEvent, ScoringEvent, TurnoverEvent

logger = logging.getLogger(__name__)

# Starter slots used to rate each unit; an empty slot rates zero
OFFENSE_SLOTS = {Position.QB: 1, Position.RB: 1, Position.WR: 3, Position.TE: 1, Position.OL: 5}
DEFENSE_SLOTS = {Position.DL: 4, Position.LB: 3, Position.CB: 2, Position.S: 2}

KICKOFF_SPOT = 25  # Own yard line after a kickoff (touchback)
SAFETY_FREE_KICK_SPOT = 30  # Own yard line after a safety free kick
MAX_FG_DISTANCE = 58

# Turnover types charged to the offense
GIVEAWAYS = ("INT", "FUMBLE")


@dataclass
class TeamUnit:
    """
    A team as it takes the field for one game.

    Built from eligible players only, so players who cannot play never
    contribute strength and never collect stats.
    """

    team: Team
    offense: float
    defense: float
    passers: list[Player]
    rushers: list[Player]
    receivers: list[Player]
    pass_rushers: list[Player]
    coverage: list[Player]
    tacklers: list[Player]
    kicker: Player
    punter: Player
    ratings: dict = field(default_factory=dict)

    @property
    def id(self) -> int:
        return self.team.id

    def rating(self, player: Player) -> float:
        return self.ratings.get(player.id, float(player.overall))


@dataclass
class GameState:
    """Mutable per-play state of a game in progress."""

    home: TeamUnit
    away: TeamUnit
    possession: int
    receiving_second_half: int
    quarter: int = 1
    clock: int = 900
    ball_on: int = 25
    down: int = 1
    distance: int = 10
    home_score: int = 0
    away_score: int = 0
    is_overtime: bool = False
    ot_possessions: set = field(default_factory=set)
    game_over: bool = False
    plays: list[Play] = field(default_factory=list)
    player_stats: dict[str, PlayerGameStats] = field(default_factory=dict)
    team_stats: dict[int, TeamGameStats] = field(default_factory=dict)

    @property
    def offense(self) -> TeamUnit:
        return self.home if self.possession == self.home.id else self.away

    @property
    def defense(self) -> TeamUnit:
        return self.away if self.possession == self.home.id else self.home

    @property
    def direction(self) -> int:
        """+1 when the home team has the ball, -1 otherwise."""
        return 1 if self.possession == self.home.id else -1

    @property
    def yards_to_goal(self) -> int:
        return 100 - self.ball_on if self.possession == self.home.id else self.ball_on

    def absolute(self, team_id: int, own_yard_line: int) -> int:
        """Convert a team-relative yard line (0 = own goal) to the absolute scale."""
        return own_yard_line if team_id == self.home.id else 100 - own_yard_line

    def score_of(self, team_id: int) -> int:
        return self.home_score if team_id == self.home.id else self.away_score

    def margin_for(self, team_id: int) -> int:
        other = self.away.id if team_id == self.home.id else self.home.id
        return self.score_of(team_id) - self.score_of(other)

    def other(self, team_id: int) -> int:
        return self.away.id if team_id == self.home.id else self.home.id


class GameSimulator:
    """
    Simulates a single game between two teams.

    Randomness comes from a ``random.Random`` seeded per game: the same seed
    and rosters reproduce the same GameResult exactly, and omitting the
    seed draws a fresh one (recorded on the result for replay).
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        eligibility: Optional[EligibilityProvider] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        """
        Initialize game simulator.

        Args:
            config: Game length and play cap settings
            eligibility: Injury collaborator (everyone plays at nominal rating if None)
            event_bus: Event bus for scoring/turnover/game-end notifications
        """
        self.config = config or get_config()
        self.eligibility = eligibility or NominalEligibility()
        self.event_bus = event_bus or EventBus()

    def simulate(
        self,
        home: Team,
        away: Team,
        seed: Optional[int] = None,
        week: Optional[int] = None,
        game_index: Optional[int] = None,
    ) -> GameResult:
        """
        Simulate a full game.

        Args:
            home: Home team (read only)
            away: Away team (read only)
            seed: Seed for the game's random source
            week: Schedule week, carried onto the result
            game_index: Index within the week, carried onto the result

        Returns:
            GameResult with final score, box score and play log
        """
        if home.id == away.id:
            raise ValueError(f"Team {home.id} cannot play itself")
        if seed is None:
            seed = random.SystemRandom().randrange(2**63)
        rng = random.Random(seed)

        home_unit = self._build_unit(home)
        away_unit = self._build_unit(away)

        # Coin toss - loser of the toss receives the second half
        receiving = home.id if rng.random() < 0.5 else away.id
        state = GameState(
            home=home_unit,
            away=away_unit,
            possession=receiving,
            receiving_second_half=home.id if receiving == away.id else away.id,
            clock=self.config.quarter_seconds,
            team_stats={home.id: TeamGameStats(team_id=home.id), away.id: TeamGameStats(team_id=away.id)},
        )
        self._new_drive(state, receiving, KICKOFF_SPOT)

        while not state.game_over:
            if len(state.plays) >= self.config.max_plays:
                logger.debug(f"Play cap reached in {away.abbreviation} @ {home.abbreviation}")
                break
            self._snap(state, rng)

        home_stats = state.team_stats[home.id]
        away_stats = state.team_stats[away.id]
        home_stats.points = state.home_score
        away_stats.points = state.away_score

        result = GameResult(
            home=home.id,
            away=away.id,
            score_home=state.home_score,
            score_away=state.away_score,
            week=week,
            game_index=game_index,
            is_overtime=state.is_overtime,
            seed=seed,
            home_stats=home_stats,
            away_stats=away_stats,
            player_stats=state.player_stats,
            log=state.plays,
        )
        self.event_bus.emit(GameEndEvent(
            home_id=home.id,
            away_id=away.id,
            quarter=state.quarter,
            clock=max(0, state.clock),
            home_score=state.home_score,
            away_score=state.away_score,
            winner_id=result.winner,
            is_overtime=state.is_overtime,
            plays=len(state.plays),
        ))
        return result

    # ==========================================================================
    # Team strength
    # ==========================================================================

    def _build_unit(self, team: Team) -> TeamUnit:
        eligible = [p for p in team.roster if self.eligibility.is_eligible_to_play(p)]
        if not eligible:
            raise ValueError(f"Team {team.id} has no players eligible to play")

        ratings = {p.id: float(self.eligibility.effective_rating(p)) for p in eligible}

        def depth(*positions: Position) -> list[Player]:
            players = [p for p in eligible if p.position in positions]
            return sorted(players, key=lambda p: (-ratings[p.id], str(p.id)))

        def unit_strength(slots: dict[Position, int]) -> float:
            total = 0.0
            count = 0
            for position, needed in slots.items():
                starters = depth(position)[:needed]
                total += sum(ratings[p.id] for p in starters)
                count += needed
            return total / count

        offense_players = [p for p in eligible if p.position.group == PositionGroup.OFFENSE]
        defense_players = [p for p in eligible if p.position.group == PositionGroup.DEFENSE]
        everyone = sorted(eligible, key=lambda p: (-ratings[p.id], str(p.id)))

        passers = depth(Position.QB) or depth(Position.RB, Position.WR, Position.TE)
        rushers = depth(Position.RB) + depth(Position.QB)[:1]
        receivers = depth(Position.WR)[:4] + depth(Position.TE)[:2] + depth(Position.RB)[:1]
        kicker = (depth(Position.K) or depth(Position.P) or everyone)[0]
        punter = (depth(Position.P) or depth(Position.K) or everyone)[0]

        return TeamUnit(
            team=team,
            offense=unit_strength(OFFENSE_SLOTS),
            defense=unit_strength(DEFENSE_SLOTS),
            passers=passers or everyone[:1],
            rushers=rushers or offense_players[:1] or everyone[:1],
            receivers=receivers or offense_players or everyone,
            pass_rushers=depth(Position.DL, Position.LB)[:6] or defense_players or everyone,
            coverage=depth(Position.CB, Position.S)[:5] or defense_players or everyone,
            tacklers=depth(Position.LB, Position.S, Position.DL, Position.CB)[:9] or defense_players or everyone,
            kicker=kicker,
            punter=punter,
            ratings=ratings,
        )

    def _edge(self, state: GameState) -> float:
        """Offensive advantage for the current snap, roughly -0.4 to 0.4."""
        edge = (state.offense.offense - state.defense.defense) / 100
        if state.possession == state.home.id:
            edge += self.config.home_advantage / 100
        else:
            edge -= self.config.home_advantage / 100
        return max(-0.4, min(0.4, edge))

    # ==========================================================================
    # Box score helpers
    # ==========================================================================

    def _line(self, state: GameState, player: Player, team_id: int) -> PlayerGameStats:
        key = str(player.id)
        if key not in state.player_stats:
            state.player_stats[key] = PlayerGameStats(
                player_id=player.id,
                player_name=player.full_name,
                team_id=team_id,
                position=player.position.value,
            )
        return state.player_stats[key]

    def _pick(self, rng: random.Random, unit: TeamUnit, players: list[Player]) -> Player:
        """Pick a player, weighted toward the top of the depth list."""
        weights = [max(1.0, unit.rating(p)) / (i + 1) for i, p in enumerate(players)]
        return rng.choices(players, weights=weights, k=1)[0]

    def _start_play(self, state: GameState, play_type: PlayType, outcome: PlayOutcome) -> Play:
        return Play(
            number=len(state.plays) + 1,
            quarter=state.quarter,
            clock=max(0, state.clock),
            offense_id=state.possession,
            play_type=play_type,
            outcome=outcome,
            down=state.down,
            distance=state.distance,
            ball_on=state.ball_on,
        )

    # ==========================================================================
    # Scoring
    # ==========================================================================

    def _score(
        self,
        state: GameState,
        play: Play,
        team_id: int,
        scoring_type: ScoringType,
        scorer: Player,
    ) -> None:
        """
        Put points on the board and credit the scorer in one step.

        The play log, the running score and the scorer's box score line are
        always updated together, so the three never disagree.
        """
        points = scoring_type.points
        line = self._line(state, scorer, team_id)
        if scoring_type == ScoringType.TOUCHDOWN:
            if play.outcome == PlayOutcome.INTERCEPTION:
                line.defense.interception_tds += 1
            elif play.receiver_id == scorer.id:
                line.receiving.touchdowns += 1
            else:
                line.rushing.touchdowns += 1
            state.team_stats[team_id].touchdowns += 1
        elif scoring_type == ScoringType.FIELD_GOAL:
            line.kicking.fg_made += 1
            state.team_stats[team_id].field_goals += 1
        elif scoring_type == ScoringType.EXTRA_POINT:
            line.kicking.xp_made += 1
        elif scoring_type == ScoringType.TWO_POINT:
            line.two_point_conversions += 1
        elif scoring_type == ScoringType.SAFETY:
            line.defense.safeties += 1

        if team_id == state.home.id:
            state.home_score += points
        else:
            state.away_score += points

        play.points = points
        play.scoring_type = scoring_type
        play.scoring_team_id = team_id

        self.event_bus.emit(ScoringEvent(
            home_id=state.home.id,
            away_id=state.away.id,
            quarter=state.quarter,
            clock=max(0, state.clock),
            home_score=state.home_score,
            away_score=state.away_score,
            team_id=team_id,
            points=points,
            scoring_type=scoring_type.value,
            scorer_id=scorer.id,
            description=play.description,
        ))

    def _touchdown(self, state: GameState, play: Play, rng: random.Random, scorer: Player) -> None:
        """Score a touchdown, attempt the conversion, then kick off."""
        scoring_team = state.possession
        if play.outcome == PlayOutcome.INTERCEPTION:
            scoring_team = state.defense.id
        self._score(state, play, scoring_team, ScoringType.TOUCHDOWN, scorer)
        state.plays.append(play)

        self._conversion(state, scoring_team, rng)
        self._kickoff(state, scoring_team)

    def _conversion(self, state: GameState, team_id: int, rng: random.Random) -> None:
        """Extra point or two-point try (untimed)."""
        state.possession = team_id
        unit = state.offense
        defense = state.defense
        edge = self._edge(state)
        state.down, state.distance = 1, 2
        state.ball_on = state.absolute(team_id, 98)

        if self._should_go_for_two(state, team_id):
            if rng.random() < 0.55 and unit.passers and unit.receivers:
                passer = unit.passers[0]
                receiver = self._pick(rng, unit, unit.receivers)
                play = self._start_play(state, PlayType.TWO_POINT, PlayOutcome.TWO_POINT_FAILED)
                play.passer_id = passer.id
                play.receiver_id = receiver.id
                scorer = receiver
            else:
                scorer = self._pick(rng, unit, unit.rushers)
                play = self._start_play(state, PlayType.TWO_POINT, PlayOutcome.TWO_POINT_FAILED)
                play.rusher_id = scorer.id

            if rng.random() < 0.47 + edge * 0.3:
                play.outcome = PlayOutcome.TWO_POINT_GOOD
                play.description = f"{scorer.full_name} two-point conversion is good"
                self._score(state, play, team_id, ScoringType.TWO_POINT, scorer)
            else:
                play.description = "Two-point conversion fails"
                play.defender_id = self._pick(rng, defense, defense.coverage).id
            state.plays.append(play)
            return

        kicker = unit.kicker
        line = self._line(state, kicker, team_id)
        line.kicking.xp_attempts += 1
        play = self._start_play(state, PlayType.EXTRA_POINT, PlayOutcome.EXTRA_POINT_MISSED)
        play.kicker_id = kicker.id
        chance = 0.94 + (unit.rating(kicker) - 70) * 0.002
        if rng.random() < max(0.75, min(0.995, chance)):
            play.outcome = PlayOutcome.EXTRA_POINT_GOOD
            play.description = f"{kicker.full_name} extra point is good"
            self._score(state, play, team_id, ScoringType.EXTRA_POINT, kicker)
        else:
            play.description = f"{kicker.full_name} extra point is no good"
        state.plays.append(play)

    def _should_go_for_two(self, state: GameState, team_id: int) -> bool:
        """Go for two when trailing by a two-point-sensitive margin late."""
        margin = state.margin_for(team_id)
        late = state.is_overtime or (state.quarter == 4 and state.clock < 600)
        if late and margin in (-2, -5, -9, -10, -12, -16):
            return True
        if late and margin in (1, 5):
            return True
        return False

    def _safety(self, state: GameState, play: Play, rng: random.Random, tackler: Player) -> None:
        """Offense was downed in its own end zone: two points and a free kick."""
        scoring_team = state.defense.id
        conceding_team = state.possession
        self._score(state, play, scoring_team, ScoringType.SAFETY, tackler)
        state.plays.append(play)
        self._new_drive(state, scoring_team, SAFETY_FREE_KICK_SPOT)
        self._after_possession_change(state, conceding_team)

    def _kickoff(self, state: GameState, kicking_team: int) -> None:
        receiving = state.other(kicking_team)
        self._new_drive(state, receiving, KICKOFF_SPOT)
        self._after_possession_change(state, kicking_team)

    # ==========================================================================
    # Drives
    # ==========================================================================

    def _new_drive(self, state: GameState, team_id: int, own_yard_line: int) -> None:
        """Give a team the ball, first and ten, at a yard line on its own side."""
        state.possession = team_id
        state.ball_on = state.absolute(team_id, own_yard_line)
        state.down = 1
        state.distance = min(10, 100 - own_yard_line)

    def _after_possession_change(self, state: GameState, previous_team: int) -> None:
        """End overtime once both sides have had the ball and someone leads."""
        if not state.is_overtime:
            return
        state.ot_possessions.add(previous_team)
        both_had_ball = len(state.ot_possessions) >= 2
        if both_had_ball and state.home_score != state.away_score:
            state.game_over = True

    def _turnover(
        self,
        state: GameState,
        turnover_type: str,
        lost_by: Optional[Player],
        gained_by: Optional[Player],
        own_yard_line_for_new_offense: int,
    ) -> None:
        losing = state.possession
        gaining = self._record_turnover(state, turnover_type, lost_by, gained_by)
        spot = max(1, min(99, own_yard_line_for_new_offense))
        self._new_drive(state, gaining, spot)
        self._after_possession_change(state, losing)

    def _record_turnover(
        self,
        state: GameState,
        turnover_type: str,
        lost_by: Optional[Player],
        gained_by: Optional[Player],
    ) -> int:
        """Count a change of possession against the offense and announce it."""
        losing = state.possession
        gaining = state.defense.id
        if turnover_type in GIVEAWAYS:
            state.team_stats[losing].turnovers += 1

        self.event_bus.emit(TurnoverEvent(
            home_id=state.home.id,
            away_id=state.away.id,
            quarter=state.quarter,
            clock=max(0, state.clock),
            home_score=state.home_score,
            away_score=state.away_score,
            losing_team_id=losing,
            gaining_team_id=gaining,
            turnover_type=turnover_type,
            player_who_lost_id=lost_by.id if lost_by else None,
            player_who_gained_id=gained_by.id if gained_by else None,
        ))
        return gaining

    def _advance(
        self,
        state: GameState,
        play: Play,
        yards: int,
        rng: random.Random,
        ball_carrier: Player,
        tackler: Optional[Player],
    ) -> None:
        """
        Move the ball and resolve what the gain means.

        Handles touchdowns, safeties, first downs and turnovers on downs.
        """
        to_goal = state.yards_to_goal
        play.yards = min(yards, to_goal)

        if yards >= to_goal:
            self._touchdown(state, play, rng, ball_carrier)
            return
        if to_goal - yards >= 100:
            play.yards = -(100 - to_goal)
            self._safety(state, play, rng, tackler or state.defense.tacklers[0])
            return

        state.plays.append(play)
        state.ball_on += state.direction * yards
        state.distance -= yards
        if state.distance <= 0:
            state.team_stats[state.possession].first_downs += 1
            state.down = 1
            state.distance = min(10, state.yards_to_goal)
        elif state.down >= 4:
            self._turnover(state, "DOWNS", None, None, state.yards_to_goal)
        else:
            state.down += 1

    # ==========================================================================
    # Snaps
    # ==========================================================================

    def _snap(self, state: GameState, rng: random.Random) -> None:
        """Call and resolve one play, then run the clock."""
        offense_id = state.possession
        call = self._call_play(state, rng)
        if call == PlayType.RUN:
            elapsed = self._run(state, rng)
        elif call == PlayType.PASS:
            elapsed = self._pass(state, rng)
        elif call == PlayType.FIELD_GOAL:
            elapsed = self._field_goal(state, rng)
        else:
            elapsed = self._punt(state, rng)

        state.team_stats[offense_id].plays += 1
        if not state.game_over:
            self._tick(state, elapsed, rng)

    def _call_play(self, state: GameState, rng: random.Random) -> PlayType:
        if state.down == 4:
            return self._fourth_down_call(state, rng)

        pass_rate = 0.55
        if state.distance >= 8:
            pass_rate += 0.15
        elif state.distance <= 2:
            pass_rate -= 0.25
        margin = state.margin_for(state.possession)
        if state.quarter >= 4 and state.clock < 300:
            if margin < 0:
                pass_rate += 0.25
            elif margin > 0:
                pass_rate -= 0.25
        return PlayType.PASS if rng.random() < pass_rate else PlayType.RUN

    def _fourth_down_call(self, state: GameState, rng: random.Random) -> PlayType:
        to_goal = state.yards_to_goal
        margin = state.margin_for(state.possession)
        in_fg_range = to_goal + 17 <= MAX_FG_DISTANCE - 3

        go_for_it = False
        if state.distance <= 1 and to_goal <= 50:
            go_for_it = rng.random() < 0.45
        if state.quarter >= 4:
            if margin < -3 and state.clock < 300 and to_goal <= 50:
                go_for_it = True
            if margin < 0 and state.clock < 120:
                go_for_it = True
            if -3 <= margin < 0 and in_fg_range and state.clock < 120:
                go_for_it = False

        if go_for_it:
            return PlayType.RUN if state.distance <= 2 else PlayType.PASS
        return PlayType.FIELD_GOAL if in_fg_range else PlayType.PUNT

    def _run(self, state: GameState, rng: random.Random) -> int:
        offense, defense = state.offense, state.defense
        edge = self._edge(state)
        rusher = self._pick(rng, offense, offense.rushers)
        tackler = self._pick(rng, defense, defense.tacklers)

        play = self._start_play(state, PlayType.RUN, PlayOutcome.RUSH)
        play.rusher_id = rusher.id

        yards = round(rng.gauss(4.0 + edge * 8, 4.0))
        if rng.random() < 0.03 + max(0.0, edge) * 0.05:
            yards += rng.randint(12, 60)
        yards = max(-8, yards)

        line = self._line(state, rusher, offense.id)
        line.rushing.attempts += 1

        if rng.random() < max(0.004, 0.012 - edge * 0.01):
            # Fumble lost at the end of the run
            yards = max(-3, min(yards, state.yards_to_goal - 1))
            line.rushing.yards += yards
            state.team_stats[offense.id].rushing_yards += yards
            line.rushing.fumbles_lost += 1
            recovered_by = self._pick(rng, defense, defense.tacklers)
            d_line = self._line(state, recovered_by, defense.id)
            d_line.defense.forced_fumbles += 1
            d_line.defense.fumble_recoveries += 1
            play.outcome = PlayOutcome.FUMBLE_LOST
            play.yards = yards
            play.defender_id = recovered_by.id
            play.description = f"{rusher.full_name} fumbles, recovered by {recovered_by.full_name}"
            state.plays.append(play)
            spot = state.yards_to_goal - yards
            self._turnover(state, "FUMBLE", rusher, recovered_by, spot)
            return 30

        gained = min(yards, state.yards_to_goal)
        if state.yards_to_goal - yards >= 100:
            gained = -(100 - state.yards_to_goal)
        line.rushing.yards += gained
        line.rushing.longest = max(line.rushing.longest, gained)
        state.team_stats[offense.id].rushing_yards += gained
        if gained < state.yards_to_goal:
            self._line(state, tackler, defense.id).defense.tackles += 1
            play.defender_id = tackler.id
        play.description = f"{rusher.full_name} runs for {gained} yards"
        self._advance(state, play, yards, rng, rusher, tackler)
        return int(rng.gauss(36, 5))

    def _pass(self, state: GameState, rng: random.Random) -> int:
        offense, defense = state.offense, state.defense
        edge = self._edge(state)
        passer = offense.passers[0]
        p_line = self._line(state, passer, offense.id)

        # Sack
        if rng.random() < max(0.02, 0.065 - edge * 0.05):
            rusher = self._pick(rng, defense, defense.pass_rushers)
            loss = rng.randint(3, 10)
            play = self._start_play(state, PlayType.PASS, PlayOutcome.SACK)
            play.passer_id = passer.id
            play.defender_id = rusher.id
            lost = min(loss, 100 - state.yards_to_goal)
            p_line.passing.sacks += 1
            p_line.passing.sack_yards += lost
            d_line = self._line(state, rusher, defense.id)
            d_line.defense.sacks += 1
            d_line.defense.tackles += 1
            state.team_stats[offense.id].sacks_allowed += 1
            play.description = f"{passer.full_name} sacked by {rusher.full_name} for a loss of {lost}"
            self._advance(state, play, -loss, rng, passer, rusher)
            return int(rng.gauss(35, 4))

        receiver = self._pick(rng, offense, offense.receivers)
        play = self._start_play(state, PlayType.PASS, PlayOutcome.INCOMPLETE)
        play.passer_id = passer.id
        play.receiver_id = receiver.id
        p_line.passing.attempts += 1
        r_line = self._line(state, receiver, offense.id)
        r_line.receiving.targets += 1

        # Interception
        if rng.random() < max(0.008, 0.025 - edge * 0.02):
            defender = self._pick(rng, defense, defense.coverage)
            p_line.passing.interceptions += 1
            d_line = self._line(state, defender, defense.id)
            d_line.defense.interceptions += 1
            play.outcome = PlayOutcome.INTERCEPTION
            play.defender_id = defender.id
            air = max(1, min(state.yards_to_goal - 1, round(rng.gauss(12, 6))))
            if rng.random() < 0.06:
                play.description = f"{passer.full_name} intercepted by {defender.full_name}, returned for a touchdown"
                self._record_turnover(state, "INT", passer, defender)
                if state.is_overtime:
                    state.ot_possessions.add(state.possession)
                self._touchdown(state, play, rng, defender)
                return int(rng.gauss(12, 3))
            play.description = f"{passer.full_name} intercepted by {defender.full_name}"
            state.plays.append(play)
            # Defense takes over where the ball was caught, plus a short return
            spot = state.yards_to_goal - air + rng.randint(0, 12)
            self._turnover(state, "INT", passer, defender, spot)
            return int(rng.gauss(12, 3))

        # Completion
        if rng.random() < max(0.35, min(0.85, 0.63 + edge * 0.3)):
            yards = max(0, round(rng.gauss(10 + edge * 10, 7)))
            if rng.random() < 0.06 + max(0.0, edge) * 0.05:
                yards += rng.randint(15, 60)
            gained = min(yards, state.yards_to_goal)
            play.outcome = PlayOutcome.COMPLETE
            p_line.passing.completions += 1
            p_line.passing.yards += gained
            p_line.passing.longest = max(p_line.passing.longest, gained)
            r_line.receiving.receptions += 1
            r_line.receiving.yards += gained
            r_line.receiving.longest = max(r_line.receiving.longest, gained)
            state.team_stats[offense.id].passing_yards += gained
            tackler = self._pick(rng, defense, defense.coverage)
            if gained < state.yards_to_goal:
                self._line(state, tackler, defense.id).defense.tackles += 1
                play.defender_id = tackler.id
            else:
                p_line.passing.touchdowns += 1
            play.description = f"{passer.full_name} complete to {receiver.full_name} for {gained} yards"
            self._advance(state, play, yards, rng, receiver, tackler)
            return int(rng.gauss(32, 5))

        play.description = f"{passer.full_name} incomplete intended for {receiver.full_name}"
        self._advance(state, play, 0, rng, receiver, None)
        return int(rng.gauss(7, 2))

    def _field_goal(self, state: GameState, rng: random.Random) -> int:
        offense = state.offense
        kicker = offense.kicker
        distance = state.yards_to_goal + 17
        line = self._line(state, kicker, offense.id)
        line.kicking.fg_attempts += 1

        play = self._start_play(state, PlayType.FIELD_GOAL, PlayOutcome.FIELD_GOAL_MISSED)
        play.kicker_id = kicker.id

        chance = 0.98 - max(0, distance - 30) * 0.018 + (offense.rating(kicker) - 70) * 0.004
        if rng.random() < max(0.05, min(0.99, chance)):
            play.outcome = PlayOutcome.FIELD_GOAL_GOOD
            play.description = f"{kicker.full_name} {distance} yard field goal is good"
            line.kicking.fg_longest = max(line.kicking.fg_longest, distance)
            self._score(state, play, offense.id, ScoringType.FIELD_GOAL, kicker)
            state.plays.append(play)
            self._kickoff(state, offense.id)
        else:
            play.description = f"{kicker.full_name} {distance} yard field goal is no good"
            state.plays.append(play)
            # Defense takes over at the spot of the kick, no worse than its 20
            spot = min(99, max(20, state.yards_to_goal + 7))
            self._turnover(state, "MISSED_FG", None, None, spot)
        return 5

    def _punt(self, state: GameState, rng: random.Random) -> int:
        offense = state.offense
        punter = offense.punter
        line = self._line(state, punter, offense.id)

        play = self._start_play(state, PlayType.PUNT, PlayOutcome.PUNT)
        play.kicker_id = punter.id

        distance = max(25, round(rng.gauss(44 + (offense.rating(punter) - 70) * 0.2, 7)))
        receiving_own_line = 100 - (state.yards_to_goal - distance)
        if state.yards_to_goal - distance <= 0:
            # Touchback
            receiving_own_line = 20
            distance = state.yards_to_goal
        else:
            returned = max(0, round(rng.gauss(8, 5)))
            receiving_own_line = min(99, (state.yards_to_goal - distance) + returned)
            distance -= returned
        line.kicking.punts += 1
        line.kicking.punt_yards += distance
        play.yards = distance
        play.description = f"{punter.full_name} punts {distance} yards"
        state.plays.append(play)

        kicking_team = state.possession
        self._new_drive(state, state.other(kicking_team), receiving_own_line)
        self._after_possession_change(state, kicking_team)
        return int(rng.gauss(10, 2))

    # ==========================================================================
    # Clock
    # ==========================================================================

    def _tick(self, state: GameState, seconds: int, rng: random.Random) -> None:
        """Run the clock and handle quarter, half and game ends."""
        state.clock -= max(1, seconds)
        if state.clock > 0:
            return

        if state.quarter in (1, 3):
            state.quarter += 1
            state.clock = self.config.quarter_seconds
        elif state.quarter == 2:
            state.quarter = 3
            state.clock = self.config.quarter_seconds
            self._new_drive(state, state.receiving_second_half, KICKOFF_SPOT)
        elif state.quarter == 4 and state.home_score == state.away_score and self.config.overtime:
            self._start_overtime(state, rng)
        else:
            state.clock = 0
            state.game_over = True

    def _start_overtime(self, state: GameState, rng: random.Random) -> None:
        state.quarter = 5
        state.clock = self.config.overtime_seconds
        state.is_overtime = True
        receiving = state.home.id if rng.random() < 0.5 else state.away.id
        self._new_drive(state, receiving, KICKOFF_SPOT)
