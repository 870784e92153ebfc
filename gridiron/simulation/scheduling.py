"""
Season schedule generation.

Builds a round-robin season in which every pair of teams meets a fixed
number of times, every team has exactly one game or bye per week, and no
team plays itself.

The generator works in three stages:
- a bye plan is laid out first, so every week has an even number of
  playing teams and each team gets the same number of byes
- a greedy pass fills each week, pairing the teams with the fewest games
  first and looking ahead so it never strands a team without a partner
- when the greedy pass dead-ends it forces a pairing and hands the draft
  to ``fix_schedule_completely``, which swaps opponents within a week
  until every pair meets the right number of times

If every greedy attempt fails, week assignment is posed as an integer
program and handed to the CBC solver through PuLP. The circle-method
schedule the bye plan was derived from is the last resort.
"""

import logging
import random
from collections import defaultdict
from typing import Callable, Iterable, Optional

import pulp

from gridiron.config import SimulationConfig, get_config
from gridiron.core.errors import SchedulingInfeasible
from gridiron.core.league.schedule import Schedule, ScheduledGame, Week

logger = logging.getLogger(__name__)

Pair = tuple[int, int]

# Nodes the in-week lookahead may visit before it gives the benefit of the doubt
LOOKAHEAD_NODES = 400
# Greedy orderings tried before falling back to the solver
GREEDY_ATTEMPTS = 3
# Seconds CBC may spend on the week assignment
IP_TIME_LIMIT = 30


def _pair(a: int, b: int) -> Pair:
    return (a, b) if a < b else (b, a)


# =============================================================================
# Circle Method
# =============================================================================


def circle_rounds(team_ids: list[int]) -> list[list[Pair]]:
    """
    One full round robin built with the circle method.

    Each round is a set of games in which every team plays at most once.
    Odd leagues get a ghost slot, so one team sits out each round.
    """
    if len(team_ids) < 2:
        return []

    rotating: list[Optional[int]] = list(team_ids)
    if len(rotating) % 2 == 1:
        rotating.append(None)

    half = len(rotating) // 2
    rounds: list[list[Pair]] = []
    for _ in range(len(rotating) - 1):
        games = []
        for idx in range(half):
            a = rotating[idx]
            b = rotating[-(idx + 1)]
            if a is None or b is None:
                continue
            games.append(_pair(a, b))
        rounds.append(games)

        # Keep first fixed, rotate the rest
        rotating = [rotating[0], rotating[-1], *rotating[1:-1]]

    return rounds


def _split_plan(num_rounds: int, extra_weeks: int) -> list[int]:
    """How many weeks each round is spread over, favouring mid-season rounds."""
    parts = [1] * num_rounds
    middle = (num_rounds - 1) / 2
    order = sorted(range(num_rounds), key=lambda i: (abs(i - middle), i))
    for n in range(extra_weeks):
        parts[order[n % num_rounds]] += 1
    return parts


def _spread_round(games: list[Pair], parts: int, round_idx: int) -> list[list[Pair]]:
    """
    Spread one round over several weeks.

    Every team in the round plays in exactly one of the resulting weeks and
    is on bye in the others.
    """
    if parts == 1:
        return [list(games)]

    ordered = list(games)
    shift = round_idx % len(ordered) if ordered else 0
    if shift:
        ordered = ordered[shift:] + ordered[:shift]

    chunks: list[list[Pair]] = [[] for _ in range(parts)]
    for idx, game in enumerate(ordered):
        chunks[idx % parts].append(game)
    return chunks


def canonical_weeks(team_ids: list[int], weeks: int, meetings: int) -> list[list[Pair]]:
    """
    Circle-method season: ``meetings`` cycles of the round robin, with
    rounds split across extra weeks to create byes.
    """
    base = circle_rounds(team_ids)
    rounds = [list(r) for _ in range(meetings) for r in base]
    parts = _split_plan(len(rounds), weeks - len(rounds))

    season: list[list[Pair]] = []
    for idx, (games, count) in enumerate(zip(rounds, parts)):
        season.extend(_spread_round(games, count, idx))
    return season


# =============================================================================
# Venues
# =============================================================================


def _choose_home(a: int, b: int, week: int, home_games: dict[int, int]) -> int:
    """Give the game to whoever has hosted less, alternating ties by week."""
    if home_games[a] != home_games[b]:
        return a if home_games[a] < home_games[b] else b
    low, high = (a, b) if a < b else (b, a)
    return low if week % 2 == 1 else high


def _assign_venues(weeks: list[list[Pair]]) -> list[list[ScheduledGame]]:
    """
    Turn unordered pairings into home/away games.

    Repeat meetings alternate venue; first meetings go to the team with
    fewer home games so far.
    """
    home_games: dict[int, int] = defaultdict(int)
    last_home: dict[Pair, int] = {}
    scheduled: list[list[ScheduledGame]] = []

    for week_number, pairs in enumerate(weeks, start=1):
        games = []
        for a, b in pairs:
            key = _pair(a, b)
            if key in last_home:
                home = b if last_home[key] == a else a
            else:
                home = _choose_home(a, b, week_number, home_games)
            away = b if home == a else a
            last_home[key] = home
            home_games[home] += 1
            games.append(ScheduledGame(week=week_number, home=home, away=away))
        scheduled.append(games)

    return scheduled


def _build_schedule(team_ids: list[int], weeks: list[list[Pair]]) -> Schedule:
    schedule = Schedule()
    for week_number, games in enumerate(_assign_venues(weeks), start=1):
        playing = {t for g in games for t in (g.home, g.away)}
        schedule.weeks.append(Week(
            week_number=week_number,
            games=games,
            byes=sorted(t for t in team_ids if t not in playing),
        ))
    return schedule


# =============================================================================
# Validation
# =============================================================================


def validate_schedule(
    schedule: Schedule,
    team_ids: Iterable[int],
    meetings: int,
    min_rematch_gap: int = 0,
) -> list[str]:
    """
    Check a schedule against the round-robin rules.

    Returns:
        List of human-readable errors (empty if the schedule is valid)
    """
    teams = sorted(team_ids)
    known = set(teams)
    errors: list[str] = []
    meet_weeks: dict[Pair, list[int]] = defaultdict(list)
    games_played: dict[int, int] = defaultdict(int)
    byes_taken: dict[int, int] = defaultdict(int)

    for week_number, week in enumerate(schedule.weeks, start=1):
        seen: dict[int, int] = defaultdict(int)
        for game in week.games:
            if game.home == game.away:
                errors.append(f"Week {week_number}: team {game.home} plays itself")
            for team_id in (game.home, game.away):
                if team_id not in known:
                    errors.append(f"Week {week_number}: unknown team {team_id}")
                seen[team_id] += 1
                games_played[team_id] += 1
            meet_weeks[_pair(game.home, game.away)].append(week_number)
        for team_id in week.byes:
            if team_id not in known:
                errors.append(f"Week {week_number}: unknown team {team_id} on bye")
            seen[team_id] += 1
            byes_taken[team_id] += 1

        for team_id in teams:
            if seen[team_id] == 0:
                errors.append(f"Week {week_number}: team {team_id} has no game or bye")
            elif seen[team_id] > 1:
                errors.append(f"Week {week_number}: team {team_id} scheduled {seen[team_id]} times")

    for team_id in teams:
        total = games_played[team_id] + byes_taken[team_id]
        if total != schedule.num_weeks:
            errors.append(
                f"Team {team_id}: {games_played[team_id]} games + {byes_taken[team_id]} byes "
                f"!= {schedule.num_weeks} weeks"
            )

    for i, a in enumerate(teams):
        for b in teams[i + 1:]:
            met = meet_weeks.get((a, b), [])
            if len(met) != meetings:
                errors.append(f"Teams {a} and {b} meet {len(met)} times (expected {meetings})")
            for first, second in zip(met, met[1:]):
                if second - first < min_rematch_gap:
                    errors.append(
                        f"Teams {a} and {b} meet in weeks {first} and {second} "
                        f"(minimum gap {min_rematch_gap})"
                    )

    return errors


# =============================================================================
# Repair
# =============================================================================


class _ScheduleRepair:
    """
    Local-search repair over a draft schedule.

    Every move re-pairs two games inside one week: (a, b) and (c, d) become
    (a, c) and (b, d), or (a, d) and (b, c). The same four teams still play
    that week, so games and byes per team never change.
    """

    def __init__(
        self,
        weeks: list[list[Pair]],
        meetings: int,
        min_rematch_gap: int,
        rng: random.Random,
        locked: Optional[set[tuple[int, int]]] = None,
    ) -> None:
        self.weeks = weeks
        self.meetings = meetings
        self.min_rematch_gap = min_rematch_gap
        self.rng = rng
        self.locked = locked or set()

        # Weeks each pair meets in, kept sorted
        self.meet_weeks: dict[Pair, list[int]] = defaultdict(list)
        for week_idx, pairs in enumerate(weeks):
            for pair in pairs:
                self.meet_weeks[pair].append(week_idx)

    def pair_cost(self, met: list[int]) -> int:
        cost = max(0, len(met) - self.meetings)
        for first, second in zip(met, met[1:]):
            if second - first < self.min_rematch_gap:
                cost += 1
        return cost

    def conflicts(self) -> list[Pair]:
        return sorted(p for p, met in self.meet_weeks.items() if self.pair_cost(met) > 0)

    def _moved(self, pair: Pair, drop: Optional[int], add: Optional[int]) -> list[int]:
        met = list(self.meet_weeks.get(pair, []))
        if drop is not None:
            met.remove(drop)
        if add is not None:
            met.append(add)
            met.sort()
        return met

    def _delta(self, week_idx: int, old: list[Pair], new: list[Pair]) -> int:
        touched: dict[Pair, list[int]] = {}
        for pair in old:
            touched[pair] = self._moved(pair, week_idx, None)
        for pair in new:
            base = touched.get(pair)
            if base is None:
                touched[pair] = self._moved(pair, None, week_idx)
            else:
                base.append(week_idx)
                base.sort()

        before = sum(self.pair_cost(self.meet_weeks.get(p, [])) for p in touched)
        after = sum(self.pair_cost(met) for met in touched.values())
        return after - before

    def candidates(self, pair: Pair) -> list[tuple[int, int, int, list[Pair]]]:
        """Every legal re-pairing touching one of this pair's meetings."""
        a, b = pair
        found = []
        for week_idx in self.meet_weeks.get(pair, []):
            pairs = self.weeks[week_idx]
            own = pairs.index(pair)
            if (week_idx, own) in self.locked:
                continue
            for other_idx, (c, d) in enumerate(pairs):
                if other_idx == own or (week_idx, other_idx) in self.locked:
                    continue
                for new in ([_pair(a, c), _pair(b, d)], [_pair(a, d), _pair(b, c)]):
                    delta = self._delta(week_idx, [pair, (c, d)], new)
                    found.append((delta, week_idx, other_idx, new))
        return found

    def apply(self, week_idx: int, own_idx: int, other_idx: int, new: list[Pair]) -> None:
        pairs = self.weeks[week_idx]
        for idx in (own_idx, other_idx):
            old = pairs[idx]
            self.meet_weeks[old].remove(week_idx)
            if not self.meet_weeks[old]:
                del self.meet_weeks[old]
        pairs[own_idx], pairs[other_idx] = new
        for pair in new:
            self.meet_weeks[pair].append(week_idx)
            self.meet_weeks[pair].sort()

    def run(self, budget: int) -> bool:
        """Swap until no conflicts remain or the budget is spent."""
        for _ in range(budget):
            conflicts = self.conflicts()
            if not conflicts:
                return True

            pair = self.rng.choice(conflicts)
            options = self.candidates(pair)
            if not options:
                continue

            best = min(option[0] for option in options)
            if best > 0 and self.rng.random() > 0.2:
                continue
            pool = [o for o in options if o[0] == best] if best <= 0 else options
            _, week_idx, other_idx, new = self.rng.choice(pool)
            self.apply(week_idx, self.weeks[week_idx].index(pair), other_idx, new)

        return not self.conflicts()


def fix_schedule_completely(
    schedule: Schedule,
    meetings: int,
    min_rematch_gap: int = 0,
    retry_budget: int = 500,
    seed: Optional[int] = None,
) -> Schedule:
    """
    Repair a draft schedule in place by swapping opponents within weeks.

    Played games are left alone. Games per team and byes per team are the
    same after the repair as before it.

    Args:
        schedule: Draft schedule (may have over-met pairs or short rematches)
        meetings: Required meetings per pair
        min_rematch_gap: Minimum weeks between two meetings of a pair
        retry_budget: Maximum number of swap attempts
        seed: Seed for choosing among equally good swaps

    Returns:
        The same schedule object, repaired

    Raises:
        SchedulingInfeasible: If conflicts remain when the budget runs out
    """
    team_ids = schedule.team_ids()
    games_per_team: dict[int, int] = defaultdict(int)
    for _, game in schedule.iter_games():
        games_per_team[game.home] += 1
        games_per_team[game.away] += 1
    expected = meetings * (len(team_ids) - 1)
    short = sorted(t for t in team_ids if games_per_team[t] != expected)
    if short:
        raise SchedulingInfeasible(
            f"Teams {short} do not have {expected} games; swaps cannot fix game counts",
            teams=len(team_ids),
            weeks=schedule.num_weeks,
            meetings=meetings,
        )

    pairs = [[_pair(g.home, g.away) for g in week.games] for week in schedule.weeks]
    locked = {
        (week_idx, game_idx)
        for week_idx, week in enumerate(schedule.weeks)
        for game_idx, game in enumerate(week.games)
        if game.played
    }
    repair = _ScheduleRepair(pairs, meetings, min_rematch_gap, random.Random(seed), locked)
    if not repair.conflicts():
        return schedule

    before = len(repair.conflicts())
    if not repair.run(retry_budget):
        remaining = repair.conflicts()
        raise SchedulingInfeasible(
            f"Repair left {len(remaining)} conflicting pairings after {retry_budget} swaps",
            teams=len(team_ids),
            weeks=schedule.num_weeks,
            meetings=meetings,
            errors=[f"Teams {a} and {b}" for a, b in remaining],
        )
    logger.debug(f"Repaired {before} conflicting pairings")

    # Write repaired pairings back, keeping venue balance for moved games
    home_games: dict[int, int] = defaultdict(int)
    for _, game in schedule.iter_games():
        home_games[game.home] += 1
    for week_idx, week in enumerate(schedule.weeks):
        for game_idx, (a, b) in enumerate(pairs[week_idx]):
            game = week.games[game_idx]
            if _pair(game.home, game.away) == (a, b):
                continue
            home_games[game.home] -= 1
            home = _choose_home(a, b, week_idx + 1, home_games)
            home_games[home] += 1
            game.home = home
            game.away = b if home == a else a

    return schedule


# =============================================================================
# Integer Programming
# =============================================================================


def assign_weeks_ip(
    team_ids: list[int],
    weeks: int,
    meetings: int,
    min_rematch_gap: int = 0,
    time_limit: int = IP_TIME_LIMIT,
) -> Optional[list[list[Pair]]]:
    """
    Assign every pairing to weeks using Integer Programming.

    Decision variables:
        x[p, w] = 1 if pair p meets in week w, 0 otherwise

    Constraints:
        1. Each pair meets exactly ``meetings`` times
        2. Each team plays at most once per week (the rest are byes)
        3. No pair meets twice inside any ``min_rematch_gap``-week window

    Returns:
        Pairings per week, or None if the solver found no schedule
    """
    teams = sorted(team_ids)
    pairs = [(a, b) for i, a in enumerate(teams) for b in teams[i + 1:]]
    week_range = range(weeks)

    prob = pulp.LpProblem("Season_Schedule", pulp.LpMinimize)
    x = pulp.LpVariable.dicts(
        "meet",
        ((p, w) for p in range(len(pairs)) for w in week_range),
        cat="Binary",
    )

    # Feasibility only
    prob += 0, "Dummy_Objective"

    for p in range(len(pairs)):
        prob += (
            pulp.lpSum(x[p, w] for w in week_range) == meetings,
            f"Pair_{p}_meets_{meetings}",
        )

    team_pairs: dict[int, list[int]] = {t: [] for t in teams}
    for p, (a, b) in enumerate(pairs):
        team_pairs[a].append(p)
        team_pairs[b].append(p)

    for team in teams:
        for w in week_range:
            prob += (
                pulp.lpSum(x[p, w] for p in team_pairs[team]) <= 1,
                f"Team_{team}_week_{w}_max_one",
            )

    if meetings > 1 and min_rematch_gap > 1:
        for p in range(len(pairs)):
            for start in range(weeks - min_rematch_gap + 1):
                prob += (
                    pulp.lpSum(x[p, w] for w in range(start, start + min_rematch_gap)) <= 1,
                    f"Pair_{p}_gap_from_{start}",
                )

    prob.solve(pulp.PULP_CBC_CMD(msg=0, timeLimit=time_limit))
    if prob.status != pulp.LpStatusOptimal:
        logger.info(f"Solver status: {pulp.LpStatus[prob.status]}")
        return None

    season: list[list[Pair]] = [[] for _ in week_range]
    for p, pair in enumerate(pairs):
        for w in week_range:
            if round(pulp.value(x[p, w]) or 0) == 1:
                season[w].append(pair)
    return season


# =============================================================================
# Generator
# =============================================================================


class ScheduleGenerator:
    """
    Generates a season schedule for a league.

    Every pair of teams meets ``meetings`` times over ``weeks`` weeks, each
    team gets ``weeks - meetings * (teams - 1)`` byes, and two meetings of
    the same pair are at least ``min_rematch_gap`` weeks apart.
    """

    def __init__(
        self,
        team_ids: Iterable[int],
        weeks: Optional[int] = None,
        meetings: Optional[int] = None,
        min_rematch_gap: Optional[int] = None,
        retry_budget: Optional[int] = None,
        seed: Optional[int] = None,
        config: Optional[SimulationConfig] = None,
    ) -> None:
        """
        Initialize schedule generator.

        Args:
            team_ids: Teams in the league
            weeks: Weeks in the season
            meetings: Times each pair of teams meets
            min_rematch_gap: Minimum weeks between meetings of the same pair
            retry_budget: Swap budget for the repair pass
            seed: Seed for tie-breaking in retries and repairs
            config: Defaults for any argument left as None
        """
        config = config or get_config()
        self.team_ids = list(team_ids)
        self.weeks = weeks if weeks is not None else config.weeks
        self.meetings = meetings if meetings is not None else config.meetings
        self.min_rematch_gap = (
            min_rematch_gap if min_rematch_gap is not None else config.min_rematch_gap
        )
        self.retry_budget = retry_budget if retry_budget is not None else config.retry_budget
        self.seed = seed

    @property
    def games_per_team(self) -> int:
        return self.meetings * (len(self.team_ids) - 1)

    @property
    def byes_per_team(self) -> int:
        return self.weeks - self.games_per_team

    def _infeasible(self, message: str) -> SchedulingInfeasible:
        return SchedulingInfeasible(
            message,
            teams=len(self.team_ids),
            weeks=self.weeks,
            meetings=self.meetings,
        )

    def check_feasible(self) -> None:
        """
        Reject league shapes that cannot produce a valid schedule.

        Raises:
            SchedulingInfeasible: If teams, weeks and meetings are inconsistent
        """
        n = len(self.team_ids)
        if len(set(self.team_ids)) != n:
            raise self._infeasible("Team ids must be unique")
        if n < 2:
            raise self._infeasible(f"Need at least 2 teams, got {n}")
        if self.meetings < 1:
            raise self._infeasible(f"Meetings per pair must be at least 1, got {self.meetings}")
        if self.weeks < self.games_per_team:
            raise self._infeasible(
                f"{self.weeks} weeks cannot fit {self.games_per_team} games per team"
            )
        if n % 2 == 1 and self.weeks < self.meetings * n:
            raise self._infeasible(
                f"With {n} teams someone sits out every week; "
                f"need at least {self.meetings * n} weeks, got {self.weeks}"
            )
        if self.meetings > 1 and (self.meetings - 1) * self.min_rematch_gap >= self.weeks:
            raise self._infeasible(
                f"{self.meetings} meetings at least {self.min_rematch_gap} weeks apart "
                f"do not fit in {self.weeks} weeks"
            )

    def generate(self) -> Schedule:
        """
        Generate a full season schedule.

        Returns:
            A schedule that passes ``validate_schedule``

        Raises:
            SchedulingInfeasible: If no legal schedule could be built
        """
        self.check_feasible()

        canonical = canonical_weeks(self.team_ids, self.weeks, self.meetings)
        all_teams = set(self.team_ids)
        bye_plan = [all_teams - {t for pair in week for t in pair} for week in canonical]

        rng = random.Random(self.seed)
        for attempt in range(GREEDY_ATTEMPTS):
            if attempt == 0:
                rank = {t: t for t in self.team_ids}
            else:
                shuffled = sorted(self.team_ids)
                rng.shuffle(shuffled)
                rank = {t: i for i, t in enumerate(shuffled)}

            draft, forced = self._greedy(bye_plan, rank.__getitem__)
            schedule = _build_schedule(self.team_ids, draft)
            if forced:
                logger.info(f"Greedy attempt {attempt + 1} forced {forced} pairings, repairing")
                try:
                    fix_schedule_completely(
                        schedule,
                        self.meetings,
                        self.min_rematch_gap,
                        self.retry_budget,
                        seed=rng.randrange(2**31),
                    )
                except SchedulingInfeasible as e:
                    logger.info(f"Repair failed on attempt {attempt + 1}: {e}")
                    continue

            errors = validate_schedule(schedule, self.team_ids, self.meetings, self.min_rematch_gap)
            if not errors:
                logger.debug(f"Schedule generated on greedy attempt {attempt + 1}")
                return schedule
            logger.warning(f"Attempt {attempt + 1} produced {len(errors)} errors: {errors[0]}")

        solved = assign_weeks_ip(self.team_ids, self.weeks, self.meetings, self.min_rematch_gap)
        if solved is not None:
            schedule = _build_schedule(self.team_ids, solved)
            errors = validate_schedule(schedule, self.team_ids, self.meetings, self.min_rematch_gap)
            if not errors:
                logger.info("Using solver schedule")
                return schedule
            logger.warning(f"Solver schedule produced {len(errors)} errors: {errors[0]}")

        schedule = _build_schedule(self.team_ids, canonical)
        errors = validate_schedule(schedule, self.team_ids, self.meetings, self.min_rematch_gap)
        if errors:
            raise SchedulingInfeasible(
                f"No valid schedule after {GREEDY_ATTEMPTS} attempts, the solver and circle-method fallback",
                teams=len(self.team_ids),
                weeks=self.weeks,
                meetings=self.meetings,
                errors=errors,
            )
        logger.info("Using circle-method schedule")
        return schedule

    # ==========================================================================
    # Greedy allocation
    # ==========================================================================

    def _legal(self, a: int, b: int, week_idx: int, meet_weeks: dict[Pair, list[int]]) -> bool:
        met = meet_weeks.get(_pair(a, b), [])
        if len(met) >= self.meetings:
            return False
        if met and week_idx - met[-1] < self.min_rematch_gap:
            return False
        return True

    def _can_complete(
        self,
        teams: list[int],
        week_idx: int,
        meet_weeks: dict[Pair, list[int]],
    ) -> bool:
        """Whether the remaining teams of a week can still all be paired."""
        budget = [LOOKAHEAD_NODES]

        def search(remaining: list[int]) -> bool:
            if not remaining:
                return True
            budget[0] -= 1
            if budget[0] < 0:
                return True
            first, rest = remaining[0], remaining[1:]
            for i, other in enumerate(rest):
                if self._legal(first, other, week_idx, meet_weeks):
                    if search(rest[:i] + rest[i + 1:]):
                        return True
            return False

        return search(teams)

    def _greedy(
        self,
        bye_plan: list[set[int]],
        rank: Callable[[int], int],
    ) -> tuple[list[list[Pair]], int]:
        """
        Fill each week greedily.

        Returns:
            Pairings per week and the number of pairings that had to be
            forced past a dead end
        """
        meet_weeks: dict[Pair, list[int]] = defaultdict(list)
        games: dict[int, int] = defaultdict(int)
        season: list[list[Pair]] = []
        forced = 0

        for week_idx, byes in enumerate(bye_plan):
            open_teams = sorted(
                (t for t in self.team_ids if t not in byes),
                key=lambda t: (games[t], rank(t)),
            )
            week_pairs: list[Pair] = []

            while open_teams:
                a = open_teams.pop(0)
                partner = None
                for b in open_teams:
                    if not self._legal(a, b, week_idx, meet_weeks):
                        continue
                    rest = [t for t in open_teams if t != b]
                    if self._can_complete(rest, week_idx, meet_weeks):
                        partner = b
                        break

                if partner is None:
                    partner = min(
                        open_teams,
                        key=lambda b: (len(meet_weeks.get(_pair(a, b), [])), rank(b)),
                    )
                    forced += 1

                open_teams.remove(partner)
                pair = _pair(a, partner)
                week_pairs.append(pair)
                meet_weeks[pair].append(week_idx)
                games[a] += 1
                games[partner] += 1

            season.append(week_pairs)

        return season, forced
