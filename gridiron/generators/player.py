"""Player and team generation."""

import random
from typing import Optional
from uuid import UUID

from gridiron.core.enums import Position
from gridiron.core.models.player import Player
from gridiron.core.models.team import Team

# Sample names for generation
FIRST_NAMES = [
    "James", "John", "Michael", "David", "Chris", "Matt", "Josh", "Ryan",
    "Tyler", "Brandon", "Justin", "Marcus", "Antonio", "DeShawn", "Malik",
    "Jamal", "Terrell", "Andre", "Darius", "Lamar", "Patrick", "Tom",
    "Aaron", "Derek", "Russell", "Cam", "Kyler", "Trevor", "Tua",
    "Cooper", "Chase", "Tyreek", "Davante", "Stefon", "CeeDee",
    "Travis", "George", "Mark", "Derrick", "Dalvin", "Alvin", "Nick",
]

LAST_NAMES = [
    "Johnson", "Williams", "Brown", "Jones", "Davis", "Miller", "Wilson",
    "Moore", "Taylor", "Anderson", "Thomas", "Jackson", "White", "Harris",
    "Martin", "Thompson", "Robinson", "Clark", "Lewis", "Walker", "Hall",
    "Allen", "Young", "King", "Wright", "Hill", "Scott", "Green", "Adams",
    "Baker", "Nelson", "Carter", "Mitchell", "Murray", "Herbert", "Burrow",
    "Lawrence", "Fields", "Lance",
]

# Roster template: (position, depth level where 1 = starter)
ROSTER_SLOTS: list[tuple[Position, int]] = [
    (Position.QB, 1), (Position.QB, 2),
    (Position.RB, 1), (Position.RB, 2), (Position.RB, 3),
    (Position.WR, 1), (Position.WR, 1), (Position.WR, 1), (Position.WR, 2), (Position.WR, 3),
    (Position.TE, 1), (Position.TE, 2),
    (Position.OL, 1), (Position.OL, 1), (Position.OL, 1), (Position.OL, 1), (Position.OL, 1),
    (Position.OL, 2), (Position.OL, 2),
    (Position.DL, 1), (Position.DL, 1), (Position.DL, 1), (Position.DL, 1), (Position.DL, 2),
    (Position.DL, 2),
    (Position.LB, 1), (Position.LB, 1), (Position.LB, 1), (Position.LB, 2),
    (Position.CB, 1), (Position.CB, 1), (Position.CB, 2), (Position.CB, 3),
    (Position.S, 1), (Position.S, 1), (Position.S, 2),
    (Position.K, 1),
    (Position.P, 1),
]

JERSEY_RANGES = {
    Position.QB: (1, 19),
    Position.RB: (20, 49),
    Position.WR: (10, 19),
    Position.TE: (80, 89),
    Position.OL: (60, 79),
    Position.DL: (90, 99),
    Position.LB: (50, 59),
    Position.CB: (20, 39),
    Position.S: (20, 49),
    Position.K: (1, 9),
    Position.P: (1, 9),
}


def _player_id(rng: random.Random) -> UUID:
    """Random UUID drawn from the given source, so seeded leagues repeat exactly."""
    return UUID(int=rng.getrandbits(128), version=4)


def generate_player(
    position: Position,
    overall_target: Optional[int] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    age: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Player:
    """
    Generate a random player at a position.

    Args:
        position: Position to generate
        overall_target: Target overall rating (randomized if None)
        first_name: Specific first name (random if None)
        last_name: Specific last name (random if None)
        age: Specific age (random 22-32 if None)
        rng: Random source (a fresh unseeded one if None)

    Returns:
        Generated Player
    """
    rng = rng or random.Random()

    fname = first_name or rng.choice(FIRST_NAMES)
    lname = last_name or rng.choice(LAST_NAMES)
    if overall_target is None:
        overall_target = rng.randint(65, 90)
    overall = max(40, min(99, overall_target + rng.randint(-3, 3)))

    low, high = JERSEY_RANGES.get(position, (1, 99))
    return Player(
        id=_player_id(rng),
        first_name=fname,
        last_name=lname,
        position=position,
        overall=overall,
        age=age if age is not None else rng.randint(22, 32),
        jersey_number=rng.randint(low, high),
    )


def generate_team(
    team_id: int,
    name: str,
    city: str,
    abbreviation: str,
    overall_range: tuple[int, int] = (70, 85),
    rng: Optional[random.Random] = None,
) -> Team:
    """
    Generate a complete team with a full roster.

    Args:
        team_id: League-unique integer id
        name: Team name (e.g., "Eagles")
        city: Team city (e.g., "Philadelphia")
        abbreviation: Team abbreviation (e.g., "PHI")
        overall_range: Range of overall ratings for players
        rng: Random source (a fresh unseeded one if None)

    Returns:
        Generated Team
    """
    rng = rng or random.Random()
    team = Team(id=team_id, name=name, city=city, abbreviation=abbreviation)

    low, high = overall_range
    for position, depth in ROSTER_SLOTS:
        # Starters get the top of the range, backups progressively less
        target = rng.randint(low, high) + (5 if depth == 1 else -5 * (depth - 1))
        team.roster.append(generate_player(position, overall_target=target, rng=rng))

    return team
