"""
League Generation.

This module provides functions to generate a league of teams with full
rosters and, optionally, a season schedule.
"""

import random
from typing import Optional

from gridiron.config import SimulationConfig, get_config
from gridiron.core.league.league import League
from gridiron.generators.player import generate_team
from gridiron.simulation.scheduling import ScheduleGenerator

# (name, city, abbreviation)
TEAM_NAMES: list[tuple[str, str, str]] = [
    ("Eagles", "Philadelphia", "PHI"),
    ("Cowboys", "Dallas", "DAL"),
    ("Giants", "New York", "NYG"),
    ("Commanders", "Washington", "WAS"),
    ("Bears", "Chicago", "CHI"),
    ("Lions", "Detroit", "DET"),
    ("Packers", "Green Bay", "GB"),
    ("Vikings", "Minnesota", "MIN"),
    ("Falcons", "Atlanta", "ATL"),
    ("Panthers", "Carolina", "CAR"),
    ("Saints", "New Orleans", "NO"),
    ("Buccaneers", "Tampa Bay", "TB"),
    ("Cardinals", "Arizona", "ARI"),
    ("Rams", "Los Angeles", "LAR"),
    ("49ers", "San Francisco", "SF"),
    ("Seahawks", "Seattle", "SEA"),
    ("Bills", "Buffalo", "BUF"),
    ("Dolphins", "Miami", "MIA"),
    ("Patriots", "New England", "NE"),
    ("Jets", "New York", "NYJ"),
    ("Ravens", "Baltimore", "BAL"),
    ("Bengals", "Cincinnati", "CIN"),
    ("Browns", "Cleveland", "CLE"),
    ("Steelers", "Pittsburgh", "PIT"),
    ("Texans", "Houston", "HOU"),
    ("Colts", "Indianapolis", "IND"),
    ("Jaguars", "Jacksonville", "JAX"),
    ("Titans", "Tennessee", "TEN"),
    ("Broncos", "Denver", "DEN"),
    ("Chiefs", "Kansas City", "KC"),
    ("Raiders", "Las Vegas", "LV"),
    ("Chargers", "Los Angeles", "LAC"),
]


def generate_league(
    num_teams: int = 16,
    season: int = 2025,
    name: str = "Gridiron League",
    overall_range: tuple[int, int] = (68, 88),
    parity_mode: bool = False,
    seed: Optional[int] = None,
) -> League:
    """
    Generate a league of teams with full rosters and no schedule.

    Args:
        num_teams: Number of teams (at most 32)
        season: Season year
        name: League name
        overall_range: Base range for player ratings
        parity_mode: If True, all teams have similar ratings
        seed: Seed for a reproducible league

    Returns:
        League with teams numbered 1..num_teams
    """
    if not 2 <= num_teams <= len(TEAM_NAMES):
        raise ValueError(f"num_teams must be between 2 and {len(TEAM_NAMES)}, got {num_teams}")

    rng = random.Random(seed)
    league = League(name=name, season=season)

    for team_id, (team_name, city, abbr) in enumerate(TEAM_NAMES[:num_teams], start=1):
        # Vary team strength unless parity mode
        if parity_mode:
            team_range = overall_range
        else:
            strength_mod = rng.gauss(0, 4)
            team_range = (
                max(50, int(overall_range[0] + strength_mod)),
                min(95, int(overall_range[1] + strength_mod)),
            )
        league.teams.append(generate_team(team_id, team_name, city, abbr, team_range, rng=rng))

    return league


def generate_league_with_schedule(
    num_teams: int = 16,
    weeks: Optional[int] = None,
    meetings: Optional[int] = None,
    min_rematch_gap: Optional[int] = None,
    seed: Optional[int] = None,
    config: Optional[SimulationConfig] = None,
    **kwargs,
) -> League:
    """
    Generate a league with a full season schedule.

    See generate_league() for base parameters. Schedule shape defaults come
    from the simulation config.

    Raises:
        SchedulingInfeasible: If the teams, weeks and meetings cannot fit
    """
    config = config or get_config()
    league = generate_league(num_teams=num_teams, seed=seed, **kwargs)
    generator = ScheduleGenerator(
        league.team_ids,
        weeks=weeks,
        meetings=meetings,
        min_rematch_gap=min_rematch_gap,
        seed=seed,
        config=config,
    )
    league.schedule = generator.generate()
    league.ensure_results_by_week()
    return league
