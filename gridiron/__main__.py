"""Entry point for gridiron package."""

import argparse
import logging
import sys
from pathlib import Path

from gridiron.core.errors import SchedulingInfeasible


def main() -> None:
    """Main entry point for the Gridiron application."""
    parser = argparse.ArgumentParser(
        description="Gridiron - American Football Season Simulator",
        prog="gridiron",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Simulate a single game between two generated teams",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the HTTP API",
    )
    parser.add_argument("--teams", type=int, default=16, help="Number of teams (default: 16)")
    parser.add_argument("--weeks", type=int, default=None, help="Weeks in the season")
    parser.add_argument("--meetings", type=int, default=None, help="Times each pair of teams meets")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    parser.add_argument(
        "--through-week",
        type=int,
        default=None,
        help="Stop after this week (default: full season)",
    )
    parser.add_argument(
        "--worker",
        action="store_true",
        help="Simulate weeks in a worker process",
    )
    parser.add_argument("--save", type=Path, default=None, help="Write the league to a JSON file")
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.serve:
        from gridiron.api.main import run_api

        run_api(host=args.host, port=args.port)
        return

    if args.demo:
        from gridiron.generators import generate_league
        from gridiron.simulation import GameSimulator

        print("Gridiron - American Football Season Simulator (Demo Mode)")
        print("=" * 50)

        league = generate_league(num_teams=2, seed=args.seed)
        home_team, away_team = league.teams
        print(f"Home: {home_team.full_name}")
        print(f"Away: {away_team.full_name}")
        print()

        result = GameSimulator().simulate(home_team, away_team, seed=args.seed)
        for play in result.log:
            if play.is_scoring:
                print(f"  Q{play.quarter} {play.description} ({play.scoring_type.value})")
        print()
        print(f"Final Score: {away_team.abbreviation} {result.score_away} - {home_team.abbreviation} {result.score_home}")
        print(f"Seed: {result.seed}")
        return

    from gridiron.generators import generate_league_with_schedule
    from gridiron.simulation import SeasonSimulator, WorkerBridge

    try:
        league = generate_league_with_schedule(
            num_teams=args.teams,
            weeks=args.weeks,
            meetings=args.meetings,
            seed=args.seed,
        )
    except SchedulingInfeasible as e:
        print(f"Cannot build a schedule: {e}", file=sys.stderr)
        for error in e.errors[:10]:
            print(f"  {error}", file=sys.stderr)
        sys.exit(2)

    print(league)
    bridge = WorkerBridge() if args.worker else None
    simulator = SeasonSimulator(league, bridge=bridge, seed=args.seed)
    simulator.on_week_complete(lambda week_result: print(week_result))
    try:
        if args.through_week is not None:
            simulator.simulate_to_week(args.through_week)
        else:
            simulator.simulate_remaining_season()
    finally:
        if bridge is not None:
            bridge.shutdown()

    print()
    print("Standings")
    print("=" * 50)
    for row in simulator.get_standings_summary():
        print(
            f"{row['rank']:>2}. {row['abbreviation']:<4} {row['record']:<8} "
            f"PF {row['points_for']:>4}  PA {row['points_against']:>4}  {row['point_diff']:+d}"
        )

    if args.save:
        league.save(args.save)
        print(f"\nSaved league to {args.save}")


if __name__ == "__main__":
    main()
