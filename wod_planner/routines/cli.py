# wod_planner/routines/cli.py
import argparse
import sys

from wod_planner.config import DEFAULT_MOVEMENTS_FILE, default_history_days
from wod_planner.data.loader import load_history, load_profile, save_json
from wod_planner.errors import PlannerError
from wod_planner.routines.render import plan_to_json, render_text
from wod_planner.routines.wod_generator import WodGenerator


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description='Generate a personalized WOD from an athlete profile and recent history'
    )

    # Inputs
    parser.add_argument('--profile-file', required=True, help='Path to athlete profile JSON')
    parser.add_argument('--history-file', help='Path to recent workout history JSON')
    parser.add_argument('--movements-file', default=DEFAULT_MOVEMENTS_FILE,
                        help='Path to movement library JSON')
    parser.add_argument('--history-days', type=int, default=default_history_days(),
                        help='How many days of history to weigh for fatigue (default: 2)')
    parser.add_argument('--seed', type=int, help='Random seed; default is current date (YYYYMMDD)')

    # Output options
    parser.add_argument('--format', choices=['text', 'json'], default='text', help='Output format')
    parser.add_argument('--output', type=str, help='Output file path to save the plan (JSON)')
    parser.add_argument('--verbose', action='store_true', help='Print progress to stderr')

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main function to run the CLI WOD generator"""
    args = parse_args(argv)

    try:
        raw_profile = load_profile(args.profile_file)
        history = load_history(args.history_file)

        generator = WodGenerator(movements_path=args.movements_file, verbose=args.verbose)
        plan = generator.generate_plan(
            raw_profile,
            history=history,
            lookback_days=args.history_days,
            seed=args.seed
        )

        if args.output:
            save_json(plan, args.output)
            if args.verbose:
                print(f"Plan saved to {args.output}", file=sys.stderr)
    except PlannerError as e:
        print(e.message, file=sys.stderr)
        return 1

    if args.format == 'json':
        print(plan_to_json(plan))
    else:
        print(render_text(plan))

    return 0


if __name__ == "__main__":
    sys.exit(main())
