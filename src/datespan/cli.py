# cli.py
import argparse
import logging

from .config import DEFAULT_END, parse_time_point, resolve_demo_points
from .dateutils import full_days_between, full_weeks_between
from .formatters import print_summary


def _time_point_arg(text: str):
    try:
        return parse_time_point(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 date or date-time: {text!r}") from e


# ----------------------------------------------------------------
# CLI entry point
# ----------------------------------------------------------------
def main(argv=None):
    ap = argparse.ArgumentParser(description="Print full days and full weeks between two time points")
    ap.add_argument("--start", type=_time_point_arg, default=None,
                    help="Start point, ISO-8601 (default: now)")
    ap.add_argument("--end", type=_time_point_arg, default=None,
                    help=f"End point, ISO-8601 (default: {DEFAULT_END.isoformat()})")
    ap.add_argument("--verbose", action="store_true", help="Show point representations and debug log")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    start, end = resolve_demo_points(args.start, args.end)

    # library errors are not caught here
    days = full_days_between(start, end)
    weeks = full_weeks_between(start, end)

    print_summary(start, end, days, weeks, verbose=args.verbose)


if __name__ == "__main__":
    main()
