import argparse
import sys
from datetime import date, datetime

from squad_capacity.capacity.capacity_usecase import compute_capacity
from squad_capacity.capacity.errors import CapacityError
from squad_capacity.planning.sprint_capacity import compute_sprint_capacity
from squad_capacity.presentation.console import render_squad_capacity
from squad_capacity.utils.logger import get_logger

logger = get_logger(__name__)


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date (expected YYYY-MM-DD): {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Squad capacity report (hours available per member and day)"
    )

    parser.add_argument(
        "--squad",
        type=int,
        required=True,
        help="Squad id.",
    )

    parser.add_argument(
        "--start",
        type=_parse_date,
        default=None,
        help="First day (YYYY-MM-DD). Defaults to today.",
    )

    parser.add_argument(
        "--end",
        type=_parse_date,
        default=None,
        help="Last day, inclusive (YYYY-MM-DD). Defaults to --start.",
    )

    parser.add_argument(
        "--sprint",
        action="store_true",
        help="Treat --start as a sprint start (Monday) and report the 14-day sprint.",
    )

    parser.add_argument(
        "--detail",
        action="store_true",
        help="Show the per-day grid for every member.",
    )

    return parser


def main(argv=None, repository=None) -> int:
    args = build_parser().parse_args(argv)

    start = args.start or date.today()

    try:
        if args.sprint:
            result = compute_sprint_capacity(args.squad, start, repository=repository)
        else:
            end = args.end or start
            result = compute_capacity(args.squad, start, end, repository=repository)
    except CapacityError as e:
        logger.error("%s", e)
        return 2

    print(render_squad_capacity(result, detail=args.detail))
    return 0


if __name__ == "__main__":
    sys.exit(main())
