from __future__ import annotations

import argparse
import logging
import sys

from .logger import setup_logging
from .services.month_presenter import describe, describe_error
from .services.month_resolver import MonthQuery, MonthResolutionError, resolve_query, resolve_year

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def _prompt_query() -> MonthQuery:
    name = input("Enter a month: ")
    year_text = input("Enter a year (blank for none): ").strip()
    # A blank answer means the user skipped the year.
    return MonthQuery(name=name, year=year_text or None)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="Tell how many days a month has, optionally for a given year."
    )
    ap.add_argument("month", nargs="?", default=None, help="English month name, any case (prompted when omitted)")
    ap.add_argument("--year", default=None, help="Year used for the february leap-year rule")
    ap.add_argument("--all", action="store_true", help="Print every month for --year instead of one")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )

    args = ap.parse_args(argv)
    setup_logging(args.log_level, stream=sys.stderr)

    try:
        if args.all:
            for result in resolve_year(args.year):
                print(describe(result))
            return 0

        if args.month is None:
            query = _prompt_query()
        else:
            query = MonthQuery(name=args.month, year=args.year)

        result = resolve_query(query)
    except MonthResolutionError as exc:
        logger.warning("Rejected input: %s", exc)
        print(describe_error(exc), file=sys.stderr)
        return EXIT_INVALID_INPUT

    logger.debug("Resolved %s -> %d days", result.canonical_name, result.day_count)
    print(describe(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
