"""Command-line interface."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from seatchart.core.errors import SeatChartError
from seatchart.core.ledger import SeatLedger

from . import driver, parser
from .logging_config import configure_logging

DEFAULT_ROWS = 3
DEFAULT_COLUMNS = 11
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Reserve seats and seat groups as close to the front center as possible")
    ap.add_argument("input", nargs="?", default="-", help="Session input file, '-' for stdin")
    ap.add_argument("--venue", type=Path, default=None, help="YAML venue file (replaces input, --rows and --columns)")
    ap.add_argument("--rows", type=int, default=DEFAULT_ROWS)
    ap.add_argument("--columns", type=int, default=DEFAULT_COLUMNS)
    ap.add_argument("--show-chart", action="store_true", help="Print the seating chart after the session")
    ap.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    args = ap.parse_args(argv)

    configure_logging(args.log_level)

    try:
        if args.venue is not None:
            venue = parser.load_venue(args.venue)
            ledger = SeatLedger(venue.rows, venue.columns)
            driver.run_session(ledger, driver.venue_lines(venue), sys.stdout)
        else:
            ledger = SeatLedger(args.rows, args.columns)
            if args.input == "-":
                driver.run_session(ledger, sys.stdin, sys.stdout)
            else:
                with open(args.input, "r", encoding="utf-8") as f:
                    driver.run_session(ledger, f, sys.stdout)
    except (SeatChartError, parser.InvalidVenue, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.show_chart:
        print(ledger.render(), end="")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
