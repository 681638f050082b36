# src/usdnis/app.py
"""
Application Entry Point - Command-line Interface

This module serves as the composition root for the usdnis CLI.
It parses arguments, wires the resolver and prints the converted amounts.

  $ usdnis 2021-12-19 100 10
  2021-12-17 (3.115): 311.50 31.15

Files that USE this module:
- usdnis.__main__ (python -m usdnis)
- pyproject.toml (console script "usdnis")
- tests.test_app (unit tests)

Files that this module USES:
- usdnis.shared.logging_conf (setup_logging for logging configuration)
- usdnis.shared.validators (parse_date, parse_amount argument types)
- usdnis.config (settings for defaults)
- usdnis.application.rates_service (RateResolver)
- usdnis.adapters.formatting.formatter (format_conversion)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import argparse  # Command-line argument parsing
import logging  # Standard library for logging messages and errors
import sys  # Standard streams and exit codes
from typing import List, Optional, Sequence  # Type hints

from usdnis import __version__
from usdnis.adapters.formatting.formatter import format_conversion
from usdnis.application.rates_service import STRATEGIES, RateResolver
from usdnis.config import settings
from usdnis.config.settings import MAX_LOOKBACK_DAYS
from usdnis.domain.errors import DomainError
from usdnis.shared.logging_conf import setup_logging
from usdnis.shared.validators import parse_amount, parse_date

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _date_arg(value: str):
    try:
        return parse_date(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _amount_arg(value: str) -> float:
    try:
        return parse_amount(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _lookback_days_arg(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of days {value!r}")
    if not 1 <= number <= MAX_LOOKBACK_DAYS:
        raise argparse.ArgumentTypeError(f"number of days must be between 1 and {MAX_LOOKBACK_DAYS}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="usdnis",
        description="Convert from USD to NIS on a specified date.",
    )
    parser.add_argument("date", type=_date_arg, help="Conversion date (YYYY-MM-DD)")
    # nargs="+" makes argparse reject a call without amounts before any lookup
    parser.add_argument("amounts", metavar="USD", type=_amount_arg, nargs="+", help="USD amounts to convert")
    parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default=settings.strategy,
        help="Query one day at a time (daily) or the whole lookback window at once (range). "
             "Default: %(default)s",
    )
    parser.add_argument(
        "--lookback-days",
        type=_lookback_days_arg,
        default=settings.lookback_days,
        help="How many days to search backwards for a published rate. Default: %(default)s",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run a conversion.

    Args:
        argv: Command-line arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit code (usage errors exit through argparse with code 2)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else settings.log_level,
        log_file=settings.log_file,
    )

    amounts: List[float] = args.amounts
    try:
        with RateResolver(strategy=args.strategy, lookback_days=args.lookback_days) as resolver:
            resolution = resolver.resolve(args.date)
    except DomainError as e:
        log.debug("Conversion failed", exc_info=True)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(format_conversion(resolution, amounts))
    return EXIT_OK


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
