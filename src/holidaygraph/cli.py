#!/usr/bin/env python3
"""
HolidayGraph CLI

Command-line interface for listing holidays and stepping over working days.

Usage:
    holidaygraph list --provider Spain/Andalusia --year 2024 --locale es_ES
    holidaygraph list --provider DE-BY --year 2024 --type national --json
    holidaygraph next-working-day --provider Germany --date 2024-12-23 --days 3
    holidaygraph prev-working-day --provider Italy --date 2025-01-07
    holidaygraph providers
    holidaygraph locales

Exit Codes:
    0   OK              - Command succeeded
    10  INPUT_INVALID   - Unknown provider/locale, bad year, date or count
    11  DATA_ERROR      - Translation tables or locale catalog unreadable
    20  INTERNAL_ERROR  - Unexpected internal error
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from typing import Optional, Sequence

from .exceptions import HolidayGraphError, TranslationLoadError
from .holiday import HolidayType
from .logging_config import configure_logging
from .registry import REGISTRY
from .workdays import Direction, advance

logger = logging.getLogger(__name__)


# ============================================================================
# EXIT CODES
# ============================================================================

class ExitCode:
    """Deterministic exit codes for scripting."""
    OK = 0
    INPUT_INVALID = 10
    DATA_ERROR = 11
    INTERNAL_ERROR = 20


# ============================================================================
# OUTPUT FORMATTING
# ============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    BOLD = '\033[1m'
    CYAN = '\033[96m'
    RED = '\033[91m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        cls.BOLD = ''
        cls.CYAN = ''
        cls.RED = ''
        cls.END = ''


def print_header(text: str):
    print(f"{Colors.BOLD}{Colors.CYAN}{text}{Colors.END}")


def print_error(text: str):
    print(f"{Colors.RED}[ERROR] {text}{Colors.END}", file=sys.stderr)


def print_kv(key: str, value: str, indent: int = 0):
    spaces = "  " * indent
    print(f"{spaces}{Colors.BOLD}{key}:{Colors.END} {value}")


def _parse_date(date_str: str) -> date:
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{date_str}', expected YYYY-MM-DD")


# ============================================================================
# COMMANDS
# ============================================================================

def cmd_list(args) -> int:
    provider = REGISTRY.create(args.provider, args.year, args.locale)
    holidays = provider.get_holidays()
    if args.type:
        holidays = provider.get_holidays_by_type(HolidayType(args.type))

    if args.json:
        print(json.dumps([h.to_dict() for h in holidays], indent=2, ensure_ascii=False))
        return ExitCode.OK

    print_header(f"{provider.name} ({provider.id}) {provider.year}")
    for holiday in holidays:
        print_kv(holiday.date.isoformat(), f"{holiday.name} [{holiday.type.value}]", indent=1)
    return ExitCode.OK


def _cmd_step(args, direction: Direction) -> int:
    result = advance(args.provider, args.date, args.days, direction, args.locale)
    print(result.isoformat())
    return ExitCode.OK


def cmd_next_working_day(args) -> int:
    return _cmd_step(args, Direction.NEXT)


def cmd_prev_working_day(args) -> int:
    return _cmd_step(args, Direction.PREV)


def cmd_providers(args) -> int:
    for code, name in sorted(REGISTRY.get_providers().items()):
        print_kv(code, name)
    return ExitCode.OK


def cmd_locales(args) -> int:
    for locale in REGISTRY.get_available_locales():
        print(locale)
    return ExitCode.OK


# ============================================================================
# ENTRY POINT
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holidaygraph",
        description="Holidays and working days per jurisdiction",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--log-level", help="Log level (default: HOLIDAYGRAPH_LOG_LEVEL)")
    parser.add_argument("--log-format", choices=["text", "json"], help="Log format")
    subparsers = parser.add_subparsers(dest="command")

    # list
    list_parser = subparsers.add_parser("list", help="List the holidays of a provider")
    list_parser.add_argument("--provider", "-p", required=True, help="Provider identifier or ISO code")
    list_parser.add_argument("--year", "-y", type=int, required=True, help="Year (1000-9999)")
    list_parser.add_argument("--locale", "-l", help="Locale for holiday names")
    list_parser.add_argument("--type", "-t", choices=[t.value for t in HolidayType],
                             help="Only holidays of this type")
    list_parser.add_argument("--json", action="store_true", help="Print JSON")
    list_parser.set_defaults(func=cmd_list)

    # next-working-day / prev-working-day
    for command, func, help_text in (
        ("next-working-day", cmd_next_working_day, "Date N working days after a date"),
        ("prev-working-day", cmd_prev_working_day, "Date N working days before a date"),
    ):
        step_parser = subparsers.add_parser(command, help=help_text)
        step_parser.add_argument("--provider", "-p", required=True, help="Provider identifier or ISO code")
        step_parser.add_argument("--date", "-d", type=_parse_date, required=True, help="Start date (YYYY-MM-DD)")
        step_parser.add_argument("--days", "-n", type=int, default=1, help="Working days to move (default: 1)")
        step_parser.add_argument("--locale", "-l", help="Locale")
        step_parser.set_defaults(func=func)

    # providers
    providers_parser = subparsers.add_parser("providers", help="List available providers")
    providers_parser.set_defaults(func=cmd_providers)

    # locales
    locales_parser = subparsers.add_parser("locales", help="List available locales")
    locales_parser.set_defaults(func=cmd_locales)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.no_color or not sys.stdout.isatty():
        Colors.disable()
    configure_logging(args.log_level, args.log_format)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except TranslationLoadError as e:
        print_error(str(e))
        return ExitCode.DATA_ERROR
    except HolidayGraphError as e:
        print_error(str(e))
        return ExitCode.INPUT_INVALID
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        return ExitCode.INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
