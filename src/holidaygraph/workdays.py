"""
Working-Day Cursor

Steps a date one day at a time and counts the days the jurisdiction works.
A provider only knows the holidays of its own year, so a fresh provider is
fetched from the registry every time the cursor crosses into another year.
"""
from __future__ import annotations

from datetime import date, timedelta
from enum import IntEnum
from typing import Optional, TypeVar, Union

from .exceptions import InvalidArgumentError, InvalidYearError
from .providers.base import HolidayProvider
from .registry import REGISTRY, Registry

DateT = TypeVar("DateT", bound=date)


class Direction(IntEnum):
    """Step applied to the cursor on each iteration."""
    PREV = -1
    NEXT = 1


def _parse_direction(direction: Union[Direction, str, int]) -> Direction:
    if isinstance(direction, str):
        try:
            return Direction[direction.upper()]
        except KeyError:
            pass
    elif isinstance(direction, int) and not isinstance(direction, bool):
        try:
            return Direction(direction)
        except ValueError:
            pass
    raise InvalidArgumentError(
        message=f"Direction must be 'next' or 'prev' ({direction!r} given).",
        details={"direction": repr(direction)},
    )


def _check_arguments(start_date: object, working_days: object) -> None:
    if not isinstance(start_date, date):
        raise InvalidArgumentError(
            message=f"Bad parameter, date expected ({type(start_date).__name__} given).",
            details={"start_date": repr(start_date)},
        )
    if isinstance(working_days, bool) or not isinstance(working_days, int):
        raise InvalidArgumentError(
            message=f"Working days must be an integer ({working_days!r} given).",
            details={"working_days": repr(working_days)},
        )
    if working_days < 0:
        raise InvalidArgumentError(
            message=f"Working days must not be negative ({working_days} given).",
            details={"working_days": working_days},
        )


def _step(current: DateT, step: timedelta) -> DateT:
    try:
        return current + step
    except OverflowError:
        raise InvalidYearError(
            message=f"Stepping past {current.isoformat()} leaves the supported date range.",
            details={"date": current.isoformat(), "step_days": step.days},
        ) from None


def advance(
    identifier: str,
    start_date: DateT,
    working_days: int,
    direction: Union[Direction, str, int] = Direction.NEXT,
    locale: Optional[str] = None,
    registry: Optional[Registry] = None,
) -> DateT:
    """
    Move *working_days* working days away from *start_date*.

    The start date itself is never counted. ``datetime`` values keep their
    time of day; the caller's value is not modified.

    Raises:
        InvalidArgumentError: On a non-date start, a negative or non-integer
            count, or an unknown direction
        InvalidYearError: When the cursor leaves the supported years
        UnknownProviderError / UnknownLocaleError: From the registry
    """
    _check_arguments(start_date, working_days)
    step = timedelta(days=_parse_direction(direction))
    registry = registry or REGISTRY

    current = start_date
    remaining = working_days
    provider: Optional[HolidayProvider] = None

    while remaining > 0:
        current = _step(current, step)
        if provider is None or provider.year != current.year:
            provider = registry.create(identifier, current.year, locale)
        if provider.is_working_day(current):
            remaining -= 1

    return current


def next_working_day(
    identifier: str,
    start_date: DateT,
    working_days: int = 1,
    locale: Optional[str] = None,
    registry: Optional[Registry] = None,
) -> DateT:
    return advance(identifier, start_date, working_days, Direction.NEXT, locale, registry)


def prev_working_day(
    identifier: str,
    start_date: DateT,
    working_days: int = 1,
    locale: Optional[str] = None,
    registry: Optional[Registry] = None,
) -> DateT:
    return advance(identifier, start_date, working_days, Direction.PREV, locale, registry)


def working_days_between(
    identifier: str,
    start: date,
    end: date,
    locale: Optional[str] = None,
    registry: Optional[Registry] = None,
) -> int:
    """Count working days between two dates (start exclusive, end inclusive)."""
    _check_arguments(start, 0)
    _check_arguments(end, 0)
    if start >= end:
        return 0
    registry = registry or REGISTRY

    count = 0
    current = start
    provider: Optional[HolidayProvider] = None
    while current < end:
        current = _step(current, timedelta(days=1))
        if provider is None or provider.year != current.year:
            provider = registry.create(identifier, current.year, locale)
        if provider.is_working_day(current):
            count += 1
    return count


__all__ = [
    "Direction",
    "advance",
    "next_working_day",
    "prev_working_day",
    "working_days_between",
]
