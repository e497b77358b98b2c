"""
HolidayGraph Rule-sets

Reusable, jurisdiction-agnostic holiday rules. Every rule is a plain
function with the same shape::

    rule(year, timezone, locale, type=HolidayType.NATIONAL) -> Holiday

Providers invoke rules explicitly, by name, in their ``rules`` list.
"""
from __future__ import annotations

from datetime import date
from typing import Protocol

from ..holiday import Holiday, HolidayType


class HolidayRule(Protocol):
    """Capability interface implemented by every rule-set function."""

    __name__: str

    def __call__(
        self,
        year: int,
        timezone: str,
        locale: str,
        type: HolidayType = HolidayType.NATIONAL,
    ) -> Holiday:
        ...


def fixed_holiday(
    key: str,
    year: int,
    month: int,
    day: int,
    timezone: str,
    locale: str,
    type: HolidayType = HolidayType.NATIONAL,
) -> Holiday:
    """Build a holiday that falls on the same calendar day every year."""
    return Holiday(
        key=key,
        date=date(year, month, day),
        locale=locale,
        type=type,
        timezone=timezone,
    )


__all__ = [
    "HolidayRule",
    "fixed_holiday",
]
