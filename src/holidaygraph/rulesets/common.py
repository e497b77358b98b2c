"""
Secular holidays and observances shared by many jurisdictions.
"""
from __future__ import annotations

from datetime import date, timedelta

from ..holiday import Holiday, HolidayType
from . import fixed_holiday


def _nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """Get the nth occurrence of a weekday in a month."""
    first_day = date(year, month, 1)
    days_until_weekday = (weekday - first_day.weekday()) % 7
    first_occurrence = first_day + timedelta(days=days_until_weekday)
    return first_occurrence + timedelta(weeks=n - 1)


def new_years_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("new_years_day", year, 1, 1, timezone, locale, type)


def valentines_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.OTHER) -> Holiday:
    return fixed_holiday("valentines_day", year, 2, 14, timezone, locale, type)


def international_womens_day(
    year: int, timezone: str, locale: str, type: HolidayType = HolidayType.OBSERVANCE
) -> Holiday:
    return fixed_holiday("international_womens_day", year, 3, 8, timezone, locale, type)


def international_workers_day(
    year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL
) -> Holiday:
    return fixed_holiday("international_workers_day", year, 5, 1, timezone, locale, type)


def victory_in_europe_day(
    year: int, timezone: str, locale: str, type: HolidayType = HolidayType.OBSERVANCE
) -> Holiday:
    return fixed_holiday("victory_in_europe_day", year, 5, 8, timezone, locale, type)


def mothers_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.OBSERVANCE) -> Holiday:
    """Second Sunday of May."""
    return Holiday(
        key="mothers_day",
        date=_nth_weekday_of_month(year, 5, 6, 2),
        locale=locale,
        type=type,
        timezone=timezone,
    )


def world_animal_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.OBSERVANCE) -> Holiday:
    return fixed_holiday("world_animal_day", year, 10, 4, timezone, locale, type)


def st_martins_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.OBSERVANCE) -> Holiday:
    return fixed_holiday("st_martins_day", year, 11, 11, timezone, locale, type)


def armistice_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("armistice_day", year, 11, 11, timezone, locale, type)


def new_years_eve(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.OBSERVANCE) -> Holiday:
    return fixed_holiday("new_years_eve", year, 12, 31, timezone, locale, type)


__all__ = [
    "new_years_day",
    "valentines_day",
    "international_womens_day",
    "international_workers_day",
    "victory_in_europe_day",
    "mothers_day",
    "world_animal_day",
    "st_martins_day",
    "armistice_day",
    "new_years_eve",
]
