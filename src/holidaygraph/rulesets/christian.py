"""
Christian holidays shared by many jurisdictions.

Movable feasts are derived from Easter Sunday (see ``holidaygraph.computus``);
the rest fall on fixed days. Names come from the translation tables.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Callable

from .. import computus
from ..holiday import Holiday, HolidayType
from . import fixed_holiday


def _movable(
    key: str,
    feast: Callable[[int], date],
    year: int,
    timezone: str,
    locale: str,
    type: HolidayType,
) -> Holiday:
    return Holiday(key=key, date=feast(year), locale=locale, type=type, timezone=timezone)


# -----------------------------------------------------------------------------
# Movable feasts
# -----------------------------------------------------------------------------

def easter(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return _movable("easter", computus.easter_sunday, year, timezone, locale, type)


def easter_monday(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return _movable("easter_monday", computus.easter_monday, year, timezone, locale, type)


def ash_wednesday(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return _movable("ash_wednesday", computus.ash_wednesday, year, timezone, locale, type)


def palm_sunday(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return _movable("palm_sunday", computus.palm_sunday, year, timezone, locale, type)


def maundy_thursday(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return _movable("maundy_thursday", computus.maundy_thursday, year, timezone, locale, type)


def good_friday(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return _movable("good_friday", computus.good_friday, year, timezone, locale, type)


def ascension_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return _movable("ascension_day", computus.ascension_day, year, timezone, locale, type)


def pentecost(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return _movable("pentecost", computus.pentecost, year, timezone, locale, type)


def pentecost_monday(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return _movable("pentecost_monday", computus.pentecost_monday, year, timezone, locale, type)


def trinity_sunday(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return _movable("trinity_sunday", computus.trinity_sunday, year, timezone, locale, type)


def corpus_christi(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return _movable("corpus_christi", computus.corpus_christi, year, timezone, locale, type)


# -----------------------------------------------------------------------------
# Fixed feasts
# -----------------------------------------------------------------------------

def epiphany(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("epiphany", year, 1, 6, timezone, locale, type)


def st_josephs_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("st_josephs_day", year, 3, 19, timezone, locale, type)


def st_georges_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("st_georges_day", year, 4, 23, timezone, locale, type)


def st_johns_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("st_johns_day", year, 6, 24, timezone, locale, type)


def assumption_of_mary(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("assumption_of_mary", year, 8, 15, timezone, locale, type)


def reformation_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("reformation_day", year, 10, 31, timezone, locale, type)


def all_saints_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("all_saints_day", year, 11, 1, timezone, locale, type)


def all_souls_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("all_souls_day", year, 11, 2, timezone, locale, type)


def immaculate_conception(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("immaculate_conception", year, 12, 8, timezone, locale, type)


def christmas_eve(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.OBSERVANCE) -> Holiday:
    return fixed_holiday("christmas_eve", year, 12, 24, timezone, locale, type)


def christmas_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("christmas_day", year, 12, 25, timezone, locale, type)


def second_christmas_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    """December 26 under its German/Dutch name."""
    return fixed_holiday("second_christmas_day", year, 12, 26, timezone, locale, type)


def st_stephens_day(year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL) -> Holiday:
    return fixed_holiday("st_stephens_day", year, 12, 26, timezone, locale, type)


def repentance_and_prayer_day(
    year: int, timezone: str, locale: str, type: HolidayType = HolidayType.NATIONAL
) -> Holiday:
    """Wednesday before November 23."""
    anchor = date(year, 11, 22)
    offset = (anchor.weekday() - 2) % 7
    return Holiday(
        key="repentance_and_prayer_day",
        date=anchor - timedelta(days=offset),
        locale=locale,
        type=type,
        timezone=timezone,
    )


__all__ = [
    "easter",
    "easter_monday",
    "ash_wednesday",
    "palm_sunday",
    "maundy_thursday",
    "good_friday",
    "ascension_day",
    "pentecost",
    "pentecost_monday",
    "trinity_sunday",
    "corpus_christi",
    "epiphany",
    "st_josephs_day",
    "st_georges_day",
    "st_johns_day",
    "assumption_of_mary",
    "reformation_day",
    "all_saints_day",
    "all_souls_day",
    "immaculate_conception",
    "christmas_eve",
    "christmas_day",
    "second_christmas_day",
    "st_stephens_day",
    "repentance_and_prayer_day",
]
