"""
Movable Feast Calculator

Easter Sunday is computed with the Anonymous Gregorian algorithm
(Meeus/Jones/Butcher). Every other movable feast is a fixed day offset
from Easter Sunday.

The algorithm is only meaningful for the Gregorian calendar (1583 onwards)
but returns a date for any year the host ``date`` type supports.
"""
from __future__ import annotations

from datetime import date, timedelta

# Days relative to Easter Sunday
FEAST_OFFSETS: dict[str, int] = {
    "ash_wednesday": -46,
    "palm_sunday": -7,
    "maundy_thursday": -3,
    "good_friday": -2,
    "easter": 0,
    "easter_monday": 1,
    "ascension_day": 39,
    "pentecost": 49,
    "pentecost_monday": 50,
    "trinity_sunday": 56,
    "corpus_christi": 60,
}


def easter_sunday(year: int) -> date:
    """Return the Gregorian Easter Sunday for *year*."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def _offset(year: int, feast: str) -> date:
    return easter_sunday(year) + timedelta(days=FEAST_OFFSETS[feast])


def ash_wednesday(year: int) -> date:
    return _offset(year, "ash_wednesday")


def palm_sunday(year: int) -> date:
    return _offset(year, "palm_sunday")


def maundy_thursday(year: int) -> date:
    return _offset(year, "maundy_thursday")


def good_friday(year: int) -> date:
    return _offset(year, "good_friday")


def easter_monday(year: int) -> date:
    return _offset(year, "easter_monday")


def ascension_day(year: int) -> date:
    return _offset(year, "ascension_day")


def pentecost(year: int) -> date:
    """Whit Sunday."""
    return _offset(year, "pentecost")


def pentecost_monday(year: int) -> date:
    """Whit Monday."""
    return _offset(year, "pentecost_monday")


def trinity_sunday(year: int) -> date:
    return _offset(year, "trinity_sunday")


def corpus_christi(year: int) -> date:
    return _offset(year, "corpus_christi")


def movable_feasts(year: int) -> dict[str, date]:
    """Return every movable feast of *year* keyed by feast name."""
    easter = easter_sunday(year)
    return {
        feast: easter + timedelta(days=offset)
        for feast, offset in FEAST_OFFSETS.items()
    }


__all__ = [
    "FEAST_OFFSETS",
    "easter_sunday",
    "ash_wednesday",
    "palm_sunday",
    "maundy_thursday",
    "good_friday",
    "easter_monday",
    "ascension_day",
    "pentecost",
    "pentecost_monday",
    "trinity_sunday",
    "corpus_christi",
    "movable_feasts",
]
