"""Tests for the movable feast calculator."""
from datetime import date, timedelta

import pytest

from holidaygraph import computus
from holidaygraph.computus import FEAST_OFFSETS, easter_sunday, movable_feasts


# ---------------------------------------------------------------------------
# Easter Sunday
# ---------------------------------------------------------------------------

class TestEasterSunday:
    @pytest.mark.parametrize("year,expected", [
        (1818, date(1818, 3, 22)),
        (1943, date(1943, 4, 25)),
        (2000, date(2000, 4, 23)),
        (2011, date(2011, 4, 24)),
        (2016, date(2016, 3, 27)),
        (2019, date(2019, 4, 21)),
        (2024, date(2024, 3, 31)),
        (2025, date(2025, 4, 20)),
        (2038, date(2038, 4, 25)),
        (2285, date(2285, 3, 22)),
    ])
    def test_known_dates(self, year, expected):
        assert easter_sunday(year) == expected

    def test_always_a_sunday_in_gregorian_range(self):
        for year in range(1583, 10000):
            assert easter_sunday(year).weekday() == 6, year

    def test_between_march_22_and_april_25(self):
        for year in range(1583, 10000):
            easter = easter_sunday(year)
            assert date(year, 3, 22) <= easter <= date(year, 4, 25), year

    def test_years_before_gregorian_reform_still_produce_a_date(self):
        assert isinstance(easter_sunday(1000), date)
        assert easter_sunday(1000).year == 1000


# ---------------------------------------------------------------------------
# Derived feasts
# ---------------------------------------------------------------------------

class TestDerivedFeasts:
    @pytest.mark.parametrize("feast,offset", [
        ("ash_wednesday", -46),
        ("palm_sunday", -7),
        ("maundy_thursday", -3),
        ("good_friday", -2),
        ("easter_monday", 1),
        ("ascension_day", 39),
        ("pentecost", 49),
        ("pentecost_monday", 50),
        ("trinity_sunday", 56),
        ("corpus_christi", 60),
    ])
    def test_offset_from_easter(self, feast, offset):
        func = getattr(computus, feast)
        for year in (1583, 1900, 2024, 2025, 4099, 9999):
            assert func(year) == easter_sunday(year) + timedelta(days=offset)
        assert FEAST_OFFSETS[feast] == offset

    def test_weekdays_2024(self):
        assert computus.ash_wednesday(2024) == date(2024, 2, 14)
        assert computus.good_friday(2024) == date(2024, 3, 29)
        assert computus.ascension_day(2024) == date(2024, 5, 9)
        assert computus.pentecost_monday(2024) == date(2024, 5, 20)
        assert computus.corpus_christi(2024) == date(2024, 5, 30)

    def test_derived_feasts_keep_their_weekday(self):
        for year in range(1583, 3000):
            assert computus.ash_wednesday(year).weekday() == 2
            assert computus.maundy_thursday(year).weekday() == 3
            assert computus.good_friday(year).weekday() == 4
            assert computus.easter_monday(year).weekday() == 0
            assert computus.ascension_day(year).weekday() == 3
            assert computus.corpus_christi(year).weekday() == 3

    def test_movable_feasts_table(self):
        feasts = movable_feasts(2025)
        assert set(feasts) == set(FEAST_OFFSETS)
        assert feasts["easter"] == date(2025, 4, 20)
        assert feasts["pentecost"] == date(2025, 6, 8)
        assert feasts["trinity_sunday"] == date(2025, 6, 15)
