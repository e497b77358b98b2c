"""
Tests for the provider composition engine.

Uses synthetic jurisdictions so that composition order, overriding and the
working-day policy can be checked independently of real holiday data.
"""
from datetime import date, datetime

import pytest

from conftest import fixed_routine, make_jurisdiction

from holidaygraph.exceptions import InvalidYearError
from holidaygraph.holiday import HolidayType, WorkingDayPolicy
from holidaygraph.providers.base import HolidayProvider, RuleCall, validate_year
from holidaygraph.rulesets import christian, common


def drop(key):
    def routine(provider):
        provider.remove_holiday(key)
    return routine


# =============================================================================
# Year Validation
# =============================================================================

class TestValidateYear:

    @pytest.mark.parametrize("year", [1000, 2024, 9999])
    def test_valid(self, year):
        assert validate_year(year) == year

    @pytest.mark.parametrize("year", [999, 0, -5, 10000])
    def test_out_of_range(self, year):
        with pytest.raises(InvalidYearError, match="between 1000 and 9999"):
            validate_year(year)

    @pytest.mark.parametrize("year", ["2024", 2024.0, None, True])
    def test_not_an_integer(self, year):
        with pytest.raises(InvalidYearError, match="integer"):
            validate_year(year)


# =============================================================================
# Jurisdiction
# =============================================================================

class TestJurisdiction:

    def test_id_upper_cased(self):
        assert make_jurisdiction(id="tl").id == "TL"

    def test_root_needs_timezone(self):
        from holidaygraph.providers.base import Jurisdiction
        with pytest.raises(ValueError, match="timezone"):
            Jurisdiction(id="XX", name="Nowhere")

    def test_inherits_timezone_and_policy(self, testland):
        policy = WorkingDayPolicy(weekend_days={4, 5})
        country = make_jurisdiction(timezone="Asia/Jerusalem", policy=policy)
        region = make_jurisdiction(id="TL-NH", name="Testland/North", parent=country)
        assert region.resolved_timezone == "Asia/Jerusalem"
        assert region.resolved_policy is policy

    def test_own_timezone_wins(self, testland):
        region = make_jurisdiction(id="TL-NH", parent=testland, timezone="Europe/Brussels")
        assert region.resolved_timezone == "Europe/Brussels"

    def test_chain_root_first(self, testland):
        region = make_jurisdiction(id="TL-NH", parent=testland)
        city = make_jurisdiction(id="TL-NH1", parent=region)
        assert [j.id for j in city.chain()] == ["TL", "TL-NH", "TL-NH1"]


# =============================================================================
# Composition
# =============================================================================

class TestComposition:

    def test_rules_then_routines(self, testland):
        provider = HolidayProvider(testland, 2024)
        assert provider.get_holiday_names() == ["new_years_day", "second_new_years_day"]
        assert provider.timezone == "Europe/Amsterdam"

    def test_subdivision_includes_parent_holidays(self, testland):
        region = make_jurisdiction(
            id="TL-NH", name="Testland/North", parent=testland,
            rules=[RuleCall(christian.st_stephens_day)],
        )
        provider = HolidayProvider(region, 2024)
        assert set(provider.get_holiday_names()) == {
            "new_years_day", "second_new_years_day", "st_stephens_day",
        }
        assert all(h.provider_id == "TL-NH" for h in provider)

    def test_later_layer_overrides_by_key(self, testland):
        region = make_jurisdiction(
            id="TL-NH", parent=testland,
            routines=[fixed_routine("second_new_years_day", 1, 3, type=HolidayType.OBSERVANCE)],
        )
        provider = HolidayProvider(region, 2024)
        holiday = provider.get_holiday("second_new_years_day")
        assert holiday.date == date(2024, 1, 3)
        assert holiday.type == HolidayType.OBSERVANCE
        assert provider.count() == 2

    def test_override_within_layer(self):
        country = make_jurisdiction(routines=[
            fixed_routine("founders_day", 3, 1),
            fixed_routine("founders_day", 3, 2),
        ])
        provider = HolidayProvider(country, 2024)
        assert provider.get_holiday_dates() == {"founders_day": date(2024, 3, 2)}

    def test_routine_runs_after_rules_of_same_layer(self):
        country = make_jurisdiction(
            rules=[RuleCall(common.new_years_day)],
            routines=[fixed_routine("new_years_day", 1, 2)],
        )
        provider = HolidayProvider(country, 2024)
        assert provider.get_holiday("new_years_day").date == date(2024, 1, 2)

    def test_remove_parent_holiday(self, testland):
        region = make_jurisdiction(id="TL-NH", parent=testland, routines=[drop("second_new_years_day")])
        provider = HolidayProvider(region, 2024)
        assert provider.get_holiday_names() == ["new_years_day"]
        assert "second_new_years_day" in HolidayProvider(testland, 2024)

    def test_remove_missing_key_is_noop(self, testland):
        provider = HolidayProvider(make_jurisdiction(id="TL-NH", parent=testland, routines=[drop("nope")]), 2024)
        assert len(provider) == 2

    def test_rule_type_override(self):
        country = make_jurisdiction(rules=[RuleCall(christian.epiphany, HolidayType.OTHER)])
        assert HolidayProvider(country, 2024).get_holiday("epiphany").type == HolidayType.OTHER

    def test_rule_year_window(self):
        country = make_jurisdiction(rules=[RuleCall(christian.epiphany, since=2002, until=2010)])
        assert "epiphany" not in HolidayProvider(country, 2001)
        assert "epiphany" in HolidayProvider(country, 2002)
        assert "epiphany" in HolidayProvider(country, 2010)
        assert "epiphany" not in HolidayProvider(country, 2011)

    def test_holidays_carry_provider_state(self, testland):
        provider = HolidayProvider(testland, 2024, locale="nl_NL")
        holiday = provider.get_holiday("new_years_day")
        assert holiday.locale == "nl_NL"
        assert holiday.timezone == "Europe/Amsterdam"
        assert holiday.provider_id == "TL"

    def test_read_only_after_initialization(self, testland):
        provider = HolidayProvider(testland, 2024)
        with pytest.raises(RuntimeError, match="read-only"):
            provider.add_holiday(provider.new_holiday("extra", date(2024, 5, 5)))
        with pytest.raises(RuntimeError):
            provider.remove_holiday("new_years_day")
        assert len(provider) == 2


# =============================================================================
# Queries
# =============================================================================

class TestQueries:

    @pytest.fixture
    def provider(self):
        country = make_jurisdiction(
            rules=[
                RuleCall(common.new_years_day),
                RuleCall(common.valentines_day),
                RuleCall(christian.christmas_eve),
                RuleCall(christian.christmas_day),
            ],
            routines=[fixed_routine("bank_holiday", 12, 24, type=HolidayType.BANK)],
        )
        return HolidayProvider(country, 2024)

    def test_sorted_by_date_then_key(self, provider):
        assert provider.get_holiday_names() == [
            "new_years_day", "valentines_day", "bank_holiday", "christmas_eve", "christmas_day",
        ]
        assert [h.key for h in provider] == provider.get_holiday_names()

    def test_get_holiday_missing(self, provider):
        assert provider.get_holiday("easter") is None

    def test_get_holidays_on(self, provider):
        assert [h.key for h in provider.get_holidays_on(date(2024, 12, 24))] == [
            "bank_holiday", "christmas_eve",
        ]
        assert provider.get_holidays_on(datetime(2024, 1, 1, 9, 0))[0].key == "new_years_day"
        assert provider.get_holidays_on(date(2024, 3, 3)) == []

    def test_get_holidays_by_type(self, provider):
        assert [h.key for h in provider.get_holidays_by_type(HolidayType.OTHER)] == ["valentines_day"]
        assert [h.key for h in provider.get_holidays_by_type("observance")] == ["christmas_eve"]

    def test_between(self, provider):
        keys = [h.key for h in provider.between(date(2024, 1, 1), date(2024, 12, 24))]
        assert keys == ["new_years_day", "valentines_day", "bank_holiday", "christmas_eve"]
        keys = [h.key for h in provider.between(date(2024, 1, 1), date(2024, 12, 24), inclusive=False)]
        assert keys == ["valentines_day"]

    def test_between_reversed(self, provider):
        with pytest.raises(ValueError):
            provider.between(date(2024, 12, 31), date(2024, 1, 1))

    def test_count(self, provider):
        assert provider.count() == len(provider) == 5

    def test_repr(self, provider):
        assert repr(provider) == "HolidayProvider(id='TL', year=2024, locale='en_US', holidays=5)"


# =============================================================================
# Working Days
# =============================================================================

class TestWorkingDays:

    @pytest.fixture
    def provider(self):
        country = make_jurisdiction(
            rules=[
                RuleCall(common.new_years_day),
                RuleCall(christian.christmas_eve),
                RuleCall(christian.christmas_day),
            ],
            routines=[fixed_routine("bank_holiday", 8, 26, type=HolidayType.BANK)],
        )
        return HolidayProvider(country, 2024)

    def test_weekend(self, provider):
        assert provider.is_weekend_day(date(2024, 1, 6))
        assert provider.is_weekend_day(date(2024, 1, 7))
        assert not provider.is_weekend_day(date(2024, 1, 8))
        assert not provider.is_working_day(date(2024, 1, 6))

    def test_national_holiday_blocks_work(self, provider):
        assert provider.is_holiday(date(2024, 12, 25))
        assert not provider.is_working_day(date(2024, 12, 25))

    def test_bank_holiday_blocks_work(self, provider):
        assert not provider.is_working_day(date(2024, 8, 26))

    def test_observance_does_not_block_work(self, provider):
        assert provider.get_holidays_on(date(2024, 12, 24))
        assert not provider.is_holiday(date(2024, 12, 24))
        assert provider.is_working_day(date(2024, 12, 24))

    def test_plain_weekday(self, provider):
        assert provider.is_working_day(date(2024, 3, 5))
        assert provider.is_working_day(datetime(2024, 3, 5, 23, 59))

    def test_custom_policy(self):
        policy = WorkingDayPolicy(
            weekend_days={4, 5},
            blocking_types={HolidayType.NATIONAL, HolidayType.OBSERVANCE},
        )
        country = make_jurisdiction(rules=[RuleCall(christian.christmas_eve)], policy=policy)
        provider = HolidayProvider(country, 2024)
        assert not provider.is_working_day(date(2024, 12, 24))
        assert not provider.is_working_day(date(2024, 3, 1))
        assert provider.is_working_day(date(2024, 3, 3))


# =============================================================================
# Other Years
# =============================================================================

class TestOtherYears:

    def test_another_time(self, testland):
        provider = HolidayProvider(testland, 2024, locale="nl_NL")
        other = provider.another_time(2030)
        assert other.year == 2030
        assert other.locale == "nl_NL"
        assert other.get_holiday("new_years_day").date == date(2030, 1, 1)
        assert provider.year == 2024

    def test_another_time_validates_year(self, testland):
        with pytest.raises(InvalidYearError):
            HolidayProvider(testland, 2024).another_time(10000)

    def test_next_and_previous_holiday(self):
        country = make_jurisdiction(rules=[RuleCall(christian.easter)])
        provider = HolidayProvider(country, 2024)
        assert provider.next_holiday("easter").date == date(2025, 4, 20)
        assert provider.previous_holiday("easter").date == date(2023, 4, 9)
        assert provider.next_holiday("nope") is None
