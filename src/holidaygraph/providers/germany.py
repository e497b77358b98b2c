"""
Germany Holiday Providers

Nationwide holidays of Germany and those of the states of
Baden-Württemberg and Bavaria.
"""
from __future__ import annotations

from datetime import date

from ..holiday import HolidayType
from ..rulesets import christian, common
from .base import HolidayProvider, Jurisdiction, RuleCall


def calculate_german_unity_day(provider: HolidayProvider) -> None:
    """Tag der Deutschen Einheit, October 3, since reunification in 1990."""
    if provider.year >= 1990:
        provider.add_holiday(provider.new_holiday(
            "german_unity_day",
            date(provider.year, 10, 3),
            {"de_DE": "Tag der Deutschen Einheit"},
        ))


def calculate_reformation_day(provider: HolidayProvider) -> None:
    """The 500th anniversary of the Reformation was a nationwide holiday."""
    if provider.year == 2017:
        provider.add_holiday(christian.reformation_day(
            provider.year, provider.timezone, provider.locale
        ))


GERMANY = Jurisdiction(
    id="DE",
    name="Germany",
    timezone="Europe/Berlin",
    rules=(
        RuleCall(common.new_years_day),
        RuleCall(christian.good_friday),
        RuleCall(christian.easter),
        RuleCall(christian.easter_monday),
        RuleCall(common.international_workers_day),
        RuleCall(christian.ascension_day),
        RuleCall(christian.pentecost),
        RuleCall(christian.pentecost_monday),
        RuleCall(christian.christmas_day),
        RuleCall(christian.second_christmas_day),
    ),
    routines=(
        calculate_german_unity_day,
        calculate_reformation_day,
    ),
)


BADEN_WURTTEMBERG = Jurisdiction(
    id="DE-BW",
    name="Germany/BadenWurttemberg",
    parent=GERMANY,
    rules=(
        RuleCall(christian.epiphany, HolidayType.OTHER),
        RuleCall(christian.corpus_christi, HolidayType.OTHER),
        RuleCall(christian.all_saints_day, HolidayType.OTHER),
    ),
)


BAVARIA = Jurisdiction(
    id="DE-BY",
    name="Germany/Bavaria",
    parent=GERMANY,
    rules=(
        RuleCall(christian.epiphany),
        RuleCall(christian.corpus_christi),
        RuleCall(christian.assumption_of_mary, HolidayType.OBSERVANCE),
        RuleCall(christian.all_saints_day),
    ),
)


__all__ = ["GERMANY", "BADEN_WURTTEMBERG", "BAVARIA"]
