"""
Croatia Holiday Provider

The 2019 Public Holidays Act moved Statehood Day from June 25 to May 30,
dropped Independence Day and added Remembrance Day, effective 2020.
"""
from __future__ import annotations

from datetime import date

from ..rulesets import christian, common
from .base import HolidayProvider, Jurisdiction, RuleCall


def calculate_antifascist_struggle_day(provider: HolidayProvider) -> None:
    if provider.year >= 1991:
        provider.add_holiday(provider.new_holiday(
            "antifascist_struggle_day",
            date(provider.year, 6, 22),
            {"hr_HR": "Dan antifašističke borbe"},
        ))


def calculate_statehood_day(provider: HolidayProvider) -> None:
    if provider.year < 1991:
        return
    on = date(provider.year, 5, 30) if provider.year >= 2020 else date(provider.year, 6, 25)
    provider.add_holiday(provider.new_holiday(
        "statehood_day", on, {"hr_HR": "Dan državnosti"},
    ))


def calculate_homeland_thanksgiving(provider: HolidayProvider) -> None:
    if provider.year >= 1995:
        provider.add_holiday(provider.new_holiday(
            "homeland_thanksgiving",
            date(provider.year, 8, 5),
            {"hr_HR": "Dan pobjede i domovinske zahvalnosti"},
        ))


def calculate_independence_day(provider: HolidayProvider) -> None:
    if 1991 <= provider.year < 2020:
        provider.add_holiday(provider.new_holiday(
            "independence_day",
            date(provider.year, 10, 8),
            {"hr_HR": "Dan neovisnosti"},
        ))


def calculate_remembrance_day(provider: HolidayProvider) -> None:
    if provider.year >= 2020:
        provider.add_holiday(provider.new_holiday(
            "remembrance_day",
            date(provider.year, 11, 18),
            {"hr_HR": "Dan sjećanja na žrtve Domovinskog rata"},
        ))


CROATIA = Jurisdiction(
    id="HR",
    name="Croatia",
    timezone="Europe/Zagreb",
    rules=(
        RuleCall(common.new_years_day),
        RuleCall(christian.epiphany, since=2002),
        RuleCall(christian.easter),
        RuleCall(christian.easter_monday),
        RuleCall(christian.corpus_christi, since=2002),
        RuleCall(common.international_workers_day),
        RuleCall(christian.assumption_of_mary),
        RuleCall(christian.all_saints_day),
        RuleCall(christian.christmas_day),
        RuleCall(christian.st_stephens_day),
    ),
    routines=(
        calculate_antifascist_struggle_day,
        calculate_statehood_day,
        calculate_homeland_thanksgiving,
        calculate_independence_day,
        calculate_remembrance_day,
    ),
)


__all__ = ["CROATIA"]
