"""
Italy Holiday Provider
"""
from __future__ import annotations

from datetime import date

from ..rulesets import christian, common
from .base import HolidayProvider, Jurisdiction, RuleCall


def calculate_liberation_day(provider: HolidayProvider) -> None:
    """Festa della Liberazione, April 25, since 1949."""
    if provider.year >= 1949:
        provider.add_holiday(provider.new_holiday(
            "liberation_day",
            date(provider.year, 4, 25),
            {"it_IT": "Festa della Liberazione"},
        ))


def calculate_republic_day(provider: HolidayProvider) -> None:
    """Festa della Repubblica, June 2, since the 1946 referendum."""
    if provider.year >= 1946:
        provider.add_holiday(provider.new_holiday(
            "republic_day",
            date(provider.year, 6, 2),
            {"it_IT": "Festa della Repubblica"},
        ))


ITALY = Jurisdiction(
    id="IT",
    name="Italy",
    timezone="Europe/Rome",
    rules=(
        RuleCall(common.new_years_day),
        RuleCall(christian.epiphany),
        RuleCall(christian.easter),
        RuleCall(christian.easter_monday),
        RuleCall(common.international_workers_day),
        RuleCall(christian.assumption_of_mary),
        RuleCall(christian.all_saints_day),
        RuleCall(christian.immaculate_conception),
        RuleCall(christian.christmas_day),
        RuleCall(christian.st_stephens_day),
    ),
    routines=(
        calculate_liberation_day,
        calculate_republic_day,
    ),
)


__all__ = ["ITALY"]
