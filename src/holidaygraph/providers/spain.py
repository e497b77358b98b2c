"""
Spain Holiday Providers

National holidays of Spain and those of the autonomous communities of
Andalusia, Aragon and Catalonia.
"""
from __future__ import annotations

from datetime import date

from ..holiday import HolidayType
from ..rulesets import christian, common
from .base import HolidayProvider, Jurisdiction, RuleCall


def calculate_national_day(provider: HolidayProvider) -> None:
    """Fiesta Nacional de España, October 12, since 1981."""
    if provider.year >= 1981:
        provider.add_holiday(provider.new_holiday(
            "national_day",
            date(provider.year, 10, 12),
            {"es_ES": "Fiesta Nacional de España"},
        ))


def calculate_constitution_day(provider: HolidayProvider) -> None:
    """Día de la Constitución, December 6, since the 1978 referendum."""
    if provider.year >= 1978:
        provider.add_holiday(provider.new_holiday(
            "constitution_day",
            date(provider.year, 12, 6),
            {"es_ES": "Día de la Constitución"},
        ))


SPAIN = Jurisdiction(
    id="ES",
    name="Spain",
    timezone="Europe/Madrid",
    rules=(
        RuleCall(common.new_years_day),
        RuleCall(christian.epiphany),
        RuleCall(common.valentines_day, HolidayType.NATIONAL),
        RuleCall(christian.good_friday),
        RuleCall(christian.easter),
        RuleCall(common.international_workers_day),
        RuleCall(christian.assumption_of_mary),
        RuleCall(christian.all_saints_day),
        RuleCall(christian.immaculate_conception),
        RuleCall(christian.christmas_day),
    ),
    routines=(
        calculate_national_day,
        calculate_constitution_day,
    ),
)


# -----------------------------------------------------------------------------
# Andalusia
# -----------------------------------------------------------------------------

def calculate_andalusia_day(provider: HolidayProvider) -> None:
    """
    Día de Andalucía, February 28.

    Commemorates the 1980 referendum on the Statute of Autonomy of Andalusia.
    """
    if provider.year >= 1980:
        provider.add_holiday(provider.new_holiday(
            "andalusia_day",
            date(provider.year, 2, 28),
            {"es_ES": "Día de Andalucía"},
        ))


ANDALUSIA = Jurisdiction(
    id="ES-AN",
    name="Spain/Andalusia",
    parent=SPAIN,
    rules=(
        RuleCall(christian.maundy_thursday, HolidayType.OBSERVANCE),
    ),
    routines=(calculate_andalusia_day,),
)


# -----------------------------------------------------------------------------
# Aragon
# -----------------------------------------------------------------------------

def calculate_aragon_day(provider: HolidayProvider) -> None:
    """St. George's Day is celebrated as the Day of Aragon since 1978."""
    if provider.year >= 1978:
        provider.add_holiday(provider.new_holiday(
            "st_georges_day",
            date(provider.year, 4, 23),
            {"es_ES": "San Jorge (Día de Aragón)"},
        ))


ARAGON = Jurisdiction(
    id="ES-AR",
    name="Spain/Aragon",
    parent=SPAIN,
    rules=(
        RuleCall(christian.maundy_thursday),
    ),
    routines=(calculate_aragon_day,),
)


# -----------------------------------------------------------------------------
# Catalonia
# -----------------------------------------------------------------------------

def calculate_national_day_of_catalonia(provider: HolidayProvider) -> None:
    """La Diada, September 11, official again since 1980."""
    if provider.year >= 1980:
        provider.add_holiday(provider.new_holiday(
            "national_day_of_catalonia",
            date(provider.year, 9, 11),
            {"ca_ES": "Diada Nacional de Catalunya", "es_ES": "Diada Nacional de Cataluña"},
        ))


CATALONIA = Jurisdiction(
    id="ES-CT",
    name="Spain/Catalonia",
    parent=SPAIN,
    rules=(
        RuleCall(christian.easter_monday),
        RuleCall(christian.st_johns_day),
        RuleCall(christian.st_stephens_day),
    ),
    routines=(calculate_national_day_of_catalonia,),
)


__all__ = ["SPAIN", "ANDALUSIA", "ARAGON", "CATALONIA"]
