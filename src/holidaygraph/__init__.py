"""
HolidayGraph: holidays and working days per jurisdiction.

Computes the public holidays of a country or subdivision for a year,
resolves their names into a locale and steps over working days.

Usage:
    from datetime import date
    from holidaygraph import create, next_working_day

    provider = create("Spain/Andalusia", 2024, "es_ES")
    for holiday in provider:
        print(holiday.date, holiday.name)

    provider.is_working_day(date(2024, 2, 28))          # False, Día de Andalucía
    next_working_day("Germany", date(2024, 12, 23), 2)  # date(2024, 12, 27)
"""
from __future__ import annotations

from .computus import easter_sunday, movable_feasts
from .exceptions import (
    HolidayGraphError,
    InvalidArgumentError,
    InvalidYearError,
    TranslationLoadError,
    UnknownLocaleError,
    UnknownProviderError,
)
from .holiday import DEFAULT_POLICY, Holiday, HolidayType, WorkingDayPolicy
from .providers import HolidayProvider, Jurisdiction, RuleCall
from .registry import (
    REGISTRY,
    Registry,
    create,
    get_available_locales,
    get_providers,
    register_provider,
)
from .translations import Translations
from .workdays import (
    Direction,
    advance,
    next_working_day,
    prev_working_day,
    working_days_between,
)

__version__ = "1.0.0"

__all__ = [
    # Entities
    "Holiday",
    "HolidayType",
    "WorkingDayPolicy",
    "DEFAULT_POLICY",
    # Providers
    "HolidayProvider",
    "Jurisdiction",
    "RuleCall",
    # Registry
    "Registry",
    "REGISTRY",
    "create",
    "get_providers",
    "get_available_locales",
    "register_provider",
    # Translations
    "Translations",
    # Working days
    "Direction",
    "advance",
    "next_working_day",
    "prev_working_day",
    "working_days_between",
    # Movable feasts
    "easter_sunday",
    "movable_feasts",
    # Errors
    "HolidayGraphError",
    "UnknownProviderError",
    "InvalidYearError",
    "UnknownLocaleError",
    "InvalidArgumentError",
    "TranslationLoadError",
]
