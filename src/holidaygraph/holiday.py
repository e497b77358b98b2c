"""
HolidayGraph Holiday Entity

A Holiday is an immutable value: a key, a calendar date, a type tag and the
names it overrides per locale. Providers bind each registered holiday to the
shared translation tables so that ``get_name`` can resolve any locale.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional
from zoneinfo import ZoneInfo

from .config import DEFAULT_LOCALE

if TYPE_CHECKING:
    from .translations import Translations


class HolidayType(str, Enum):
    """Classification of a holiday."""
    NATIONAL = "national"
    OBSERVANCE = "observance"
    SEASON = "seasonal"
    BANK = "bank"
    OTHER = "other"


@dataclass(frozen=True)
class WorkingDayPolicy:
    """
    Which days are not worked in a jurisdiction.

    A day is not a working day when it falls on one of ``weekend_days``
    (0=Monday, 6=Sunday) or when a holiday of one of ``blocking_types``
    falls on it.
    """

    weekend_days: frozenset[int] = frozenset({5, 6})
    blocking_types: frozenset[HolidayType] = frozenset({HolidayType.NATIONAL, HolidayType.BANK})

    def __post_init__(self) -> None:
        object.__setattr__(self, "weekend_days", frozenset(self.weekend_days))
        object.__setattr__(
            self, "blocking_types", frozenset(HolidayType(t) for t in self.blocking_types)
        )
        invalid = [d for d in self.weekend_days if d not in range(7)]
        if invalid:
            raise ValueError(f"weekend days must be 0-6, got {sorted(invalid)}")

    def blocks_work(self, holiday_type: HolidayType) -> bool:
        return holiday_type in self.blocking_types


DEFAULT_POLICY = WorkingDayPolicy()


@dataclass(frozen=True)
class Holiday:
    """
    A single holiday of a provider.

    Equality and hashing use ``key`` only: a provider holds at most one
    holiday per key.
    """

    key: str
    date: date = field(compare=False)
    localized_names: Mapping[str, str] = field(default_factory=dict, compare=False)
    locale: str = field(default=DEFAULT_LOCALE, compare=False)
    type: HolidayType = field(default=HolidayType.NATIONAL, compare=False)
    timezone: str = field(default="UTC", compare=False)
    # Set by the owning provider when the holiday is registered
    provider_id: Optional[str] = field(default=None, compare=False)
    translations: Optional["Translations"] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("holiday key must not be empty")
        # datetime is a date subclass; keep the calendar day only
        if isinstance(self.date, datetime):
            object.__setattr__(self, "date", self.date.date())
        object.__setattr__(self, "localized_names", MappingProxyType(dict(self.localized_names)))

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def name(self) -> str:
        """Display name in the locale the holiday was created with."""
        return self.get_name()

    def get_name(self, locale: Optional[str] = None) -> str:
        """Return the display name in *locale* (default: the creation locale)."""
        locale = locale or self.locale
        if self.translations is not None:
            return self.translations.resolve(
                self.key,
                locale,
                holiday_override=self.localized_names,
                provider_id=self.provider_id,
            )
        if locale in self.localized_names:
            return self.localized_names[locale]
        return self.localized_names.get(DEFAULT_LOCALE, self.key)

    def as_datetime(self) -> datetime:
        """Midnight of the holiday in its timezone."""
        return datetime(
            self.date.year, self.date.month, self.date.day,
            tzinfo=ZoneInfo(self.timezone),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "date": self.date.isoformat(),
            "type": self.type.value,
            "timezone": self.timezone,
        }

    def __str__(self) -> str:
        return self.date.isoformat()


__all__ = [
    "HolidayType",
    "WorkingDayPolicy",
    "DEFAULT_POLICY",
    "Holiday",
]
