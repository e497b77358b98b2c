"""
HolidayGraph Provider Base

A provider computes every holiday of one jurisdiction for one year and
locale. The rules of a jurisdiction are data (``Jurisdiction``); the
provider is the composition root that evaluates them.

Composition order, fixed:

1. the parent jurisdiction chain, root first
2. for each layer, its shared rule-set calls (``rules``) in order
3. for each layer, its jurisdiction-specific routines in order

Holidays are keyed by ``key``. A later registration replaces an earlier one,
which is how a subdivision overrides a national holiday's date or name.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import TYPE_CHECKING, Callable, Iterator, Mapping, Optional

from ..config import DEFAULT_LOCALE, MAX_YEAR, MIN_YEAR
from ..exceptions import InvalidYearError
from ..holiday import DEFAULT_POLICY, Holiday, HolidayType, WorkingDayPolicy

if TYPE_CHECKING:
    from ..rulesets import HolidayRule
    from ..translations import Translations

logger = logging.getLogger(__name__)

# Jurisdiction-specific calculation: registers holidays on the provider
Routine = Callable[["HolidayProvider"], None]


def validate_year(year: object) -> int:
    """Return *year* if it is an integer in [MIN_YEAR, MAX_YEAR]."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYearError(
            message=f"Year needs to be an integer ({year!r} given).",
            details={"year": repr(year)},
        )
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidYearError(
            message=f"Year needs to be between {MIN_YEAR} and {MAX_YEAR} ({year} given).",
            details={"year": year, "min": MIN_YEAR, "max": MAX_YEAR},
        )
    return year


def _as_date(d: date) -> date:
    return d.date() if isinstance(d, datetime) else d


@dataclass(frozen=True)
class RuleCall:
    """
    One invocation of a shared rule-set function.

    ``type`` overrides the rule's default holiday type. ``since``/``until``
    restrict the (inclusive) years in which the rule applies.
    """

    rule: "HolidayRule"
    type: Optional[HolidayType] = None
    since: Optional[int] = None
    until: Optional[int] = None

    def applies(self, year: int) -> bool:
        if self.since is not None and year < self.since:
            return False
        if self.until is not None and year > self.until:
            return False
        return True

    def produce(self, year: int, timezone: str, locale: str) -> Optional[Holiday]:
        if not self.applies(year):
            return None
        if self.type is None:
            return self.rule(year, timezone, locale)
        return self.rule(year, timezone, locale, self.type)


@dataclass(frozen=True)
class Jurisdiction:
    """
    The holiday rules of a country or subdivision.

    ``timezone`` and ``policy`` are inherited from the parent when omitted.
    """

    id: str                                         # ISO 3166 code: "ES", "ES-AN"
    name: str                                       # provider identifier: "Spain/Andalusia"
    timezone: Optional[str] = None                  # IANA zone: "Europe/Madrid"
    parent: Optional["Jurisdiction"] = None
    rules: tuple[RuleCall, ...] = ()
    routines: tuple[Routine, ...] = ()
    policy: Optional[WorkingDayPolicy] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", self.id.upper())
        if self.timezone is None and self.parent is None:
            raise ValueError(f"jurisdiction {self.id} needs a timezone or a parent")

    @property
    def resolved_timezone(self) -> str:
        if self.timezone is not None:
            return self.timezone
        if self.parent is None:
            raise ValueError(f"jurisdiction {self.id} has no timezone")
        return self.parent.resolved_timezone

    @property
    def resolved_policy(self) -> WorkingDayPolicy:
        if self.policy is not None:
            return self.policy
        if self.parent is not None:
            return self.parent.resolved_policy
        return DEFAULT_POLICY

    def chain(self) -> list["Jurisdiction"]:
        """Return the jurisdiction and its ancestors, root first."""
        layers: list[Jurisdiction] = []
        current: Optional[Jurisdiction] = self
        while current is not None:
            layers.append(current)
            current = current.parent
        return list(reversed(layers))


class HolidayProvider:
    """
    All holidays of one jurisdiction, for one year and locale.

    Built by the registry; ``initialize`` runs once from the constructor and
    the provider is read-only afterwards.
    """

    def __init__(
        self,
        jurisdiction: Jurisdiction,
        year: int,
        locale: str = DEFAULT_LOCALE,
        translations: Optional["Translations"] = None,
    ) -> None:
        self.jurisdiction = jurisdiction
        self.year = year
        self.locale = locale
        self.translations = translations
        self.timezone = jurisdiction.resolved_timezone
        self.policy = jurisdiction.resolved_policy
        self._holidays: dict[str, Holiday] = {}
        self._initialized = False
        self.initialize()
        self._initialized = True

    @property
    def id(self) -> str:
        return self.jurisdiction.id

    @property
    def name(self) -> str:
        return self.jurisdiction.name

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def initialize(self) -> None:
        for layer in self.jurisdiction.chain():
            for call in layer.rules:
                holiday = call.produce(self.year, self.timezone, self.locale)
                if holiday is not None:
                    self.add_holiday(holiday)
            for routine in layer.routines:
                routine(self)

    def _check_mutable(self) -> None:
        if self._initialized:
            raise RuntimeError(f"provider {self.id} is read-only after initialization")

    def add_holiday(self, holiday: Holiday) -> None:
        """Register *holiday*, replacing any holiday with the same key."""
        self._check_mutable()
        if holiday.key in self._holidays:
            logger.debug(
                "%s overrides holiday '%s' (%s -> %s)",
                self.id, holiday.key, self._holidays[holiday.key].date, holiday.date,
            )
        self._holidays[holiday.key] = replace(
            holiday, provider_id=self.id, translations=self.translations
        )

    def remove_holiday(self, key: str) -> None:
        """Drop a holiday registered by an earlier layer."""
        self._check_mutable()
        self._holidays.pop(key, None)

    def new_holiday(
        self,
        key: str,
        on: date,
        names: Optional[Mapping[str, str]] = None,
        type: HolidayType = HolidayType.NATIONAL,
    ) -> Holiday:
        """Build a holiday in this provider's timezone and locale."""
        return Holiday(
            key=key,
            date=on,
            localized_names=names or {},
            locale=self.locale,
            type=type,
            timezone=self.timezone,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_holidays(self) -> list[Holiday]:
        """All holidays, sorted by date then key."""
        return sorted(self._holidays.values(), key=lambda h: (h.date, h.key))

    def get_holiday(self, key: str) -> Optional[Holiday]:
        return self._holidays.get(key)

    def get_holiday_names(self) -> list[str]:
        return [h.key for h in self.get_holidays()]

    def get_holiday_dates(self) -> dict[str, date]:
        return {h.key: h.date for h in self.get_holidays()}

    def get_holidays_on(self, d: date) -> list[Holiday]:
        d = _as_date(d)
        return [h for h in self.get_holidays() if h.date == d]

    def get_holidays_by_type(self, holiday_type: HolidayType) -> list[Holiday]:
        holiday_type = HolidayType(holiday_type)
        return [h for h in self.get_holidays() if h.type == holiday_type]

    def between(self, start: date, end: date, inclusive: bool = True) -> list[Holiday]:
        """Holidays falling between *start* and *end*."""
        start, end = _as_date(start), _as_date(end)
        if start > end:
            raise ValueError("start date must be before the end date")
        if inclusive:
            return [h for h in self.get_holidays() if start <= h.date <= end]
        return [h for h in self.get_holidays() if start < h.date < end]

    def count(self) -> int:
        return len(self._holidays)

    def __len__(self) -> int:
        return len(self._holidays)

    def __iter__(self) -> Iterator[Holiday]:
        return iter(self.get_holidays())

    def __contains__(self, key: object) -> bool:
        return key in self._holidays

    def is_weekend_day(self, d: date) -> bool:
        return _as_date(d).weekday() in self.policy.weekend_days

    def is_holiday(self, d: date) -> bool:
        """True if a holiday that blocks work falls on *d*."""
        return any(self.policy.blocks_work(h.type) for h in self.get_holidays_on(d))

    def is_working_day(self, d: date) -> bool:
        """A working day is neither a weekend day nor a blocking holiday."""
        if self.is_weekend_day(d):
            return False
        return not self.is_holiday(d)

    # -------------------------------------------------------------------------
    # Other years
    # -------------------------------------------------------------------------

    def another_time(self, year: int) -> "HolidayProvider":
        """Same jurisdiction and locale, another year."""
        validate_year(year)
        return HolidayProvider(self.jurisdiction, year, self.locale, self.translations)

    def next_holiday(self, key: str) -> Optional[Holiday]:
        """The holiday with *key* in the following year."""
        return self.another_time(self.year + 1).get_holiday(key)

    def previous_holiday(self, key: str) -> Optional[Holiday]:
        """The holiday with *key* in the preceding year."""
        return self.another_time(self.year - 1).get_holiday(key)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"id={self.id!r}, year={self.year!r}, locale={self.locale!r}, "
            f"holidays={len(self)})"
        )


__all__ = [
    "Routine",
    "RuleCall",
    "Jurisdiction",
    "HolidayProvider",
    "validate_year",
]
