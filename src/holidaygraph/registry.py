"""
Provider Registry: creates holiday providers by identifier.

Maps provider identifiers (``"Country"`` or ``"Country/Subdivision"``) to the
module attribute holding the jurisdiction rules, validates the request and
builds the provider.

Validation order is part of the contract:

1. provider identifier   -> UnknownProviderError
2. year                  -> InvalidYearError
3. locale                -> UnknownLocaleError

The locale catalog and the translation tables are loaded once per registry,
on first use, under a lock; they are read-only afterwards and every provider
receives the same ``Translations`` instance.

Usage:
    >>> from holidaygraph.registry import create, get_providers
    >>> provider = create("Spain/Andalusia", 2024, "es_ES")
    >>> provider.get_holiday("andalusia_day").get_name()
    'Día de Andalucía'
    >>> get_providers()["ES-AN"]
    'Spain/Andalusia'
"""
from __future__ import annotations

import logging
import threading
from importlib import import_module
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_LOCALE, HG_DATA_DIR
from .exceptions import UnknownLocaleError, UnknownProviderError
from .providers.base import HolidayProvider, Jurisdiction, validate_year
from .translations import Translations, load_locales

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Provider catalog: maps identifier -> "module:attribute"
# ---------------------------------------------------------------------------

PROVIDERS: dict[str, str] = {
    "Croatia": "holidaygraph.providers.croatia:CROATIA",
    "Germany": "holidaygraph.providers.germany:GERMANY",
    "Germany/BadenWurttemberg": "holidaygraph.providers.germany:BADEN_WURTTEMBERG",
    "Germany/Bavaria": "holidaygraph.providers.germany:BAVARIA",
    "Italy": "holidaygraph.providers.italy:ITALY",
    "Spain": "holidaygraph.providers.spain:SPAIN",
    "Spain/Andalusia": "holidaygraph.providers.spain:ANDALUSIA",
    "Spain/Aragon": "holidaygraph.providers.spain:ARAGON",
    "Spain/Catalonia": "holidaygraph.providers.spain:CATALONIA",
}

# Names of the engine itself and of the shared rule-sets; never providers
ABSTRACT_PROVIDERS = frozenset({
    "HolidayProvider",
    "AbstractProvider",
    "ChristianHolidays",
    "CommonHolidays",
})


def _import_jurisdiction(target: str) -> Jurisdiction:
    module_path, _, attr = target.partition(":")
    module = import_module(module_path)
    jurisdiction = getattr(module, attr, None)
    if not isinstance(jurisdiction, Jurisdiction):
        raise ImportError(f"'{target}' does not name a Jurisdiction")
    return jurisdiction


class Registry:
    """
    Process-wide provider factory.

    Owns the locale catalog, the shared translations and the provider catalog.
    """

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]] = None,
        catalog: Optional[dict[str, str]] = None,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else HG_DATA_DIR
        self.default_locale = default_locale
        self._catalog: dict[str, Union[str, Jurisdiction]] = dict(
            PROVIDERS if catalog is None else catalog
        )
        self._lock = threading.Lock()
        # (locale catalog, translations), published together once loaded
        self._loaded: Optional[tuple[tuple[str, ...], Translations]] = None
        self._providers: Optional[dict[str, str]] = None
        self._jurisdictions: dict[str, Jurisdiction] = {}

    # -------------------------------------------------------------------------
    # Startup state
    # -------------------------------------------------------------------------

    def _ensure_loaded(self) -> tuple[tuple[str, ...], Translations]:
        """Load the locale catalog and translations exactly once."""
        loaded = self._loaded
        if loaded is not None:
            return loaded
        with self._lock:
            loaded = self._loaded
            if loaded is None:
                locales = load_locales(self.data_dir / "locales.yaml")
                translations = Translations.from_directory(
                    self.data_dir / "translations", locales, self.default_locale
                )
                loaded = (locales, translations)
                self._loaded = loaded
            return loaded

    @property
    def translations(self) -> Translations:
        return self._ensure_loaded()[1]

    def get_available_locales(self) -> tuple[str, ...]:
        return self._ensure_loaded()[0]

    # -------------------------------------------------------------------------
    # Provider catalog
    # -------------------------------------------------------------------------

    def register(self, name: str, target: Union[str, Jurisdiction]) -> None:
        """
        Register a provider at runtime.

        Args:
            name: Provider identifier, e.g. "Spain/Andalusia"
            target: A Jurisdiction or a "module:attribute" path to one

        Raises:
            ValueError: If the name is reserved
            UnknownProviderError: If the target does not name a Jurisdiction
        """
        if name in ABSTRACT_PROVIDERS:
            raise ValueError(f"'{name}' is reserved")
        if isinstance(target, Jurisdiction):
            jurisdiction = target
        else:
            try:
                jurisdiction = _import_jurisdiction(target)
            except ImportError as e:
                raise UnknownProviderError(
                    message=f"Cannot register \"{name}\": {e}",
                    details={"identifier": name, "target": repr(target)},
                ) from e
        with self._lock:
            self._catalog[name] = target
            self._jurisdictions[name] = jurisdiction
            if self._providers is not None:
                self._providers[jurisdiction.id] = name

    def _load(self, name: str) -> Jurisdiction:
        jurisdiction = self._jurisdictions.get(name)
        if jurisdiction is None:
            target = self._catalog[name]
            jurisdiction = target if isinstance(target, Jurisdiction) else _import_jurisdiction(target)
            self._jurisdictions[name] = jurisdiction
        return jurisdiction

    def get_providers(self) -> dict[str, str]:
        """Return ``{ISO code: provider identifier}``, built once."""
        if self._providers is None:
            with self._lock:
                if self._providers is None:
                    providers = {
                        self._load(name).id.upper(): name
                        for name in sorted(self._catalog)
                    }
                    logger.info("Provider catalog built with %d providers", len(providers))
                    self._providers = providers
        return self._providers

    def resolve(self, identifier: str) -> Jurisdiction:
        """
        Return the jurisdiction for a provider identifier or ISO code.

        Raises:
            UnknownProviderError: If the identifier is unknown or abstract
        """
        if not isinstance(identifier, str) or not identifier.strip():
            raise UnknownProviderError(
                message=f"Unable to find holiday provider {identifier!r}.",
                details={"identifier": repr(identifier)},
            )
        name = identifier.strip().strip("/")
        if name in ABSTRACT_PROVIDERS or name.split("/")[-1] in ABSTRACT_PROVIDERS:
            raise UnknownProviderError(
                message=f"Unable to find holiday provider \"{identifier}\".",
                details={"identifier": identifier, "reason": "abstract"},
            )
        if name not in self._catalog:
            name = self.get_providers().get(name.upper(), name)
        if name not in self._catalog:
            raise UnknownProviderError(
                message=f"Unable to find holiday provider \"{identifier}\".",
                details={"identifier": identifier},
            )
        return self._load(name)

    # -------------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------------

    def create(
        self,
        identifier: str,
        year: int,
        locale: Optional[str] = None,
    ) -> HolidayProvider:
        """
        Create a holiday provider.

        Args:
            identifier: Provider identifier ("Spain/Andalusia") or ISO code ("ES-AN")
            year: Year between 1000 and 9999
            locale: Locale for holiday names (defaults to the default locale)

        Raises:
            UnknownProviderError: If no such provider exists
            InvalidYearError: If the year is out of range
            UnknownLocaleError: If the locale is not in the catalog
        """
        jurisdiction = self.resolve(identifier)
        validate_year(year)
        locales, translations = self._ensure_loaded()

        if locale is None:
            locale = self.default_locale
        if locale not in locales:
            raise UnknownLocaleError(
                message=f"Locale \"{locale}\" is not a valid locale.",
                details={"locale": locale},
            )

        logger.debug(
            "Creating provider %s for %d",
            jurisdiction.id, year,
            extra={"provider": jurisdiction.id, "year": year, "locale": locale},
        )
        return HolidayProvider(jurisdiction, year, locale, translations)


# ---------------------------------------------------------------------------
# Default registry and module-level API
# ---------------------------------------------------------------------------

REGISTRY = Registry()


def create(identifier: str, year: int, locale: Optional[str] = None) -> HolidayProvider:
    """Create a provider with the default registry."""
    return REGISTRY.create(identifier, year, locale)


def get_providers() -> dict[str, str]:
    return REGISTRY.get_providers()


def get_available_locales() -> tuple[str, ...]:
    return REGISTRY.get_available_locales()


def register_provider(name: str, target: Union[str, Jurisdiction]) -> None:
    REGISTRY.register(name, target)


__all__ = [
    "PROVIDERS",
    "ABSTRACT_PROVIDERS",
    "Registry",
    "REGISTRY",
    "create",
    "get_providers",
    "get_available_locales",
    "register_provider",
]
