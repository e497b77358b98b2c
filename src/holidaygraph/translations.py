"""
HolidayGraph Translation Resolver

Loads the locale catalog and the holiday name tables from YAML files and
resolves a (holiday key, locale) pair to a display name.

Directory layout::

    <data_dir>/locales.yaml
    <data_dir>/translations/<locale>.yaml             # global names
    <data_dir>/translations/providers/<ID>.yaml       # per-provider overrides

Resolution precedence, highest first:

1. the holiday's own name for the locale
2. the provider override table for (provider, locale, key)
3. the global table for (locale, key)
4. the default locale: the holiday's own name, then the global table
5. the raw holiday key

Loading happens once, at startup. A file that cannot be parsed is fatal
(``TranslationLoadError``); a missing name never is.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

from .config import DEFAULT_LOCALE
from .exceptions import TranslationLoadError, UnknownLocaleError
from .schema import LocaleCatalogSchema, LocaleTableSchema, ProviderOverrideSchema

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

YAML_SUFFIXES = {".yaml", ".yml"}


def _read_yaml(path: Path, schema: Type[SchemaT]) -> SchemaT:
    """Read a YAML file and validate it against *schema*."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise TranslationLoadError(
            message=f"Failed to read {path.name}: {e}",
            details={"path": str(path), "error": str(e)},
        ) from e

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise TranslationLoadError(
            message=f"{path.name} failed validation: {e.error_count()} errors",
            details={"path": str(path), "errors": e.errors(include_url=False)},
        ) from e


def _yaml_files(directory: Path) -> list[Path]:
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in YAML_SUFFIXES
    )


def load_locales(path: Union[str, Path]) -> tuple[str, ...]:
    """Load the locale catalog from a ``locales.yaml`` file."""
    path = Path(path)
    if not path.is_file():
        raise TranslationLoadError(
            message=f"Locale catalog not found: {path}",
            details={"path": str(path)},
        )
    catalog = _read_yaml(path, LocaleCatalogSchema)
    logger.info("Loaded %d locales from %s", len(catalog.locales), path)
    return tuple(catalog.locales)


class Translations:
    """
    Holiday name tables shared by every provider in the process.

    Usage:
        translations = Translations(["en_US", "es_ES"])
        translations.load("data/translations")
        translations.resolve("christmas_day", "es_ES")
    """

    def __init__(
        self,
        available_locales: Iterable[str],
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.available_locales = frozenset(available_locales)
        self.default_locale = default_locale
        self._global: dict[str, dict[str, str]] = {}
        self._overrides: dict[str, dict[str, dict[str, str]]] = {}

    @classmethod
    def from_directory(
        cls,
        base_path: Union[str, Path],
        available_locales: Iterable[str],
        default_locale: str = DEFAULT_LOCALE,
    ) -> "Translations":
        translations = cls(available_locales, default_locale)
        translations.load(base_path)
        return translations

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load(self, base_path: Union[str, Path]) -> None:
        """
        Read every name table below *base_path*.

        Raises:
            TranslationLoadError: If the directory or a file cannot be read
            UnknownLocaleError: If a table is written in an unknown locale
        """
        base = Path(base_path)
        if not base.is_dir():
            raise TranslationLoadError(
                message=f"Translation directory not found: {base}",
                details={"path": str(base)},
            )

        for path in _yaml_files(base):
            table = _read_yaml(path, LocaleTableSchema)
            for key, name in table.names.items():
                self.add_translation(table.locale, key, name)

        providers_dir = base / "providers"
        override_count = 0
        if providers_dir.is_dir():
            for path in _yaml_files(providers_dir):
                override = _read_yaml(path, ProviderOverrideSchema)
                for locale, names in override.locales.items():
                    for key, name in names.items():
                        self.add_override(override.provider, locale, key, name)
                override_count += 1

        logger.info(
            "Loaded translations for %d locales and %d provider override tables from %s",
            len(self._global), override_count, base,
        )

    def _check_locale(self, locale: str) -> None:
        if locale not in self.available_locales:
            raise UnknownLocaleError(
                message=f"Locale '{locale}' is not a valid locale.",
                details={"locale": locale},
            )

    def add_translation(self, locale: str, key: str, name: str) -> None:
        """Register a global name for *key* in *locale*."""
        self._check_locale(locale)
        self._global.setdefault(locale, {})[key] = name

    def add_override(self, provider_id: str, locale: str, key: str, name: str) -> None:
        """Register a name for *key* that only applies to one provider."""
        self._check_locale(locale)
        locales = self._overrides.setdefault(provider_id.upper(), {})
        locales.setdefault(locale, {})[key] = name

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    @property
    def locales(self) -> list[str]:
        """Locales with at least one global name table."""
        return sorted(self._global)

    def get_translation(self, key: str, locale: str) -> Optional[str]:
        return self._global.get(locale, {}).get(key)

    def get_translations(self, key: str) -> dict[str, str]:
        """Return every global name of *key*, keyed by locale."""
        return {
            locale: names[key]
            for locale, names in sorted(self._global.items())
            if key in names
        }

    def get_override(self, provider_id: str, key: str, locale: str) -> Optional[str]:
        return self._overrides.get(provider_id.upper(), {}).get(locale, {}).get(key)

    def resolve(
        self,
        key: str,
        locale: str,
        holiday_override: Optional[Mapping[str, str]] = None,
        provider_id: Optional[str] = None,
    ) -> str:
        """Resolve the display name of *key* in *locale*. Never raises."""
        own = holiday_override or {}

        if locale in own:
            return own[locale]

        if provider_id is not None:
            name = self.get_override(provider_id, key, locale)
            if name is not None:
                return name

        name = self.get_translation(key, locale)
        if name is not None:
            return name

        if self.default_locale in own:
            return own[self.default_locale]
        name = self.get_translation(key, self.default_locale)
        if name is not None:
            return name

        return key


__all__ = [
    "Translations",
    "load_locales",
]
