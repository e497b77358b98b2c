"""
HolidayGraph Data File Schemas

Pydantic models for validating the YAML data files loaded at startup:

- ``locales.yaml``: the locale catalog
- ``translations/<locale>.yaml``: global holiday names for one locale
- ``translations/providers/<ID>.yaml``: names overridden by one provider
"""
from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

# language[_Script]_TERRITORY, e.g. en_US, sr_Latn_RS
LOCALE_PATTERN = re.compile(r"^[a-z]{2,3}(_[A-Z][a-z]{3})?_[A-Z]{2}$")

# ISO 3166-1 / 3166-2 codes, e.g. ES, ES-AN, DE-BW
PROVIDER_ID_PATTERN = re.compile(r"^[A-Z]{2}(-[A-Z0-9]{1,3})?$")


def _check_locale(value: str) -> str:
    if not LOCALE_PATTERN.match(value):
        raise ValueError(f"'{value}' is not a POSIX locale identifier (e.g. en_US)")
    return value


def _check_names(names: dict[str, str]) -> dict[str, str]:
    for key, name in names.items():
        if not key.strip():
            raise ValueError("holiday keys must not be empty")
        if not name.strip():
            raise ValueError(f"holiday '{key}' has an empty name")
    return names


class LocaleCatalogSchema(BaseModel):
    """Schema for the locale catalog."""
    locales: list[str] = Field(..., min_length=1, description="Recognized locale identifiers")

    @field_validator("locales")
    @classmethod
    def validate_locales(cls, value: list[str]) -> list[str]:
        for locale in value:
            _check_locale(locale)
        if len(set(value)) != len(value):
            raise ValueError("locale catalog contains duplicates")
        return value


class LocaleTableSchema(BaseModel):
    """Schema for the global name table of a single locale."""
    locale: str = Field(..., description="Locale the names are written in")
    names: dict[str, str] = Field(default_factory=dict, description="holiday key -> display name")

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, value: str) -> str:
        return _check_locale(value)

    @field_validator("names")
    @classmethod
    def validate_names(cls, value: dict[str, str]) -> dict[str, str]:
        return _check_names(value)


class ProviderOverrideSchema(BaseModel):
    """Schema for the names a single provider overrides, per locale."""
    provider: str = Field(..., description="Provider ISO code (e.g. ES-CT)")
    locales: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="locale -> holiday key -> display name",
    )

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, value: str) -> str:
        value = value.upper()
        if not PROVIDER_ID_PATTERN.match(value):
            raise ValueError(f"'{value}' is not an ISO 3166 provider code")
        return value

    @field_validator("locales")
    @classmethod
    def validate_locales(cls, value: dict[str, dict[str, str]]) -> dict[str, dict[str, str]]:
        for locale, names in value.items():
            _check_locale(locale)
            _check_names(names)
        return value


__all__ = [
    "LOCALE_PATTERN",
    "PROVIDER_ID_PATTERN",
    "LocaleCatalogSchema",
    "LocaleTableSchema",
    "ProviderOverrideSchema",
]
