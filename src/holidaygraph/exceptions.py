"""
HolidayGraph Exception Hierarchy

Every validation failure raised by the engine carries a deterministic error
code so callers (CLI, embedding applications) can react without parsing
messages.

Error Codes:
- HG_UNKNOWN_PROVIDER: Provider identifier does not resolve to a jurisdiction
- HG_INVALID_YEAR: Year outside [1000, 9999] or not an integer
- HG_UNKNOWN_LOCALE: Locale not present in the locale catalog
- HG_INVALID_ARGUMENT: Malformed argument passed to the working-day cursor
- HG_TRANSLATION_LOAD: Translation tables could not be read (startup failure)
- HG_INTERNAL_ERROR: Unexpected internal error (catch-all)

Translation misses are not errors: names degrade to the raw holiday key.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

__all__ = [
    "HolidayGraphError",
    "UnknownProviderError",
    "InvalidYearError",
    "UnknownLocaleError",
    "InvalidArgumentError",
    "TranslationLoadError",
]


class HolidayGraphError(Exception):
    """
    Base exception for all HolidayGraph errors.

    Provides:
    - code: A deterministic error code (HG_*)
    - message: Human-readable error description
    - details: Additional context as a dictionary
    """

    code: str = "HG_INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error for logging/CLI output."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r})"
        )


class UnknownProviderError(HolidayGraphError):
    """
    Provider identifier is unknown.

    Raised when:
    - The identifier matches no registered jurisdiction
    - The identifier names the abstract provider base
    """

    code: str = "HG_UNKNOWN_PROVIDER"


class InvalidYearError(HolidayGraphError):
    """Year is not an integer between 1000 and 9999."""

    code: str = "HG_INVALID_YEAR"


class UnknownLocaleError(HolidayGraphError):
    """Locale is not part of the locale catalog."""

    code: str = "HG_UNKNOWN_LOCALE"


class InvalidArgumentError(HolidayGraphError):
    """
    Argument passed to the working-day cursor is malformed.

    Raised when:
    - The start date is not a date/datetime value
    - The working-day count is negative or not an integer
    - The direction is neither "next" nor "prev"
    """

    code: str = "HG_INVALID_ARGUMENT"


class TranslationLoadError(HolidayGraphError):
    """A translation table could not be read or failed schema validation."""

    code: str = "HG_TRANSLATION_LOAD"
