"""
HolidayGraph Providers

``base`` holds the provider engine; the country modules hold jurisdiction
rule data. Providers are normally obtained through ``holidaygraph.registry``.
"""
from __future__ import annotations

from .base import HolidayProvider, Jurisdiction, Routine, RuleCall, validate_year

__all__ = [
    "HolidayProvider",
    "Jurisdiction",
    "Routine",
    "RuleCall",
    "validate_year",
]
