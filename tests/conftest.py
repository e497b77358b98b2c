"""
Pytest configuration and fixtures for HolidayGraph tests.

Provides a registry on a small temporary data directory and a factory for
synthetic jurisdictions.
"""
import sys
from datetime import date
from pathlib import Path

import pytest
import yaml

# Allow ``import holidaygraph`` without installing the package
_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_ROOT / "src"))

from holidaygraph.holiday import HolidayType  # noqa: E402
from holidaygraph.providers.base import HolidayProvider, Jurisdiction, RuleCall  # noqa: E402
from holidaygraph.registry import Registry  # noqa: E402
from holidaygraph.rulesets import common  # noqa: E402


TEST_LOCALES = ["en_US", "es_ES", "de_DE", "fr_FR", "nl_NL"]


# =============================================================================
# Factory Helpers
# =============================================================================

def write_yaml(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True)
    return path


def fixed_routine(key: str, month: int, day: int, names=None,
                  type: HolidayType = HolidayType.NATIONAL, years=None):
    """Routine registering a fixed-date holiday, optionally only in some years."""
    def routine(provider: HolidayProvider) -> None:
        if years is not None and provider.year not in years:
            return
        provider.add_holiday(provider.new_holiday(
            key, date(provider.year, month, day), names, type,
        ))
    routine.__name__ = f"calculate_{key}"
    return routine


def make_jurisdiction(
    id: str = "TL",
    name: str = "Testland",
    timezone=None,
    parent=None,
    rules=(),
    routines=(),
    policy=None,
) -> Jurisdiction:
    """Create a Jurisdiction with test defaults."""
    if parent is None and timezone is None:
        timezone = "Europe/Amsterdam"
    return Jurisdiction(
        id=id,
        name=name,
        timezone=timezone,
        parent=parent,
        rules=tuple(rules),
        routines=tuple(routines),
        policy=policy,
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def data_dir(tmp_path) -> Path:
    """A minimal data directory: locale catalog plus three name tables."""
    write_yaml(tmp_path / "locales.yaml", {"locales": TEST_LOCALES})
    write_yaml(tmp_path / "translations" / "en_US.yaml", {
        "locale": "en_US",
        "names": {
            "new_years_day": "New Year's Day",
            "second_new_years_day": "Day after New Year's Day",
            "liberation_day": "Liberation Day",
        },
    })
    write_yaml(tmp_path / "translations" / "nl_NL.yaml", {
        "locale": "nl_NL",
        "names": {"new_years_day": "Nieuwjaarsdag"},
    })
    write_yaml(tmp_path / "translations" / "providers" / "TL-NH.yaml", {
        "provider": "TL-NH",
        "locales": {"nl_NL": {"new_years_day": "Nieuwjaar (Noord)"}},
    })
    return tmp_path


@pytest.fixture
def testland() -> Jurisdiction:
    """Country with New Year's Day, January 2 and weekends off."""
    return make_jurisdiction(
        rules=[RuleCall(common.new_years_day)],
        routines=[fixed_routine("second_new_years_day", 1, 2)],
    )


@pytest.fixture
def registry(data_dir, testland) -> Registry:
    """Registry on the temporary data directory, knowing only Testland."""
    reg = Registry(data_dir=data_dir, catalog={})
    reg.register("Testland", testland)
    return reg


@pytest.fixture
def packaged_registry() -> Registry:
    """Registry on the packaged data and provider catalog."""
    return Registry()
