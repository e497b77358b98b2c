"""
HolidayGraph configuration.

Values are read from the environment once, at import time.
"""
from __future__ import annotations

import os
from pathlib import Path

PACKAGE_DATA_DIR = Path(__file__).parent / "data"

HG_DATA_DIR = Path(os.getenv("HOLIDAYGRAPH_DATA_DIR", str(PACKAGE_DATA_DIR)))
HG_DEFAULT_LOCALE = os.getenv("HOLIDAYGRAPH_DEFAULT_LOCALE", "en_US")
HG_LOG_LEVEL = os.getenv("HOLIDAYGRAPH_LOG_LEVEL", "WARNING")
HG_LOG_FORMAT = os.getenv("HOLIDAYGRAPH_LOG_FORMAT", "text").lower()

DEFAULT_LOCALE = HG_DEFAULT_LOCALE

# Inclusive bounds accepted by the provider factory
MIN_YEAR = 1000
MAX_YEAR = 9999

__all__ = [
    "PACKAGE_DATA_DIR",
    "HG_DATA_DIR",
    "HG_DEFAULT_LOCALE",
    "HG_LOG_LEVEL",
    "HG_LOG_FORMAT",
    "DEFAULT_LOCALE",
    "MIN_YEAR",
    "MAX_YEAR",
]
