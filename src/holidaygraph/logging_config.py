"""
HolidayGraph logging setup.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
application entry point (the CLI) installs a handler on the ``holidaygraph``
logger with ``configure_logging``.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from .config import HG_LOG_FORMAT, HG_LOG_LEVEL

LOGGER_NAME = "holidaygraph"

# Extra record attributes copied into JSON log entries when present
EXTRA_FIELDS = ("provider", "year", "locale", "identifier", "duration_ms")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """Install a single stream handler on the package logger."""
    level = (level or HG_LOG_LEVEL).upper()
    fmt = (fmt or HG_LOG_FORMAT).lower()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level, logging.WARNING))

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    return logger


__all__ = [
    "LOGGER_NAME",
    "JSONFormatter",
    "configure_logging",
]
