"""
Structured Logging — JSON Output for Production

Configures Python logging to emit structured JSON logs.
Each log entry includes timestamp, level, module, and
any additional context fields.

Usage:
    from originality.logging import get_logger
    logger = get_logger("pipeline")
    logger.info("Matches resolved", extra={"match_count": 12, "located_count": 9})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone


LOG_LEVEL = os.getenv("ORIGINALITY_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("ORIGINALITY_LOG_FORMAT", "json")  # "json" or "text"

# Context fields copied from LogRecord extras into the JSON entry
EXTRA_FIELDS = (
    "match_count", "located_count", "dropped_count",
    "sentence_count", "unplaced_count", "source_url", "tier",
    "error", "error_type", "duration_ms", "status_code",
    "method", "path", "engine_version",
)


def _context(record: logging.LogRecord) -> dict:
    """Whitelisted extras present on the record, in EXTRA_FIELDS order."""
    return {
        key: getattr(record, key)
        for key in EXTRA_FIELDS
        if getattr(record, key, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """Formats log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        entry.update(_context(record))

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """
    Human-readable format for development.

    Context fields follow the message as key=value pairs, e.g.
    `Resolved 9/12 provider matches  match_count=12 located_count=9`.
    """

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        head, sep, tail = line.partition("\n")
        return f"{head}  {pairs}{sep}{tail}"


def setup_logging(fmt: str | None = None, level: str | None = None):
    """Configure the package logger. Call once at app startup."""
    root = logging.getLogger("originality")
    level_name = (level or LOG_LEVEL).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if (fmt or LOG_FORMAT) == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root.addHandler(handler)

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the originality namespace."""
    return logging.getLogger(f"originality.{name}")
