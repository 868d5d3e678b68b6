"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields listed in LOG_EXTRA_FIELDS surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: repeated calls replace, never stack, its handler

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency for structured output
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

LOG_EXTRA_FIELDS: tuple[str, ...] = (
    "session_id", "tool_name", "error_code", "session_type", "action",
    "duration_ms", "path",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in LOG_EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _DeliberateHandler(logging.StreamHandler):
    """Marker subclass so setup_logging can find and replace its own handler."""


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = _DeliberateHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if isinstance(existing, _DeliberateHandler):
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
