"""Structured Logging - JSON formatter and setup for the strkit CLI.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (operation, error_code, argument) surfaced when present
    - setup_logging is idempotent: calling it again replaces the strkit handler
    - The library itself never calls setup_logging; only the CLI does

Design Decisions:
    - JSONFormatter on stdlib logging, no third-party logging library
    - Handler writes to stderr so stdout carries only the CLI result
"""

import json
import logging
from datetime import datetime, timezone

_HANDLER_NAME = "strkit"
_EXTRA_FIELDS = ("operation", "error_code", "argument")


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Configure root logging for the CLI. Returns the installed handler."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
