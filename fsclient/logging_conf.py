"""JSON-line logging for fsclient.

The library only logs through `get_logger`; applications that have no logging
of their own can call `setup_logging()` to get one JSON object per line.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging import LogRecord
from typing import Any

_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Structured fields fsclient attaches via `extra=`; anything else on the
# record is logging's own bookkeeping.
EVENT_FIELDS = (
    "event",
    "method",
    "url",
    "status_code",
    "service_class",
    "count",
    "delay_s",
    "user_message",
)


class JsonFormatter(logging.Formatter):
    """One JSON object per record: ts, level, logger, message, event fields."""

    def format(self, record: LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EVENT_FIELDS:
            if key in record.__dict__:
                payload[key] = record.__dict__[key]
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str | int = _DEFAULT_LEVEL) -> None:
    """Send fsclient records to stdout as JSON lines.

    Only the `fsclient` logger is touched, and only once; a host application's
    own configuration is left alone.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    lg = logging.getLogger("fsclient")
    lg.setLevel(level)
    if any(isinstance(h.formatter, JsonFormatter) for h in lg.handlers):
        return
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter())
    lg.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger, e.g. get_logger("fsclient.dispatch")."""
    return logging.getLogger(name if name else "fsclient")
