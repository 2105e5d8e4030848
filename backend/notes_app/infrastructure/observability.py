"""Operator Logging — how the notes API reports what happened to whoever runs it.

Invariants:
    - Each JSON line carries timestamp, level, logger and message
    - A record's note_id, action, error_code, path and method appear as top-level keys
    - LOG_FORMAT=json (the default) emits JSON lines, any other value plain text
    - Calling setup_logging again swaps the notes handler instead of stacking a second one

Design Decisions:
    - These logs are for operators and include failures; the ActionLog stays a
      user-facing record of successful note actions only
    - The app lifespan calls setup_logging before APP_STARTED is recorded
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS = ("note_id", "action", "error_code", "path", "method")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _NotesHandler(logging.StreamHandler):
    """Marker subclass so setup_logging can find its own handler again."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _NotesHandler):
            logging.root.removeHandler(existing)
    handler = _NotesHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
