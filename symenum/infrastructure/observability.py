"""Structured Logging: JSON formatter and setup for library users.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (enum_type, value_count, error_code, value) surfaced when present
    - Nothing is configured on import; setup_logging is opt-in
    - At most one symenum handler is installed at a time

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency for a small library
    - Handler attached to the "symenum" logger, not root: never hijack the host's logging
"""

import logging
import json
from datetime import datetime, timezone

_installed_handler: logging.Handler | None = None

_EXTRA_KEYS = ("enum_type", "value_count", "error_code", "value")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

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
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Attach a stream handler to the symenum logger and return it.

    Replaces the handler installed by a previous call, so repeated setup never
    duplicates output.
    """
    global _installed_handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logger = logging.getLogger("symenum")
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)
    logger.addHandler(handler)
    _installed_handler = handler
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
