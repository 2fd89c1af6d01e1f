"""Structured Logging — JSON and text formatters for client observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request extras (method, path, status_code, cache_seconds, elapsed_ms, cache)
      surfaced when present, in both formats
    - setup_logging is idempotent: at most one handler of ours on the root logger

Design Decisions:
    - Formatters on stdlib logging: host applications keep their own handlers
    - Our handler is tagged by name and replaced on reconfiguration, so a CLI
      run or repeated setup never duplicates output lines
"""

import logging
import json
from datetime import datetime, timezone

HANDLER_NAME = "shega_client"

_EXTRA_KEYS = (
    "method", "path", "status_code", "cache_seconds", "elapsed_ms", "cache",
)

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _request_extras(record: logging.LogRecord) -> dict:
    extras = {}
    for key in _EXTRA_KEYS:
        val = record.__dict__.get(key)
        if val is not None:
            extras[key] = val
    return extras


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(_request_extras(record))
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable line with request extras appended as key=value."""

    def __init__(self):
        super().__init__(_TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _request_extras(record)
        if not extras:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in extras.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging; returns the installed handler.

    A handler left by an earlier call is removed first.
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
            existing.close()

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
