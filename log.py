"""JSON-lines logging shared by the feed, hint and translation modules.

EISAKU_LOG_LEVEL picks the level (default INFO). EISAKU_LOG_FORMAT=text
switches stderr output to plain lines for local runs.
"""
import logging
import json
import os
import sys
from typing import Any

# Only these `extra=` keys reach the JSON record
EXTRA_FIELDS = ("component", "source", "detail", "duration_ms", "count", "endpoint", "status_code", "url")

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, exception type and message included."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        exc = record.exc_info[1] if record.exc_info else None
        if exc is not None:
            entry["error"] = str(exc)
            entry["error_type"] = type(exc).__name__
        entry.update(
            (key, getattr(record, key)) for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        return json.dumps(entry, ensure_ascii=False, default=str)


def _stderr_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if os.environ.get("EISAKU_LOG_FORMAT", "json") == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%H:%M:%S"))
    else:
        handler.setFormatter(JSONFormatter())
    return handler


def get_logger(name: str = "eisaku") -> logging.Logger:
    """Named logger with a single stderr handler; repeat calls reuse it."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    level = os.environ.get("EISAKU_LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level, logging.INFO))
    logger.addHandler(_stderr_handler())
    logger.propagate = False
    return logger
