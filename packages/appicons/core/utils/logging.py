"""Logging setup for appicons.

Text logs go to stdout or a file; ``structured=True`` switches to one JSON
object per line. ``get_logger`` attaches per-run context (such as the app
name) and ``log_performance`` times hot rendering calls.
"""

from __future__ import annotations

import functools
import json
import logging
import sys
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

PERFORMANCE_LOGGER = "appicons.performance"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS: dict[str, int] = {
    "httpx": logging.ERROR,
    "httpcore": logging.ERROR,
    "PIL": logging.WARNING,
    "asyncio": logging.ERROR,
}


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as a single-line JSON object.

    Shape::

        {"ts": "...", "level": "INFO", "logger": "appicons...", "message": "...",
         "where": "engine:88", "context": {...}, "error": {...}}

    ``context`` holds ``extra``/LoggerAdapter fields and is omitted when empty.
    ``error`` is present only for records with exception info.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "where": f"{record.module}:{record.lineno}",
        }

        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if context:
            entry["context"] = context

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc, _ = record.exc_info
            entry["error"] = {
                "type": exc_type.__name__,
                "message": str(exc),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def _build_handler(filename: str | None) -> logging.Handler:
    if filename:
        return logging.FileHandler(filename, encoding="utf-8")
    return logging.StreamHandler(sys.stdout)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Install a single root handler, replacing any previous configuration.

    Args:
        level: Level name, case-insensitive.
        format_string: Text log format. Ignored when ``structured`` is set.
        filename: Log file; stdout when None.
        structured: Emit JSON lines.
    """
    handler = _build_handler(filename)
    if structured:
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)

    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Return ``logging.getLogger(name)``, wrapped in a LoggerAdapter when
    context fields are given."""
    base = logging.getLogger(name)
    return logging.LoggerAdapter(base, context) if context else base


def log_performance(func: F) -> F:
    """Log the wall time of each call at DEBUG on ``appicons.performance``."""

    @functools.wraps(func)
    def timed(*args: Any, **kwargs: Any) -> Any:
        started = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            logging.getLogger(PERFORMANCE_LOGGER).debug(
                "%s took %.4fs", func.__qualname__, time.perf_counter() - started
            )

    return timed  # type: ignore[return-value]
