"""Logging setup for chrono-ai.

All output goes to stderr as ``timestamp | LEVEL | logger | message`` so the
extraction report printed on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Marks the handler installed by setup_logging so repeated calls reuse it.
_HANDLER_ATTR = "_chrono_ai_log_handler"

# Client libraries that log every request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "googleapiclient.discovery_cache")


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger for the CLI.

    Attaches one stderr handler to the root logger; calling again only
    updates the level.  Unless *level* is ``DEBUG``, the HTTP client
    libraries are held at ``WARNING`` so each provider and Google API
    request is not echoed.

    Args:
        level: A standard logging level name (e.g. ``"DEBUG"``).

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    library_level = numeric_level if numeric_level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    existing = [h for h in root.handlers if getattr(h, _HANDLER_ATTR, False)]
    if existing:
        existing[0].setLevel(numeric_level)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger called *name* (usually the caller's ``__name__``)."""
    return logging.getLogger(name)
