"""Logging for the expense tracker.

``app.py`` and ``seed_db.py`` call ``configure_logging()`` at startup; every
other module only asks ``get_logger("expense_tracker.<module>")`` for a
child logger and never attaches handlers itself.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

LOGGER_NAME = "expense_tracker"
LEVEL_ENV = "EXPENSE_TRACKER_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_configured = False


def resolve_level(level: int | str | None = None) -> int:
    """Turn ``level`` (or ``$EXPENSE_TRACKER_LOG_LEVEL``) into a logging level.

    Unknown names fall back to ``INFO`` rather than failing app startup.
    """
    if isinstance(level, int):
        return level
    name = level if level is not None else os.getenv(LEVEL_ENV, "")
    numeric = logging.getLevelName(name.strip().upper()) if name else None
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    stream: IO[str] = sys.stderr,
) -> None:
    """Attach one stream handler to the ``expense_tracker`` logger.

    Streamlit re-executes ``app.py`` on every interaction, so only the first
    call has any effect.
    """
    global _configured
    if _configured:
        return

    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    # Silent until configure_logging runs, so importing modules prints nothing.
    root = logging.getLogger(LOGGER_NAME)
    if not _configured and not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)
