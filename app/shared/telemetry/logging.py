"""Logging configuration for the application."""

import logging
import sys

from app.core.config import get_settings

# Third-party loggers that are too chatty at DEBUG for search audit output.
_QUIET_LOGGERS = ("aiosqlite", "asyncio")


def setup_logging(level: int | None = None) -> None:
    """Configure application-wide logging.

    Level is the explicit level when given, else DEBUG when settings.debug
    is True, otherwise INFO. Output goes to stdout. SQL statement echo is
    left to SQLAlchemy (DATABASE_ECHO).

    Args:
        level: Optional logging level overriding the settings-derived one.
    """
    settings = get_settings()
    if level is None:
        level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
