"""Logging setup for recursive_category.

The package logger only carries a ``NullHandler``; applications that want
output call :func:`configure_logging` or configure ``logging`` themselves.
"""

from __future__ import annotations

import logging

from recursive_category.config import RECURSIVE_CATEGORY_LOG_LEVEL

PACKAGE_LOGGER_NAME = "recursive_category"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module. Names outside the
            package are nested under it so one handler covers everything.

    Returns:
        The logger instance.
    """
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling this more than once replaces the previous console handler
    instead of stacking a new one.

    Args:
        level: Log level name or number. Defaults to
            ``RECURSIVE_CATEGORY_LOG_LEVEL``.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    resolved = level if level is not None else RECURSIVE_CATEGORY_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)

    for handler in list(logger.handlers):
        if getattr(handler, "_recursive_category_console", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    console_handler._recursive_category_console = True  # type: ignore[attr-defined]
    logger.addHandler(console_handler)

    return logger
