"""Package-wide logging for callpaths.

All modules log through children of the ``callpaths`` logger, which owns a
single stderr handler. stdout is left to the command's path output.
"""

import logging
import sys
from typing import Optional

_ROOT_LOGGER_NAME = "callpaths"
_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the ``callpaths`` handler once; later calls are no-ops.

    Args:
        level: Initial level of the package logger.
        format_string: Record format; defaults to timestamp, name, level, message.
        handler: Handler to install instead of a stderr ``StreamHandler``.
    """
    global _configured
    if _configured:
        return

    package_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    # caplog listens on the root logger
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)`` with its level deferring to the package."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler so the next call reinstalls it (used by tests)."""
    global _configured
    _configured = False
    package_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
