"""Formatted logging facade over Loguru.

Importing the package installs the process-wide logger; the functions below
write through it with printf-style formatting:

    import flogger
    flogger.info("hello %s", "world")
    flogger.warn("count=%d", 3)

Components that prefer an explicit handle can build one with
``create_logger`` and pass it around instead.
"""

from typing import Any

from flogger.core._logging import (
    FLogger,
    create_logger,
    get_logger,
    init_logger,
    logger,
)
from flogger.core.config import Settings
from flogger.utils import LogLevel

__all__ = [
    "FLogger",
    "LogLevel",
    "Settings",
    "create_logger",
    "error",
    "flush",
    "get_logger",
    "info",
    "init_logger",
    "logger",
    "warn",
    "warning",
]


def info(format: str, *args: Any) -> None:
    """Log a message at the Info level.

    Accepts a format string and arguments, as the ``%`` operator does.
    """
    get_logger()._emit(LogLevel.INFO, format, args, depth=2)


def warn(format: str, *args: Any) -> None:
    """Log a message at the Warn level.

    Accepts a format string and arguments, as the ``%`` operator does.
    """
    get_logger()._emit(LogLevel.WARNING, format, args, depth=2)


warning = warn


def error(format: str, *args: Any) -> None:
    """Log a message at the Error level.

    Accepts a format string and arguments, as the ``%`` operator does.
    """
    get_logger()._emit(LogLevel.ERROR, format, args, depth=2)


def flush() -> None:
    """Flush the process-wide logger's sink."""
    get_logger().flush()
