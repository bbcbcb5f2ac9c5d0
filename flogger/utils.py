"""Utility functions for the flogger package.

Provides the severity enum shared by the configuration and the logger
handle, and the printf-style substitution used by every formatted write.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any


class LogLevel(str, Enum):
    """Log levels, valued with the matching loguru level names."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Names accepted in configuration besides the canonical ones
LEVEL_ALIASES: dict[str, LogLevel] = {
    "WARN": LogLevel.WARNING,
    "ERR": LogLevel.ERROR,
    "FATAL": LogLevel.CRITICAL,
}


def parse_level(v: Any) -> LogLevel:
    """Parse a log level from an enum member or a case-insensitive name.

    Args:
        v: Input value which could be a LogLevel or a string

    Returns:
        The matching LogLevel

    Raises:
        ValueError: If the input does not name a known level
    """
    if isinstance(v, LogLevel):
        return v
    if isinstance(v, str):
        name = v.strip().upper()
        if name in LEVEL_ALIASES:
            return LEVEL_ALIASES[name]
        try:
            return LogLevel(name)
        except ValueError:
            pass

    raise ValueError(f"Cannot parse log level from {type(v)}: {v}")


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return object.__repr__(value)


def sprintf(format: str, *args: Any) -> str:
    """Substitute arguments into a printf-style format string.

    Without arguments only ``%%`` escapes are collapsed and any other ``%`` is
    kept as written. A single non-empty mapping feeds ``%(name)s``
    placeholders, as in the standard library's logging.

    Args:
        format: Format string with ``%`` placeholders
        *args: Values to substitute

    Returns:
        The formatted message. When substitution fails for any reason (wrong
        placeholders, out-of-range values, an argument whose ``__str__``
        raises) the raw format is followed by a ``%!(BADFORMAT ...)`` marker
        listing the arguments.
    """
    if not args:
        return format.replace("%%", "%")

    try:
        values: Any = args
        if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
            values = args[0]
        return format % values
    except Exception:
        rendered = ", ".join(_safe_repr(a) for a in args)
        return f"{format} %!(BADFORMAT {rendered})"
