"""Test utility functions for flogger.

Provides helpers for building settings, synthetic loguru records and
random payloads for use in test cases.
"""

import os
import random
import re
import string
from datetime import datetime, timedelta
from types import SimpleNamespace
from typing import Any

from flogger.core.config import Settings

# Strips colour codes from captured output
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

TIMESTAMP = r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"


def random_lower_string(length: int = 32) -> str:
    """Generate a random lowercase string.

    Args:
        length: Length of the string to generate (default: 32)

    Returns:
        A random lowercase string of the specified length
    """
    # For test data, standard random is sufficient - not used for security purposes
    return "".join(random.choices(string.ascii_lowercase, k=length))


def make_settings(**overrides: Any) -> Settings:
    """Build settings from defaults and overrides only, ignoring any .env file."""
    return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]


def make_record(
    function: str | None = "handle_request",
    path: str | None = "/srv/app/services/jobs.py",
    line: int = 42,
    level: str = "INFO",
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a dict shaped like a loguru record.

    Args:
        function: Originating function name, None for no caller metadata
        path: Source file path, None for no caller metadata
        line: Source line number
        level: Level name
        extra: Initial field mapping (may be None)

    Returns:
        A record-like dict usable by the formatters
    """
    file = None
    if path is not None:
        file = SimpleNamespace(name=os.path.basename(path), path=path)

    return {
        "function": function,
        "file": file,
        "line": line,
        "level": SimpleNamespace(name=level, no=20, icon=""),
        "message": "payload",
        "time": datetime.now(),
        "elapsed": timedelta(seconds=3),
        "exception": None,
        "extra": extra,
    }


def strip_ansi(text: str) -> str:
    """Remove colour escape sequences."""
    return ANSI_ESCAPE.sub("", text)
