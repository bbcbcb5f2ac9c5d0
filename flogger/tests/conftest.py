"""Test configuration and fixtures module.

Provides pytest fixtures for in-memory sinks, isolated logger handles,
and a swapped-in process-wide logger.
"""

# =========================================================
# IMPORTANT: Clean the environment BEFORE any imports!
# =========================================================
import io
import os
from collections.abc import Generator

import pytest

# Settings read FLOGGER_* variables; strip them so the developer's shell
# cannot change what the tests observe
for _key in [k for k in os.environ if k.upper().startswith("FLOGGER_")]:
    del os.environ[_key]

from flogger.core import _logging  # noqa: E402 - Must be imported after env setup
from flogger.core._logging import FLogger  # noqa: E402
from flogger.tests.utils.utils import make_settings  # noqa: E402


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory sink collecting everything a logger writes."""
    return io.StringIO()


@pytest.fixture
def flog(stream: io.StringIO) -> Generator[FLogger, None, None]:
    """Provide a logger writing plain, uncoloured lines to ``stream``.

    Uses the default configuration apart from colours, so assertions can
    match on raw text.
    """
    handle = FLogger(make_settings(FORCE_COLORS=False), sink=stream)
    try:
        yield handle
    finally:
        handle.close()


@pytest.fixture
def default_logger(
    monkeypatch: pytest.MonkeyPatch, stream: io.StringIO
) -> Generator[FLogger, None, None]:
    """Swap the process-wide logger for one writing to ``stream``.

    Caller reporting is on so the package-level functions can be checked
    for the call site they report.
    """
    handle = FLogger(make_settings(FORCE_COLORS=False, REPORT_CALLER=True), sink=stream)
    monkeypatch.setattr(_logging, "_default_logger", handle)
    try:
        yield handle
    finally:
        handle.close()
