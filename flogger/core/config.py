"""Logger configuration settings module.

Provides settings management for the flogger handle using Pydantic.
Values are read once, when a logger is constructed, from keyword arguments,
``FLOGGER_*`` environment variables or a local ``.env`` file.
"""

from typing import Annotated

from pydantic import BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flogger.utils import LogLevel, parse_level


class Settings(BaseSettings):
    """Logger settings.

    The defaults are the fixed configuration of the process-wide logger:
    Info and above, forced colours and formatting, full timestamps, and
    caller reporting switched off.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLOGGER_",
        env_file=[".env"],
        env_ignore_empty=True,
        extra="ignore",
    )

    # Minimum emitted severity
    LEVEL: Annotated[LogLevel, BeforeValidator(parse_level)] = LogLevel.INFO

    # Adds func and file fields to each line when switched on
    REPORT_CALLER: bool = False

    # Formatter style
    FORCE_COLORS: bool = True
    FORCE_FORMATTING: bool = True
    FULL_TIMESTAMP: bool = True
    TIMESTAMP_FORMAT: str = "YYYY-MM-DD HH:mm:ss"
