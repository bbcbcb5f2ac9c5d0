"""Log line formatters.

A formatter turns a loguru record into the format template loguru renders
for that record. ``TextFormatter`` produces the prefixed text layout and
``CallerFieldsFormatter`` wraps any formatter to add the caller location
as ``func`` and ``file`` fields.
"""

import os
import re
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from loguru import Record

# Field rendered in front of the message rather than as key=value
PREFIX_KEY = "prefix"

# Anything loguru would take for a colour tag
_MARKUP_TAG = re.compile(r"(</?(?:[fb]g\s)?[^<>\s]*>)")


def _escape(text: str) -> str:
    """Make text safe to embed literally in a loguru format template."""
    text = text.replace("{", "{{").replace("}", "}}")
    return _MARKUP_TAG.sub(r"\\\1", text)


def level_text(record: "Record") -> str:
    """Return the four-letter upper-case level label, e.g. INFO, WARN, ERRO."""
    return record["level"].name.upper()[:4]


class Formatter(Protocol):
    """Anything that can turn a record into a loguru format template."""

    def format(self, record: "Record") -> str: ...


class TextFormatter:
    """Prefixed text formatter.

    Renders ``[LEVL] <timestamp> [prefix: ]<message> key=value ...`` with
    the level label and field keys coloured in the level colour. When
    formatting is not forced and the sink is not a terminal, it falls back
    to a plain ``time=... level=... msg=...`` layout.
    """

    def __init__(
        self,
        force_colors: bool = False,
        force_formatting: bool = False,
        full_timestamp: bool = False,
        timestamp_format: str = "YYYY-MM-DD HH:mm:ss",
        is_terminal: bool = False,
    ) -> None:
        self.force_colors = force_colors
        self.force_formatting = force_formatting
        self.full_timestamp = full_timestamp
        self.timestamp_format = timestamp_format
        self.is_terminal = is_terminal

    @property
    def colored(self) -> bool:
        """Whether the output should carry colour codes."""
        return self.force_colors or self.is_terminal

    def format(self, record: "Record") -> str:
        if self.force_formatting or self.is_terminal:
            line = self._prefixed(record)
        else:
            line = self._plain(record)
        return line + "\n{exception}"

    def _visible_keys(self, record: "Record") -> list[str]:
        return sorted(record["extra"] or {})

    def _prefixed(self, record: "Record") -> str:
        parts = [f"<level>[{_escape(level_text(record))}]</level>"]

        if self.full_timestamp:
            parts.append(f"<green>{{time:{self.timestamp_format}}}</green>")
        else:
            parts.append("<green>[{elapsed.seconds:04d}]</green>")

        keys = self._visible_keys(record)
        message = "{message}"
        if PREFIX_KEY in keys:
            keys.remove(PREFIX_KEY)
            message = f"<cyan>{_field_value(record, PREFIX_KEY)}:</cyan> {message}"
        parts.append(message)

        for key in keys:
            parts.append(f"<level>{_escape(key)}</level>={_field_value(record, key)}")

        return " ".join(parts)

    def _plain(self, record: "Record") -> str:
        parts = [
            f'time="{{time:{self.timestamp_format}}}"',
            f"level={_escape(record['level'].name.lower())}",
            'msg="{message}"',
        ]
        for key in self._visible_keys(record):
            parts.append(f"{_escape(key)}={_field_value(record, key)}")
        return " ".join(parts)


def _field_value(record: "Record", key: str) -> str:
    """Return the template fragment that renders one field value."""
    if key.isidentifier():
        # Substituted by loguru, so the value itself is never parsed as markup
        return f"{{extra[{key}]}}"
    return _escape(str(record["extra"][key]))


class CallerFieldsFormatter:
    """Formatter decorator adding the caller location to each record.

    When caller reporting is on and the record carries caller metadata, the
    originating function name is stored as ``func`` and the source location
    as ``file`` (``<basename>:<line>``) in the record's extra fields before
    the wrapped formatter runs. The record is modified in place.
    """

    def __init__(self, base: Formatter, report_caller: bool = False) -> None:
        self.base = base
        self.report_caller = report_caller

    def has_caller(self, record: "Record") -> bool:
        """Return True when caller metadata should be reported for the record."""
        return (
            self.report_caller
            and record.get("function") is not None
            and record.get("file") is not None
        )

    def format(self, record: "Record") -> str:
        if self.has_caller(record):
            func_val = record["function"]
            file_val = f"{os.path.basename(record['file'].path)}:{record['line']}"

            extra: Any = record.get("extra")
            if extra is None:
                extra = record["extra"] = {}

            extra["func"] = func_val
            extra["file"] = file_val

        return self.base.format(record)
