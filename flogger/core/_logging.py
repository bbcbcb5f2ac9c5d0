"""Logger handle and process-wide default logger using Loguru.

``FLogger`` owns a private loguru logger, copied from the global one without
its handlers, and installs a single handler on it writing to its sink
through the caller-fields formatter. Handlers the host application adds to
the global loguru logger never see these records, and the host's own
handlers are left in place. The process default is created once, on import.
"""

import copy
import sys
import threading
from typing import IO, TYPE_CHECKING, Any

from loguru import logger as loguru_logger

from flogger.core.config import Settings
from flogger.core.formatter import CallerFieldsFormatter, TextFormatter
from flogger.utils import LogLevel, sprintf

if TYPE_CHECKING:
    from loguru import Logger


def _independent_logger() -> "Logger":
    """Return a loguru logger with its own core and no handlers."""
    # Host sinks may not be copyable, so the copy starts with an empty handler table
    memo: dict[int, Any] = {id(loguru_logger._core.handlers): {}}  # type: ignore[attr-defined]
    return copy.deepcopy(loguru_logger, memo)


def _is_terminal(sink: Any) -> bool:
    isatty = getattr(sink, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        # Closed or detached stream
        return False


class FLogger:
    """Formatted logger handle.

    Writes are fire-and-forget: a failing sink is reported by loguru on
    stderr and never raised to the caller.
    """

    def __init__(self, settings: Settings | None = None, sink: IO[str] | None = None) -> None:
        """
        Create the handle and install its handler.

        Args:
            settings: Logger settings, read from the environment when omitted
            sink: Text stream to write to (default: sys.stderr)
        """
        self.settings = settings if settings is not None else Settings()
        self.sink = sink if sink is not None else sys.stderr

        self.text_formatter = TextFormatter(
            force_colors=self.settings.FORCE_COLORS,
            force_formatting=self.settings.FORCE_FORMATTING,
            full_timestamp=self.settings.FULL_TIMESTAMP,
            timestamp_format=self.settings.TIMESTAMP_FORMAT,
            is_terminal=_is_terminal(self.sink),
        )
        self.formatter = CallerFieldsFormatter(
            self.text_formatter, report_caller=self.settings.REPORT_CALLER
        )

        # Bound views keep pointing at the handle that owns the handler
        self._root = self
        self._logger = _independent_logger()
        self._handler_id: int | None = self._logger.add(
            self.sink,
            format=self.formatter.format,
            level=self.settings.LEVEL.value,
            colorize=self.text_formatter.colored,
            backtrace=False,
            diagnose=False,
            catch=True,
        )

    def __enter__(self) -> "FLogger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._root._handler_id is None

    def _emit(self, level: LogLevel, format: str, args: tuple[Any, ...], depth: int) -> None:
        # depth counts frames above this one; the caller location is taken from there
        self._logger.opt(depth=depth).log(level.value, sprintf(format, *args))

    def bind(self, **fields: Any) -> "FLogger":
        """
        Return a view of this handle whose records carry extra fields.

        The view shares the handler, so closing either closes both.

        Args:
            **fields: Field names and values to attach to every record
        """
        view = copy.copy(self)
        view._logger = self._logger.bind(**fields)
        return view

    def debug(self, format: str, *args: Any) -> None:
        """Log a message at the Debug level with printf-style formatting."""
        self._emit(LogLevel.DEBUG, format, args, depth=2)

    def info(self, format: str, *args: Any) -> None:
        """Log a message at the Info level with printf-style formatting."""
        self._emit(LogLevel.INFO, format, args, depth=2)

    def warn(self, format: str, *args: Any) -> None:
        """Log a message at the Warn level with printf-style formatting."""
        self._emit(LogLevel.WARNING, format, args, depth=2)

    warning = warn

    def error(self, format: str, *args: Any) -> None:
        """Log a message at the Error level with printf-style formatting."""
        self._emit(LogLevel.ERROR, format, args, depth=2)

    def flush(self) -> None:
        """Flush the sink, if it supports flushing."""
        flush = getattr(self.sink, "flush", None)
        if flush is not None and not self.closed:
            flush()

    def close(self) -> None:
        """Remove the handler. Safe to call more than once."""
        root = self._root
        if root._handler_id is None:
            return
        root._logger.remove(root._handler_id)
        root._handler_id = None


def create_logger(settings: Settings | None = None, sink: IO[str] | None = None) -> FLogger:
    """Create an independent logger handle.

    Intended for an application's composition root, which then passes the
    handle to the components that log.

    Args:
        settings: Logger settings, read from the environment when omitted
        sink: Text stream to write to (default: sys.stderr)

    Returns:
        A ready FLogger
    """
    return FLogger(settings, sink)


_default_logger: FLogger | None = None
_init_lock = threading.Lock()


def init_logger(settings: Settings | None = None, sink: IO[str] | None = None) -> FLogger:
    """Initialize the process-wide logger once.

    Later calls return the existing logger and ignore their arguments.
    """
    global _default_logger
    with _init_lock:
        if _default_logger is None:
            _default_logger = FLogger(settings, sink)
        return _default_logger


def get_logger() -> FLogger:
    """Return the process-wide logger."""
    if _default_logger is None:
        return init_logger()
    return _default_logger


logger = init_logger()
