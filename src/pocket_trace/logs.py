# src/pocket_trace/logs.py

"""The standard logger and its pass-through print family.

Everything here delegates to one ``logging.Logger`` named after the package.
Lines go to whatever ``sys.stderr`` is at emit time, stamped with the
configured prefix and a ``YYYY/MM/DD HH:MM:SS`` timestamp.
"""

import logging
import sys
from typing import NoReturn, TextIO

from .constants import DEFAULT_DATE_FORMAT
from .meta import PROGRAM_PACKAGE
from .runtime import current_runtime
from .utils import sprint, sprintf, sprintln


# --- Custom TRACE level ------------------------------------------------------


TRACE_LEVEL = logging.DEBUG - 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

PRINT_LEVEL = logging.INFO
FATAL_LEVEL = logging.CRITICAL

FATAL_EXIT_CODE = 1


# --- Standard formatter ------------------------------------------------------


class StdFormatter(logging.Formatter):
    """Render ``<prefix><date> <time> <message>`` from live runtime settings."""

    def __init__(self) -> None:
        super().__init__("%(message)s", datefmt=DEFAULT_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        stamp = ""
        if current_runtime.get("log_timestamps", True):
            stamp = f"{self.formatTime(record, self.datefmt)} "
        return f"{current_runtime.get('log_prefix', '')}{stamp}{msg}"


# --- StderrHandler -----------------------------------------------------------


class StderrHandler(logging.StreamHandler[TextIO]):
    """Write every record to the current sys.stderr."""

    def __init__(self) -> None:
        super().__init__(stream=sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        # resolved per record; sys.stderr may have been swapped since init
        self.stream = sys.stderr
        super().emit(record)


# --- Logger initialization ---------------------------------------------------


_logger = logging.getLogger(PROGRAM_PACKAGE)


def _ensure_logger_initialized() -> None:
    """Configure the logger once."""
    if getattr(_ensure_logger_initialized, "_done", False):
        return

    handler = StderrHandler()
    handler.setFormatter(StdFormatter())
    _logger.addHandler(handler)
    _logger.setLevel(TRACE_LEVEL)

    _logger.propagate = False  # don’t double-log through root logger
    _ensure_logger_initialized._done = True  # type: ignore[attr-defined]  # noqa: SLF001


def get_logger() -> logging.Logger:
    """Return the configured pocket_trace logger."""
    _ensure_logger_initialized()
    return _logger


def output(level: int, text: str, *, stacklevel: int = 1) -> None:
    """Hand one line to the standard logger.

    A single trailing newline is dropped; the handler terminates the line.
    ``stacklevel`` counts from the caller of output().
    """
    if text.endswith("\n"):
        text = text[:-1]
    get_logger().log(level, text, stacklevel=stacklevel + 1)


# --- Print family ------------------------------------------------------------


def print_(*values: object) -> None:
    output(PRINT_LEVEL, sprint(*values), stacklevel=2)


def printf(fmt: str, *values: object) -> None:
    output(PRINT_LEVEL, sprintf(fmt, *values), stacklevel=2)


def println(*values: object) -> None:
    output(PRINT_LEVEL, sprintln(*values), stacklevel=2)


def fatal(*values: object) -> NoReturn:
    """Log like print_() and then exit with status 1."""
    output(FATAL_LEVEL, sprint(*values), stacklevel=2)
    sys.exit(FATAL_EXIT_CODE)


def fatalf(fmt: str, *values: object) -> NoReturn:
    """Log like printf() and then exit with status 1."""
    output(FATAL_LEVEL, sprintf(fmt, *values), stacklevel=2)
    sys.exit(FATAL_EXIT_CODE)
