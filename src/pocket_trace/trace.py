# src/pocket_trace/trace.py

"""Caller-annotated trace output gated behind the verbose flag.

A trace line looks like::

    [<unit id>] <caller>(): <message>

and goes either straight to stderr or through the standard logger,
depending on ``trace_to_stderr``.
"""

import sys
from typing import TextIO

from .constants import UNKNOWN_CALLER
from .logs import TRACE_LEVEL, output
from .runtime import Runtime, current_runtime
from .unit_id import get_unit_id
from .utils import ensure_newline, sprintf


def caller_name(depth: int = 1) -> str:
    """Return the bare function name ``depth`` frames above the caller."""
    try:
        frame = sys._getframe(depth + 1)  # noqa: SLF001
    except ValueError:
        return UNKNOWN_CALLER
    return frame.f_code.co_name


def format_trace_line(unit_id: int, caller: str, message: str) -> str:
    return ensure_newline(f"[{unit_id}] {caller}(): {message}")


class Tracer:
    """Emit trace lines according to a runtime configuration.

    The runtime mapping is read on every call, so flipping ``verbose`` or
    ``trace_to_stderr`` on it takes effect immediately. ``stream`` pins the
    stderr sink; by default the current ``sys.stderr`` is used. ``stacklevel``
    works like logging's: raise it to name the caller of a wrapper instead.
    """

    def __init__(
        self,
        runtime: Runtime | None = None,
        *,
        stream: TextIO | None = None,
        stacklevel: int = 1,
    ) -> None:
        self.runtime = runtime if runtime is not None else current_runtime
        self.stream = stream
        self.stacklevel = stacklevel

    def tracef(self, fmt: str, *args: object) -> None:
        if not self.runtime["verbose"]:
            return
        self._emit(fmt, args, self.stacklevel + 1)

    def _emit(self, fmt: str, args: tuple[object, ...], depth: int) -> None:
        # depth: frames between _emit and the traced function
        line = format_trace_line(
            get_unit_id(),
            caller_name(depth),
            sprintf(fmt, *args),
        )

        if self.runtime["trace_to_stderr"]:
            stream = self.stream if self.stream is not None else sys.stderr
            stream.write(line)
            stream.flush()
        else:
            output(TRACE_LEVEL, line, stacklevel=depth + 1)


_default_tracer = Tracer()


def get_tracer() -> Tracer:
    """Return the tracer bound to current_runtime."""
    return _default_tracer


def tracef(fmt: str, *args: object) -> None:
    """Print a trace line when verbose is on; otherwise do nothing."""
    if not _default_tracer.runtime["verbose"]:
        return
    _default_tracer._emit(fmt, args, 2)  # noqa: SLF001
