# src/pocket_trace/__init__.py

"""Pocket Trace — a logging shim with caller-annotated trace output.

Full developer API
==================
This package re-exports all non-private symbols from its submodules.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - tracef()            → Trace line, only when verbose is on
    - print_/printf/println, fatal/fatalf → Standard logger pass-through
    - current_runtime     → Live flags (verbose, trace_to_stderr, ...)
    - get_unit_id()       → Id of the calling thread or asyncio task
"""

from .constants import (
    DEFAULT_ENV_TRACE_TO_STDERR,
    DEFAULT_ENV_VERBOSE,
    DEFAULT_LOG_PREFIX,
    DEFAULT_LOG_TIMESTAMPS,
    DEFAULT_TRACE_TO_STDERR,
    DEFAULT_VERBOSE,
)
from .logs import (
    TRACE_LEVEL,
    fatal,
    fatalf,
    get_logger,
    print_,
    printf,
    println,
)
from .meta import (
    PROGRAM_DISPLAY,
    PROGRAM_ENV,
    PROGRAM_PACKAGE,
)
from .runtime import (
    Runtime,
    apply_env_overrides,
    current_runtime,
    set_prefix,
    set_timestamps,
    set_trace_to_stderr,
    set_verbose,
    temporary_verbose,
)
from .trace import Tracer, get_tracer, tracef
from .unit_id import get_unit_id


__all__ = [  # noqa: RUF022
    # --- Trace ---
    "Tracer",
    "get_tracer",
    "get_unit_id",
    "tracef",
    #
    # --- Standard logger ---
    "TRACE_LEVEL",
    "fatal",
    "fatalf",
    "get_logger",
    "print_",
    "printf",
    "println",
    #
    # --- Constants / Metadata / Runtime ---
    "DEFAULT_ENV_TRACE_TO_STDERR",
    "DEFAULT_ENV_VERBOSE",
    "DEFAULT_LOG_PREFIX",
    "DEFAULT_LOG_TIMESTAMPS",
    "DEFAULT_TRACE_TO_STDERR",
    "DEFAULT_VERBOSE",
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "apply_env_overrides",
    "current_runtime",
    "set_prefix",
    "set_timestamps",
    "set_trace_to_stderr",
    "set_verbose",
    "temporary_verbose",
    #
    # --- Types ---
    "Runtime",
]
