# pocket_trace/runtime.py
"""Holds live runtime context shared across modules (e.g., verbose, sink flags)."""

import os
from collections.abc import Generator, Mapping
from contextlib import contextmanager
from typing import TypedDict

from .constants import (
    DEFAULT_ENV_TRACE_TO_STDERR,
    DEFAULT_ENV_VERBOSE,
    DEFAULT_LOG_PREFIX,
    DEFAULT_LOG_TIMESTAMPS,
    DEFAULT_TRACE_TO_STDERR,
    DEFAULT_VERBOSE,
)
from .meta import PROGRAM_ENV
from .utils import parse_bool, safe_log


class Runtime(TypedDict):
    verbose: bool
    trace_to_stderr: bool
    log_prefix: str
    log_timestamps: bool


def default_runtime() -> Runtime:
    return {
        "verbose": DEFAULT_VERBOSE,
        "trace_to_stderr": DEFAULT_TRACE_TO_STDERR,
        "log_prefix": DEFAULT_LOG_PREFIX,
        "log_timestamps": DEFAULT_LOG_TIMESTAMPS,
    }


current_runtime: Runtime = default_runtime()


def set_verbose(enabled: bool) -> None:  # noqa: FBT001
    current_runtime["verbose"] = bool(enabled)


def set_trace_to_stderr(enabled: bool) -> None:  # noqa: FBT001
    current_runtime["trace_to_stderr"] = bool(enabled)


def set_prefix(prefix: str) -> None:
    """Set the prefix the standard logger writes before each line."""
    current_runtime["log_prefix"] = prefix


def set_timestamps(enabled: bool) -> None:  # noqa: FBT001
    current_runtime["log_timestamps"] = bool(enabled)


@contextmanager
def temporary_verbose(
    enabled: bool = True,  # noqa: FBT001, FBT002
    *,
    to_stderr: bool | None = None,
) -> Generator[None, None, None]:
    prev_verbose = current_runtime["verbose"]
    prev_to_stderr = current_runtime["trace_to_stderr"]
    current_runtime["verbose"] = enabled
    if to_stderr is not None:
        current_runtime["trace_to_stderr"] = to_stderr
    try:
        yield
    finally:
        current_runtime["verbose"] = prev_verbose
        current_runtime["trace_to_stderr"] = prev_to_stderr


def _env_flag(environ: Mapping[str, str], key: str) -> bool | None:
    raw = environ.get(f"{PROGRAM_ENV}_{key}")
    if raw is None:
        raw = environ.get(key)
    if raw is None:
        return None

    value = parse_bool(raw)
    if value is None:
        safe_log(f"[LOGGER ERROR] ❌ Ignoring non-boolean {key}={raw!r}")
    return value


def apply_env_overrides(
    runtime: Runtime | None = None,
    environ: Mapping[str, str] | None = None,
) -> Runtime:
    """Let the consuming application toggle trace flags from the environment.

    POCKET_TRACE_VERBOSE wins over VERBOSE, and likewise for TRACE_TO_STDERR.
    Unset or unparsable variables leave the current value alone.
    """
    if runtime is None:
        runtime = current_runtime
    if environ is None:
        environ = os.environ

    verbose = _env_flag(environ, DEFAULT_ENV_VERBOSE)
    if verbose is not None:
        runtime["verbose"] = verbose

    to_stderr = _env_flag(environ, DEFAULT_ENV_TRACE_TO_STDERR)
    if to_stderr is not None:
        runtime["trace_to_stderr"] = to_stderr

    return runtime
