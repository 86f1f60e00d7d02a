# tests/conftest.py
"""
Shared test setup for project.

Every test starts from the default runtime flags and gets them restored
afterwards, so tests may flip verbose/trace_to_stderr freely.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

import pocket_trace.logs as mod_logs
import pocket_trace.runtime as mod_runtime


class RecordingHandler(logging.Handler):
    """Keep every record that reaches the standard logger."""

    def __init__(self) -> None:
        super().__init__(level=logging.NOTSET)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture(autouse=True)
def _fresh_runtime() -> Iterator[None]:
    saved = dict(mod_runtime.current_runtime)
    mod_runtime.current_runtime.update(mod_runtime.default_runtime())
    try:
        yield
    finally:
        mod_runtime.current_runtime.clear()
        mod_runtime.current_runtime.update(saved)  # type: ignore[typeddict-item]


@pytest.fixture
def log_records() -> Iterator[list[logging.LogRecord]]:
    """Records routed through the standard logger during the test."""
    handler = RecordingHandler()
    logger = mod_logs.get_logger()
    logger.addHandler(handler)
    try:
        yield handler.records
    finally:
        logger.removeHandler(handler)
