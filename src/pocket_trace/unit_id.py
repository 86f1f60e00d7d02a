# src/pocket_trace/unit_id.py

"""Identify the execution unit (thread or asyncio task) a call runs on.

Identity comes from ``asyncio.current_task()`` and
``threading.current_thread()``; each unit is then handed a small integer
from one shared counter on first sight. Ids are never reused, so two units
alive at the same time never share one. The main thread is always ``1``.
"""

import asyncio
import itertools
import threading
import weakref

from .constants import UNKNOWN_UNIT_ID


_counter = itertools.count(1)
_lock = threading.Lock()

_thread_ids: "weakref.WeakKeyDictionary[threading.Thread, int]" = (
    weakref.WeakKeyDictionary()
)
_task_ids: "weakref.WeakKeyDictionary[asyncio.Task[object], int]" = (
    weakref.WeakKeyDictionary()
)

_thread_ids[threading.main_thread()] = next(_counter)


def _current_task() -> "asyncio.Task[object] | None":
    try:
        return asyncio.current_task()
    except RuntimeError:
        # no running event loop in this thread
        return None


def _lookup(table: "weakref.WeakKeyDictionary[object, int]", key: object) -> int:
    unit_id = table.get(key)
    if unit_id is not None:
        return unit_id
    with _lock:
        unit_id = table.get(key)
        if unit_id is None:
            unit_id = next(_counter)
            table[key] = unit_id
    return unit_id


def get_unit_id() -> int:
    """Return the id of the calling thread or task, or 0 if unknown."""
    try:
        task = _current_task()
        if task is not None:
            return _lookup(_task_ids, task)  # type: ignore[arg-type]
        return _lookup(_thread_ids, threading.current_thread())  # type: ignore[arg-type]
    except Exception:  # noqa: BLE001
        return UNKNOWN_UNIT_ID
