# src/pocket_trace/utils.py

import reprlib
import sys
from collections.abc import Mapping
from contextlib import suppress
from typing import TextIO, cast

# --- constants ----------------------------------------------------------------

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})
FALSY_VALUES = frozenset({"0", "false", "no", "off", ""})


# --- utils --------------------------------------------------------------------


def safe_log(msg: str) -> None:
    """Emergency logger that never fails."""
    stream = cast("TextIO", sys.__stderr__)
    try:
        print(msg, file=stream)
    except Exception:  # noqa: BLE001
        # As final guardrail — never crash during crash reporting
        with suppress(Exception):
            stream.write(f"[INTERNAL] {msg}\n")


def parse_bool(raw: str) -> bool | None:
    """Interpret an environment-style boolean.

    Returns None when the value is neither truthy nor falsy.
    """
    value = raw.strip().lower()
    if value in TRUTHY_VALUES:
        return True
    if value in FALSY_VALUES:
        return False
    return None


# --- print conventions --------------------------------------------------------


def sprint(*values: object) -> str:
    """Join operands, adding a space only between two non-string operands."""
    parts: list[str] = []
    prev_is_str = True
    for i, value in enumerate(values):
        is_str = isinstance(value, str)
        if i > 0 and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(_safe_str(value))
        prev_is_str = is_str
    return "".join(parts)


def sprintln(*values: object) -> str:
    """Join operands with single spaces and terminate with a newline."""
    return " ".join(_safe_str(v) for v in values) + "\n"


def sprintf(fmt: str, *args: object) -> str:
    """Apply %-style formatting without ever raising.

    A single non-empty mapping argument supplies ``%(name)s`` keys, the same
    way ``logging`` treats it. Bad templates, and arguments that fail to
    convert, come back as the raw template followed by a ``%!(BADFORMAT ...)`` marker.
    """
    try:
        values: object = args
        if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
            values = args[0]
        return fmt % values
    except Exception as e:  # noqa: BLE001
        return f"{fmt}%!(BADFORMAT {_describe_error(e)}; args={reprlib.repr(args)})"


def _describe_error(exc: BaseException) -> str:
    try:
        return str(exc)
    except Exception:  # noqa: BLE001
        return type(exc).__name__


def ensure_newline(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception as e:  # noqa: BLE001
        return f"%!(BADVALUE {type(value).__name__}: {_describe_error(e)})"
