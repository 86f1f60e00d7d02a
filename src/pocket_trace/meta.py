# src/pocket_trace/meta.py

"""Centralized program identity constants for Pocket Trace."""

_BASE = "pocket-trace"

# Human-readable name for banners, help text, etc.
PROGRAM_DISPLAY = _BASE.replace("-", " ").title()

# Python package / import name (also the standard logger's name)
PROGRAM_PACKAGE = _BASE.replace("-", "_")

# Environment variable prefix (used for POCKET_TRACE_VERBOSE, etc.)
PROGRAM_ENV = _BASE.replace("-", "_").upper()
