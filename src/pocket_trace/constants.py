# src/pocket_trace/constants.py
"""
Central constants used across the project.
"""

# --- env keys ---
DEFAULT_ENV_VERBOSE: str = "VERBOSE"
DEFAULT_ENV_TRACE_TO_STDERR: str = "TRACE_TO_STDERR"

# --- runtime defaults ---
DEFAULT_VERBOSE: bool = False
DEFAULT_TRACE_TO_STDERR: bool = False
DEFAULT_LOG_PREFIX: str = ""
DEFAULT_LOG_TIMESTAMPS: bool = True

# --- standard logger ---
DEFAULT_DATE_FORMAT: str = "%Y/%m/%d %H:%M:%S"

# stand-ins when introspection comes up empty
UNKNOWN_UNIT_ID: int = 0
UNKNOWN_CALLER: str = "?"
