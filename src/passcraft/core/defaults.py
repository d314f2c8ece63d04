"""Centralised default constants for passcraft.

Every project-wide magic number / string lives here.
Import these instead of hard-coding values in function signatures or CLI options.
"""

from __future__ import annotations

from typing import Final

# ── Hash formatting ──
DEFAULT_METHOD: Final[str] = "SHA512"
DEFAULT_CUT_LENGTH: Final[int] = 8
DEFAULT_END_CHAR: Final[str] = "!"
DEFAULT_UPPER_START: Final[int] = 3

# ── Validation bounds ──
MIN_CUT_LENGTH: Final[int] = 1
MAX_CUT_LENGTH: Final[int] = 64

# ── Key-value grammar ──
PAIR_SEPARATOR: Final[str] = ","
KEY_VALUE_SEPARATOR: Final[str] = ":"
COMPACT_SEPARATOR: Final[str] = ";"

# ── CLI ──
DEFAULT_CMD: Final[str] = "add"
DEFAULT_MODE: Final[str] = "interactive"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
LOG_LEVEL_ENVVAR: Final[str] = "PASSCRAFT_LOG_LEVEL"

# ── Console ──
BANNER_WIDTH: Final[int] = 50
CONFIG_BANNER_WIDTH: Final[int] = 60
TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
