# exntree/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INVALID_ARGUMENT: Final[str] = "INVALID_ARGUMENT"

# configuration
CONFIG_NOT_FOUND: Final[str] = "CONFIG_NOT_FOUND"
CONFIG_PARSE_FAILED: Final[str] = "CONFIG_PARSE_FAILED"
CONFIG_INVALID: Final[str] = "CONFIG_INVALID"


# ---- semantic groups (internal helpers) ----

CONFIG_CODES: Final[set[str]] = {
    CONFIG_NOT_FOUND,
    CONFIG_PARSE_FAILED,
    CONFIG_INVALID,
}

# Codes we know how to report. Anything else is downgraded to UNKNOWN.
KNOWN_CODES: Final[set[str]] = {
    UNKNOWN,
    INVALID_ARGUMENT,
} | CONFIG_CODES
