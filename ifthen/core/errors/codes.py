# ifthen/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INTERNAL_ERROR: Final[str] = "INTERNAL_ERROR"

# configuration
INVALID_RULE: Final[str] = "INVALID_RULE"
UNKNOWN_VALIDATOR: Final[str] = "UNKNOWN_VALIDATOR"
INVALID_RULE_FILE: Final[str] = "INVALID_RULE_FILE"

# client script synthesis
CLIENT_CHECK_UNPARSEABLE: Final[str] = "CLIENT_CHECK_UNPARSEABLE"


# ---- semantic groups (internal helpers) ----

CONFIGURATION_CODES: Final[set[str]] = {
    INVALID_RULE,
    UNKNOWN_VALIDATOR,
    INVALID_RULE_FILE,
}

SYNTHESIS_CODES: Final[set[str]] = {
    CLIENT_CHECK_UNPARSEABLE,
}

KNOWN_CODES: Final[set[str]] = (
    {UNKNOWN, INTERNAL_ERROR} | CONFIGURATION_CODES | SYNTHESIS_CODES
)
