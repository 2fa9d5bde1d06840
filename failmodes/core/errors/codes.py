# failmodes/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical failure codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
OPERATION_FAILED: Final[str] = "OPERATION_FAILED"

# integer parsing
EMPTY_INPUT: Final[str] = "EMPTY_INPUT"
INVALID_DIGIT: Final[str] = "INVALID_DIGIT"
POS_OVERFLOW: Final[str] = "POS_OVERFLOW"

# configuration
CONFIG_INVALID: Final[str] = "CONFIG_INVALID"


# ---- semantic groups ----

PARSE_CODES: Final[frozenset] = frozenset({
    EMPTY_INPUT,
    INVALID_DIGIT,
    POS_OVERFLOW,
})

KNOWN_CODES: Final[frozenset] = frozenset({
    UNKNOWN,
    OPERATION_FAILED,
    CONFIG_INVALID,
}) | PARSE_CODES


# Human-readable descriptions, worded like the integer parser of most
# standard libraries so the console output reads familiar.
PARSE_MESSAGES: Final[dict] = {
    EMPTY_INPUT: "cannot parse integer from empty string",
    INVALID_DIGIT: "invalid digit found in string",
    POS_OVERFLOW: "number too large to fit in target type",
}
