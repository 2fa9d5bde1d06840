# failmodes/demos/parsing.py
"""
Unsigned integer parsing and failure propagation.

Every function here that calls another fallible function is ``@fallible``
and forwards failures with ``bail()``.
"""

from __future__ import annotations

import logging

from failmodes.core.errors import FailureCause, codes
from failmodes.core.propagate import fallible
from failmodes.core.result import Err, Ok, Result

logger = logging.getLogger(__name__)

DEFAULT_BITS = 32
DEMO_INPUT = "j"

_DIGITS = "0123456789"


def parse_unsigned(text: str, bits: int = DEFAULT_BITS) -> Result[int]:
    """
    Parse ASCII decimal text into an unsigned integer of ``bits`` width.

    One leading ``+`` is accepted. Any other non-digit, a sign on its own,
    or a value above ``2**bits - 1`` is a failure; overflow is reported as
    soon as the running value passes the limit.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")
    if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0:
        raise ValueError(f"bits must be a positive int, got {bits!r}")

    if not text:
        return Err(FailureCause.empty_input())

    start = 1 if text[0] == "+" else 0
    if start == len(text):
        return Err(FailureCause.invalid_digit(text, 0))

    limit = (1 << bits) - 1
    value = 0
    for position in range(start, len(text)):
        digit = _DIGITS.find(text[position])
        if digit < 0:
            return Err(FailureCause.invalid_digit(text, position))
        value = value * 10 + digit
        if value > limit:
            return Err(FailureCause.pos_overflow(text, bits))
    return Ok(value)


@fallible
def parse_demo_input(text: str = DEMO_INPUT, bits: int = DEFAULT_BITS) -> Result[int]:
    value = parse_unsigned(text, bits).bail()
    return Ok(value)


@fallible
def sum_unsigned(*texts: str, bits: int = DEFAULT_BITS) -> Result[int]:
    """Parse and add every operand; the first failing operand ends the sum."""
    limit = (1 << bits) - 1
    total = 0
    for index, text in enumerate(texts):
        total += parse_unsigned(text, bits).context(f"operand {index} ({text!r})").bail()
        if total > limit:
            cause = FailureCause.pos_overflow("+".join(texts), bits)
            return Err(cause.wrap(f"sum after operand {index}"))
    logger.debug("summed %d operands to %d", len(texts), total)
    return Ok(total)


def inner_failure() -> Result[None]:
    return Err(FailureCause("Error", error_code=codes.OPERATION_FAILED))


@fallible
def forward_failure() -> Result[None]:
    inner_failure().context("forward_failure").bail()
    return Ok(None)
