# failmodes/core/errors/cause.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple

from . import codes


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Codes we do not define are downgraded to UNKNOWN.
    """
    c = str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass(frozen=True)
class FailureCause:
    """
    Why a recoverable operation could not complete.

    A cause is plain data: it travels inside ``Err`` through return values
    and is never raised. ``context`` holds the notes added by callers while
    the failure was forwarded, innermost first.
    """
    message: str
    error_code: str = codes.UNKNOWN
    details: Dict[str, Any] = field(default_factory=dict, hash=False)
    context: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.message, str) or not self.message.strip():
            raise ValueError("FailureCause.message must be a non-empty string")
        object.__setattr__(self, "error_code", _normalize_error_code(self.error_code))

    def __str__(self) -> str:
        # Outermost context first, root message last
        return ": ".join(tuple(reversed(self.context)) + (self.message,))

    def wrap(self, note: str) -> "FailureCause":
        """Return the same cause with one more layer of caller context."""
        if not note:
            return self
        return replace(self, context=self.context + (note,))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": list(self.context),
            "details": dict(self.details),
            "rendered": str(self),
        }

    # -------- factories --------

    @classmethod
    def empty_input(cls) -> "FailureCause":
        return cls(
            message=codes.PARSE_MESSAGES[codes.EMPTY_INPUT],
            error_code=codes.EMPTY_INPUT,
            details={"input": ""},
        )

    @classmethod
    def invalid_digit(cls, text: str, position: int) -> "FailureCause":
        return cls(
            message=codes.PARSE_MESSAGES[codes.INVALID_DIGIT],
            error_code=codes.INVALID_DIGIT,
            details={"input": text, "position": position},
        )

    @classmethod
    def pos_overflow(cls, text: str, bits: int) -> "FailureCause":
        return cls(
            message=codes.PARSE_MESSAGES[codes.POS_OVERFLOW],
            error_code=codes.POS_OVERFLOW,
            details={"input": text, "bits": bits, "max": (1 << bits) - 1},
        )
