# failmodes/core/result.py
"""
Recoverable failures.

``Result[T]`` is either ``Ok(value)`` or ``Err(cause)`` where the cause is a
``FailureCause``. Failure is data: it flows back through return values and
every caller either branches on it or forwards it with ``bail()`` from inside
a ``@fallible`` function.

Example:
    >>> result = parse_unsigned("42")
    >>> if result.is_ok():
    ...     print(result.value)
    ... else:
    ...     print(result.cause)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, TypeVar, Union

from .errors import FailureCause
from .fault import fault
from .propagate import Propagate

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful outcome."""
    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def __bool__(self) -> bool:
        raise TypeError("Result has no truth value; use is_ok() or is_err()")

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[FailureCause], FailureCause]) -> "Ok[T]":
        return self

    def and_then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        return fn(self.value)

    def context(self, note: str) -> "Ok[T]":
        return self

    def bail(self) -> T:
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": True, "value": self.value}


@dataclass(frozen=True)
class Err:
    """A failed outcome and its cause."""
    cause: FailureCause

    def __post_init__(self) -> None:
        if not isinstance(self.cause, FailureCause):
            raise TypeError(f"Err requires a FailureCause, got {type(self.cause).__name__}")

    def __repr__(self) -> str:
        return f"Err({self.cause.error_code}: {self.cause})"

    def __bool__(self) -> bool:
        raise TypeError("Result has no truth value; use is_ok() or is_err()")

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        fault(f"called unwrap() on a failure: {self.cause}")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[Any], Any]) -> "Err":
        return self

    def map_err(self, fn: Callable[[FailureCause], FailureCause]) -> "Err":
        return Err(fn(self.cause))

    def and_then(self, fn: Callable[[Any], Any]) -> "Err":
        return self

    def context(self, note: str) -> "Err":
        """Forward the same failure with one more layer of caller context."""
        return Err(self.cause.wrap(note))

    def bail(self) -> Any:
        raise Propagate(self)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "cause": self.cause.to_dict()}


Result = Union[Ok[T], Err]


def is_result(value: Any) -> bool:
    return isinstance(value, (Ok, Err))
