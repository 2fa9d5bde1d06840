# failmodes/core/option.py
"""
Optional values.

``Option[T]`` is either ``Some(value)`` or the singleton ``NOTHING``.
Absence is a normal outcome, not a failure: it carries no cause and is never
``None``. Consume it by branching on ``is_some()`` / ``is_nothing()`` (or
``isinstance``) before touching the value.

Example:
    >>> pos = find_char("some string", "a")
    >>> if pos.is_some():
    ...     print(pos.value)
    ... else:
    ...     print("not found")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, TypeVar, Union

from .fault import fault
from .propagate import Propagate

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Some(Generic[T]):
    """A present value."""
    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def __bool__(self) -> bool:
        raise TypeError("Option has no truth value; use is_some() or is_nothing()")

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Some[U]":
        return Some(fn(self.value))

    def and_then(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        return fn(self.value)

    def ok_or(self, cause: Any) -> Any:
        from .result import Ok
        return Ok(self.value)

    def bail(self) -> T:
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        return {"present": True, "value": self.value}


class Nothing:
    """The absent value. There is exactly one instance: ``NOTHING``."""

    __slots__ = ()
    _instance = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing"

    def __bool__(self) -> bool:
        raise TypeError("Option has no truth value; use is_some() or is_nothing()")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash(Nothing)

    def __reduce__(self):
        return (Nothing, ())

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def unwrap(self) -> Any:
        fault("called unwrap() on an absent value")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[Any], Any]) -> "Nothing":
        return self

    def and_then(self, fn: Callable[[Any], Any]) -> "Nothing":
        return self

    def ok_or(self, cause: Any) -> Any:
        """Turn absence into a failure explicitly. ``cause`` is a FailureCause."""
        from .result import Err
        return Err(cause)

    def bail(self) -> Any:
        raise Propagate(self)

    def to_dict(self) -> Dict[str, Any]:
        return {"present": False}


NOTHING = Nothing()

Option = Union[Some[T], Nothing]


def is_option(value: Any) -> bool:
    return isinstance(value, (Some, Nothing))
