# failmodes/core/propagate.py
"""
Short-circuit propagation for Option and Result.

``bail()`` on a value either hands back the wrapped value or raises
``Propagate`` carrying the absent/failed value. The ``@fallible`` and
``@optional`` decorators catch it at the function boundary and return the
carried value as the function's own result.

The two tiers never mix: a ``NOTHING`` bailed inside a ``@fallible``
function (or an ``Err`` inside an ``@optional`` one) is a defect and raises
``TypeError``. Convert explicitly with ``Option.ok_or()``.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar
import functools
import logging

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class Propagate(BaseException):  # noqa: N818
    """
    Raised by ``bail()`` to unwind to the nearest decorated function.

    Derives from ``BaseException`` so that an ``except Exception`` inside the
    decorated function cannot swallow a forwarded failure.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = value
        super().__init__(f"Propagate({value!r})")

    @property
    def value(self) -> Any:
        return self._value


def _boundary(expected: type, tier: str, hint: str) -> Callable[[F], F]:
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Propagate as p:
                if isinstance(p.value, expected):
                    logger.debug("%s short-circuited with %r", func.__qualname__, p.value)
                    return p.value
                raise TypeError(
                    f"{func.__qualname__} is {tier} but bail() forwarded {p.value!r}; {hint}"
                ) from None
        return wrapper  # type: ignore[return-value]
    return decorator


def fallible(func: F) -> F:
    """
    Mark a function returning ``Result`` as a propagation boundary.

    Example:
        >>> @fallible
        ... def double(text):
        ...     return Ok(parse_unsigned(text).bail() * 2)
    """
    from .result import Err
    return _boundary(Err, "@fallible", "convert absence with ok_or()")(func)


def optional(func: F) -> F:
    """Mark a function returning ``Option`` as a propagation boundary."""
    from .option import Nothing
    return _boundary(Nothing, "@optional", "a failure cannot be forwarded as absence")(func)
