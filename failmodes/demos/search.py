# failmodes/demos/search.py
from __future__ import annotations

from failmodes.core.option import NOTHING, Option, Some
from failmodes.core.propagate import optional


def find_char(text: str, ch: str) -> Option[int]:
    """
    Zero-based position of the first ``ch`` in ``text``, or ``NOTHING``.

    Positions count characters (code points), not bytes. This differs on
    purpose from byte-offset searches such as Rust's ``str::find``: for
    non-ASCII text the two disagree (``find_char("héllo", "l")`` is 2, a
    byte search gives 3). Not finding the character is an ordinary outcome.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"ch must be a single character, got {ch!r}")

    for position, current in enumerate(text):
        if current == ch:
            return Some(position)
    return NOTHING


@optional
def find_after(text: str, first: str, second: str) -> Option[int]:
    """Position of ``second`` strictly after the first ``first``."""
    start = find_char(text, first).bail()
    offset = find_char(text[start + 1:], second).bail()
    return Some(start + 1 + offset)
