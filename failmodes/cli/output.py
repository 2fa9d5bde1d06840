# failmodes/cli/output.py
from __future__ import annotations

from typing import Iterable, Optional, TextIO
import sys

from failmodes.core.report import DemoRecord


def emit(records: Iterable[DemoRecord], as_json: bool = False, stream: Optional[TextIO] = None) -> None:
    """Print one line per record, as text or JSON."""
    out = stream or sys.stdout
    for record in records:
        out.write((record.to_json() if as_json else record.line()) + "\n")
    out.flush()
