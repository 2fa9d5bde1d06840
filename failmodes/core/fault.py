# failmodes/core/fault.py
"""
Unrecoverable faults.

A fault marks a defect or a deliberate abort. It is raised, never returned,
and derives from ``BaseException`` so that ``except Exception`` handlers
written for ordinary errors cannot absorb it. The traceback captured by the
interpreter at the raise site is the post-mortem record of how execution got
there.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, NoReturn, Optional, Tuple
import logging
import os
import sys
import traceback

logger = logging.getLogger(__name__)

BACKTRACE_ENV = "FAILMODES_BACKTRACE"


class Fault(BaseException):
    """Abnormal termination of the current execution unit."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def fault(message: str) -> NoReturn:
    """Abort the current execution unit with ``message``."""
    logger.debug("raising fault: %s", message)
    raise Fault(message)


@dataclass(frozen=True)
class FrameInfo:
    filename: str
    lineno: int
    name: str

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno} in {self.name}"


@dataclass(frozen=True)
class FaultReport:
    """
    Post-mortem snapshot of a terminated execution unit.

    Frames are ordered outermost first, as the interpreter prints them.
    """
    kind: str
    message: str
    frames: Tuple[FrameInfo, ...]
    traceback_text: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FaultReport":
        extracted = traceback.extract_tb(exc.__traceback__)
        frames = tuple(FrameInfo(f.filename, f.lineno or 0, f.name) for f in extracted)
        text = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        message = exc.message if isinstance(exc, Fault) else str(exc)
        return cls(kind=type(exc).__name__, message=message, frames=frames, traceback_text=text)

    @property
    def is_fault(self) -> bool:
        return self.kind == Fault.__name__

    @property
    def frame_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.frames)

    @property
    def origin(self) -> Optional[FrameInfo]:
        """The frame that asked for the abort (the caller of ``fault()``)."""
        if not self.frames:
            return None
        last = self.frames[-1]
        if last.name == fault.__name__ and last.filename == __file__ and len(self.frames) > 1:
            return self.frames[-2]
        return last

    def summary(self) -> str:
        origin = self.origin
        where = f"{origin.filename}:{origin.lineno}" if origin else "<unknown>"
        return f"fault at {where}:\n{self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "origin": str(self.origin) if self.origin else None,
            "frames": [
                {"filename": f.filename, "lineno": f.lineno, "name": f.name}
                for f in self.frames
            ],
        }


def backtrace_enabled(environ: Optional[Dict[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get(BACKTRACE_ENV, "").strip().lower() in {"1", "true", "yes", "full"}


def install_fault_hook(backtrace: bool = False) -> Any:
    """
    Render uncaught faults on stderr before the interpreter exits.

    Only the origin and message are printed unless ``backtrace`` is set.
    Other exceptions are handed to the previously installed hook. The
    process exit status stays non-zero either way.

    Returns the previous hook so callers can restore it.
    """
    previous = sys.excepthook

    def _hook(exc_type, exc, tb):
        if not issubclass(exc_type, Fault):
            previous(exc_type, exc, tb)
            return
        report = FaultReport.from_exception(exc)
        sys.stderr.write(report.summary() + "\n")
        if backtrace:
            sys.stderr.write(report.traceback_text)
        else:
            sys.stderr.write(
                f"note: run with `{BACKTRACE_ENV}=1` environment variable to display a backtrace\n"
            )
        sys.stderr.flush()

    sys.excepthook = _hook
    return previous
