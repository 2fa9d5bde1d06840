# failmodes/core/isolation.py
"""
Run a callable as an isolated execution unit.

A fault inside the unit terminates that unit only: the worker thread dies,
the calling thread keeps running and receives the post-mortem report.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional
import logging
import threading

from .fault import FaultReport
from .option import NOTHING, Option, Some

logger = logging.getLogger(__name__)


def run_isolated(
    fn: Callable[..., Any],
    *args: Any,
    thread_name: Optional[str] = None,
    **kwargs: Any,
) -> Option[FaultReport]:
    """
    Run ``fn(*args, **kwargs)`` on its own thread and wait for it.

    ``thread_name`` names the worker thread; every other keyword goes to
    ``fn``.

    Returns:
        ``Some(FaultReport)`` if the unit terminated abnormally,
        ``NOTHING`` if it ran to completion. The return value of ``fn``
        is not carried back.
    """
    reports: List[FaultReport] = []

    def _unit() -> None:
        try:
            fn(*args, **kwargs)
        except BaseException as exc:  # noqa: B902 - the unit ends here either way
            reports.append(FaultReport.from_exception(exc))

    thread = threading.Thread(target=_unit, name=thread_name or f"isolated-{getattr(fn, '__name__', 'unit')}")
    thread.start()
    thread.join()

    if not reports:
        logger.debug("execution unit %s completed", thread.name)
        return NOTHING

    report = reports[0]
    logger.error(
        "execution unit %s terminated by %s: %s\n%s",
        thread.name,
        report.kind,
        report.message,
        report.traceback_text.rstrip(),
    )
    return Some(report)
