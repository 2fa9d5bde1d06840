# failmodes/demos/faults.py
"""
Deliberate faults.

None of these functions returns. ``trigger_nested_fault`` goes through two
intermediate frames so the traceback shows the whole chain.
"""

from __future__ import annotations

from typing import NoReturn

from failmodes.core.fault import fault

DIRECT_FAULT_MESSAGE = "fault for no reason"
NESTED_FAULT_MESSAGE = "fault from nested call"


def trigger_fault() -> NoReturn:
    fault(DIRECT_FAULT_MESSAGE)


def trigger_nested_fault() -> NoReturn:
    _nested_first()


def _nested_first() -> NoReturn:
    _nested_second()


def _nested_second() -> NoReturn:
    fault(NESTED_FAULT_MESSAGE)
