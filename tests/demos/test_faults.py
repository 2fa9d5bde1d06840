# tests/demos/test_faults.py
"""
Fault demo tests - neither trigger returns, and the nested one keeps its chain
"""

import pytest

from failmodes.core.fault import Fault, FaultReport
from failmodes.core.isolation import run_isolated
from failmodes.demos.faults import (
    DIRECT_FAULT_MESSAGE,
    NESTED_FAULT_MESSAGE,
    trigger_fault,
    trigger_nested_fault,
)


def test_direct_fault_message():
    with pytest.raises(Fault) as excinfo:
        trigger_fault()
    assert excinfo.value.message == DIRECT_FAULT_MESSAGE == "fault for no reason"


def test_direct_fault_origin():
    with pytest.raises(Fault) as excinfo:
        trigger_fault()
    assert FaultReport.from_exception(excinfo.value).origin.name == "trigger_fault"


def test_nested_fault_keeps_every_frame():
    with pytest.raises(Fault) as excinfo:
        trigger_nested_fault()
    report = FaultReport.from_exception(excinfo.value)
    assert report.message == NESTED_FAULT_MESSAGE
    assert report.frame_names[-4:] == (
        "trigger_nested_fault",
        "_nested_first",
        "_nested_second",
        "fault",
    )
    assert report.origin.name == "_nested_second"


def test_nested_fault_in_isolated_unit():
    report = run_isolated(trigger_nested_fault)
    assert report.is_some()
    names = report.value.frame_names
    for name in ("trigger_nested_fault", "_nested_first", "_nested_second"):
        assert name in names
    assert report.value.message == NESTED_FAULT_MESSAGE
