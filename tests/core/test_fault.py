# tests/core/test_fault.py
"""
Fault tests - faults are raised, carry their message, and keep the call chain
"""

import sys

import pytest

import failmodes.core.fault as fault_module
from failmodes.core.fault import (
    BACKTRACE_ENV,
    Fault,
    FaultReport,
    backtrace_enabled,
    fault,
    install_fault_hook,
)


def _raise_here():
    fault("deliberate")


def test_fault_is_not_an_exception_subclass():
    assert issubclass(Fault, BaseException)
    assert not issubclass(Fault, Exception)


def test_fault_message_is_literal():
    with pytest.raises(Fault) as excinfo:
        fault("exact text")
    assert excinfo.value.message == "exact text"
    assert str(excinfo.value) == "exact text"


def test_report_origin_is_the_caller_of_fault():
    with pytest.raises(Fault) as excinfo:
        _raise_here()
    report = FaultReport.from_exception(excinfo.value)
    assert report.is_fault
    assert report.kind == "Fault"
    assert report.frame_names[-2:] == ("_raise_here", "fault")
    assert report.origin.name == "_raise_here"
    assert report.summary().startswith("fault at ")
    assert report.summary().endswith("\ndeliberate")
    assert "Traceback (most recent call last)" in report.traceback_text


def test_report_of_ordinary_exception():
    try:
        {}["missing"]
    except KeyError as e:
        report = FaultReport.from_exception(e)
    assert report.kind == "KeyError"
    assert not report.is_fault
    assert report.origin.name == "test_report_of_ordinary_exception"


def test_report_to_dict():
    with pytest.raises(Fault) as excinfo:
        _raise_here()
    d = FaultReport.from_exception(excinfo.value).to_dict()
    assert d["kind"] == "Fault"
    assert d["message"] == "deliberate"
    assert [f["name"] for f in d["frames"]][-2:] == ["_raise_here", "fault"]


@pytest.mark.parametrize("value,expected", [
    ("1", True),
    ("full", True),
    ("true", True),
    ("0", False),
    ("", False),
])
def test_backtrace_enabled(value, expected):
    assert backtrace_enabled({BACKTRACE_ENV: value}) is expected


# ============================================================
# Process hook
# ============================================================

def _fault_exc_info():
    try:
        _raise_here()
    except Fault as e:
        return type(e), e, e.__traceback__


def test_hook_prints_summary_and_hint(monkeypatch, capsys):
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
    install_fault_hook(backtrace=False)
    sys.excepthook(*_fault_exc_info())
    err = capsys.readouterr().err
    assert err.startswith("fault at ")
    assert "deliberate" in err
    assert f"{BACKTRACE_ENV}=1" in err
    assert "Traceback" not in err


def test_hook_prints_backtrace_when_enabled(monkeypatch, capsys):
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
    install_fault_hook(backtrace=True)
    sys.excepthook(*_fault_exc_info())
    err = capsys.readouterr().err
    assert "Traceback (most recent call last)" in err
    assert "_raise_here" in err


def test_hook_delegates_other_exceptions(monkeypatch):
    seen = []
    monkeypatch.setattr(sys, "excepthook", lambda *info: seen.append(info[0]))
    previous = install_fault_hook()
    sys.excepthook(ValueError, ValueError("x"), None)
    assert seen == [ValueError]
    assert previous is not sys.excepthook


def test_module_logger_name():
    assert fault_module.logger.name == "failmodes.core.fault"


def test_core_package_exposes_fault_submodule():
    import types

    import failmodes
    import failmodes.core

    assert isinstance(failmodes.core.fault, types.ModuleType)
    assert failmodes.core.fault is fault_module
    assert failmodes.fault is fault
