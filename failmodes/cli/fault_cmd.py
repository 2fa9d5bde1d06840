# failmodes/cli/fault_cmd.py
"""
The fault command.

By default the fault is left to terminate the process; the installed hook
prints the diagnostic and the interpreter exits with status 1. With
--isolated the fault ends a worker thread instead and its post-mortem
report is printed by this process.
"""

from __future__ import annotations

import sys

from failmodes.config import FailModesConfig
from failmodes.core.fault import install_fault_hook
from failmodes.core.isolation import run_isolated
from failmodes.core.report import record_fault
from failmodes.demos import trigger_fault, trigger_nested_fault
from .output import emit


def run_fault(args, config: FailModesConfig) -> int:
    target = trigger_nested_fault if args.nested else trigger_fault

    if not args.isolated:
        install_fault_hook(backtrace=config.backtrace)
        target()
        return 0  # not reached: target() never returns

    report = run_isolated(target)
    if report.is_nothing():
        return 0
    emit([record_fault(target.__name__, report.value)], args.json)
    if config.backtrace:
        sys.stderr.write(report.value.traceback_text)
    return 1
