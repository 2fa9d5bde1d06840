# failmodes/core/__init__.py
"""
Core types for failmodes: the three error-handling tiers.

- option: absence (Some / NOTHING)
- result: recoverable failure (Ok / Err) and its propagation
- fault: unrecoverable fault and post-mortem reports

No side effects on import.
"""

from .errors import FailureCause, ConfigError, codes
from .fault import Fault, FaultReport, FrameInfo, install_fault_hook
from .option import NOTHING, Nothing, Option, Some
from .result import Err, Ok, Result
from .propagate import Propagate, fallible, optional
from .isolation import run_isolated

__all__ = [
    "codes",
    "FailureCause",
    "ConfigError",
    "Fault",
    "FaultReport",
    "FrameInfo",
    "install_fault_hook",
    "NOTHING",
    "Nothing",
    "Option",
    "Some",
    "Err",
    "Ok",
    "Result",
    "Propagate",
    "fallible",
    "optional",
    "run_isolated",
]
