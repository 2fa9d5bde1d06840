# failmodes/__init__.py
"""
failmodes - the three tiers of error handling, demonstrated

- Absence: Option (Some / NOTHING), a normal "no value" outcome
- Recoverable failure: Result (Ok / Err) with short-circuit propagation
- Unrecoverable fault: Fault, which terminates the current execution unit

Basic usage:

    >>> from failmodes import find_char, parse_unsigned
    >>> find_char("some string", "r")
    Some(7)
    >>> find_char("some string", "a")
    Nothing
    >>> find_char("some string", "z")
    Nothing
    >>> parse_unsigned("42")
    Ok(42)
    >>> parse_unsigned("j")
    Err(INVALID_DIGIT: invalid digit found in string)

Propagation:

    >>> from failmodes import Ok, fallible
    >>> @fallible
    ... def double(text):
    ...     return Ok(parse_unsigned(text).bail() * 2)
    >>> double("21")
    Ok(42)

Faults:

    >>> from failmodes import run_isolated, trigger_nested_fault
    >>> report = run_isolated(trigger_nested_fault)
    >>> report.value.message
    'fault from nested call'
"""

__version__ = "0.1.0"

from .core import (
    NOTHING,
    Err,
    FailureCause,
    Fault,
    FaultReport,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    fallible,
    optional,
    run_isolated,
)
from .core.fault import fault
from .demos import (
    Asset,
    Owner,
    find_after,
    find_char,
    forward_failure,
    parse_demo_input,
    parse_unsigned,
    sum_unsigned,
    trigger_fault,
    trigger_nested_fault,
    with_asset,
    without_asset,
)

__all__ = [
    "__version__",

    # Tiers
    "NOTHING",
    "Nothing",
    "Some",
    "Option",
    "Ok",
    "Err",
    "Result",
    "FailureCause",
    "Fault",
    "FaultReport",
    "fault",
    "fallible",
    "optional",
    "run_isolated",

    # Demonstrations
    "Asset",
    "Owner",
    "with_asset",
    "without_asset",
    "find_char",
    "find_after",
    "parse_unsigned",
    "parse_demo_input",
    "sum_unsigned",
    "forward_failure",
    "trigger_fault",
    "trigger_nested_fault",
]
