# failmodes/demos/__init__.py
"""
Demonstration functions, one module per tier.

- ownership / search: absence
- parsing: recoverable failure and propagation
- faults: unrecoverable faults
"""

from .ownership import Asset, Owner, with_asset, without_asset
from .search import find_after, find_char
from .parsing import forward_failure, inner_failure, parse_demo_input, parse_unsigned, sum_unsigned
from .faults import DIRECT_FAULT_MESSAGE, NESTED_FAULT_MESSAGE, trigger_fault, trigger_nested_fault

__all__ = [
    "Asset",
    "Owner",
    "with_asset",
    "without_asset",
    "find_after",
    "find_char",
    "forward_failure",
    "inner_failure",
    "parse_demo_input",
    "parse_unsigned",
    "sum_unsigned",
    "DIRECT_FAULT_MESSAGE",
    "NESTED_FAULT_MESSAGE",
    "trigger_fault",
    "trigger_nested_fault",
]
