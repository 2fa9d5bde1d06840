# failmodes/core/errors/__init__.py
"""
Error types for failmodes.

This package defines:
- Canonical failure codes (codes.py)
- The cause carried by a recoverable failure (cause.py)
- Exceptions for caller and configuration defects (exceptions.py)

No side effects on import.
"""

from . import codes
from .cause import FailureCause
from .exceptions import ConfigError

__all__ = [
    "codes",
    "FailureCause",
    "ConfigError",
]
