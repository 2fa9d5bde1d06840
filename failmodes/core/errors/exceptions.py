# failmodes/core/errors/exceptions.py
from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from . import codes

if TYPE_CHECKING:
    from failmodes.config.validator import ConfigIssue


class ConfigError(Exception):
    """
    Raised when configuration cannot be loaded or has error-level issues.

    Configuration problems stop the program before any demonstration runs,
    so they are raised rather than returned.
    """

    error_code = codes.CONFIG_INVALID

    def __init__(self, message: str, issues: Optional[List["ConfigIssue"]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.issues = list(issues or [])

    def __str__(self) -> str:
        if not self.issues:
            return f"[{self.error_code}] {self.message}"
        lines = [f"[{self.error_code}] {self.message}"]
        lines.extend(f"  {issue}" for issue in self.issues)
        return "\n".join(lines)
