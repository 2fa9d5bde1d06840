# failmodes/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading values.
Returns structured issues with level (warn/error), path, message, hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Literal

if TYPE_CHECKING:
    from .loader import FailModesConfig

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
MAX_INT_BITS = 128


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "demo.search_char"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f" (hint: {self.hint})" if self.hint else ""
        return f"{self.level.upper()} [{self.path}] {self.message}{hint_str}"


def validate_config(config: "FailModesConfig") -> List[ConfigIssue]:
    """
    Validate configuration values.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if not isinstance(config.log_level, str) or config.log_level.upper() not in LOG_LEVELS:
        issues.append(ConfigIssue(
            level="error",
            path="log_level",
            message=f"unknown log level {config.log_level!r}",
            hint=f"use one of {', '.join(LOG_LEVELS)}",
        ))

    if not isinstance(config.backtrace, bool):
        issues.append(ConfigIssue(
            level="error",
            path="backtrace",
            message=f"backtrace must be true or false, got {config.backtrace!r}",
        ))

    demo = config.demo

    if not isinstance(demo.search_text, str):
        issues.append(ConfigIssue(
            level="error",
            path="demo.search_text",
            message=f"search_text must be a string, got {type(demo.search_text).__name__}",
            hint="quote the value in YAML",
        ))
    elif not demo.search_text:
        issues.append(ConfigIssue(
            level="warn",
            path="demo.search_text",
            message="search_text is empty, the search demo will always report absence",
        ))

    if not isinstance(demo.search_char, str) or len(demo.search_char) != 1:
        issues.append(ConfigIssue(
            level="error",
            path="demo.search_char",
            message=f"search_char must be exactly one character, got {demo.search_char!r}",
        ))

    if not isinstance(demo.parse_input, str):
        issues.append(ConfigIssue(
            level="error",
            path="demo.parse_input",
            message=f"parse_input must be a string, got {type(demo.parse_input).__name__}",
            hint="quote numbers in YAML, e.g. parse_input: \"42\"",
        ))

    bits = demo.int_bits
    if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0:
        issues.append(ConfigIssue(
            level="error",
            path="demo.int_bits",
            message=f"int_bits must be a positive integer, got {bits!r}",
        ))
    elif bits > MAX_INT_BITS:
        issues.append(ConfigIssue(
            level="warn",
            path="demo.int_bits",
            message=f"int_bits={bits} is wider than any common machine integer",
            hint="8, 16, 32 and 64 are the usual widths",
        ))

    return issues
