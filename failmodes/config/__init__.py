# failmodes/config/__init__.py
"""
failmodes configuration

Design principles:
1. Code holds every default; the system works without a YAML file
2. YAML is input parameters, environment variables override YAML
3. Configuration is immutable once loaded
"""

from .loader import DemoConfig, FailModesConfig, load_config, resolve_config_path
from .validator import ConfigIssue, validate_config

__all__ = [
    "DemoConfig",
    "FailModesConfig",
    "load_config",
    "resolve_config_path",
    "ConfigIssue",
    "validate_config",
]
