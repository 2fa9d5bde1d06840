# failmodes/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Precedence (lowest to highest):
- code defaults
- YAML file (explicit path, else $FAILMODES_CONFIG, else ~/.failmodes/config.yml)
- environment variables (FAILMODES_LOG_LEVEL, FAILMODES_BACKTRACE)
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
import logging
import os

import yaml

from failmodes.core.errors import ConfigError
from failmodes.core.fault import BACKTRACE_ENV, backtrace_enabled
from .validator import ConfigIssue, validate_config

logger = logging.getLogger(__name__)

CONFIG_ENV = "FAILMODES_CONFIG"
LOG_LEVEL_ENV = "FAILMODES_LOG_LEVEL"
DEFAULT_CONFIG_PATH = Path("~/.failmodes/config.yml")


@dataclass(frozen=True)
class DemoConfig:
    """Inputs fed to the demonstrations by the `all` command."""
    search_text: str = "some string"
    search_char: str = "a"
    parse_input: str = "j"
    int_bits: int = 32


@dataclass(frozen=True)
class FailModesConfig:
    log_level: str = "WARNING"
    backtrace: bool = False
    demo: DemoConfig = field(default_factory=DemoConfig)

    @classmethod
    def default(cls) -> "FailModesConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FailModesConfig":
        """Merge a parsed YAML document into the defaults. Unknown keys are ignored with a warning."""
        if not isinstance(data, Mapping):
            raise ConfigError(f"configuration root must be a mapping, got {type(data).__name__}")

        top = _known(data, cls, "")
        demo_data = top.pop("demo", None)
        demo = DemoConfig()
        if demo_data is not None:
            if not isinstance(demo_data, Mapping):
                raise ConfigError(f"'demo' must be a mapping, got {type(demo_data).__name__}")
            demo = replace(demo, **_known(demo_data, DemoConfig, "demo."))
        return replace(cls.default(), demo=demo, **top)

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "FailModesConfig":
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to YAML file. If None, the default location is
                tried and silently skipped when absent.
        """
        data = _load_yaml(config_path)
        if data is None:
            return cls.default()
        return cls.from_mapping(data)

    def with_env(self, environ: Optional[Mapping[str, str]] = None) -> "FailModesConfig":
        env = os.environ if environ is None else environ
        updated = self
        level = env.get(LOG_LEVEL_ENV, "").strip()
        if level:
            updated = replace(updated, log_level=level.upper())
        if env.get(BACKTRACE_ENV, "").strip():
            updated = replace(updated, backtrace=backtrace_enabled(dict(env)))
        return updated

    def validate(self) -> List[ConfigIssue]:
        return validate_config(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "log_level": self.log_level,
            "backtrace": self.backtrace,
            "demo": {f.name: getattr(self.demo, f.name) for f in fields(DemoConfig)},
        }


def _known(data: Mapping[str, Any], target: type, prefix: str) -> Dict[str, Any]:
    names = {f.name for f in fields(target)}
    known = {}
    for key, value in data.items():
        if key in names:
            known[key] = value
        else:
            logger.warning("ignoring unknown configuration key '%s%s'", prefix, key)
    return known


def resolve_config_path(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[Path]:
    """Pick the YAML file to read. Returns None when only defaults apply."""
    if config_path is not None:
        return Path(config_path)
    env = os.environ if environ is None else environ
    from_env = env.get(CONFIG_ENV, "").strip()
    if from_env:
        return Path(from_env)
    default = DEFAULT_CONFIG_PATH.expanduser()
    return default if default.is_file() else None


def _load_yaml(config_path: Optional[Path]) -> Optional[Any]:
    if config_path is None:
        return None
    path = Path(config_path)
    if not path.is_file():
        raise ConfigError(f"configuration file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    logger.debug("loaded configuration from %s", path)
    # an empty file means "use defaults"
    return data if data is not None else {}


def load_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> FailModesConfig:
    """
    Load, override and validate configuration.

    Raises:
        ConfigError: the file is missing or malformed, or validation found
            error-level issues. Warnings are logged and do not stop loading.
    """
    path = resolve_config_path(config_path, environ)
    config = FailModesConfig.from_yaml(path).with_env(environ)

    issues = config.validate()
    errors = [i for i in issues if i.level == "error"]
    for issue in issues:
        if issue.level == "warn":
            logger.warning("%s", issue)
    if errors:
        raise ConfigError("invalid configuration", issues=errors)
    return config
