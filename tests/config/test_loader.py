# tests/config/test_loader.py
"""
Configuration tests

Tests cover:
1. Code defaults work without YAML
2. YAML merges over defaults, unknown keys are ignored
3. Environment overrides YAML
4. Validation issues (warn vs error)
"""

import logging

import pytest

from failmodes.config import DemoConfig, FailModesConfig, load_config, resolve_config_path, validate_config
from failmodes.core.errors import ConfigError


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("FAILMODES_CONFIG", "FAILMODES_LOG_LEVEL", "FAILMODES_BACKTRACE"):
        monkeypatch.delenv(name, raising=False)
    return home


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


# ============================================================
# Defaults
# ============================================================

def test_defaults():
    config = FailModesConfig.default()
    assert config.log_level == "WARNING"
    assert config.backtrace is False
    assert config.demo == DemoConfig()
    assert config.demo.search_text == "some string"
    assert config.demo.search_char == "a"
    assert config.demo.parse_input == "j"
    assert config.demo.int_bits == 32
    assert config.validate() == []


def test_load_without_any_file():
    assert load_config(environ={}) == FailModesConfig.default()


def test_to_dict():
    d = FailModesConfig.default().to_dict()
    assert d["demo"]["search_text"] == "some string"
    assert d["backtrace"] is False


# ============================================================
# YAML
# ============================================================

def test_yaml_merges_over_defaults(tmp_path):
    path = _write(tmp_path / "c.yml", "log_level: INFO\ndemo:\n  parse_input: '42'\n")
    config = load_config(path, environ={})
    assert config.log_level == "INFO"
    assert config.demo.parse_input == "42"
    assert config.demo.search_text == "some string"


def test_empty_yaml_means_defaults(tmp_path):
    path = _write(tmp_path / "c.yml", "")
    assert load_config(path, environ={}) == FailModesConfig.default()


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = _write(tmp_path / "c.yml", "colour: blue\ndemo:\n  size: 3\n")
    with caplog.at_level(logging.WARNING, logger="failmodes.config.loader"):
        config = load_config(path, environ={})
    assert config == FailModesConfig.default()
    messages = " ".join(r.getMessage() for r in caplog.records)
    assert "colour" in messages
    assert "demo.size" in messages


def test_missing_file_is_an_error(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.yml", environ={})


def test_malformed_yaml_is_an_error(tmp_path):
    path = _write(tmp_path / "c.yml", "demo: [unclosed\n")
    with pytest.raises(ConfigError, match="invalid YAML"):
        load_config(path, environ={})


@pytest.mark.parametrize("text", ["- a\n- b\n", "demo: 3\n"])
def test_wrong_shape_is_an_error(tmp_path, text):
    path = _write(tmp_path / "c.yml", text)
    with pytest.raises(ConfigError):
        load_config(path, environ={})


def test_default_location_is_used_when_present(isolated_home):
    folder = isolated_home / ".failmodes"
    folder.mkdir()
    _write(folder / "config.yml", "backtrace: true\n")
    assert resolve_config_path(environ={}) == folder / "config.yml"
    assert load_config(environ={}).backtrace is True


def test_config_env_points_at_file(tmp_path):
    path = _write(tmp_path / "c.yml", "log_level: DEBUG\n")
    assert load_config(environ={"FAILMODES_CONFIG": str(path)}).log_level == "DEBUG"


# ============================================================
# Environment
# ============================================================

def test_env_overrides_yaml(tmp_path):
    path = _write(tmp_path / "c.yml", "log_level: INFO\nbacktrace: true\n")
    config = load_config(path, environ={"FAILMODES_LOG_LEVEL": "error", "FAILMODES_BACKTRACE": "0"})
    assert config.log_level == "ERROR"
    assert config.backtrace is False


def test_backtrace_env_enables():
    assert load_config(environ={"FAILMODES_BACKTRACE": "1"}).backtrace is True


# ============================================================
# Validation
# ============================================================

def test_error_issues_raise(tmp_path):
    path = _write(tmp_path / "c.yml", "demo:\n  search_char: ab\n  int_bits: 0\n")
    with pytest.raises(ConfigError) as excinfo:
        load_config(path, environ={})
    paths = {issue.path for issue in excinfo.value.issues}
    assert paths == {"demo.search_char", "demo.int_bits"}


def test_unquoted_number_is_reported(tmp_path):
    path = _write(tmp_path / "c.yml", "demo:\n  parse_input: 42\n")
    with pytest.raises(ConfigError) as excinfo:
        load_config(path, environ={})
    assert excinfo.value.issues[0].path == "demo.parse_input"
    assert "quote" in excinfo.value.issues[0].hint


def test_warnings_do_not_raise(tmp_path, caplog):
    path = _write(tmp_path / "c.yml", "demo:\n  search_text: ''\n  int_bits: 256\n")
    with caplog.at_level(logging.WARNING, logger="failmodes.config.loader"):
        config = load_config(path, environ={})
    assert config.demo.int_bits == 256
    assert sum("WARN" in r.getMessage() for r in caplog.records) == 2


def test_bad_log_level():
    issues = validate_config(FailModesConfig(log_level="LOUD"))
    assert [i.path for i in issues] == ["log_level"]
    assert issues[0].level == "error"
    assert "LOUD" in str(issues[0])
