"""Tests for config loader module."""

from __future__ import annotations

from pathlib import Path

import pytest

from uncased.config.loader import (
    DEFAULT_CONFIG_FILE,
    build_logging_config,
    get_config,
    get_default_config_path,
    load_config_file,
)
from uncased.config.models import LoggingConfig
from uncased.errors import ConfigError


class TestGetDefaultConfigPath:
    """Tests for get_default_config_path function."""

    def test_returns_default_when_env_not_set(self) -> None:
        """Should return default path when UNCASED_CONFIG_PATH is not set."""
        assert get_default_config_path(env={}) == DEFAULT_CONFIG_FILE
        assert DEFAULT_CONFIG_FILE == (
            Path.home() / ".config" / "uncased" / "config.yaml"
        )

    def test_returns_env_path_when_set(self) -> None:
        """Should return env path when UNCASED_CONFIG_PATH is set."""
        env = {"UNCASED_CONFIG_PATH": "/custom/config.yaml"}
        assert get_default_config_path(env=env) == Path("/custom/config.yaml")


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        """A missing file yields an empty mapping."""
        assert load_config_file(tmp_path / "nope.yaml") == {}

    def test_empty_file_is_empty(self, tmp_path: Path) -> None:
        """An empty file yields an empty mapping."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config_file(path) == {}

    def test_parses_mapping(self, tmp_path: Path) -> None:
        """A YAML mapping is returned as a dict."""
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: debug\n")
        assert load_config_file(path) == {"logging": {"level": "debug"}}

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Unparsable YAML raises ConfigError naming the file."""
        path = tmp_path / "config.yaml"
        path.write_text("logging: [unclosed\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config_file(path)
        assert exc_info.value.path == path

    def test_non_mapping(self, tmp_path: Path) -> None:
        """A top-level list is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_config_file(path)


class TestGetConfig:
    """Tests for get_config function."""

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        """Defaults apply when nothing is configured."""
        config = get_config(tmp_path / "missing.yaml", env={})
        assert config.logging.level == "warning"
        assert config.output.format == "text"

    def test_file_values(self, tmp_path: Path) -> None:
        """File values override defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: info\noutput:\n  format: json\n")
        config = get_config(path, env={})
        assert config.logging.level == "info"
        assert config.output.format == "json"

    def test_env_overrides_file(self, tmp_path: Path) -> None:
        """Environment variables override file values."""
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: info\n")
        env = {"UNCASED_LOG_LEVEL": "error", "UNCASED_OUTPUT_FORMAT": "json"}
        config = get_config(path, env=env)
        assert config.logging.level == "error"
        assert config.output.format == "json"

    def test_env_fills_empty_section(self, tmp_path: Path) -> None:
        """An empty section in the file can still be overridden."""
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n")
        config = get_config(path, env={"UNCASED_LOG_FORMAT": "json"})
        assert config.logging.format == "json"

    def test_uses_config_path_env(self, tmp_path: Path) -> None:
        """UNCASED_CONFIG_PATH selects the file when no path is given."""
        path = tmp_path / "other.yaml"
        path.write_text("output:\n  format: json\n")
        config = get_config(env={"UNCASED_CONFIG_PATH": str(path)})
        assert config.output.format == "json"

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Invalid values raise ConfigError with the failing field."""
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: loud\n")
        with pytest.raises(ConfigError) as exc_info:
            get_config(path, env={})
        assert exc_info.value.field == "logging.level"

    def test_unknown_section(self, tmp_path: Path) -> None:
        """Unknown sections are rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("colors: true\n")
        with pytest.raises(ConfigError):
            get_config(path, env={})

    def test_section_not_a_mapping(self, tmp_path: Path) -> None:
        """A scalar section cannot take env overrides."""
        path = tmp_path / "config.yaml"
        path.write_text("logging: loud\n")
        with pytest.raises(ConfigError) as exc_info:
            get_config(path, env={"UNCASED_LOG_LEVEL": "info"})
        assert exc_info.value.field == "logging"


class TestBuildLoggingConfig:
    """Tests for build_logging_config function."""

    def test_no_overrides_keeps_base(self) -> None:
        """Without overrides the base values are kept."""
        base = LoggingConfig(level="info", format="json")
        assert build_logging_config(base) == base

    def test_overrides_apply(self, tmp_path: Path) -> None:
        """Non-None overrides replace base values."""
        base = LoggingConfig(level="info")
        log_file = tmp_path / "u.log"
        result = build_logging_config(base, level="debug", file=log_file)
        assert result.level == "debug"
        assert result.file == log_file
        assert result.format == "text"

    def test_invalid_override(self) -> None:
        """Invalid overrides raise ConfigError."""
        with pytest.raises(ConfigError):
            build_logging_config(LoggingConfig(), format="xml")
