"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (applied by the caller via build_logging_config)
2. Environment variables (UNCASED_*)
3. Config file (~/.config/uncased/config.yaml)
4. Default values

Environment variables:
- UNCASED_CONFIG_PATH: Path to config file (overrides default location)
- UNCASED_LOG_LEVEL: Log level (debug, info, warning, error)
- UNCASED_LOG_FILE: Path to log file
- UNCASED_LOG_FORMAT: Log format (text, json)
- UNCASED_OUTPUT_FORMAT: Default command output format (text, json)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from uncased.config.env import EnvReader
from uncased.config.models import LoggingConfig, UncasedConfig
from uncased.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "uncased" / "config.yaml"

# Environment variable -> (section, key)
_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "UNCASED_LOG_LEVEL": ("logging", "level"),
    "UNCASED_LOG_FILE": ("logging", "file"),
    "UNCASED_LOG_FORMAT": ("logging", "format"),
    "UNCASED_OUTPUT_FORMAT": ("output", "format"),
}


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by the UNCASED_CONFIG_PATH environment variable.
    """
    return EnvReader(env).get_path("UNCASED_CONFIG_PATH", DEFAULT_CONFIG_FILE)


def load_config_file(path: Path) -> dict[str, Any]:
    """Load a YAML config file.

    Args:
        path: Path to the config file.

    Returns:
        The parsed mapping, or an empty dict if the file does not exist
        or is empty.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or its
            top level is not a mapping.
    """
    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}", path=path) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}", path=path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must contain a mapping, got {type(data).__name__}",
            path=path,
        )
    return data


def get_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> UncasedConfig:
    """Build the effective configuration.

    Args:
        config_path: Explicit config file path. None uses the default path.
        env: Optional environment mapping (defaults to os.environ).

    Returns:
        Validated UncasedConfig.

    Raises:
        ConfigError: If the file cannot be loaded or a value is invalid.
    """
    path = config_path if config_path is not None else get_default_config_path(env)
    data = load_config_file(path)

    reader = EnvReader(env)
    for var, (section, key) in _ENV_OVERRIDES.items():
        value = reader.get_str(var)
        if value is None:
            continue
        section_data = data.get(section) or {}
        if not isinstance(section_data, dict):
            raise ConfigError(
                f"Section '{section}' must be a mapping", field=section, path=path
            )
        section_data[key] = value
        data[section] = section_data

    try:
        return UncasedConfig.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ConfigError(
            f"Invalid configuration at '{field}': {first['msg']}",
            field=field,
            path=path,
        ) from e


def build_logging_config(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Build LoggingConfig by merging base config with CLI overrides.

    Any non-None argument replaces the corresponding value of ``base``.

    Example:
        config = get_config()
        logging_config = build_logging_config(
            config.logging,
            level=log_level,  # From CLI option
            format="json" if json_flag else None,
        )
        configure_logging(logging_config)
    """
    overrides = {
        "level": level,
        "file": file,
        "format": format,
        "include_stderr": include_stderr,
    }
    merged = base.model_dump()
    merged.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return LoggingConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid logging override: {e.errors()[0]['msg']}") from e
