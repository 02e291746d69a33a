"""Configuration management for the uncased command line.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (UNCASED_*)
3. Config file (~/.config/uncased/config.yaml)
4. Default values (lowest priority)
"""

from uncased.config.env import EnvReader
from uncased.config.loader import (
    build_logging_config,
    get_config,
    get_default_config_path,
    load_config_file,
)
from uncased.config.models import LoggingConfig, OutputConfig, UncasedConfig

__all__ = [
    # Models
    "LoggingConfig",
    "OutputConfig",
    "UncasedConfig",
    # Environment
    "EnvReader",
    # Loader
    "build_logging_config",
    "get_config",
    "get_default_config_path",
    "load_config_file",
]
