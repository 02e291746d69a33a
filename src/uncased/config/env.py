"""Environment variable reader with dependency injection support.

This module provides the EnvReader class for reading and parsing
UNCASED_* environment variables with type conversion. It accepts an
optional env mapping so tests never need to touch os.environ.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from uncased.convert import eq

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class EnvReader:
    """Environment variable reader with type conversion.

    Example:
        # Production usage (reads from os.environ)
        reader = EnvReader()
        level = reader.get_str("UNCASED_LOG_LEVEL", "warning")

        # Testing usage (inject custom env)
        reader = EnvReader(env={"UNCASED_LOG_LEVEL": "debug"})
        level = reader.get_str("UNCASED_LOG_LEVEL", "warning")  # "debug"
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """Initialize the environment reader.

        Args:
            env: Optional mapping to use instead of os.environ.
        """
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get_str(self, var: str, default: str | None = None) -> str | None:
        """Get a string from an environment variable.

        Empty values are treated as unset.
        """
        value = self._env.get(var)
        if not value:
            return default
        return value

    def get_int(self, var: str, default: int | None = None) -> int | None:
        """Get an integer from an environment variable.

        Logs a warning and returns ``default`` if the value cannot be parsed.
        """
        value = self.get_str(var)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s", var, value)
            return default

    def get_bool(self, var: str, default: bool | None = None) -> bool | None:
        """Get a boolean from an environment variable.

        Accepts 1/0, true/false, yes/no and on/off in any ASCII case.
        """
        value = self.get_str(var)
        if value is None:
            return default
        if any(eq(value, candidate) for candidate in _TRUE_VALUES):
            return True
        if any(eq(value, candidate) for candidate in _FALSE_VALUES):
            return False
        logger.warning("Invalid boolean value for %s: %s", var, value)
        return default

    def get_path(self, var: str, default: Path | None = None) -> Path | None:
        """Get a path from an environment variable, expanding ``~``."""
        value = self.get_str(var)
        if value is None:
            return default
        return Path(value).expanduser()
