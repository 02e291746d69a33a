"""Configuration models.

Each section of the configuration file maps onto a frozen Pydantic
model. Unknown keys are rejected so typos surface as errors instead of
being silently ignored.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

VALID_LOG_LEVELS = ("debug", "info", "warning", "error")
VALID_FORMATS = ("text", "json")


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Log level: debug, info, warning, error
    level: str = "warning"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = Field(default=10_485_760, ge=1)

    # Number of rotated files to keep
    backup_count: int = Field(default=5, ge=0)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the log level."""
        level = v.lower()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"level must be one of {VALID_LOG_LEVELS}, got {v}")
        return level

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Normalize and validate the log format."""
        fmt = v.lower()
        if fmt not in VALID_FORMATS:
            raise ValueError(f"format must be one of {VALID_FORMATS}, got {v}")
        return fmt


class OutputConfig(BaseModel):
    """Configuration for command output."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    format: str = "text"

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in VALID_FORMATS:
            raise ValueError(f"format must be one of {VALID_FORMATS}, got {v}")
        return fmt


class UncasedConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
