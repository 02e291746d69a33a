"""Shared test fixtures for uncased."""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

_ENV_VARS = (
    "UNCASED_CONFIG_PATH",
    "UNCASED_LOG_LEVEL",
    "UNCASED_LOG_FILE",
    "UNCASED_LOG_FORMAT",
    "UNCASED_OUTPUT_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep the user's environment and config file out of tests.

    Returns the (initially missing) config path the loader will use.
    """
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    config_path = tmp_path / "config.yaml"
    monkeypatch.setenv("UNCASED_CONFIG_PATH", str(config_path))
    return config_path


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def header_names() -> list[str]:
    """Return HTTP header names in assorted casings."""
    return [
        "Content-Type",
        "content-length",
        "ACCEPT",
        "X-Request-Id",
        "accept-encoding",
    ]
