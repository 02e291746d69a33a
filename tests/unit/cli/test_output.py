"""Tests for cli/output.py module."""

import json

import click
import pytest

from uncased.cli.exit_codes import ExitCode
from uncased.cli.output import CLIResult, emit_result, error_exit, resolve_format
from uncased.config.models import OutputConfig, UncasedConfig


class TestErrorExit:
    """Tests for error_exit function."""

    def test_human_format_exit(self, capsys) -> None:
        """Human format should print 'Error: message' and exit."""
        with pytest.raises(SystemExit) as exc_info:
            error_exit("Something failed", ExitCode.CONFIG_ERROR, json_output=False)

        assert exc_info.value.code == 10
        assert "Error: Something failed" in capsys.readouterr().err

    def test_json_format_exit(self, capsys) -> None:
        """JSON format should print JSON error and exit."""
        with pytest.raises(SystemExit) as exc_info:
            error_exit("Bad input", ExitCode.INPUT_ERROR, json_output=True)

        assert exc_info.value.code == 20

        parsed = json.loads(capsys.readouterr().err)
        assert parsed["status"] == "failed"
        assert parsed["error"]["code"] == "INPUT_ERROR"
        assert parsed["error"]["message"] == "Bad input"

    def test_int_exit_code(self, capsys) -> None:
        """Should work with integer exit codes."""
        with pytest.raises(SystemExit) as exc_info:
            error_exit("Failed", 42, json_output=True)

        assert exc_info.value.code == 42
        assert json.loads(capsys.readouterr().err)["error"]["code"] == "UNKNOWN_ERROR"


class TestCLIResult:
    """Tests for CLIResult serialization."""

    def test_success_json(self) -> None:
        """Successful results carry message and data at the top level."""
        result = CLIResult(success=True, message="equal", data={"equal": True})

        parsed = json.loads(result.to_json())

        assert parsed == {"status": "completed", "message": "equal", "equal": True}

    def test_failure_json(self) -> None:
        """Failed results carry an error object."""
        result = CLIResult(
            success=False, message="nope", exit_code=ExitCode.INPUT_ERROR
        )

        parsed = json.loads(result.to_json())

        assert parsed["status"] == "failed"
        assert parsed["error"] == {"code": "INPUT_ERROR", "message": "nope"}


class TestEmitResult:
    """Tests for emit_result function."""

    def test_text_output(self, capsys) -> None:
        """Text mode prints the message."""
        emit_result(CLIResult(success=True, message="less"))

        assert capsys.readouterr().out == "less\n"

    def test_json_output(self, capsys) -> None:
        """JSON mode prints the JSON document."""
        emit_result(CLIResult(success=True, message="less"), json_output=True)

        assert json.loads(capsys.readouterr().out)["message"] == "less"

    def test_non_success_code_exits(self) -> None:
        """A non-success exit code ends the process with that code."""
        with pytest.raises(SystemExit) as exc_info:
            emit_result(
                CLIResult(success=True, message="no", exit_code=ExitCode.NO_MATCH)
            )

        assert exc_info.value.code == 1


class TestResolveFormat:
    """Tests for resolve_format function."""

    def test_explicit_format_wins(self) -> None:
        """An explicit --format is used as-is, lowercased."""
        ctx = click.Context(click.Command("x"), obj={})
        assert resolve_format(ctx, "JSON") == "json"

    def test_configured_format(self) -> None:
        """The configured output format applies when none is given."""
        config = UncasedConfig(output=OutputConfig(format="json"))
        ctx = click.Context(click.Command("x"), obj={"config": config})
        assert resolve_format(ctx, None) == "json"

    def test_defaults_to_text(self) -> None:
        """Without config the format is text."""
        ctx = click.Context(click.Command("x"))
        assert resolve_format(ctx, None) == "text"
