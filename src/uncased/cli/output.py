"""Unified CLI output formatting for JSON and human-readable output.

This module provides consistent error handling and output formatting
across all CLI commands.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NoReturn, TypeVar

import click

from uncased.cli.exit_codes import ExitCode

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class CLIResult:
    """Result object for CLI operations.

    Provides consistent JSON serialization for command results.
    """

    success: bool
    message: str
    data: dict[str, Any] = field(default_factory=dict)
    exit_code: ExitCode | int = ExitCode.SUCCESS

    def to_json(self) -> str:
        """Serialize to JSON string.

        Returns:
            JSON string with status, message, and optional data fields.
        """
        output: dict[str, Any] = {
            "status": "completed" if self.success else "failed",
        }
        if self.success:
            output["message"] = self.message
            output.update(self.data)
        else:
            if isinstance(self.exit_code, ExitCode):
                code_name = self.exit_code.name
            else:
                code_name = "UNKNOWN_ERROR"
            output["error"] = {
                "code": code_name,
                "message": self.message,
            }
        return json.dumps(output, indent=2, default=str)


def format_option(func: F) -> F:
    """Add a ``--format text|json`` option, stored as ``output_format``.

    The option defaults to None so commands can fall back to the
    configured output format.
    """
    return click.option(
        "--format",
        "output_format",
        type=click.Choice(["text", "json"], case_sensitive=False),
        default=None,
        help="Output format (default: from config, else text).",
    )(func)


def resolve_format(ctx: click.Context, output_format: str | None) -> str:
    """Pick the explicit format, else the configured one, else text."""
    if output_format is not None:
        return output_format.lower()
    config = ctx.obj.get("config") if ctx.obj else None
    if config is not None:
        return config.output.format
    return "text"


def error_exit(
    message: str,
    code: ExitCode | int,
    json_output: bool = False,
) -> NoReturn:
    """Exit with formatted error message.

    Args:
        message: Error message to display.
        code: Exit code to use (ExitCode enum or int).
        json_output: Whether to format output as JSON.

    Note:
        This function never returns; it always calls sys.exit().
    """
    if isinstance(code, ExitCode):
        code_name = code.name
        exit_value = int(code)
    else:
        code_name = "UNKNOWN_ERROR"
        exit_value = code

    if json_output:
        click.echo(
            json.dumps(
                {
                    "status": "failed",
                    "error": {
                        "code": code_name,
                        "message": message,
                    },
                }
            ),
            err=True,
        )
    else:
        click.echo(f"Error: {message}", err=True)

    sys.exit(exit_value)


def emit_result(
    result: CLIResult,
    json_output: bool = False,
) -> None:
    """Output a result in the requested format, then exit with its code."""
    if json_output:
        click.echo(result.to_json())
    else:
        click.echo(result.message)
    if result.exit_code != ExitCode.SUCCESS:
        sys.exit(int(result.exit_code))
