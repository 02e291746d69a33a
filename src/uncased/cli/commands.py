"""Comparison and sorting commands."""

from __future__ import annotations

import logging
from typing import TextIO

import click

from uncased.borrowed import UncasedStr
from uncased.cli.exit_codes import ExitCode
from uncased.cli.output import (
    CLIResult,
    emit_result,
    error_exit,
    format_option,
    resolve_format,
)
from uncased.convert import sort_key
from uncased.mapping import UncasedDict

logger = logging.getLogger(__name__)


@click.command("eq")
@click.argument("left")
@click.argument("right")
@format_option
@click.pass_context
def eq_command(
    ctx: click.Context, left: str, right: str, output_format: str | None
) -> None:
    """Check whether LEFT and RIGHT are equal ignoring ASCII case.

    Exits 0 when they are equal and 1 when they are not.

    Examples:

    \b
        uncased eq Content-Type CONTENT-TYPE
        uncased eq --format json ENV env
    """
    equal = UncasedStr(left) == UncasedStr(right)
    result = CLIResult(
        success=True,
        message="equal" if equal else "not equal",
        data={"left": left, "right": right, "equal": equal},
        exit_code=ExitCode.SUCCESS if equal else ExitCode.NO_MATCH,
    )
    emit_result(result, json_output=resolve_format(ctx, output_format) == "json")


@click.command("compare")
@click.argument("left")
@click.argument("right")
@format_option
@click.pass_context
def compare_command(
    ctx: click.Context, left: str, right: str, output_format: str | None
) -> None:
    """Print whether LEFT sorts before, with, or after RIGHT.

    Output is one of: less, equal, greater.
    """
    ordering = UncasedStr(left).compare(right)
    result = CLIResult(
        success=True,
        message=ordering.name.lower(),
        data={"left": left, "right": right, "ordering": ordering.name.lower()},
    )
    emit_result(result, json_output=resolve_format(ctx, output_format) == "json")


@click.command("startswith")
@click.argument("text")
@click.argument("prefix")
@format_option
@click.pass_context
def startswith_command(
    ctx: click.Context, text: str, prefix: str, output_format: str | None
) -> None:
    """Check whether TEXT starts with any casing of PREFIX.

    Exits 0 when it does and 1 when it does not.
    """
    matched = UncasedStr(text).startswith(prefix)
    result = CLIResult(
        success=True,
        message="match" if matched else "no match",
        data={"text": text, "prefix": prefix, "match": matched},
        exit_code=ExitCode.SUCCESS if matched else ExitCode.NO_MATCH,
    )
    emit_result(result, json_output=resolve_format(ctx, output_format) == "json")


@click.command("sort")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--unique",
    "-u",
    is_flag=True,
    help="Drop lines that repeat an earlier line ignoring case.",
)
@click.option("--reverse", "-r", is_flag=True, help="Sort in descending order.")
@format_option
@click.pass_context
def sort_command(
    ctx: click.Context,
    source: TextIO,
    unique: bool,
    reverse: bool,
    output_format: str | None,
) -> None:
    """Sort the lines of SOURCE (default: stdin) ignoring ASCII case.

    The sort is stable: lines that differ only in case keep their input
    order.

    Examples:

    \b
        uncased sort names.txt
        printf 'b\\nA\\na\\n' | uncased sort --unique
    """
    json_output = resolve_format(ctx, output_format) == "json"
    try:
        lines = source.read().splitlines()
    except UnicodeDecodeError as e:
        error_exit(f"Input is not valid UTF-8: {e}", ExitCode.INPUT_ERROR, json_output)

    if unique:
        seen: UncasedDict[str] = UncasedDict()
        for line in lines:
            seen.setdefault(line, line)
        logger.debug("Dropped %d duplicate lines", len(lines) - len(seen))
        lines = list(seen)

    ordered = sorted(lines, key=sort_key, reverse=reverse)
    if json_output:
        result = CLIResult(
            success=True,
            message=f"sorted {len(ordered)} lines",
            data={"lines": ordered},
        )
        emit_result(result, json_output=True)
        return

    for line in ordered:
        click.echo(line)
