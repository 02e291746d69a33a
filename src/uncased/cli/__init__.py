"""CLI module for uncased."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from uncased.cli.exit_codes import ExitCode
from uncased.cli.output import error_exit
from uncased.config.loader import build_logging_config, get_config
from uncased.errors import ConfigError
from uncased.logging.config import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="uncased")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: $UNCASED_CONFIG_PATH or "
    "~/.config/uncased/config.yaml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_json: bool,
) -> None:
    """Compare and sort text ignoring ASCII case, keeping original casing."""
    ctx.ensure_object(dict)

    try:
        config = get_config(config_path)
        logging_config = build_logging_config(
            config.logging,
            level=log_level,
            format="json" if log_json else None,
        )
    except ConfigError as e:
        error_exit(str(e), ExitCode.CONFIG_ERROR)

    configure_logging(logging_config)
    ctx.obj["config"] = config
    logger.debug(
        "uncased starting: log_level=%s, output_format=%s",
        logging_config.level,
        config.output.format,
    )


# Defer import to avoid circular dependency
def _register_commands() -> None:
    from uncased.cli.commands import (
        compare_command,
        eq_command,
        sort_command,
        startswith_command,
    )

    main.add_command(eq_command)
    main.add_command(compare_command)
    main.add_command(startswith_command)
    main.add_command(sort_command)


_register_commands()
