"""formforge CLI entry point."""

import logging
from dataclasses import replace
from pathlib import Path

import click

from formforge.config import EngineConfig
from formforge.core.types import ConfigError


@click.group()
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with engine settings (max_evaluation_depth, log_level).",
)
@click.option(
    "--log-level",
    default=None,
    help="Logging level (DEBUG, INFO, WARNING, ERROR). Overrides FORMFORGE_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None):
    """formforge: declarative form definition and validation."""
    try:
        config = EngineConfig.load(config_path)
        if log_level:
            config = replace(config, log_level=log_level)
    except ConfigError as e:
        raise click.UsageError(str(e))

    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Register subcommands
from formforge.cli.demo_cmd import demo, status  # noqa: E402

cli.add_command(demo)
cli.add_command(status)
