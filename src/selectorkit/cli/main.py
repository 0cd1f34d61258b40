"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=SelectorkitConfig().log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.option("--indent", type=int, default=None, help="Indent JSON output")
@click.pass_context
def cli(ctx: click.Context, log_level: str, indent: int | None) -> None:
    """selectorkit - build CSS selectors and work with typed JSON values."""
    config = SelectorkitConfig(log_level=log_level.upper(), json_indent=indent)
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.objects import rectangle, typed  # noqa: E402

cli.add_command(build)
cli.add_command(rectangle)
cli.add_command(typed)
