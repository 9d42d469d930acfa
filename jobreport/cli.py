"""Command-line interface for jobreport using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import click
from jobreport import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """jobreport: time console work and report how it went."""
    pass


# Register subcommands
from jobreport.commands.run import run  # noqa: E402
from jobreport.commands.demo import demo  # noqa: E402

cli.add_command(run)
cli.add_command(demo)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
