# ABOUTME: CLI package for ReadMe, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from readme.cli.commands import (
    add_cmd,
    cover_cmd,
    edit_cmd,
    info_cmd,
    ls_cmd,
    mv_cmd,
    rm_cmd,
)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="readme-library")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """ReadMe - a personal reading list with reviews and covers."""
    _configure_logging(verbose)


cli.add_command(ls_cmd.ls)
cli.add_command(add_cmd.add)
cli.add_command(info_cmd.info)
cli.add_command(edit_cmd.edit)
cli.add_command(rm_cmd.rm)
cli.add_command(mv_cmd.mv)
cli.add_command(cover_cmd.cover)
