# ABOUTME: CLI package for shelfscan, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from shelfscan.cli.commands import identify_cmd, ls_cmd, models_cmd, scan_cmd, search_cmd


def _configure_logging(verbosity: int) -> None:
    """Route log records through Rich on stderr; -v is INFO, -vv is DEBUG."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.version_option(package_name="shelfscan")
@click.option("-v", "--verbose", count=True, help="Increase log output (-v, -vv).")
def cli(verbose: int) -> None:
    """shelfscan - identify books from a photo and add them to your shelves."""
    _configure_logging(verbose)


cli.add_command(identify_cmd.identify_book)
cli.add_command(scan_cmd.scan)
cli.add_command(search_cmd.search)
cli.add_command(models_cmd.models)
cli.add_command(ls_cmd.ls)
