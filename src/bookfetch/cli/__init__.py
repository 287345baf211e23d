# ABOUTME: CLI package for bookfetch, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from bookfetch.cli.commands import cover_cmd, lookup_cmd


def _configure_logging(verbosity: int) -> None:
    """Route log records through Rich; -v shows INFO, -vv shows DEBUG."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO; keep it for -vv only
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbosity > 1 else logging.WARNING)


@click.group()
@click.version_option(package_name="bookfetch")
@click.option("-v", "--verbose", count=True, help="Increase log output (-v info, -vv debug).")
def cli(verbose: int) -> None:
    """bookfetch - look up books by ISBN across Google Books and Open Library."""
    _configure_logging(verbose)


cli.add_command(lookup_cmd.lookup)
cli.add_command(cover_cmd.cover)
