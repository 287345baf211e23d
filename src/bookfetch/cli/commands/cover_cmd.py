# ABOUTME: The `bookfetch cover` command for finding a book's best cover image.
# ABOUTME: Probes Open Library cover sizes largest-first and prints the URL.

import click

from bookfetch.cli.options import ISBN
from bookfetch.metadata.covers import CoverResolver
from bookfetch.metadata.http import BookfetchHttpClient


def _create_resolver() -> CoverResolver:
    return CoverResolver(BookfetchHttpClient())


@click.command()
@click.argument("isbn", type=ISBN)
def cover(isbn: str) -> None:
    """Print the URL of the largest available cover for ISBN."""
    url = _create_resolver().resolve(isbn)
    if url is None:
        click.echo("No cover found.")
        raise SystemExit(1)
    click.echo(url)
