# ABOUTME: The `bookfetch lookup` command for reconciling ISBNs into book records.
# ABOUTME: Prints a table per record, or the publisher-ready JSON with --json.

import json

import click
from rich.console import Console
from rich.table import Table

from bookfetch.cli.options import ISBN, api_key_option
from bookfetch.config import load_settings
from bookfetch.core.batch import LookupOutcome, lookup_many
from bookfetch.metadata.reconcile import ReconciliationEngine, build_engine
from bookfetch.metadata.types import BookRecord, MatchQuality


def _create_engine(api_key: str | None) -> ReconciliationEngine:
    """Create the default engine from the environment and --api-key."""
    return build_engine(load_settings(api_key=api_key))


def _record_table(record: BookRecord) -> Table:
    table = Table(title=record.isbn13, show_header=False, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("Title", record.title)
    if not record.is_resolved:
        table.add_row("Source", "[yellow]not found in any catalog[/yellow]")
        return table
    table.add_row("Author", record.author or "[dim]unknown[/dim]")
    if record.publish_year is not None:
        table.add_row("Published", str(record.publish_year))
    if record.page_count is not None:
        table.add_row("Pages", str(record.page_count))
    table.add_row("Source", f"{record.source.value} ({record.source_id})")
    match_style = "green" if record.match_quality is MatchQuality.EXACT else "yellow"
    table.add_row("Match", f"[{match_style}]{record.match_quality.value}[/{match_style}]")
    table.add_row("Cover", record.cover_image_url or "[dim]none[/dim]")
    return table


@click.command()
@click.argument("isbns", nargs=-1, required=True, type=ISBN)
@api_key_option
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Emit the normalized record(s) as JSON.",
)
def lookup(isbns: tuple[str, ...], api_key: str | None, as_json: bool) -> None:
    """Look up one or more ISBNs and reconcile each into a book record."""
    console = Console()
    engine = _create_engine(api_key)
    if not engine.has_primary and not as_json:
        console.print("[dim]No Google Books API key; searching Open Library only.[/dim]")

    def _report(outcome: LookupOutcome) -> None:
        if as_json:
            return
        if outcome.record is None:
            console.print(f"[red]Error:[/red] {outcome.isbn}: {outcome.error}")
        else:
            console.print(_record_table(outcome.record))

    result = lookup_many(engine, isbns, on_outcome=_report)

    if as_json:
        payload = [record.to_dict() for record in result.records]
        single = len(result.outcomes) == 1 and payload
        click.echo(json.dumps(payload[0] if single else payload, indent=2))
        for outcome in result.outcomes:
            if outcome.error is not None:
                click.echo(f"Error: {outcome.isbn}: {outcome.error}", err=True)

    if result.errors:
        raise SystemExit(1)
