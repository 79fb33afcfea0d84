# ABOUTME: The `shelfscan search` command for a single raw catalog query.
# ABOUTME: Passes the query through to Google Books and prints the mapped results.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfscan.cli.commands.identify_cmd import _create_catalog_search
from shelfscan.cli.options import api_key_option
from shelfscan.identify.http import ShelfscanHttpClient
from shelfscan.identify.provider import DEFAULT_MAX_RESULTS, DEFAULT_START_INDEX

console = Console()


@click.command("search")
@click.argument("query")
@click.option(
    "--max-results",
    type=click.IntRange(1, 40),
    default=DEFAULT_MAX_RESULTS,
    show_default=True,
    help="Page size.",
)
@click.option(
    "--start-index",
    type=click.IntRange(min=0),
    default=DEFAULT_START_INDEX,
    show_default=True,
    help="Offset of the first result.",
)
@api_key_option
def search(query: str, max_results: int, start_index: int, api_key: str | None) -> None:
    """Search the book catalog (supports isbn:, inauthor:, inpublisher: tokens)."""
    http_client = ShelfscanHttpClient()
    try:
        catalog = _create_catalog_search(http_client, api_key)
        response = catalog.search(query, max_results=max_results, start_index=start_index)
    finally:
        http_client.close()

    if not response.items:
        console.print("[yellow]No results found.[/yellow]")
        return

    table = Table()
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("ISBN")
    table.add_column("Year", justify="right")

    for i, book in enumerate(response.items, start=start_index + 1):
        table.add_row(
            str(i),
            escape(book.title),
            escape(book.author),
            escape(book.isbn) if book.isbn else "[dim]none[/dim]",
            str(book.publication_year) if book.publication_year else "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(response.items)} of {response.total_items} result(s)[/dim]")
