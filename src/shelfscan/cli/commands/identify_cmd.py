# ABOUTME: The `shelfscan identify` command: resolve typed-in book details to catalog picks.
# ABOUTME: Also hosts the shared rank-review-add flow used by `shelfscan scan`.

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfscan.cli.options import candidate_options
from shelfscan.cli.review import CandidatePicker
from shelfscan.db.catalog import LibraryCatalog
from shelfscan.db.connection import DEFAULT_DB_PATH, open_library
from shelfscan.db.schema import SHELF_LIBRARY, SHELF_WISHLIST
from shelfscan.identify.google_books import GoogleBooksClient
from shelfscan.identify.http import HttpClient, ShelfscanHttpClient
from shelfscan.identify.pipeline import identify
from shelfscan.identify.provider import CatalogSearch
from shelfscan.identify.types import ExtractedRecord

logger = logging.getLogger(__name__)


def _create_catalog_search(http_client: HttpClient, api_key: str | None) -> CatalogSearch:
    """Create the default catalog search client (Google Books)."""
    return GoogleBooksClient(http_client, api_key=api_key)


def run_identification(
    extracted: ExtractedRecord,
    *,
    console: Console,
    db_path: Path | None,
    api_key: str | None,
    quiet: bool,
    wishlist: bool,
    limit: int,
) -> None:
    """Identify, rank and annotate candidates, then let the user add one."""
    conn = open_library(db_path or DEFAULT_DB_PATH)
    http_client = ShelfscanHttpClient()
    try:
        catalog = LibraryCatalog(conn)
        search = _create_catalog_search(http_client, api_key)
        results = identify(extracted, search.search, catalog.library_entries())

        if not results:
            console.print("[yellow]No matches found.[/yellow] Enter the book manually.")
            return

        shown = results[:limit]
        picker = CandidatePicker(console=console)
        if quiet:
            picker.show(extracted, shown)
            return

        chosen = picker.pick(extracted, shown)
        if chosen is None:
            console.print("[dim]Skipped.[/dim]")
            return

        shelf = SHELF_WISHLIST if wishlist else SHELF_LIBRARY
        book_id = catalog.add_book(chosen, shelf=shelf)
        logger.info("Stored %r as book %d on %s", chosen.title, book_id, shelf)
        console.print(
            f"[green]Added to {shelf}:[/green] {escape(chosen.title)} [dim](id {book_id})[/dim]"
        )
    finally:
        http_client.close()
        conn.close()


@click.command("identify")
@click.option("--title", default=None, help="Title as read from the cover or spine.")
@click.option("--author", default=None, help="Author name(s).")
@click.option("--isbn", default=None, help="ISBN-10 or ISBN-13, any formatting.")
@click.option("--publisher", default=None, help="Publisher name.")
@candidate_options
def identify_book(
    title: str | None,
    author: str | None,
    isbn: str | None,
    publisher: str | None,
    db_path: Path | None,
    api_key: str | None,
    quiet: bool,
    wishlist: bool,
    limit: int,
) -> None:
    """Find a book in the catalog from partial details and add it to a shelf."""
    extracted = ExtractedRecord(title=title, author=author, isbn=isbn, publisher=publisher)
    run_identification(
        extracted,
        console=Console(),
        db_path=db_path,
        api_key=api_key,
        quiet=quiet,
        wishlist=wishlist,
        limit=limit,
    )
