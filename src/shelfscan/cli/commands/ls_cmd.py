# ABOUTME: The `shelfscan ls` command for listing books stored on a shelf.
# ABOUTME: Shows the library by default, or the wishlist with --wishlist.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfscan.cli.options import db_option
from shelfscan.db.catalog import LibraryCatalog
from shelfscan.db.connection import DEFAULT_DB_PATH, open_library
from shelfscan.db.schema import SHELF_LIBRARY, SHELF_WISHLIST

console = Console()


@click.command("ls")
@click.option("--wishlist", is_flag=True, default=False, help="List the wishlist instead.")
@db_option
def ls(wishlist: bool, db_path: Path | None) -> None:
    """List the books on a shelf."""
    shelf = SHELF_WISHLIST if wishlist else SHELF_LIBRARY
    conn = open_library(db_path or DEFAULT_DB_PATH)
    try:
        records = LibraryCatalog(conn).list_books(shelf)
    finally:
        conn.close()

    if not records:
        console.print(f"[yellow]Your {shelf} is empty.[/yellow]")
        return

    table = Table(title=shelf.capitalize())
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("ISBN")

    for record in records:
        table.add_row(
            str(record.id),
            escape(record.book.title),
            escape(record.book.author),
            escape(record.book.isbn) if record.book.isbn else "[dim]none[/dim]",
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} book(s)[/dim]")
