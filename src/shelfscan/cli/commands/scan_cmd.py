# ABOUTME: The `shelfscan scan` command: read a book photo with a vision model, then identify it.
# ABOUTME: Hands the model's ExtractedRecord to the shared identification flow.

import mimetypes
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfscan.cli.commands.identify_cmd import run_identification
from shelfscan.cli.options import candidate_options, ollama_enabled_option, ollama_url_option
from shelfscan.identify.http import HttpClient, ShelfscanHttpClient
from shelfscan.identify.types import ExtractedRecord
from shelfscan.vision.ollama import OllamaVisionClient, VisionError

# Vision models on local hardware can take minutes per image.
_VISION_TIMEOUT = 300.0


def _create_vision_http_client() -> ShelfscanHttpClient:
    return ShelfscanHttpClient(timeout=_VISION_TIMEOUT)


def _create_vision_client(
    http_client: HttpClient, base_url: str, enabled: bool
) -> OllamaVisionClient:
    """Create the default vision client (Ollama)."""
    return OllamaVisionClient(http_client, base_url=base_url, enabled=enabled)


def _cell(value: str | None, missing: str) -> str:
    return escape(value) if value else f"[dim]{missing}[/dim]"


def _show_extracted(console: Console, extracted: ExtractedRecord) -> None:
    table = Table(title="Read from image", show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Title", _cell(extracted.title, "unreadable"))
    table.add_row("Author", _cell(extracted.author, "unreadable"))
    table.add_row("ISBN", _cell(extracted.isbn, "none"))
    table.add_row("Publisher", _cell(extracted.publisher, "none"))

    console.print(table)


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-m", "--model", required=True, help="Vision model name, e.g. llava:13b.")
@ollama_url_option
@ollama_enabled_option
@candidate_options
def scan(
    image: Path,
    model: str,
    ollama_url: str,
    ollama_enabled: bool,
    db_path: Path | None,
    api_key: str | None,
    quiet: bool,
    wishlist: bool,
    limit: int,
) -> None:
    """Identify the book in IMAGE and add it to a shelf."""
    console = Console()

    mime_type, _ = mimetypes.guess_type(image.name)
    if mime_type is None or not mime_type.startswith("image/"):
        console.print(f"[red]Error:[/red] {escape(image.name)} is not an image file.")
        raise SystemExit(1)

    http_client = _create_vision_http_client()
    try:
        client = _create_vision_client(http_client, ollama_url, ollama_enabled)
        if not client.enabled:
            console.print(
                "[red]Error:[/red] vision model is disabled. "
                "Pass --ollama or set OLLAMA_ENABLED=true."
            )
            raise SystemExit(1)

        try:
            extracted = client.analyze_image(image.read_bytes(), model)
        except VisionError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise SystemExit(1) from exc
    finally:
        http_client.close()

    _show_extracted(console, extracted)
    run_identification(
        extracted,
        console=console,
        db_path=db_path,
        api_key=api_key,
        quiet=quiet,
        wishlist=wishlist,
        limit=limit,
    )
