# ABOUTME: The `shelfscan models` command: list vision-capable models on the Ollama server.

import click
from rich.console import Console
from rich.markup import escape

from shelfscan.cli.commands.scan_cmd import _create_vision_client, _create_vision_http_client
from shelfscan.cli.options import ollama_enabled_option, ollama_url_option

console = Console()


@click.command()
@ollama_url_option
@ollama_enabled_option
def models(ollama_url: str, ollama_enabled: bool) -> None:
    """List installed models that can read images."""
    http_client = _create_vision_http_client()
    try:
        client = _create_vision_client(http_client, ollama_url, ollama_enabled)
        if not client.is_available():
            console.print(f"[red]Ollama is not available[/red] at {escape(ollama_url)}.")
            raise SystemExit(1)
        names = client.list_models()
    finally:
        http_client.close()

    if not names:
        console.print("[yellow]No vision-capable models installed.[/yellow]")
        return

    for name in names:
        console.print(escape(name))
