# ABOUTME: Shared Click options for shelfscan CLI commands.
# ABOUTME: Reusable decorators for the database path, catalog API key, and Ollama settings.

from pathlib import Path

import click

from shelfscan.db.connection import DEFAULT_DB_PATH
from shelfscan.vision.ollama import DEFAULT_OLLAMA_URL

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="SHELFSCAN_DB",
    help=f"Path to library database (default: {DEFAULT_DB_PATH})",
)

api_key_option = click.option(
    "--api-key",
    default=None,
    envvar="GOOGLE_BOOKS_API_KEY",
    help="Google Books API key (optional; raises rate limits).",
)

ollama_url_option = click.option(
    "--ollama-url",
    default=DEFAULT_OLLAMA_URL,
    envvar="OLLAMA_API_URL",
    show_default=True,
    help="Base URL of the Ollama server.",
)

ollama_enabled_option = click.option(
    "--ollama/--no-ollama",
    "ollama_enabled",
    default=False,
    envvar="OLLAMA_ENABLED",
    help="Enable the Ollama vision model (or set OLLAMA_ENABLED=true).",
)


def candidate_options(func):
    """Options shared by every command that ends in a candidate pick."""
    func = click.option(
        "-n",
        "--limit",
        type=click.IntRange(min=1),
        default=10,
        show_default=True,
        help="Maximum number of ranked candidates to show.",
    )(func)
    func = click.option(
        "--wishlist",
        is_flag=True,
        default=False,
        help="Add the chosen book to the wishlist instead of the library.",
    )(func)
    func = click.option(
        "-q",
        "--quiet",
        is_flag=True,
        default=False,
        help="Only print the ranked candidates; never prompt.",
    )(func)
    func = api_key_option(func)
    return db_option(func)
