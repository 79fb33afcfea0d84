# ABOUTME: Interactive picker for ranked identification candidates.
# ABOUTME: Displays candidates in a Rich table, flags owned books, and prompts for a choice.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfscan.identify.duplicates import IdentifiedCandidate
from shelfscan.identify.types import CandidateRecord, ExtractedRecord


def _or_dash(value: object) -> str:
    return "-" if value is None or value == "" else escape(str(value))


class CandidatePicker:
    """Interactive one-click confirmation of an identified book.

    Shows what the image model read next to a ranked table of catalog
    candidates, then lets the user add one, inspect one, or skip. Candidates
    already in the library are shown but cannot be added again.
    """

    def __init__(self, *, console: Console | None = None) -> None:
        self._console = console or Console()

    def show(self, extracted: ExtractedRecord, candidates: list[IdentifiedCandidate]) -> None:
        """Render the extracted record and the candidate table."""
        self._console.print(f"\n[bold]Scanned:[/bold] {_or_dash(extracted.title)}")
        if extracted.author:
            self._console.print(f"  Author: {escape(extracted.author)}")
        if extracted.isbn:
            self._console.print(f"  ISBN: {escape(extracted.isbn)}")

        table = Table(title="Candidates")
        table.add_column("#", style="bold", width=3)
        table.add_column("Title")
        table.add_column("Author")
        table.add_column("ISBN")
        table.add_column("Year", justify="right")
        table.add_column("Publisher")
        table.add_column("In library", justify="center")

        for i, item in enumerate(candidates, start=1):
            book = item.candidate
            table.add_row(
                str(i),
                escape(book.title),
                escape(book.author),
                _or_dash(book.isbn),
                _or_dash(book.publication_year),
                _or_dash(book.publisher),
                "[green]yes[/green]" if item.in_library else "",
            )

        self._console.print(table)

    def pick(
        self, extracted: ExtractedRecord, candidates: list[IdentifiedCandidate]
    ) -> CandidateRecord | None:
        """Prompt until the user adds a candidate or skips.

        Returns:
            The chosen CandidateRecord, or None if the user skips.
        """
        if not candidates:
            return None

        self.show(extracted, candidates)
        prompt_text = "[1-N] Add  [v1-vN] View details  [s] Skip"

        while True:
            choice = click.prompt(prompt_text, type=str, default="s").strip().lower()

            if choice == "s":
                return None

            if choice.startswith("v"):
                idx = self._parse_index(choice[1:], len(candidates))
                if idx is not None:
                    chosen = self._detail_prompt(candidates[idx])
                    if chosen is not None:
                        return chosen
                continue

            idx = self._parse_index(choice, len(candidates))
            if idx is not None and self._can_add(candidates[idx]):
                return candidates[idx].candidate

    @staticmethod
    def _parse_index(text: str, count: int) -> int | None:
        try:
            idx = int(text) - 1
        except ValueError:
            return None
        return idx if 0 <= idx < count else None

    def _can_add(self, item: IdentifiedCandidate) -> bool:
        if item.in_library:
            self._console.print(
                f"[yellow]Already in your library:[/yellow] {escape(item.candidate.title)}"
            )
            return False
        return True

    def _show_detail(self, book: CandidateRecord) -> None:
        detail = Table(title="Details", show_header=False)
        detail.add_column("Field", style="bold")
        detail.add_column("Value")

        detail.add_row("Title", escape(book.title))
        detail.add_row("Author", escape(book.author))
        detail.add_row("ISBN", _or_dash(book.isbn))
        detail.add_row("Publisher", _or_dash(book.publisher))
        detail.add_row("Year", _or_dash(book.publication_year))
        detail.add_row("Pages", _or_dash(book.page_count))
        detail.add_row("Genre", _or_dash(book.genre))
        detail.add_row("Description", _or_dash(book.description))
        detail.add_row("Cover", _or_dash(book.cover_url))

        self._console.print(detail)

    def _detail_prompt(self, item: IdentifiedCandidate) -> CandidateRecord | None:
        """Show detail view and prompt to add or go back.

        Returns the candidate if added, or None to go back to the list.
        """
        self._show_detail(item.candidate)
        choice = click.prompt("[a] Add  [b] Back to list", type=str, default="b")
        if choice.strip().lower() == "a" and self._can_add(item):
            return item.candidate
        return None
