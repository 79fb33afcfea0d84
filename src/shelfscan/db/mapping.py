# ABOUTME: Converts between CandidateRecord and SQLite row dictionaries.
# ABOUTME: BookRecord pairs a stored candidate with its row id, shelf and timestamp.

from dataclasses import dataclass
from typing import Any

from shelfscan.identify.types import CandidateRecord


@dataclass
class BookRecord:
    """A stored book: the confirmed CandidateRecord plus database fields."""

    id: int
    book: CandidateRecord
    shelf: str
    date_added: str


def candidate_to_row(candidate: CandidateRecord, shelf: str) -> dict[str, Any]:
    return {
        "title": candidate.title,
        "author": candidate.author,
        "isbn": candidate.isbn,
        "publisher": candidate.publisher,
        "publication_year": candidate.publication_year,
        "description": candidate.description,
        "page_count": candidate.page_count,
        "genre": candidate.genre,
        "cover_url": candidate.cover_url,
        "external_id": candidate.external_id,
        "shelf": shelf,
    }


def row_to_record(row: Any) -> BookRecord:
    return BookRecord(
        id=row["id"],
        book=CandidateRecord(
            title=row["title"],
            author=row["author"],
            isbn=row["isbn"],
            publisher=row["publisher"],
            publication_year=row["publication_year"],
            description=row["description"],
            page_count=row["page_count"],
            genre=row["genre"],
            cover_url=row["cover_url"],
            external_id=row["external_id"],
        ),
        shelf=row["shelf"],
        date_added=row["date_added"],
    )
