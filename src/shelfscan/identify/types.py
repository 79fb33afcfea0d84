# ABOUTME: Core record types for the vision-assisted identification pipeline.
# ABOUTME: ExtractedRecord goes in, CandidateRecord comes out of the catalog search.

from dataclasses import dataclass

UNKNOWN_AUTHOR = "Unknown Author"


@dataclass(frozen=True)
class ExtractedRecord:
    """A noisy, partial book description produced by the image model.

    Every field is optional and none is guaranteed accurate. Instances are
    immutable; a record lives for exactly one scan.
    """

    title: str | None = None
    author: str | None = None
    isbn: str | None = None
    publisher: str | None = None

    @property
    def is_empty(self) -> bool:
        """Whether no usable field was extracted at all."""
        return not any(
            value and value.strip()
            for value in (self.title, self.author, self.isbn, self.publisher)
        )


@dataclass(frozen=True)
class CandidateRecord:
    """A catalog search result that may be the scanned book.

    `author` is free text and may hold several names joined by ", ".
    `external_id` is the catalog service's own volume identifier.
    """

    title: str
    author: str = UNKNOWN_AUTHOR
    isbn: str | None = None
    publisher: str | None = None
    publication_year: int | None = None
    description: str | None = None
    page_count: int | None = None
    genre: str | None = None
    cover_url: str | None = None
    external_id: str | None = None


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate annotated with its transient match score."""

    candidate: CandidateRecord
    score: float


@dataclass(frozen=True)
class ExistingLibraryEntry:
    """Lower-cased snapshot of a book the user already owns."""

    title: str
    author: str
    isbn: str | None = None

    @classmethod
    def from_values(
        cls, title: str, author: str | None, isbn: str | None = None
    ) -> "ExistingLibraryEntry":
        """Build an entry from stored values, lower-casing title and author."""
        return cls(
            title=title.strip().lower(),
            author=(author or "").strip().lower(),
            isbn=isbn or None,
        )
