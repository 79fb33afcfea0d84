# ABOUTME: Duplicate suppression of catalog candidates against the user's library.
# ABOUTME: Exact ISBN or exact title+author equality; independent of match scoring.

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from shelfscan.identify.types import CandidateRecord, ExistingLibraryEntry


@dataclass(frozen=True)
class IdentifiedCandidate:
    """A ranked candidate plus whether the user already owns it."""

    candidate: CandidateRecord
    in_library: bool


def _clean(value: str | None) -> str:
    return value.strip().lower() if value else ""


def is_duplicate(candidate: CandidateRecord, library: Iterable[ExistingLibraryEntry]) -> bool:
    """Whether the candidate is already in the library.

    A match is either an identical raw ISBN string (no normalization), or the
    same lower-cased title AND author on a single library entry. This is
    stricter than the scorer and never affects ranking.
    """
    title = _clean(candidate.title)
    author = _clean(candidate.author)
    for entry in library:
        if candidate.isbn and entry.isbn and candidate.isbn == entry.isbn:
            return True
        if title and title == _clean(entry.title) and author == _clean(entry.author):
            return True
    return False


def annotate_duplicates(
    candidates: Iterable[CandidateRecord], library: Sequence[ExistingLibraryEntry]
) -> list[IdentifiedCandidate]:
    """Flag each candidate with in_library, preserving order."""
    return [IdentifiedCandidate(c, is_duplicate(c, library)) for c in candidates]


def filter_duplicates(
    candidates: Iterable[CandidateRecord], library: Sequence[ExistingLibraryEntry]
) -> list[CandidateRecord]:
    """Drop candidates the user already owns, preserving order."""
    return [c for c in candidates if not is_duplicate(c, library)]
