# ABOUTME: Unit tests for duplicate suppression against the user's library.
# ABOUTME: Validates raw ISBN equality, title+author equality, and annotation order.

from shelfscan.identify.duplicates import (
    IdentifiedCandidate,
    annotate_duplicates,
    filter_duplicates,
    is_duplicate,
)
from shelfscan.identify.types import CandidateRecord, ExistingLibraryEntry

LIBRARY = [
    ExistingLibraryEntry(title="1984", author="george orwell", isbn="9780451524935"),
    ExistingLibraryEntry(title="dune", author="frank herbert"),
]


class TestIsDuplicate:
    """Tests for is_duplicate."""

    def test_identical_raw_isbn(self) -> None:
        candidate = CandidateRecord(title="Nineteen Eighty-Four", isbn="9780451524935")
        assert is_duplicate(candidate, LIBRARY)

    def test_isbn_is_not_normalized(self) -> None:
        """Hyphenated or cross-format ISBNs are not treated as duplicates."""
        assert not is_duplicate(
            CandidateRecord(title="Other", isbn="978-0-451-52493-5"), LIBRARY
        )
        assert not is_duplicate(CandidateRecord(title="Other", isbn="0451524934"), LIBRARY)

    def test_title_and_author_match_with_different_isbn(self) -> None:
        candidate = CandidateRecord(title="1984", author="George Orwell", isbn="0451524934")
        assert is_duplicate(candidate, LIBRARY)

    def test_title_and_author_match_without_isbns(self) -> None:
        candidate = CandidateRecord(title="  DUNE ", author="Frank Herbert")
        assert is_duplicate(candidate, LIBRARY)

    def test_title_match_alone_is_not_duplicate(self) -> None:
        candidate = CandidateRecord(title="Dune", author="Brian Herbert")
        assert not is_duplicate(candidate, LIBRARY)

    def test_title_and_author_must_match_same_entry(self) -> None:
        candidate = CandidateRecord(title="Dune", author="George Orwell")
        assert not is_duplicate(candidate, LIBRARY)

    def test_empty_library(self) -> None:
        assert not is_duplicate(CandidateRecord(title="1984", author="George Orwell"), [])


class TestAnnotateDuplicates:
    """Tests for annotate_duplicates and filter_duplicates."""

    def test_annotates_in_order(self) -> None:
        owned = CandidateRecord(title="Dune", author="Frank Herbert")
        new = CandidateRecord(title="Dune Messiah", author="Frank Herbert")
        assert annotate_duplicates([new, owned], LIBRARY) == [
            IdentifiedCandidate(new, in_library=False),
            IdentifiedCandidate(owned, in_library=True),
        ]

    def test_filter_drops_owned(self) -> None:
        owned = CandidateRecord(title="Dune", author="Frank Herbert")
        new = CandidateRecord(title="Dune Messiah", author="Frank Herbert")
        assert filter_duplicates([owned, new], LIBRARY) == [new]


class TestExistingLibraryEntry:
    """Tests for ExistingLibraryEntry.from_values."""

    def test_lowercases_title_and_author(self) -> None:
        entry = ExistingLibraryEntry.from_values(" 1984 ", "George Orwell", "9780451524935")
        assert entry == ExistingLibraryEntry("1984", "george orwell", "9780451524935")

    def test_missing_author_and_isbn(self) -> None:
        entry = ExistingLibraryEntry.from_values("Dune", None, "")
        assert entry.author == ""
        assert entry.isbn is None
