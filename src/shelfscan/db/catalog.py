# ABOUTME: Minimal persistence for confirmed picks and the library snapshot.
# ABOUTME: Adds books to a shelf and exposes lower-cased entries for duplicate checks.

import sqlite3

from shelfscan.db.mapping import BookRecord, candidate_to_row, row_to_record
from shelfscan.db.schema import SHELF_LIBRARY, SHELVES
from shelfscan.identify.types import CandidateRecord, ExistingLibraryEntry


class LibraryCatalog:
    """Wraps a sqlite3 connection holding the user's library and wishlist."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def add_book(self, candidate: CandidateRecord, shelf: str = SHELF_LIBRARY) -> int:
        """Store a confirmed candidate on a shelf and return its row id.

        Raises:
            ValueError: If the shelf is not "library" or "wishlist".
        """
        if shelf not in SHELVES:
            raise ValueError(f"Unknown shelf {shelf!r}; expected one of {', '.join(SHELVES)}")

        row = candidate_to_row(candidate, shelf)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)
        cursor = self._conn.execute(
            f"INSERT INTO books ({columns}) VALUES ({placeholders})",
            list(row.values()),
        )
        self._conn.commit()
        return cursor.lastrowid  # type: ignore[return-value]

    def get_by_id(self, book_id: int) -> BookRecord | None:
        cursor = self._conn.execute("SELECT * FROM books WHERE id = ?", (book_id,))
        row = cursor.fetchone()
        return row_to_record(row) if row else None

    def list_books(self, shelf: str | None = None) -> list[BookRecord]:
        """Return stored books ordered by title, optionally for one shelf."""
        if shelf is None:
            cursor = self._conn.execute("SELECT * FROM books ORDER BY title, id")
        else:
            cursor = self._conn.execute(
                "SELECT * FROM books WHERE shelf = ? ORDER BY title, id", (shelf,)
            )
        return [row_to_record(row) for row in cursor.fetchall()]

    def library_entries(self) -> list[ExistingLibraryEntry]:
        """Read-only snapshot of owned books for duplicate suppression.

        Only the library shelf counts; wishlist books are not owned.
        """
        cursor = self._conn.execute(
            "SELECT title, author, isbn FROM books WHERE shelf = ?", (SHELF_LIBRARY,)
        )
        return [
            ExistingLibraryEntry.from_values(row["title"], row["author"], row["isbn"])
            for row in cursor.fetchall()
        ]
