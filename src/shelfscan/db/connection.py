# ABOUTME: SQLite connection management for the shelfscan library database.
# ABOUTME: Opens or creates the database and applies the schema on first use.

import sqlite3
from pathlib import Path

from shelfscan.db.schema import SCHEMA_V1

DEFAULT_DB_PATH = Path.home() / ".shelfscan" / "library.db"


def _schema_exists(conn: sqlite3.Connection) -> bool:
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
    )
    return cursor.fetchone() is not None


def open_library(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the library database.

    Creates parent directories as needed, applies the schema on first
    creation, and sets sqlite3.Row as the row factory.

    Args:
        path: Path to the database file. Defaults to ~/.shelfscan/library.db.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    if not _schema_exists(conn):
        conn.executescript(SCHEMA_V1)

    return conn
