# ABOUTME: SQL DDL statements for the shelfscan library database schema.
# ABOUTME: One books table holding both owned books and the wishlist, keyed by shelf.

SHELF_LIBRARY = "library"
SHELF_WISHLIST = "wishlist"
SHELVES = (SHELF_LIBRARY, SHELF_WISHLIST)

SCHEMA_V1 = """
CREATE TABLE books (
    id               INTEGER PRIMARY KEY AUTOINCREMENT,
    title            TEXT NOT NULL,
    author           TEXT NOT NULL,
    isbn             TEXT,
    publisher        TEXT,
    publication_year INTEGER,
    description      TEXT,
    page_count       INTEGER,
    genre            TEXT,
    cover_url        TEXT,
    external_id      TEXT,
    shelf            TEXT NOT NULL DEFAULT 'library'
                     CHECK (shelf IN ('library', 'wishlist')),
    date_added       TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

CREATE INDEX idx_books_isbn ON books(isbn) WHERE isbn IS NOT NULL;
CREATE INDEX idx_books_shelf ON books(shelf);

CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""
