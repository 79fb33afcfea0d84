# ABOUTME: Public API for the shelfscan library database layer.
# ABOUTME: Exports connection management, the catalog, and stored record types.

from shelfscan.db.catalog import LibraryCatalog
from shelfscan.db.connection import DEFAULT_DB_PATH, open_library
from shelfscan.db.mapping import BookRecord
from shelfscan.db.schema import SHELF_LIBRARY, SHELF_WISHLIST

__all__ = [
    "DEFAULT_DB_PATH",
    "SHELF_LIBRARY",
    "SHELF_WISHLIST",
    "BookRecord",
    "LibraryCatalog",
    "open_library",
]
