# ABOUTME: Shared pytest fixtures for shelfscan tests.
# ABOUTME: Provides a temporary library database and a scriptable fake catalog search.

from collections.abc import Callable
from pathlib import Path

import pytest

from shelfscan.db.catalog import LibraryCatalog
from shelfscan.db.connection import open_library
from shelfscan.identify.provider import SearchResponse
from shelfscan.identify.types import CandidateRecord


class FakeSearch:
    """Fake catalog search that answers queries from a dict and logs every call.

    Unknown queries return an empty page. An Exception value is raised instead
    of returned.
    """

    def __init__(self, responses: dict[str, list[CandidateRecord] | Exception] | None = None):
        self._responses = responses or {}
        self.queries: list[str] = []

    @property
    def name(self) -> str:
        return "fake"

    def __call__(self, query: str) -> SearchResponse:
        return self.search(query)

    def search(self, query: str, *, max_results: int = 40, start_index: int = 0) -> SearchResponse:
        self.queries.append(query)
        result = self._responses.get(query, [])
        if isinstance(result, Exception):
            raise result
        return SearchResponse(items=list(result), total_items=len(result))


@pytest.fixture
def fake_search() -> Callable[..., FakeSearch]:
    """Factory for FakeSearch instances keyed by exact query string."""
    return FakeSearch


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "library.db"


@pytest.fixture
def catalog(db_path: Path):
    """A LibraryCatalog over a fresh temporary database."""
    conn = open_library(db_path)
    yield LibraryCatalog(conn)
    conn.close()


@pytest.fixture
def orwell_1984() -> CandidateRecord:
    return CandidateRecord(
        title="1984",
        author="George Orwell",
        isbn="9780451524935",
        publisher="Signet Classic",
        publication_year=1950,
    )
