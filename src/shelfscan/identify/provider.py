# ABOUTME: CatalogSearch protocol defining the contract for bibliographic search services.
# ABOUTME: Any external catalog (Google Books, etc.) implements this; the cascade only needs search().

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from shelfscan.identify.types import CandidateRecord

DEFAULT_MAX_RESULTS = 40
DEFAULT_START_INDEX = 0


@dataclass
class SearchResponse:
    """One page of catalog results, already mapped to CandidateRecords."""

    items: list[CandidateRecord] = field(default_factory=list)
    total_items: int = 0


# A single-argument search function: query string in, one page of results out.
SearchFn = Callable[[str], SearchResponse]


@runtime_checkable
class CatalogSearch(Protocol):
    """Protocol for catalog search services.

    Implementations fail soft: a transport or service failure comes back as an
    empty SearchResponse, never as an exception.
    """

    @property
    def name(self) -> str: ...

    def search(
        self,
        query: str,
        *,
        max_results: int = DEFAULT_MAX_RESULTS,
        start_index: int = DEFAULT_START_INDEX,
    ) -> SearchResponse: ...
