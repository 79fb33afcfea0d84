# ABOUTME: Google Books catalog search client implementation.
# ABOUTME: Issues one volumes query per call and fails soft to an empty result set.

import logging

from shelfscan.identify.google_books_parser import parse_search_response
from shelfscan.identify.http import FetchError, HttpClient
from shelfscan.identify.provider import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_START_INDEX,
    SearchResponse,
)

logger = logging.getLogger(__name__)

GOOGLE_BOOKS_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"


class GoogleBooksClient:
    """Catalog search backed by the Google Books volumes endpoint.

    The query string is passed through untouched, so callers can use the
    service's field-scoped tokens (isbn:, inauthor:, inpublisher:) directly.
    Uses a dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient, *, api_key: str | None = None) -> None:
        self._http = http_client
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "googlebooks"

    def search(
        self,
        query: str,
        *,
        max_results: int = DEFAULT_MAX_RESULTS,
        start_index: int = DEFAULT_START_INDEX,
    ) -> SearchResponse:
        """Run one volumes query and map the results to CandidateRecords.

        Pagination parameters are forwarded as-is. Any transport failure or
        non-success status returns an empty SearchResponse; "search failed"
        and "no results" look the same to the caller.
        """
        params: dict[str, str] = {
            "q": query,
            "maxResults": str(max_results),
            "startIndex": str(start_index),
        }
        if self._api_key:
            params["key"] = self._api_key

        try:
            data = self._http.get(GOOGLE_BOOKS_VOLUMES_URL, params=params)
        except FetchError as exc:
            logger.warning("Catalog search failed for %r: %s", query, exc)
            return SearchResponse()

        response = parse_search_response(data)
        logger.debug(
            "Query %r returned %d item(s) of %d", query, len(response.items), response.total_items
        )
        return response
