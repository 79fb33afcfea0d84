# ABOUTME: HTTP client abstraction for catalog and vision-model API calls.
# ABOUTME: One request per call (no retries), optional throttling, injectable transport.

import logging
import time
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "shelfscan/0.1.0"
DEFAULT_TIMEOUT = 30.0


class FetchError(Exception):
    """Raised when an HTTP request fails at the transport level or returns non-2xx."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for the JSON-over-HTTP operations the pipeline needs."""

    def get(self, url: str, params: dict[str, str] | None = None) -> Any: ...

    def post(self, url: str, json: dict[str, Any] | None = None) -> Any: ...


class ShelfscanHttpClient:
    """Thin wrapper over httpx.Client returning decoded JSON bodies.

    Failed requests are never retried; callers decide what a failure means.
    A minimum interval between requests can be set to stay polite with
    public APIs.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        min_request_interval: float = 0.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": USER_AGENT},
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._min_interval = min_request_interval
        self._last_request_time: float = 0.0

    def get(self, url: str, params: dict[str, str] | None = None) -> Any:
        """Send a GET request and return the parsed JSON body.

        Raises:
            FetchError: On transport errors, non-2xx status, or a non-JSON body.
        """
        self._rate_limit()
        try:
            response = self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise FetchError(f"Request failed: {url}: {exc}") from exc
        return self._decode(url, response)

    def post(self, url: str, json: dict[str, Any] | None = None) -> Any:
        """Send a POST request with a JSON body and return the parsed JSON reply.

        Raises:
            FetchError: On transport errors, non-2xx status, or a non-JSON body.
        """
        self._rate_limit()
        try:
            response = self._client.post(url, json=json)
        except httpx.HTTPError as exc:
            raise FetchError(f"Request failed: {url}: {exc}") from exc
        return self._decode(url, response)

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _decode(url: str, response: httpx.Response) -> Any:
        if not response.is_success:
            raise FetchError(f"HTTP {response.status_code} from {url}")
        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(f"Invalid JSON from {url}: {exc}") from exc

    def _rate_limit(self) -> None:
        """Sleep if needed to maintain minimum interval between requests."""
        if self._min_interval <= 0:
            return
        now = time.monotonic()
        elapsed = now - self._last_request_time
        if elapsed < self._min_interval and self._last_request_time > 0:
            logger.debug("Throttling for %.2fs", self._min_interval - elapsed)
            time.sleep(self._min_interval - elapsed)
        self._last_request_time = time.monotonic()
