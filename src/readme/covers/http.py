# ABOUTME: HTTP client for downloading cover images.
# ABOUTME: Provides rate limiting, retry with backoff, and injectable transport for testing.

import logging
import time
from typing import Any, Protocol, runtime_checkable

import httpx

from readme.covers.images import CoverError

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class CoverFetchError(CoverError):
    """Raised when an HTTP request for a cover image fails."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations that return a raw body."""

    def get_bytes(self, url: str) -> bytes: ...


class ReadMeHttpClient:
    """HTTP client with rate limiting and retry for cover downloads.

    Wraps httpx.Client with configurable request intervals and retry logic
    for transient failures (429, 5xx). Redirects are followed.
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": "readme-library/0.1.0"},
            "timeout": 30.0,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._min_interval = min_request_interval
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._last_request_time: float = 0.0

    def get_bytes(self, url: str) -> bytes:
        """Send a GET request with rate limiting and retry.

        Returns:
            The raw response body.

        Raises:
            CoverFetchError: On non-retryable HTTP errors or exhausted retries.
        """
        self._rate_limit()

        attempts = 1 + self._max_retries
        last_status = 0
        for attempt in range(attempts):
            try:
                response = self._client.get(url)
                last_status = response.status_code
            except httpx.HTTPError as exc:
                raise CoverFetchError(f"Request failed: {url}: {exc}") from exc

            if response.status_code == 200:
                return response.content

            if response.status_code not in _RETRYABLE_STATUS_CODES:
                raise CoverFetchError(f"HTTP {response.status_code} from {url}")

            if attempt < attempts - 1:
                delay = self._retry_delay * (2**attempt)
                logger.warning(
                    "HTTP %d from %s, retrying in %.1fs (attempt %d/%d)",
                    response.status_code,
                    url,
                    delay,
                    attempt + 1,
                    self._max_retries,
                )
                time.sleep(delay)

        raise CoverFetchError(f"HTTP {last_status} from {url} after {attempts} attempts")

    def close(self) -> None:
        self._client.close()

    def _rate_limit(self) -> None:
        """Sleep if needed to maintain minimum interval between requests."""
        if self._min_interval <= 0:
            return
        now = time.monotonic()
        elapsed = now - self._last_request_time
        if elapsed < self._min_interval and self._last_request_time > 0:
            time.sleep(self._min_interval - elapsed)
        self._last_request_time = time.monotonic()
