# ABOUTME: HTTP client abstraction shared by every catalog client and the cover resolver.
# ABOUTME: Provides rate limiting, retry with backoff, and injectable transport for testing.

import logging
import time
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

_USER_AGENT = "bookfetch/0.1.0"


class MetadataFetchError(Exception):
    """Raised when an HTTP request to a catalog fails.

    Carries the HTTP status code when the failure came from a response,
    or None for transport-level failures (timeouts, refused connections).
    """

    def __init__(
        self, message: str, *, status_code: int | None = None, url: str | None = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against catalog APIs."""

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]: ...

    def exists(self, url: str, params: dict[str, str] | None = None) -> bool: ...


def _is_client_error(status_code: int) -> bool:
    return 400 <= status_code < 500


class BookfetchHttpClient:
    """HTTP client with rate limiting and retry for catalog API calls.

    Client errors (4xx) are terminal and fail on the first attempt. Everything
    else that is not a 200 (5xx, unexpected statuses, timeouts, network errors)
    is retried against the same URL up to ``max_retries`` times.
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": _USER_AGENT},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._min_interval = min_request_interval
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._last_request_time: float = 0.0

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Send a GET request with rate limiting and retry.

        Args:
            url: The URL to request.
            params: Optional query parameters.

        Returns:
            Parsed JSON response body.

        Raises:
            MetadataFetchError: On client errors, invalid JSON, or exhausted retries.
        """
        response = self._request(url, params)
        try:
            return response.json()
        except ValueError as exc:
            raise MetadataFetchError(
                f"Invalid JSON from {url}: {exc}", status_code=response.status_code, url=url
            ) from exc

    def exists(self, url: str, params: dict[str, str] | None = None) -> bool:
        """Probe a URL, returning True on 200 and False on 404.

        A 404 is a normal outcome rather than an error, so it is neither
        retried nor raised. Other failures follow the same policy as get().
        """
        try:
            self._request(url, params)
        except MetadataFetchError as exc:
            if exc.status_code == 404:
                return False
            raise
        return True

    def _request(self, url: str, params: dict[str, str] | None) -> httpx.Response:
        attempts = 1 + self._max_retries
        last_error = ""
        last_status: int | None = None
        for attempt in range(attempts):
            self._rate_limit()
            logger.debug("GET %s (attempt %d/%d)", url, attempt + 1, attempts)
            try:
                response = self._client.get(url, params=params)
            except httpx.HTTPError as exc:
                last_status = None
                last_error = f"Request failed: {url}: {exc}"
            else:
                if response.status_code == 200:
                    return response
                last_status = response.status_code
                if _is_client_error(response.status_code):
                    raise MetadataFetchError(
                        f"Cannot retry HTTP {response.status_code} from {url}",
                        status_code=response.status_code,
                        url=url,
                    )
                last_error = f"HTTP {response.status_code} from {url}"

            if attempt < attempts - 1:
                delay = self._retry_delay * (2**attempt)
                logger.warning(
                    "%s, retrying in %.1fs (attempt %d/%d)",
                    last_error,
                    delay,
                    attempt + 1,
                    self._max_retries,
                )
                time.sleep(delay)

        raise MetadataFetchError(
            f"{last_error} after {attempts} attempts", status_code=last_status, url=url
        )

    def _rate_limit(self) -> None:
        """Sleep if needed to maintain minimum interval between requests."""
        if self._min_interval <= 0:
            return
        now = time.monotonic()
        elapsed = now - self._last_request_time
        if elapsed < self._min_interval and self._last_request_time > 0:
            time.sleep(self._min_interval - elapsed)
        self._last_request_time = time.monotonic()
