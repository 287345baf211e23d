# ABOUTME: Best-effort cover image lookup against the Open Library covers service.
# ABOUTME: Probes sizes largest-first and never lets a failure escape.

import logging

from bookfetch.metadata.http import HttpClient, MetadataFetchError
from bookfetch.metadata.openlibrary_parser import build_cover_url

logger = logging.getLogger(__name__)

COVER_SIZES = ("L", "M", "S")


class CoverResolver:
    """Find the largest available cover image for an ISBN.

    Each size is probed with ``default=false`` so that a missing image comes
    back as a 404 instead of a blank placeholder.
    """

    def __init__(self, http_client: HttpClient, sizes: tuple[str, ...] = COVER_SIZES) -> None:
        self._http = http_client
        self._sizes = sizes

    def resolve(self, isbn13: str) -> str | None:
        """Return the canonical URL of the largest existing cover, or None."""
        for size in self._sizes:
            url = build_cover_url(isbn13, size)
            try:
                found = self._http.exists(url, params={"default": "false"})
            except MetadataFetchError as exc:
                logger.warning("Cover probe failed for %s size %s: %s", isbn13, size, exc)
                continue
            if found:
                logger.info("Cover found for %s at size %s", isbn13, size)
                return url
            logger.debug("No cover for %s at size %s", isbn13, size)
        return None
