# ABOUTME: Google Books catalog client, the primary catalog for ISBN lookups.
# ABOUTME: Requires an API key; search gives only an id, so details are a second request.

import logging
from typing import Any

from bookfetch.metadata.candidate import CatalogHit
from bookfetch.metadata.googlebooks_parser import parse_first_volume_id, parse_volume_info
from bookfetch.metadata.http import HttpClient

logger = logging.getLogger(__name__)

_GB_BASE = "https://www.googleapis.com/books/v1/volumes"


class GoogleBooksCatalog:
    """Catalog client backed by the Google Books volumes API."""

    def __init__(self, http_client: HttpClient, api_key: str) -> None:
        if not api_key:
            raise ValueError("Google Books requires a non-empty API key")
        self._http = http_client
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "google_books"

    def search_by_isbn(self, isbn13: str) -> CatalogHit | None:
        """Search volumes by ISBN and return the first item as a hit."""
        data = self._http.get(_GB_BASE, params={"q": f"isbn:{isbn13}", "key": self._api_key})
        volume_id = parse_first_volume_id(data)
        if volume_id is None:
            logger.info("No Google Books volume for ISBN %s", isbn13)
            return None
        logger.info("Found Google Books volume %s for ISBN %s", volume_id, isbn13)
        return CatalogHit(source=self.name, source_id=volume_id, detail=data["items"][0])

    def fetch_detail(self, source_id: str) -> dict[str, Any]:
        """Fetch a volume and return its volumeInfo."""
        data = self._http.get(f"{_GB_BASE}/{source_id}", params={"key": self._api_key})
        return parse_volume_info(data)
