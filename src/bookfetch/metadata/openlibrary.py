# ABOUTME: Open Library catalog client, the credential-free secondary catalog.
# ABOUTME: Its search docs are complete records and also list other ISBNs of the work.

import logging
from typing import Any

from bookfetch.metadata.candidate import CatalogHit
from bookfetch.metadata.http import HttpClient
from bookfetch.metadata.openlibrary_parser import parse_alternate_isbns, parse_first_doc

logger = logging.getLogger(__name__)

_OL_BASE = "https://openlibrary.org"


class OpenLibraryCatalog:
    """Catalog client backed by the Open Library Search API.

    Uses dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "open_library"

    def search_by_isbn(self, isbn13: str) -> CatalogHit | None:
        """Search by ISBN and return the first doc as a hit.

        The hit's alternate_isbns drive the cross-reference against the
        primary catalog.
        """
        data = self._http.get(f"{_OL_BASE}/search.json", params={"q": isbn13})
        doc = parse_first_doc(data)
        if doc is None or not doc.get("key"):
            logger.info("No Open Library doc for ISBN %s", isbn13)
            return None

        alternates = parse_alternate_isbns(doc)
        logger.info(
            "Found Open Library doc %s for ISBN %s with %d alternate ISBN-13(s)",
            doc["key"],
            isbn13,
            len(alternates),
        )
        return CatalogHit(
            source=self.name,
            source_id=doc["key"],
            detail=doc,
            alternate_isbns=alternates,
        )

    def fetch_detail(self, source_id: str) -> dict[str, Any]:
        """Fetch the works record for a doc key such as "/works/OL45804W".

        Reconciliation does not need this, since search docs already carry
        every field the record is built from.
        """
        return self._http.get(f"{_OL_BASE}{source_id}.json")
