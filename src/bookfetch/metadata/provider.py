# ABOUTME: CatalogClient protocol defining the contract for book catalogs.
# ABOUTME: Google Books (primary) and Open Library (secondary) both implement this.

from typing import Any, Protocol, runtime_checkable

from bookfetch.metadata.candidate import CatalogHit


@runtime_checkable
class CatalogClient(Protocol):
    """Protocol for ISBN lookups against one external catalog.

    ``search_by_isbn`` returns the catalog's first candidate or None; it never
    ranks candidates. ``fetch_detail`` returns the full record for a hit.
    """

    @property
    def name(self) -> str: ...

    def search_by_isbn(self, isbn13: str) -> CatalogHit | None: ...

    def fetch_detail(self, source_id: str) -> dict[str, Any]: ...
