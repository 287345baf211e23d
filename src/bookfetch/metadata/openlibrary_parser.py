# ABOUTME: Parsing functions for Open Library API JSON responses.
# ABOUTME: Extracts the first search doc, its alternate ISBN-13s, and cover URLs.

from typing import Any

from bookfetch.metadata.isbn import is_isbn13

_COVERS_BASE_URL = "https://covers.openlibrary.org/b/isbn"


def parse_first_doc(data: dict[str, Any]) -> dict[str, Any] | None:
    """Return the first doc of an Open Library Search API response."""
    docs = data.get("docs") or []
    return docs[0] if docs else None


def parse_alternate_isbns(doc: dict[str, Any]) -> list[str]:
    """List the doc's ISBN-13s in catalog order, dropping ISBN-10s and junk."""
    return [isbn for isbn in doc.get("isbn") or [] if is_isbn13(str(isbn))]


def build_cover_url(isbn: str, size: str = "L") -> str:
    """Build an Open Library cover image URL for a given ISBN.

    Args:
        isbn: The ISBN to look up cover art for.
        size: Image size: "S" (small), "M" (medium), or "L" (large).
    """
    return f"{_COVERS_BASE_URL}/{isbn}-{size}.jpg"
