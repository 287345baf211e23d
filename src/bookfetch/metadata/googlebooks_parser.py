# ABOUTME: Parsing functions for Google Books API JSON responses.
# ABOUTME: Pulls the first volume id from searches and volumeInfo fields from details.

from typing import Any


def parse_first_volume_id(data: dict[str, Any]) -> str | None:
    """Return the id of the first item in a volumes search response."""
    items = data.get("items") or []
    if not items:
        return None
    return items[0].get("id") or None


def parse_volume_info(data: dict[str, Any]) -> dict[str, Any]:
    """Extract the volumeInfo object from a volume detail response."""
    return data.get("volumeInfo") or {}


def parse_publish_year(published_date: Any) -> int | None:
    """Parse the year from a Google Books publishedDate.

    Dates come as "2015", "2015-06" or "2015-06-01"; only the first four
    characters are used. Missing or unparsable dates yield None.
    """
    if not published_date:
        return None
    try:
        return int(str(published_date)[:4])
    except ValueError:
        return None


def parse_authors(volume_info: dict[str, Any]) -> str:
    """Join the authors list with ", ", or return "" when there are none."""
    return ", ".join(volume_info.get("authors") or [])
