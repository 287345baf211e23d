# ABOUTME: Canonical book record produced by reconciliation and handed to page publishers.
# ABOUTME: BookRecord is immutable; to_dict() yields the publisher-facing structure.

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any


class Source(str, Enum):
    """Which catalog the record was built from."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    UNRESOLVED = "unresolved"


class MatchQuality(str, Enum):
    """How directly the record matches the ISBN that was looked up."""

    EXACT = "exact"
    NEAREST = "nearest"
    NONE = "none"


# Placeholder values that describe the absence of a match rather than data.
_PLACEHOLDERS = (Source.UNRESOLVED, MatchQuality.NONE)


@dataclass(frozen=True)
class BookRecord:
    """Source-agnostic description of one looked-up book.

    Built once per lookup. Optional fields hold None when the catalog had no
    data for them; the normalizer turns empty strings into None as well, so a
    normalized record never carries an empty value.
    """

    isbn13: str
    title: str
    source: Source = Source.UNRESOLVED
    source_id: str | None = None
    match_quality: MatchQuality = MatchQuality.NONE
    author: str | None = None
    cover_image_url: str | None = None
    publish_year: int | None = None
    page_count: int | None = None
    raw_detail: dict[str, Any] | None = None

    @property
    def is_resolved(self) -> bool:
        """Whether any catalog matched the ISBN."""
        return self.source is not Source.UNRESOLVED

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a plain dict with absent fields omitted.

        Enums are emitted as their string values. The unresolved/none
        placeholders are omitted like any other absent field.
        """
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value == "" or any(value is p for p in _PLACEHOLDERS):
                continue
            if isinstance(value, Enum):
                value = value.value
            result[f.name] = value
        return result
