# ABOUTME: Reconciliation engine that turns one ISBN-13 into one canonical BookRecord.
# ABOUTME: Tries the primary catalog, falls back to the secondary, and cross-references ISBNs.

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from bookfetch.config import Settings
from bookfetch.metadata.candidate import CatalogHit
from bookfetch.metadata.covers import CoverResolver
from bookfetch.metadata.googlebooks import GoogleBooksCatalog
from bookfetch.metadata.googlebooks_parser import parse_authors, parse_publish_year
from bookfetch.metadata.http import BookfetchHttpClient, HttpClient
from bookfetch.metadata.isbn import is_isbn13
from bookfetch.metadata.normalizer import build_title, normalize_record
from bookfetch.metadata.openlibrary import OpenLibraryCatalog
from bookfetch.metadata.provider import CatalogClient
from bookfetch.metadata.types import BookRecord, MatchQuality, Source

logger = logging.getLogger(__name__)

UNRESOLVED_TITLE = "Unidentified Book with ISBN: {isbn}"


@dataclass
class LookupAttempt:
    """Progress of a single lookup: sources tried and the alternate ISBN scan."""

    isbn13: str
    tried: list[str] = field(default_factory=list)
    alternate_isbns: list[str] = field(default_factory=list)
    alternate_index: int = 0


@dataclass
class _Selection:
    catalog: CatalogClient
    source: Source
    match_quality: MatchQuality
    hit: CatalogHit


class ReconciliationEngine:
    """Look up an ISBN-13 across a primary and a secondary catalog.

    Policy choices that change observable output, and so must stay put:
    each catalog search uses its first candidate only, and the alternate-ISBN
    scan stops at the first primary hit rather than looking for a better one.

    With no primary catalog (no API key configured) every primary query is
    treated as a miss and the engine runs against the secondary alone.
    """

    def __init__(
        self,
        *,
        secondary: CatalogClient,
        covers: CoverResolver,
        primary: CatalogClient | None = None,
    ) -> None:
        self._primary = primary
        self._secondary = secondary
        self._covers = covers

    @property
    def has_primary(self) -> bool:
        return self._primary is not None

    def lookup(self, isbn13: str) -> BookRecord:
        """Reconcile one ISBN-13 into a normalized BookRecord.

        Args:
            isbn13: Thirteen digits, punctuation already stripped.

        Returns:
            The normalized record. An ISBN neither catalog knows yields the
            "Unidentified Book" placeholder rather than an error.

        Raises:
            ValueError: If isbn13 is not a 13-digit string.
            MetadataFetchError: If a catalog request fails after retries.
        """
        if not is_isbn13(isbn13):
            raise ValueError(f"Expected a 13-digit ISBN, got {isbn13!r}")

        attempt = LookupAttempt(isbn13=isbn13)
        selection = self._select(attempt)
        if selection is None:
            logger.info("No catalog knows ISBN %s", isbn13)
            return BookRecord(isbn13=isbn13, title=UNRESOLVED_TITLE.format(isbn=isbn13))

        if selection.source is Source.PRIMARY:
            record = self._record_from_primary(isbn13, selection)
        else:
            record = self._record_from_secondary(isbn13, selection)

        cover_url = self._covers.resolve(isbn13)
        if cover_url:
            record = replace(record, cover_image_url=cover_url)
        return normalize_record(record)

    def _select(self, attempt: LookupAttempt) -> _Selection | None:
        """Pick the catalog hit a record will be built from."""
        hit = self._search_primary(attempt, attempt.isbn13)
        if hit is not None:
            return _Selection(self._primary, Source.PRIMARY, MatchQuality.EXACT, hit)

        attempt.tried.append(self._secondary.name)
        secondary_hit = self._secondary.search_by_isbn(attempt.isbn13)
        if secondary_hit is None:
            return None

        attempt.alternate_isbns = secondary_hit.alternate_isbns
        if self._primary is not None:
            logger.info(
                "Cross-referencing %d alternate ISBN(s) against %s",
                len(attempt.alternate_isbns),
                self._primary.name,
            )
        while attempt.alternate_index < len(attempt.alternate_isbns):
            alternate = attempt.alternate_isbns[attempt.alternate_index]
            hit = self._search_primary(attempt, alternate)
            if hit is not None:
                logger.info("Nearest match for %s via alternate ISBN %s", attempt.isbn13, alternate)
                return _Selection(self._primary, Source.PRIMARY, MatchQuality.NEAREST, hit)
            attempt.alternate_index += 1

        logger.info("Using %s record %s", self._secondary.name, secondary_hit.source_id)
        return _Selection(self._secondary, Source.SECONDARY, MatchQuality.EXACT, secondary_hit)

    def _search_primary(self, attempt: LookupAttempt, isbn13: str) -> CatalogHit | None:
        if self._primary is None:
            return None
        if self._primary.name not in attempt.tried:
            attempt.tried.append(self._primary.name)
        return self._primary.search_by_isbn(isbn13)

    def _record_from_primary(self, isbn13: str, selection: _Selection) -> BookRecord:
        detail = selection.catalog.fetch_detail(selection.hit.source_id)
        return BookRecord(
            isbn13=isbn13,
            title=build_title(detail.get("title", ""), detail.get("subtitle")),
            source=selection.source,
            source_id=selection.hit.source_id,
            match_quality=selection.match_quality,
            author=parse_authors(detail),
            publish_year=parse_publish_year(detail.get("publishedDate")),
            page_count=_as_int(detail.get("pageCount")),
            raw_detail=detail,
        )

    def _record_from_secondary(self, isbn13: str, selection: _Selection) -> BookRecord:
        doc = selection.hit.detail
        return BookRecord(
            isbn13=isbn13,
            title=build_title(doc.get("title", ""), doc.get("subtitle")),
            source=selection.source,
            source_id=selection.hit.source_id,
            match_quality=selection.match_quality,
            author=", ".join(doc.get("author_name") or []),
            publish_year=_as_int(doc.get("first_publish_year")),
            page_count=_as_int(doc.get("number_of_pages_median")),
            raw_detail=doc,
        )


def _as_int(value: Any) -> int | None:
    """Coerce a catalog number to int; missing or unparsable values are None."""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def build_engine(settings: Settings, http_client: HttpClient | None = None) -> ReconciliationEngine:
    """Wire a ReconciliationEngine from settings.

    The primary catalog is only constructed when an API key is configured.
    One HTTP client is shared by both catalogs and the cover resolver.
    """
    if http_client is None:
        http_client = BookfetchHttpClient(
            min_request_interval=settings.min_request_interval,
            max_retries=settings.max_retries,
            retry_delay=settings.retry_delay,
            timeout=settings.timeout,
        )
    primary = None
    if settings.google_books_key:
        primary = GoogleBooksCatalog(http_client, settings.google_books_key)
    else:
        logger.info("No Google Books API key configured; using Open Library only")
    return ReconciliationEngine(
        primary=primary,
        secondary=OpenLibraryCatalog(http_client),
        covers=CoverResolver(http_client),
    )
