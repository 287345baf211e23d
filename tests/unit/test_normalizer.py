# ABOUTME: Unit tests for title building and record normalization.
# ABOUTME: Validates subtitle joining, empty-field removal, and idempotency.

import pytest

from bookfetch.metadata import BookRecord, MatchQuality, Source
from bookfetch.metadata.normalizer import build_title, normalize_record


class TestBuildTitle:
    """Tests for build_title."""

    def test_with_subtitle(self) -> None:
        assert build_title("Example", "A Tale") == "Example: A Tale"

    @pytest.mark.parametrize("subtitle", [None, ""])
    def test_without_subtitle(self, subtitle: str | None) -> None:
        assert build_title("Dune", subtitle) == "Dune"

    def test_title_unchanged(self) -> None:
        """The title is not trimmed or otherwise altered."""
        assert build_title("  Spaced  ") == "  Spaced  "


class TestNormalizeRecord:
    """Tests for normalize_record."""

    def test_empty_strings_become_absent(self) -> None:
        record = BookRecord(
            isbn13="9781517004446",
            title="Example",
            source=Source.PRIMARY,
            source_id="abc123",
            match_quality=MatchQuality.EXACT,
            author="",
            cover_image_url="",
        )
        normalized = normalize_record(record)
        assert normalized.author is None
        assert normalized.cover_image_url is None
        assert normalized.source_id == "abc123"

    def test_no_empty_strings_in_output(self) -> None:
        record = BookRecord(isbn13="9781517004446", title="Example", author="", source_id="")
        values = normalize_record(record).to_dict().values()
        assert "" not in values

    def test_clean_record_is_returned_as_is(self) -> None:
        record = BookRecord(isbn13="9781517004446", title="Example", author="A. Writer")
        assert normalize_record(record) is record

    def test_zero_is_kept(self) -> None:
        """Only empty strings are dropped; a zero page count is data."""
        record = BookRecord(isbn13="9781517004446", title="Example", page_count=0)
        assert normalize_record(record).page_count == 0

    def test_idempotent(self) -> None:
        record = BookRecord(
            isbn13="9781517004446",
            title="Example",
            author="",
            publish_year=2015,
            raw_detail={"title": "Example"},
        )
        once = normalize_record(record)
        assert normalize_record(once) == once
        assert normalize_record(once).to_dict() == once.to_dict()
