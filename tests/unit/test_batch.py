# ABOUTME: Unit tests for the batch lookup pipeline.
# ABOUTME: Validates ordering, de-duplication, per-ISBN errors, and progress callbacks.

from unittest.mock import MagicMock

from bookfetch.core.batch import LookupOutcome, lookup_many
from bookfetch.metadata import BookRecord
from bookfetch.metadata.http import MetadataFetchError


def _engine(failing: set[str] | None = None) -> MagicMock:
    failing = failing or set()

    def _lookup(isbn: str) -> BookRecord:
        if isbn in failing:
            raise MetadataFetchError(f"HTTP 500 from catalog for {isbn}", status_code=500)
        return BookRecord(isbn13=isbn, title=f"Book {isbn}")

    engine = MagicMock()
    engine.lookup.side_effect = _lookup
    return engine


class TestLookupMany:
    """Tests for lookup_many."""

    def test_outcomes_in_input_order(self) -> None:
        result = lookup_many(_engine(), ["9780000000002", "9780000000019"])
        assert [o.isbn for o in result.outcomes] == ["9780000000002", "9780000000019"]
        assert [r.title for r in result.records] == [
            "Book 9780000000002",
            "Book 9780000000019",
        ]
        assert result.errors == 0

    def test_duplicates_looked_up_once(self) -> None:
        engine = _engine()
        result = lookup_many(engine, ["9780000000002", "9780000000002"])
        assert len(result.outcomes) == 1
        assert engine.lookup.call_count == 1

    def test_failure_does_not_stop_batch(self) -> None:
        engine = _engine(failing={"9780000000002"})
        result = lookup_many(engine, ["9780000000002", "9780000000019"])
        assert result.errors == 1
        failed, succeeded = result.outcomes
        assert failed.ok is False
        assert failed.record is None
        assert "500" in (failed.error or "")
        assert succeeded.ok is True

    def test_invalid_isbn_recorded_as_error(self) -> None:
        engine = MagicMock()
        engine.lookup.side_effect = ValueError("Expected a 13-digit ISBN, got '123'")
        result = lookup_many(engine, ["123"])
        assert result.errors == 1
        assert "13-digit" in (result.outcomes[0].error or "")

    def test_progress_callback(self) -> None:
        seen: list[LookupOutcome] = []
        lookup_many(_engine(), ["9780000000002", "9780000000019"], on_outcome=seen.append)
        assert [o.isbn for o in seen] == ["9780000000002", "9780000000019"]

    def test_empty_input(self) -> None:
        result = lookup_many(_engine(), [])
        assert result.outcomes == []
        assert result.records == []
