# ABOUTME: Batch lookup pipeline that reconciles several ISBNs one after another.
# ABOUTME: A failing ISBN is recorded on its outcome and does not stop the batch.

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from bookfetch.metadata.http import MetadataFetchError
from bookfetch.metadata.reconcile import ReconciliationEngine
from bookfetch.metadata.types import BookRecord

logger = logging.getLogger(__name__)


@dataclass
class LookupOutcome:
    """Result of reconciling one ISBN: a record, or the error that stopped it."""

    isbn: str
    record: BookRecord | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.record is not None


@dataclass
class BatchResult:
    """Outcomes of a batch, in input order."""

    outcomes: list[LookupOutcome] = field(default_factory=list)

    @property
    def records(self) -> list[BookRecord]:
        return [o.record for o in self.outcomes if o.record is not None]

    @property
    def errors(self) -> int:
        return sum(1 for o in self.outcomes if not o.ok)


# Called after each ISBN with its outcome
ProgressFn = Callable[[LookupOutcome], None]


def lookup_many(
    engine: ReconciliationEngine,
    isbns: Iterable[str],
    *,
    on_outcome: ProgressFn | None = None,
) -> BatchResult:
    """Reconcile each ISBN in turn, skipping repeats.

    Args:
        engine: The engine to run each lookup through.
        isbns: ISBN-13 digit strings; duplicates after the first are ignored.
        on_outcome: Optional callback invoked after each lookup.

    Returns:
        BatchResult with one outcome per distinct ISBN.
    """
    result = BatchResult()
    seen: set[str] = set()
    for isbn in isbns:
        if isbn in seen:
            continue
        seen.add(isbn)

        try:
            outcome = LookupOutcome(isbn=isbn, record=engine.lookup(isbn))
        except (MetadataFetchError, ValueError) as exc:
            logger.error("Lookup failed for %s: %s", isbn, exc)
            outcome = LookupOutcome(isbn=isbn, error=str(exc))

        result.outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)
    return result
