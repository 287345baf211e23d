# ABOUTME: Metadata package for catalog lookups, reconciliation, and record representation.
# ABOUTME: Exports the BookRecord type and the reconciliation engine used throughout bookfetch.

from bookfetch.metadata.candidate import CatalogHit
from bookfetch.metadata.normalizer import build_title, normalize_record
from bookfetch.metadata.provider import CatalogClient
from bookfetch.metadata.reconcile import ReconciliationEngine, build_engine
from bookfetch.metadata.types import BookRecord, MatchQuality, Source

__all__ = [
    "BookRecord",
    "CatalogClient",
    "CatalogHit",
    "MatchQuality",
    "ReconciliationEngine",
    "Source",
    "build_engine",
    "build_title",
    "normalize_record",
]
