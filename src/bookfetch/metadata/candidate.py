# ABOUTME: CatalogHit is the first candidate returned by a catalog ISBN search.
# ABOUTME: Carries the source id, the candidate's own payload, and alternate ISBN-13s.

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CatalogHit:
    """A catalog's answer to an ISBN search.

    ``detail`` is whatever the search response said about the candidate, which
    may be partial (the primary catalog needs a follow-up detail request).
    ``alternate_isbns`` lists other ISBN-13s for the same work, in catalog order.
    """

    source: str
    source_id: str
    detail: dict[str, Any] = field(default_factory=dict)
    alternate_isbns: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.source_id:
            msg = f"source_id must be non-empty for a {self.source} hit"
            raise ValueError(msg)
