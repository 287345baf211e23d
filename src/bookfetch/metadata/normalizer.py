# ABOUTME: Title building and record normalization for reconciled book records.
# ABOUTME: Normalization drops empty values so downstream consumers only see real data.

from dataclasses import fields, replace

from bookfetch.metadata.types import BookRecord


def build_title(title: str, subtitle: str | None = None) -> str:
    """Join title and subtitle as "<title>: <subtitle>".

    The title is returned unchanged when the subtitle is missing or empty.
    """
    if subtitle:
        return f"{title}: {subtitle}"
    return title


def normalize_record(record: BookRecord) -> BookRecord:
    """Return a copy of record with every empty-string field made absent.

    None and "" are treated alike. Idempotent: normalizing a normalized
    record returns an equal record.
    """
    changes = {
        f.name: None
        for f in fields(record)
        if getattr(record, f.name) == "" and f.default is None
    }
    if not changes:
        return record
    return replace(record, **changes)
