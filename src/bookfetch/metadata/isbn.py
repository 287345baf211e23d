# ABOUTME: ISBN cleaning, validation, and ISBN-10 to ISBN-13 conversion.
# ABOUTME: Keeps ISBNs as digit strings so leading zeros survive.

import re

_NON_ISBN_RE = re.compile(r"[^0-9Xx]")


def clean_isbn(raw: str) -> str:
    """Strip hyphens, spaces, and other punctuation from an ISBN.

    A trailing ISBN-10 check character 'X' is kept (upper-cased).
    """
    return _NON_ISBN_RE.sub("", raw).upper()


def is_isbn13(value: str) -> bool:
    """Whether value is exactly 13 digits (no checksum test)."""
    return len(value) == 13 and value.isdigit()


def validate_isbn13(isbn: str) -> bool:
    """Validate ISBN-13 format and checksum."""
    if not is_isbn13(isbn):
        return False
    total = sum(int(isbn[i]) * (1 if i % 2 == 0 else 3) for i in range(12))
    check = (10 - (total % 10)) % 10
    return int(isbn[12]) == check


def validate_isbn10(isbn: str) -> bool:
    """Validate ISBN-10 format and checksum."""
    if len(isbn) != 10:
        return False
    if not isbn[:-1].isdigit() or not (isbn[-1].isdigit() or isbn[-1] == "X"):
        return False
    total = sum((10 - i) * int(isbn[i]) for i in range(9))
    expected = (11 - (total % 11)) % 11
    return isbn[9] == ("X" if expected == 10 else str(expected))


def isbn10_to_isbn13(isbn10: str) -> str | None:
    """Convert a valid ISBN-10 to its 978-prefixed ISBN-13, or None."""
    isbn10 = clean_isbn(isbn10)
    if not validate_isbn10(isbn10):
        return None
    base = "978" + isbn10[:-1]
    total = sum(int(base[i]) * (1 if i % 2 == 0 else 3) for i in range(12))
    return base + str((10 - (total % 10)) % 10)


def to_isbn13(raw: str) -> str | None:
    """Normalize user input to an ISBN-13 digit string.

    Accepts ISBN-13 (any punctuation) or a valid ISBN-10. Returns None for
    anything else. ISBN-13 checksums are not enforced, since catalogs carry
    plenty of misprinted codes that still resolve.
    """
    cleaned = clean_isbn(raw)
    if is_isbn13(cleaned):
        return cleaned
    if len(cleaned) == 10:
        return isbn10_to_isbn13(cleaned)
    return None
