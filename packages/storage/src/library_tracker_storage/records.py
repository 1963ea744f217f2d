"""Record validation: raw fields to Book."""

import re
from typing import Sequence

from library_tracker_common import (
    InvalidCopyCountError,
    InvalidISBNError,
    MalformedEntryError,
)
from library_tracker_contracts import ISBN_LENGTH, Book, is_isbn13

from library_tracker_storage.serializer import FIELD_COUNT

_COPIES_PATTERN = re.compile(r"\+?[0-9]+")


def parse_copies(text: str) -> int:
    """Parse a copy count, tolerating surrounding whitespace.

    Raises:
        InvalidCopyCountError: If text is not a non-negative integer
    """
    stripped = text.strip()
    if not _COPIES_PATTERN.fullmatch(stripped):
        raise InvalidCopyCountError(f"Copy count must be a non-negative integer: {text!r}")
    return int(stripped)


def parse_book(fields: Sequence[str]) -> Book:
    """Build a validated Book from (title, author, isbn, copies).

    The copy count is parsed before the ISBN is checked.

    Raises:
        MalformedEntryError: If fields does not hold exactly four values
        InvalidCopyCountError: If copies is not a non-negative integer
        InvalidISBNError: If isbn is not exactly 13 ASCII digits
    """
    if len(fields) != FIELD_COUNT:
        raise MalformedEntryError(f"Expected {FIELD_COUNT} fields, got {len(fields)}")

    title, author, isbn, copies_text = fields
    copies = parse_copies(copies_text)
    if not is_isbn13(isbn):
        raise InvalidISBNError(f"ISBN must be exactly {ISBN_LENGTH} digits: {isbn!r}")

    return Book(title=title, author=author, isbn=isbn, copies=copies)
