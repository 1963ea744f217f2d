"""Line codec for the catalog file.

One record per line: ``title:author:isbn:copies``. Fields may not contain
the delimiter; there is no escaping.
"""

from library_tracker_common import MalformedEntryError
from library_tracker_contracts import Book

FIELD_DELIMITER = ":"
FIELD_COUNT = 4


def serialize(book: Book) -> str:
    """Render a book as a single catalog line (no trailing newline)."""
    return FIELD_DELIMITER.join((book.title, book.author, book.isbn, str(book.copies)))


def split_fields(text: str) -> list[str]:
    """Split on the delimiter, dropping trailing empty fields.

    Examples:
        >>> split_fields("Dune:Frank Herbert:9780441013593:2:")
        ['Dune', 'Frank Herbert', '9780441013593', '2']
        >>> split_fields("a::b")
        ['a', '', 'b']
    """
    parts = text.split(FIELD_DELIMITER)
    while parts and not parts[-1]:
        parts.pop()
    return parts


def deserialize(line: str) -> tuple[str, str, str, str]:
    """Split a catalog line into its four raw fields.

    Args:
        line: Catalog line without its line terminator

    Returns:
        Tuple of (title, author, isbn, copies) strings, unvalidated

    Raises:
        MalformedEntryError: If the line does not have exactly four fields once trailing
            empty fields are dropped
    """
    parts = split_fields(line)
    if len(parts) != FIELD_COUNT:
        raise MalformedEntryError(f"Expected {FIELD_COUNT} fields, got {len(parts)}: {line}")
    title, author, isbn, copies = parts
    return title, author, isbn, copies
