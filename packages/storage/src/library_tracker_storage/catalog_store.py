"""CatalogStore - in-memory ordered collection of books.

Provides:
- Insertion (append, order preserved)
- Case-insensitive title sort (stable)
- Title substring search and exact ISBN search
- Duplicate ISBN detection
"""

from collections import Counter
from operator import attrgetter
from typing import Iterable, Iterator, Optional

from library_tracker_contracts import Book


class CatalogStore:
    """Ordered catalog for one run.

    Order is insertion order until sort_by_title() is called.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: list[Book] = list(books or [])

    @property
    def books(self) -> list[Book]:
        """Snapshot of the catalog in current order."""
        return list(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def insert(self, book: Book) -> None:
        self._books.append(book)

    def sort_by_title(self) -> None:
        """Stable sort by case-insensitive title."""
        self._books.sort(key=attrgetter("sort_key"))

    def search_by_title(self, keyword: str) -> list[Book]:
        """Return every book whose title contains keyword, ignoring case.

        An empty keyword matches every book.
        """
        needle = keyword.lower()
        return [b for b in self._books if needle in b.sort_key]

    def search_by_isbn(self, isbn: str) -> list[Book]:
        """Return every book with exactly this ISBN, in catalog order."""
        return [b for b in self._books if b.isbn == isbn]

    def duplicate_isbns(self) -> dict[str, int]:
        """Map each ISBN held by more than one book to its record count."""
        counts = Counter(b.isbn for b in self._books)
        return {isbn: n for isbn, n in counts.items() if n > 1}
