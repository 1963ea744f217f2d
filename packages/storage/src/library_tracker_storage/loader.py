"""Catalog loader - reads the backing file into validated books.

Loading is fail-soft: a malformed or invalid line is recorded as a
failure and the load moves on. The caller routes failures to the
error log.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from library_tracker_common import CatalogError, CatalogIOError, get_logger
from library_tracker_contracts import Book

from library_tracker_storage.records import parse_book
from library_tracker_storage.serializer import deserialize

logger = get_logger(__name__)


@dataclass
class LineResult:
    """Outcome of parsing one catalog line: a book or an error, never both."""

    line: str
    book: Optional[Book] = None
    error: Optional[CatalogError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class LoadResult:
    """Books loaded in file order plus the (context, error) pairs that were skipped."""

    books: list[Book] = field(default_factory=list)
    failures: list[tuple[str, CatalogError]] = field(default_factory=list)

    @property
    def valid_count(self) -> int:
        return len(self.books)


def parse_line(line: str) -> LineResult:
    """Deserialize and validate a single non-blank catalog line."""
    try:
        book = parse_book(deserialize(line))
    except CatalogError as e:
        return LineResult(line=line, error=e)
    return LineResult(line=line, book=book)


def load_catalog(path: Union[str, Path]) -> LoadResult:
    """Load every valid record from the catalog file.

    A missing file is created empty. Blank lines are skipped without
    being counted. If the file cannot be created or read, the result
    keeps whatever parsed before the fault and carries one
    CatalogIOError failure keyed by the path.

    Args:
        path: Backing catalog file

    Returns:
        LoadResult with books in file order
    """
    path = Path(path)
    result = LoadResult()

    if not path.exists():
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        except OSError as e:
            logger.error("catalog_create_failed", path=str(path), error=str(e))
            result.failures.append((str(path), CatalogIOError(f"Cannot create catalog file: {e}")))
            return result
        logger.info("catalog_created", path=str(path))
        return result

    try:
        with path.open("r", encoding="utf-8") as f:
            for raw_line in f:
                line = raw_line.rstrip("\n")
                if not line.strip():
                    continue

                parsed = parse_line(line)
                if parsed.ok:
                    result.books.append(parsed.book)
                else:
                    logger.debug("catalog_line_rejected", line=line, error=str(parsed.error))
                    result.failures.append((line, parsed.error))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            "catalog_read_failed",
            path=str(path),
            loaded=result.valid_count,
            error=str(e),
        )
        result.failures.append((str(path), CatalogIOError(f"Cannot read catalog file: {e}")))

    logger.info(
        "catalog_loaded",
        path=str(path),
        valid=result.valid_count,
        rejected=len(result.failures),
    )
    return result
