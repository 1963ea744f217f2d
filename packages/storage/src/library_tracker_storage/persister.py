"""Persister - rewrites the backing catalog file from memory."""

from pathlib import Path
from typing import Iterable, Union

from library_tracker_common import CatalogIOError, get_logger
from library_tracker_contracts import Book

from library_tracker_storage.serializer import serialize

logger = get_logger(__name__)


def save_catalog(path: Union[str, Path], books: Iterable[Book]) -> int:
    """Overwrite the catalog file with one serialized line per book.

    Args:
        path: Backing catalog file
        books: Books in the order they should be written

    Returns:
        Number of lines written

    Raises:
        CatalogIOError: If the file cannot be written
    """
    path = Path(path)
    lines = [serialize(b) + "\n" for b in books]

    try:
        with path.open("w", encoding="utf-8") as f:
            f.writelines(lines)
    except OSError as e:
        logger.error("catalog_save_failed", path=str(path), error=str(e))
        raise CatalogIOError(f"Cannot write catalog file: {e}") from e

    logger.info("catalog_saved", path=str(path), records=len(lines))
    return len(lines)
