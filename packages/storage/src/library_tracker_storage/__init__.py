"""Library Tracker Storage - flat-file catalog layer.

This package provides:
- Line serializer (title:author:isbn:copies)
- Record validation (parse_book)
- Fail-soft catalog loader
- CatalogStore (in-memory ordered catalog with search)
- Whole-file persister
- Append-only error side log

Exclusive owner of the catalog and error log files.
"""

from library_tracker_storage.catalog_store import CatalogStore
from library_tracker_storage.error_log import ErrorLog, format_entry
from library_tracker_storage.loader import LineResult, LoadResult, load_catalog, parse_line
from library_tracker_storage.persister import save_catalog
from library_tracker_storage.records import parse_book, parse_copies
from library_tracker_storage.serializer import (
    FIELD_COUNT,
    FIELD_DELIMITER,
    deserialize,
    serialize,
    split_fields,
)

__version__ = "1.0.0"

__all__ = [
    # Serializer
    "FIELD_COUNT",
    "FIELD_DELIMITER",
    "serialize",
    "deserialize",
    "split_fields",
    # Records
    "parse_book",
    "parse_copies",
    # Loader
    "LineResult",
    "LoadResult",
    "load_catalog",
    "parse_line",
    # Store
    "CatalogStore",
    # Persistence
    "save_catalog",
    # Error log
    "ErrorLog",
    "format_entry",
]
