"""Operation classification and dispatch.

A run takes one free-form operation string and performs exactly one of:
- add: ``title:author:isbn:copies`` (exactly four colon-separated parts,
  ignoring trailing empty ones)
- isbn_search: exactly 13 ASCII digits
- title_search: anything else, including the empty string
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable

from library_tracker_common import CatalogError, CatalogIOError, get_logger
from library_tracker_contracts import Book, RunStatistics, is_isbn13
from library_tracker_storage import (
    FIELD_COUNT,
    FIELD_DELIMITER,
    CatalogStore,
    ErrorLog,
    parse_book,
    save_catalog,
    split_fields,
)

logger = get_logger(__name__)


class OperationKind(str, Enum):
    """Operation selected from the operation argument."""

    add = "add"
    isbn_search = "isbn_search"
    title_search = "title_search"


@dataclass
class Operation:
    """Classified operation: raw argument plus add fields when kind is add."""

    kind: OperationKind
    argument: str
    fields: tuple[str, ...] = ()


@dataclass
class OperationResult:
    """Rows to report for one operation.

    show_header is False only when an add was rejected.
    """

    kind: OperationKind
    books: list[Book] = field(default_factory=list)
    show_header: bool = True


@dataclass
class TrackerContext:
    """Everything an operation handler may touch during one run."""

    catalog_path: Path
    store: CatalogStore
    stats: RunStatistics
    error_log: ErrorLog


def classify(argument: str) -> Operation:
    """Classify the operation argument by shape.

    Examples:
        >>> classify("A:B:1234567890123:5").kind
        <OperationKind.add: 'add'>
        >>> classify("1234567890123").kind
        <OperationKind.isbn_search: 'isbn_search'>
        >>> classify("moby").kind
        <OperationKind.title_search: 'title_search'>
    """
    if FIELD_DELIMITER in argument:
        parts = split_fields(argument)
        if len(parts) == FIELD_COUNT:
            return Operation(OperationKind.add, argument, tuple(parts))

    if is_isbn13(argument):
        return Operation(OperationKind.isbn_search, argument)

    return Operation(OperationKind.title_search, argument)


def handle_title_search(operation: Operation, ctx: TrackerContext) -> OperationResult:
    matches = ctx.store.search_by_title(operation.argument)
    ctx.stats.search_results = len(matches)

    logger.info("title_search", keyword=operation.argument, matches=len(matches))
    return OperationResult(operation.kind, matches)


def handle_isbn_search(operation: Operation, ctx: TrackerContext) -> OperationResult:
    """Report the first book with the ISBN, warning when more than one matches."""
    matches = ctx.store.search_by_isbn(operation.argument)
    if len(matches) > 1:
        logger.warning("duplicate_isbn_match", isbn=operation.argument, matches=len(matches))

    found = matches[:1]
    ctx.stats.search_results = len(found)

    logger.info("isbn_search", isbn=operation.argument, matches=len(matches))
    return OperationResult(operation.kind, found)


def handle_add(operation: Operation, ctx: TrackerContext) -> OperationResult:
    """Validate, insert, re-sort and persist a new book.

    A rejected record is logged and leaves the catalog and file untouched.
    A failed save is logged but the in-memory add stands.
    """
    try:
        book = parse_book(operation.fields)
    except CatalogError as e:
        ctx.error_log.log_error(operation.argument, e)
        logger.info("add_rejected", data=operation.argument, error=str(e))
        return OperationResult(operation.kind, show_header=False)

    ctx.store.insert(book)
    ctx.store.sort_by_title()

    try:
        save_catalog(ctx.catalog_path, ctx.store)
    except CatalogIOError as e:
        ctx.error_log.log_error(str(ctx.catalog_path), e)

    ctx.stats.books_added = 1
    logger.info("book_added", title=book.title, isbn=book.isbn, catalog_size=len(ctx.store))
    return OperationResult(operation.kind, [book])


HANDLERS: dict[OperationKind, Callable[[Operation, TrackerContext], OperationResult]] = {
    OperationKind.add: handle_add,
    OperationKind.isbn_search: handle_isbn_search,
    OperationKind.title_search: handle_title_search,
}


def dispatch(operation: Operation, ctx: TrackerContext) -> OperationResult:
    """Run the single handler for operation.kind."""
    return HANDLERS[operation.kind](operation, ctx)
