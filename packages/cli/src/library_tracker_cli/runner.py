"""One tracker run: load, dispatch, report.

Phases run strictly in sequence; the catalog is fully loaded before
the operation touches it.
"""

from pathlib import Path

from library_tracker_common import get_logger
from library_tracker_contracts import RunStatistics
from library_tracker_storage import CatalogStore, ErrorLog, load_catalog

from library_tracker_cli.dispatcher import (
    OperationResult,
    TrackerContext,
    classify,
    dispatch,
)
from library_tracker_cli.report import print_results

logger = get_logger(__name__)


def load_store(catalog_path: Path, stats: RunStatistics, error_log: ErrorLog) -> CatalogStore:
    """Load the catalog file, log every rejected line, and build the store."""
    loaded = load_catalog(catalog_path)

    for context, error in loaded.failures:
        error_log.log_error(context, error)
    stats.valid_records = loaded.valid_count

    store = CatalogStore(loaded.books)
    for isbn, count in store.duplicate_isbns().items():
        logger.warning("duplicate_isbn_in_catalog", isbn=isbn, records=count)

    return store


def run_tracker(
    catalog_path: Path,
    operation_text: str,
    stats: RunStatistics,
    error_log: ErrorLog,
) -> OperationResult:
    """Run exactly one operation against the catalog and print its table.

    Args:
        catalog_path: Backing catalog file (created if missing)
        operation_text: Title keyword, 13-digit ISBN, or title:author:isbn:copies
        stats: Run counters, updated in place
        error_log: Side log bound to the same stats

    Returns:
        The operation result that was printed
    """
    store = load_store(catalog_path, stats, error_log)

    operation = classify(operation_text)
    logger.info("operation_classified", kind=operation.kind.value)

    ctx = TrackerContext(
        catalog_path=catalog_path,
        store=store,
        stats=stats,
        error_log=error_log,
    )
    result = dispatch(operation, ctx)
    print_results(result)
    return result
