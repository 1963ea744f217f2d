"""Append-only side log of record and I/O errors.

Each entry is one line:

    [2024-05-01 13:45:10] ERROR: <context> - <ErrorType>: <message>

Writing is best-effort. A failure to write the side log is reported on
the structured log and never reaches the caller.
"""

from datetime import datetime
from pathlib import Path
from typing import Union

from library_tracker_common import get_logger
from library_tracker_contracts import RunStatistics

logger = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_entry(context: str, error: BaseException, when: datetime) -> str:
    """Render one side-log line (without newline)."""
    return f"[{when.strftime(TIMESTAMP_FORMAT)}] ERROR: {context} - {type(error).__name__}: {error}"


class ErrorLog:
    """Error side log bound to one run's statistics."""

    def __init__(self, path: Union[str, Path], stats: RunStatistics):
        self.path = Path(path)
        self.stats = stats

    def log_error(self, context: str, error: BaseException) -> None:
        """Count the error and append it to the side log."""
        self.stats.error_count += 1
        entry = format_entry(context, error, datetime.now())

        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(entry + "\n")
        except OSError as e:
            logger.warning("error_log_write_failed", path=str(self.path), error=str(e))
