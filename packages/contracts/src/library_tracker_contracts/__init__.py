"""Library Tracker Contracts - Pure Pydantic schemas.

This package contains ONLY Pydantic schemas and their field validators.
Dependencies: pydantic only (no logging, no file I/O).
"""

from library_tracker_contracts.models import (
    ISBN_LENGTH,
    Book,
    RunStatistics,
    is_isbn13,
)

__version__ = "1.0.0"

__all__ = [
    "Book",
    "RunStatistics",
    "ISBN_LENGTH",
    "is_isbn13",
]
