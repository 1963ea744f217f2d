"""Custom error types for library-tracker.

Record-level errors are recovered locally by the loader and dispatcher.
Only UsageError and ConfigurationError abort a run.
"""


class LibraryTrackerError(Exception):
    """Base exception for all library-tracker errors."""

    pass


class UsageError(LibraryTrackerError):
    """Missing or invalid command-line arguments."""

    pass


class ConfigurationError(LibraryTrackerError):
    """Invalid value in the environment or .env file."""

    pass


class CatalogError(LibraryTrackerError):
    """Error tied to a single catalog record or the catalog file."""

    pass


class MalformedEntryError(CatalogError):
    """Line does not split into exactly four colon-delimited fields."""

    pass


class RecordValidationError(CatalogError):
    """Structurally well-formed record that fails a domain rule."""

    pass


class InvalidISBNError(RecordValidationError):
    """ISBN is not exactly 13 ASCII digits."""

    pass


class InvalidCopyCountError(RecordValidationError):
    """Copy count is not a non-negative integer."""

    pass


class CatalogIOError(CatalogError):
    """Error creating, reading or writing the catalog file.

    On load the catalog degrades to whatever parsed before the fault.
    On save the in-memory catalog keeps the add but the file does not.
    """

    pass
