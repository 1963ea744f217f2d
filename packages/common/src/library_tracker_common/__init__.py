"""Library Tracker Common - errors, configuration and logging shared by all packages."""

from library_tracker_common.config import DEFAULT_ERROR_LOG_PATH, Settings, get_settings
from library_tracker_common.errors import (
    CatalogError,
    CatalogIOError,
    ConfigurationError,
    InvalidCopyCountError,
    InvalidISBNError,
    LibraryTrackerError,
    MalformedEntryError,
    RecordValidationError,
    UsageError,
)
from library_tracker_common.logging_config import configure_logging, get_logger

__version__ = "1.0.0"

__all__ = [
    # Errors
    "LibraryTrackerError",
    "UsageError",
    "ConfigurationError",
    "CatalogError",
    "MalformedEntryError",
    "RecordValidationError",
    "InvalidISBNError",
    "InvalidCopyCountError",
    "CatalogIOError",
    # Config
    "DEFAULT_ERROR_LOG_PATH",
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
]
