"""Structured logging setup (structlog).

Diagnostics go to stderr so stdout carries only the catalog report.
The user-facing ``errors.log`` side file is written separately by
``library_tracker_storage.error_log``.
"""

import logging
import sys
from typing import Any

import structlog


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # sys.stderr is looked up per call; it may be swapped after configure_logging()
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = "WARNING", log_format: str = "console") -> None:
    """Configure structlog for the current process.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "console" for human-readable lines, "json" for one JSON object per line
    """
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the given module name."""
    return structlog.get_logger(logger_name=name)
