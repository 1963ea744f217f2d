"""Library Tracker CLI - Main entry point.

Provides the ``library-tracker`` command-line interface.

Usage:
    library-tracker books.txt "moby"                               # title search
    library-tracker books.txt 9780142437247                        # ISBN search
    library-tracker books.txt "Moby Dick:Herman Melville:9780142437247:3"   # add

Statistics and the farewell line are printed on every run, including
failed ones. Errors go to errors.log (see ERROR_LOG_PATH).
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from library_tracker_common import (
    DEFAULT_ERROR_LOG_PATH,
    ConfigurationError,
    Settings,
    UsageError,
    configure_logging,
    get_logger,
    get_settings,
)
from library_tracker_contracts import RunStatistics
from library_tracker_storage import ErrorLog

from library_tracker_cli.report import print_farewell, print_statistics
from library_tracker_cli.runner import run_tracker

logger = get_logger(__name__)

USAGE = "Usage: library-tracker <catalog-file> <operation>"

app = typer.Typer(
    name="library-tracker",
    help="Search and extend a flat-file book catalog.",
    add_completion=False,
)


def _load_settings() -> Settings:
    """Read settings, turning validation failures into a one-line ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from e


@app.command()
def track(
    catalog_file: Optional[str] = typer.Argument(
        None,
        help="Catalog file, one title:author:isbn:copies record per line (created if missing)",
    ),
    operation: Optional[str] = typer.Argument(
        None,
        help="Title keyword, 13-digit ISBN, or title:author:isbn:copies to add",
    ),
):
    """Run one operation against the catalog and print run statistics.

    Examples:

        library-tracker books.txt dune

        library-tracker books.txt "Dune:Frank Herbert:9780441013593:2"
    """
    configure_logging()

    stats = RunStatistics()
    error_log = ErrorLog(DEFAULT_ERROR_LOG_PATH, stats)
    exit_code = 0

    try:
        settings = _load_settings()
        configure_logging(settings.log_level, settings.log_format)
        error_log = ErrorLog(settings.error_log_path, stats)

        if catalog_file is None or operation is None:
            raise UsageError(USAGE)
        run_tracker(Path(catalog_file), operation, stats, error_log)

    except (UsageError, ConfigurationError) as e:
        error_log.log_error("Main", e)
        typer.echo(str(e), err=True)
        exit_code = 1
    except Exception as e:
        logger.error("run_failed", error=str(e), error_type=type(e).__name__)
        error_log.log_error("Main", e)
        typer.echo(f"Error: {e}", err=True)
        exit_code = 1

    print_statistics(stats)
    print_farewell()

    if exit_code:
        raise typer.Exit(exit_code)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
