"""Fixed-width report output for the tracker CLI."""

import typer

from library_tracker_contracts import Book, RunStatistics

from library_tracker_cli.dispatcher import OperationResult

RULE = "-" * 75
FAREWELL = "Thank you for using the Library Book Tracker."


def print_header() -> None:
    typer.echo(f"{'Title':<30} {'Author':<20} {'ISBN':<15} {'Copies':>5}")
    typer.echo(RULE)


def print_row(book: Book) -> None:
    typer.echo(f"{book.title:<30} {book.author:<20} {book.isbn:<15} {book.copies:>5d}")


def print_results(result: OperationResult) -> None:
    """Print the table for a search or a successful add."""
    if not result.show_header:
        return
    print_header()
    for book in result.books:
        print_row(book)


def print_statistics(stats: RunStatistics) -> None:
    typer.echo()
    typer.echo("--- FINAL STATISTICS ---")
    typer.echo(f"Records Processed: {stats.valid_records}")
    typer.echo(f"Search Results: {stats.search_results}")
    typer.echo(f"Books Added: {stats.books_added}")
    typer.echo(f"Errors Logged: {stats.error_count}")


def print_farewell() -> None:
    typer.echo()
    typer.echo(FAREWELL)
