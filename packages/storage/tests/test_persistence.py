"""Tests for save_catalog and the error side log."""

import re
from datetime import datetime
from unittest.mock import patch

import pytest

from library_tracker_common import CatalogIOError, InvalidISBNError, MalformedEntryError
from library_tracker_contracts import Book, RunStatistics
from library_tracker_storage import ErrorLog, format_entry, load_catalog, save_catalog

pytestmark = pytest.mark.unit

ENTRY_PATTERN = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] ERROR: .+ - .+$")


class TestSaveCatalog:
    """Tests for save_catalog()."""

    def test_overwrites_file_in_order(self, tmp_path):
        path = tmp_path / "books.txt"
        path.write_text("stale content\nmore stale content\n", encoding="utf-8")
        books = [
            Book(title="Apple", author="A", isbn="1111111111111", copies=1),
            Book(title="Mango", author="B", isbn="2222222222222", copies=0),
        ]

        written = save_catalog(path, books)

        assert written == 2
        assert path.read_text(encoding="utf-8") == (
            "Apple:A:1111111111111:1\nMango:B:2222222222222:0\n"
        )

    def test_saved_file_reloads_identically(self, tmp_path):
        path = tmp_path / "books.txt"
        books = [Book(title="Café Society", author="Zoë", isbn="1111111111111", copies=3)]

        save_catalog(path, books)

        assert load_catalog(path).books == books

    def test_write_failure_raises_catalog_io_error(self, tmp_path):
        with pytest.raises(CatalogIOError):
            save_catalog(tmp_path / "missing-dir" / "books.txt", [])


class TestErrorLog:
    """Tests for ErrorLog."""

    def test_format_entry(self):
        entry = format_entry(
            "bad line",
            InvalidISBNError("ISBN must be exactly 13 digits"),
            datetime(2024, 5, 1, 13, 45, 10),
        )

        assert entry == (
            "[2024-05-01 13:45:10] ERROR: bad line - InvalidISBNError: ISBN must be exactly 13 digits"
        )

    def test_appends_and_counts(self, tmp_path):
        path = tmp_path / "errors.log"
        path.write_text("[2024-01-01 00:00:00] ERROR: earlier run - X: y\n", encoding="utf-8")
        stats = RunStatistics()
        log = ErrorLog(path, stats)

        log.log_error("line one", MalformedEntryError("Expected 4 fields, got 1"))
        log.log_error("line two", InvalidISBNError("bad"))

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 3
        assert lines[0].endswith("earlier run - X: y")
        assert all(ENTRY_PATTERN.match(line) for line in lines[1:])
        assert "ERROR: line one - MalformedEntryError: Expected 4 fields, got 1" in lines[1]
        assert stats.error_count == 2

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "errors.log"

        ErrorLog(path, RunStatistics()).log_error("ctx", ValueError("boom"))

        assert path.exists()

    def test_write_failure_is_swallowed_but_counted(self, tmp_path):
        stats = RunStatistics()
        log = ErrorLog(tmp_path / "no-such-dir" / "errors.log", stats)

        result = log.log_error("ctx", ValueError("boom"))

        assert result is None
        assert stats.error_count == 1

    def test_permission_error_is_swallowed(self, tmp_path):
        stats = RunStatistics()
        log = ErrorLog(tmp_path / "errors.log", stats)

        with patch("pathlib.Path.open", side_effect=PermissionError("denied")):
            log.log_error("ctx", ValueError("boom"))

        assert stats.error_count == 1
