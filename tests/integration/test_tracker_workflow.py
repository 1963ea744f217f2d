"""End-to-end tracker runs through ``python -m library_tracker_cli``.

Covers the documented workflow: create on first use, add with resave,
follow-up searches in later runs, and error logging across runs.
"""

import pytest

pytestmark = pytest.mark.integration

FAREWELL = "Thank you for using the Library Book Tracker."


def test_add_then_search_across_runs(run_cli, seeded_catalog, tmp_path):
    added = run_cli(str(seeded_catalog), "zebra:Author:1234567890123:2")

    assert added.returncode == 0
    assert "Books Added: 1" in added.stdout
    assert seeded_catalog.read_text(encoding="utf-8") == (
        "Apple:Alice Author:1111111111111:3\n"
        "Mango:Bob Writer:2222222222222:1\n"
        "zebra:Author:1234567890123:2\n"
    )

    found = run_cli(str(seeded_catalog), "1234567890123")

    assert found.returncode == 0
    assert "zebra" in found.stdout
    assert "Records Processed: 3" in found.stdout
    assert "Search Results: 1" in found.stdout
    assert not (tmp_path / "errors.log").exists()


def test_first_run_creates_catalog(run_cli, tmp_path):
    result = run_cli("fresh.txt", "anything")

    assert result.returncode == 0
    assert (tmp_path / "fresh.txt").exists()
    assert "Records Processed: 0" in result.stdout
    assert "Errors Logged: 0" in result.stdout
    assert result.stdout.rstrip().endswith(FAREWELL)


def test_error_log_accumulates_across_runs(run_cli, tmp_path):
    catalog = tmp_path / "catalog.txt"
    catalog.write_text("broken line\nApple:A:1111111111111:1\n", encoding="utf-8")

    run_cli(str(catalog), "apple")
    run_cli(str(catalog), "apple")

    lines = (tmp_path / "errors.log").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert all("ERROR: broken line - MalformedEntryError" in line for line in lines)


def test_usage_error_exit_code(run_cli, tmp_path):
    result = run_cli()

    assert result.returncode == 1
    assert "Usage: library-tracker" in result.stderr
    assert "Errors Logged: 1" in result.stdout
    assert result.stdout.rstrip().endswith(FAREWELL)
    assert "ERROR: Main - UsageError" in (tmp_path / "errors.log").read_text(encoding="utf-8")


def test_stdout_is_free_of_diagnostics(run_cli, tmp_path):
    catalog = tmp_path / "catalog.txt"
    catalog.write_text(
        "Dup One:A:1111111111111:1\nDup Two:B:1111111111111:1\n",
        encoding="utf-8",
    )

    result = run_cli(str(catalog), "1111111111111")

    assert "Search Results: 1" in result.stdout
    assert "Dup One" in result.stdout
    assert "Dup Two" not in result.stdout
    assert "duplicate_isbn" not in result.stdout
    assert "duplicate_isbn" in result.stderr
