"""Test configuration for CLI tests."""

import pytest
from typer.testing import CliRunner

from library_tracker_common import get_settings


@pytest.fixture
def cli_runner():
    """Typer CLI runner."""
    return CliRunner()


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Run inside an empty directory with default settings and a local errors.log."""
    for var in ("ERROR_LOG_PATH", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def catalog_file(workspace):
    """Catalog with three books in deliberately unsorted order."""
    path = workspace / "books.txt"
    path.write_text(
        "Mango Tree:Ann Lee:1111111111111:2\n"
        "Apple Pie Recipes:Bo Chen:2222222222222:5\n"
        "moby dick:Herman Melville:9780142437247:1\n",
        encoding="utf-8",
    )
    return path
