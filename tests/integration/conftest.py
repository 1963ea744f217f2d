"""Shared fixtures for integration tests.

Runs the installed ``library_tracker_cli`` module in a subprocess against
real files in a temporary directory. No mocks.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest


@pytest.fixture
def run_cli(tmp_path):
    """Return a callable that runs the tracker with tmp_path as working directory."""
    env = {k: v for k, v in os.environ.items() if k not in ("ERROR_LOG_PATH", "LOG_LEVEL", "LOG_FORMAT")}

    def _run(*args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, "-m", "library_tracker_cli", *args],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )

    return _run


@pytest.fixture
def seeded_catalog(tmp_path) -> Path:
    """Catalog holding Apple and Mango in that order."""
    path = tmp_path / "catalog.txt"
    path.write_text(
        "Apple:Alice Author:1111111111111:3\nMango:Bob Writer:2222222222222:1\n",
        encoding="utf-8",
    )
    return path
