"""Pytest configuration for hslconv tests.

This file is automatically loaded by pytest before running tests.
It configures the Python path so that the hslconv package can be imported
from a source checkout, and isolates tests from HSLCONV_* environment
variables set in the calling shell.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to Python path
# This allows `from hslconv.utils import ...` to work without installing
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

from hslconv.config.settings import (  # noqa: E402
    ENV_DEBUG,
    ENV_PREPEND_POUND,
    reset_settings,
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings."""
    for name in (ENV_PREPEND_POUND, ENV_DEBUG):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def debug_mode(monkeypatch):
    """Enable debug logging for the duration of a test."""
    monkeypatch.setenv(ENV_DEBUG, "1")
    reset_settings()
