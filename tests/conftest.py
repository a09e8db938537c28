"""Pytest configuration for fpkit tests.

This file is automatically loaded by pytest before running tests.
It puts the project root on the Python path so that ``import fpkit`` works
without installing the package.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fpkit.config import reload_settings  # noqa: E402


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear fpkit environment variables and return a loader for new settings."""
    for name in ("FPKIT_LOG_LEVEL", "FPKIT_DEBUG", "FPKIT_COLOR"):
        monkeypatch.delenv(name, raising=False)
    yield reload_settings
    monkeypatch.undo()
    reload_settings()
