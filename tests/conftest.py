"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from robogeom.config import get_settings


@pytest.fixture
def clean_settings(monkeypatch):
    """Clear ROBOGEOM_* variables and the cached settings around a test."""
    for name in ("ROBOGEOM_REL_TOL", "ROBOGEOM_ABS_TOL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
