"""Shared fixtures for ndrank tests."""

import pytest

from ndrank.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from cached settings and ambient NDRANK_* variables."""
    for name in ("NDRANK_MAX_WORKERS", "NDRANK_PARALLEL_MIN_SLICES", "NDRANK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
