"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_pan_env(monkeypatch):
    """Keep a developer's PAN_* environment out of the test settings."""
    for name in ("PAN_NULL_SENTINEL", "PAN_LOG_LEVEL", "PAN_MAX_UPLOAD_BYTES", "PAN_CSV_COLUMN"):
        monkeypatch.delenv(name, raising=False)
    yield
