"""Shared fixtures."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def snapshot_path() -> Path:
    return FIXTURES / "snapshot.json"
