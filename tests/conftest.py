# tests/conftest.py

"""Shared pytest fixtures for all catalog_admin tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_state(tmp_path: Path) -> Generator[Path, None, None]:
    """Point the session state file at a per-test temp location."""
    state_path = tmp_path / "state" / "session.json"
    with patch.object(Settings, "STATE_PATH", state_path):
        yield state_path
