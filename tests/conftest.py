"""Shared fixtures."""

from pathlib import Path

import pytest

from efemerides.logging import JSONLLogger, configure_logger, reset_logger
from efemerides.storage import PreferencesStore


@pytest.fixture(autouse=True)
def json_logger(tmp_path: Path) -> JSONLLogger:
    """Point the global event log at a temporary directory."""
    logger = configure_logger(tmp_path / "logs")
    yield logger
    reset_logger()


@pytest.fixture
def preferences(tmp_path: Path) -> PreferencesStore:
    return PreferencesStore(tmp_path / "prefs" / "preferences.json")
