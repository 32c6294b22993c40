"""Tests for JSONL logging."""

import json
from pathlib import Path

import pytest

from efemerides.logging import JSONLLogger, LogEntry, configure_logger, get_logger


@pytest.fixture
def logger(tmp_path: Path) -> JSONLLogger:
    return JSONLLogger(log_dir=tmp_path / "jsonl")


def read_entries(logger: JSONLLogger) -> list[dict]:
    with open(logger.log_path, encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def test_log_entry_to_dict():
    """Test LogEntry excludes None values."""
    entry = LogEntry(timestamp="2024-01-01T00:00:00Z", event="test")
    data = entry.to_dict()

    assert data == {"timestamp": "2024-01-01T00:00:00Z", "event": "test"}


def test_log_creates_file(logger: JSONLLogger):
    logger.log("test_event")
    assert logger.log_path.exists()


def test_log_writes_jsonl(logger: JSONLLogger):
    logger.log("event1", fecha="2024-01-01")
    logger.log("event2", count=3)

    entries = read_entries(logger)
    assert [e["event"] for e in entries] == ["event1", "event2"]
    assert entries[0]["fecha"] == "2024-01-01"
    assert entries[1]["count"] == 3


def test_log_fetch_success(logger: JSONLLogger):
    logger.log_fetch("2024-01-01", duration_ms=12.5, status_code=200, titulo="T")

    entry = read_entries(logger)[0]
    assert entry["event"] == "fetch"
    assert entry["status_code"] == 200
    assert entry["duration_ms"] == 12.5
    assert "error" not in entry


def test_log_fetch_error(logger: JSONLLogger):
    logger.log_fetch("2024-01-01", duration_ms=1.0, error="Error de conexión o datos: x")

    entry = read_entries(logger)[0]
    assert entry["event"] == "fetch_error"
    assert entry["error"] == "Error de conexión o datos: x"


def test_log_favorites(logger: JSONLLogger):
    logger.log_favorites("favorite_toggled", 2, titulo="Á", added=True)

    entry = read_entries(logger)[0]
    assert entry["count"] == 2
    assert entry["titulo"] == "Á"
    assert entry["extra"] == {"added": True}


def test_set_session_id(logger: JSONLLogger):
    logger.set_session_id("cli-42")
    logger.log("event1")
    logger.log("event2")

    assert all(e["session_id"] == "cli-42" for e in read_entries(logger))


def test_rotation(tmp_path: Path):
    """Test log rotation when max size is exceeded."""
    logger = JSONLLogger(log_dir=tmp_path, max_size_mb=0.001)

    for i in range(100):
        logger.log(f"event_{i}", data="x" * 100)

    assert len(list(tmp_path.glob("logs*.jsonl"))) >= 2


def test_configure_replaces_global(tmp_path: Path):
    configured = configure_logger(tmp_path / "other")
    assert get_logger() is configured
    assert configured.log_dir == tmp_path / "other"
