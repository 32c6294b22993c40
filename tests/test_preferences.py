"""Tests for PreferencesStore."""

import json
from pathlib import Path

import pytest

from efemerides.storage import PreferencesStore


def test_missing_key_returns_none(preferences: PreferencesStore):
    assert preferences.get_string("nope") is None
    assert preferences.contains("nope") is False


def test_set_creates_file_and_parents(preferences: PreferencesStore):
    preferences.set_string("k", "v")

    assert preferences.path.exists()
    with open(preferences.path, encoding="utf-8") as f:
        assert json.load(f) == {"k": "v"}


def test_values_survive_new_instance(preferences: PreferencesStore):
    preferences.set_string("k", "ñandú")

    reopened = PreferencesStore(preferences.path)
    assert reopened.get_string("k") == "ñandú"


def test_remove(preferences: PreferencesStore):
    preferences.set_string("k", "v")

    assert preferences.remove("k") is True
    assert preferences.remove("k") is False
    assert PreferencesStore(preferences.path).get_string("k") is None


def test_corrupt_file_treated_as_empty(tmp_path: Path):
    path = tmp_path / "preferences.json"
    path.write_text("{not json", encoding="utf-8")

    store = PreferencesStore(path)
    assert store.get_string("k") is None

    store.set_string("k", "v")
    assert PreferencesStore(path).get_string("k") == "v"


def test_non_object_file_treated_as_empty(tmp_path: Path):
    path = tmp_path / "preferences.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert PreferencesStore(path).contains("0") is False


def test_failed_write_keeps_cache_and_disk(preferences: PreferencesStore, monkeypatch):
    preferences.set_string("k", "v1")

    def fail_replace(self, target):
        raise OSError("disk full")

    monkeypatch.setattr(Path, "replace", fail_replace)

    with pytest.raises(OSError):
        preferences.set_string("k", "v2")
    with pytest.raises(OSError):
        preferences.remove("k")

    monkeypatch.undo()
    assert preferences.get_string("k") == "v1"
    assert PreferencesStore(preferences.path).get_string("k") == "v1"
    assert list(preferences.path.parent.glob("*.tmp")) == []
