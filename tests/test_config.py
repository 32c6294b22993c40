"""Tests for configuration."""

from pathlib import Path

import pytest

from efemerides.config import DEFAULT_API_URL, AppConfig, config_from_env


def test_defaults(monkeypatch):
    monkeypatch.delenv("API_URL", raising=False)
    monkeypatch.delenv("EFEMERIDES_HOME", raising=False)
    monkeypatch.delenv("EFEMERIDES_HTTP_TIMEOUT", raising=False)

    config = config_from_env()

    assert config.api_url == DEFAULT_API_URL == "http://10.0.2.2:8000"
    assert config.http_timeout == 10.0
    assert config.data_dir == Path.home() / ".efemerides"


def test_from_env(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("API_URL", "https://efemerides.example/api/")
    monkeypatch.setenv("EFEMERIDES_HOME", str(tmp_path))
    monkeypatch.setenv("EFEMERIDES_HTTP_TIMEOUT", "2.5")

    config = config_from_env()

    assert config.api_url == "https://efemerides.example/api"
    assert config.preferences_path == tmp_path / "preferences.json"
    assert config.log_dir == tmp_path / "logs"
    assert config.http_timeout == 2.5


def test_empty_api_url_uses_default(monkeypatch):
    monkeypatch.setenv("API_URL", "")
    assert config_from_env().api_url == DEFAULT_API_URL


def test_invalid_timeout():
    with pytest.raises(ValueError):
        AppConfig(http_timeout=0)


def test_non_numeric_timeout(monkeypatch):
    monkeypatch.setenv("EFEMERIDES_HTTP_TIMEOUT", "diez")

    with pytest.raises(ValueError, match="EFEMERIDES_HTTP_TIMEOUT"):
        config_from_env()
