"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from fitcoach.config import DEFAULT_MODEL, DEFAULT_STORE_PATH, get_settings

_VARS = (
    "DEDALUS_API_KEY",
    "DEDALUS_MODEL",
    "FITCOACH_TEMPERATURE",
    "FITCOACH_MAX_TOKENS",
    "FITCOACH_REQUEST_TIMEOUT",
    "FITCOACH_STORE_PATH",
    "FRONTEND_URL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


class TestGetSettings:
    def test_defaults(self):
        settings = get_settings()

        assert settings.api_key == ""
        assert settings.model == DEFAULT_MODEL
        assert settings.temperature == 0.4
        assert settings.max_tokens == 2500
        assert settings.request_timeout == 60.0
        assert settings.store_path == DEFAULT_STORE_PATH
        assert settings.frontend_url == ""

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DEDALUS_API_KEY", "  secret  ")
        monkeypatch.setenv("DEDALUS_MODEL", "openai/gpt-4o-mini")
        monkeypatch.setenv("FITCOACH_TEMPERATURE", "0.9")
        monkeypatch.setenv("FITCOACH_MAX_TOKENS", "1200")
        monkeypatch.setenv("FITCOACH_REQUEST_TIMEOUT", "15")
        monkeypatch.setenv("FITCOACH_STORE_PATH", str(tmp_path / "w.json"))
        monkeypatch.setenv("FRONTEND_URL", "https://fit.example.com")

        settings = get_settings()

        assert settings.api_key == "secret"
        assert settings.model == "openai/gpt-4o-mini"
        assert settings.temperature == 0.9
        assert settings.max_tokens == 1200
        assert settings.request_timeout == 15.0
        assert settings.store_path == tmp_path / "w.json"
        assert settings.frontend_url == "https://fit.example.com"

    def test_store_path_expands_user(self, monkeypatch):
        monkeypatch.setenv("FITCOACH_STORE_PATH", "~/fit.json")
        assert get_settings().store_path == Path.home() / "fit.json"

    def test_invalid_number(self, monkeypatch):
        monkeypatch.setenv("FITCOACH_MAX_TOKENS", "lots")
        with pytest.raises(ValueError, match="FITCOACH_MAX_TOKENS must be a number"):
            get_settings()

    def test_settings_are_frozen(self):
        settings = get_settings()
        with pytest.raises(AttributeError):
            settings.api_key = "changed"
