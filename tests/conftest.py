"""Shared fixtures for fitcoach tests."""

from pathlib import Path

import pytest

from fitcoach.config import Settings


@pytest.fixture
def make_settings(tmp_path):
    """Factory for Settings with test defaults; keyword overrides win."""

    def factory(**overrides) -> Settings:
        values = {
            "api_key": "",
            "model": "meta-llama/llama-3.2-3b-instruct",
            "temperature": 0.4,
            "max_tokens": 2500,
            "request_timeout": 5.0,
            "store_path": Path(tmp_path) / "workouts.json",
        }
        values.update(overrides)
        return Settings(**values)

    return factory


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def configured_settings(make_settings):
    return make_settings(api_key="test-key")
