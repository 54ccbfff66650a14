"""Shared fixtures."""

import os

import pytest

from yart.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Start each test from default settings, ignoring the caller's YART_ environment."""
    for key in [k for k in os.environ if k.startswith("YART_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    yield
    clear_settings_cache()
