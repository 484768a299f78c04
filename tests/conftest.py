"""Global test fixtures for the Mankey test suite."""

from __future__ import annotations

import pytest
from helpers import FakeAnkiClient

from mankey.core.config import AnkiConnectSettings, clear_settings_cache
from mankey.core.logging import set_correlation_id


@pytest.fixture
def fake_client() -> FakeAnkiClient:
    return FakeAnkiClient()


@pytest.fixture
def settings() -> AnkiConnectSettings:
    return AnkiConnectSettings(url="http://anki.test:8765", timeout=5.0)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep the developer's environment and cached settings out of tests."""
    for name in (
        "ANKI_CONNECT_URL",
        "ANKI_CONNECT_VERSION",
        "ANKI_CONNECT_TIMEOUT",
        "MANKEY_LOG_LEVEL",
        "MANKEY_LOG_FORMAT",
        "MANKEY_LOG_FILE",
        "DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    set_correlation_id(None)
    yield
    clear_settings_cache()
