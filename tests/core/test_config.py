"""Tests for mankey.core.config."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mankey.core.config import (
    DEFAULT_ANKI_CONNECT_URL,
    AnkiConnectSettings,
    clear_settings_cache,
    get_settings,
    load_settings,
)
from mankey.core.exceptions import ConfigException


class TestDefaults:
    def test_defaults(self):
        settings = AnkiConnectSettings()
        assert settings.url == DEFAULT_ANKI_CONNECT_URL == "http://127.0.0.1:8765"
        assert settings.version == 6
        assert settings.timeout == 30.0
        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.debug is False

    def test_frozen(self):
        settings = AnkiConnectSettings()
        with pytest.raises(ValidationError):
            settings.url = "http://other:1"  # type: ignore[misc]


class TestEnvironment:
    def test_url_from_env(self, monkeypatch):
        monkeypatch.setenv("ANKI_CONNECT_URL", "http://remote:9999")
        assert AnkiConnectSettings().url == "http://remote:9999"

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("MANKEY_LOG_LEVEL", "warning")
        assert AnkiConnectSettings().effective_log_level == "WARNING"

    def test_debug_forces_debug_level(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("MANKEY_LOG_LEVEL", "ERROR")
        assert AnkiConnectSettings().effective_log_level == "DEBUG"


class TestLoading:
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_clear_cache(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("ANKI_CONNECT_URL", "http://changed:1")
        assert get_settings() is first
        clear_settings_cache()
        assert get_settings().url == "http://changed:1"

    def test_overrides_applied_by_field_name(self, monkeypatch):
        monkeypatch.setenv("ANKI_CONNECT_URL", "http://env:1")
        settings = load_settings(url="http://flag:2", timeout=3)
        assert settings.url == "http://flag:2"
        assert settings.timeout == 3.0

    def test_none_overrides_ignored(self):
        assert load_settings(url=None, timeout=None) is get_settings()

    def test_invalid_override(self):
        with pytest.raises(ConfigException) as exc_info:
            load_settings(timeout="soon")
        assert exc_info.value.message.startswith("Invalid configuration")
        assert exc_info.value.details["errors"]
