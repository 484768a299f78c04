# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Core configuration - AnkiConnect endpoint, timeouts and logging.

All environment-based configuration flows through this module. Settings are
read once into an immutable value and handed to ``AnkiConnectClient`` at
construction time; nothing downstream reads the environment directly.

Usage:
    from mankey.core.config import load_settings
    settings = load_settings(url="http://127.0.0.1:8765")

    client = AnkiConnectClient(settings)
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigException

DEFAULT_ANKI_CONNECT_URL = "http://127.0.0.1:8765"
ANKI_CONNECT_VERSION = 6


class AnkiConnectSettings(BaseSettings):
    """Settings for talking to AnkiConnect and for the process's logging.

    Every field can be set from the environment (see the aliases) or passed
    by name, which is how the CLI applies ``--url`` and friends.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    # ==========================================================================
    # ANKICONNECT SETTINGS
    # ==========================================================================

    url: str = Field(
        default=DEFAULT_ANKI_CONNECT_URL,
        description="AnkiConnect endpoint URL",
        validation_alias="ANKI_CONNECT_URL",
    )
    version: int = Field(
        default=ANKI_CONNECT_VERSION,
        description="AnkiConnect API version sent with every request",
        validation_alias="ANKI_CONNECT_VERSION",
    )
    timeout: float = Field(
        default=30.0,
        description="Per-request timeout in seconds",
        validation_alias="ANKI_CONNECT_TIMEOUT",
    )

    # ==========================================================================
    # LOGGING SETTINGS
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="MANKEY_LOG_LEVEL",
    )
    log_format: str = Field(
        default="",
        description="Log format: 'json', 'text', or '' (auto-detect)",
        validation_alias="MANKEY_LOG_FORMAT",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (optional)",
        validation_alias="MANKEY_LOG_FILE",
    )
    debug: bool = Field(
        default=False,
        description="Force DEBUG logging, including request/response payloads",
        validation_alias="DEBUG",
    )

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the DEBUG switch."""
        return "DEBUG" if self.debug else self.log_level.upper()


# ==========================================================================
# DEFAULT SETTINGS (lazy loaded, read-only)
# ==========================================================================

_settings: AnkiConnectSettings | None = None


def get_settings() -> AnkiConnectSettings:
    """Get the settings loaded from the environment.

    The instance is frozen; use ``load_settings`` to derive a variant.
    """
    global _settings
    if _settings is None:
        _settings = AnkiConnectSettings()
    return _settings


def load_settings(**overrides: Any) -> AnkiConnectSettings:
    """Build settings from the environment with explicit overrides applied.

    Overrides whose value is None are ignored so argparse namespaces can be
    passed through without filtering.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        if not values:
            return get_settings()
        return AnkiConnectSettings(**values)
    except ValidationError as e:
        problems = [f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ConfigException(f"Invalid configuration: {'; '.join(problems)}", {"errors": problems}) from e


def clear_settings_cache() -> None:
    """Clear the cached settings. Useful for testing."""
    global _settings
    _settings = None
