# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Core adapter layer: configuration, remote client, schema and paging helpers."""

from .client import AnkiConnectClient
from .config import AnkiConnectSettings, get_settings, load_settings
from .exceptions import AnkiConnectError, MankeyException, ValidationException

__all__ = [
    "AnkiConnectClient",
    "AnkiConnectError",
    "AnkiConnectSettings",
    "MankeyException",
    "ValidationException",
    "get_settings",
    "load_settings",
]
