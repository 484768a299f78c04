# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Custom exception hierarchy for Mankey.

Provides specific exception types for the error categories the adapter
layer distinguishes: remote failures, parameter validation and configuration.
"""

from __future__ import annotations

from typing import Any


class MankeyException(Exception):  # noqa: N818
    """Base exception for all Mankey errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class AnkiConnectError(MankeyException):
    """A failed AnkiConnect call.

    Raised when:
    - AnkiConnect is unreachable or returns a malformed response
    - AnkiConnect reports an error for the action (message already rewritten
      into an actionable form and prefixed with the action name)
    """

    def __init__(self, action: str, message: str):
        super().__init__(message, {"action": action})
        self.action = action


class ValidationException(MankeyException):
    """Exception for parameter validation errors.

    Carries one ``{"path": ..., "message": ...}`` entry per violation so the
    caller can report every problem at once.
    """

    def __init__(
        self,
        message: str,
        issues: list[dict[str, str]] | None = None,
        field: str | None = None,
        value: Any = None,
    ):
        issues = list(issues or [])
        if field and not issues:
            issues.append({"path": field, "message": message})
        details: dict[str, Any] = {"issues": issues}
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
        self.issues = issues
        self.field = field
        self.value = value


class ConfigException(MankeyException):
    """Exception for configuration errors.

    Raised when:
    - Settings cannot be loaded from the environment or .env file
    - A CLI override has an invalid value
    """
