# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Structured logging configuration for Mankey.

Provides:
- JSON formatter for non-interactive use (MCP hosts capture stderr)
- Standard formatter for terminals
- Correlation IDs so one tool call's log lines can be grouped
- Sanitized tool call logging

All handlers write to stderr: stdout belongs to the MCP stdio transport.
"""

from __future__ import annotations

import json
import logging
import sys
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import AnkiConnectSettings

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str | None:
    """Get the current correlation ID, or None if not set."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation ID for the current context."""
    _correlation_id.set(correlation_id)


def generate_correlation_id() -> str:
    """Generate a new UUID-based correlation ID."""
    return str(uuid.uuid4())


@contextmanager
def correlation_context(
    correlation_id: str | None = None,
) -> Generator[str, None, None]:
    """Context manager for correlation ID scope.

    Example:
        with correlation_context() as cid:
            logger.info("Calling findCards")  # Will include cid
    """
    cid = correlation_id or generate_correlation_id()
    token = _correlation_id.set(cid)
    try:
        yield cid
    finally:
        _correlation_id.reset(token)


class JSONFormatter(logging.Formatter):
    """JSON log formatter, one object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = get_correlation_id()
        if correlation_id:
            log_data["correlation_id"] = correlation_id

        if record.levelno >= logging.WARNING:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data["extra"] = record.extra_data

        return json.dumps(log_data, default=str)


class StandardFormatter(logging.Formatter):
    """Human-readable formatter with colors for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    CORRELATION_COLOR = "\033[90m"  # Gray

    def __init__(self, use_colors: bool = True):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        # Copy so other handlers see the unmodified record
        record = logging.makeLogRecord(record.__dict__)

        correlation_id = get_correlation_id()
        if correlation_id:
            short_cid = correlation_id[:8]
            if self.use_colors:
                cid_str = f"{self.CORRELATION_COLOR}[{short_cid}]{self.RESET} "
            else:
                cid_str = f"[{short_cid}] "
            record.msg = cid_str + str(record.msg)

        if self.use_colors:
            color = self.COLORS.get(record.levelname, "")
            record.levelname = f"{color}{record.levelname}{self.RESET}"

        return super().format(record)


def configure_logging(
    settings: AnkiConnectSettings | None = None,
    level: str | int | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Configure root logging for the MCP server or CLI.

    Args:
        settings: Settings supplying level/format/file defaults
        level: Explicit log level, overrides settings
        json_format: Use JSON format (auto-detect if None)
        log_file: Optional file to write JSON logs to

    Environment variables (through settings):
        MANKEY_LOG_LEVEL, MANKEY_LOG_FORMAT, MANKEY_LOG_FILE, DEBUG
    """
    if settings is None:
        from .config import get_settings

        settings = get_settings()

    if level is None:
        level = settings.effective_log_level
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_format is None:
        format_env = settings.log_format.lower()
        if format_env == "json":
            json_format = True
        elif format_env == "text":
            json_format = False
        else:
            json_format = not sys.stderr.isatty()

    log_file = settings.log_file if log_file is None else log_file

    formatter: logging.Formatter
    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = StandardFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


class ToolCallLogger:
    """Logger for tool calls.

    Logs tool calls with sanitized parameters so base64 media payloads and
    credentials never land in logs verbatim.
    """

    SENSITIVE_PARAMS = {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "auth",
        "credential",
    }

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("mankey.tools")

    def log_call(
        self,
        tool_name: str,
        arguments: dict[str, Any],
        level: int = logging.DEBUG,
    ) -> None:
        """Log a tool call with sanitized parameters."""
        sanitized = self._sanitize(arguments)
        self.logger.log(
            level,
            f"Tool call: {tool_name}",
            extra={
                "extra_data": {
                    "tool": tool_name,
                    "arguments": sanitized,
                }
            },
        )

    def log_result(
        self,
        tool_name: str,
        success: bool,
        duration_ms: float | None = None,
        level: int = logging.DEBUG,
    ) -> None:
        """Log a tool result."""
        status = "success" if success else "failure"
        msg = f"Tool result: {tool_name} -> {status}"
        if duration_ms is not None:
            msg += f" ({duration_ms:.1f}ms)"

        self.logger.log(
            level,
            msg,
            extra={
                "extra_data": {
                    "tool": tool_name,
                    "success": success,
                    "duration_ms": duration_ms,
                }
            },
        )

    def _sanitize(self, data: Any) -> Any:
        """Recursively redact sensitive keys and truncate long strings."""
        if isinstance(data, dict):
            result = {}
            for key, value in data.items():
                if any(s in str(key).lower() for s in self.SENSITIVE_PARAMS):
                    result[key] = "[REDACTED]"
                else:
                    result[key] = self._sanitize(value)
            return result
        elif isinstance(data, list):
            return [self._sanitize(item) for item in data]
        elif isinstance(data, str) and len(data) > 500:
            return data[:500] + "..."
        else:
            return data


tool_logger = ToolCallLogger()
