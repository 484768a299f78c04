# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Utility functions for Mankey CLI."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Any

from ..core.client import AnkiConnectClient
from ..core.config import AnkiConnectSettings, load_settings
from ..core.exceptions import MankeyException, ValidationException
from ..tools import ToolDef
from .output import output_error, output_issues, output_result

logger = logging.getLogger(__name__)


def settings_from_args(args: argparse.Namespace) -> AnkiConnectSettings:
    """Settings with the global ``--url``/``--timeout``/``--log-level`` flags applied."""
    settings = getattr(args, "settings", None)
    if settings is not None:
        return settings
    return load_settings(
        url=getattr(args, "url", None),
        timeout=getattr(args, "timeout", None),
        log_level=getattr(args, "log_level", None),
    )


async def _call(settings: AnkiConnectSettings, tool: ToolDef, arguments: dict[str, Any] | None) -> Any:
    async with AnkiConnectClient(settings) as client:
        return await tool.call(client, arguments)


def run_tool(args: argparse.Namespace, tool: ToolDef, arguments: dict[str, Any] | None = None) -> int:
    """Run ``tool`` against AnkiConnect and print its result.

    Returns the process exit code: 0 on success, 1 on any error.
    """
    try:
        result = asyncio.run(_call(settings_from_args(args), tool, arguments))
    except ValidationException as e:
        if e.issues:
            output_issues(tool.name, e.issues)
        else:
            output_error(e.message)
        return 1
    except MankeyException as e:
        logger.debug(f"{tool.name} failed: {e.message}")
        output_error(e.message)
        return 1

    output_result(result)
    return 0


def parse_tags(raw: str | None) -> list[str]:
    """``"a, b,c"`` -> ``["a", "b", "c"]``."""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]
