# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Start the MCP server over stdio."""

from __future__ import annotations

import argparse
import asyncio

from ...mcp.server import health_check, serve
from ..utils import settings_from_args


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the mcp command on the CLI parser."""
    mcp_parser = subparsers.add_parser("mcp", help="Start the MCP server (stdio)")
    mcp_parser.add_argument("--health-check", action="store_true", help="Check the AnkiConnect connection and exit")
    mcp_parser.set_defaults(func=cmd_mcp)


def cmd_mcp(args: argparse.Namespace) -> int:
    """Serve MCP until the client disconnects."""
    settings = settings_from_args(args)
    if args.health_check:
        return asyncio.run(health_check(settings))
    asyncio.run(serve(settings))
    return 0
