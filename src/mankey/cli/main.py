#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""
Mankey CLI - AnkiConnect tools from the shell.

Commands:
  mankey                    Start the MCP server (stdio)
  mankey run <tool> [json]  Run any tool with JSON arguments
  mankey tools              List available tools
  mankey deck|note|card|model|stats ...
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .. import __version__
from ..core.config import load_settings
from ..core.exceptions import ConfigException
from ..core.logging import configure_logging
from ..mcp.server import serve
from .commands import COMMAND_MODULES
from .output import output_error

logger = logging.getLogger(__name__)


def app() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mankey",
        description="AnkiConnect tools for the shell and for MCP clients",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mankey                                  Start the MCP server
  mankey tools --category deck            List deck tools
  mankey run findNotes '{"query":"deck:Default"}'
  mankey deck list                        List all decks
  mankey card next --deck Japanese        Next cards in review order
  mankey stats due --limit 20             Due cards, learning first
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--url", help="AnkiConnect URL (default: $ANKI_CONNECT_URL or http://127.0.0.1:8765)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)")

    subparsers = parser.add_subparsers(dest="command")
    for module in COMMAND_MODULES:
        module.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = app()
    args = parser.parse_args(argv)

    try:
        args.settings = load_settings(url=args.url, timeout=args.timeout, log_level=args.log_level)
    except ConfigException as e:
        output_error(e.message)
        return 1
    configure_logging(args.settings)

    if args.command is None:
        asyncio.run(serve(args.settings))
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
