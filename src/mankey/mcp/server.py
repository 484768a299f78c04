# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""MCP server exposing every AnkiConnect tool over stdio.

Tool results are returned as a single JSON ``TextContent``. Failures are
reported the same way, as ``{"success": false, "error": ..., "details": ...}``,
so a client always receives a parseable payload.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
import time
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .. import __version__
from ..core.client import AnkiConnectClient
from ..core.config import AnkiConnectSettings, load_settings
from ..core.exceptions import AnkiConnectError, ConfigException, ValidationException
from ..core.logging import configure_logging, correlation_context, tool_logger
from ..tools import TOOLS, get_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "mankey"


def _text(payload: Any, indent: int | None = None) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(payload, indent=indent, default=str))]


def _failure(error: str, details: dict[str, Any] | None = None) -> list[TextContent]:
    return _text({"success": False, "error": error, "details": details or {}})


def list_tool_definitions() -> list[Tool]:
    """MCP tool list, one entry per registered tool."""
    return [tool.to_mcp_tool() for tool in TOOLS.values()]


async def dispatch(client: AnkiConnectClient, name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    """Look up, validate and run a tool; always returns a JSON payload."""
    tool = get_tool(name)
    if tool is None:
        logger.warning(f"Unknown tool requested: {name}")
        return _failure(f"Unknown tool: {name}")

    with correlation_context():
        tool_logger.log_call(name, arguments or {})
        start = time.perf_counter()
        try:
            result = await tool.call(client, arguments)
        except ValidationException as e:
            logger.warning(f"Validation error in tool {name}: {e.message}")
            tool_logger.log_result(name, False, (time.perf_counter() - start) * 1000)
            return _failure(f"Validation error: {e.message}", e.details)
        except AnkiConnectError as e:
            logger.error(f"AnkiConnect error in tool {name}: {e.message}")
            tool_logger.log_result(name, False, (time.perf_counter() - start) * 1000)
            return _failure(e.message, e.details)
        except Exception as e:
            logger.exception(f"Unexpected error in tool {name}")
            tool_logger.log_result(name, False, (time.perf_counter() - start) * 1000)
            return _failure(f"Internal error: {e}")

        tool_logger.log_result(name, True, (time.perf_counter() - start) * 1000)
        return _text(result, indent=2)


def create_server(client: AnkiConnectClient) -> Server:
    """Build an MCP server whose tools run against ``client``."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return list_tool_definitions()

    # Descriptors type number-or-string ids as "string"; arguments are
    # validated against the full schema in dispatch instead.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        return await dispatch(client, name, arguments)

    return server


async def serve(settings: AnkiConnectSettings) -> None:
    """Serve MCP over stdio until the client disconnects."""
    async with AnkiConnectClient(settings) as client:
        server = create_server(client)
        logger.info(f"Mankey MCP server starting ({len(TOOLS)} tools, AnkiConnect at {settings.url})")
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


async def health_check(settings: AnkiConnectSettings) -> int:
    """Return 0 if AnkiConnect answers, 1 otherwise."""
    async with AnkiConnectClient(settings) as client:
        if await client.check_connection():
            print(f"AnkiConnect reachable at {settings.url}", file=sys.stderr)
            return 0
    print(f"AnkiConnect not reachable at {settings.url}", file=sys.stderr)
    return 1


def run(argv: list[str] | None = None) -> None:
    """Run the MCP server (``mankey-mcp`` entry point)."""
    parser = argparse.ArgumentParser(description="Mankey MCP server for AnkiConnect")
    parser.add_argument("--url", help="AnkiConnect URL (default: $ANKI_CONNECT_URL or http://127.0.0.1:8765)")
    parser.add_argument("--health-check", action="store_true", help="Check the AnkiConnect connection and exit")
    args = parser.parse_args(argv)

    try:
        settings = load_settings(url=args.url)
    except ConfigException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    configure_logging(settings)

    if args.health_check:
        sys.exit(asyncio.run(health_check(settings)))

    asyncio.run(serve(settings))


if __name__ == "__main__":
    run()
