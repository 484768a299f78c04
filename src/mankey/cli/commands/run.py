# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Run any tool by name with JSON arguments.

Commands:
    mankey run <tool>                       Run a tool with no arguments
    mankey run <tool> '<json>'              Run a tool with a JSON object of arguments
"""

from __future__ import annotations

import argparse
import json

from ...tools import get_tool
from ..output import output_error
from ..utils import run_tool


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the run command on the CLI parser."""
    run_parser = subparsers.add_parser("run", help="Run any tool directly")
    run_parser.add_argument("tool", help="Tool name (e.g. deckNames, findNotes)")
    run_parser.add_argument("arguments", nargs="?", help="Tool arguments as a JSON object")
    run_parser.set_defaults(func=cmd_run)


def cmd_run(args: argparse.Namespace) -> int:
    """Validate the JSON arguments and run the named tool."""
    tool = get_tool(args.tool)
    if tool is None:
        output_error(f'Unknown tool "{args.tool}"')
        output_error('Run "mankey tools" to see available tools')
        return 1

    arguments = {}
    if args.arguments:
        try:
            arguments = json.loads(args.arguments)
        except json.JSONDecodeError as e:
            output_error(f"Invalid JSON argument: {e}")
            return 1

    return run_tool(args, tool, arguments)
