# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""List the available tools, grouped by category."""

from __future__ import annotations

import argparse

from ...tools import TOOL_CATEGORIES
from ..output import output_error, output_result


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the tools command on the CLI parser."""
    tools_parser = subparsers.add_parser("tools", help="List available tools")
    tools_parser.add_argument("--category", "-c", help="Only list tools in this category")
    tools_parser.add_argument("--json", action="store_true", help="Output as JSON")
    tools_parser.set_defaults(func=cmd_tools)


def cmd_tools(args: argparse.Namespace) -> int:
    """List tools by category."""
    categories = TOOL_CATEGORIES
    if args.category:
        if args.category not in TOOL_CATEGORIES:
            output_error(f'Unknown category "{args.category}". Available: {", ".join(TOOL_CATEGORIES)}')
            return 1
        categories = {args.category: TOOL_CATEGORIES[args.category]}

    total = sum(len(tools) for tools in categories.values())

    if args.json:
        output_result(
            {
                "tools": [
                    {"name": tool.name, "category": category, "description": tool.summary}
                    for category, tools in categories.items()
                    for tool in tools
                ],
                "total": total,
            }
        )
        return 0

    for category, tools in categories.items():
        print(f"\n{category.upper()} ({len(tools)} tools):")
        for tool in tools:
            print(f"  {tool.name:<30} {tool.summary}")
    print(f"\nTotal: {total} tools")
    return 0
