# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Model (note type) commands."""

from __future__ import annotations

import argparse
import json

from ...tools import TOOLS
from ..output import output_error
from ..utils import parse_tags, run_tool


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the model sub-command group."""
    model_parser = subparsers.add_parser("model", help="Model (note type) operations")
    model_sub = model_parser.add_subparsers(dest="model_command", required=True)

    list_p = model_sub.add_parser("list", help="List all models")
    list_p.add_argument("--offset", type=int, default=0, help="Starting position")
    list_p.add_argument("--limit", "-n", type=int, default=1000, help="Maximum models to return (default 1000)")
    list_p.set_defaults(func=cmd_model_list)

    fields_p = model_sub.add_parser("fields", help="Get field names for a model")
    fields_p.add_argument("name", help="Model name")
    fields_p.set_defaults(func=cmd_model_fields)

    create_p = model_sub.add_parser("create", help="Create a new model")
    create_p.add_argument("--name", required=True, help="Model name")
    create_p.add_argument("--fields", required=True, help="Comma-separated field names")
    create_p.add_argument("--templates", required=True, help="Card templates as a JSON array")
    create_p.add_argument("--css", help="CSS styling")
    create_p.add_argument("--cloze", action="store_true", help="Create as cloze model")
    create_p.set_defaults(func=cmd_model_create)


def cmd_model_list(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["modelNames"], {"offset": args.offset, "limit": args.limit})


def cmd_model_fields(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["modelFieldNames"], {"modelName": args.name})


def cmd_model_create(args: argparse.Namespace) -> int:
    try:
        templates = json.loads(args.templates)
    except json.JSONDecodeError as e:
        output_error(f"Invalid JSON for --templates: {e}")
        return 1

    arguments = {
        "modelName": args.name,
        "inOrderFields": parse_tags(args.fields),
        "cardTemplates": templates,
        "isCloze": args.cloze,
    }
    if args.css:
        arguments["css"] = args.css
    return run_tool(args, TOOLS["createModel"], arguments)
