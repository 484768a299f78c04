# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Note commands.

Commands:
    mankey note add --deck D --model M --front F --back B    Add a note
    mankey note find <query>                                 Search notes
    mankey note info <ids...>                                Note details
    mankey note update <id> [--fields JSON] [--tags a,b]     Update a note
    mankey note delete <ids...>                              Delete notes
    mankey note tags <id>                                    Tags of one note
"""

from __future__ import annotations

import argparse
import json

from ...tools import TOOLS
from ..output import output_error
from ..utils import parse_tags, run_tool


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the note sub-command group."""
    note_parser = subparsers.add_parser("note", help="Note operations")
    note_sub = note_parser.add_subparsers(dest="note_command", required=True)

    # --- add ---
    add_p = note_sub.add_parser("add", help="Add a new note")
    add_p.add_argument("--deck", required=True, help="Target deck name")
    add_p.add_argument("--model", required=True, help="Note type (e.g., Basic, Cloze)")
    add_p.add_argument("--front", required=True, help="Front field content")
    add_p.add_argument("--back", required=True, help="Back field content")
    add_p.add_argument("--tags", help="Comma-separated tags")
    add_p.add_argument("--allow-duplicate", action="store_true", help="Allow duplicate notes")
    add_p.set_defaults(func=cmd_note_add)

    # --- find ---
    find_p = note_sub.add_parser("find", help="Find notes by query")
    find_p.add_argument("query", help="Anki search query")
    find_p.add_argument("--offset", type=int, default=0, help="Starting position")
    find_p.add_argument("--limit", "-n", type=int, default=100, help="Maximum results (default 100)")
    find_p.set_defaults(func=cmd_note_find)

    # --- info ---
    info_p = note_sub.add_parser("info", help="Get note information")
    info_p.add_argument("ids", nargs="+", type=int, help="Note IDs")
    info_p.set_defaults(func=cmd_note_info)

    # --- update ---
    update_p = note_sub.add_parser("update", help="Update a note")
    update_p.add_argument("id", type=int, help="Note ID")
    update_p.add_argument("--fields", help="Fields to update as a JSON object")
    update_p.add_argument("--tags", help="Comma-separated tags (replaces existing)")
    update_p.set_defaults(func=cmd_note_update)

    # --- delete ---
    delete_p = note_sub.add_parser("delete", help="Delete notes")
    delete_p.add_argument("ids", nargs="+", type=int, help="Note IDs")
    delete_p.set_defaults(func=cmd_note_delete)

    # --- tags ---
    tags_p = note_sub.add_parser("tags", help="Get tags for a note")
    tags_p.add_argument("id", type=int, help="Note ID")
    tags_p.set_defaults(func=cmd_note_tags)


def cmd_note_add(args: argparse.Namespace) -> int:
    """Add a Front/Back note."""
    return run_tool(
        args,
        TOOLS["addNote"],
        {
            "deckName": args.deck,
            "modelName": args.model,
            "fields": {"Front": args.front, "Back": args.back},
            "tags": parse_tags(args.tags),
            "allowDuplicate": args.allow_duplicate,
        },
    )


def cmd_note_find(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["findNotes"], {"query": args.query, "offset": args.offset, "limit": args.limit})


def cmd_note_info(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["notesInfo"], {"notes": args.ids})


def cmd_note_update(args: argparse.Namespace) -> int:
    """Update fields and/or replace tags of one note."""
    arguments: dict = {"id": args.id}
    if args.fields:
        try:
            arguments["fields"] = json.loads(args.fields)
        except json.JSONDecodeError as e:
            output_error(f"Invalid JSON for --fields: {e}")
            return 1
    if args.tags:
        arguments["tags"] = parse_tags(args.tags)
    return run_tool(args, TOOLS["updateNote"], arguments)


def cmd_note_delete(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["deleteNotes"], {"notes": args.ids})


def cmd_note_tags(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["getNoteTags"], {"note": args.id})
