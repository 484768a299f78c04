# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Deck commands.

Commands:
    mankey deck list                        List all decks
    mankey deck create <name>               Create a deck
    mankey deck stats <names...>            Per-deck statistics
    mankey deck delete <names...>           Delete decks and their cards
"""

from __future__ import annotations

import argparse

from ...tools import TOOLS
from ..utils import run_tool


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the deck sub-command group."""
    deck_parser = subparsers.add_parser("deck", help="Deck operations")
    deck_sub = deck_parser.add_subparsers(dest="deck_command", required=True)

    list_p = deck_sub.add_parser("list", help="List all decks")
    list_p.set_defaults(func=cmd_deck_list)

    create_p = deck_sub.add_parser("create", help="Create a new deck")
    create_p.add_argument("name", help="Deck name (use :: for nested decks)")
    create_p.set_defaults(func=cmd_deck_create)

    stats_p = deck_sub.add_parser("stats", help="Get deck statistics")
    stats_p.add_argument("names", nargs="+", help="Deck names")
    stats_p.set_defaults(func=cmd_deck_stats)

    delete_p = deck_sub.add_parser("delete", help="Delete decks")
    delete_p.add_argument("names", nargs="+", help="Deck names")
    delete_p.set_defaults(func=cmd_deck_delete)


def cmd_deck_list(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["deckNames"], {"offset": 0, "limit": 10000})


def cmd_deck_create(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["createDeck"], {"deck": args.name})


def cmd_deck_stats(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["getDeckStats"], {"decks": args.names})


def cmd_deck_delete(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["deleteDecks"], {"decks": args.names, "cardsToo": True})
