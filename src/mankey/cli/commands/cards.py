# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Card commands.

Commands:
    mankey card find <query>                Search cards
    mankey card info <ids...>               Card details
    mankey card suspend <ids...>            Suspend cards
    mankey card unsuspend <ids...>          Unsuspend cards
    mankey card answer <card_id> <ease>     Answer a card (1=Again .. 4=Easy)
    mankey card next [--deck D]             Next cards in review order
"""

from __future__ import annotations

import argparse

from ...tools import TOOLS
from ..utils import run_tool


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the card sub-command group."""
    card_parser = subparsers.add_parser("card", help="Card operations")
    card_sub = card_parser.add_subparsers(dest="card_command", required=True)

    find_p = card_sub.add_parser("find", help="Find cards by query")
    find_p.add_argument("query", help="Anki search query")
    find_p.add_argument("--offset", type=int, default=0, help="Starting position")
    find_p.add_argument("--limit", "-n", type=int, default=100, help="Maximum results (default 100)")
    find_p.set_defaults(func=cmd_card_find)

    info_p = card_sub.add_parser("info", help="Get card information")
    info_p.add_argument("ids", nargs="+", type=int, help="Card IDs")
    info_p.set_defaults(func=cmd_card_info)

    suspend_p = card_sub.add_parser("suspend", help="Suspend cards")
    suspend_p.add_argument("ids", nargs="+", type=int, help="Card IDs")
    suspend_p.set_defaults(func=cmd_card_suspend)

    unsuspend_p = card_sub.add_parser("unsuspend", help="Unsuspend cards")
    unsuspend_p.add_argument("ids", nargs="+", type=int, help="Card IDs")
    unsuspend_p.set_defaults(func=cmd_card_unsuspend)

    answer_p = card_sub.add_parser("answer", help="Answer a card (ease: 1=Again, 2=Hard, 3=Good, 4=Easy)")
    answer_p.add_argument("card_id", type=int, help="Card ID")
    answer_p.add_argument("ease", type=int, help="Ease rating 1-4")
    answer_p.set_defaults(func=cmd_card_answer)

    next_p = card_sub.add_parser("next", help="Get next cards due for review")
    next_p.add_argument("--deck", help="Deck name")
    next_p.add_argument("--limit", "-n", type=int, default=10, help="Maximum cards (default 10)")
    next_p.set_defaults(func=cmd_card_next)


def cmd_card_find(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["findCards"], {"query": args.query, "offset": args.offset, "limit": args.limit})


def cmd_card_info(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["cardsInfo"], {"cards": args.ids})


def cmd_card_suspend(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["suspend"], {"cards": args.ids})


def cmd_card_unsuspend(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["unsuspend"], {"cards": args.ids})


def cmd_card_answer(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["answerCards"], {"answers": [{"cardId": args.card_id, "ease": args.ease}]})


def cmd_card_next(args: argparse.Namespace) -> int:
    """Learning, then review, then new cards."""
    arguments: dict = {"limit": args.limit, "offset": 0}
    if args.deck:
        arguments["deck"] = args.deck
    return run_tool(args, TOOLS["getNextCards"], arguments)
