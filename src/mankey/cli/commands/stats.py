# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Review statistics commands."""

from __future__ import annotations

import argparse

from ...tools import TOOLS
from ..utils import run_tool


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the stats sub-command group."""
    stats_parser = subparsers.add_parser("stats", help="Review statistics")
    stats_sub = stats_parser.add_subparsers(dest="stats_command", required=True)

    today_p = stats_sub.add_parser("today", help="Get today's review count")
    today_p.set_defaults(func=cmd_stats_today)

    due_p = stats_sub.add_parser("due", help="Get due cards with details")
    due_p.add_argument("--deck", help="Deck name")
    due_p.add_argument("--offset", type=int, default=0, help="Starting position")
    due_p.add_argument("--limit", "-n", type=int, default=50, help="Maximum cards to return (default 50)")
    due_p.set_defaults(func=cmd_stats_due)

    collection_p = stats_sub.add_parser("collection", help="Get collection statistics")
    collection_p.set_defaults(func=cmd_stats_collection)


def cmd_stats_today(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["getNumCardsReviewedToday"])


def cmd_stats_due(args: argparse.Namespace) -> int:
    arguments: dict = {"offset": args.offset, "limit": args.limit}
    if args.deck:
        arguments["deck"] = args.deck
    return run_tool(args, TOOLS["getDueCardsDetailed"], arguments)


def cmd_stats_collection(args: argparse.Namespace) -> int:
    return run_tool(args, TOOLS["getCollectionStatsHTML"], {"wholeCollection": True})
