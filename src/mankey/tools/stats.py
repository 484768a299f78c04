# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Review statistics tools."""

from __future__ import annotations

from typing import Any

from ..core.client import AnkiConnectClient
from ..core.queue import DUE_CARDS_MAX_LIMIT, due_cards_detailed
from ..core.schema import boolean, id_list, number, obj, string
from .base import ToolDef, limit_param, offset_param

DUE_CARDS_DEFAULT_LIMIT = 50


async def get_due_cards_detailed(
    client: AnkiConnectClient,
    deck: str | None = None,
    offset: int = 0,
    limit: int = DUE_CARDS_DEFAULT_LIMIT,
) -> dict[str, Any]:
    return await due_cards_detailed(client, deck=deck, offset=offset, limit=limit)


STATS_TOOLS = [
    ToolDef(
        name="getNumCardsReviewedToday",
        category="stats",
        description="Get today's review count",
        schema=obj(),
    ),
    ToolDef(
        name="getDueCardsDetailed",
        category="stats",
        description=(
            "Get due cards with detailed categorization by queue type (learning vs review). Use 'current' for "
            "current deck. Returns paginated results; totals count all due cards, not just the page"
        ),
        schema=obj(
            deck=string().describe("Deck name (or 'current' for current deck)").optional(),
            offset=offset_param(),
            limit=limit_param(DUE_CARDS_DEFAULT_LIMIT, DUE_CARDS_MAX_LIMIT, "cards"),
        ),
        handler=get_due_cards_detailed,
    ),
    ToolDef(
        name="getNumCardsReviewedByDay",
        category="stats",
        description=(
            "Gets number of reviews performed on a specific day. Date format: Unix timestamp (seconds since epoch). "
            "Returns total review count including new, learning, and review cards. Useful for tracking study "
            "patterns and consistency. Historical data available since collection creation"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="getCollectionStatsHTML",
        category="stats",
        description=(
            "Gets comprehensive collection statistics as formatted HTML including: total cards/notes, daily "
            "averages, retention rates, mature vs young cards, time spent studying, forecast, and more. Same "
            "statistics shown in Anki's Stats window. HTML includes embedded CSS for proper rendering. Useful for "
            "dashboards and reporting"
        ),
        schema=obj(wholeCollection=boolean().optional().default(True)),
    ),
    ToolDef(
        name="cardReviews",
        category="stats",
        description=(
            "Gets complete review history for specified cards. Returns array of review arrays, each containing: "
            "reviewTime, cardID, ease, interval, lastInterval, factor, reviewDuration. Essential for analyzing "
            "learning patterns, identifying problem cards, or exporting review data. Large histories may be "
            "substantial"
        ),
        schema=obj(
            deck=string().describe("Deck name"),
            startID=number().describe("Start review ID"),
        ),
    ),
    ToolDef(
        name="getLatestReviewID",
        category="stats",
        description=(
            "Gets the ID of the most recent review in collection. Review IDs increment monotonically. Useful for "
            "tracking new reviews since last check, implementing review sync, or monitoring study activity. Returns "
            "integer ID or null if no reviews"
        ),
        schema=obj(deck=string().describe("Deck name")),
    ),
    ToolDef(
        name="getReviewsOfCards",
        category="stats",
        description=(
            "Gets review entries for specific cards from the review log. More targeted than cardReviews. Returns "
            "review entries with timestamps, ease ratings, and intervals. Useful for detailed card analysis or "
            "custom statistics. Handles multiple cards efficiently"
        ),
        schema=obj(cards=id_list().describe("Card IDs")),
        id_params=("cards",),
    ),
]
