# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Deck tools."""

from __future__ import annotations

from typing import Any

from ..core.client import AnkiConnectClient
from ..core.pagination import fetch_page
from ..core.schema import array, boolean, obj, string
from .base import ToolDef, limit_param, offset_param

LISTING_DEFAULT_LIMIT = 1000
LISTING_MAX_LIMIT = 10000


async def deck_names(client: AnkiConnectClient, offset: int = 0, limit: int = LISTING_DEFAULT_LIMIT) -> dict[str, Any]:
    page = await fetch_page(client, "deckNames", offset=offset, limit=limit, max_limit=LISTING_MAX_LIMIT)
    return page.to_dict("decks")


async def deck_names_and_ids(
    client: AnkiConnectClient, offset: int = 0, limit: int = LISTING_DEFAULT_LIMIT
) -> dict[str, Any]:
    page = await fetch_page(client, "deckNamesAndIds", offset=offset, limit=limit, max_limit=LISTING_MAX_LIMIT)
    return page.to_dict("decks")


DECK_TOOLS = [
    ToolDef(
        name="deckNames",
        category="deck",
        description=(
            "Gets the complete list of deck names for the current user. Returns all decks including nested decks "
            "(formatted as 'Parent::Child'). Useful for getting an overview of available decks before performing "
            "operations. Returns paginated results to handle large collections efficiently"
        ),
        schema=obj(
            offset=offset_param(),
            limit=limit_param(LISTING_DEFAULT_LIMIT, LISTING_MAX_LIMIT, "decks"),
        ),
        handler=deck_names,
    ),
    ToolDef(
        name="createDeck",
        category="deck",
        description=(
            "Creates a new empty deck. Will not overwrite a deck that exists with the same name. Use '::' separator "
            "for nested decks (e.g., 'Japanese::JLPT N5'). Returns the deck ID on success. Safe to call multiple "
            "times - acts as 'ensure exists' operation"
        ),
        schema=obj(deck=string().describe("Deck name (use :: for nested decks)")),
    ),
    ToolDef(
        name="getDeckStats",
        category="deck",
        description=(
            "Gets detailed statistics for specified decks including: new_count (blue cards), learn_count (red cards "
            "in learning), review_count (green cards due), and total_in_deck. Essential for understanding deck "
            "workload and progress. Returns stats keyed by deck ID"
        ),
        schema=obj(decks=array(string()).describe("Deck names to get stats for")),
    ),
    ToolDef(
        name="deckNamesAndIds",
        category="deck",
        description=(
            "Gets complete mapping of deck names to their internal IDs. IDs are persistent and used internally by "
            "Anki. Useful when you need to work with deck IDs directly or correlate names with IDs. Returns object "
            "with deck names as keys and IDs as values. Paginated for large collections"
        ),
        schema=obj(
            offset=offset_param(),
            limit=limit_param(LISTING_DEFAULT_LIMIT, LISTING_MAX_LIMIT, "entries"),
        ),
        handler=deck_names_and_ids,
    ),
    ToolDef(
        name="getDeckConfig",
        category="deck",
        description=(
            "Gets the configuration group object for a deck. Contains review settings like: new cards per day, "
            "review limits, ease factors, intervals, leech thresholds, and more. Decks can share config groups. "
            "Understanding config is crucial for optimizing learning efficiency"
        ),
        schema=obj(deck=string().describe("Deck name")),
    ),
    ToolDef(
        name="deleteDecks",
        category="deck",
        description=(
            "Permanently deletes specified decks. CAUTION: Setting cardsToo=true (default) will delete all cards in "
            "the decks. Cards cannot be recovered after deletion. cardsToo MUST be explicitly set. Deleting parent "
            "deck deletes all subdecks. Returns true on success"
        ),
        schema=obj(
            decks=array(string()).describe("Deck names to delete"),
            cardsToo=boolean().default(True).describe("Also delete cards"),
        ),
        null_to_true=True,
    ),
]
