# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Approximate review order from three category queries.

Anki presents learning cards first, then due reviews, then new cards.
AnkiConnect cannot return that order directly, so the queue is rebuilt from
one ``findCards`` per category, concatenated in priority order. Within a
category the order is whatever AnkiConnect returns; nothing is sorted across
categories.

Two views are offered:

- ``next_cards`` pages over learning + review + new and counts the page's
  records per category (``breakdown``, page-local).
- ``due_cards_detailed`` pages over learning + review only, sorts each
  category by due, and reports collection-wide counts (``totals``, global).
"""

from __future__ import annotations

import logging
import time
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from .batching import dispatch_batched
from .pagination import paginate

if TYPE_CHECKING:
    from .client import AnkiConnectClient

logger = logging.getLogger(__name__)

NEXT_CARDS_MAX_LIMIT = 100
DUE_CARDS_MAX_LIMIT = 1000

QUEUE_ORDER = "Learning cards shown first, then reviews, then new cards"
NO_CARDS_MESSAGE = "No cards due for review"
DUE_CARDS_NOTE = "Learning cards (including relearning) are shown before review cards in Anki"

# Anki card queue values
QUEUE_NEW = 0
QUEUE_LEARNING = 1
QUEUE_REVIEW = 2
QUEUE_RELEARNING = 3

SECONDS_PER_DAY = 86400


class Category(StrEnum):
    LEARNING = "learning"
    REVIEW = "review"
    NEW = "new"


CATEGORY_QUERIES = {
    Category.LEARNING: "(queue:1 OR queue:3)",
    Category.REVIEW: "is:due",
    Category.NEW: "is:new",
}


def deck_prefix(deck: str | None) -> str:
    if deck == "current":
        return "deck:current"
    if deck:
        return f'deck:"{deck}"'
    return ""


def category_query(category: Category, deck: str | None = None) -> str:
    """Search query for one category, scoped to ``deck`` when given."""
    prefix = deck_prefix(deck)
    query = CATEGORY_QUERIES[category]
    return f"{prefix} {query}" if prefix else query


def classify(card: dict[str, Any]) -> Category | None:
    """Category of a ``cardsInfo`` record from its queue value."""
    queue = card.get("queue")
    if queue in (QUEUE_LEARNING, QUEUE_RELEARNING):
        return Category.LEARNING
    if queue == QUEUE_REVIEW:
        return Category.REVIEW
    if queue == QUEUE_NEW:
        return Category.NEW
    return None


def today_day_number() -> int:
    """Days since the Unix epoch, the unit review-card ``due`` values use."""
    return int(time.time() // SECONDS_PER_DAY)


async def _find_ids(client: AnkiConnectClient, category: Category, deck: str | None) -> list[Any]:
    return await client.invoke("findCards", {"query": category_query(category, deck)}) or []


async def _cards_info(client: AnkiConnectClient, ids: list[Any]) -> list[dict[str, Any]]:
    result = await dispatch_batched(client, "cardsInfo", "cards", ids, result_key="cards")
    if isinstance(result, dict):
        return result["cards"]
    return result or []


def _front(card: dict[str, Any]) -> str:
    fields = card.get("fields") or {}
    for name in ("Front", "Simplified"):
        value = (fields.get(name) or {}).get("value")
        if value:
            return value
    return "N/A"


async def next_cards(
    client: AnkiConnectClient,
    deck: str | None = None,
    offset: int = 0,
    limit: int = 10,
) -> dict[str, Any]:
    """Page through the review queue in learning, review, new order.

    Details are fetched only for the page. ``breakdown`` counts the page's
    records by their queue value, not the collection-wide category sizes.
    Remote errors propagate.
    """
    ids: list[Any] = []
    for category in (Category.LEARNING, Category.REVIEW, Category.NEW):
        ids.extend(await _find_ids(client, category, deck))

    page = paginate(ids, offset, limit, NEXT_CARDS_MAX_LIMIT)
    if not page.items:
        return {"cards": [], "message": NO_CARDS_MESSAGE, "pagination": page.pagination()}

    cards = await _cards_info(client, page.items)  # type: ignore[arg-type]

    breakdown = {category.value: 0 for category in Category}
    for card in cards:
        category = classify(card)
        if category is not None:
            breakdown[category.value] += 1

    return {
        "cards": cards,
        "breakdown": breakdown,
        "pagination": page.pagination(),
        "queueOrder": QUEUE_ORDER,
    }


async def due_cards_detailed(
    client: AnkiConnectClient,
    deck: str | None = None,
    offset: int = 0,
    limit: int = 50,
    today: int | None = None,
) -> dict[str, Any]:
    """Due learning and review cards for a page window, each sorted by due.

    ``totals`` and ``total`` describe the whole collection (or deck), not the
    page. A review record is listed only if its due day is today or earlier.
    """
    learning_ids = await _find_ids(client, Category.LEARNING, deck)
    review_ids = await _find_ids(client, Category.REVIEW, deck)

    page = paginate(learning_ids + review_ids, offset, limit, DUE_CARDS_MAX_LIMIT)
    totals = {Category.LEARNING.value: len(learning_ids), Category.REVIEW.value: len(review_ids)}

    learning: list[dict[str, Any]] = []
    review: list[dict[str, Any]] = []

    if page.items:
        if today is None:
            today = today_day_number()
        for card in await _cards_info(client, page.items):  # type: ignore[arg-type]
            queue = card.get("queue")
            if queue in (QUEUE_LEARNING, QUEUE_RELEARNING):
                learning.append(
                    {
                        "cardId": card.get("cardId"),
                        "front": _front(card),
                        "interval": card.get("interval"),
                        "due": card.get("due"),
                        "queue": "learning" if queue == QUEUE_LEARNING else "relearning",
                        "reps": card.get("reps"),
                    }
                )
            elif queue == QUEUE_REVIEW and (card.get("due") or 0) <= today:
                review.append(
                    {
                        "cardId": card.get("cardId"),
                        "front": _front(card),
                        "interval": card.get("interval"),
                        "due": card.get("due"),
                        "queue": "review",
                        "ease": card.get("factor"),
                    }
                )

    learning.sort(key=lambda card: card["due"] or 0)
    review.sort(key=lambda card: card["due"] or 0)

    return {
        "learning": learning,
        "review": review,
        "totals": totals,
        "total": page.total,
        "pagination": page.pagination(),
        "note": DUE_CARDS_NOTE,
    }
