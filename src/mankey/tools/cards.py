# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Card tools."""

from __future__ import annotations

from typing import Any

from ..core.batching import dispatch_batched
from ..core.client import AnkiConnectClient
from ..core.normalize import normalize_id
from ..core.pagination import fetch_page
from ..core.queue import NEXT_CARDS_MAX_LIMIT, next_cards
from ..core.schema import array, boolean, id_list, id_value, number, obj, record, string
from .base import ToolDef, limit_param, offset_param

SEARCH_DEFAULT_LIMIT = 100
SEARCH_MAX_LIMIT = 1000


async def find_cards(
    client: AnkiConnectClient,
    query: str,
    offset: int = 0,
    limit: int = SEARCH_DEFAULT_LIMIT,
) -> dict[str, Any]:
    page = await fetch_page(
        client,
        "findCards",
        {"query": query},
        offset=offset,
        limit=limit,
        max_limit=SEARCH_MAX_LIMIT,
        swallow_errors=True,
    )
    return page.to_dict("cards")


async def get_next_cards(
    client: AnkiConnectClient,
    deck: str | None = None,
    limit: int = 10,
    offset: int = 0,
) -> dict[str, Any]:
    return await next_cards(client, deck=deck, offset=offset, limit=limit)


async def cards_info(client: AnkiConnectClient, cards: list[int | str]) -> Any:
    return await dispatch_batched(client, "cardsInfo", "cards", cards, result_key="cards")


async def answer_cards(client: AnkiConnectClient, answers: list[dict[str, Any]]) -> Any:
    payload = [{"cardId": normalize_id(answer["cardId"]), "ease": answer["ease"]} for answer in answers]
    return await client.invoke("answerCards", {"answers": payload})


async def set_specific_value_of_card(
    client: AnkiConnectClient,
    card: int | str,
    keys: list[str],
    new_values: list[str],
    warning_check: bool | None = None,
) -> Any:
    return await client.invoke(
        "setSpecificValueOfCard",
        {
            "card": normalize_id(card),
            "keys": keys,
            "newValues": new_values,
            "warning_check": warning_check,
        },
    )


CARD_TOOLS = [
    ToolDef(
        name="findCards",
        category="card",
        description=(
            "Search for cards using Anki's query syntax. Returns card IDs (not note IDs). Common queries: "
            "'deck:DeckName' (cards in deck), 'is:due' (due for review today), 'is:new' (never studied), 'is:learn' "
            "(in learning phase), 'is:suspended' (suspended cards), 'prop:due<=0' (overdue), 'rated:1:1' (reviewed "
            "today, answered Hard). Note: 'is:due' excludes learning cards - use getNextCards for actual review "
            "order. IMPORTANT: Deck names with '::' hierarchy need quotes: 'deck:\"Parent::Child\"'. Returns "
            "paginated results"
        ),
        schema=obj(
            query=string().describe("Search query (e.g. 'deck:current', 'deck:Default is:due', 'tag:japanese')"),
            offset=offset_param(),
            limit=limit_param(SEARCH_DEFAULT_LIMIT, SEARCH_MAX_LIMIT, "cards"),
        ),
        handler=find_cards,
    ),
    ToolDef(
        name="getNextCards",
        category="card",
        description=(
            "Gets cards in the exact order they'll appear during review, following Anki's scheduling algorithm. "
            "Priority: 1) Cards in learning (red - failed or recently learned), 2) Review cards due today (green), "
            "3) New cards up to daily limit (blue). Critical for simulating actual review session. Use deck:current "
            "for current deck or provide deck name. Includes suspended:false by default. Returns with scheduling "
            "metadata"
        ),
        schema=obj(
            deck=string().describe("Deck name (or 'current' for current deck)").optional(),
            limit=number().describe(f"Maximum cards to return (default 10, max {NEXT_CARDS_MAX_LIMIT})").default(10),
            offset=number().describe("Starting position for pagination").default(0).optional(),
        ),
        handler=get_next_cards,
    ),
    ToolDef(
        name="cardsInfo",
        category="card",
        description=(
            "Gets comprehensive card information including: cardId, noteId, deckName, modelName, question/answer "
            "HTML, scheduling data (due date, interval, ease factor, reviews, lapses), queue status, modification "
            "time, and more. Essential for understanding card state and history. Automatically handles string/number "
            "ID conversion and paginates large requests. Returns detailed objects for each card"
        ),
        schema=obj(cards=id_list().describe("Card IDs (automatically batched if >100)")),
        handler=cards_info,
    ),
    ToolDef(
        name="suspend",
        category="card",
        description=(
            "Suspends cards, removing them from review queue while preserving all scheduling data. Suspended cards "
            "won't appear in reviews but remain in collection. Useful for temporarily hiding problematic or "
            "irrelevant cards. Can be reversed with unsuspend. Cards show yellow background in browser when suspended"
        ),
        schema=obj(cards=id_list().describe("Card IDs to suspend")),
        id_params=("cards",),
    ),
    ToolDef(
        name="unsuspend",
        category="card",
        description=(
            "Restores suspended cards to active review queue with all scheduling data intact. Cards resume from "
            "where they left off - due cards become immediately due, learning cards continue learning phase. No "
            "scheduling information is lost during suspension period. Returns true on success"
        ),
        schema=obj(cards=id_list().describe("Card IDs to unsuspend")),
        id_params=("cards",),
        null_to_true=True,
    ),
    ToolDef(
        name="getEaseFactors",
        category="card",
        description=(
            "Gets ease factors (difficulty multipliers) for cards. Ease affects interval growth: default 250% (2.5x), "
            "minimum 130%, Hard decreases by 15%, Easy increases by 15%. Lower ease = more frequent reviews. Useful "
            "for identifying difficult cards (ease < 200%) that may need reformulation. Returns array of ease values"
        ),
        schema=obj(cards=id_list().describe("Card IDs")),
        id_params=("cards",),
    ),
    ToolDef(
        name="setEaseFactors",
        category="card",
        description=(
            "Manually sets ease factors for cards. Use with caution - can disrupt spaced repetition algorithm. "
            "Typical range: 130-300%. Setting ease to 250% resets to default. Lower values increase review "
            "frequency, higher values decrease it. Useful for manually adjusting difficult cards. Changes take "
            "effect on next review"
        ),
        schema=obj(
            cards=id_list().describe("Card IDs"),
            easeFactors=array(number()).describe("Ease factors (1.3-2.5)"),
        ),
        id_params=("cards",),
    ),
    ToolDef(
        name="canAddNotes",
        category="card",
        description=(
            "Validates if notes can be added without actually creating them. Checks for: valid model name, valid "
            "deck name, required fields filled, duplicate detection (if not allowing duplicates). Returns array of "
            "booleans matching input array. Essential for validation before bulk operations. True means note can be "
            "added"
        ),
        schema=obj(
            notes=array(
                obj(
                    deckName=string(),
                    modelName=string(),
                    fields=record(string()),
                    tags=array(string()).optional(),
                )
            ).describe("Notes to check"),
        ),
    ),
    ToolDef(
        name="areSuspended",
        category="card",
        description=(
            "Checks suspension status for multiple cards. Returns array of booleans (true=suspended). Order matches "
            "input card ID array. More efficient than cardsInfo for just checking suspension. Useful for filtering "
            "active cards or managing suspended cards in bulk"
        ),
        schema=obj(cards=id_list().describe("Card IDs to check")),
        id_params=("cards",),
    ),
    ToolDef(
        name="areDue",
        category="card",
        description=(
            "Checks if cards are due for review today. Returns array of booleans. Due means: new cards within daily "
            "limit, learning cards ready for next step, or review cards due today or overdue. Does not check "
            "suspension status. Order matches input array. Useful for filtering reviewable cards"
        ),
        schema=obj(cards=id_list().describe("Card IDs to check")),
        id_params=("cards",),
    ),
    ToolDef(
        name="getIntervals",
        category="card",
        description=(
            "Gets current intervals (days until next review) for cards. Returns array of intervals in days. Negative "
            "values indicate cards in learning phase (minutes/hours). Zero means due today. Useful for understanding "
            "card scheduling state and predicting future workload. Order matches input array"
        ),
        schema=obj(
            cards=id_list().describe("Card IDs"),
            complete=boolean().optional().describe("Return complete history"),
        ),
        id_params=("cards",),
    ),
    ToolDef(
        name="cardsToNotes",
        category="card",
        description=(
            "Converts card IDs to their parent note IDs. Multiple cards can belong to same note (e.g., Basic "
            "reversed, Cloze deletions). Returns array of note IDs matching input order. Useful when you have cards "
            "but need to operate on notes. Handles invalid IDs gracefully"
        ),
        schema=obj(cards=id_list().describe("Card IDs")),
        id_params=("cards",),
    ),
    ToolDef(
        name="cardsModTime",
        category="card",
        description=(
            "Gets last modification timestamps for cards in milliseconds since epoch. Much faster than cardsInfo "
            "when you only need modification times (15x speedup). Returns array matching input order. Useful for "
            "sync operations, change detection, or sorting by recent activity"
        ),
        schema=obj(cards=id_list().describe("Card IDs")),
        id_params=("cards",),
    ),
    ToolDef(
        name="answerCards",
        category="card",
        description=(
            "Batch answers multiple cards without GUI. Each answer includes cardId and ease (1-4). Processes cards "
            "as if reviewed normally, updating scheduling. Does not require active review session. Returns array of "
            "booleans indicating success. Useful for automated review or importing review data. Use carefully - "
            "affects learning algorithm"
        ),
        schema=obj(
            answers=array(
                obj(
                    cardId=id_value(),
                    ease=number(min_value=1, max_value=4).describe("1=Again, 2=Hard, 3=Good, 4=Easy"),
                )
            ).describe("Card answers"),
        ),
        handler=answer_cards,
    ),
    ToolDef(
        name="forgetCards",
        category="card",
        description=(
            "Resets cards to 'new' state, clearing all review history and scheduling data. Cards become blue (new) "
            "again. Interval, ease factor, and review count reset. Useful for re-learning forgotten material or "
            "resetting problematic cards. CAUTION: Destroys review history permanently"
        ),
        schema=obj(cards=id_list().describe("Card IDs to reset")),
        id_params=("cards",),
        null_to_true=True,
    ),
    ToolDef(
        name="relearnCards",
        category="card",
        description=(
            "Places cards into relearning queue (similar to pressing Again on mature cards). Cards enter red learning "
            "phase with steps defined in deck config. Preserves ease factor unlike forget. Useful for cards that need "
            "refreshing without complete reset. Returns array of success indicators"
        ),
        schema=obj(cards=id_list().describe("Card IDs")),
        id_params=("cards",),
        null_to_true=True,
    ),
    ToolDef(
        name="setSpecificValueOfCard",
        category="card",
        description=(
            "Directly modifies internal card properties. EXTREME CAUTION: Can break scheduling algorithm if misused. "
            "Keys include: 'due' (due date), 'ease' (ease factor), 'ivl' (interval), 'reps' (review count), 'lapses' "
            "(failure count). Values must match Anki's internal format. For advanced users only. Can cause "
            "unexpected behavior"
        ),
        schema=obj(
            card=id_value().describe("Card ID"),
            keys=array(string()).describe("Field keys to update"),
            newValues=array(string()).describe("New values for keys"),
            warningCheck=boolean().optional().describe("Required for dangerous fields"),
        ),
        handler=set_specific_value_of_card,
    ),
    ToolDef(
        name="getDecks",
        category="card",
        description=(
            "Gets deck names for specified cards. Returns array of deck names matching input card order. Useful for "
            "organizing cards by deck, moving cards between decks, or filtering cards by location. Handles cards "
            "from different decks in single call"
        ),
        schema=obj(cards=id_list().describe("Card IDs")),
        id_params=("cards",),
    ),
    ToolDef(
        name="changeDeck",
        category="card",
        description=(
            "Moves cards to a different deck while preserving all scheduling information. Cards maintain their "
            "review state, intervals, and ease factors. Only deck location changes. Creates deck if it doesn't "
            "exist. Useful for reorganizing without losing progress. Returns success status"
        ),
        schema=obj(
            cards=id_list().describe("Card IDs to move"),
            deck=string().describe("Target deck name"),
        ),
        id_params=("cards",),
        null_to_true=True,
    ),
]
