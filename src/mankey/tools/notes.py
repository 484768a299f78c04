# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Note tools."""

from __future__ import annotations

import json
import logging
from typing import Any

from ..core.batching import dispatch_batched
from ..core.client import AnkiConnectClient
from ..core.exceptions import ValidationException
from ..core.normalize import normalize_fields, normalize_id, normalize_ids, normalize_success, normalize_tags
from ..core.pagination import fetch_page
from ..core.schema import array, boolean, id_list, id_value, obj, record, string, union
from .base import ToolDef, limit_param, offset_param

logger = logging.getLogger(__name__)

SEARCH_DEFAULT_LIMIT = 100
SEARCH_MAX_LIMIT = 1000
LISTING_DEFAULT_LIMIT = 1000
LISTING_MAX_LIMIT = 10000


def _parse_note(note: Any, index: int) -> dict[str, Any]:
    if isinstance(note, str):
        try:
            note = json.loads(note)
        except json.JSONDecodeError as e:
            raise ValidationException("Invalid note format", field=f"notes.{index}", value=note) from e
        if not isinstance(note, dict):
            raise ValidationException("Invalid note format", field=f"notes.{index}", value=note)
    if note.get("tags"):
        note["tags"] = normalize_tags(note["tags"])
    return note


async def add_notes(client: AnkiConnectClient, notes: list[Any]) -> Any:
    """Add notes given as objects or JSON strings; returns ids, null for failures."""
    parsed = [_parse_note(note, index) for index, note in enumerate(notes)]
    return await client.invoke("addNotes", {"notes": parsed})


async def add_note(
    client: AnkiConnectClient,
    deck_name: str,
    model_name: str,
    fields: dict[str, str],
    tags: list[str] | str | None = None,
    allow_duplicate: bool | None = None,
) -> Any:
    note = {
        "deckName": deck_name,
        "modelName": model_name,
        "fields": fields,
        "tags": normalize_tags(tags) if tags else [],
        "options": {"allowDuplicate": bool(allow_duplicate)},
    }
    return await client.invoke("addNote", {"note": note})


async def find_notes(
    client: AnkiConnectClient,
    query: str,
    offset: int = 0,
    limit: int = SEARCH_DEFAULT_LIMIT,
) -> dict[str, Any]:
    page = await fetch_page(
        client,
        "findNotes",
        {"query": query},
        offset=offset,
        limit=limit,
        max_limit=SEARCH_MAX_LIMIT,
        swallow_errors=True,
    )
    return page.to_dict("notes")


async def update_note(
    client: AnkiConnectClient,
    id: int | str,
    fields: dict[str, str] | None = None,
    tags: list[str] | str | None = None,
) -> Any:
    """Update fields and/or replace tags. Only the parts supplied are sent."""
    note: dict[str, Any] = {"id": normalize_id(id)}
    normalized_fields = normalize_fields(fields)
    if normalized_fields:
        note["fields"] = normalized_fields
    if tags:
        note["tags"] = normalize_tags(tags)
    logger.debug("updateNote payload", extra={"extra_data": note})
    return normalize_success(await client.invoke("updateNote", {"note": note}))


async def notes_info(client: AnkiConnectClient, notes: list[int | str]) -> Any:
    return await dispatch_batched(client, "notesInfo", "notes", notes, result_key="notes")


async def get_tags(client: AnkiConnectClient, offset: int = 0, limit: int = LISTING_DEFAULT_LIMIT) -> dict[str, Any]:
    page = await fetch_page(client, "getTags", offset=offset, limit=limit, max_limit=LISTING_MAX_LIMIT)
    return page.to_dict("tags")


async def update_note_fields(client: AnkiConnectClient, note: dict[str, Any]) -> Any:
    payload = {"id": normalize_id(note["id"]), "fields": note["fields"]}
    return normalize_success(await client.invoke("updateNoteFields", {"note": payload}))


async def replace_tags(
    client: AnkiConnectClient,
    notes: list[int | str],
    tag_to_replace: str,
    replace_with_tag: str,
) -> Any:
    result = await client.invoke(
        "replaceTags",
        {
            "notes": normalize_ids(notes),
            "tag_to_replace": tag_to_replace,
            "replace_with_tag": replace_with_tag,
        },
    )
    return normalize_success(result)


async def replace_tags_in_all_notes(client: AnkiConnectClient, tag_to_replace: str, replace_with_tag: str) -> Any:
    result = await client.invoke(
        "replaceTagsInAllNotes",
        {"tag_to_replace": tag_to_replace, "replace_with_tag": replace_with_tag},
    )
    return normalize_success(result)


_NOTE_OBJECT = obj(
    deckName=string(),
    modelName=string(),
    fields=record(string()),
    tags=array(string()).optional(),
    options=obj(allowDuplicate=boolean().optional()).optional(),
)

NOTE_TOOLS = [
    ToolDef(
        name="addNotes",
        category="note",
        description=(
            "Bulk create multiple notes in a single operation. Each note creates one or more cards based on the "
            "model's templates. Returns array of note IDs (null for failures). More efficient than multiple addNote "
            "calls. Duplicates return null unless allowDuplicate=true. Note: Fields must match the model's field "
            "names exactly"
        ),
        schema=obj(notes=array(union(_NOTE_OBJECT, string()))),
        handler=add_notes,
    ),
    ToolDef(
        name="addNote",
        category="note",
        description=(
            "Creates a single note (fact) which generates cards based on the model's templates. Basic model creates "
            "1 card, Cloze can create many. Returns the new note ID. Fields must match the model exactly "
            "(case-sensitive). Common models: 'Basic' (Front/Back), 'Basic (and reversed card)' (Front/Back, creates "
            "2 cards), 'Cloze' (Text/Extra, use {{c1::text}}). Tags are passed as an array of strings. IMPORTANT: "
            "Field names are case-sensitive and must exactly match the model's field names. Use modelFieldNames to "
            "check exact field names first"
        ),
        schema=obj(
            deckName=string().describe("Target deck"),
            modelName=string().describe("Note type (e.g., 'Basic', 'Cloze')"),
            fields=record(string()).describe("Field content"),
            tags=union(array(string()), string()).optional().describe("Tags"),
            allowDuplicate=boolean().optional().describe("Allow duplicates"),
        ),
        handler=add_note,
    ),
    ToolDef(
        name="findNotes",
        category="note",
        description=(
            "Search for notes using Anki's powerful query syntax. Returns note IDs matching the query. Common "
            "queries: 'deck:DeckName' (notes in deck), 'tag:tagname' (tagged notes), 'is:new' (new notes), 'is:due' "
            "(notes with due cards), 'added:7' (added in last 7 days), 'front:text' (search Front field), '*' (all "
            "notes). Combine with AND/OR. IMPORTANT: Deck names with '::' hierarchy need quotes: "
            "'deck:\"Parent::Child\"'. Returns paginated results for large collections. Note: Returns notes, not cards"
        ),
        schema=obj(
            query=string().describe("Search query (e.g., 'deck:current', 'deck:Default', 'tag:vocab')"),
            offset=offset_param(),
            limit=limit_param(SEARCH_DEFAULT_LIMIT, SEARCH_MAX_LIMIT, "notes"),
        ),
        handler=find_notes,
    ),
    ToolDef(
        name="updateNote",
        category="note",
        description=(
            "Updates an existing note's fields and/or tags. Only provided fields are updated, others remain "
            "unchanged. Field names must match the model exactly. Tags array replaces all existing tags (not "
            "additive). Changes affect all cards generated from this note. Updates modification time. Note: Changing "
            "fields that affect card generation may reset card scheduling. IMPORTANT: Field names are case-sensitive. "
            "Use notesInfo first to check current field names. Returns true on success"
        ),
        schema=obj(
            id=id_value().describe("Note ID"),
            fields=record(string()).optional().describe("Fields to update"),
            tags=union(array(string()), string()).optional().describe("New tags"),
        ),
        handler=update_note,
    ),
    ToolDef(
        name="deleteNotes",
        category="note",
        description=(
            "Permanently deletes notes and all their associated cards. CAUTION: This is irreversible. Cards' review "
            "history is also deleted. Deletion is immediate and cannot be undone. Use suspend instead if you might "
            "need the notes later. Accepts array of note IDs. Returns true on success"
        ),
        schema=obj(notes=id_list().describe("Note IDs to delete")),
        id_params=("notes",),
        null_to_true=True,
    ),
    ToolDef(
        name="notesInfo",
        category="note",
        description=(
            "Gets comprehensive information about notes including: noteId, modelName, tags array, all fields with "
            "their values and order, cards array (IDs of all cards from this note), and modification time. Essential "
            "for displaying or editing notes. Automatically paginates large requests to handle bulk operations "
            "efficiently. Returns null for non-existent notes"
        ),
        schema=obj(notes=id_list().describe("Note IDs (automatically batched if >100)")),
        handler=notes_info,
    ),
    ToolDef(
        name="getTags",
        category="note",
        description=(
            "Gets all unique tags used across the entire collection. Tags are hierarchical using '::' separator "
            "(e.g., 'japanese::grammar'). Returns flat list of all tags including parent and child tags separately. "
            "Useful for tag management, autocomplete, or finding unused tags. Returns paginated results for "
            "collections with many tags"
        ),
        schema=obj(
            offset=offset_param(),
            limit=limit_param(LISTING_DEFAULT_LIMIT, LISTING_MAX_LIMIT, "tags"),
        ),
        handler=get_tags,
    ),
    ToolDef(
        name="addTags",
        category="note",
        description=(
            "Adds tags to existing notes without affecting existing tags (additive operation). Tags are "
            "space-separated in Anki but passed as a single string here. Use double quotes for tags with spaces. "
            "Hierarchical tags supported with '::'. Updates modification time. Does not validate tag names - be "
            "consistent with naming"
        ),
        schema=obj(
            notes=id_list().describe("Note IDs"),
            tags=string().describe("Space-separated tags"),
        ),
        id_params=("notes",),
    ),
    ToolDef(
        name="removeTags",
        category="note",
        description=(
            "Removes specific tags from notes while preserving other tags. Tags parameter is space-separated string. "
            "Only removes exact matches - won't remove child tags when removing parent. Updates modification time. "
            "Safe operation - removing non-existent tags has no effect"
        ),
        schema=obj(
            notes=id_list().describe("Note IDs"),
            tags=string().describe("Space-separated tags"),
        ),
        id_params=("notes",),
    ),
    ToolDef(
        name="updateNoteFields",
        category="note",
        description=(
            "Updates only the field values of a note, leaving tags unchanged. Simpler than updateNote when you only "
            "need to modify content. Fields object can be partial - unspecified fields remain unchanged. Updates "
            "modification time. Changes reflected in all cards from this note"
        ),
        schema=obj(note=obj(id=id_value(), fields=record(string()))),
        handler=update_note_fields,
    ),
    ToolDef(
        name="getNoteTags",
        category="note",
        description=(
            "Gets tags for specified notes. Returns array of tag arrays matching input note order. Each note's tags "
            "returned as array of strings. More efficient than notesInfo when you only need tags. Useful for tag "
            "analysis or bulk tag operations"
        ),
        schema=obj(note=id_value().describe("Note ID")),
        id_params=("note",),
    ),
    ToolDef(
        name="clearUnusedTags",
        category="note",
        description=(
            "Removes all tags from the tag list that aren't assigned to any notes. Cleans up tag autocomplete and "
            "tag browser. Safe operation - only removes truly unused tags. Useful after bulk deletions or tag "
            "reorganization. No effect on notes"
        ),
        schema=obj(),
        null_to_true=True,
    ),
    ToolDef(
        name="replaceTags",
        category="note",
        description=(
            "Replaces specific tags in selected notes. Only affects notes that have the tag_to_replace. Atomic "
            "operation - all specified notes updated together. Case-sensitive tag matching. Useful for renaming tags "
            "on subset of notes or fixing typos"
        ),
        schema=obj(
            notes=id_list().describe("Note IDs"),
            tagToReplace=string().describe("Tag to replace"),
            replaceWithTag=string().describe("Replacement tag"),
        ),
        handler=replace_tags,
    ),
    ToolDef(
        name="replaceTagsInAllNotes",
        category="note",
        description=(
            "Globally replaces a tag across entire collection. Affects all notes with the specified tag. More "
            "efficient than replaceTags for collection-wide changes. Case-sensitive matching. Instant operation even "
            "on large collections. Useful for standardizing tag names or merging similar tags"
        ),
        schema=obj(
            tagToReplace=string().describe("Tag to replace"),
            replaceWithTag=string().describe("Replacement tag"),
        ),
        handler=replace_tags_in_all_notes,
    ),
    ToolDef(
        name="removeEmptyNotes",
        category="note",
        description=(
            "Deletes all notes that have no associated cards (orphaned notes). Can occur when all cards deleted via "
            "templates or manual deletion. Cleans up database. Returns count of deleted notes. Safe operation - only "
            "removes truly empty notes. Run periodically for maintenance"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="notesModTime",
        category="note",
        description=(
            "Gets last modification timestamps for notes in seconds since epoch. Returns array matching input order. "
            "More efficient than notesInfo for just timestamps. Useful for sync operations, change detection, or "
            "finding recently edited notes"
        ),
        schema=obj(notes=id_list().describe("Note IDs")),
        id_params=("notes",),
    ),
]
