"""Tests for note tools."""

from __future__ import annotations

import pytest
from helpers import FakeAnkiClient

from mankey.core.exceptions import ValidationException
from mankey.tools import TOOLS


class TestAddNote:
    async def test_builds_note_payload(self):
        client = FakeAnkiClient({"addNote": 1496198395707})
        result = await TOOLS["addNote"].call(
            client,
            {
                "deckName": "Japanese",
                "modelName": "Basic",
                "fields": {"Front": "猫", "Back": "cat"},
                "tags": "vocab n5",
            },
        )

        assert result == 1496198395707
        assert client.calls == [
            (
                "addNote",
                {
                    "note": {
                        "deckName": "Japanese",
                        "modelName": "Basic",
                        "fields": {"Front": "猫", "Back": "cat"},
                        "tags": ["vocab", "n5"],
                        "options": {"allowDuplicate": False},
                    }
                },
            )
        ]

    async def test_allow_duplicate(self):
        client = FakeAnkiClient({"addNote": 1})
        await TOOLS["addNote"].call(
            client,
            {"deckName": "D", "modelName": "Basic", "fields": {"Front": "a"}, "tags": ["x"], "allowDuplicate": True},
        )
        note = client.calls[0][1]["note"]
        assert note["tags"] == ["x"]
        assert note["options"] == {"allowDuplicate": True}

    async def test_fields_must_be_strings(self):
        with pytest.raises(ValidationException) as exc_info:
            await TOOLS["addNote"].call(FakeAnkiClient(), {"deckName": "D", "modelName": "M", "fields": {"Front": 1}})
        assert exc_info.value.issues[0]["path"] == "fields.Front"


class TestAddNotes:
    async def test_accepts_objects_and_json_strings(self):
        client = FakeAnkiClient({"addNotes": [1, None]})
        result = await TOOLS["addNotes"].call(
            client,
            {
                "notes": [
                    {"deckName": "D", "modelName": "Basic", "fields": {"Front": "a"}, "tags": ["t"]},
                    '{"deckName": "D", "modelName": "Basic", "fields": {"Front": "b"}, "tags": "x y"}',
                ]
            },
        )

        assert result == [1, None]
        notes = client.calls[0][1]["notes"]
        assert notes[0] == {"deckName": "D", "modelName": "Basic", "fields": {"Front": "a"}, "tags": ["t"]}
        assert notes[1]["fields"] == {"Front": "b"}
        assert notes[1]["tags"] == ["x", "y"]

    async def test_invalid_json_note(self):
        client = FakeAnkiClient()
        with pytest.raises(ValidationException) as exc_info:
            await TOOLS["addNotes"].call(client, {"notes": ["{not json"]})
        assert exc_info.value.issues == [{"path": "notes.0", "message": "Invalid note format"}]
        assert client.calls == []


class TestFindNotes:
    async def test_paginates_with_notes_key(self):
        client = FakeAnkiClient({"findNotes": [10, 20, 30]})
        result = await TOOLS["findNotes"].call(client, {"query": "tag:vocab", "offset": 1, "limit": 1})
        assert result == {
            "notes": [20],
            "pagination": {"offset": 1, "limit": 1, "total": 3, "hasMore": True, "nextOffset": 2},
        }

    async def test_errors_swallowed(self):
        client = FakeAnkiClient(errors={"findNotes": "bad query"})
        result = await TOOLS["findNotes"].call(client, {"query": "("})
        assert result["notes"] == []
        assert result["pagination"]["total"] == 0


class TestUpdateNote:
    async def test_fields_only(self):
        client = FakeAnkiClient({"updateNote": None})
        assert await TOOLS["updateNote"].call(client, {"id": "123", "fields": {"Back": "dog"}}) is True
        assert client.calls == [("updateNote", {"note": {"id": 123, "fields": {"Back": "dog"}}})]

    async def test_tags_only(self):
        client = FakeAnkiClient({"updateNote": None})
        await TOOLS["updateNote"].call(client, {"id": 5, "tags": "a b"})
        assert client.calls == [("updateNote", {"note": {"id": 5, "tags": ["a", "b"]}})]


class TestNotesInfo:
    async def test_batched_with_notes_key(self):
        client = FakeAnkiClient({"notesInfo": lambda params: [{"noteId": n} for n in params["notes"]]})
        result = await TOOLS["notesInfo"].call(client, {"notes": list(range(250))})
        assert len(result["notes"]) == 250
        assert result["metadata"]["batches"] == 3


class TestTagTools:
    async def test_get_tags_paginated(self):
        client = FakeAnkiClient({"getTags": ["a", "b", "c"]})
        result = await TOOLS["getTags"].call(client, {"limit": 2})
        assert result["tags"] == ["a", "b"]
        assert result["pagination"]["hasMore"] is True

    async def test_get_note_tags_normalises_id(self):
        client = FakeAnkiClient({"getNoteTags": ["vocab"]})
        assert await TOOLS["getNoteTags"].call(client, {"note": "77"}) == ["vocab"]
        assert client.calls == [("getNoteTags", {"note": 77})]

    async def test_replace_tags_wire_names(self):
        client = FakeAnkiClient({"replaceTags": None})
        result = await TOOLS["replaceTags"].call(
            client, {"notes": ["1", 2], "tagToReplace": "old", "replaceWithTag": "new"}
        )
        assert result is True
        assert client.calls == [
            ("replaceTags", {"notes": [1, 2], "tag_to_replace": "old", "replace_with_tag": "new"})
        ]

    async def test_clear_unused_tags(self):
        client = FakeAnkiClient({"clearUnusedTags": None})
        assert await TOOLS["clearUnusedTags"].call(client, {}) is True
        assert client.calls == [("clearUnusedTags", {})]

    async def test_delete_notes(self):
        client = FakeAnkiClient({"deleteNotes": None})
        assert await TOOLS["deleteNotes"].call(client, {"notes": ["3"]}) is True
        assert client.calls == [("deleteNotes", {"notes": [3]})]

    async def test_update_note_fields(self):
        client = FakeAnkiClient({"updateNoteFields": None})
        await TOOLS["updateNoteFields"].call(client, {"note": {"id": "9", "fields": {"Front": "x"}}})
        assert client.calls == [("updateNoteFields", {"note": {"id": 9, "fields": {"Front": "x"}}})]
