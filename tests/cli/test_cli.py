"""Tests for the mankey command-line interface."""

from __future__ import annotations

import importlib
import json

import pytest
from helpers import FakeAnkiClient

from mankey.cli.main import app, main

# mankey.cli re-exports main(), which shadows the submodule as an attribute
cli_main_module = importlib.import_module("mankey.cli.main")


@pytest.fixture
def cli_client(monkeypatch) -> FakeAnkiClient:
    """FakeAnkiClient used by every command; logging left untouched."""
    client = FakeAnkiClient()
    monkeypatch.setattr("mankey.cli.utils.AnkiConnectClient", lambda settings: client)
    monkeypatch.setattr(cli_main_module, "configure_logging", lambda settings: None)
    return client


class TestParser:
    def test_global_options(self):
        args = app().parse_args(["--url", "http://remote:1", "--timeout", "5", "deck", "list"])
        assert args.url == "http://remote:1"
        assert args.timeout == 5.0
        assert args.command == "deck"

    def test_no_command_is_allowed(self):
        assert app().parse_args([]).command is None

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            app().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "mankey 1.1.0" in capsys.readouterr().out

    def test_no_command_starts_server(self, monkeypatch, cli_client):
        started = []

        async def fake_serve(settings):
            started.append(settings.url)

        monkeypatch.setattr(cli_main_module, "serve", fake_serve)
        assert main(["--url", "http://remote:1"]) == 0
        assert started == ["http://remote:1"]

    def test_logging_configured_from_flags(self, monkeypatch, cli_client):
        configured = []
        monkeypatch.setattr(cli_main_module, "configure_logging", lambda settings: configured.append(settings))
        assert main(["--log-level", "debug", "tools"]) == 0
        assert [s.effective_log_level for s in configured] == ["DEBUG"]

    def test_invalid_timeout_flag_reported(self, cli_client, capsys, monkeypatch):
        monkeypatch.setenv("ANKI_CONNECT_TIMEOUT", "soon")
        assert main(["tools"]) == 1
        assert capsys.readouterr().err.startswith("Error: Invalid configuration")


class TestRunCommand:
    def test_runs_tool_with_json(self, cli_client, capsys):
        cli_client.responses["findNotes"] = [1, 2, 3]
        assert main(["run", "findNotes", '{"query": "deck:Default", "limit": 2}']) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["notes"] == [1, 2]
        assert output["pagination"]["nextOffset"] == 2

    def test_no_arguments(self, cli_client, capsys):
        cli_client.responses["version"] = 6
        assert main(["run", "version"]) == 0
        assert capsys.readouterr().out.strip() == "6"

    def test_unknown_tool(self, cli_client, capsys):
        assert main(["run", "nope"]) == 1
        err = capsys.readouterr().err
        assert 'Error: Unknown tool "nope"' in err
        assert "mankey tools" in err
        assert cli_client.calls == []

    def test_invalid_json(self, cli_client, capsys):
        assert main(["run", "findNotes", "{query"]) == 1
        assert "Error: Invalid JSON argument:" in capsys.readouterr().err

    def test_validation_issues_listed(self, cli_client, capsys):
        assert main(["run", "answerCards", '{"answers": [{"cardId": 1, "ease": 7}]}']) == 1
        err = capsys.readouterr().err.splitlines()
        assert err[0] == 'Validation error for "answerCards":'
        assert err[1].startswith("  answers.0.ease: ")

    def test_remote_error(self, cli_client, capsys):
        cli_client.errors["createDeck"] = "collection is not available"
        assert main(["run", "createDeck", '{"deck": "X"}']) == 1
        assert capsys.readouterr().err.strip() == "Error: createDeck: collection is not available"


class TestToolsCommand:
    def test_lists_by_category(self, cli_client, capsys):
        assert main(["tools"]) == 0
        out = capsys.readouterr().out
        assert "\nDECK (6 tools):" in out
        assert "  deckNames" in out
        assert out.rstrip().endswith("Total: 96 tools")

    def test_category_filter_json(self, cli_client, capsys):
        assert main(["tools", "--category", "media", "--json"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["total"] == 5
        assert {tool["category"] for tool in output["tools"]} == {"media"}
        assert output["tools"][0] == {
            "name": "storeMediaFile",
            "category": "media",
            "description": "Stores a media file in Anki's media folder",
        }

    def test_unknown_category(self, cli_client, capsys):
        assert main(["tools", "--category", "bogus"]) == 1
        err = capsys.readouterr().err
        assert 'Unknown category "bogus"' in err
        assert "deck, note, card" in err


class TestDomainCommands:
    def test_deck_list(self, cli_client, capsys):
        cli_client.responses["deckNames"] = ["Default"]
        assert main(["deck", "list"]) == 0
        assert json.loads(capsys.readouterr().out)["decks"] == ["Default"]
        assert cli_client.calls == [("deckNames", {})]

    def test_deck_delete(self, cli_client):
        cli_client.responses["deleteDecks"] = None
        assert main(["deck", "delete", "Old", "Older"]) == 0
        assert cli_client.calls == [("deleteDecks", {"decks": ["Old", "Older"], "cardsToo": True})]

    def test_note_add(self, cli_client):
        cli_client.responses["addNote"] = 1
        argv = ["note", "add", "--deck", "D", "--model", "Basic", "--front", "a", "--back", "b", "--tags", "x, y"]
        assert main(argv) == 0
        note = cli_client.calls[0][1]["note"]
        assert note["fields"] == {"Front": "a", "Back": "b"}
        assert note["tags"] == ["x", "y"]
        assert note["options"] == {"allowDuplicate": False}

    def test_note_update_bad_fields_json(self, cli_client, capsys):
        assert main(["note", "update", "5", "--fields", "{oops"]) == 1
        assert "Invalid JSON for --fields" in capsys.readouterr().err
        assert cli_client.calls == []

    def test_note_tags(self, cli_client, capsys):
        cli_client.responses["getNoteTags"] = ["vocab"]
        assert main(["note", "tags", "42"]) == 0
        assert cli_client.calls == [("getNoteTags", {"note": 42})]

    def test_card_answer(self, cli_client):
        cli_client.responses["answerCards"] = [True]
        assert main(["card", "answer", "99", "3"]) == 0
        assert cli_client.calls == [("answerCards", {"answers": [{"cardId": 99, "ease": 3}]})]

    def test_card_suspend(self, cli_client):
        cli_client.responses["suspend"] = True
        assert main(["card", "suspend", "1", "2"]) == 0
        assert cli_client.calls == [("suspend", {"cards": [1, 2]})]

    def test_card_next(self, cli_client, capsys):
        cli_client.responses["findCards"] = []
        assert main(["card", "next", "--deck", "Japanese", "--limit", "5"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["message"] == "No cards due for review"
        assert cli_client.calls_for("findCards")[0] == {"query": 'deck:"Japanese" (queue:1 OR queue:3)'}

    def test_model_fields(self, cli_client, capsys):
        cli_client.responses["modelFieldNames"] = ["Front", "Back"]
        assert main(["model", "fields", "Basic"]) == 0
        assert json.loads(capsys.readouterr().out) == ["Front", "Back"]

    def test_stats_due(self, cli_client, capsys):
        cli_client.responses["findCards"] = []
        assert main(["stats", "due", "--limit", "20"]) == 0
        assert json.loads(capsys.readouterr().out)["pagination"]["limit"] == 20

    def test_stats_collection(self, cli_client):
        cli_client.responses["getCollectionStatsHTML"] = "<html/>"
        assert main(["stats", "collection"]) == 0
        assert cli_client.calls == [("getCollectionStatsHTML", {"wholeCollection": True})]
