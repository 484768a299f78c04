"""Tests for mankey.core.exceptions."""

from __future__ import annotations

from mankey.core.exceptions import AnkiConnectError, ConfigException, MankeyException, ValidationException


class TestMankeyException:
    def test_to_dict(self):
        error = MankeyException("boom", {"key": "value"})
        assert str(error) == "boom"
        assert error.to_dict() == {"error": "MankeyException", "message": "boom", "details": {"key": "value"}}

    def test_details_default_empty(self):
        assert MankeyException("boom").details == {}


class TestAnkiConnectError:
    def test_carries_action(self):
        error = AnkiConnectError("deckNames", "deckNames: collection is not available")
        assert isinstance(error, MankeyException)
        assert error.action == "deckNames"
        assert error.to_dict()["details"] == {"action": "deckNames"}


class TestValidationException:
    def test_issues_in_details(self):
        issues = [{"path": "query", "message": "Field required"}]
        error = ValidationException("query: Field required", issues=issues)
        assert error.issues == issues
        assert error.details == {"issues": issues}

    def test_field_becomes_single_issue(self):
        error = ValidationException("Invalid note format", field="notes.0", value="{bad")
        assert error.issues == [{"path": "notes.0", "message": "Invalid note format"}]
        assert error.details["value"] == "{bad"


class TestConfigException:
    def test_is_mankey_exception(self):
        assert isinstance(ConfigException("bad url"), MankeyException)
