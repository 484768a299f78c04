"""Test doubles shared across the Mankey test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mankey.core.exceptions import AnkiConnectError

Responder = Callable[[dict[str, Any]], Any]


class FakeAnkiClient:
    """Stands in for ``AnkiConnectClient`` and records every call.

    ``responses`` maps an action to its result, or to a callable taking the
    request params. ``errors`` maps an action to the message of an
    ``AnkiConnectError`` raised for it.
    """

    def __init__(
        self,
        responses: dict[str, Any] | None = None,
        errors: dict[str, str] | None = None,
    ):
        self.responses: dict[str, Any] = dict(responses or {})
        self.errors: dict[str, str] = dict(errors or {})
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def invoke(self, action: str, params: dict[str, Any] | None = None) -> Any:
        params = dict(params or {})
        self.calls.append((action, params))
        if action in self.errors:
            raise AnkiConnectError(action, f"{action}: {self.errors[action]}")
        response = self.responses.get(action)
        if callable(response):
            return response(params)
        return response

    def calls_for(self, action: str) -> list[dict[str, Any]]:
        return [params for name, params in self.calls if name == action]

    @property
    def actions(self) -> list[str]:
        return [name for name, _ in self.calls]

    async def check_connection(self) -> bool:
        return "version" not in self.errors

    async def __aenter__(self) -> FakeAnkiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


def by_query(results: dict[str, list[Any]]) -> Responder:
    """``findCards``/``findNotes`` responder keyed by the search query."""
    return lambda params: list(results.get(params.get("query", ""), []))


def cards_by_id(records: dict[int, dict[str, Any]]) -> Responder:
    """``cardsInfo`` responder returning the records for the requested ids, in order."""
    return lambda params: [records[card_id] for card_id in params["cards"] if card_id in records]
