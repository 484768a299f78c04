"""Tests for mankey.core.pagination."""

from __future__ import annotations

import pytest
from helpers import FakeAnkiClient

from mankey.core.exceptions import AnkiConnectError
from mankey.core.pagination import PageResult, empty_page, fetch_page, paginate


class TestPaginate:
    def test_first_page(self):
        page = paginate(list(range(250)), offset=0, limit=100, max_limit=1000)
        assert page.items == list(range(100))
        assert page.total == 250
        assert page.has_more is True
        assert page.next_offset == 100

    def test_last_page(self):
        page = paginate(list(range(250)), offset=200, limit=100, max_limit=1000)
        assert page.items == list(range(200, 250))
        assert page.has_more is False
        assert page.next_offset is None

    def test_exact_boundary_has_no_more(self):
        page = paginate(list(range(100)), offset=0, limit=100, max_limit=1000)
        assert len(page.items) == 100
        assert page.has_more is False
        assert page.next_offset is None

    def test_offset_past_end(self):
        page = paginate([1, 2, 3], offset=10, limit=5, max_limit=100)
        assert page.items == []
        assert page.total == 3
        assert page.has_more is False
        assert page.next_offset is None

    def test_limit_capped_at_ceiling(self):
        page = paginate(list(range(5000)), offset=0, limit=5000, max_limit=1000)
        assert page.limit == 1000
        assert len(page.items) == 1000
        assert page.next_offset == 1000

    @pytest.mark.parametrize(
        ("offset", "limit", "total"),
        [(0, 1, 0), (0, 10, 3), (2, 2, 5), (4, 2, 5), (5, 2, 5), (7, 3, 5), (0, 2000, 1500)],
    )
    def test_window_invariants(self, offset, limit, total):
        max_limit = 1000
        page = paginate(list(range(total)), offset=offset, limit=limit, max_limit=max_limit)
        effective = min(limit, max_limit)
        assert len(page.items) == min(effective, max(0, total - offset))
        assert page.has_more == (offset + effective < total)
        assert page.next_offset == (offset + effective if page.has_more else None)

    def test_mapping_is_windowed_over_entries(self):
        decks = {"Default": 1, "Japanese": 2, "Spanish": 3}
        page = paginate(decks, offset=1, limit=1, max_limit=100)
        assert page.items == {"Japanese": 2}
        assert page.total == 3
        assert page.next_offset == 2

    def test_non_sequence_counts_as_empty(self):
        page = paginate(None, offset=0, limit=10, max_limit=100)
        assert page.items == []
        assert page.total == 0
        assert page.has_more is False

    def test_float_window_values_are_truncated(self):
        page = paginate(list(range(10)), offset=2.0, limit=3.0, max_limit=100)
        assert page.items == [2, 3, 4]
        assert page.offset == 2
        assert page.limit == 3


class TestPageResult:
    def test_pagination_keys(self):
        page = paginate(["a", "b", "c"], offset=0, limit=2, max_limit=10)
        assert page.pagination() == {"offset": 0, "limit": 2, "total": 3, "hasMore": True, "nextOffset": 2}

    def test_to_dict(self):
        page = PageResult(items=["Default"], offset=0, limit=10, total=1, has_more=False, next_offset=None)
        assert page.to_dict("decks") == {
            "decks": ["Default"],
            "pagination": {"offset": 0, "limit": 10, "total": 1, "hasMore": False, "nextOffset": None},
        }

    def test_empty_page_applies_ceiling(self):
        page = empty_page(offset=20, limit=5000, max_limit=1000)
        assert page.items == []
        assert page.limit == 1000
        assert page.offset == 20
        assert page.total == 0


class TestFetchPage:
    async def test_invokes_once_and_slices(self):
        client = FakeAnkiClient({"findCards": list(range(30))})
        page = await fetch_page(client, "findCards", {"query": "deck:Default"}, offset=10, limit=5, max_limit=100)
        assert page.items == [10, 11, 12, 13, 14]
        assert client.calls == [("findCards", {"query": "deck:Default"})]

    async def test_swallowed_error_gives_empty_page(self):
        client = FakeAnkiClient(errors={"findNotes": "invalid search"})
        page = await fetch_page(
            client, "findNotes", {"query": "("}, offset=0, limit=100, max_limit=1000, swallow_errors=True
        )
        assert page.items == []
        assert page.total == 0
        assert page.has_more is False
        assert page.next_offset is None

    async def test_swallowed_error_is_logged(self, caplog):
        client = FakeAnkiClient(errors={"findNotes": "invalid search"})
        with caplog.at_level("WARNING", logger="mankey.core.pagination"):
            await fetch_page(client, "findNotes", offset=0, limit=10, max_limit=100, swallow_errors=True)
        assert "findNotes failed" in caplog.text

    async def test_error_propagates_by_default(self):
        client = FakeAnkiClient(errors={"deckNames": "collection is not available"})
        with pytest.raises(AnkiConnectError) as exc_info:
            await fetch_page(client, "deckNames", offset=0, limit=100, max_limit=1000)
        assert exc_info.value.action == "deckNames"
