"""Tests for mankey.core.batching."""

from __future__ import annotations

import math

import pytest
from helpers import FakeAnkiClient

from mankey.core import batching
from mankey.core.batching import BATCH_SIZE, dispatch_batched, plan_batches


def _echo_info(params):
    return [{"cardId": card_id} for card_id in params["cards"]]


class TestPlanBatches:
    def test_chunks_are_contiguous_and_ordered(self):
        plan = plan_batches(list(range(250)))
        assert [len(chunk) for chunk in plan.chunks] == [100, 100, 50]
        assert [card_id for chunk in plan.chunks for card_id in chunk] == list(range(250))
        assert plan.is_batched

    def test_at_threshold_is_not_batched(self):
        plan = plan_batches(list(range(BATCH_SIZE)))
        assert len(plan.chunks) == 1
        assert not plan.is_batched

    def test_empty(self):
        plan = plan_batches([])
        assert plan.chunks == ()
        assert plan.total == 0

    def test_rejects_non_positive_batch_size(self):
        with pytest.raises(ValueError):
            plan_batches([1, 2], batch_size=0)

    def test_public_names(self):
        assert sorted(batching.__all__) == ["BATCH_SIZE", "BatchPlan", "dispatch_batched", "plan_batches"]
        assert not hasattr(batching, "normalize_id")


class TestDispatchBatched:
    async def test_small_list_single_call_bare_result(self):
        client = FakeAnkiClient({"cardsInfo": _echo_info})
        result = await dispatch_batched(client, "cardsInfo", "cards", list(range(100)), result_key="cards")
        assert isinstance(result, list)
        assert len(result) == 100
        assert len(client.calls) == 1

    async def test_one_over_threshold_is_batched(self):
        client = FakeAnkiClient({"cardsInfo": _echo_info})
        result = await dispatch_batched(client, "cardsInfo", "cards", list(range(101)), result_key="cards")
        assert [len(params["cards"]) for params in client.calls_for("cardsInfo")] == [100, 1]
        assert result["metadata"] == {"total": 101, "batches": 2, "batchSize": 100}

    async def test_250_ids(self):
        client = FakeAnkiClient({"notesInfo": lambda params: [{"noteId": n} for n in params["notes"]]})
        ids = list(range(1, 251))
        result = await dispatch_batched(client, "notesInfo", "notes", ids, result_key="notes")

        calls = client.calls_for("notesInfo")
        assert [len(params["notes"]) for params in calls] == [100, 100, 50]
        assert calls[0]["notes"][0] == 1
        assert calls[2]["notes"][-1] == 250
        assert [note["noteId"] for note in result["notes"]] == ids
        assert result["metadata"] == {"total": 250, "batches": 3, "batchSize": 100}

    async def test_ids_are_normalised(self):
        client = FakeAnkiClient({"cardsInfo": _echo_info})
        await dispatch_batched(client, "cardsInfo", "cards", ["12", 34, "56abc"])
        assert client.calls == [("cardsInfo", {"cards": [12, 34, 56]})]

    async def test_unparseable_id_becomes_nan(self):
        client = FakeAnkiClient({"cardsInfo": []})
        await dispatch_batched(client, "cardsInfo", "cards", ["abc"])
        assert math.isnan(client.calls[0][1]["cards"][0])

    async def test_null_chunk_result_counts_as_empty(self):
        client = FakeAnkiClient({"cardsInfo": None})
        result = await dispatch_batched(client, "cardsInfo", "cards", list(range(150)), result_key="cards")
        assert result == {"cards": [], "metadata": {"total": 0, "batches": 2, "batchSize": 100}}

    async def test_default_result_key(self):
        client = FakeAnkiClient({"cardsInfo": _echo_info})
        result = await dispatch_batched(client, "cardsInfo", "cards", list(range(120)), batch_size=50)
        assert len(result["items"]) == 120
        assert result["metadata"] == {"total": 120, "batches": 3, "batchSize": 50}
