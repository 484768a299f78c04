# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Split large id lists into sequential AnkiConnect calls.

``cardsInfo``/``notesInfo`` slow down sharply past about a hundred ids, so
longer lists are sent in chunks, one after another.

Callers must branch on the return shape: up to ``batch_size`` ids give the
bare remote result, more give ``{result_key: [...], "metadata": {...}}``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .normalize import NoteOrCardId, normalize_ids

if TYPE_CHECKING:
    from .client import AnkiConnectClient

logger = logging.getLogger(__name__)

BATCH_SIZE = 100

__all__ = ["BATCH_SIZE", "BatchPlan", "dispatch_batched", "plan_batches"]


@dataclass(frozen=True)
class BatchPlan:
    """Contiguous, ordered chunks covering the full id list."""

    chunks: tuple[tuple[int | float, ...], ...]
    batch_size: int
    total: int

    @property
    def is_batched(self) -> bool:
        return self.total > self.batch_size


def plan_batches(ids: Sequence[int | float], batch_size: int = BATCH_SIZE) -> BatchPlan:
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    chunks = tuple(tuple(ids[start : start + batch_size]) for start in range(0, len(ids), batch_size))
    return BatchPlan(chunks=chunks, batch_size=batch_size, total=len(ids))


async def dispatch_batched(
    client: AnkiConnectClient,
    action: str,
    id_param: str,
    ids: Sequence[NoteOrCardId],
    batch_size: int = BATCH_SIZE,
    result_key: str = "items",
) -> Any:
    """Call ``action`` with ``{id_param: ids}``, chunking long lists.

    Ids are normalised first. Chunks are awaited in order, never
    concurrently, and their results concatenated.
    """
    normalized = normalize_ids(ids)
    plan = plan_batches(normalized, batch_size)

    if not plan.is_batched:
        return await client.invoke(action, {id_param: normalized})

    logger.debug(
        "Dispatching %s in %d batches of up to %d",
        action,
        len(plan.chunks),
        batch_size,
    )
    results: list[Any] = []
    for chunk in plan.chunks:
        chunk_result = await client.invoke(action, {id_param: list(chunk)})
        results.extend(chunk_result or [])

    return {
        result_key: results,
        "metadata": {
            "total": len(results),
            "batches": math.ceil(plan.total / batch_size),
            "batchSize": batch_size,
        },
    }
