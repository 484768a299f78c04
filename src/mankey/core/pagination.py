# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Offset/limit windows over AnkiConnect actions that return everything.

AnkiConnect has no paging of its own: ``findCards`` on a large collection
returns every id. The adapter makes one remote call, slices the full result
and reports where the next window starts.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .exceptions import AnkiConnectError

if TYPE_CHECKING:
    from .client import AnkiConnectClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageResult:
    """One window of a larger result.

    ``limit`` is the effective limit, after the operation's ceiling was
    applied. ``items`` is a list, or a dict when the remote result was a
    mapping (e.g. deck name to id).
    """

    items: list[Any] | dict[str, Any]
    offset: int
    limit: int
    total: int
    has_more: bool
    next_offset: int | None

    def pagination(self) -> dict[str, Any]:
        return {
            "offset": self.offset,
            "limit": self.limit,
            "total": self.total,
            "hasMore": self.has_more,
            "nextOffset": self.next_offset,
        }

    def to_dict(self, key: str) -> dict[str, Any]:
        return {key: self.items, "pagination": self.pagination()}


def empty_page(offset: int, limit: int, max_limit: int) -> PageResult:
    return PageResult(
        items=[],
        offset=int(offset),
        limit=int(min(limit, max_limit)),
        total=0,
        has_more=False,
        next_offset=None,
    )


def paginate(items: Any, offset: int, limit: int, max_limit: int) -> PageResult:
    """Slice ``items`` to the window ``[offset, offset + min(limit, max_limit))``.

    A mapping is windowed over its entries in insertion order. Anything that
    is neither a list nor a mapping counts as an empty result.
    """
    offset = int(offset)
    effective_limit = int(min(limit, max_limit))
    end = offset + effective_limit

    window: list[Any] | dict[str, Any]
    if isinstance(items, Mapping):
        entries = list(items.items())
        total = len(entries)
        window = dict(entries[offset:end])
    elif isinstance(items, list | tuple):
        total = len(items)
        window = list(items[offset:end])
    else:
        total = 0
        window = []

    has_more = end < total
    return PageResult(
        items=window,
        offset=offset,
        limit=effective_limit,
        total=total,
        has_more=has_more,
        next_offset=end if has_more else None,
    )


async def fetch_page(
    client: AnkiConnectClient,
    action: str,
    params: dict[str, Any] | None = None,
    *,
    offset: int = 0,
    limit: int = 100,
    max_limit: int = 1000,
    swallow_errors: bool = False,
) -> PageResult:
    """Invoke ``action`` once and return the requested window of its result.

    Args:
        client: AnkiConnect client
        action: AnkiConnect action returning a full list or mapping
        params: Action parameters
        offset: Window start
        limit: Requested window size, capped at ``max_limit``
        max_limit: Ceiling for this operation
        swallow_errors: Downgrade an ``AnkiConnectError`` to an empty page.
            Used by search reads; listing and write paths propagate.
    """
    try:
        result = await client.invoke(action, params)
    except AnkiConnectError as e:
        if not swallow_errors:
            raise
        logger.warning("%s failed, returning empty page: %s", action, e.message)
        return empty_page(offset, limit, max_limit)

    return paginate(result, offset, limit, max_limit)
