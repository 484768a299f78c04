# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Boundary normalisation for loosely-typed tool arguments.

Clients send ids as numbers or numeric strings, and tags as lists,
space-separated strings or JSON-encoded lists. Handlers call these helpers
before building the AnkiConnect request so the rest of the code only sees
one shape.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Iterable
from typing import Any

logger = logging.getLogger(__name__)

NoteOrCardId = int | float | str

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def normalize_id(value: NoteOrCardId) -> int | float:
    """Convert an id to its numeric form.

    Numbers pass through. Strings are read as base-10 integers from their
    leading digits ("123abc" -> 123). A string with no leading digits
    becomes NaN and is sent to AnkiConnect as-is; AnkiConnect then reports
    the id as unknown.
    """
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            logger.debug("Unparseable id %r normalised to NaN", value)
            return math.nan
        return int(match.group(1))
    return value


def normalize_ids(values: Iterable[NoteOrCardId]) -> list[int | float]:
    """Apply ``normalize_id`` to every element, preserving order."""
    return [normalize_id(value) for value in values]


def normalize_tags(tags: Any) -> list[str]:
    """Normalise tags given as a list, a JSON list string, or a space-separated string."""
    if isinstance(tags, list):
        return tags

    if isinstance(tags, str):
        if tags.startswith("["):
            try:
                parsed = json.loads(tags)
            except json.JSONDecodeError:
                logger.debug("Failed to parse JSON tags, using space-split")
            else:
                if isinstance(parsed, list):
                    return parsed
        return [tag for tag in tags.split(" ") if tag.strip()]

    logger.debug("Unknown tag format %r, returning empty list", type(tags).__name__)
    return []


def normalize_fields(fields: Any) -> dict[str, Any] | None:
    """Normalise note fields given as a mapping or a JSON object string."""
    if not fields:
        return None

    if isinstance(fields, dict):
        return fields

    if isinstance(fields, str):
        try:
            parsed = json.loads(fields)
        except json.JSONDecodeError:
            logger.debug("Failed to parse JSON fields")
            return None
        if isinstance(parsed, dict):
            return parsed

    return None


def normalize_success(result: Any) -> Any:
    """Report a null AnkiConnect result as success.

    Several mutating actions return null when they succeed. Only the
    handlers that want a boolean call this; the others return the raw
    result.
    """
    return True if result is None else result
