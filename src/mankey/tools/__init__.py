# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Registry of every AnkiConnect operation exposed as a tool.

Tools are grouped by category; names are unique across categories and
match the AnkiConnect action names.
"""

from __future__ import annotations

from .base import ToolDef
from .cards import CARD_TOOLS
from .decks import DECK_TOOLS
from .gui import GUI_TOOLS
from .media import MEDIA_TOOLS
from .models import MODEL_TOOLS
from .notes import NOTE_TOOLS
from .stats import STATS_TOOLS
from .system import SYSTEM_TOOLS

TOOL_CATEGORIES: dict[str, list[ToolDef]] = {
    "deck": DECK_TOOLS,
    "note": NOTE_TOOLS,
    "card": CARD_TOOLS,
    "model": MODEL_TOOLS,
    "media": MEDIA_TOOLS,
    "stats": STATS_TOOLS,
    "gui": GUI_TOOLS,
    "system": SYSTEM_TOOLS,
}

TOOLS: dict[str, ToolDef] = {tool.name: tool for tools in TOOL_CATEGORIES.values() for tool in tools}


def get_tool(name: str) -> ToolDef | None:
    """Look up a tool by name, or None if unknown."""
    return TOOLS.get(name)


__all__ = ["TOOLS", "TOOL_CATEGORIES", "ToolDef", "get_tool"]
