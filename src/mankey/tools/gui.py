# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Tools that drive the Anki desktop GUI. All require Anki to be running with its window open."""

from __future__ import annotations

from ..core.schema import array, enum, id_value, number, obj, record, string
from .base import ToolDef

GUI_TOOLS = [
    ToolDef(
        name="guiBrowse",
        category="gui",
        description=(
            "Opens Anki's Browse window with optional search query. Query uses same syntax as findCards/findNotes. "
            "Useful for complex manual review or bulk operations. Browser allows editing, tagging, suspending, and "
            "more. Returns array of note IDs initially shown. Requires Anki GUI running"
        ),
        schema=obj(
            query=string().describe("Search query"),
            reorderCards=obj(
                order=enum("ascending", "descending").optional(),
                columnId=string().optional(),
            ).optional(),
        ),
    ),
    ToolDef(
        name="guiAddCards",
        category="gui",
        description=(
            "Opens Add Cards dialog pre-filled with specified content. Allows user to review and modify before "
            "adding. Useful for semi-automated card creation where human review is needed. CloseAfterAdding option "
            "controls dialog behavior. Returns note ID if card was added (null if cancelled). Requires GUI"
        ),
        schema=obj(
            note=obj(
                deckName=string(),
                modelName=string(),
                fields=record(string()),
                tags=array(string()).optional(),
            ),
        ),
    ),
    ToolDef(
        name="guiCurrentCard",
        category="gui",
        description=(
            "Gets information about the card currently being reviewed in the main window. Returns null if not in "
            "review mode. Includes card ID, question/answer content, buttons available, and more. Useful for "
            "integration with review session or automated review helpers. Requires active review session"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="guiAnswerCard",
        category="gui",
        description=(
            "Answers the current review card programmatically. Ease values: 1=Again (fail), 2=Hard, 3=Good, 4=Easy. "
            "Affects scheduling based on chosen ease. Only works during active review session. Automatically shows "
            "next card. Useful for automated review or accessibility tools. Returns true on success"
        ),
        schema=obj(ease=number(min_value=1, max_value=4).describe("1=Again, 2=Hard, 3=Good, 4=Easy")),
    ),
    ToolDef(
        name="guiDeckOverview",
        category="gui",
        description=(
            "Opens deck overview screen showing study options and statistics for specified deck. Displays "
            "new/learning/review counts and study buttons. User can start studying from this screen. Useful for "
            "navigating to specific deck programmatically. Requires GUI running"
        ),
        schema=obj(name=string().describe("Deck name")),
    ),
    ToolDef(
        name="guiExitAnki",
        category="gui",
        description=(
            "Closes Anki application completely. Saves all changes before exiting. Use with caution - terminates the "
            "Anki process. No confirmation dialog shown. Useful for automated workflows that need clean shutdown. "
            "Connection to Anki-Connect will be lost"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="guiSelectedNotes",
        category="gui",
        description=(
            "Gets note IDs currently selected in the Browse window. Returns empty array if browser not open or "
            "nothing selected. Useful for creating tools that operate on user's selection. Requires browser window "
            "to be open. Selection can be from search or manual"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="guiSelectCard",
        category="gui",
        description=(
            "Selects and scrolls to a specific card in the Browse window. Opens browser if not already open. Card is "
            "highlighted and details shown in preview pane. Useful for navigating to specific cards programmatically "
            "or showing search results. Returns true on success"
        ),
        schema=obj(card=id_value().describe("Card ID")),
        id_params=("card",),
    ),
    ToolDef(
        name="guiEditNote",
        category="gui",
        description=(
            "Opens the Edit Current Note dialog for a specific note. Shows all fields and tags in editable form. "
            "User can modify and save changes. Blocks until dialog closed. Returns modified note fields after save, "
            "or null if cancelled. Requires GUI running"
        ),
        schema=obj(note=id_value().describe("Note ID")),
        id_params=("note",),
    ),
    ToolDef(
        name="guiStartCardTimer",
        category="gui",
        description=(
            "Starts the review timer for current card. Timer tracks time spent on card for statistics. Usually "
            "starts automatically but can be triggered manually. Only works during active review session. Returns "
            "true if timer started successfully"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="guiShowQuestion",
        category="gui",
        description=(
            "Shows the question (front) side of current review card. Hides answer if visible. Resets timer if "
            "configured. Only works during review session. Useful for custom review interfaces or accessibility "
            "tools. Returns true on success"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="guiShowAnswer",
        category="gui",
        description=(
            "Reveals the answer (back) side of current review card. Shows rating buttons for ease selection. Timer "
            "continues running. Only works during review with question shown. Essential for custom review flows. "
            "Returns true on success"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="guiUndo",
        category="gui",
        description=(
            "Undoes the last reviewable action in Anki. Can undo: card answers, note edits, note additions, "
            "deletions. Limited undo history (typically last 10 actions). Not all operations can be undone. Returns "
            "true if undo successful, false if nothing to undo"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="guiDeckBrowser",
        category="gui",
        description=(
            "Opens the main deck browser screen showing all decks with statistics. This is Anki's home screen. Shows "
            "new/learning/due counts for each deck. User can select decks to study from here. Returns true when "
            "opened successfully"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="guiDeckReview",
        category="gui",
        description=(
            "Starts review session for specified deck. Opens review screen and shows first card. Follows configured "
            "order: learning, review, then new cards. User reviews with spacebar and number keys. Returns name of "
            "deck being reviewed. Requires GUI"
        ),
        schema=obj(name=string().describe("Deck name")),
    ),
    ToolDef(
        name="guiCheckDatabase",
        category="gui",
        description=(
            "Runs database integrity check and optimization. Checks for: corruption, missing media, invalid cards, "
            "orphaned notes. Fixes problems when possible. Shows progress dialog. May take time on large "
            "collections. Returns status message with problems found/fixed"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="guiImportFile",
        category="gui",
        description=(
            "Opens import dialog for user to select and import files. Supports: .apkg (deck packages), .colpkg "
            "(collection), .txt/.csv (notes). Shows import options and progress. User controls duplicate handling. "
            "Returns import summary or null if cancelled. Requires GUI"
        ),
        schema=obj(path=string().optional().describe("File path to import")),
    ),
]
