# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Profile, sync, import/export and deck-configuration tools."""

from __future__ import annotations

from typing import Any

from ..core.client import AnkiConnectClient
from ..core.pagination import fetch_page
from ..core.schema import any_value, array, boolean, id_list, id_value, number, obj, record, string
from .base import ToolDef, limit_param, offset_param

PROFILES_DEFAULT_LIMIT = 100
PROFILES_MAX_LIMIT = 1000


async def get_profiles(
    client: AnkiConnectClient, offset: int = 0, limit: int = PROFILES_DEFAULT_LIMIT
) -> dict[str, Any]:
    page = await fetch_page(client, "getProfiles", offset=offset, limit=limit, max_limit=PROFILES_MAX_LIMIT)
    return page.to_dict("profiles")


SYSTEM_TOOLS = [
    ToolDef(
        name="sync",
        category="system",
        description=(
            "Performs full two-way sync with AnkiWeb. Requires AnkiWeb credentials configured in Anki. Uploads local "
            "changes and downloads remote changes. May take time for large collections. Resolves conflicts based on "
            "modification time. Network errors may require retry. Not available in some Anki configurations"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="getProfiles",
        category="system",
        description=(
            "Lists all available Anki user profiles. Each profile has separate collections, settings, and add-ons. "
            "Useful for multi-user setups or separating study topics. Returns array of profile names. Current "
            "profile marked in Anki interface. Returns paginated results for many profiles"
        ),
        schema=obj(
            offset=offset_param(),
            limit=limit_param(PROFILES_DEFAULT_LIMIT, PROFILES_MAX_LIMIT, "profiles"),
        ),
        handler=get_profiles,
    ),
    ToolDef(
        name="loadProfile",
        category="system",
        description=(
            "Switches to a different user profile. Closes current collection and opens the specified profile's "
            "collection. All subsequent operations affect the new profile. May fail if profile doesn't exist or is "
            "already loaded. Useful for automated multi-profile operations"
        ),
        schema=obj(name=string().describe("Profile name")),
    ),
    ToolDef(
        name="exportPackage",
        category="system",
        description=(
            "Exports a deck to .apkg format for sharing or backup. Path must be absolute and include .apkg "
            "extension. Set includeSched=false to exclude review history (for sharing). MediaFiles included by "
            "default. Creates portable package that can be imported to any Anki installation. Large decks with "
            "media may take time"
        ),
        schema=obj(
            deck=string().describe("Deck name"),
            path=string().describe("Export path"),
            includeSched=boolean().optional().default(False),
        ),
    ),
    ToolDef(
        name="importPackage",
        category="system",
        description=(
            "Imports an .apkg package file into the collection. Path must be absolute. Merges content with existing "
            "collection - doesn't overwrite. Handles duplicate detection based on note IDs. Media files are imported "
            "to media folder. May take significant time for large packages. Returns true on success"
        ),
        schema=obj(path=string().describe("Import path")),
    ),
    ToolDef(
        name="version",
        category="system",
        description=(
            "Gets the Anki-Connect addon version number. Useful for compatibility checks and ensuring required "
            "features are available. Version 6 is current stable. Different versions may have different available "
            "actions or parameters"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="requestPermission",
        category="system",
        description=(
            "Requests permission to use Anki-Connect API. Shows dialog to user for approval. Required on first "
            "connection from new origin. Permission persists across sessions once granted. Returns permission "
            "status and version. Essential for web applications"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="apiReflect",
        category="system",
        description=(
            "Gets metadata about available Anki-Connect API actions including names, parameters, and descriptions. "
            "Useful for API discovery, generating documentation, or validating capabilities. Returns object with "
            "'scopes' and 'actions' arrays. Essential for dynamic API clients"
        ),
        schema=obj(
            scopes=array(string()).optional().describe("Scopes to query"),
            actions=array(string()).optional().describe("Actions to check"),
        ),
    ),
    ToolDef(
        name="reloadCollection",
        category="system",
        description=(
            "Reloads the entire collection from disk, discarding any unsaved changes in memory. Useful after "
            "external database modifications or to resolve inconsistencies. Forces all cached data to refresh. Use "
            "sparingly - can be slow on large collections"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="multi",
        category="system",
        description=(
            "Executes multiple API actions in a single request. Each action runs independently with its own "
            "parameters. Returns array of results matching action order. Errors in one action don't affect others. "
            "Much more efficient than multiple requests. Maximum 100 actions recommended"
        ),
        schema=obj(
            actions=array(
                obj(
                    action=string(),
                    params=any_value().optional(),
                    version=number().optional(),
                )
            ).describe("Actions to execute"),
        ),
    ),
    ToolDef(
        name="getActiveProfile",
        category="system",
        description=(
            "Gets the name of currently active Anki profile. Each profile has separate collections and settings. "
            "Useful for multi-profile workflows or confirming correct profile before operations. Returns profile "
            "name as string"
        ),
        schema=obj(),
    ),
    ToolDef(
        name="setDueDate",
        category="system",
        description=(
            "Manually sets the due date for cards, overriding normal scheduling. Date format: 'YYYY-MM-DD' or days "
            "from today (e.g., '5' for 5 days). Useful for vacation mode or manual scheduling adjustments. Preserves "
            "intervals and ease. Use carefully - disrupts spaced repetition algorithm"
        ),
        schema=obj(
            cards=id_list().describe("Card IDs"),
            days=string().describe("Days string (e.g., '1', '3-7', '0' for today)"),
        ),
        id_params=("cards",),
    ),
    ToolDef(
        name="suspended",
        category="system",
        description=(
            "Checks if a single card is currently suspended. Returns boolean (true if suspended). Simpler than "
            "areSuspended for single card checks. Suspended cards remain in collection but don't appear in reviews. "
            "Useful for conditional logic in automation"
        ),
        schema=obj(card=id_value().describe("Card ID")),
        id_params=("card",),
    ),
    ToolDef(
        name="saveDeckConfig",
        category="system",
        description=(
            "Updates deck configuration group with new settings. Config includes: new cards/day, review limits, "
            "ease factors, learning steps, graduation intervals, leech threshold, and more. Changes affect all decks "
            "using this config group. Returns true on success. Be careful - can significantly impact learning"
        ),
        schema=obj(config=record(any_value()).describe("Deck configuration object")),
    ),
    ToolDef(
        name="setDeckConfigId",
        category="system",
        description=(
            "Assigns a deck to a different configuration group. Allows sharing settings between decks or isolating "
            "deck settings. Config ID must exist (use getDeckConfig to find IDs). Changes take effect immediately "
            "for new reviews. Useful for applying preset configurations"
        ),
        schema=obj(
            decks=array(string()).describe("Deck names"),
            configId=number().describe("Configuration ID"),
        ),
    ),
    ToolDef(
        name="cloneDeckConfigId",
        category="system",
        description=(
            "Creates a copy of an existing deck configuration with a new name. Cloned config starts with identical "
            "settings but can be modified independently. Useful for creating variations of successful "
            "configurations or testing changes without affecting originals. Returns new config ID"
        ),
        schema=obj(
            name=string().describe("New config name"),
            cloneFrom=number().optional().describe("Config ID to clone from"),
        ),
    ),
    ToolDef(
        name="removeDeckConfigId",
        category="system",
        description=(
            "Deletes a deck configuration group. Decks using this config revert to default config. Cannot delete "
            "default config (ID 1) or configs in use. Permanent deletion - cannot be undone. Check deck assignments "
            "before deletion to avoid unintended changes"
        ),
        schema=obj(configId=number().describe("Configuration ID to remove")),
        null_to_true=True,
    ),
]
