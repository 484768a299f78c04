# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Note type (model) tools."""

from __future__ import annotations

from typing import Any

from ..core.client import AnkiConnectClient
from ..core.pagination import fetch_page
from ..core.schema import array, boolean, obj, record, string
from .base import ToolDef, limit_param, offset_param

LISTING_DEFAULT_LIMIT = 1000
LISTING_MAX_LIMIT = 10000


async def model_names(client: AnkiConnectClient, offset: int = 0, limit: int = LISTING_DEFAULT_LIMIT) -> dict[str, Any]:
    page = await fetch_page(client, "modelNames", offset=offset, limit=limit, max_limit=LISTING_MAX_LIMIT)
    return page.to_dict("models")


async def model_names_and_ids(
    client: AnkiConnectClient, offset: int = 0, limit: int = LISTING_DEFAULT_LIMIT
) -> dict[str, Any]:
    page = await fetch_page(client, "modelNamesAndIds", offset=offset, limit=limit, max_limit=LISTING_MAX_LIMIT)
    return page.to_dict("models")


async def create_model(
    client: AnkiConnectClient,
    model_name: str,
    in_order_fields: list[str],
    card_templates: list[dict[str, str]],
    css: str | None = None,
    is_cloze: bool = False,
) -> Any:
    return await client.invoke(
        "createModel",
        {
            "modelName": model_name,
            "inOrderFields": in_order_fields,
            "css": css,
            "isCloze": is_cloze,
            "cardTemplates": card_templates,
        },
    )


async def model_styling(client: AnkiConnectClient, model_name: str) -> Any:
    """Return only the CSS text of the model's styling."""
    result = await client.invoke("modelStyling", {"modelName": model_name})
    if isinstance(result, dict):
        return result.get("css")
    return result


MODEL_TOOLS = [
    ToolDef(
        name="modelNames",
        category="model",
        description=(
            "Lists all available note types (models) in the collection. Common built-in models: 'Basic' (Front/Back "
            "fields), 'Basic (and reversed card)', 'Cloze' (for cloze deletions), 'Basic (type in the answer)'. "
            "Custom models show user-defined names. Essential for addNote operations. Returns paginated results for "
            "collections with many models"
        ),
        schema=obj(
            offset=offset_param(),
            limit=limit_param(LISTING_DEFAULT_LIMIT, LISTING_MAX_LIMIT, "models"),
        ),
        handler=model_names,
    ),
    ToolDef(
        name="modelFieldNames",
        category="model",
        description=(
            "Gets ordered list of field names for a specific model. Field names are case-sensitive and must match "
            "exactly when creating/updating notes. Common fields: 'Front', 'Back' (Basic), 'Text', 'Extra' (Cloze). "
            "Order matters for some operations. Essential for validating note data before creation"
        ),
        schema=obj(modelName=string().describe("Note type name")),
    ),
    ToolDef(
        name="modelNamesAndIds",
        category="model",
        description=(
            "Gets mapping of model names to their internal IDs. Model IDs are timestamps of creation and never "
            "change. Useful for operations requiring model IDs or checking if models exist. IDs are stable across "
            "syncs. Returns object with model names as keys, IDs as values. Paginated for large collections"
        ),
        schema=obj(
            offset=offset_param(),
            limit=limit_param(LISTING_DEFAULT_LIMIT, LISTING_MAX_LIMIT, "entries"),
        ),
        handler=model_names_and_ids,
    ),
    ToolDef(
        name="createModel",
        category="model",
        description=(
            "Creates a custom note type with specified fields and card templates. Requires careful template syntax: "
            "{{Field}} for replacements, {{#Field}}...{{/Field}} for conditionals. Templates generate cards from "
            "notes. CSS styling is shared across all templates. Model name must be unique. Returns created model "
            "object. Complex operation - consider cloning existing models instead"
        ),
        schema=obj(
            modelName=string(min_length=1).describe("Unique model name (case-sensitive)"),
            inOrderFields=array(string(), min_length=1).describe(
                "Field names in display order (at least one required)"
            ),
            css=string().optional().describe("CSS styling for all cards in this model"),
            isCloze=boolean().optional().default(False).describe("Whether this is a cloze deletion model"),
            cardTemplates=array(
                obj(
                    Name=string(min_length=1).describe("Template name (required)"),
                    Front=string().describe("Front template HTML (question side)"),
                    Back=string().describe("Back template HTML (answer side)"),
                ),
                min_length=1,
            ).describe("Card templates (at least one required)"),
        ),
        handler=create_model,
    ),
    ToolDef(
        name="modelFieldsOnTemplates",
        category="model",
        description=(
            "Analyzes which fields are actually used in each card template. Returns mapping of template names to "
            "field arrays. Helps identify unused fields or understand template dependencies. Essential for model "
            "optimization or safe field deletion. Only shows fields referenced in templates"
        ),
        schema=obj(modelName=string().describe("Model name")),
    ),
    ToolDef(
        name="modelTemplates",
        category="model",
        description=(
            "Gets all card templates for a model. Each template defines how cards are generated from notes. Returns "
            "object with template names as keys and template definitions (Front/Back format strings) as values. "
            "Templates use {{Field}} syntax with conditionals {{#Field}}...{{/Field}}. Essential for understanding "
            "card generation"
        ),
        schema=obj(modelName=string().describe("Model name")),
    ),
    ToolDef(
        name="modelStyling",
        category="model",
        description=(
            "Gets CSS styling that applies to all cards of this model type. Returns CSS string that controls card "
            "appearance during review. Includes fonts, colors, alignment, and custom classes. Shared across all "
            "templates of the model. Understanding CSS required for modifications"
        ),
        schema=obj(modelName=string().describe("Model name")),
        handler=model_styling,
    ),
    ToolDef(
        name="updateModelTemplates",
        category="model",
        description=(
            "Updates card generation templates for a model. CAUTION: Affects all existing notes using this model. "
            "May delete cards if templates removed, or create cards if added. Template syntax errors can break card "
            "generation. Test changes on copy first. Returns updated template object"
        ),
        schema=obj(
            model=obj(
                name=string(),
                templates=record(obj(Front=string(), Back=string())),
            ),
        ),
    ),
    ToolDef(
        name="updateModelStyling",
        category="model",
        description=(
            "Updates CSS styling for all cards of a model type. Changes apply immediately to all cards during "
            "review. Invalid CSS may break card display. Affects all notes using this model. Consider model-specific "
            "classes to avoid conflicts. Test thoroughly before applying to important decks"
        ),
        schema=obj(model=obj(name=string(), css=string())),
    ),
]
