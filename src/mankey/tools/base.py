# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Tool definition shared by every category module."""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Any

from mcp.types import Tool

from ..core.normalize import normalize_id, normalize_ids, normalize_success
from ..core.schema import ArgumentValidator, Field, ToolDescriptor, generate_descriptor, number

if TYPE_CHECKING:
    from ..core.client import AnkiConnectClient

Handler = Callable[..., Awaitable[Any]]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def to_snake(name: str) -> str:
    """``deckName`` -> ``deck_name``, ``startID`` -> ``start_id``."""
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


def offset_param() -> Field:
    return number().optional().default(0).describe("Starting position for pagination")


def limit_param(default: int, maximum: int, noun: str) -> Field:
    return number().optional().default(default).describe(f"Maximum {noun} to return (default {default}, max {maximum})")


@dataclass(frozen=True)
class ToolDef:
    """A named AnkiConnect operation exposed as a tool.

    With a ``handler``, validated arguments are passed to it as snake_case
    keyword arguments after the client. Without one, the tool forwards its
    validated arguments unchanged to the AnkiConnect action of the same
    name, normalising the ``id_params`` first and reporting a null result
    as ``True`` when ``null_to_true`` is set.
    """

    name: str
    category: str
    description: str
    schema: Field
    handler: Handler | None = None
    id_params: tuple[str, ...] = ()
    null_to_true: bool = False

    @cached_property
    def descriptor(self) -> ToolDescriptor:
        return generate_descriptor(self.schema)

    @cached_property
    def validator(self) -> ArgumentValidator:
        return ArgumentValidator(self.schema, name=f"{self.name[:1].upper()}{self.name[1:]}Arguments")

    @property
    def summary(self) -> str:
        """First sentence of the description."""
        return self.description.split(". ")[0]

    def to_mcp_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.descriptor.to_schema())

    def validate(self, arguments: dict[str, Any] | None) -> dict[str, Any]:
        """Validate arguments; raises ``ValidationException``."""
        return self.validator.validate(arguments)

    async def call(self, client: AnkiConnectClient, arguments: dict[str, Any] | None = None) -> Any:
        """Validate ``arguments`` and run the tool against ``client``."""
        validated = self.validate(arguments)
        if self.handler is not None:
            return await self.handler(client, **{to_snake(key): value for key, value in validated.items()})
        return await self._forward(client, validated)

    async def _forward(self, client: AnkiConnectClient, params: dict[str, Any]) -> Any:
        for key in self.id_params:
            if key in params:
                value = params[key]
                params[key] = normalize_ids(value) if isinstance(value, list) else normalize_id(value)
        result = await client.invoke(self.name, params or None)
        return normalize_success(result) if self.null_to_true else result
