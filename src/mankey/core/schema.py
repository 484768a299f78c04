# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Declarative parameter schemas for tools.

A tool's accepted arguments are described once, as a tree of ``Field``
nodes, and two things are derived from it:

- ``generate_descriptor`` produces the JSON-schema-like descriptor that MCP
  clients see in ``tools/list``.
- ``ArgumentValidator`` compiles the same tree into a pydantic model and
  checks incoming arguments against it, reporting one ``{path, message}``
  per violation.

Field kinds form a closed set tagged by ``FieldKind``; both derivations
dispatch on the tag rather than on class checks. ``OptionalField`` and
``DefaultField`` are wrappers and may be stacked in either order.

Example::

    schema = obj(
        query=string().describe("Search query"),
        offset=number().optional().default(0).describe("Starting position"),
    )
    generate_descriptor(schema).to_schema()
    # {"type": "object",
    #  "properties": {"query": {"type": "string", "description": "Search query"},
    #                 "offset": {"type": "number", "description": "Starting position"}},
    #  "required": ["query"]}
"""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, confloat, conint, conlist, constr, create_model
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationException


class FieldKind(StrEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    UNION = "union"
    RECORD = "record"
    ENUM = "enum"
    ANY = "any"
    OPTIONAL = "optional"
    DEFAULT = "default"


_WRAPPER_KINDS = frozenset({FieldKind.OPTIONAL, FieldKind.DEFAULT})

# Output types a union option can contribute; anything else counts as string.
_UNION_OPTION_TYPES = {
    FieldKind.NUMBER: "number",
    FieldKind.STRING: "string",
    FieldKind.BOOLEAN: "boolean",
}


# ============================================================================
# Field tree
# ============================================================================


@dataclass(frozen=True, kw_only=True)
class Field:
    """A node in a parameter schema tree."""

    kind: ClassVar[FieldKind]
    description: str | None = None

    def optional(self) -> OptionalField:
        return OptionalField(inner=self, description=self.description)

    def default(self, value: Any) -> DefaultField:
        return DefaultField(inner=self, value=value, description=self.description)

    def describe(self, text: str) -> Field:
        return dataclasses.replace(self, description=text)


@dataclass(frozen=True, kw_only=True)
class StringField(Field):
    kind: ClassVar[FieldKind] = FieldKind.STRING
    min_length: int | None = None


@dataclass(frozen=True, kw_only=True)
class NumberField(Field):
    kind: ClassVar[FieldKind] = FieldKind.NUMBER
    min_value: float | None = None
    max_value: float | None = None


@dataclass(frozen=True, kw_only=True)
class BooleanField(Field):
    kind: ClassVar[FieldKind] = FieldKind.BOOLEAN


@dataclass(frozen=True, kw_only=True)
class ArrayField(Field):
    kind: ClassVar[FieldKind] = FieldKind.ARRAY
    element: Field
    min_length: int | None = None


@dataclass(frozen=True, kw_only=True)
class ObjectField(Field):
    kind: ClassVar[FieldKind] = FieldKind.OBJECT
    properties: Mapping[str, Field] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class UnionField(Field):
    kind: ClassVar[FieldKind] = FieldKind.UNION
    options: tuple[Field, ...]


@dataclass(frozen=True, kw_only=True)
class RecordField(Field):
    """A mapping from arbitrary string keys to values of one type."""

    kind: ClassVar[FieldKind] = FieldKind.RECORD
    value: Field


@dataclass(frozen=True, kw_only=True)
class EnumField(Field):
    kind: ClassVar[FieldKind] = FieldKind.ENUM
    values: tuple[str, ...]


@dataclass(frozen=True, kw_only=True)
class AnyField(Field):
    kind: ClassVar[FieldKind] = FieldKind.ANY


@dataclass(frozen=True, kw_only=True)
class OptionalField(Field):
    kind: ClassVar[FieldKind] = FieldKind.OPTIONAL
    inner: Field


@dataclass(frozen=True, kw_only=True)
class DefaultField(Field):
    kind: ClassVar[FieldKind] = FieldKind.DEFAULT
    inner: Field
    value: Any


# Builders ------------------------------------------------------------------


def string(min_length: int | None = None) -> StringField:
    return StringField(min_length=min_length)


def number(min_value: float | None = None, max_value: float | None = None) -> NumberField:
    return NumberField(min_value=min_value, max_value=max_value)


def boolean() -> BooleanField:
    return BooleanField()


def array(element: Field, min_length: int | None = None) -> ArrayField:
    return ArrayField(element=element, min_length=min_length)


def obj(**properties: Field) -> ObjectField:
    return ObjectField(properties=properties)


def union(*options: Field) -> UnionField:
    return UnionField(options=options)


def record(value: Field) -> RecordField:
    return RecordField(value=value)


def enum(*values: str) -> EnumField:
    return EnumField(values=values)


def any_value() -> AnyField:
    return AnyField()


def id_value() -> UnionField:
    """A card or note id, accepted as a number or a numeric string."""
    return union(number(), string())


def id_list() -> ArrayField:
    return array(id_value())


# ============================================================================
# Descriptor generation
# ============================================================================


@dataclass(frozen=True)
class ToolDescriptor:
    """Protocol-visible description of a tool's parameters."""

    properties: Mapping[str, Mapping[str, Any]]
    required: tuple[str, ...] = ()

    def to_schema(self) -> dict[str, Any]:
        """Render as a JSON-schema object; ``required`` only when non-empty."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": copy.deepcopy(dict(self.properties)),
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema


def unwrap(node: Field) -> tuple[Field, bool]:
    """Strip every optional/default wrapper, in whatever order they appear.

    Returns the base node and whether an optional marker was seen.
    """
    is_optional = False
    while node.kind in _WRAPPER_KINDS:
        if node.kind is FieldKind.OPTIONAL:
            is_optional = True
        node = node.inner  # type: ignore[attr-defined]
    return node, is_optional


def _union_type(node: UnionField) -> str:
    types = {_UNION_OPTION_TYPES.get(option.kind, "string") for option in node.options}
    if len(types) == 1:
        return types.pop()
    return "string"


def _items_descriptor(element: Field) -> dict[str, Any]:
    # Array elements only shed optional markers
    while element.kind is FieldKind.OPTIONAL:
        element = element.inner  # type: ignore[attr-defined]

    if element.kind in (FieldKind.NUMBER, FieldKind.BOOLEAN):
        return {"type": element.kind.value}
    if element.kind is FieldKind.OBJECT:
        return generate_descriptor(element).to_schema()
    return {"type": "string"}


def _property_descriptor(node: Field) -> dict[str, Any]:
    kind = node.kind
    if kind in (FieldKind.NUMBER, FieldKind.BOOLEAN):
        return {"type": kind.value}
    if kind is FieldKind.ARRAY:
        return {"type": "array", "items": _items_descriptor(node.element)}  # type: ignore[attr-defined]
    if kind in (FieldKind.OBJECT, FieldKind.RECORD):
        return {"type": "object"}
    if kind is FieldKind.UNION:
        return {"type": _union_type(node)}  # type: ignore[arg-type]
    return {"type": "string"}


def generate_descriptor(schema: Field) -> ToolDescriptor:
    """Derive the protocol-visible descriptor for a parameter schema.

    Never raises: a non-object root yields an empty object descriptor and
    shapes without a precise mapping fall back to ``string``/``object``.
    A property is required unless an optional marker wraps it, so a field
    with only a default is still listed as required.
    """
    if schema.kind is not FieldKind.OBJECT:
        return ToolDescriptor(properties={})

    properties: dict[str, dict[str, Any]] = {}
    required: list[str] = []

    for name, original in schema.properties.items():  # type: ignore[attr-defined]
        base, is_optional = unwrap(original)
        prop = _property_descriptor(base)
        if original.description:
            prop["description"] = original.description
        properties[name] = prop
        if not is_optional:
            required.append(name)

    return ToolDescriptor(properties=properties, required=tuple(required))


# ============================================================================
# Argument validation
# ============================================================================


class _Absent:
    """Default for optional properties that were not supplied."""

    def __repr__(self) -> str:
        return "<absent>"


ABSENT = _Absent()


def _missing_default(node: Field) -> Any:
    """What an omitted property becomes: the outermost wrapper decides."""
    if node.kind is FieldKind.DEFAULT:
        return node.value  # type: ignore[attr-defined]
    if node.kind is FieldKind.OPTIONAL:
        return ABSENT
    return ...


def _annotation(node: Field, model_name: str) -> Any:
    node, _ = unwrap(node)
    kind = node.kind

    if kind is FieldKind.STRING:
        if node.min_length is not None:  # type: ignore[attr-defined]
            return constr(strict=True, min_length=node.min_length)  # type: ignore[attr-defined]
        return StrictStr
    if kind is FieldKind.NUMBER:
        bounds = {"ge": node.min_value, "le": node.max_value}  # type: ignore[attr-defined]
        return Union[conint(strict=True, **bounds), confloat(strict=True, allow_inf_nan=False, **bounds)]  # noqa: UP007
    if kind is FieldKind.BOOLEAN:
        return StrictBool
    if kind is FieldKind.ARRAY:
        element = _annotation(node.element, model_name)  # type: ignore[attr-defined]
        return conlist(element, min_length=node.min_length)  # type: ignore[attr-defined]
    if kind is FieldKind.OBJECT:
        return _compile_model(node, model_name)  # type: ignore[arg-type]
    if kind is FieldKind.UNION:
        options = tuple(_annotation(option, f"{model_name}Option{i}") for i, option in enumerate(node.options))  # type: ignore[attr-defined]
        return Union[options]  # noqa: UP007
    if kind is FieldKind.RECORD:
        return dict[str, _annotation(node.value, model_name)]  # type: ignore[attr-defined,misc]
    if kind is FieldKind.ENUM:
        return Literal[node.values]  # type: ignore[attr-defined]
    return Any


def _compile_model(node: ObjectField, model_name: str) -> type[BaseModel]:
    definitions: dict[str, Any] = {}
    for name, prop in node.properties.items():
        definitions[name] = (_annotation(prop, f"{model_name}_{name}"), _missing_default(prop))
    return create_model(  # type: ignore[call-overload]
        model_name,
        __config__=ConfigDict(extra="ignore"),
        **definitions,
    )


def _to_python(value: Any) -> Any:
    if isinstance(value, BaseModel):
        result = {}
        for name in type(value).model_fields:
            item = getattr(value, name)
            if not isinstance(item, _Absent):
                result[name] = _to_python(item)
        return result
    if isinstance(value, list):
        return [_to_python(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_python(item) for key, item in value.items()}
    return value


def _issue_path(schema: Field, loc: tuple[Any, ...]) -> tuple[list[str], bool]:
    """Map a pydantic error location back onto the field tree.

    Returns the user-facing path parts and whether the walk stopped at a
    union (pydantic reports one error per union member there).
    """
    parts: list[str] = []
    node = schema
    for part in loc:
        node, _ = unwrap(node)
        if node.kind is FieldKind.OBJECT and isinstance(part, str) and part in node.properties:  # type: ignore[attr-defined]
            parts.append(part)
            node = node.properties[part]  # type: ignore[attr-defined]
        elif node.kind is FieldKind.ARRAY and isinstance(part, int):
            parts.append(str(part))
            node = node.element  # type: ignore[attr-defined]
        elif node.kind is FieldKind.RECORD and isinstance(part, str) and part != "[key]":
            parts.append(part)
            node = node.value  # type: ignore[attr-defined]
        elif node.kind is FieldKind.UNION:
            return parts, True
        else:
            return parts, False
    node, _ = unwrap(node)
    return parts, node.kind is FieldKind.UNION


class ArgumentValidator:
    """Validates tool arguments against a parameter schema.

    The schema is compiled once into a strict pydantic model: numbers must
    be numbers, strings strings, and an optional property may be omitted but
    not sent as null. Defaults are filled in; omitted optional properties
    stay omitted; unknown keys are dropped.
    """

    def __init__(self, schema: Field, name: str = "Arguments"):
        self.schema = schema
        if schema.kind is FieldKind.OBJECT:
            self.model: type[BaseModel] | None = _compile_model(schema, name)  # type: ignore[arg-type]
        else:
            self.model = None

    def validate(self, arguments: Any) -> dict[str, Any]:
        """Return the validated arguments or raise ``ValidationException``."""
        if self.model is None:
            return {}
        if arguments is None:
            arguments = {}
        try:
            instance = self.model.model_validate(arguments)
        except PydanticValidationError as e:
            issues = self._issues(e)
            message = "; ".join(f"{issue['path']}: {issue['message']}" for issue in issues)
            raise ValidationException(message, issues=issues) from e
        return _to_python(instance)

    def _issues(self, error: PydanticValidationError) -> list[dict[str, str]]:
        issues: list[dict[str, str]] = []
        seen: set[str] = set()
        for detail in error.errors():
            parts, at_union = _issue_path(self.schema, tuple(detail["loc"]))
            path = ".".join(parts) or "(root)"
            if path in seen:
                continue
            seen.add(path)
            message = "Input does not match any allowed type" if at_union else detail["msg"]
            issues.append({"path": path, "message": message})
        return issues
