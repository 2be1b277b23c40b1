# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping of content type fields to TypeScript type expressions.

The mapper is a pure function of the field, the ids of all content types in
the current run, and the render options.  Entry links are resolved by id
against that id set only, so self-referencing and cyclic content models never
cause recursion.  Malformed input is never an error: it degrades to
``unknown`` (or ``Entry<unknown>`` for unresolvable entry links).
"""

from __future__ import annotations

import json
from collections.abc import Collection
from dataclasses import dataclass
from typing import Any

from contentful_typegen.compiler.names import safe_prop, to_pascal
from contentful_typegen.model.options import RenderOptions
from contentful_typegen.model.schema import FieldDefinition, FieldType, LinkType

# ###############
# Public Interface
# ###############

MAX_NESTING_DEPTH = 32

UNKNOWN = "unknown"
UNKNOWN_ENTRY = "Entry<unknown>"


@dataclass(frozen=True)
class FieldMapping:
    """The TypeScript rendering of one field.

    Attributes:
        name: Property key, safe to emit unquoted.
        ts_type: Type expression without any ``| undefined`` suffix.
        required: Whether the property is required; the caller decides on
            ``?`` and ``| undefined``.
    """

    name: str
    ts_type: str
    required: bool


def field_to_ts(
    field: FieldDefinition,
    all_type_ids: Collection[str],
    options: RenderOptions | None = None,
) -> FieldMapping:
    """Resolve a field definition to a TypeScript property.

    Args:
        field: The field to map.
        all_type_ids: Ids of every content type in this generation run.
        options: Render options; only ``prefix``, ``arrays_readonly`` and
            ``prefer_linked_aliases`` affect the type expression.

    Returns:
        The property name, type expression and required flag.
    """
    opts = options if options is not None else RenderOptions()
    return FieldMapping(
        name=safe_prop(field.id or field.name),
        ts_type=_resolve_type(field, all_type_ids, opts, depth=0),
        required=bool(field.required),
    )


def literal_union(validations: list[dict[str, Any]]) -> str | None:
    """Return the literal union declared by ``in`` validations, if any.

    Only string and number members are kept; booleans and other values are
    dropped.  Returns None when no usable literal is found.
    """
    literals: list[str] = []
    for validation in validations:
        values = validation.get("in")
        if not isinstance(values, list):
            continue
        for value in values:
            if isinstance(value, bool):
                continue
            if isinstance(value, str):
                literals.append(_quote(value))
            elif isinstance(value, (int, float)):
                literals.append(_number(value))
    return " | ".join(literals) if literals else None


def wrap_array(inner: str, options: RenderOptions) -> str:
    """Wrap an item type expression into the configured array form."""
    if options.arrays_readonly:
        return f"ReadonlyArray<{inner}>"
    if "|" in inner or "&" in inner:
        return f"({inner})[]"
    return f"{inner}[]"


# ################
# Implementation
# ################

_STRING_TYPES = frozenset({FieldType.SYMBOL, FieldType.TEXT, FieldType.SLUG, FieldType.DATE})
_NUMBER_TYPES = frozenset({FieldType.INTEGER, FieldType.NUMBER})


def _resolve_type(
    field: FieldDefinition,
    all_type_ids: Collection[str],
    options: RenderOptions,
    depth: int,
) -> str:
    """Resolve the type expression of *field*, recursing into array items."""
    union = literal_union(field.validations)
    if union is not None:
        return union

    field_type = field.type
    if field_type in _STRING_TYPES:
        return "string"
    if field_type in _NUMBER_TYPES:
        return "number"
    if field_type == FieldType.BOOLEAN:
        return "boolean"
    if field_type == FieldType.OBJECT:
        return "Record<string, unknown>"
    if field_type == FieldType.LOCATION:
        return "{ lat: number; lon: number }"
    if field_type == FieldType.RICH_TEXT:
        return "Document"
    if field_type == FieldType.LINK:
        return _resolve_link(field, all_type_ids, options)
    if field_type == FieldType.ARRAY:
        return _resolve_array(field, all_type_ids, options, depth)
    return UNKNOWN


def _resolve_link(field: FieldDefinition, all_type_ids: Collection[str], options: RenderOptions) -> str:
    if field.link_type == LinkType.ASSET:
        return "Asset"
    if field.link_type != LinkType.ENTRY:
        return UNKNOWN

    present = [target for target in _link_targets(field.validations) if target in all_type_ids]
    if not present:
        return UNKNOWN_ENTRY

    rendered = []
    for target in present:
        base = f"{options.prefix}{to_pascal(target)}"
        rendered.append(base if options.prefer_linked_aliases else f"Entry<{base}Fields>")
    return " | ".join(rendered)


def _link_targets(validations: list[dict[str, Any]]) -> list[str]:
    """Collect ``linkContentType`` targets across all validations, in order."""
    targets: list[str] = []
    for validation in validations:
        ids = validation.get("linkContentType")
        if not isinstance(ids, list):
            continue
        targets.extend(i for i in ids if isinstance(i, str) and i)
    return targets


def _resolve_array(
    field: FieldDefinition,
    all_type_ids: Collection[str],
    options: RenderOptions,
    depth: int,
) -> str:
    items = field.items
    if items is None or depth >= MAX_NESTING_DEPTH:
        return wrap_array(UNKNOWN, options)

    item_id = f"{field.id}Item" if field.id else "item"
    item = items.model_copy(update={"id": item_id, "name": items.name or item_id})
    return wrap_array(_resolve_type(item, all_type_ids, options, depth + 1), options)


def _quote(value: str) -> str:
    """Render a string literal the way ``JSON.stringify`` does."""
    return json.dumps(value, ensure_ascii=False)


def _number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)
