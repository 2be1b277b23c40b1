# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Content model records as returned by the Contentful Management API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class FieldType:
    """Field type tags understood by the field mapper.

    Contentful may add new tags at any time, so fields keep the raw string and
    anything not listed here maps to ``unknown``.
    """

    SYMBOL = "Symbol"
    TEXT = "Text"
    SLUG = "Slug"
    DATE = "Date"
    INTEGER = "Integer"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    OBJECT = "Object"
    LOCATION = "Location"
    RICH_TEXT = "RichText"
    LINK = "Link"
    ARRAY = "Array"


class LinkType:
    """Targets of a ``Link`` field."""

    ASSET = "Asset"
    ENTRY = "Entry"


class FieldDefinition(BaseModel):
    """One field of a content type, or the item definition of an array field.

    ``validations`` is kept as raw mappings: only ``in`` and
    ``linkContentType`` constraints matter for code generation and every other
    shape is ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str | None = None
    name: str | None = None
    type: str | None = None
    required: bool = False
    note: str | None = None
    validations: list[dict[str, Any]] = _Field(default_factory=list)
    link_type: str | None = _Field(default=None, alias="linkType")
    items: FieldDefinition | None = None

    @field_validator("required", mode="before")
    @classmethod
    def null_required_is_false(cls, value: Any) -> Any:
        """Treat an explicit null as not required."""
        return False if value is None else value

    @field_validator("validations", mode="before")
    @classmethod
    def drop_malformed_validations(cls, value: Any) -> list[Any]:
        """Keep only mapping-shaped validations; anything else is ignored."""
        if not isinstance(value, list):
            return []
        return [v for v in value if isinstance(v, dict)]


class ContentTypeSys(BaseModel):
    """System metadata of a content type; only the id is used."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    type: str = "ContentType"


class ContentTypeRecord(BaseModel):
    """A content type: a named schema entity with an ordered list of fields."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    sys: ContentTypeSys
    name: str = ""
    description: str | None = None
    fields: list[FieldDefinition] = _Field(default_factory=list)

    @property
    def id(self) -> str:
        return self.sys.id


FieldDefinition.model_rebuild()
