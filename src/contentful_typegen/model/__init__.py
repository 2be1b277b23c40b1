# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Content model records and rendering options."""

from contentful_typegen.model.options import RenderOptions
from contentful_typegen.model.schema import (
    ContentTypeRecord,
    ContentTypeSys,
    FieldDefinition,
    FieldType,
    LinkType,
)

__all__ = [
    "ContentTypeRecord",
    "ContentTypeSys",
    "FieldDefinition",
    "FieldType",
    "LinkType",
    "RenderOptions",
]
