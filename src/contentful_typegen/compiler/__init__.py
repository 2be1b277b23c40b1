# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema-to-TypeScript compiler: field mapping and declaration assembly."""

from contentful_typegen.compiler.declarations import CORE_TYPES, build_file_header, create_file
from contentful_typegen.compiler.field_mapper import FieldMapping, field_to_ts, literal_union, wrap_array
from contentful_typegen.compiler.names import safe_prop, to_pascal

__all__ = [
    "CORE_TYPES",
    "FieldMapping",
    "build_file_header",
    "create_file",
    "field_to_ts",
    "literal_union",
    "safe_prop",
    "to_pascal",
    "wrap_array",
]
