# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of the complete ``.d.ts`` text for a set of content types.

The output consists of:

* a banner naming the number of generated interfaces,
* the static support stubs in :data:`CORE_TYPES` (``Entry``, ``Asset``,
  ``Document`` and their helpers),
* per content type, an ``I<Name>Fields`` interface followed by the entry
  declaration ``I<Name>``, either branded with the content type id or as a
  plain ``Entry<...>`` alias.
"""

from __future__ import annotations

from collections.abc import Sequence

from contentful_typegen.compiler.field_mapper import field_to_ts
from contentful_typegen.compiler.names import to_pascal
from contentful_typegen.model.options import RenderOptions
from contentful_typegen.model.schema import ContentTypeRecord, FieldDefinition

# ###############
# Public Interface
# ###############

CORE_TYPES = """\
export interface Link<T extends string> {
  sys: {
    type: 'Link';
    linkType: T;
    id: string;
  };
}

export interface EntrySys {
  id: string;
  type: 'Entry';
  createdAt: string;
  updatedAt: string;
  locale?: string;
  revision?: number;
  space?: Link<'Space'>;
  environment?: Link<'Environment'>;
  contentType: {
    sys: {
      id: string;
      linkType: 'ContentType';
      type: 'Link';
    };
  };
}

export interface Entry<T> {
  sys: EntrySys;
  fields: T;
  metadata?: {
    tags: Link<'Tag'>[];
  };
}

export interface AssetSys {
  id: string;
  type: 'Asset';
  createdAt: string;
  updatedAt: string;
  locale?: string;
  revision?: number;
}

export interface Asset {
  sys: AssetSys;
  fields: {
    title?: string;
    description?: string;
    file?: {
      url: string;
      fileName: string;
      contentType: string;
      details?: {
        size?: number;
        image?: {
          width: number;
          height: number;
        };
      };
    };
  };
}

export interface Document {
  nodeType: 'document';
  data: Record<string, unknown>;
  content: unknown[];
}"""


def build_file_header(count: int) -> str:
    """Build the banner placed at the top of the generated file."""
    plural = "" if count == 1 else "s"
    return (
        "/* ============================================================================\n"
        f" * {count} Contentful content type interface{plural} generated by contentful-typegen\n"
        " * DO NOT EDIT THIS FILE: it is auto-generated and overwritten on each build.\n"
        " * ========================================================================== */\n"
    )


def create_file(content_types: Sequence[ContentTypeRecord], options: RenderOptions | None = None) -> str:
    """Create the full ``.d.ts`` content for *content_types*.

    Content types are emitted in input order.  Field comments come from the
    field ``note`` only; blank notes produce no comment.

    Args:
        content_types: The content types of one environment.
        options: Render options; defaults apply when omitted.

    Returns:
        The declaration file text.
    """
    opts = options if options is not None else RenderOptions()
    all_type_ids = tuple(dict.fromkeys(ct.id for ct in content_types))

    blocks = [_render_content_type(ct, all_type_ids, opts) for ct in content_types]
    return build_file_header(len(content_types)) + CORE_TYPES + "\n\n" + "\n".join(blocks)


# ################
# Implementation
# ################


def _render_content_type(ct: ContentTypeRecord, all_type_ids: tuple[str, ...], options: RenderOptions) -> str:
    base = f"{options.prefix}{to_pascal(ct.id)}"
    field_lines = "\n".join(_render_field(f, all_type_ids, options) for f in ct.fields)

    doc = f"/** {_comment_text(ct.description)} */\n" if ct.description else ""
    fields_interface = f"{doc}export interface {base}Fields {{\n{field_lines}\n}}\n"
    return fields_interface + _render_entry(ct, base, options)


def _render_field(field: FieldDefinition, all_type_ids: tuple[str, ...], options: RenderOptions) -> str:
    mapping = field_to_ts(field, all_type_ids, options)

    note = (field.note or "").strip()
    doc = f"  /** {_comment_text(note)} */\n" if note else ""

    marker = "" if mapping.required else "?"
    undefined = " | undefined" if not mapping.required and options.include_undefined_on_optional else ""
    return f"{doc}  {mapping.name}{marker}: {mapping.ts_type}{undefined};"


def _render_entry(ct: ContentTypeRecord, base: str, options: RenderOptions) -> str:
    if not options.brand_content_type_id:
        return f"export type {base} = Entry<{base}Fields>;\n"
    return (
        f"export interface {base} extends Entry<{base}Fields> {{\n"
        f'  sys: Entry<{base}Fields>["sys"] & {{\n'
        "    contentType: {\n"
        "      sys: {\n"
        f"        id: '{ct.id}';\n"
        "        linkType: 'ContentType';\n"
        "        type: 'Link';\n"
        "      };\n"
        "    };\n"
        "  };\n"
        "}\n"
    )


def _comment_text(text: str) -> str:
    # "*/" would end the doc comment early.
    return text.replace("*/", "*\\/")
