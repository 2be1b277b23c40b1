# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering options that shape the generated TypeScript declarations."""

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############


class RenderOptions(BaseModel):
    """Options governing how TypeScript is rendered from content types.

    Attributes:
        prefix: Prepended to every generated name (``"I"`` gives
            ``IArticleFields`` and ``IArticle``).
        include_undefined_on_optional: Append ``| undefined`` to optional
            properties, as needed under ``exactOptionalPropertyTypes``.
        arrays_readonly: Emit ``ReadonlyArray<T>`` instead of ``T[]``.
        prefer_linked_aliases: Render entry links as ``IThing`` instead of
            ``Entry<IThingFields>``.
        brand_content_type_id: Brand each entry interface with its literal
            ``sys.contentType.sys.id`` for type-level narrowing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    prefix: str = "I"
    include_undefined_on_optional: bool = True
    arrays_readonly: bool = False
    prefer_linked_aliases: bool = True
    brand_content_type_id: bool = True
