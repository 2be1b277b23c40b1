# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the content model records and render options."""

import pytest
from pydantic import ValidationError

from contentful_typegen.model import ContentTypeRecord, FieldDefinition, FieldType, LinkType, RenderOptions


class TestFieldDefinition:
    def test_defaults(self) -> None:
        field = FieldDefinition()
        assert field.id is None
        assert field.name is None
        assert field.type is None
        assert field.required is False
        assert field.note is None
        assert field.validations == []
        assert field.link_type is None
        assert field.items is None

    def test_api_keys_are_accepted(self) -> None:
        field = FieldDefinition.model_validate(
            {
                "id": "author",
                "name": "Author",
                "type": "Link",
                "linkType": "Entry",
                "localized": False,
                "disabled": False,
                "omitted": False,
                "validations": [{"linkContentType": ["person"]}],
            }
        )
        assert field.type == FieldType.LINK
        assert field.link_type == LinkType.ENTRY
        assert field.validations == [{"linkContentType": ["person"]}]

    def test_nested_items(self) -> None:
        field = FieldDefinition.model_validate(
            {"id": "tags", "type": "Array", "items": {"type": "Symbol", "validations": [{"in": ["a"]}]}}
        )
        assert field.items is not None
        assert field.items.type == FieldType.SYMBOL
        assert field.items.id is None

    def test_null_required_means_optional(self) -> None:
        assert FieldDefinition.model_validate({"id": "f", "required": None}).required is False

    def test_null_validations_are_empty(self) -> None:
        assert FieldDefinition.model_validate({"id": "f", "validations": None}).validations == []

    def test_malformed_validations_are_ignored(self) -> None:
        field = FieldDefinition.model_validate(
            {"id": "f", "type": "Symbol", "validations": ["unique", None, 3, {"in": ["a"]}]}
        )
        assert field.validations == [{"in": ["a"]}]
        assert FieldDefinition.model_validate({"id": "g", "validations": {"in": ["a"]}}).validations == []

    def test_malformed_nested_item_validations_are_ignored(self) -> None:
        field = FieldDefinition.model_validate(
            {"id": "tags", "type": "Array", "items": {"type": "Symbol", "validations": [[1], {"in": ["x"]}]}}
        )
        assert field.items is not None
        assert field.items.validations == [{"in": ["x"]}]

    def test_unknown_type_tag_is_kept(self) -> None:
        assert FieldDefinition(type="ResourceLink").type == "ResourceLink"

    def test_is_immutable(self) -> None:
        field = FieldDefinition(id="title")
        with pytest.raises(ValidationError):
            field.id = "other"  # type: ignore[misc]


class TestContentTypeRecord:
    def test_id_comes_from_sys(self) -> None:
        record = ContentTypeRecord.model_validate(
            {
                "sys": {"id": "article", "type": "ContentType", "version": 3},
                "name": "Article",
                "displayField": "title",
                "fields": [{"id": "title", "type": "Symbol"}],
            }
        )
        assert record.id == "article"
        assert record.description is None
        assert [f.id for f in record.fields] == ["title"]

    def test_missing_sys_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ContentTypeRecord.model_validate({"name": "No sys"})


class TestRenderOptions:
    def test_defaults(self) -> None:
        options = RenderOptions()
        assert options.prefix == "I"
        assert options.include_undefined_on_optional is True
        assert options.arrays_readonly is False
        assert options.prefer_linked_aliases is True
        assert options.brand_content_type_id is True

    def test_unknown_option_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RenderOptions(readonly=True)  # type: ignore[call-arg]
