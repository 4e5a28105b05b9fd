from __future__ import annotations

from typing import Self

from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ButtonLabelMixin,
    ConditionalLogicMixin,
    GraphQLMixin,
    InstructionsMixin,
    LayoutMixin,
    MinMaxMixin,
    RequiredMixin,
    SubFieldsMixin,
    WrapperMixin,
)
from acf_fields.schemas import FieldDefinition
from acf_fields.utils import generate_key


class Repeater(
    GraphQLMixin,
    ButtonLabelMixin,
    ConditionalLogicMixin,
    InstructionsMixin,
    LayoutMixin,
    MinMaxMixin,
    RequiredMixin,
    SubFieldsMixin,
    WrapperMixin,
    Field,
):
    meta = FieldMeta(
        type="repeater",
        provider="WPGraphQL for Advanced Custom Fields",
        docs_url="https://github.com/wp-graphql/wp-graphql-acf",
        since="0.5.3",
    )

    def collapsed(self, name: str) -> Self:
        """Name of the sub field shown while a row is collapsed."""
        self.settings["collapsed"] = name
        return self

    def paginated(self, rows_per_page: int) -> Self:
        self.settings["pagination"] = True
        self.settings["rows_per_page"] = rows_per_page
        return self

    def to_definition(self, parent_key: str | None = None) -> FieldDefinition:
        """Serialize the repeater; ``collapsed`` becomes the sub field's key."""
        definition = super().to_definition(parent_key)
        collapsed = definition.settings.get("collapsed")
        if collapsed:
            definition.settings["collapsed"] = generate_key(collapsed, definition.key)
        return definition
