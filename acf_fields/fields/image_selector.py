from __future__ import annotations

from typing import Self

from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ChoicesMixin,
    ConditionalLogicMixin,
    DefaultValueMixin,
    DirectionLayoutMixin,
    GraphQLMixin,
    InstructionsMixin,
    MultipleMixin,
    NullableMixin,
    RequiredMixin,
    ReturnFormatMixin,
    WrapperMixin,
)


class ImageSelector(
    GraphQLMixin,
    DefaultValueMixin,
    ChoicesMixin,
    MultipleMixin,
    NullableMixin,
    ReturnFormatMixin,
    DirectionLayoutMixin,
    ConditionalLogicMixin,
    InstructionsMixin,
    RequiredMixin,
    WrapperMixin,
    Field,
):
    """Choice field whose options are displayed as images."""

    meta = FieldMeta(
        type="acfe_image_selector",
        docs_url="https://www.acf-extended.com/features/fields/image-selector",
        since="0.8.8.6",
    )

    def container(self, width: str = "", height: str = "", border: int = 4) -> Self:
        """Width, height and border size of each image container."""
        self.settings["width"] = width
        self.settings["height"] = height
        self.settings["border"] = border
        return self

    def image_size(self, size: str) -> Self:
        self.settings["image_size"] = size
        return self
