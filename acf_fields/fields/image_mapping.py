from __future__ import annotations

from typing import Self

from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    GraphQLMixin,
    InstructionsMixin,
    NullableMixin,
    RequiredMixin,
    WrapperMixin,
)


class ImageMapping(GraphQLMixin, InstructionsMixin, RequiredMixin, NullableMixin, WrapperMixin, ConditionalLogicMixin, Field):
    """Hotspot picker storing a coordinate pair on a linked image field."""

    meta = FieldMeta(
        type="image_mapping",
        provider="ACF: Image Hotspots Field",
        docs_url="https://wordpress.org/plugins/acf-image-mapping-hotspots/",
        since="0.1",
    )

    def image_field(self, label: str) -> Self:
        """Label of the image field the hotspot is placed on."""
        self.settings["image_field_label"] = label
        return self

    def default_image(self, image: str) -> Self:
        self.settings["default_image"] = image
        return self

    def percent_based(self) -> Self:
        """Store coordinates as percentages instead of the raw X / Y pair."""
        self.settings["percent_based"] = True
        return self
