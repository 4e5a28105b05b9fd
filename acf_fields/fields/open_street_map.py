"""OpenStreetMap field: pick one or more markers on a map."""

from __future__ import annotations

from typing import Self

from acf_fields.constants import DEFAULT_MAP_LAYERS
from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    GraphQLMixin,
    InstructionsMixin,
    NullableMixin,
    RequiredMixin,
    WrapperMixin,
)


class OpenStreetMap(GraphQLMixin, InstructionsMixin, RequiredMixin, NullableMixin, WrapperMixin, ConditionalLogicMixin, Field):
    meta = FieldMeta(
        type="open_street_map",
        provider="ACF OpenStreetMap Field",
        docs_url="https://wordpress.org/plugins/acf-openstreetmap-field/",
        since="1.3.2",
    )

    def height(self, height: str) -> Self:
        """Map height in the editor."""
        self.settings["height"] = height
        return self

    def allow_map_layers(self) -> Self:
        # The host plugin reads this flag inverted
        self.settings["allow_map_layers"] = False
        return self

    def return_format(self, value: str) -> Self:
        """``raw`` or one of the map provider's template formats."""
        self.settings["return_format"] = value
        return self

    def center_map(self, lat: float, lng: float) -> Self:
        """Initial map center."""
        self.settings["center_lat"] = lat
        self.settings["center_lng"] = lng
        return self

    def zoom(self, level: int) -> Self:
        self.settings["zoom"] = level
        return self

    def max_markers(self, count: int) -> Self:
        self.settings["max_markers"] = count
        return self

    def layers(self, layers: list[str] | None = None) -> Self:
        """Tile layers to display, ``Stadia.OSMBright`` by default."""
        self.settings["layers"] = list(layers) if layers is not None else list(DEFAULT_MAP_LAYERS)
        return self
