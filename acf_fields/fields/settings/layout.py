"""Options for fields that hold rows of sub fields."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from acf_fields.constants import SUB_FIELD_LAYOUTS

if TYPE_CHECKING:
    from acf_fields.fields.base import Field


class LayoutMixin:
    settings: dict[str, Any]

    # Setting key written by layout(); layouts store it under "display"
    layout_setting: str = "layout"

    def layout(self, value: str) -> Self:
        """Render sub fields as blocks, rows or a table."""
        self._validate(value, SUB_FIELD_LAYOUTS, "layout")
        self.settings[self.layout_setting] = value
        return self


class MinMaxMixin:
    settings: dict[str, Any]

    def min_items(self, value: int) -> Self:
        self.settings["min"] = value
        return self

    def max_items(self, value: int) -> Self:
        self.settings["max"] = value
        return self


class SubFieldsMixin:
    settings: dict[str, Any]

    def fields(self, fields: list[Field]) -> Self:
        """Child field builders, serialized under this field's key."""
        self.settings["sub_fields"] = list(fields)
        return self
