"""Options for fields that pick from a list of values."""

from typing import Any, Self

from acf_fields.constants import DIRECTION_LAYOUTS, RETURN_FORMATS


class ChoicesMixin:
    settings: dict[str, Any]

    def choices(self, values: dict[str, Any] | list[Any]) -> Self:
        """Selectable values, either a list or a ``value -> label`` dict."""
        self.settings["choices"] = values
        return self


class DirectionLayoutMixin:
    settings: dict[str, Any]

    def layout(self, value: str) -> Self:
        """Arrange the choices horizontally or vertically."""
        self._validate(value, DIRECTION_LAYOUTS, "layout")
        self.settings["layout"] = value
        return self


class ReturnFormatMixin:
    settings: dict[str, Any]

    def return_format(self, value: str) -> Self:
        """Shape of the value returned to templates."""
        self._validate(value, RETURN_FORMATS, "return format")
        self.settings["return_format"] = value
        return self
