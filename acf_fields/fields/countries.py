"""Countries field: select one or more countries."""

from __future__ import annotations

from typing import Self

from acf_fields.constants import COUNTRY_APPEARANCES, COUNTRY_RETURN_FORMATS
from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    GraphQLMixin,
    InstructionsMixin,
    MinMaxMixin,
    MultipleMixin,
    NullableMixin,
    RequiredMixin,
    WrapperMixin,
)


class Countries(
    GraphQLMixin,
    RequiredMixin,
    ConditionalLogicMixin,
    WrapperMixin,
    InstructionsMixin,
    MinMaxMixin,
    NullableMixin,
    MultipleMixin,
    Field,
):
    meta = FieldMeta(
        type="acfe_countries",
        docs_url="https://www.acf-extended.com/features/fields/countries",
        since="0.8.8.7",
    )

    def appearance(self, field_type: str) -> Self:
        """
        Input used to pick countries.

        Raises:
            InvalidArgumentError: If not one of checkbox, multi_select, select or radio.
        """
        self._validate(field_type, COUNTRY_APPEARANCES, "field type")
        self.settings["field_type"] = field_type
        return self

    def return_format(self, value: str) -> Self:
        """
        Shape of the returned value.

        Raises:
            InvalidArgumentError: If not one of array, name or code.
        """
        self._validate(value, COUNTRY_RETURN_FORMATS, "return format")
        self.settings["return_format"] = value
        return self

    def countries(self, codes: list[str]) -> Self:
        """Only offer these countries."""
        self.settings["countries"] = codes
        return self

    def display_format(self, fmt: str) -> Self:
        """Label template, built from ``{localized}``, ``{native}`` and ``{code}``."""
        self.settings["display_format"] = fmt
        return self

    def flags(self) -> Self:
        self.settings["flags"] = True
        return self

    def continents(self) -> Self:
        """Group countries by continent."""
        self.settings["continents"] = True
        return self

    def stylised_ui(self, use_ajax: bool = False) -> Self:
        self.settings["ui"] = True
        self.settings["ajax"] = use_ajax
        return self
