"""Button field: renders a button that can submit the form or fire an ajax event."""

from __future__ import annotations

from typing import Self

from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    GraphQLMixin,
    InstructionsMixin,
    RequiredMixin,
    WrapperMixin,
)
from acf_fields.i18n import translate


class Button(GraphQLMixin, RequiredMixin, ConditionalLogicMixin, WrapperMixin, InstructionsMixin, Field):
    meta = FieldMeta(
        type="acfe_button",
        docs_url="https://www.acf-extended.com/features/fields/button",
        since="0.8.8.6",
    )

    def __init__(self, label: str, name: str | None = None) -> None:
        super().__init__(label, name)
        self.button_value(translate("Submit"))
        self.button_type("button")
        self.button_class("button button-secondary")

    def button_value(self, value: str) -> Self:
        """Text shown on the button."""
        self.settings["button_value"] = value
        return self

    def button_type(self, value: str) -> Self:
        """HTML button type, ``button`` or ``submit``."""
        self.settings["button_type"] = value
        return self

    def button_before(self, html: str) -> Self:
        """Custom HTML rendered before the button."""
        self.settings["button_before"] = html
        return self

    def button_after(self, html: str) -> Self:
        """Custom HTML rendered after the button."""
        self.settings["button_after"] = html
        return self

    def button_class(self, value: str) -> Self:
        self.settings["button_class"] = value
        return self

    def button_id(self, value: str) -> Self:
        self.settings["button_id"] = value
        return self

    def button_ajax(self) -> Self:
        """Trigger an ajax event on click."""
        self.settings["button_ajax"] = True
        return self
