"""Clone field: reuses existing fields or field groups inside another group."""

from __future__ import annotations

from typing import Self

from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    GraphQLMixin,
    InstructionsMixin,
    LayoutMixin,
    RequiredMixin,
    WrapperMixin,
)
from acf_fields.i18n import translate


class Clone(GraphQLMixin, ConditionalLogicMixin, InstructionsMixin, RequiredMixin, WrapperMixin, LayoutMixin, Field):
    meta = FieldMeta(
        type="clone",
        docs_url="https://www.acf-extended.com/features/fields/clone",
        since="0.8.8.6",
    )

    def __init__(self, label: str, name: str | None = None) -> None:
        super().__init__(label, name)
        self.modal_button(translate("Edit"))

    def fields(self, keys: list[str]) -> Self:
        """Keys of the fields or field groups to clone."""
        self.settings["clone"] = keys
        return self

    def display(self, value: str) -> Self:
        """Show cloned fields as a ``group`` or ``seamless``ly inline."""
        self.settings["display"] = value
        return self

    def prefix_label(self) -> Self:
        """Display labels as ``%field_label%``."""
        self.settings["prefix_label"] = True
        return self

    def prefix_name(self) -> Self:
        """Store values as ``%field_name%``."""
        self.settings["prefix_name"] = True
        return self

    def seamless(self) -> Self:
        """Remove borders and padding around the cloned fields."""
        self.settings["acfe_seamless_style"] = True
        return self

    def modal(self) -> Self:
        """Edit the cloned fields in a modal. Forces the ``group`` display."""
        self.display("group")
        self.settings["acfe_clone_modal"] = True
        return self

    def modal_close(self) -> Self:
        """Show a close button in the modal. Enables the modal."""
        self.modal()
        self.settings["acfe_clone_modal_close"] = True
        return self

    def modal_button(self, text: str) -> Self:
        self.settings["acfe_clone_modal_button"] = text
        return self

    def modal_size(self, value: str) -> Self:
        """One of small, medium, large, xlarge or full."""
        self.settings["acfe_clone_modal_size"] = value
        return self
