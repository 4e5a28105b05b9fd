"""Flexible content layout with the ACF Extended modal, grid and render settings."""

from __future__ import annotations

from typing import Self

from acf_fields.config import settings as config
from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import GraphQLMixin, LayoutMixin, MinMaxMixin, SubFieldsMixin
from acf_fields.rules import Location


class Layout(GraphQLMixin, LayoutMixin, MinMaxMixin, SubFieldsMixin, Field):
    meta = FieldMeta(
        type="layout",
        docs_url="https://www.acf-extended.com/features/fields/flexible-content",
        since="0.8.8.6",
    )

    layout_setting = "display"

    def __init__(self, label: str, name: str | None = None) -> None:
        super().__init__(label, name)
        self.modal_size()

    def _key_prefix(self) -> str:
        return config.layout_key_prefix

    def modal_size(self, size: str = "") -> Self:
        """Size of the edit modal: small, medium, large, xlarge or full."""
        self.settings["acfe_flexible_modal_edit_size"] = size
        return self

    def settings_clone(self, field_groups: list[str], size: str = "") -> Self:
        """
        Clone field groups into a settings modal for this layout.

        Args:
            field_groups: Keys of the field groups to clone.
            size:         Modal size, small through full.
        """
        self.settings["acfe_flexible_settings_size"] = size
        self.settings["acfe_flexible_settings"] = field_groups
        return self

    def category(self, categories: list[str] | None = None) -> Self:
        """Categories shown as tabs in the selection modal."""
        self.settings["acfe_flexible_category"] = list(categories) if categories is not None else []
        return self

    def default_column(self, size: int = 12) -> Self:
        """Column size when the layout is added; 0 means auto."""
        self.settings["acfe_layout_col"] = size
        return self

    def allowed_columns(self, sizes: list[int] | None = None) -> Self:
        """Column sizes the user may choose from; 0 means auto."""
        self.settings["acfe_layout_allowed_col"] = list(sizes) if sizes is not None else []
        return self

    def locations(self, rules: list[Location] | None = None) -> Self:
        """Location rule groups where the layout is available."""
        self.settings["acfe_layout_locations"] = [rule.get() for rule in rules or []]
        return self

    def render(self, files: dict[str, str] | None = None) -> Self:
        """
        Template, style and script files used to render the layout.

        Missing entries are written as empty strings.
        """
        files = files or {}
        self.settings["acfe_flexible_render_template"] = files.get("template", "")
        self.settings["acfe_flexible_render_style"] = files.get("style", "")
        self.settings["acfe_flexible_render_script"] = files.get("script", "")
        return self
