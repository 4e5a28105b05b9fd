"""
Flexible content field with the ACF Extended advanced settings.

Layouts are added with layouts(); the remaining setters toggle the editing
experience (modals, grid, previews). Advanced settings are enabled at
construction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ButtonLabelMixin,
    ConditionalLogicMixin,
    GraphQLMixin,
    InstructionsMixin,
    MinMaxMixin,
    RequiredMixin,
)

if TYPE_CHECKING:
    from acf_fields.fields.layout import Layout


class FlexibleContent(
    GraphQLMixin,
    ButtonLabelMixin,
    ConditionalLogicMixin,
    InstructionsMixin,
    MinMaxMixin,
    RequiredMixin,
    Field,
):
    meta = FieldMeta(
        type="flexible_content",
        docs_url="https://www.acf-extended.com/features/fields/flexible-content",
        since="0.8.8.6",
    )

    def __init__(self, label: str, name: str | None = None) -> None:
        super().__init__(label, name)
        self.advanced()

    def layouts(self, layouts: list[Layout]) -> Self:
        self.settings["layouts"] = list(layouts)
        return self

    def advanced(self) -> Self:
        """Show the advanced flexible content settings."""
        self.settings["acfe_flexible_advanced"] = True
        return self

    def stylised_button(self) -> Self:
        """Better action buttons integration."""
        self.settings["acfe_flexible_stylised_button"] = True
        return self

    def modal_edit(self, size: str = "full") -> Self:
        """
        Edit layout content in a modal.

        Args:
            size: small, medium, large, xlarge or full.
        """
        self.settings["acfe_flexible_modal_edit"] = {
            "acfe_flexible_modal_edit_enabled": True,
            "acfe_flexible_modal_edit_size": size,
        }
        return self

    def modal_selection(
        self, size: str = "full", title: str = "Choose Layout", cols: int = 4, cats: bool = False
    ) -> Self:
        """
        Select new layouts in a modal.

        Args:
            size:  Modal size, small through full.
            title: Modal title.
            cols:  Number of layout columns in the modal.
            cats:  Show layout category tabs.
        """
        self.settings["acfe_flexible_modal"] = {
            "acfe_flexible_modal_enabled": True,
            "acfe_flexible_modal_title": title,
            "acfe_flexible_modal_size": size,
            "acfe_flexible_modal_col": cols,
            "acfe_flexible_modal_categories": cats,
        }
        return self

    def grid(self, align: str = "center", v_align: str = "stretch", nowrap: bool | int = 0) -> Self:
        """
        Enable columns mode.

        Args:
            align:   Horizontal alignment of the layouts.
            v_align: Vertical alignment of the layouts.
            nowrap:  Keep layouts on a single line.
        """
        self.settings["acfe_flexible_grid"] = {
            "acfe_flexible_grid_enabled": True,
            "acfe_flexible_grid_align": align,
            "acfe_flexible_grid_valign": v_align,
            "acfe_flexible_grid_wrap": nowrap,
        }
        return self

    def templates(self) -> Self:
        """Render layouts with their own template, style and script files."""
        self.settings["acfe_flexible_layouts_templates"] = True
        return self

    def placeholder(self) -> Self:
        """Display a placeholder with an icon for each layout."""
        self.settings["acfe_flexible_layouts_placeholder"] = True
        return self

    def previews(self) -> Self:
        """Use the layouts' render settings for a dynamic admin preview."""
        self.settings["acfe_flexible_layouts_previews"] = True
        return self

    def thumbnails(self) -> Self:
        self.settings["acfe_flexible_layouts_thumbnails"] = True
        return self

    def layout_settings(self) -> Self:
        """Let each layout clone a field group as its settings modal."""
        self.settings["acfe_flexible_layouts_settings"] = True
        return self

    def ajax(self) -> Self:
        """Load layout settings asynchronously."""
        self.settings["acfe_flexible_layouts_ajax"] = True
        return self

    def add_actions(self, actions: list[str]) -> Self:
        """Extra layout actions: title, toggle, copy, lock, close."""
        self.settings["acfe_flexible_add_actions"] = actions
        return self

    def empty_message(self, message: str) -> Self:
        """Text displayed while no layout has been added."""
        self.settings["acfe_flexible_empty_message"] = message
        return self

    def has_locations(self) -> Self:
        """Allow location rules on layouts."""
        self.settings["acfe_flexible_layouts_locations"] = True
        return self
