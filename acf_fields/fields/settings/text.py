"""Free-text options shown around the input."""

from typing import Any, Self


class InstructionsMixin:
    settings: dict[str, Any]

    def instructions(self, text: str) -> Self:
        """Help text shown to editors below the label."""
        self.settings["instructions"] = text
        return self


class PlaceholderMixin:
    settings: dict[str, Any]

    def placeholder(self, text: str) -> Self:
        self.settings["placeholder"] = text
        return self


class DefaultValueMixin:
    settings: dict[str, Any]

    def default(self, value: Any) -> Self:
        """Value used when a new entry is created."""
        self.settings["default_value"] = value
        return self


class ButtonLabelMixin:
    settings: dict[str, Any]

    def button_label(self, text: str) -> Self:
        """Text of the "add row" / "add layout" button."""
        self.settings["button_label"] = text
        return self
