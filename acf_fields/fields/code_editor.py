"""Code editor field backed by CodeMirror."""

from __future__ import annotations

from typing import Self

from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    DefaultValueMixin,
    GraphQLMixin,
    InstructionsMixin,
    PlaceholderMixin,
    RequiredMixin,
    WrapperMixin,
)


class CodeEditor(
    GraphQLMixin,
    DefaultValueMixin,
    PlaceholderMixin,
    ConditionalLogicMixin,
    InstructionsMixin,
    RequiredMixin,
    WrapperMixin,
    Field,
):
    meta = FieldMeta(
        type="acfe_code_editor",
        docs_url="https://www.acf-extended.com/features/fields/code-editor",
        since="0.8.8.6",
    )

    def __init__(self, label: str, name: str | None = None) -> None:
        super().__init__(label, name)
        self.mode("text/html")
        self.indent_unit(4)
        self.rows(4)

    def mode(self, value: str) -> Self:
        """
        Syntax highlighting mode.

        One of text/html, javascript, application/x-json, css,
        application/x-httpd-php or text/x-php.
        """
        self.settings["mode"] = value
        return self

    def lines(self) -> Self:
        """Show line numbers."""
        self.settings["lines"] = True
        return self

    def indent_unit(self, spaces: int) -> Self:
        self.settings["indent_unit"] = spaces
        return self

    def max_length(self, value: int) -> Self:
        self.settings["maxlength"] = value
        return self

    def rows(self, value: int) -> Self:
        """Textarea height in rows."""
        self.settings["rows"] = value
        return self

    def max_rows(self, value: int) -> Self:
        self.settings["max_rows"] = value
        return self

    def return_entities(self) -> Self:
        """Return the value with HTML entities encoded."""
        self.settings["return_entities"] = True
        return self
