from __future__ import annotations

from typing import Self

from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    DimensionsMixin,
    FileSizeMixin,
    GraphQLMixin,
    InstructionsMixin,
    LibraryMixin,
    MimeTypesMixin,
    PreviewSizeMixin,
    RequiredMixin,
    ReturnFormatMixin,
    WrapperMixin,
)


class Image(
    GraphQLMixin,
    ConditionalLogicMixin,
    DimensionsMixin,
    FileSizeMixin,
    InstructionsMixin,
    LibraryMixin,
    MimeTypesMixin,
    PreviewSizeMixin,
    RequiredMixin,
    ReturnFormatMixin,
    WrapperMixin,
    Field,
):
    meta = FieldMeta(
        type="image",
        docs_url="https://www.acf-extended.com/features/fields/image",
        since="0.8.8.6",
    )

    def __init__(self, label: str, name: str | None = None) -> None:
        super().__init__(label, name)
        self.uploader("default")

    def uploader(self, value: str) -> Self:
        """Uploader type: ``default``, ``wp`` or ``basic``."""
        self.settings["uploader"] = value
        return self
