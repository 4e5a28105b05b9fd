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
    MinMaxMixin,
    PreviewSizeMixin,
    RequiredMixin,
    ReturnFormatMixin,
    WrapperMixin,
)


class Gallery(
    GraphQLMixin,
    ConditionalLogicMixin,
    DimensionsMixin,
    FileSizeMixin,
    InstructionsMixin,
    LibraryMixin,
    MimeTypesMixin,
    MinMaxMixin,
    PreviewSizeMixin,
    RequiredMixin,
    ReturnFormatMixin,
    WrapperMixin,
    Field,
):
    meta = FieldMeta(
        type="gallery",
        provider="WPGraphQL for Advanced Custom Fields",
        docs_url="https://github.com/wp-graphql/wp-graphql-acf",
        since="0.5.3",
    )

    def prepend_files(self) -> Self:
        """Insert new uploads at the start of the gallery."""
        self.settings["insert"] = "prepend"
        return self
