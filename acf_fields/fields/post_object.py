from __future__ import annotations

from typing import Self

from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    GraphQLMixin,
    InstructionsMixin,
    MultipleMixin,
    NullableMixin,
    RequiredMixin,
    ReturnFormatMixin,
    WrapperMixin,
)


class PostObject(
    GraphQLMixin,
    ConditionalLogicMixin,
    InstructionsMixin,
    MultipleMixin,
    NullableMixin,
    RequiredMixin,
    ReturnFormatMixin,
    WrapperMixin,
    Field,
):
    meta = FieldMeta(
        type="post_object",
        provider="WPGraphQL for Advanced Custom Fields",
        docs_url="https://github.com/wp-graphql/wp-graphql-acf",
        since="0.5.3",
    )

    def post_types(self, post_types: list[str]) -> Self:
        self.settings["post_type"] = post_types
        return self

    def post_status(self, statuses: list[str]) -> Self:
        self.settings["post_status"] = statuses
        return self

    def taxonomies(self, terms: list[str]) -> Self:
        """Only offer posts in these terms, given as ``taxonomy:slug``."""
        self.settings["taxonomy"] = terms
        return self
