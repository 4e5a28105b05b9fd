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


class AdvancedLink(GraphQLMixin, RequiredMixin, ConditionalLogicMixin, WrapperMixin, InstructionsMixin, Field):
    """Link picker that can point to a URL, a post or a term."""

    meta = FieldMeta(
        type="acfe_advanced_link",
        docs_url="https://www.acf-extended.com/features/fields/advanced-link",
        since="0.8.8.6",
    )

    def post_type(self, post_types: list[str]) -> Self:
        """Only offer posts of these post type slugs."""
        self.settings["post_type"] = post_types
        return self

    def taxonomy(self, taxonomies: list[str]) -> Self:
        """Only offer terms of these taxonomies."""
        self.settings["taxonomy"] = taxonomies
        return self
