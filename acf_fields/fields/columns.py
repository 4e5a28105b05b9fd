from __future__ import annotations

from typing import Self

from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import ConditionalLogicMixin, GraphQLMixin


class Columns(GraphQLMixin, ConditionalLogicMixin, Field):
    """Layout-only field that splits the following fields into columns."""

    meta = FieldMeta(
        type="acfe_column",
        docs_url="https://www.acf-extended.com/features/fields/columns",
        since="0.8.8.6",
    )

    def columns(self, width: str) -> Self:
        """Column width: auto, fill or 1/12 through 12/12."""
        self.settings["columns"] = width
        return self

    def endpoint(self) -> Self:
        """Close the previous columns."""
        self.settings["endpoint"] = True
        return self

    def border(self, borders: list[str]) -> Self:
        """Enable ``column`` and/or ``fields`` borders."""
        self.settings["border"] = borders
        return self
