from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    GraphQLMixin,
    InstructionsMixin,
    RequiredMixin,
    WrapperMixin,
)


class Table(GraphQLMixin, InstructionsMixin, RequiredMixin, WrapperMixin, ConditionalLogicMixin, Field):
    meta = FieldMeta(
        type="table",
        provider="Advanced Custom Fields: Table Field",
        docs_url="https://de.wordpress.org/plugins/advanced-custom-fields-table-field/",
        since="1.3.14",
    )
