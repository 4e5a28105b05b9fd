from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ChoicesMixin,
    ConditionalLogicMixin,
    DefaultValueMixin,
    DirectionLayoutMixin,
    GraphQLMixin,
    InstructionsMixin,
    RequiredMixin,
    ReturnFormatMixin,
    WrapperMixin,
)


class Checkbox(
    GraphQLMixin,
    ChoicesMixin,
    DefaultValueMixin,
    DirectionLayoutMixin,
    ReturnFormatMixin,
    ConditionalLogicMixin,
    InstructionsMixin,
    RequiredMixin,
    WrapperMixin,
    Field,
):
    meta = FieldMeta(
        type="checkbox",
        docs_url="https://www.acf-extended.com/features/fields/checkbox",
        since="0.8.8.6",
    )
