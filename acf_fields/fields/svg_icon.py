from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    DefaultValueMixin,
    GraphQLMixin,
    InstructionsMixin,
    MultipleMixin,
    NullableMixin,
    RequiredMixin,
    WrapperMixin,
)


class SVGIcon(
    GraphQLMixin,
    InstructionsMixin,
    DefaultValueMixin,
    RequiredMixin,
    MultipleMixin,
    NullableMixin,
    WrapperMixin,
    ConditionalLogicMixin,
    Field,
):
    meta = FieldMeta(
        type="svg_icon",
        provider="ACF SVG Icon Field",
        docs_url="https://github.com/7studio/acf-svg-icon",
        since="1.0.1",
    )
