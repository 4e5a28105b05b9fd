from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    GraphQLMixin,
    InstructionsMixin,
    LibraryMixin,
    MimeTypesMixin,
    NullableMixin,
    PreviewSizeMixin,
    RequiredMixin,
    WrapperMixin,
)


class FocusPoint(
    GraphQLMixin,
    InstructionsMixin,
    RequiredMixin,
    NullableMixin,
    WrapperMixin,
    LibraryMixin,
    MimeTypesMixin,
    PreviewSizeMixin,
    ConditionalLogicMixin,
    Field,
):
    """Image field that also stores the focal point of the picture."""

    meta = FieldMeta(
        type="focuspoint",
        provider="ACF: FocusPoint",
        docs_url="https://github.com/ooksanen/acf-focuspoint",
        since="1.2.0",
    )
