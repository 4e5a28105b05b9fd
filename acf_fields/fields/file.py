from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    FileSizeMixin,
    GraphQLMixin,
    InstructionsMixin,
    LibraryMixin,
    MimeTypesMixin,
    RequiredMixin,
    ReturnFormatMixin,
    WrapperMixin,
)


class File(
    GraphQLMixin,
    ConditionalLogicMixin,
    FileSizeMixin,
    InstructionsMixin,
    LibraryMixin,
    MimeTypesMixin,
    RequiredMixin,
    ReturnFormatMixin,
    WrapperMixin,
    Field,
):
    meta = FieldMeta(
        type="file",
        provider="WPGraphQL for Advanced Custom Fields",
        docs_url="https://github.com/wp-graphql/wp-graphql-acf",
        since="0.5.3",
    )
