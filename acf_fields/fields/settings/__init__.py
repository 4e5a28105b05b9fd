"""
Capability mixins

Each mixin contributes setters for one key family of a field's settings.
Field classes compose them with the Field base.
"""

from .choices import ChoicesMixin, DirectionLayoutMixin, ReturnFormatMixin
from .conditional_logic import ConditionalLogicMixin
from .dates import DateTimeFormatMixin, WeekDayMixin
from .flags import (
    DisabledMixin,
    GraphQLMixin,
    MultipleMixin,
    NullableMixin,
    RequiredMixin,
    WritableMixin,
)
from .layout import LayoutMixin, MinMaxMixin, SubFieldsMixin
from .media import DimensionsMixin, FileSizeMixin, LibraryMixin, MimeTypesMixin, PreviewSizeMixin
from .text import ButtonLabelMixin, DefaultValueMixin, InstructionsMixin, PlaceholderMixin
from .wrapper import WrapperMixin

__all__ = [
    "ButtonLabelMixin",
    "ChoicesMixin",
    "ConditionalLogicMixin",
    "DateTimeFormatMixin",
    "DefaultValueMixin",
    "DimensionsMixin",
    "DirectionLayoutMixin",
    "DisabledMixin",
    "FileSizeMixin",
    "GraphQLMixin",
    "InstructionsMixin",
    "LayoutMixin",
    "LibraryMixin",
    "MimeTypesMixin",
    "MinMaxMixin",
    "MultipleMixin",
    "NullableMixin",
    "PlaceholderMixin",
    "PreviewSizeMixin",
    "RequiredMixin",
    "ReturnFormatMixin",
    "SubFieldsMixin",
    "WeekDayMixin",
    "WrapperMixin",
    "WritableMixin",
]
