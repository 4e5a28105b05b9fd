"""
acf-fields

Fluent builders for ACF / ACF Extended field definitions.

    from acf_fields import Button
    Button("Send").button_type("submit").button_ajax().get()
"""

from .exceptions import FieldError, InvalidArgumentError, UnknownFieldTypeError
from .fields import (
    AdvancedLink,
    Button,
    Checkbox,
    Clone,
    CodeEditor,
    Columns,
    Countries,
    DateRangePicker,
    Field,
    FieldMeta,
    File,
    FlexibleContent,
    FocusPoint,
    Gallery,
    Image,
    ImageMapping,
    ImageSelector,
    Layout,
    OpenStreetMap,
    PostObject,
    Repeater,
    SVGIcon,
    Table,
)
from .registry import FieldRegistry, field_registry
from .rules import ConditionalLogic, Location
from .schemas import FieldDefinition

__version__ = "1.0.0"

__all__ = [
    "AdvancedLink",
    "Button",
    "Checkbox",
    "Clone",
    "CodeEditor",
    "Columns",
    "ConditionalLogic",
    "Countries",
    "DateRangePicker",
    "Field",
    "FieldDefinition",
    "FieldError",
    "FieldMeta",
    "FieldRegistry",
    "File",
    "FlexibleContent",
    "FocusPoint",
    "Gallery",
    "Image",
    "ImageMapping",
    "ImageSelector",
    "InvalidArgumentError",
    "Layout",
    "Location",
    "OpenStreetMap",
    "PostObject",
    "Repeater",
    "SVGIcon",
    "Table",
    "UnknownFieldTypeError",
    "field_registry",
]
