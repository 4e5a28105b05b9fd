"""
Field builders

Public API:
    Field, FieldMeta  — builder base class and type metadata
    one class per field type, e.g. Button, Countries, FlexibleContent
"""

from .advanced_link import AdvancedLink
from .base import Field, FieldMeta
from .button import Button
from .checkbox import Checkbox
from .clone import Clone
from .code_editor import CodeEditor
from .columns import Columns
from .countries import Countries
from .date_range_picker import DateRangePicker
from .file import File
from .flexible_content import FlexibleContent
from .focus_point import FocusPoint
from .gallery import Gallery
from .image import Image
from .image_mapping import ImageMapping
from .image_selector import ImageSelector
from .layout import Layout
from .open_street_map import OpenStreetMap
from .post_object import PostObject
from .repeater import Repeater
from .svg_icon import SVGIcon
from .table import Table

BUILTIN_FIELDS: list[type[Field]] = [
    AdvancedLink,
    Button,
    Checkbox,
    Clone,
    CodeEditor,
    Columns,
    Countries,
    DateRangePicker,
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
]

__all__ = [
    "BUILTIN_FIELDS",
    "AdvancedLink",
    "Button",
    "Checkbox",
    "Clone",
    "CodeEditor",
    "Columns",
    "Countries",
    "DateRangePicker",
    "Field",
    "FieldMeta",
    "File",
    "FlexibleContent",
    "FocusPoint",
    "Gallery",
    "Image",
    "ImageMapping",
    "ImageSelector",
    "Layout",
    "OpenStreetMap",
    "PostObject",
    "Repeater",
    "SVGIcon",
    "Table",
]
