"""Options shared by fields backed by the media library."""

from typing import Any, Self

from acf_fields.constants import LIBRARIES


class LibraryMixin:
    settings: dict[str, Any]

    def library(self, value: str) -> Self:
        """Limit the media library to all files or files uploaded to the post."""
        self._validate(value, LIBRARIES, "library")
        self.settings["library"] = value
        return self


class MimeTypesMixin:
    settings: dict[str, Any]

    def mime_types(self, types: list[str]) -> Self:
        """Allowed file extensions, e.g. ``["jpg", "png"]``."""
        self.settings["mime_types"] = ",".join(types)
        return self


class PreviewSizeMixin:
    settings: dict[str, Any]

    def preview_size(self, size: str) -> Self:
        """Registered image size used for the admin preview."""
        self.settings["preview_size"] = size
        return self


class FileSizeMixin:
    settings: dict[str, Any]

    def min_size(self, size: int | str) -> Self:
        """Minimum file size in MB, or a string with a unit such as ``"400 KB"``."""
        self.settings["min_size"] = size
        return self

    def max_size(self, size: int | str) -> Self:
        self.settings["max_size"] = size
        return self


class DimensionsMixin:
    settings: dict[str, Any]

    def min_width(self, pixels: int) -> Self:
        self.settings["min_width"] = pixels
        return self

    def max_width(self, pixels: int) -> Self:
        self.settings["max_width"] = pixels
        return self

    def min_height(self, pixels: int) -> Self:
        self.settings["min_height"] = pixels
        return self

    def max_height(self, pixels: int) -> Self:
        self.settings["max_height"] = pixels
        return self
