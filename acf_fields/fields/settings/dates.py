from typing import Any, Self


class DateTimeFormatMixin:
    settings: dict[str, Any]

    def display_format(self, fmt: str) -> Self:
        """Format shown while editing, e.g. ``d/m/Y``."""
        self.settings["display_format"] = fmt
        return self

    def return_format(self, fmt: str) -> Self:
        """Format returned to templates, e.g. ``Ymd``."""
        self.settings["return_format"] = fmt
        return self


class WeekDayMixin:
    settings: dict[str, Any]

    def week_starts_on_monday(self) -> Self:
        self.settings["first_day"] = 1
        return self

    def week_starts_on_sunday(self) -> Self:
        self.settings["first_day"] = 0
        return self
