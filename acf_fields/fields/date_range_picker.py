"""Date range picker field."""

from __future__ import annotations

from typing import Self

from acf_fields.constants import DEFAULT_CUSTOM_RANGES
from acf_fields.fields.base import Field, FieldMeta
from acf_fields.fields.settings import (
    ConditionalLogicMixin,
    DateTimeFormatMixin,
    DisabledMixin,
    GraphQLMixin,
    InstructionsMixin,
    NullableMixin,
    PlaceholderMixin,
    RequiredMixin,
    WeekDayMixin,
    WrapperMixin,
    WritableMixin,
)


class DateRangePicker(
    GraphQLMixin,
    NullableMixin,
    ConditionalLogicMixin,
    DateTimeFormatMixin,
    DisabledMixin,
    InstructionsMixin,
    PlaceholderMixin,
    WritableMixin,
    RequiredMixin,
    WeekDayMixin,
    WrapperMixin,
    Field,
):
    meta = FieldMeta(
        type="acfe_date_range_picker",
        docs_url="https://www.acf-extended.com/features/fields/date-range-picker",
        since="0.8.8.6",
    )

    def __init__(self, label: str, name: str | None = None) -> None:
        super().__init__(label, name)
        self.custom_ranges(list(DEFAULT_CUSTOM_RANGES))

    def separator(self, value: str) -> Self:
        """Text between the start and end dates."""
        self.settings["separator"] = value
        return self

    def default_start(self, value: str) -> Self:
        self.settings["default_start"] = value
        return self

    def default_end(self, value: str) -> Self:
        self.settings["default_end"] = value
        return self

    def min_range(self, days: int) -> Self:
        """Minimum number of days in a range."""
        self.settings["min_days"] = days
        return self

    def max_range(self, days: int) -> Self:
        """Maximum number of days in a range."""
        self.settings["max_days"] = days
        return self

    def min_date(self, value: str) -> Self:
        """
        Earliest selectable date.

        Either a date in the display format or a relative expression such as
        ``+1 month +7 days``.
        """
        self.settings["min_date"] = value
        return self

    def max_date(self, value: str) -> Self:
        """Latest selectable date; same formats as min_date()."""
        self.settings["max_date"] = value
        return self

    def custom_ranges(self, ranges: list[str] | None = None) -> Self:
        """
        Predefined ranges offered to the user.

        Any of Today, Yesterday, Last 7 Days, Last 30 Days, This Month and
        Last Month. Called without arguments, no ranges are offered.
        """
        self.settings["custom_ranges"] = list(ranges) if ranges is not None else []
        return self

    def dropdowns(self) -> Self:
        """Show month and year dropdowns."""
        self.settings["show_dropdowns"] = True
        return self

    def no_weekends(self) -> Self:
        self.settings["no_weekends"] = True
        return self

    def auto_close(self) -> Self:
        """Close the picker once a range is selected."""
        self.settings["auto_close"] = True
        return self
