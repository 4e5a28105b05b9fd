from typing import Any, Self

from acf_fields.exceptions import InvalidArgumentError

# Column widths are percentages of the field group's width
MIN_WIDTH = 0
MAX_WIDTH = 100


class WrapperMixin:
    settings: dict[str, Any]

    def wrapper(self, attributes: dict[str, Any]) -> Self:
        """Set the wrapper's HTML attributes (width, class, id)."""
        self.settings["wrapper"] = dict(attributes)
        return self

    def column(self, width: int) -> Self:
        """Set the wrapper width in percent, keeping other wrapper attributes."""
        allowed = range(MIN_WIDTH, MAX_WIDTH + 1)
        if isinstance(width, bool) or not isinstance(width, int):
            raise InvalidArgumentError(width, "width", allowed)
        self._validate(width, allowed, "width")
        self.settings["wrapper"] = {**self.settings.get("wrapper", {}), "width": width}
        return self
