"""Rule builders for conditional visibility and layout locations."""

from .conditional_logic import ConditionalLogic
from .location import Location

__all__ = ["ConditionalLogic", "Location"]
