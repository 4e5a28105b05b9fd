"""Helper utilities for acf-fields."""

from .keys import generate_key
from .slugify import slugify

__all__ = ["generate_key", "slugify"]
