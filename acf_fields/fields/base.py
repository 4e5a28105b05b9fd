"""
Field Builder Base Classes

FieldMeta: declarative metadata for a field type (type tag, provider, docs).
Field:     base class every field builder subclasses.

A builder holds a fixed type tag, a label, an optional machine name and a
settings dict. Setters write into settings and return the builder so calls
can be chained. get() serializes the builder for the host runtime.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar

from acf_fields.config import settings as config
from acf_fields.exceptions import InvalidArgumentError
from acf_fields.rules import ConditionalLogic
from acf_fields.schemas import FieldDefinition
from acf_fields.utils import generate_key, slugify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldMeta:
    """
    Declarative metadata describing a field type.

    Attributes:
        type:     Type tag written to the serialized definition, e.g. "acfe_button".
        provider: Plugin that renders the field in the host runtime.
        docs_url: Documentation page for the field's options.
        since:    Provider version the options were taken from.
    """

    type: str
    provider: str = "ACF Extended"
    docs_url: str = ""
    since: str = ""


def ensure_choice(value: Any, allowed: Iterable[Any], setting: str, field_type: str | None = None) -> Any:
    """Return ``value`` if it is one of ``allowed``, else raise InvalidArgumentError."""
    allowed = tuple(allowed)
    if value not in allowed:
        logger.debug(
            "Rejected %s value %r", setting, value, extra={"field_type": field_type, "setting": setting}
        )
        raise InvalidArgumentError(value, setting, allowed)
    return value


class Field:
    """
    Base class for all field builders.

    Subclasses set ``meta`` (whose ``type`` is the field's type tag), seed
    their defaults in ``__init__`` and mix in the capability classes from
    acf_fields.fields.settings.
    """

    meta: ClassVar[FieldMeta]

    def __init__(self, label: str, name: str | None = None) -> None:
        self.label = label
        self.name = name
        self.settings: dict[str, Any] = {}

    @property
    def type(self) -> str:
        """Type tag of the field; fixed per class."""
        return self.meta.type

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self.label!r}, name={self.name!r})"

    def _validate(self, value: Any, allowed: Iterable[Any], setting: str) -> Any:
        return ensure_choice(value, allowed, setting, self.type)

    def _key_prefix(self) -> str:
        return config.key_prefix

    # ── Serialization ────────────────────────────────────────────────────────

    def to_definition(self, parent_key: str | None = None) -> FieldDefinition:
        """
        Build the serialized definition of this field.

        Nested builders (sub fields, layouts) are serialized with this field's
        key as their parent; conditional-logic groups resolve against
        ``parent_key`` because they reference sibling fields.

        Args:
            parent_key: Key of the enclosing field, if any.

        Returns:
            FieldDefinition with every nested value resolved.
        """
        name = self.name or slugify(self.label)
        key = generate_key(name, parent_key, self._key_prefix())
        resolved = {
            setting: self._resolve(value, key, parent_key) for setting, value in self.settings.items()
        }
        logger.debug("Serialized %s field %s", self.type, name, extra={"field_type": self.type, "field_name": name})
        return FieldDefinition(type=self.type, label=self.label, name=name, key=key, settings=resolved)

    def get(self, parent_key: str | None = None) -> dict[str, Any]:
        """Return the flat mapping handed to the host runtime."""
        return self.to_definition(parent_key).flatten()

    def _resolve(self, value: Any, key: str, parent_key: str | None) -> Any:
        if isinstance(value, Field):
            return value.get(key)
        if isinstance(value, ConditionalLogic):
            return value.get(parent_key)
        if isinstance(value, list):
            return [self._resolve(item, key, parent_key) for item in value]
        return copy.deepcopy(value)
