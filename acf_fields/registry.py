"""
Field Registry

FieldRegistry: in-process registry mapping type tags to builder classes, so
callers holding only a type string (e.g. from stored configuration) can
construct the matching builder.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from acf_fields.exceptions import UnknownFieldTypeError

if TYPE_CHECKING:
    from acf_fields.fields.base import Field

logger = logging.getLogger(__name__)


class FieldRegistry:
    """
    In-process registry for field builders.

    Builders are stored by the type tag in their FieldMeta. Registering a
    second builder for the same type replaces the first.
    """

    def __init__(self) -> None:
        self._fields: dict[str, type[Field]] = {}

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, field_class: type[Field]) -> type[Field]:
        """Register a builder class; returns it so this can be used as a decorator."""
        meta = field_class.meta
        self._fields[meta.type] = field_class
        logger.debug("Field type registered: %s (%s %s)", meta.type, meta.provider, meta.since)
        return field_class

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get(self, field_type: str) -> type[Field] | None:
        """Return the builder for the given type, or None if not registered."""
        return self._fields.get(field_type)

    def all_types(self) -> list[str]:
        """Return all registered type tags in registration order."""
        return list(self._fields)

    def is_registered(self, field_type: str) -> bool:
        return field_type in self._fields

    # ── Construction ──────────────────────────────────────────────────────────

    def create(self, field_type: str, label: str, name: str | None = None) -> Field:
        """
        Construct a builder for ``field_type``.

        Raises:
            UnknownFieldTypeError: If no builder is registered for the type.
        """
        field_class = self.get(field_type)
        if field_class is None:
            raise UnknownFieldTypeError(field_type)
        return field_class(label, name)


def register_builtin_fields(registry: FieldRegistry) -> None:
    """
    Register every builder shipped with acf_fields.

    Deferred import keeps acf_fields.registry importable from the field
    modules without a cycle.
    """
    from acf_fields.fields import BUILTIN_FIELDS

    for field_class in BUILTIN_FIELDS:
        registry.register(field_class)

    logger.debug("Field registration complete — %d field types", len(BUILTIN_FIELDS))


# ── Global singleton ──────────────────────────────────────────────────────────
field_registry = FieldRegistry()
register_builtin_fields(field_registry)
