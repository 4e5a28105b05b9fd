"""Deterministic field keys for the host runtime."""

from __future__ import annotations

import hashlib

from acf_fields.config import settings


def generate_key(name: str, parent_key: str | None = None, prefix: str | None = None) -> str:
    """Return a stable key for a field named ``name`` under ``parent_key``.

    The same name under the same parent always yields the same key, so
    conditional-logic rules can reference sibling fields by name.

    Args:
        name:       Machine name of the field.
        parent_key: Key of the enclosing field, if any.
        prefix:     Key prefix, defaults to ``settings.key_prefix``.
    """
    if prefix is None:
        prefix = settings.key_prefix
    seed = f"{parent_key}_{name}" if parent_key else name
    digest = hashlib.sha1(seed.encode("utf-8")).hexdigest()[:13]
    return f"{prefix}{digest}"
