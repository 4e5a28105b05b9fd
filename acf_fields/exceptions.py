"""
Custom Exception Classes for acf-fields

This module defines the exceptions raised by field builders and the
field-type registry.
"""

from collections.abc import Iterable
from typing import Any


class FieldError(Exception):
    """Base exception class for all field-builder errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Validation Exceptions
# ============================================================================


class InvalidArgumentError(FieldError):
    """Raised when a setter receives a value outside its accepted enumeration"""

    def __init__(self, value: Any, setting: str, allowed: Iterable[Any] | None = None):
        self.value = value
        self.setting = setting
        self.allowed = tuple(allowed) if allowed is not None else ()
        super().__init__(
            message=f"Invalid argument {setting} [{value}].",
            details={"setting": setting, "value": value, "allowed": list(self.allowed)},
        )


# ============================================================================
# Registry Exceptions
# ============================================================================


class UnknownFieldTypeError(FieldError):
    """Raised when no builder is registered for a field type"""

    def __init__(self, field_type: str):
        self.field_type = field_type
        super().__init__(
            message=f"Field type '{field_type}' is not registered",
            details={"field_type": field_type},
        )
