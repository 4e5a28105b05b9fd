"""Pydantic schemas for serialized field definitions."""

from .field import FieldDefinition

__all__ = ["FieldDefinition"]
