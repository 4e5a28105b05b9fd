"""
Conditional Logic Rules

A ConditionalLogic instance is one rule group: every rule in it must match
(AND). Passing several groups to a field's conditional_logic() setting makes
the field visible when any group matches (OR).
"""

from __future__ import annotations

import logging
from typing import Any, Self

from acf_fields.exceptions import InvalidArgumentError
from acf_fields.utils.keys import generate_key

logger = logging.getLogger(__name__)

OPERATORS: tuple[str, ...] = ("==", "!=", "==pattern", "==contains", "==empty", "!=empty", ">", "<")

# Operators that test presence only and carry no comparison value
VALUELESS_OPERATORS: frozenset[str] = frozenset({"==empty", "!=empty"})


class ConditionalLogic:
    """Rule group referencing sibling fields by machine name."""

    def __init__(self) -> None:
        self.rules: list[dict[str, Any]] = []

    @classmethod
    def where(cls, name: str, operator: str, value: Any = None) -> ConditionalLogic:
        """Start a rule group with a single rule."""
        return cls().and_(name, operator, value)

    def and_(self, name: str, operator: str, value: Any = None) -> Self:
        """Add a rule that must also match."""
        if operator not in OPERATORS:
            logger.debug("Rejected conditional logic operator %r for %s", operator, name)
            raise InvalidArgumentError(operator, "operator", OPERATORS)
        rule: dict[str, Any] = {"name": name, "operator": operator}
        if operator not in VALUELESS_OPERATORS:
            rule["value"] = value
        self.rules.append(rule)
        return self

    def get(self, parent_key: str | None = None) -> list[dict[str, Any]]:
        """Resolve field names to the keys the host runtime expects."""
        resolved = []
        for rule in self.rules:
            item = {"field": generate_key(rule["name"], parent_key), "operator": rule["operator"]}
            if "value" in rule:
                item["value"] = rule["value"]
            resolved.append(item)
        return resolved
