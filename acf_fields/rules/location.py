"""Location rules restricting where a layout may be used."""

from __future__ import annotations

import logging
from typing import Self

from acf_fields.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

OPERATORS: tuple[str, ...] = ("==", "!=")


class Location:
    """Rule group of ``param operator value`` triples, all of which must match."""

    def __init__(self) -> None:
        self.rules: list[dict[str, str]] = []

    @classmethod
    def where(cls, param: str, operator: str, value: str) -> Location:
        return cls().and_(param, operator, value)

    def and_(self, param: str, operator: str, value: str) -> Self:
        if operator not in OPERATORS:
            logger.debug("Rejected location operator %r for %s", operator, param)
            raise InvalidArgumentError(operator, "operator", OPERATORS)
        self.rules.append({"param": param, "operator": operator, "value": value})
        return self

    def get(self) -> list[dict[str, str]]:
        return [dict(rule) for rule in self.rules]
