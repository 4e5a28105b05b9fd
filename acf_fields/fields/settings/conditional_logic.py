from typing import Any, Self

from acf_fields.rules import ConditionalLogic


class ConditionalLogicMixin:
    settings: dict[str, Any]

    def conditional_logic(self, groups: list[ConditionalLogic]) -> Self:
        """
        Show the field only when one of the rule groups matches.

        Groups are stored as builders and resolved to field keys when the
        field is serialized.
        """
        self.settings["conditional_logic"] = list(groups)
        return self
