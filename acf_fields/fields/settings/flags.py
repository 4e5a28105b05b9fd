"""Boolean capability flags. Each setter turns its flag on; none can turn it off."""

from typing import Any, Self


class GraphQLMixin:
    settings: dict[str, Any]

    def graphql(self) -> Self:
        """Expose the field in the GraphQL schema."""
        self.settings["show_in_graphql"] = True
        return self


class RequiredMixin:
    settings: dict[str, Any]

    def required(self) -> Self:
        self.settings["required"] = True
        return self


class NullableMixin:
    settings: dict[str, Any]

    def nullable(self) -> Self:
        """Allow an empty value."""
        self.settings["allow_null"] = True
        return self


class MultipleMixin:
    settings: dict[str, Any]

    def multiple(self) -> Self:
        """Allow selecting more than one value."""
        self.settings["multiple"] = True
        return self


class DisabledMixin:
    settings: dict[str, Any]

    def disabled(self) -> Self:
        self.settings["disabled"] = True
        return self


class WritableMixin:
    settings: dict[str, Any]

    def read_only(self) -> Self:
        self.settings["readonly"] = True
        return self
