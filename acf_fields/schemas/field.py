from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FieldDefinition(BaseModel):
    """Serialized field configuration handed to the host plugin runtime."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field(..., title="Field Type", description="Type tag identifying the field kind.")
    label: str = Field(..., title="Label", description="Human-readable display name.")
    name: str = Field(..., title="Name", description="Machine name, derived from the label when omitted.")
    key: str = Field(..., title="Key", description="Unique key used by the host runtime.")
    settings: dict[str, Any] = Field(
        default_factory=dict, title="Settings", description="Resolved configuration options."
    )

    def flatten(self) -> dict[str, Any]:
        """Return the flat mapping the host runtime matches on."""
        return {
            "key": self.key,
            "label": self.label,
            "name": self.name,
            "type": self.type,
            **self.settings,
        }
