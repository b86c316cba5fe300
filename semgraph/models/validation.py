"""Validation finding models."""

from pydantic import BaseModel, Field


class ValidationFinding(BaseModel):
    """One validation finding.

    Findings are collected, never raised. ``entity_id`` names the segment,
    node, concept, asset path or symbol the finding is about; ``field`` names
    the offending field when there is one.
    """

    entity_id: str | None = Field(default=None, description="Entity the finding is about")
    field: str | None = Field(default=None, description="Field that failed validation")
    message: str = Field(..., description="Human-readable description")

    def __str__(self) -> str:
        prefix = ""
        if self.entity_id:
            prefix = f"[{self.entity_id}] "
        if self.field:
            prefix = f"{prefix}{self.field}: "
        return f"{prefix}{self.message}"
