"""Concept graph models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

CONCEPT_REF_PREFIX = "concept:@"


def concept_id(ref: str) -> str:
    """Strip the ``concept:@`` prefix from a concept reference."""
    if ref.startswith(CONCEPT_REF_PREFIX):
        return ref[len(CONCEPT_REF_PREFIX) :]
    return ref


class Concept(BaseModel):
    """A concept keyed by ``id``."""

    id: str = ""
    key: str = ""
    name: str = ""
    description: str | None = None
    aliases: list[str] = Field(default_factory=list)
    status: str = Field(default="active", description="See ConceptStatus")
    source: str = Field(default="manual", description="See ConceptSource")
    confidence: float | None = Field(
        default=None, description="Required for discovered concepts, forbidden for manual"
    )
    tags: list[str] = Field(default_factory=list)


class ConceptRelationship(BaseModel):
    """Directed edge between two concepts."""

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from", description="Source concept ref")
    to: str = Field(..., description="Target concept ref")
    kind: str = Field(default="related", description="See RelationshipKind")
    weight: float = Field(default=1.0, description="Edge weight (0.0-1.0)")
    description: str | None = None
    bidirectional: bool = False


class GraphInfo(BaseModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None


class ConceptGraph(BaseModel):
    """Concepts plus the relationships between them."""

    graph: GraphInfo | None = None
    concepts: list[Concept] = Field(default_factory=list)
    relationships: list[ConceptRelationship] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


class ConceptNode(BaseModel):
    """A node of a concept hierarchy built from ``parent`` relationships."""

    concept: Concept
    children: list["ConceptNode"] = Field(default_factory=list)
