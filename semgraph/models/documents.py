"""Typed envelopes for graph documents.

Every graph document is ``{version, kind, <payload>}``; the ``kind`` field
discriminates which payload is present.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from .concepts import Concept, ConceptRelationship, GraphInfo
from .journeys import Journey
from .linkage import AssetMapping, CodeMapping
from .projects import Project, ProjectVersion


class ProjectDocument(BaseModel):
    version: str
    kind: Literal["project"]
    project: Project
    metadata: dict[str, Any] = Field(default_factory=dict)


class VersionDocument(BaseModel):
    version: str
    kind: Literal["project-version"]
    project_version: ProjectVersion


class JourneyDocument(BaseModel):
    version: str
    kind: Literal["journey"]
    journey: Journey
    metadata: dict[str, Any] = Field(default_factory=dict)


class ConceptDocument(BaseModel):
    version: str
    kind: Literal["concept-graph"]
    graph: GraphInfo | None = None
    concepts: list[Concept] = Field(default_factory=list)
    relationships: list[ConceptRelationship] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


class LinkageDocument(BaseModel):
    version: str
    kind: Literal["linkage"]
    created_at: str | None = None
    updated_at: str | None = None
    meta: dict[str, Any] = Field(default_factory=dict)
    code_to_assets: dict[str, CodeMapping] = Field(default_factory=dict)
    asset_to_code: dict[str, AssetMapping] = Field(default_factory=dict)


GraphDocument = Annotated[
    ProjectDocument | VersionDocument | JourneyDocument | ConceptDocument | LinkageDocument,
    Field(discriminator="kind"),
]
