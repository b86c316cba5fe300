"""Journey graph models."""

from typing import Any

from pydantic import BaseModel, Field


class NodeConnection(BaseModel):
    """An outgoing edge of a journey node."""

    target_node_id: str | None = Field(default=None, description="Node in the same journey")
    target_journey: str | None = Field(default=None, description="Cross-journey jump target")
    label: str | None = None
    condition: str | None = Field(default=None, description="Guard condition")


class NodePosition(BaseModel):
    x: float = 0
    y: float = 0


class JourneyNode(BaseModel):
    """A stage, milestone, decision or jump-off point."""

    id: str = ""
    type: str = Field(default="stage", description="See JourneyNodeType")
    key: str = ""
    name: str = ""
    description: str | None = None
    position: NodePosition | None = None
    project: str | None = None
    features: list[str] = Field(default_factory=list)
    code_refs: list[str] = Field(default_factory=list)
    content_refs: list[str] = Field(default_factory=list)
    asset_refs: list[str] = Field(default_factory=list)
    concepts: list[str] = Field(default_factory=list)
    connections: list[NodeConnection] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    metrics: dict[str, Any] = Field(default_factory=dict)
    milestone_type: str | None = None


class EntryPoint(BaseModel):
    type: str
    description: str = ""
    url: str | None = None
    content_ref: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class ExitPoint(BaseModel):
    node: str
    type: str = Field(..., description="See ExitPointType")
    description: str = ""
    target_journey: str | None = None


class SuccessMetric(BaseModel):
    metric: str
    target: str
    description: str | None = None
    type: str | None = None
    unit: str | None = None


class Journey(BaseModel):
    """A user journey: a DAG of nodes over one or more projects."""

    id: str = ""
    key: str = ""
    name: str = ""
    description: str | None = None
    projects: list[str] = Field(default_factory=list)
    primary_project: str | None = None
    personas: list[str] = Field(default_factory=list)
    version_specific: bool = False
    versions: list[str] = Field(default_factory=list)
    status: str = Field(default="draft", description="See JourneyStatus")
    nodes: list[JourneyNode] = Field(default_factory=list)
    entry_points: list[EntryPoint] = Field(default_factory=list)
    exit_points: list[ExitPoint] = Field(default_factory=list)
    success_metrics: list[SuccessMetric] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
