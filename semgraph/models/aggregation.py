"""Page- and project-level aggregation models."""

from pydantic import BaseModel, Field


class TokenBudget(BaseModel):
    """Summed token budgets.

    Generation totals stay ``None`` unless at least one segment declares a
    generation config.
    """

    total_return_max: int = 0
    total_return_min: int = 0
    total_generate_max: int | None = None
    total_generate_min: int | None = None


class PageAggregation(BaseModel):
    """Segment metadata folded into one page summary."""

    concepts: list[str] = Field(default_factory=list)
    audience_role: list[str] = Field(default_factory=list)
    semantics: dict[str, list[str]] = Field(default_factory=dict)
    token_budget: TokenBudget = Field(default_factory=TokenBudget)
    average_boost: float = Field(default=1.0, description="Token-weighted average boost")
    segment_count: int = Field(default=0, ge=0)
    segment_checksums: list[str] = Field(default_factory=list)
    page_checksum: str = Field(default="", description="Combined checksum, '' if none")


class PageSummary(BaseModel):
    source_file: str
    page_aggregation: PageAggregation


class ProjectAggregationSummary(BaseModel):
    """Page aggregates folded into one project summary."""

    concepts: list[str] = Field(default_factory=list)
    audience_role: list[str] = Field(default_factory=list)
    semantics: dict[str, list[str]] = Field(default_factory=dict)
    token_budget: TokenBudget = Field(default_factory=TokenBudget)
    average_boost: float = 1.0
    page_count: int = Field(default=0, ge=0)
    segment_count: int = Field(default=0, ge=0)
    page_checksums: list[str] = Field(default_factory=list)
    project_checksum: str = ""


class ProjectAggregation(BaseModel):
    project: str
    project_version: str | None = None
    project_aggregation: ProjectAggregationSummary
    pages: list[PageSummary] = Field(default_factory=list)
