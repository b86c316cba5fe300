"""Stable link models."""

from pydantic import BaseModel, Field


class LinkTarget(BaseModel):
    """Where a stable link id points to."""

    id: str = Field(default="", description="Stable link id")
    segment_ref: str | None = Field(default=None, description="@project/page#segment")
    page_ref: str | None = Field(default=None, description="@project/page")
    url: str = Field(..., description="Resolved URL")
    title: str | None = None
    description: str | None = None
    version: str | None = None
