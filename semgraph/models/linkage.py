"""Code <-> documentation linkage models."""

from typing import Any

from pydantic import BaseModel, Field


class AssetSegment(BaseModel):
    """A segment of a documentation asset linked to code."""

    id: str
    heading: str = ""
    lines: tuple[int, int] | None = None


class LinkedAsset(BaseModel):
    """A documentation asset referenced from a code symbol."""

    path: str = Field(..., description="Asset path (key into asset_to_code)")
    segments: list[AssetSegment] = Field(default_factory=list)
    relevance: str = Field(default="primary", description="See AssetRelevance")
    doc_type: str = ""


class CodeMapping(BaseModel):
    created_at: str | None = None
    updated_at: str | None = None
    assets: list[LinkedAsset] = Field(default_factory=list)


class CodeRef(BaseModel):
    """A code location referenced from a documentation asset."""

    path: str
    functions: list[str] = Field(default_factory=list)
    lines: tuple[int, int] | None = None


class AssetMapping(BaseModel):
    code_refs: list[CodeRef] = Field(default_factory=list)


class Linkage(BaseModel):
    """Bidirectional index between code symbols and documentation assets.

    ``code_to_assets`` is keyed by ``"path:function"`` symbols and
    ``asset_to_code`` by asset path; each map must mirror the other.
    """

    version: str
    created_at: str | None = None
    updated_at: str | None = None
    meta: dict[str, Any] = Field(default_factory=dict)
    code_to_assets: dict[str, CodeMapping] = Field(default_factory=dict)
    asset_to_code: dict[str, AssetMapping] = Field(default_factory=dict)
