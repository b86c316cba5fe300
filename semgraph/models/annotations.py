"""External annotation models.

An annotation file describes the segments of a source document from the
outside (byte or line ranges instead of in-text markers). It is also the
input shape of page aggregation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .segments import GenerateConfig, ReturnConfig, as_tag_list


class ByteRange(BaseModel):
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)


class LineRange(BaseModel):
    start: int = Field(..., ge=1, description="1-indexed, inclusive")
    end: int = Field(..., ge=1, description="1-indexed, inclusive")


class AnnotatedSegment(BaseModel):
    """Segment metadata from an annotation file."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    type: str | None = None
    audience_role: list[str] | None = None
    concepts: list[str] | None = None
    boost: float | None = None
    semantics: dict[str, list[str]] = Field(default_factory=dict)
    byte_range: ByteRange | None = None
    line_range: LineRange | None = None
    heading: str | None = None
    segment_checksum: str | None = None
    segment_ref: str | None = None
    can_edit: bool | None = None
    retrieval: ReturnConfig | None = Field(default=None, alias="return")
    generation: GenerateConfig | None = Field(default=None, alias="generate")

    @field_validator("audience_role", "concepts", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> list[str] | None:
        return as_tag_list(value)


class ExternalAnnotations(BaseModel):
    """Annotation file for one source document."""

    version: str = "1"
    source_file: str = ""
    source_checksum: str | None = None
    semantics: dict[str, list[str]] = Field(default_factory=dict)
    segments: list[AnnotatedSegment] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
