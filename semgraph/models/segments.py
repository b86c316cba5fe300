"""Segment spec and frontmatter models.

Specs are normalized while they are parsed (audience/concept coercion, boost
default) but numeric ranges are not checked here: range and
mutual-exclusion problems are reported by the segment validator as findings.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


def as_tag_list(raw: Any) -> list[str] | None:
    """Coerce a string-or-list value into a list of strings."""
    if raw is None or raw == "" or raw == []:
        return None
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, (list, tuple)):
        items = [item for item in raw if isinstance(item, str)]
        return items or None
    return None


class ReturnConfig(BaseModel):
    """Retrieval configuration (static segment injected into a prompt)."""

    model_config = ConfigDict(populate_by_name=True)

    max_tokens: int = Field(
        default=0,
        validation_alias=AliasChoices("max_tokens", "maxTokens"),
        description="Token budget for prompt injection during retrieval",
    )
    min_tokens: int | None = Field(
        default=None,
        validation_alias=AliasChoices("min_tokens", "minTokens"),
        description="Minimum token budget",
    )


class GenerateConfig(BaseModel):
    """Generation configuration (segment produced by an LLM)."""

    model_config = ConfigDict(populate_by_name=True)

    max_tokens: int = Field(
        default=0,
        validation_alias=AliasChoices("max_tokens", "maxTokens"),
        description="Token budget for content generation",
    )
    min_tokens: int | None = Field(
        default=None, validation_alias=AliasChoices("min_tokens", "minTokens")
    )
    temperature: float | None = Field(default=None, description="LLM temperature (0.0-2.0)")
    iterations: int | None = Field(default=None, description="Number of generation passes")
    model: str | None = Field(default=None, description="Model hint")
    context: str | None = Field(default=None, description="Extra generation context")


class SegmentSpec(BaseModel):
    """Declarative metadata for one segment, keyed by ``id``."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(default="", description="Segment identifier, unique per document")
    type: str | None = Field(default=None, description="Content type tag (e.g. faq, howto)")
    audience_role: list[str] | None = Field(default=None, description="Target audiences")
    concepts: list[str] | None = Field(default=None, description="Concept tags")
    boost: float = Field(default=1.0, description="Retrieval ranking multiplier")
    semantics: dict[str, list[str]] = Field(
        default_factory=dict, description="Free-form semantic tag lists"
    )
    retrieval: ReturnConfig | None = Field(
        default=None, alias="return", description="Mutually exclusive with generation"
    )
    generation: GenerateConfig | None = Field(
        default=None, alias="generate", description="Mutually exclusive with retrieval"
    )

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)

        # Singular/plural spellings collapse onto one field
        audience = None
        for key in ("audience_role", "audienceRole", "audience_roles", "audience"):
            value = data.pop(key, None)
            if audience is None:
                audience = value
        data["audience_role"] = as_tag_list(audience)

        concepts = None
        for key in ("concepts", "concept"):
            value = data.pop(key, None)
            if concepts is None:
                concepts = value
        data["concepts"] = as_tag_list(concepts)

        if data.get("boost") is None:
            data["boost"] = 1.0
        if data.get("id") is None:
            data["id"] = ""
        else:
            data["id"] = str(data["id"])

        semantics = data.get("semantics") or {}
        if isinstance(semantics, dict):
            data["semantics"] = {
                key: tags for key, values in semantics.items() if (tags := as_tag_list(values))
            }
        return data

    @property
    def max_tokens(self) -> int | None:
        """Token budget from whichever config is present."""
        if self.retrieval is not None:
            return self.retrieval.max_tokens
        if self.generation is not None:
            return self.generation.max_tokens
        return None


class NamespaceConfig(BaseModel):
    """The namespaced frontmatter section holding segment specs."""

    model_config = ConfigDict(extra="allow")

    segments: list[SegmentSpec] = Field(default_factory=list)
    semantics: dict[str, list[str]] = Field(
        default_factory=dict, description="Page-level semantic tag lists"
    )

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            if data.get("segments") is None:
                data["segments"] = []
            semantics = data.get("semantics") or {}
            if isinstance(semantics, dict):
                data["semantics"] = {
                    key: tags for key, values in semantics.items() if (tags := as_tag_list(values))
                }
        return data


class FrontmatterConfig(BaseModel):
    """Parsed frontmatter. Unknown keys are kept as extras."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    title: str | None = None
    description: str | None = None
    template_id: str | None = None
    segment_config: NamespaceConfig | None = Field(
        default=None, description="Namespaced section (e.g. 'semcontext:')"
    )

    @property
    def segment_specs(self) -> list[SegmentSpec]:
        """Segment specs in declaration order."""
        if self.segment_config is None:
            return []
        return self.segment_config.segments

    @property
    def semantics(self) -> dict[str, list[str]]:
        if self.segment_config is None:
            return {}
        return self.segment_config.semantics


# ============ SEGMENT INDEX MODELS ============


class IndexedSegment(BaseModel):
    """A segment ready for storage/retrieval."""

    segment_id: str = Field(..., description="Segment identifier")
    segment_ref: str = Field(..., description="Canonical @project/document#segment")
    type: str | None = None
    audience_role: list[str] | None = None
    concepts: list[str] | None = None
    boost: float | None = None
    max_tokens: int | None = Field(default=None, description="Token budget from the spec")
    token_count: int = Field(default=0, ge=0, description="Tokens in the body")
    body_markdown: str = ""
    start_byte: int = Field(..., ge=0)
    end_byte: int = Field(..., ge=0)

    @property
    def over_budget(self) -> bool:
        """Whether the body is larger than the declared budget."""
        return self.max_tokens is not None and self.token_count > self.max_tokens


class SegmentIndex(BaseModel):
    document_id: str | None = None
    segments: list[IndexedSegment] = Field(default_factory=list)
