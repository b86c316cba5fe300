"""Parse-time data structures for segmented documents.

This module contains the structures produced while scanning and assembling
a document's segments. They are plain dataclasses: transient markers from
the scanner, validated marker ranges, and the segment instances of a
parsed document.
"""

from dataclasses import dataclass, field

from ...models.enums import MarkerKind
from ...models.segments import FrontmatterConfig, SegmentSpec


@dataclass(frozen=True)
class RawMarker:
    """A marker occurrence found by the scanner.

    Attributes:
        kind: Start or end marker
        id: Segment id captured from a start marker ("" for end markers)
        byte_offset: UTF-8 byte offset of the marker's first byte
        match_length: Length of the marker in bytes
        line: 1-indexed line the marker begins on
        type: Inline ``type`` attribute of a start marker
        audience: Inline ``audience`` attribute, split on commas
    """

    kind: MarkerKind
    id: str
    byte_offset: int
    match_length: int
    line: int = 1
    type: str | None = None
    audience: tuple[str, ...] | None = None

    @property
    def end_offset(self) -> int:
        return self.byte_offset + self.match_length


@dataclass(frozen=True)
class MarkerRange:
    """One validated start/end marker pair (byte offsets)."""

    id: str
    start_marker_begin: int
    start_marker_end: int
    end_marker_begin: int
    end_marker_end: int
    start_line: int = 1
    end_line: int = 1
    type: str | None = None
    audience: tuple[str, ...] | None = None


@dataclass
class SegmentInstance:
    """A segment found in a document body.

    Attributes:
        id: Segment identifier from the start marker
        spec: Frontmatter spec with the same id, or None
        body: Text between the markers, trimmed of surrounding whitespace
        start_byte: Byte offset where the body begins (start marker end)
        end_byte: Byte offset where the body ends (end marker begin)
        start_line: Line of the start marker (1-indexed)
        end_line: Line of the end marker (1-indexed)
        inline_type: ``type`` attribute given on the marker itself
        inline_audience: ``audience`` attribute given on the marker itself
    """

    id: str
    spec: SegmentSpec | None
    body: str
    start_byte: int
    end_byte: int
    start_line: int = 1
    end_line: int = 1
    inline_type: str | None = None
    inline_audience: list[str] | None = None

    @property
    def type(self) -> str | None:
        """Spec type, falling back to the inline marker attribute."""
        if self.spec is not None and self.spec.type:
            return self.spec.type
        return self.inline_type

    @property
    def audience_role(self) -> list[str] | None:
        if self.spec is not None and self.spec.audience_role:
            return self.spec.audience_role
        return self.inline_audience


@dataclass
class ParsedDoc:
    """A document split into frontmatter and segments.

    Segments are in marker order (document order), not spec order.
    """

    frontmatter: FrontmatterConfig = field(default_factory=FrontmatterConfig)
    segments: list[SegmentInstance] = field(default_factory=list)
    frontmatter_end_byte: int = 0
    content_without_frontmatter: str = ""
    # Spec lookup table built once per document (first declaration wins)
    spec_map: dict[str, SegmentSpec] = field(default_factory=dict)

    @property
    def specs(self) -> list[SegmentSpec]:
        return self.frontmatter.segment_specs
