"""Segment index building and lookup helpers."""

from collections.abc import Callable

from ...models.segments import IndexedSegment, SegmentIndex
from ..core.document import ParsedDoc, SegmentInstance
from ..core.tokens import count_tokens
from ..references.parser import build_segment_ref
from .assembler import parse_segments


def build_segment_index(
    parsed: ParsedDoc,
    project: str,
    document_id: str,
    token_counter: Callable[[str], int] = count_tokens,
) -> SegmentIndex:
    """Build a segment index for storage/retrieval.

    Args:
        parsed: Parsed document
        project: Project identifier
        document_id: Document identifier
        token_counter: Counts body tokens (tiktoken by default)

    Returns:
        Segment index with canonical references and spec metadata
    """
    index = SegmentIndex(document_id=document_id)

    for seg in parsed.segments:
        indexed = IndexedSegment(
            segment_id=seg.id,
            segment_ref=build_segment_ref(project, document_id, seg.id),
            type=seg.type,
            audience_role=seg.audience_role,
            body_markdown=seg.body,
            token_count=token_counter(seg.body),
            start_byte=seg.start_byte,
            end_byte=seg.end_byte,
        )

        # Copy spec metadata if available
        if seg.spec is not None:
            indexed.concepts = seg.spec.concepts
            indexed.boost = seg.spec.boost
            indexed.max_tokens = seg.spec.max_tokens

        index.segments.append(indexed)

    return index


def get_segment_by_id(parsed: ParsedDoc, segment_id: str) -> SegmentInstance | None:
    """Find a segment by ID in a parsed document."""
    return next((seg for seg in parsed.segments if seg.id == segment_id), None)


def get_segments_by_type(parsed: ParsedDoc, segment_type: str) -> list[SegmentInstance]:
    """Get all segments of a specific type."""
    return [seg for seg in parsed.segments if seg.type == segment_type]


def get_segments_for_generation(parsed: ParsedDoc) -> list[SegmentInstance]:
    return [seg for seg in parsed.segments if seg.spec and seg.spec.generation is not None]


def get_segments_for_retrieval(parsed: ParsedDoc) -> list[SegmentInstance]:
    return [seg for seg in parsed.segments if seg.spec and seg.spec.retrieval is not None]


def get_total_token_budget(parsed: ParsedDoc) -> int:
    """Total token budget across all segments with a spec."""
    return sum(seg.spec.max_tokens or 0 for seg in parsed.segments if seg.spec is not None)


def extract_segment_content(doc_text: str, segment_id: str) -> str | None:
    """Parse a document and return one segment's body, or None."""
    segment = get_segment_by_id(parse_segments(doc_text), segment_id)
    return segment.body if segment is not None else None
