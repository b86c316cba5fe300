"""Segment assembly: marker pairing and segment instances.

Markers are paired by position, not by id: the i-th start marker pairs with
the i-th end marker (end markers carry no id). Pairing failures are
structural and abort the parse:

1. unequal start/end counts (refined into unclosed/unmatched markers)
2. an end marker beginning inside or before its start marker
3. a later start marker beginning before the current end marker (nesting)

Missing specs are not parse errors; the validator reports them.
"""

import logging

import yaml

from ...models.enums import MarkerKind
from ...models.segments import FrontmatterConfig
from ..core.document import MarkerRange, ParsedDoc, RawMarker, SegmentInstance
from ..core.errors import (
    MarkerCountError,
    MarkerOrderError,
    NestedSegmentError,
    UnclosedMarkerError,
    UnmatchedEndMarkerError,
)
from .frontmatter import FrontmatterLoader, build_spec_map, parse_frontmatter_block, split_frontmatter
from .scanner import MarkerSyntax, scan_markers

logger = logging.getLogger(__name__)


def _count_mismatch_error(
    markers: list[RawMarker], start_count: int, end_count: int
) -> MarkerCountError:
    """Walk markers in order to tell an unmatched end from an unclosed start."""
    open_starts: list[RawMarker] = []
    for marker in markers:
        if marker.kind == MarkerKind.START:
            open_starts.append(marker)
        elif not open_starts:
            return UnmatchedEndMarkerError(marker.line, start_count, end_count)
        else:
            open_starts.pop()
    if open_starts:
        unclosed = open_starts[-1]
        return UnclosedMarkerError(unclosed.id, unclosed.line, start_count, end_count)
    return MarkerCountError(start_count, end_count)


def pair_markers(markers: list[RawMarker]) -> list[MarkerRange]:
    """Pair scanned markers into validated ranges.

    Args:
        markers: Markers in document order (as returned by ``scan_markers``)

    Returns:
        Marker ranges in document order

    Raises:
        MarkerCountError: Start/end counts differ (UnclosedMarkerError or
            UnmatchedEndMarkerError when the walk can tell which)
        MarkerOrderError: An end marker begins before its start marker ends
        NestedSegmentError: A start marker begins inside another segment
    """
    starts = [m for m in markers if m.kind == MarkerKind.START]
    ends = [m for m in markers if m.kind == MarkerKind.END]

    if len(starts) != len(ends):
        raise _count_mismatch_error(markers, len(starts), len(ends))

    ranges: list[MarkerRange] = []
    for i, (start, end) in enumerate(zip(starts, ends)):
        if end.byte_offset < start.end_offset:
            raise MarkerOrderError(start.id)

        if i + 1 < len(starts) and starts[i + 1].byte_offset < end.byte_offset:
            raise NestedSegmentError(start.id, starts[i + 1].id)

        ranges.append(
            MarkerRange(
                id=start.id,
                start_marker_begin=start.byte_offset,
                start_marker_end=start.end_offset,
                end_marker_begin=end.byte_offset,
                end_marker_end=end.end_offset,
                start_line=start.line,
                end_line=end.line,
                type=start.type,
                audience=start.audience,
            )
        )
    return ranges


def parse_segments(
    doc_text: str,
    syntax: MarkerSyntax | None = None,
    namespace: str | None = None,
    loader: FrontmatterLoader = yaml.safe_load,
) -> ParsedDoc:
    """Parse frontmatter and segments from a markdown document.

    Byte offsets in the result are UTF-8 offsets into ``doc_text``.

    Args:
        doc_text: Markdown document content
        syntax: Marker syntax (defaults to the configured namespace)
        namespace: Frontmatter key holding segment specs
        loader: Frontmatter deserializer (PyYAML ``safe_load`` by default)

    Returns:
        ParsedDoc with segments in document order

    Raises:
        SegmentParseError: On malformed frontmatter or marker pairing
    """
    data = doc_text.encode("utf-8")

    fm_text, fm_end = split_frontmatter(data)
    if fm_text is not None:
        frontmatter = parse_frontmatter_block(fm_text, namespace, loader)
    else:
        frontmatter = FrontmatterConfig()

    content = data[fm_end:]
    base_line = data.count(b"\n", 0, fm_end) + 1
    markers = scan_markers(content, syntax, base_offset=fm_end, base_line=base_line)
    ranges = pair_markers(markers)

    spec_map = build_spec_map(frontmatter.segment_specs)

    segments: list[SegmentInstance] = []
    for marker in ranges:
        body = data[marker.start_marker_end : marker.end_marker_begin].decode("utf-8").strip()
        segments.append(
            SegmentInstance(
                id=marker.id,
                spec=spec_map.get(marker.id),
                body=body,
                start_byte=marker.start_marker_end,
                end_byte=marker.end_marker_begin,
                start_line=marker.start_line,
                end_line=marker.end_line,
                inline_type=marker.type,
                inline_audience=list(marker.audience) if marker.audience else None,
            )
        )

    logger.debug(
        f"Parsed {len(segments)} segments "
        f"({len(frontmatter.segment_specs)} specs, frontmatter ends at byte {fm_end})"
    )

    return ParsedDoc(
        frontmatter=frontmatter,
        segments=segments,
        frontmatter_end_byte=fm_end,
        content_without_frontmatter=content.decode("utf-8"),
        spec_map=spec_map,
    )
