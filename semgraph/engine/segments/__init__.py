"""Segments module.

Byte-accurate segmentation of markdown documents into named regions
delimited by paired comment markers, reconciled against frontmatter specs.
"""

from .assembler import pair_markers, parse_segments
from .frontmatter import (
    FrontmatterLoader,
    build_spec_map,
    extract_frontmatter,
    parse_frontmatter_block,
    split_frontmatter,
)
from .index import (
    build_segment_index,
    extract_segment_content,
    get_segment_by_id,
    get_segments_by_type,
    get_segments_for_generation,
    get_segments_for_retrieval,
    get_total_token_budget,
)
from .scanner import MarkerSyntax, scan_markers
from .validator import validate_loose, validate_segments, validate_strict

__all__ = [
    # Scanner
    "MarkerSyntax",
    "scan_markers",
    # Frontmatter
    "FrontmatterLoader",
    "build_spec_map",
    "extract_frontmatter",
    "parse_frontmatter_block",
    "split_frontmatter",
    # Assembly
    "pair_markers",
    "parse_segments",
    # Validation
    "validate_segments",
    "validate_strict",
    "validate_loose",
    # Index
    "build_segment_index",
    "extract_segment_content",
    "get_segment_by_id",
    "get_segments_by_type",
    "get_segments_for_generation",
    "get_segments_for_retrieval",
    "get_total_token_budget",
]
