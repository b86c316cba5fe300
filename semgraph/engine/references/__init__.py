"""References module.

Universal addressing for documentation content: segment, project and page
references, and their resolution against an ambient context.
"""

from .parser import (
    build_page_ref,
    build_segment_ref,
    is_absolute_ref,
    is_fragment_ref,
    is_relative_ref,
    is_valid_segment_ref,
    parse_page_ref,
    parse_project_ref,
    parse_segment_ref,
    resolve_page_reference,
    resolve_reference,
)
from .types import PageRef, ProjectRef, ReferenceContext, ResolvedRef, SegmentRef

__all__ = [
    "PageRef",
    "ProjectRef",
    "ReferenceContext",
    "ResolvedRef",
    "SegmentRef",
    "build_page_ref",
    "build_segment_ref",
    "is_absolute_ref",
    "is_fragment_ref",
    "is_relative_ref",
    "is_valid_segment_ref",
    "parse_page_ref",
    "parse_project_ref",
    "parse_segment_ref",
    "resolve_page_reference",
    "resolve_reference",
]
