"""Semgraph engine.

- core: parse-time structures, errors, tokens and checksums
- segments: marker scanning, frontmatter, assembly, validation, indexing
- references: segment/project/page references
- navigation: navigation tree transforms
- graph: journeys, concepts, linkage, projects and versions
- aggregation / annotations: page and project summaries
- links: stable link registry
- workspace: whole-workspace validation
"""

from .aggregation import aggregate_page_metadata, aggregate_parsed_doc, aggregate_project_metadata
from .links import LinkRegistry, create_registry
from .references import resolve_reference
from .segments import parse_segments, validate_segments
from .workspace import DocumentReport, WorkspaceReport, validate_workspace

__all__ = [
    "DocumentReport",
    "LinkRegistry",
    "WorkspaceReport",
    "aggregate_page_metadata",
    "aggregate_parsed_doc",
    "aggregate_project_metadata",
    "create_registry",
    "parse_segments",
    "resolve_reference",
    "validate_segments",
    "validate_workspace",
]
