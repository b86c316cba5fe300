"""Graph validators for journeys, concepts, linkage and projects."""

from .concepts import build_concept_hierarchy, parse_concepts, validate_concepts
from .documents import parse_envelope, parse_graph_document
from .journeys import build_adjacency, find_cycle, has_cycles, parse_journey, validate_journey
from .linkage import (
    SchemaValidator,
    find_code_for_doc,
    find_docs_for_symbol,
    parse_linkage,
    symbol_key,
    validate_bidirectional_consistency,
    validate_linkage,
)
from .projects import format_semver, parse_project, parse_version, validate_project, validate_version

__all__ = [
    # Envelopes
    "parse_envelope",
    "parse_graph_document",
    # Journeys
    "build_adjacency",
    "find_cycle",
    "has_cycles",
    "parse_journey",
    "validate_journey",
    # Concepts
    "build_concept_hierarchy",
    "parse_concepts",
    "validate_concepts",
    # Linkage
    "SchemaValidator",
    "find_code_for_doc",
    "find_docs_for_symbol",
    "parse_linkage",
    "symbol_key",
    "validate_bidirectional_consistency",
    "validate_linkage",
    # Projects
    "format_semver",
    "parse_project",
    "parse_version",
    "validate_project",
    "validate_version",
]
