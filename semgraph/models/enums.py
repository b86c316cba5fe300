"""Enumeration types for semgraph documents."""

from enum import StrEnum


class ValidationMode(StrEnum):
    """Segment validation modes."""

    STRICT = "strict"  # Missing specs/markers are findings
    LOOSE = "loose"  # Only duplicates, mutual exclusion and ranges


class MarkerKind(StrEnum):
    """Kinds of segment markers found by the scanner."""

    START = "start"
    END = "end"


# ============ GRAPH DOCUMENT ENUMS ============


class DocumentKind(StrEnum):
    """Envelope kinds of graph documents."""

    PROJECT = "project"
    PROJECT_VERSION = "project-version"
    JOURNEY = "journey"
    CONCEPT_GRAPH = "concept-graph"
    LINKAGE = "linkage"


class JourneyStatus(StrEnum):
    """Lifecycle status of a journey."""

    DRAFT = "draft"
    ACTIVE = "active"
    DEPRECATED = "deprecated"


class JourneyNodeType(StrEnum):
    """Node types inside a journey graph."""

    STAGE = "stage"
    MILESTONE = "milestone"
    DECISION = "decision"
    JUMP_OFF = "jump_off"


class ExitPointType(StrEnum):
    """How a journey is left at an exit point."""

    SUCCESS = "success"
    FAILURE = "failure"
    ABANDONMENT = "abandonment"
    CONVERSION = "conversion"
    CONTINUATION = "continuation"


class ConceptSource(StrEnum):
    """Where a concept came from."""

    MANUAL = "manual"
    DISCOVERED = "discovered"  # Requires a confidence score
    IMPORTED = "imported"


class ConceptStatus(StrEnum):
    """Lifecycle status of a concept."""

    ACTIVE = "active"
    DEPRECATED = "deprecated"
    PROPOSED = "proposed"


class RelationshipKind(StrEnum):
    """Directed relationship kinds between concepts."""

    PARENT = "parent"
    RELATED = "related"
    IMPLEMENTS = "implements"
    DOCUMENTS = "documents"
    DEPENDS_ON = "depends_on"


class AssetRelevance(StrEnum):
    """Relevance of a documentation asset to a code symbol."""

    PRIMARY = "primary"
    SUPPORTING = "supporting"
    RELATED = "related"


class ProjectType(StrEnum):
    """Project categories."""

    PRODUCT = "product"
    SERVICE = "service"
    LIBRARY = "library"
    PLATFORM = "platform"
    INTERNAL = "internal"


class ProjectStatus(StrEnum):
    """Project lifecycle status."""

    ACTIVE = "active"
    ARCHIVED = "archived"


class VersionMode(StrEnum):
    """Versioning scheme of a project version."""

    SEMVER = "semver"
    FREEFORM = "freeform"
