"""Pydantic models for semgraph documents and results.

This module re-exports all models. Import from submodules directly for
cleaner imports:

    from semgraph.models.enums import ValidationMode
    from semgraph.models.journeys import Journey
"""

# ============ AGGREGATION MODELS ============
from .aggregation import (
    PageAggregation,
    PageSummary,
    ProjectAggregation,
    ProjectAggregationSummary,
    TokenBudget,
)

# ============ ANNOTATION MODELS ============
from .annotations import AnnotatedSegment, ByteRange, ExternalAnnotations, LineRange

# ============ CONCEPT MODELS ============
from .concepts import (
    CONCEPT_REF_PREFIX,
    Concept,
    ConceptGraph,
    ConceptNode,
    ConceptRelationship,
    GraphInfo,
    concept_id,
)

# ============ DOCUMENT ENVELOPES ============
from .documents import (
    ConceptDocument,
    GraphDocument,
    JourneyDocument,
    LinkageDocument,
    ProjectDocument,
    VersionDocument,
)
from .enums import (
    AssetRelevance,
    ConceptSource,
    ConceptStatus,
    DocumentKind,
    ExitPointType,
    JourneyNodeType,
    JourneyStatus,
    MarkerKind,
    ProjectStatus,
    ProjectType,
    RelationshipKind,
    ValidationMode,
    VersionMode,
)

# ============ JOURNEY MODELS ============
from .journeys import (
    EntryPoint,
    ExitPoint,
    Journey,
    JourneyNode,
    NodeConnection,
    NodePosition,
    SuccessMetric,
)

# ============ LINKAGE MODELS ============
from .linkage import AssetMapping, AssetSegment, CodeMapping, CodeRef, LinkedAsset, Linkage
from .links import LinkTarget

# ============ NAVIGATION MODELS ============
from .navigation import FlatNavigationItem, NavigationItem, NavigationTree

# ============ PROJECT MODELS ============
from .projects import FreeformVersion, Project, ProjectAsset, ProjectVersion, Repository, Semver

# ============ SEGMENT MODELS ============
from .segments import (
    FrontmatterConfig,
    GenerateConfig,
    IndexedSegment,
    NamespaceConfig,
    ReturnConfig,
    SegmentIndex,
    SegmentSpec,
    as_tag_list,
)
from .validation import ValidationFinding

__all__ = [
    # Enums
    "AssetRelevance",
    "ConceptSource",
    "ConceptStatus",
    "DocumentKind",
    "ExitPointType",
    "JourneyNodeType",
    "JourneyStatus",
    "MarkerKind",
    "ProjectStatus",
    "ProjectType",
    "RelationshipKind",
    "ValidationMode",
    "VersionMode",
    # Segments
    "FrontmatterConfig",
    "GenerateConfig",
    "IndexedSegment",
    "NamespaceConfig",
    "ReturnConfig",
    "SegmentIndex",
    "SegmentSpec",
    "as_tag_list",
    # Validation
    "ValidationFinding",
    # Navigation
    "FlatNavigationItem",
    "NavigationItem",
    "NavigationTree",
    # Journeys
    "EntryPoint",
    "ExitPoint",
    "Journey",
    "JourneyNode",
    "NodeConnection",
    "NodePosition",
    "SuccessMetric",
    # Concepts
    "CONCEPT_REF_PREFIX",
    "Concept",
    "ConceptGraph",
    "ConceptNode",
    "ConceptRelationship",
    "GraphInfo",
    "concept_id",
    # Linkage
    "AssetMapping",
    "AssetSegment",
    "CodeMapping",
    "CodeRef",
    "LinkedAsset",
    "Linkage",
    # Projects
    "FreeformVersion",
    "Project",
    "ProjectAsset",
    "ProjectVersion",
    "Repository",
    "Semver",
    # Annotations
    "AnnotatedSegment",
    "ByteRange",
    "ExternalAnnotations",
    "LineRange",
    # Aggregation
    "PageAggregation",
    "PageSummary",
    "ProjectAggregation",
    "ProjectAggregationSummary",
    "TokenBudget",
    # Links
    "LinkTarget",
    # Envelopes
    "ConceptDocument",
    "GraphDocument",
    "JourneyDocument",
    "LinkageDocument",
    "ProjectDocument",
    "VersionDocument",
]
