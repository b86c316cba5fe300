"""Workspace validation.

Validates a set of in-memory documents in one pass: markdown pages (segment
parsing plus segment validation) and graph documents (dispatched on
``kind``). A structural failure only aborts the document it occurs in; it
is logged and recorded in that document's report.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from ..models.concepts import ConceptGraph
from ..models.documents import (
    ConceptDocument,
    JourneyDocument,
    LinkageDocument,
    ProjectDocument,
    VersionDocument,
)
from ..models.enums import ValidationMode
from ..models.validation import ValidationFinding
from .core.errors import GraphDocumentError, SegmentParseError
from .graph.concepts import validate_concepts
from .graph.documents import parse_graph_document
from .graph.journeys import validate_journey
from .graph.linkage import validate_linkage
from .graph.projects import validate_project, validate_version
from .segments.assembler import parse_segments
from .segments.validator import validate_segments

logger = logging.getLogger(__name__)


class DocumentReport(BaseModel):
    """Validation result for one document."""

    path: str = Field(..., description="Document path or name")
    kind: str = Field(default="page", description="'page' or the graph document kind")
    findings: list[ValidationFinding] = Field(default_factory=list)
    error: str | None = Field(default=None, description="Structural failure, if any")
    segment_count: int = 0

    @property
    def valid(self) -> bool:
        return self.error is None and not self.findings


class WorkspaceReport(BaseModel):
    """Validation results for a whole workspace."""

    documents: list[DocumentReport] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return all(doc.valid for doc in self.documents)

    @property
    def finding_count(self) -> int:
        return sum(len(doc.findings) for doc in self.documents)

    @property
    def error_count(self) -> int:
        return sum(1 for doc in self.documents if doc.error is not None)

    def get(self, path: str) -> DocumentReport | None:
        return next((doc for doc in self.documents if doc.path == path), None)


def _validate_page(path: str, text: str, mode: ValidationMode | str | None) -> DocumentReport:
    report = DocumentReport(path=path)
    try:
        parsed = parse_segments(text)
    except SegmentParseError as e:
        logger.warning(f"Failed to parse {path}: {e}")
        report.error = str(e)
        return report

    report.segment_count = len(parsed.segments)
    report.findings = validate_segments(parsed, mode)
    return report


def _validate_graph(path: str, payload: Mapping[str, Any]) -> DocumentReport:
    report = DocumentReport(path=path, kind=str(payload.get("kind", "")) if isinstance(payload, Mapping) else "")
    try:
        document = parse_graph_document(payload)
    except GraphDocumentError as e:
        logger.warning(f"Failed to parse graph document {path}: {e}")
        report.error = str(e)
        return report

    if isinstance(document, ProjectDocument):
        report.findings = validate_project(document.project)
    elif isinstance(document, VersionDocument):
        report.findings = validate_version(document.project_version)
    elif isinstance(document, JourneyDocument):
        report.findings = validate_journey(document.journey)
    elif isinstance(document, ConceptDocument):
        report.findings = validate_concepts(
            ConceptGraph(graph=document.graph, concepts=document.concepts, relationships=document.relationships)
        )
    elif isinstance(document, LinkageDocument):
        report.findings = validate_linkage(payload)
    return report


def validate_workspace(
    documents: Mapping[str, str],
    linkage: Mapping[str, Any] | None = None,
    graphs: Mapping[str, Mapping[str, Any]] | None = None,
    mode: ValidationMode | str | None = None,
) -> WorkspaceReport:
    """Validate pages and graph documents.

    Args:
        documents: Markdown pages keyed by path
        linkage: Optional linkage payload (with or without a ``kind``)
        graphs: Graph documents keyed by path
        mode: Segment validation mode (defaults to settings)

    Returns:
        WorkspaceReport with one DocumentReport per input, in input order
    """
    report = WorkspaceReport()

    for path, text in documents.items():
        report.documents.append(_validate_page(path, text, mode))

    for path, payload in (graphs or {}).items():
        report.documents.append(_validate_graph(path, payload))

    if linkage is not None:
        report.documents.append(
            DocumentReport(path="linkage", kind="linkage", findings=validate_linkage(linkage))
        )

    logger.info(
        f"Validated {len(report.documents)} documents: "
        f"{report.finding_count} findings, {report.error_count} structural errors"
    )
    return report
