"""Concept graph validation and hierarchy construction."""

from collections.abc import Mapping
from typing import Any

from ...models.concepts import Concept, ConceptGraph, ConceptNode, concept_id
from ...models.enums import ConceptSource, ConceptStatus, DocumentKind, RelationshipKind
from ...models.validation import ValidationFinding
from .documents import parse_envelope

CONCEPT_SOURCES = {s.value for s in ConceptSource}
CONCEPT_STATUSES = {s.value for s in ConceptStatus}
RELATIONSHIP_KINDS = {k.value for k in RelationshipKind}


def parse_concepts(payload: Mapping[str, Any]) -> ConceptGraph:
    """Extract the concept graph from a ``kind: concept-graph`` document."""
    doc = parse_envelope(payload, DocumentKind.CONCEPT_GRAPH)
    return ConceptGraph(
        graph=doc.graph,
        concepts=doc.concepts,
        relationships=doc.relationships,
        metadata=doc.metadata,
    )


def validate_concepts(graph: ConceptGraph) -> list[ValidationFinding]:
    """Validate concepts and the relationships between them.

    A discovered concept must carry a confidence score; a manual concept
    must not. Relationship endpoints may be written as ``concept:@id``.
    """
    errors: list[ValidationFinding] = []

    concept_ids: set[str] = set()
    for concept in graph.concepts:
        cid = concept.id or None
        if not concept.id:
            errors.append(ValidationFinding(field="id", message="Concept ID is required"))
        if not concept.key:
            errors.append(ValidationFinding(entity_id=cid, field="key", message="Concept key is required"))
        if not concept.name:
            errors.append(ValidationFinding(entity_id=cid, field="name", message="Concept name is required"))

        if concept.id and concept.id in concept_ids:
            errors.append(
                ValidationFinding(
                    entity_id=concept.id, field="id", message=f"Duplicate concept ID: {concept.id}"
                )
            )
        if concept.id:
            concept_ids.add(concept.id)

        if concept.source not in CONCEPT_SOURCES:
            errors.append(
                ValidationFinding(
                    entity_id=cid, field="source", message=f"Invalid concept source: {concept.source}"
                )
            )
        if concept.status not in CONCEPT_STATUSES:
            errors.append(
                ValidationFinding(
                    entity_id=cid, field="status", message=f"Invalid concept status: {concept.status}"
                )
            )

        # Source/confidence pairing
        if concept.source == ConceptSource.DISCOVERED and concept.confidence is None:
            errors.append(
                ValidationFinding(
                    entity_id=cid,
                    field="confidence",
                    message=f"Discovered concept {concept.id} must have confidence score",
                )
            )
        if concept.source == ConceptSource.MANUAL and concept.confidence is not None:
            errors.append(
                ValidationFinding(
                    entity_id=cid,
                    field="confidence",
                    message=f"Manual concept {concept.id} should not have confidence score",
                )
            )
        elif concept.confidence is not None and not 0.0 <= concept.confidence <= 1.0:
            errors.append(
                ValidationFinding(
                    entity_id=cid,
                    field="confidence",
                    message=f"Invalid confidence for {concept.id}: must be 0.0-1.0",
                )
            )

    for i, rel in enumerate(graph.relationships):
        entity = f"{rel.from_}->{rel.to}"
        from_id = concept_id(rel.from_)
        to_id = concept_id(rel.to)

        if from_id not in concept_ids:
            errors.append(
                ValidationFinding(
                    entity_id=entity,
                    field=f"relationships[{i}].from",
                    message=f"Relationship references non-existent concept: {rel.from_}",
                )
            )
        if to_id not in concept_ids:
            errors.append(
                ValidationFinding(
                    entity_id=entity,
                    field=f"relationships[{i}].to",
                    message=f"Relationship references non-existent concept: {rel.to}",
                )
            )
        if rel.kind not in RELATIONSHIP_KINDS:
            errors.append(
                ValidationFinding(
                    entity_id=entity,
                    field=f"relationships[{i}].kind",
                    message=f"Invalid relationship kind: {rel.kind}",
                )
            )
        if not 0.0 <= rel.weight <= 1.0:
            errors.append(
                ValidationFinding(
                    entity_id=entity,
                    field="weight",
                    message="Invalid relationship weight: must be 0.0-1.0",
                )
            )
        if from_id == to_id:
            errors.append(
                ValidationFinding(
                    entity_id=entity,
                    field=f"relationships[{i}]",
                    message="Self-referencing relationships not allowed",
                )
            )

    return errors


def build_concept_hierarchy(graph: ConceptGraph, root_key: str) -> ConceptNode | None:
    """Build the tree of concepts below the concept with key ``root_key``.

    Children are the concepts whose ``parent`` relationship points *to* a
    node (children declare the parent edge). Built with an explicit
    work-list; a parent edge that would revisit an ancestor is skipped.

    Returns:
        Root node with nested children, or None if no concept has ``root_key``
    """
    root = next((c for c in graph.concepts if c.key == root_key), None)
    if root is None:
        return None

    by_id: dict[str, Concept] = {}
    for concept in graph.concepts:
        by_id.setdefault(concept.id, concept)

    # parent id -> child ids, in relationship order
    children_of: dict[str, list[str]] = {}
    for rel in graph.relationships:
        if rel.kind == RelationshipKind.PARENT:
            children_of.setdefault(concept_id(rel.to), []).append(concept_id(rel.from_))

    root_node = ConceptNode(concept=root)
    stack: list[tuple[ConceptNode, frozenset[str]]] = [(root_node, frozenset({root.id}))]
    while stack:
        node, ancestors = stack.pop()
        for child_id in children_of.get(node.concept.id, []):
            child = by_id.get(child_id)
            if child is None or child.id in ancestors:
                continue
            child_node = ConceptNode(concept=child)
            node.children.append(child_node)
            stack.append((child_node, ancestors | {child.id}))

    return root_node
