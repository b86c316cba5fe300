"""Journey validation and cycle detection.

A journey's nodes and ``target_node_id`` connections must form a DAG.
Cross-journey jumps (``target_journey``) leave the graph and never count
toward acyclicity.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ...models.enums import DocumentKind, ExitPointType, JourneyNodeType, JourneyStatus
from ...models.journeys import Journey, JourneyNode
from ...models.validation import ValidationFinding
from .documents import parse_envelope

logger = logging.getLogger(__name__)

NODE_TYPES = {t.value for t in JourneyNodeType}
EXIT_TYPES = {t.value for t in ExitPointType}
JOURNEY_STATUSES = {s.value for s in JourneyStatus}


def parse_journey(payload: Mapping[str, Any]) -> Journey:
    """Extract the journey from a deserialized ``kind: journey`` document."""
    return parse_envelope(payload, DocumentKind.JOURNEY).journey


def build_adjacency(nodes: list[JourneyNode]) -> dict[str, list[str]]:
    """Map node id to same-journey target ids, in declaration order.

    Edges of nodes declared more than once are merged under the shared id.
    """
    graph: dict[str, list[str]] = {}
    for node in nodes:
        targets = graph.setdefault(node.id, [])
        for conn in node.connections:
            if conn.target_node_id:
                targets.append(conn.target_node_id)
    return graph


def find_cycle(nodes: list[JourneyNode]) -> list[str] | None:
    """Find one cycle in the node graph.

    Iterative depth-first search with a visited set and an in-progress set;
    a back edge to an in-progress node closes a cycle. Roots are tried in
    node declaration order so the result is deterministic. Edges to unknown
    node ids are ignored here (``validate_journey`` reports them).

    Returns:
        The cycle as a list of node ids (first id repeated at the end), or None
    """
    graph = build_adjacency(nodes)
    visited: set[str] = set()
    in_progress: set[str] = set()

    for root in graph:
        if root in visited:
            continue

        path: list[str] = [root]
        iterators = [iter(graph[root])]
        visited.add(root)
        in_progress.add(root)

        while iterators:
            neighbor = next(iterators[-1], None)
            if neighbor is None:
                iterators.pop()
                in_progress.discard(path.pop())
                continue
            if neighbor not in graph:
                continue
            if neighbor in in_progress:
                return path[path.index(neighbor) :] + [neighbor]
            if neighbor not in visited:
                visited.add(neighbor)
                in_progress.add(neighbor)
                path.append(neighbor)
                iterators.append(iter(graph[neighbor]))

    return None


def has_cycles(nodes: list[JourneyNode]) -> bool:
    return find_cycle(nodes) is not None


def validate_journey(journey: Journey) -> list[ValidationFinding]:
    """Validate a journey.

    Checks required fields, node ids, connection targets (in a second pass,
    so forward references are fine), exit points and acyclicity. All
    findings are reported; nothing short-circuits.
    """
    errors: list[ValidationFinding] = []
    jid = journey.id or None

    if not journey.id:
        errors.append(ValidationFinding(field="id", message="Journey ID is required"))
    if not journey.key:
        errors.append(ValidationFinding(entity_id=jid, field="key", message="Journey key is required"))
    if not journey.name:
        errors.append(ValidationFinding(entity_id=jid, field="name", message="Journey name is required"))
    if not journey.projects:
        errors.append(
            ValidationFinding(entity_id=jid, field="projects", message="At least one project required")
        )
    if not journey.nodes:
        errors.append(
            ValidationFinding(entity_id=jid, field="nodes", message="At least one node required")
        )
    if journey.status not in JOURNEY_STATUSES:
        errors.append(
            ValidationFinding(
                entity_id=jid, field="status", message=f"Invalid journey status: {journey.status}"
            )
        )

    # Pass 1: node ids
    node_ids: set[str] = set()
    for node in journey.nodes:
        if not node.id:
            errors.append(ValidationFinding(field="id", message="Node ID is required"))
            continue
        if node.id in node_ids:
            errors.append(
                ValidationFinding(entity_id=node.id, field="id", message=f"Duplicate node ID: {node.id}")
            )
        node_ids.add(node.id)
        if node.type not in NODE_TYPES:
            errors.append(
                ValidationFinding(
                    entity_id=node.id, field="type", message=f"Invalid node type: {node.type}"
                )
            )

    # Pass 2: connections
    for node in journey.nodes:
        for i, conn in enumerate(node.connections):
            field = f"connections[{i}]"
            if not conn.target_node_id and not conn.target_journey:
                errors.append(
                    ValidationFinding(
                        entity_id=node.id or None,
                        field=field,
                        message="Connection needs target_node_id or target_journey",
                    )
                )
            elif conn.target_node_id and conn.target_node_id not in node_ids:
                errors.append(
                    ValidationFinding(
                        entity_id=node.id or None,
                        field=f"{field}.target_node_id",
                        message=f"Connection targets unknown node: {conn.target_node_id}",
                    )
                )

    for exit_point in journey.exit_points:
        if exit_point.node not in node_ids:
            errors.append(
                ValidationFinding(
                    entity_id=exit_point.node,
                    field="exit_points.node",
                    message=f"Exit point references unknown node: {exit_point.node}",
                )
            )
        if exit_point.type not in EXIT_TYPES:
            errors.append(
                ValidationFinding(
                    entity_id=exit_point.node,
                    field="exit_points.type",
                    message=f"Invalid exit point type: {exit_point.type}",
                )
            )

    cycle = find_cycle(journey.nodes)
    if cycle is not None:
        errors.append(
            ValidationFinding(
                entity_id=cycle[0],
                field="connections",
                message=f"Journey graph contains cycles (must be DAG): {' -> '.join(cycle)}",
            )
        )

    if errors:
        logger.debug(f"Journey '{journey.id}' has {len(errors)} findings")
    return errors
