"""Tests for journey validation and cycle detection."""

import pytest

from semgraph.engine.core.errors import GraphDocumentError
from semgraph.engine.graph import find_cycle, has_cycles, parse_journey, validate_journey
from semgraph.models.journeys import JourneyNode, NodeConnection


def _nodes(edges: dict[str, list[str]]) -> list[JourneyNode]:
    return [
        JourneyNode(id=node_id, connections=[{"target_node_id": t} for t in targets])
        for node_id, targets in edges.items()
    ]


class TestCycleDetection:
    """Tests for find_cycle / has_cycles."""

    def test_three_node_cycle(self):
        nodes = _nodes({"A": ["B"], "B": ["C"], "C": ["A"]})

        assert find_cycle(nodes) == ["A", "B", "C", "A"]
        assert has_cycles(nodes)

    def test_chain_without_closing_edge(self):
        assert not has_cycles(_nodes({"A": ["B"], "B": ["C"], "C": []}))

    def test_diamond_is_acyclic(self):
        assert not has_cycles(_nodes({"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}))

    def test_self_loop(self):
        assert find_cycle(_nodes({"A": ["A"]})) == ["A", "A"]

    def test_cross_journey_jumps_are_ignored(self):
        nodes = _nodes({"A": ["B"], "B": []})
        nodes[1].connections.append(NodeConnection(target_journey="A"))

        assert not has_cycles(nodes)

    def test_unknown_targets_are_ignored(self):
        assert not has_cycles(_nodes({"A": ["missing"]}))

    def test_long_chain(self):
        edges = {f"n{i}": [f"n{i + 1}"] for i in range(5000)}
        edges["n5000"] = ["n0"]

        cycle = find_cycle(_nodes(edges))

        assert cycle[0] == cycle[-1] == "n0"
        assert len(cycle) == 5002


class TestValidateJourney:
    """Tests for validate_journey."""

    def test_cycle_finding(self, journey_payload):
        findings = validate_journey(parse_journey(journey_payload()))

        assert len(findings) == 1
        assert findings[0].field == "connections"
        assert "A -> B -> C -> A" in findings[0].message

    def test_no_cycle_without_closing_edge(self, journey_payload):
        assert validate_journey(parse_journey(journey_payload(close_cycle=False))) == []

    def test_forward_references_are_fine(self, journey_payload):
        journey = parse_journey(journey_payload(close_cycle=False))

        # A -> B is declared before B exists
        assert journey.nodes[0].connections[0].target_node_id == "B"
        assert validate_journey(journey) == []

    def test_unknown_target(self, journey_payload):
        payload = journey_payload(close_cycle=False)
        payload["journey"]["nodes"][2]["connections"] = [{"target_node_id": "Z"}]

        findings = validate_journey(parse_journey(payload))

        assert [f.message for f in findings] == ["Connection targets unknown node: Z"]
        assert findings[0].entity_id == "C"

    def test_connection_without_target(self, journey_payload):
        payload = journey_payload(close_cycle=False)
        payload["journey"]["nodes"][2]["connections"] = [{"label": "nowhere"}]

        findings = validate_journey(parse_journey(payload))

        assert findings[0].field == "connections[0]"

    def test_duplicate_nodes_reported_separately_from_cycles(self, journey_payload):
        payload = journey_payload()
        payload["journey"]["nodes"].append({"id": "A", "type": "stage"})

        messages = [f.message for f in validate_journey(parse_journey(payload))]

        assert "Duplicate node ID: A" in messages
        assert any(m.startswith("Journey graph contains cycles") for m in messages)

    def test_required_fields_and_enums(self):
        from semgraph.models.journeys import Journey

        journey = Journey(status="archived", nodes=[{"id": "A", "type": "portal"}])

        fields = [f.field for f in validate_journey(journey)]

        assert fields == ["id", "key", "name", "projects", "status", "type"]

    def test_exit_points(self, journey_payload):
        payload = journey_payload(close_cycle=False)
        payload["journey"]["exit_points"] = [
            {"node": "C", "type": "success"},
            {"node": "Q", "type": "teleport"},
        ]

        findings = validate_journey(parse_journey(payload))

        assert [f.field for f in findings] == ["exit_points.node", "exit_points.type"]


class TestParseJourney:
    def test_wrong_kind(self, concept_payload):
        with pytest.raises(GraphDocumentError):
            parse_journey(concept_payload)
