"""Shared fixtures for semgraph tests."""

import pytest

SAMPLE_DOC = """---
title: Payments API
semcontext:
  semantics:
    tasks: [take a payment]
  segments:
    - id: intro
      type: overview
      audience_role: developer
      concepts: [payments, checkout]
      boost: 1.2
      return:
        max_tokens: 400
    - id: setup
      type: howto
      audience_role: [developer, operator]
      generate:
        max_tokens: 300
        temperature: 0.7
---

# Payments

<!-- semcontext:segment start key="intro" -->
Intro text.
<!-- semcontext:segment end -->

Some prose outside any segment.

<!-- semcontext:segment start key="setup" -->
Setup steps.
<!-- semcontext:segment end -->
"""

NESTED_DOC = """<!-- semcontext:segment start key="A" -->
outer text
<!-- semcontext:segment start key="B" -->
inner text
<!-- semcontext:segment end -->
more outer text
<!-- semcontext:segment end -->
"""


def start(segment_id: str) -> str:
    return f'<!-- semcontext:segment start key="{segment_id}" -->'


END = "<!-- semcontext:segment end -->"


@pytest.fixture
def sample_doc() -> str:
    return SAMPLE_DOC


@pytest.fixture
def nested_doc() -> str:
    return NESTED_DOC


@pytest.fixture
def journey_payload():
    """A journey document whose nodes form the cycle A -> B -> C -> A."""

    def _build(close_cycle: bool = True) -> dict:
        c_connections = [{"target_node_id": "A"}] if close_cycle else []
        return {
            "version": "1",
            "kind": "journey",
            "journey": {
                "id": "onboarding",
                "key": "onboarding",
                "name": "Onboarding",
                "projects": ["docs"],
                "status": "active",
                "nodes": [
                    {"id": "A", "type": "stage", "connections": [{"target_node_id": "B"}]},
                    {"id": "B", "type": "milestone", "connections": [{"target_node_id": "C"}]},
                    {"id": "C", "type": "decision", "connections": c_connections},
                ],
            },
        }

    return _build


@pytest.fixture
def concept_payload() -> dict:
    return {
        "version": "1",
        "kind": "concept-graph",
        "graph": {"id": "core", "name": "Core concepts"},
        "concepts": [
            {"id": "payments", "key": "payments", "name": "Payments"},
            {"id": "cards", "key": "cards", "name": "Cards"},
            {"id": "wallets", "key": "wallets", "name": "Wallets"},
            {"id": "tokens", "key": "tokens", "name": "Card tokens"},
        ],
        "relationships": [
            {"from": "concept:@cards", "to": "concept:@payments", "kind": "parent"},
            {"from": "wallets", "to": "payments", "kind": "parent", "weight": 0.5},
            {"from": "tokens", "to": "cards", "kind": "parent"},
            {"from": "wallets", "to": "cards", "kind": "related"},
        ],
    }


@pytest.fixture
def linkage_payload() -> dict:
    return {
        "version": "1",
        "kind": "linkage",
        "code_to_assets": {
            "src/pay.py:charge": {"assets": [{"path": "docs/pay.md", "doc_type": "guide"}]},
        },
        "asset_to_code": {
            "docs/pay.md": {"code_refs": [{"path": "src/pay.py", "functions": ["charge"]}]},
        },
    }
