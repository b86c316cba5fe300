"""Tests for navigation tree transforms."""

import pytest

from semgraph.engine.core.errors import RefError
from semgraph.engine.navigation import (
    build_tree,
    filter_by_version,
    find_item,
    flatten_tree,
    get_breadcrumbs,
    resolve_item_links,
    validate_tree,
)
from semgraph.engine.references import ReferenceContext
from semgraph.models.navigation import NavigationItem, NavigationTree


@pytest.fixture
def tree() -> NavigationTree:
    return build_tree(
        {
            "id": "main",
            "versions": ["v1", "v2"],
            "items": [
                {"id": "intro", "title": "Introduction", "link": "@docs/intro"},
                {
                    "id": "guides",
                    "title": "Guides",
                    "no_link": True,
                    "children": [
                        {"id": "install", "link": "install#steps", "versions": ["v2"]},
                        {"id": "legacy", "link": "legacy", "metadata": {"versions": ["v1"]}},
                    ],
                },
                {"id": "status", "link": "https://status.example.com"},
            ],
        }
    )


class TestBuildTree:
    def test_fills_defaults(self, tree):
        intro = find_item(tree, "intro")
        guides = find_item(tree, "guides")

        assert intro.no_link is False
        assert intro.children is None
        assert guides.no_link is True
        assert find_item(tree, "install").no_link is False

    def test_accepts_model(self, tree):
        assert build_tree(tree) == tree


class TestFlattenTree:
    """Tests for flatten_tree."""

    def test_pre_order(self, tree):
        flat = flatten_tree(tree)

        assert [f.id for f in flat] == ["intro", "guides", "install", "legacy", "status"]
        assert [f.level for f in flat] == [0, 0, 1, 1, 0]

    def test_paths_and_parents(self, tree):
        install = next(f for f in flatten_tree(tree) if f.id == "install")

        assert install.path == ["guides", "install"]
        assert install.parent_id == "guides"
        assert not install.has_children

    def test_deep_tree_does_not_recurse(self):
        item = NavigationItem(id="leaf")
        for i in range(3000):
            item = NavigationItem(id=f"n{i}", children=[item])
        flat = flatten_tree(NavigationTree(id="deep", items=[item]))

        assert len(flat) == 3001
        assert flat[-1].level == 3000


class TestLookups:
    def test_breadcrumbs(self, tree):
        assert [i.id for i in get_breadcrumbs(tree, "legacy")] == ["guides", "legacy"]
        assert get_breadcrumbs(tree, "missing") == []

    def test_find_missing(self, tree):
        assert find_item(tree, "missing") is None


class TestFilterByVersion:
    """Tests for filter_by_version."""

    def test_version_outside_tree_drops_everything(self, tree):
        assert filter_by_version(tree, "v3").items == []

    def test_item_constraints(self, tree):
        v1 = flatten_tree(filter_by_version(tree, "v1"))
        v2 = flatten_tree(filter_by_version(tree, "v2"))

        assert [f.id for f in v1] == ["intro", "guides", "legacy", "status"]
        assert [f.id for f in v2] == ["intro", "guides", "install", "status"]

    def test_children_use_their_own_constraint(self):
        tree = NavigationTree(
            id="t",
            items=[
                NavigationItem(
                    id="parent",
                    versions=["v2"],
                    children=[NavigationItem(id="child"), NavigationItem(id="v1-only", versions=["v1"])],
                )
            ],
        )

        assert [f.id for f in flatten_tree(filter_by_version(tree, "v2"))] == ["parent", "child"]

    def test_dropped_item_takes_subtree(self):
        tree = NavigationTree(
            id="t",
            items=[NavigationItem(id="old", versions=["v1"], children=[NavigationItem(id="child")])],
        )

        assert filter_by_version(tree, "v2").items == []

    def test_input_is_not_modified(self, tree):
        filter_by_version(tree, "v1")

        assert find_item(tree, "install") is not None


class TestLinks:
    context = ReferenceContext(current_project="docs", current_page="index")

    def test_resolve_item_links(self, tree):
        links = resolve_item_links(tree, self.context)

        assert links == {
            "intro": "@docs/intro",
            "install": "@docs/install#steps",
            "legacy": "@docs/legacy",
        }

    def test_resolve_raises_on_unresolvable(self, tree):
        with pytest.raises(RefError):
            resolve_item_links(tree, ReferenceContext())


class TestValidateTree:
    def test_valid(self, tree):
        assert validate_tree(tree) == []
        assert validate_tree(tree, TestLinks.context) == []

    def test_duplicate_ids(self):
        tree = NavigationTree(
            id="t",
            items=[NavigationItem(id="a"), NavigationItem(id="b", children=[NavigationItem(id="a")])],
        )

        findings = validate_tree(tree)

        assert len(findings) == 1
        assert findings[0].entity_id == "a"

    def test_unresolvable_links(self, tree):
        findings = validate_tree(tree, ReferenceContext())

        assert {f.entity_id for f in findings} == {"install", "legacy"}
        assert all(f.field == "link" for f in findings)
