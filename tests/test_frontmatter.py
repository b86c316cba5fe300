"""Tests for frontmatter extraction and spec normalization."""

import json

import pytest

from semgraph.engine.core.errors import FrontmatterError
from semgraph.engine.segments import (
    build_spec_map,
    extract_frontmatter,
    parse_frontmatter_block,
    split_frontmatter,
)
from semgraph.models.segments import SegmentSpec


class TestSplitFrontmatter:
    def test_no_frontmatter(self):
        assert split_frontmatter(b"# Title\n") == (None, 0)

    def test_returns_body_and_end_byte(self):
        data = b"---\ntitle: x\n---\nbody"

        body, end = split_frontmatter(data)

        assert body == "title: x"
        assert data[end:] == b"body"

    def test_crlf_and_empty_block(self):
        body, end = split_frontmatter(b"---\r\n---\r\ncontent")

        assert body == ""
        assert end == len(b"---\r\n---\r\n")


class TestParseFrontmatterBlock:
    """Tests for parse_frontmatter_block."""

    def test_namespaced_specs(self):
        config = parse_frontmatter_block(
            "title: Guide\nsemcontext:\n  segments:\n    - id: a\n      return:\n        max_tokens: 10\n"
        )

        assert config.title == "Guide"
        assert [s.id for s in config.segment_specs] == ["a"]
        assert config.segment_specs[0].retrieval.max_tokens == 10

    def test_normalization(self):
        config = parse_frontmatter_block(
            "semcontext:\n"
            "  segments:\n"
            "    - id: 7\n"
            "      audience: developer\n"
            "      concept: payments\n"
            "      generate:\n"
            "        maxTokens: 50\n"
        )

        spec = config.segment_specs[0]
        assert spec.id == "7"
        assert spec.audience_role == ["developer"]
        assert spec.concepts == ["payments"]
        assert spec.boost == 1.0
        assert spec.generation.max_tokens == 50

    def test_explicit_zero_boost_is_kept(self):
        config = parse_frontmatter_block("semcontext:\n  segments:\n    - id: a\n      boost: 0\n")

        assert config.segment_specs[0].boost == 0

    def test_unknown_keys_are_kept(self):
        config = parse_frontmatter_block("title: x\nowner: team-docs\n")

        assert config.model_extra["owner"] == "team-docs"

    def test_custom_namespace(self):
        config = parse_frontmatter_block("docs:\n  segments:\n    - id: a\n", namespace="docs")

        assert [s.id for s in config.segment_specs] == ["a"]

    def test_injected_loader(self):
        config = parse_frontmatter_block(
            '{"semcontext": {"segments": [{"id": "a"}]}}', loader=json.loads
        )

        assert config.segment_specs[0].id == "a"

    def test_invalid_yaml(self):
        with pytest.raises(FrontmatterError):
            parse_frontmatter_block("title: [unclosed")

    def test_non_mapping(self):
        with pytest.raises(FrontmatterError, match="mapping"):
            parse_frontmatter_block("- a\n- b\n")

    def test_bad_spec_types(self):
        with pytest.raises(FrontmatterError):
            parse_frontmatter_block("semcontext:\n  segments:\n    - id: a\n      boost: lots\n")


class TestExtractFrontmatter:
    def test_without_block(self):
        assert extract_frontmatter("no frontmatter") == (None, 0)

    def test_with_block(self, sample_doc):
        config, end = extract_frontmatter(sample_doc)

        assert config.title == "Payments API"
        assert config.semantics == {"tasks": ["take a payment"]}
        assert sample_doc.encode()[end:].startswith(b"\n# Payments")


class TestBuildSpecMap:
    def test_first_declaration_wins(self):
        first = SegmentSpec(id="a", type="overview")
        second = SegmentSpec(id="a", type="faq")

        spec_map = build_spec_map([first, second, SegmentSpec(id="")])

        assert spec_map == {"a": first}
