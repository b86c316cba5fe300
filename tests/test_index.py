"""Tests for segment indexing and lookup helpers."""

from semgraph.engine.core.tokens import estimate_tokens
from semgraph.engine.segments import (
    build_segment_index,
    extract_segment_content,
    get_segment_by_id,
    get_segments_by_type,
    get_segments_for_generation,
    get_segments_for_retrieval,
    get_total_token_budget,
    parse_segments,
)


class TestBuildSegmentIndex:
    def test_indexed_segments(self, sample_doc):
        parsed = parse_segments(sample_doc)

        index = build_segment_index(parsed, "docs", "payments", token_counter=estimate_tokens)

        assert index.document_id == "payments"
        intro, setup = index.segments
        assert intro.segment_ref == "@docs/payments#intro"
        assert intro.concepts == ["payments", "checkout"]
        assert intro.boost == 1.2
        assert intro.max_tokens == 400
        assert intro.token_count == estimate_tokens("Intro text.")
        assert not intro.over_budget
        assert setup.max_tokens == 300
        assert setup.audience_role == ["developer", "operator"]

    def test_over_budget(self):
        doc = (
            "---\nsemcontext:\n  segments:\n    - id: a\n      return:\n        max_tokens: 1\n---\n"
            '<!-- semcontext:segment start key="a" -->'
            + "word " * 20
            + "<!-- semcontext:segment end -->"
        )

        index = build_segment_index(parse_segments(doc), "docs", "d", token_counter=estimate_tokens)

        assert index.segments[0].over_budget


class TestLookups:
    def test_lookups(self, sample_doc):
        parsed = parse_segments(sample_doc)

        assert get_segment_by_id(parsed, "setup").body == "Setup steps."
        assert get_segment_by_id(parsed, "missing") is None
        assert [s.id for s in get_segments_by_type(parsed, "howto")] == ["setup"]
        assert [s.id for s in get_segments_for_generation(parsed)] == ["setup"]
        assert [s.id for s in get_segments_for_retrieval(parsed)] == ["intro"]
        assert get_total_token_budget(parsed) == 700

    def test_extract_segment_content(self, sample_doc):
        assert extract_segment_content(sample_doc, "intro") == "Intro text."
        assert extract_segment_content(sample_doc, "missing") is None


class TestTokens:
    def test_estimate_tokens(self):
        assert estimate_tokens("") == 0
        assert estimate_tokens("abc") == 1
        assert estimate_tokens("abcd" * 10) == 10
