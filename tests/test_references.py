"""Tests for segment, project and page references."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from semgraph.engine.core.errors import RefError, ReferenceFormatError, UnresolvableReferenceError
from semgraph.engine.references import (
    ReferenceContext,
    SegmentRef,
    build_page_ref,
    build_segment_ref,
    is_absolute_ref,
    is_fragment_ref,
    is_relative_ref,
    is_valid_segment_ref,
    parse_page_ref,
    parse_project_ref,
    parse_segment_ref,
    resolve_page_reference,
    resolve_reference,
)

projects = st.text(alphabet=st.characters(exclude_characters="/"), min_size=1)
documents = st.text(min_size=1).filter(lambda s: not s.startswith("#"))
segments = st.text(alphabet=st.characters(exclude_characters="#"), min_size=1)


class TestParseSegmentRef:
    """Tests for parse_segment_ref."""

    def test_absolute(self):
        ref = parse_segment_ref("@docs/api-guide#authentication")

        assert ref == SegmentRef(project="docs", document_id="api-guide", segment_id="authentication")
        assert ref.original == "@docs/api-guide#authentication"

    def test_relative(self):
        ref = parse_segment_ref("guides/setup#install")

        assert ref.project is None
        assert ref.document_id == "guides/setup"

    def test_fragment(self):
        ref = parse_segment_ref("#intro")

        assert ref.project is None
        assert ref.document_id is None
        assert ref.segment_id == "intro"

    def test_document_splits_on_first_slash_only(self):
        ref = parse_segment_ref("@docs/guides/setup#install")

        assert ref.project == "docs"
        assert ref.document_id == "guides/setup"

    def test_segment_is_after_last_hash(self):
        ref = parse_segment_ref("page#with#hashes")

        assert ref.document_id == "page#with"
        assert ref.segment_id == "hashes"

    def test_equality_ignores_original_string(self):
        assert parse_segment_ref("@docs/a#b") == SegmentRef("docs", "a", "b", original="something else")

    @pytest.mark.parametrize(
        "ref",
        ["no-hash", "doc#", "@docs#intro", "@/doc#intro", "@docs/#intro", "#a#b", ""],
    )
    def test_malformed(self, ref):
        with pytest.raises(ReferenceFormatError):
            parse_segment_ref(ref)


class TestBuildSegmentRef:
    def test_build(self):
        assert build_segment_ref("docs", "guide", "intro") == "@docs/guide#intro"

    @pytest.mark.parametrize(
        "project,document,segment",
        [("", "d", "s"), ("a/b", "d", "s"), ("p", "", "s"), ("p", "#d", "s"), ("p", "d", ""), ("p", "d", "a#b")],
    )
    def test_rejects_components_that_would_not_round_trip(self, project, document, segment):
        with pytest.raises(ReferenceFormatError):
            build_segment_ref(project, document, segment)

    @given(project=projects, document=documents, segment=segments)
    def test_round_trip(self, project, document, segment):
        parsed = parse_segment_ref(build_segment_ref(project, document, segment))

        assert (parsed.project, parsed.document_id, parsed.segment_id) == (project, document, segment)


class TestProjectAndPageRefs:
    def test_at_project(self):
        ref = parse_project_ref("@payments")

        assert ref.scope == "@"
        assert ref.project == "payments"

    def test_scoped_project_splits_on_first_colon(self):
        ref = parse_project_ref("tenant:org:payments")

        assert ref.scope == "tenant"
        assert ref.project == "org:payments"

    @pytest.mark.parametrize("ref", ["@", "payments", ":payments", "repository:"])
    def test_malformed_project(self, ref):
        with pytest.raises(ReferenceFormatError):
            parse_project_ref(ref)

    def test_page_refs(self):
        assert parse_page_ref("@docs/setup").project == "docs"
        assert parse_page_ref("setup").project is None
        assert build_page_ref("docs", "setup") == "@docs/setup"

    def test_project_without_page_is_rejected(self):
        with pytest.raises(ReferenceFormatError):
            parse_page_ref("@docs")


class TestResolveReference:
    """Tests for resolve_reference."""

    context = ReferenceContext(current_project="docs", current_page="guide")

    def test_spellings_resolve_to_same_canonical(self):
        canonical = {
            resolve_reference(ref, self.context).canonical
            for ref in ("#intro", "guide#intro", "@docs/guide#intro")
        }

        assert canonical == {"@docs/guide#intro"}

    def test_explicit_components_win(self):
        resolved = resolve_reference("@api/reference#auth", self.context)

        assert resolved.project == "api"
        assert resolved.page == "reference"
        assert resolved.segment == "auth"

    def test_missing_project(self):
        with pytest.raises(UnresolvableReferenceError) as exc_info:
            resolve_reference("guide#intro", ReferenceContext())

        assert exc_info.value.component == "project"

    def test_missing_page(self):
        with pytest.raises(UnresolvableReferenceError) as exc_info:
            resolve_reference("#intro", ReferenceContext(current_project="docs"))

        assert exc_info.value.component == "page"

    def test_page_reference(self):
        assert resolve_page_reference("setup", self.context).canonical == "@docs/setup"

    def test_errors_share_a_base(self):
        with pytest.raises(RefError):
            resolve_reference("bad", self.context)


class TestPredicates:
    def test_predicates(self):
        assert is_valid_segment_ref("@docs/a#b")
        assert not is_valid_segment_ref("@docs/a")
        assert is_absolute_ref("@docs/a#b")
        assert is_absolute_ref("repository:payments")
        assert is_relative_ref("guide#intro")
        assert not is_relative_ref("#intro")
        assert is_fragment_ref("#intro")
