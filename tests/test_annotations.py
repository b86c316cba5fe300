"""Tests for external annotation files."""

from semgraph.engine.aggregation import annotations_from_parsed
from semgraph.engine.annotations import (
    extract_annotated_content,
    parse_external_annotations,
    validate_external_annotations,
    validate_segment_checksum,
)
from semgraph.engine.core.checksum import sha256_hex
from semgraph.engine.segments import parse_segments
from semgraph.models.annotations import AnnotatedSegment

from .conftest import END, start

SOURCE = "line one\nline two\nline three\n"


class TestValidateExternalAnnotations:
    """Tests for validate_external_annotations."""

    def test_valid(self):
        annotations = parse_external_annotations(
            {
                "version": "1",
                "source_file": "guide.md",
                "segments": [{"id": "a", "line_range": {"start": 1, "end": 2}, "return": {"max_tokens": 10}}],
            }
        )

        assert validate_external_annotations(annotations) == []

    def test_file_level_findings(self):
        annotations = parse_external_annotations({"version": "2"})

        assert [f.field for f in validate_external_annotations(annotations)] == [
            "version",
            "source_file",
            "segments",
        ]

    def test_segment_findings(self):
        annotations = parse_external_annotations(
            {
                "source_file": "guide.md",
                "segments": [
                    {"id": "a", "byte_range": {"start": 0, "end": 4}, "boost": 11},
                    {"id": "a", "line_range": {"start": 1, "end": 1}},
                    {"id": "b", "generate": {"max_tokens": 0, "temperature": 2.5}},
                ],
            }
        )

        findings = validate_external_annotations(annotations)

        assert [(f.entity_id, f.field) for f in findings] == [
            ("a", "boost"),
            ("a", "id"),
            ("b", "byte_range"),
            ("b", "generate.max_tokens"),
            ("b", "generate.temperature"),
        ]

    def test_audience_string_is_coerced(self):
        segment = AnnotatedSegment.model_validate({"id": "a", "audience_role": "developer", "concepts": ""})

        assert segment.audience_role == ["developer"]
        assert segment.concepts is None


class TestExtractAnnotatedContent:
    def test_line_range_wins(self):
        segment = AnnotatedSegment(
            id="a",
            line_range={"start": 2, "end": 3},
            byte_range={"start": 0, "end": 4},
        )

        assert extract_annotated_content(SOURCE, segment) == "line two\nline three"

    def test_byte_range_is_utf8(self):
        source = "héllo wörld"
        segment = AnnotatedSegment(id="a", byte_range={"start": 7, "end": 13})

        assert extract_annotated_content(source, segment) == "wörld"

    def test_no_range(self):
        assert extract_annotated_content(SOURCE, AnnotatedSegment(id="a")) is None


class TestValidateSegmentChecksum:
    def test_matching_checksum(self):
        segment = AnnotatedSegment(
            id="a",
            line_range={"start": 1, "end": 1},
            segment_checksum="sha256:" + sha256_hex("line one"),
        )

        assert validate_segment_checksum(SOURCE, segment)
        assert not validate_segment_checksum("changed\n", segment)

    def test_without_checksum(self):
        assert validate_segment_checksum(SOURCE, AnnotatedSegment(id="a"))

    def test_unextractable_content(self):
        assert not validate_segment_checksum(SOURCE, AnnotatedSegment(id="a", segment_checksum="sha256:x"))

    def test_empty_segment_round_trips(self):
        doc = f"{start('a')}{END}"
        segment = annotations_from_parsed(parse_segments(doc)).segments[0]

        assert extract_annotated_content(doc, segment) == ""
        assert validate_segment_checksum(doc, segment)
