"""External annotation files.

An annotation file describes a source document's segments by byte or line
range instead of in-text markers. Byte ranges are UTF-8 offsets.
"""

from collections.abc import Mapping
from typing import Any

from ..models.annotations import AnnotatedSegment, ExternalAnnotations
from ..models.validation import ValidationFinding
from .core.checksum import ChecksumFn, label_checksum, sha256_hex

SUPPORTED_VERSION = "1"
MAX_BOOST = 10.0


def parse_external_annotations(payload: Mapping[str, Any]) -> ExternalAnnotations:
    """Build annotations from a deserialized annotation file.

    Raises:
        pydantic.ValidationError: If the payload does not match the model
    """
    return ExternalAnnotations.model_validate(dict(payload))


def validate_external_annotations(annotations: ExternalAnnotations) -> list[ValidationFinding]:
    """Check an annotation file.

    Reports the version, source file, segment ids, missing ranges, boost
    outside 0-10, non-positive token budgets and temperature outside
    0.0-2.0. All findings are returned; nothing is raised.
    """
    errors: list[ValidationFinding] = []
    source = annotations.source_file or None

    if not annotations.version:
        errors.append(ValidationFinding(entity_id=source, field="version", message="Version is required"))
    elif annotations.version != SUPPORTED_VERSION:
        errors.append(
            ValidationFinding(
                entity_id=source,
                field="version",
                message=f"Unsupported version: {annotations.version}",
            )
        )
    if not annotations.source_file:
        errors.append(ValidationFinding(field="source_file", message="Source file is required"))
    if not annotations.segments:
        errors.append(
            ValidationFinding(entity_id=source, field="segments", message="At least one segment required")
        )

    seen: set[str] = set()
    for segment in annotations.segments:
        sid = segment.id or None
        if not segment.id:
            errors.append(ValidationFinding(field="id", message="Segment ID is required"))
        elif segment.id in seen:
            errors.append(
                ValidationFinding(entity_id=sid, field="id", message=f"Duplicate segment ID: {segment.id}")
            )
        seen.add(segment.id)

        if segment.byte_range is None and segment.line_range is None:
            errors.append(
                ValidationFinding(
                    entity_id=sid,
                    field="byte_range",
                    message=f"Segment {segment.id} must have byte_range or line_range",
                )
            )

        if segment.boost is not None and not 0 <= segment.boost <= MAX_BOOST:
            errors.append(
                ValidationFinding(
                    entity_id=sid,
                    field="boost",
                    message=f"Invalid boost for {segment.id}: must be 0-{MAX_BOOST:g}",
                )
            )

        budgets = []
        if segment.retrieval is not None:
            budgets += [
                ("return.min_tokens", segment.retrieval.min_tokens),
                ("return.max_tokens", segment.retrieval.max_tokens),
            ]
        if segment.generation is not None:
            budgets += [
                ("generate.min_tokens", segment.generation.min_tokens),
                ("generate.max_tokens", segment.generation.max_tokens),
            ]
        for field, value in budgets:
            if value is not None and value < 1:
                errors.append(
                    ValidationFinding(
                        entity_id=sid,
                        field=field,
                        message=f"Invalid {field} for {segment.id}: must be positive",
                    )
                )

        temperature = segment.generation.temperature if segment.generation else None
        if temperature is not None and not 0.0 <= temperature <= 2.0:
            errors.append(
                ValidationFinding(
                    entity_id=sid,
                    field="generate.temperature",
                    message=f"Invalid temperature for {segment.id}: must be 0.0-2.0",
                )
            )

    return errors


def extract_annotated_content(source: str, segment: AnnotatedSegment) -> str | None:
    """Slice a segment's text out of its source document.

    The line range (1-indexed, inclusive) wins over the byte range.

    Returns:
        The segment text, or None if the segment has no range
    """
    if segment.line_range is not None:
        lines = source.split("\n")
        return "\n".join(lines[segment.line_range.start - 1 : segment.line_range.end])

    if segment.byte_range is not None:
        data = source.encode("utf-8")
        return data[segment.byte_range.start : segment.byte_range.end].decode("utf-8", errors="replace")

    return None


def validate_segment_checksum(
    source: str,
    segment: AnnotatedSegment,
    checksum_fn: ChecksumFn = sha256_hex,
) -> bool:
    """Check a segment's recorded checksum against the source text.

    A segment without a recorded checksum always passes; a segment without
    a range never does. An empty segment is checked like any other.
    """
    if not segment.segment_checksum:
        return True

    content = extract_annotated_content(source, segment)
    if content is None:
        return False

    return segment.segment_checksum == label_checksum(checksum_fn(content))
