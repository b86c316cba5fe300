"""Segment validation.

Validation is a separate pass over a ``ParsedDoc``: parsing never fails on
missing specs, so partial documents can be inspected before being judged.
Every problem is returned as a ``ValidationFinding``; nothing is raised.

Modes:
- strict: every check below
- loose: duplicates, mutual exclusion and numeric ranges only; markers
  without specs (and specs without markers) are tolerated
"""

from ...config import settings
from ...models.enums import ValidationMode
from ...models.segments import SegmentSpec
from ...models.validation import ValidationFinding
from ..core.document import ParsedDoc

MAX_TEMPERATURE = 2.0


def _check_ranges(spec: SegmentSpec, errors: list[ValidationFinding]) -> None:
    """Numeric range checks shared by both modes."""
    if spec.retrieval is not None and spec.retrieval.max_tokens < 0:
        errors.append(
            ValidationFinding(
                entity_id=spec.id,
                field="return.max_tokens",
                message="max_tokens must be non-negative",
            )
        )

    generation = spec.generation
    if generation is not None:
        if generation.max_tokens < 0:
            errors.append(
                ValidationFinding(
                    entity_id=spec.id,
                    field="generate.max_tokens",
                    message="max_tokens must be non-negative",
                )
            )
        if generation.temperature is not None and not (
            0.0 <= generation.temperature <= MAX_TEMPERATURE
        ):
            errors.append(
                ValidationFinding(
                    entity_id=spec.id,
                    field="generate.temperature",
                    message="temperature must be between 0.0 and 2.0",
                )
            )
        if generation.iterations is not None and generation.iterations < 0:
            errors.append(
                ValidationFinding(
                    entity_id=spec.id,
                    field="generate.iterations",
                    message="iterations must be non-negative",
                )
            )

    if spec.boost < 0:
        errors.append(
            ValidationFinding(
                entity_id=spec.id, field="boost", message="boost must be non-negative"
            )
        )


def validate_segments(
    parsed: ParsedDoc, mode: ValidationMode | str | None = None
) -> list[ValidationFinding]:
    """Validate a parsed document for segment consistency.

    Checks:
    - Unique segment IDs (specs and markers)
    - Non-empty spec IDs (strict)
    - Exactly one of return or generate (neither: strict only)
    - Numeric values in valid ranges
    - Markers have specs and specs have markers (strict)

    Args:
        parsed: Parsed document
        mode: Validation mode (defaults to ``settings.validation_mode``)

    Returns:
        List of findings (empty if valid)
    """
    mode = ValidationMode(mode or settings.validation_mode)
    strict = mode == ValidationMode.STRICT
    errors: list[ValidationFinding] = []

    seen_ids: set[str] = set()
    for spec in parsed.specs:
        if spec.id in seen_ids:
            errors.append(
                ValidationFinding(
                    entity_id=spec.id,
                    field="id",
                    message="duplicate segment ID in frontmatter",
                )
            )
        seen_ids.add(spec.id)

        if not spec.id and strict:
            errors.append(ValidationFinding(field="id", message="segment ID cannot be empty"))
            continue

        has_return = spec.retrieval is not None
        has_generate = spec.generation is not None

        if strict and not has_return and not has_generate:
            errors.append(
                ValidationFinding(
                    entity_id=spec.id,
                    message="segment must have either 'return' or 'generate' configuration",
                )
            )
        if has_return and has_generate:
            errors.append(
                ValidationFinding(
                    entity_id=spec.id,
                    message="segment cannot have both 'return' and 'generate' configuration",
                )
            )

        _check_ranges(spec, errors)

    marker_ids: set[str] = set()
    for segment in parsed.segments:
        if segment.id in marker_ids:
            errors.append(
                ValidationFinding(
                    entity_id=segment.id,
                    message="duplicate segment ID in document markers",
                )
            )
        marker_ids.add(segment.id)

        if strict and segment.spec is None:
            errors.append(
                ValidationFinding(
                    entity_id=segment.id,
                    message="segment marker has no corresponding frontmatter spec",
                )
            )

    if strict:
        reported: set[str] = set()
        for spec in parsed.specs:
            if spec.id and spec.id not in marker_ids and spec.id not in reported:
                reported.add(spec.id)
                errors.append(
                    ValidationFinding(
                        entity_id=spec.id,
                        message="frontmatter spec has no corresponding segment marker in document",
                    )
                )

    return errors


def validate_strict(parsed: ParsedDoc) -> list[ValidationFinding]:
    """Strict validation - all checks, missing specs/markers are errors."""
    return validate_segments(parsed, ValidationMode.STRICT)


def validate_loose(parsed: ParsedDoc) -> list[ValidationFinding]:
    """Loose validation - only duplicates, mutual exclusion and ranges."""
    return validate_segments(parsed, ValidationMode.LOOSE)
