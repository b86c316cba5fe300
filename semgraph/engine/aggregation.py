"""Page and project metadata aggregation.

Folds segment-level metadata into page summaries, and page summaries into
a project summary:

- concepts and audience roles: ordered set union (first occurrence wins)
- semantics: union by key
- token budgets: summed separately for retrieval and generation
- boost: token-weighted average over retrieval budgets
- checksums: digest of the ``|``-joined per-segment (or per-page) checksums
"""

import logging
from collections.abc import Iterable

from ..models.aggregation import (
    PageAggregation,
    PageSummary,
    ProjectAggregation,
    ProjectAggregationSummary,
    TokenBudget,
)
from ..models.annotations import AnnotatedSegment, ByteRange, ExternalAnnotations
from .core.checksum import ChecksumFn, combine_checksums, label_checksum, sha256_hex
from .core.document import ParsedDoc

logger = logging.getLogger(__name__)

DEFAULT_BOOST = 1.0


def _add_unique(target: list[str], values: Iterable[str] | None) -> None:
    if not values:
        return
    for value in values:
        if value not in target:
            target.append(value)


def _merge_semantics(target: dict[str, list[str]], source: dict[str, list[str]] | None) -> None:
    if not source:
        return
    for key, values in source.items():
        _add_unique(target.setdefault(key, []), values)


def _weighted_boost(weighted_sum: float, total_tokens: int) -> float:
    return weighted_sum / total_tokens if total_tokens > 0 else DEFAULT_BOOST


def aggregate_page_metadata(
    annotations: ExternalAnnotations,
    checksum_fn: ChecksumFn = sha256_hex,
) -> PageAggregation:
    """Fold one page's annotated segments into a page summary.

    The average boost is weighted by each segment's retrieval ``max_tokens``::

        average_boost = sum(boost_i * tokens_i) / sum(tokens_i)

    and is 1.0 when no segment has a retrieval budget. Generation totals
    stay ``None`` unless a segment declares a generation config.

    Args:
        annotations: Page annotations (page semantics plus segments)
        checksum_fn: Hex digest function used for the page checksum

    Returns:
        PageAggregation for the page
    """
    concepts: list[str] = []
    audience_roles: list[str] = []
    semantics: dict[str, list[str]] = {}
    budget = TokenBudget()
    weighted_sum = 0.0
    total_tokens = 0
    checksums: list[str] = []

    _merge_semantics(semantics, annotations.semantics)

    for segment in annotations.segments:
        _add_unique(concepts, segment.concepts)
        _add_unique(audience_roles, segment.audience_role)
        _merge_semantics(semantics, segment.semantics)

        if segment.retrieval is not None:
            tokens = segment.retrieval.max_tokens or 0
            budget.total_return_max += tokens
            budget.total_return_min += segment.retrieval.min_tokens or 0
            boost = segment.boost if segment.boost is not None else DEFAULT_BOOST
            weighted_sum += boost * tokens
            total_tokens += tokens

        if segment.generation is not None:
            budget.total_generate_max = (budget.total_generate_max or 0) + (
                segment.generation.max_tokens or 0
            )
            budget.total_generate_min = (budget.total_generate_min or 0) + (
                segment.generation.min_tokens or 0
            )

        # Absent checksums are left out of the digest input
        if segment.segment_checksum:
            checksums.append(segment.segment_checksum)

    return PageAggregation(
        concepts=concepts,
        audience_role=audience_roles,
        semantics=semantics,
        token_budget=budget,
        average_boost=_weighted_boost(weighted_sum, total_tokens),
        segment_count=len(annotations.segments),
        segment_checksums=checksums,
        page_checksum=combine_checksums(checksums, checksum_fn),
    )


def aggregate_project_metadata(
    pages: list[ExternalAnnotations],
    project_id: str,
    project_version: str | None = None,
    checksum_fn: ChecksumFn = sha256_hex,
) -> ProjectAggregation:
    """Fold page aggregates into a project summary.

    Each page contributes its own weighted average boost, weighted by the
    page's total retrieval budget; segments are not re-read.
    """
    concepts: list[str] = []
    audience_roles: list[str] = []
    semantics: dict[str, list[str]] = {}
    budget = TokenBudget()
    weighted_sum = 0.0
    total_tokens = 0
    segment_count = 0
    page_checksums: list[str] = []
    summaries: list[PageSummary] = []

    for page in pages:
        page_agg = aggregate_page_metadata(page, checksum_fn)

        _add_unique(concepts, page_agg.concepts)
        _add_unique(audience_roles, page_agg.audience_role)
        _merge_semantics(semantics, page_agg.semantics)

        page_budget = page_agg.token_budget
        budget.total_return_max += page_budget.total_return_max
        budget.total_return_min += page_budget.total_return_min
        if page_budget.total_generate_max is not None:
            budget.total_generate_max = (budget.total_generate_max or 0) + page_budget.total_generate_max
        if page_budget.total_generate_min is not None:
            budget.total_generate_min = (budget.total_generate_min or 0) + page_budget.total_generate_min

        weighted_sum += page_agg.average_boost * page_budget.total_return_max
        total_tokens += page_budget.total_return_max
        segment_count += page_agg.segment_count
        page_checksums.append(page_agg.page_checksum)

        summaries.append(PageSummary(source_file=page.source_file, page_aggregation=page_agg))

    logger.debug(f"Aggregated {len(pages)} pages ({segment_count} segments) for {project_id}")

    return ProjectAggregation(
        project=project_id,
        project_version=project_version,
        project_aggregation=ProjectAggregationSummary(
            concepts=concepts,
            audience_role=audience_roles,
            semantics=semantics,
            token_budget=budget,
            average_boost=_weighted_boost(weighted_sum, total_tokens),
            page_count=len(pages),
            segment_count=segment_count,
            page_checksums=page_checksums,
            project_checksum=combine_checksums(page_checksums, checksum_fn),
        ),
        pages=summaries,
    )


def annotations_from_parsed(
    parsed: ParsedDoc,
    source_file: str = "",
    checksum_fn: ChecksumFn = sha256_hex,
) -> ExternalAnnotations:
    """Describe a parsed document as external annotations.

    Segment checksums cover the exact text between the markers, so they
    can be re-checked later with ``validate_segment_checksum`` against the
    same source using the recorded byte range.
    """
    content = parsed.content_without_frontmatter.encode("utf-8")
    base = parsed.frontmatter_end_byte

    segments: list[AnnotatedSegment] = []
    for seg in parsed.segments:
        raw = content[seg.start_byte - base : seg.end_byte - base].decode("utf-8")
        spec = seg.spec
        segments.append(
            AnnotatedSegment(
                id=seg.id,
                type=seg.type,
                audience_role=seg.audience_role,
                concepts=spec.concepts if spec else None,
                boost=spec.boost if spec else None,
                semantics=spec.semantics if spec else {},
                byte_range=ByteRange(start=seg.start_byte, end=seg.end_byte),
                segment_checksum=label_checksum(checksum_fn(raw)),
                retrieval=spec.retrieval if spec else None,
                generation=spec.generation if spec else None,
            )
        )

    return ExternalAnnotations(
        source_file=source_file,
        semantics=parsed.frontmatter.semantics,
        segments=segments,
    )


def aggregate_parsed_doc(
    parsed: ParsedDoc,
    source_file: str = "",
    checksum_fn: ChecksumFn = sha256_hex,
) -> PageAggregation:
    """Aggregate a parsed document directly (see ``annotations_from_parsed``)."""
    return aggregate_page_metadata(annotations_from_parsed(parsed, source_file, checksum_fn), checksum_fn)
