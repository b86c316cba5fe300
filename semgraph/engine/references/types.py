"""Reference value types.

References are immutable. Equality is structural over the parsed
components; the original string is kept for error messages only and is
excluded from comparison, so ``@docs/guide#a`` parsed twice from different
spellings compares equal once resolved.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SegmentRef:
    """Parsed ``[@project/]document#segment`` or ``#segment``."""

    project: str | None
    document_id: str | None
    segment_id: str
    original: str = field(default="", compare=False, repr=False)


@dataclass(frozen=True)
class ProjectRef:
    """Parsed ``@project`` or ``scope:project``."""

    scope: str  # "@" for the at-form
    project: str
    original: str = field(default="", compare=False, repr=False)


@dataclass(frozen=True)
class PageRef:
    """Parsed ``@project/page`` or ``page``."""

    project: str | None
    page_id: str
    original: str = field(default="", compare=False, repr=False)


@dataclass(frozen=True)
class ReferenceContext:
    """Ambient location used to fill in partial references."""

    current_project: str | None = None
    current_page: str | None = None
    current_segment: str | None = None


@dataclass(frozen=True)
class ResolvedRef:
    """Reference with every component filled in."""

    canonical: str
    scope: str
    project: str
    page: str
    segment: str | None = None
