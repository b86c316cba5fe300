"""Structural errors.

Structural failures abort the unit being processed (one document parse or
one reference resolution). Validation findings are never raised; they are
returned as lists of ``ValidationFinding``.
"""


class SegmentParseError(ValueError):
    """A document's markers or frontmatter cannot be parsed."""


class FrontmatterError(SegmentParseError):
    """The frontmatter block is not valid YAML or not a valid spec set."""


class MarkerCountError(SegmentParseError):
    """Start and end marker counts differ."""

    def __init__(self, start_count: int, end_count: int, detail: str = ""):
        self.start_count = start_count
        self.end_count = end_count
        message = (
            f"Mismatched segment markers: found {start_count} start markers "
            f"and {end_count} end markers"
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnclosedMarkerError(MarkerCountError):
    """A start marker is still open when the text ends."""

    def __init__(self, segment_id: str, line: int, start_count: int, end_count: int):
        self.segment_id = segment_id
        self.line = line
        super().__init__(
            start_count,
            end_count,
            f"unclosed segment marker '{segment_id}' at line {line}",
        )


class UnmatchedEndMarkerError(MarkerCountError):
    """An end marker appears with no open start marker."""

    def __init__(self, line: int, start_count: int, end_count: int):
        self.line = line
        super().__init__(start_count, end_count, f"unmatched end marker at line {line}")


class MarkerOrderError(SegmentParseError):
    """An end marker begins before its start marker has ended."""

    def __init__(self, segment_id: str):
        self.segment_id = segment_id
        super().__init__(
            f"Segment end marker appears before start marker of '{segment_id}' ends"
        )


class NestedSegmentError(SegmentParseError):
    """A start marker appears inside another segment."""

    def __init__(self, outer_id: str, inner_id: str):
        self.outer_id = outer_id
        self.inner_id = inner_id
        super().__init__(
            f"Nested segments not allowed: segment '{inner_id}' starts before '{outer_id}' ends"
        )


class RefError(ValueError):
    """Base class for reference failures."""

    def __init__(self, message: str, ref: str):
        self.ref = ref
        super().__init__(message)


class ReferenceFormatError(RefError):
    """The reference string does not match any reference grammar."""

    def __init__(self, ref: str, reason: str = ""):
        message = f"Invalid reference format: {ref!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, ref)


class UnresolvableReferenceError(RefError):
    """A component is still missing after filling in from context."""

    def __init__(self, ref: str, component: str):
        self.component = component
        super().__init__(f"Cannot resolve {component} from reference: {ref!r}", ref)


class GraphDocumentError(ValueError):
    """A graph document envelope is malformed or of the wrong kind."""
