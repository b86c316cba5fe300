"""Reference parsing, building and resolution.

Grammars:
- segment: ``@project/document#segment``, ``document#segment``, ``#segment``
- project: ``@project``, ``scope:project`` (e.g. ``repository:payments``)
- page: ``@project/page``, ``page``

Malformed strings raise ``ReferenceFormatError``; partial references whose
missing parts the context cannot supply raise ``UnresolvableReferenceError``.
"""

from ..core.errors import ReferenceFormatError, UnresolvableReferenceError
from .types import PageRef, ProjectRef, ReferenceContext, ResolvedRef, SegmentRef

PROJECT_PREFIX = "@"
SEGMENT_SEPARATOR = "#"
PATH_SEPARATOR = "/"
SCOPE_SEPARATOR = ":"


def _split_project_path(path: str, ref: str) -> tuple[str, str]:
    """Split ``@project/rest`` on the first slash."""
    slash_idx = path.find(PATH_SEPARATOR)
    if slash_idx == -1:
        raise ReferenceFormatError(ref, "'@project' must be followed by '/document'")
    project = path[1:slash_idx]
    rest = path[slash_idx + 1 :]
    if not project:
        raise ReferenceFormatError(ref, "empty project")
    if not rest:
        raise ReferenceFormatError(ref, "empty document")
    return project, rest


def parse_segment_ref(ref: str) -> SegmentRef:
    """Parse a segment reference.

    The segment id is everything after the last ``#``. A leading ``@``
    splits the resource path on its first ``/`` into project and document.

    Args:
        ref: Reference string

    Returns:
        Parsed components

    Raises:
        ReferenceFormatError: If the string is not a segment reference

    Example:
        >>> parse_segment_ref("@docs/api-guide#authentication")
        SegmentRef(project='docs', document_id='api-guide', segment_id='authentication')
    """
    hash_idx = ref.rfind(SEGMENT_SEPARATOR)
    if hash_idx == -1:
        raise ReferenceFormatError(ref, "missing '#segment'")

    segment_id = ref[hash_idx + 1 :]
    if not segment_id:
        raise ReferenceFormatError(ref, "empty segment")

    resource_path = ref[:hash_idx]
    if not resource_path:
        return SegmentRef(project=None, document_id=None, segment_id=segment_id, original=ref)

    if resource_path.startswith(SEGMENT_SEPARATOR):
        raise ReferenceFormatError(ref, "document cannot start with '#'")

    if resource_path.startswith(PROJECT_PREFIX):
        project, document_id = _split_project_path(resource_path, ref)
        return SegmentRef(
            project=project, document_id=document_id, segment_id=segment_id, original=ref
        )

    return SegmentRef(project=None, document_id=resource_path, segment_id=segment_id, original=ref)


def build_segment_ref(project: str, document_id: str, segment_id: str) -> str:
    """Build a reference in format ``@project/document#segment``.

    Raises:
        ReferenceFormatError: If a component would not parse back unchanged
    """
    candidate = f"{PROJECT_PREFIX}{project}{PATH_SEPARATOR}{document_id}{SEGMENT_SEPARATOR}{segment_id}"
    if not project or PATH_SEPARATOR in project:
        raise ReferenceFormatError(candidate, "project must be non-empty and contain no '/'")
    if not document_id or document_id.startswith(SEGMENT_SEPARATOR):
        raise ReferenceFormatError(candidate, "document must be non-empty")
    if not segment_id or SEGMENT_SEPARATOR in segment_id:
        raise ReferenceFormatError(candidate, "segment must be non-empty and contain no '#'")
    return candidate


def build_page_ref(project: str, page_id: str) -> str:
    """Build a reference in format ``@project/page``."""
    candidate = f"{PROJECT_PREFIX}{project}{PATH_SEPARATOR}{page_id}"
    if not project or PATH_SEPARATOR in project or not page_id:
        raise ReferenceFormatError(candidate, "project and page must be non-empty")
    return candidate


def parse_project_ref(ref: str) -> ProjectRef:
    """Parse a project reference.

    Supports ``@project`` and ``scope:project`` (the first ``:`` splits), e.g.
    ``repository:payments`` or ``tenant:org/project``.

    Raises:
        ReferenceFormatError: If scope or project is empty or absent
    """
    if ref.startswith(PROJECT_PREFIX):
        project = ref[1:]
        if not project:
            raise ReferenceFormatError(ref, "empty project")
        return ProjectRef(scope=PROJECT_PREFIX, project=project, original=ref)

    colon_idx = ref.find(SCOPE_SEPARATOR)
    if colon_idx == -1:
        raise ReferenceFormatError(ref, "expected '@project' or 'scope:project'")

    scope = ref[:colon_idx]
    project = ref[colon_idx + 1 :]
    if not scope:
        raise ReferenceFormatError(ref, "empty scope")
    if not project:
        raise ReferenceFormatError(ref, "empty project")
    return ProjectRef(scope=scope, project=project, original=ref)


def parse_page_ref(ref: str) -> PageRef:
    """Parse a page reference.

    ``@project`` without a page is rejected rather than defaulted.

    Raises:
        ReferenceFormatError: If the string is not a page reference
    """
    if not ref:
        raise ReferenceFormatError(ref, "empty page")

    if ref.startswith(PROJECT_PREFIX):
        project, page_id = _split_project_path(ref, ref)
        return PageRef(project=project, page_id=page_id, original=ref)

    return PageRef(project=None, page_id=ref, original=ref)


def resolve_reference(ref: str, context: ReferenceContext) -> ResolvedRef:
    """Resolve a segment reference with context.

    Missing project/document components are filled in from the context.

    Args:
        ref: Reference string
        context: Resolution context

    Returns:
        Resolved reference whose ``canonical`` form is identical for any two
        references naming the same project/document/segment

    Raises:
        ReferenceFormatError: If the reference is malformed
        UnresolvableReferenceError: If project or document remains empty
    """
    parsed = parse_segment_ref(ref)

    project = parsed.project or context.current_project
    if not project:
        raise UnresolvableReferenceError(ref, "project")

    page = parsed.document_id or context.current_page
    if not page:
        raise UnresolvableReferenceError(ref, "page")

    return ResolvedRef(
        canonical=build_segment_ref(project, page, parsed.segment_id),
        scope=PROJECT_PREFIX,
        project=project,
        page=page,
        segment=parsed.segment_id,
    )


def resolve_page_reference(ref: str, context: ReferenceContext) -> ResolvedRef:
    """Resolve a page reference with context (no segment component)."""
    parsed = parse_page_ref(ref)

    project = parsed.project or context.current_project
    if not project:
        raise UnresolvableReferenceError(ref, "project")

    return ResolvedRef(
        canonical=build_page_ref(project, parsed.page_id),
        scope=PROJECT_PREFIX,
        project=project,
        page=parsed.page_id,
    )


def is_valid_segment_ref(ref: str) -> bool:
    """Check if a reference is a well-formed segment reference."""
    try:
        parse_segment_ref(ref)
    except ReferenceFormatError:
        return False
    return True


def is_absolute_ref(ref: str) -> bool:
    """Check if a reference names its project (``@`` or ``scope:`` form)."""
    return ref.startswith(PROJECT_PREFIX) or SCOPE_SEPARATOR in ref


def is_relative_ref(ref: str) -> bool:
    return not is_absolute_ref(ref) and not ref.startswith(SEGMENT_SEPARATOR)


def is_fragment_ref(ref: str) -> bool:
    return ref.startswith(SEGMENT_SEPARATOR)
