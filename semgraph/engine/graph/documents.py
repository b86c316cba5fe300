"""Graph document envelopes.

Graph documents arrive already deserialized as ``{version, kind, <payload>}``
mappings. The ``kind`` field selects the payload model.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ...models.documents import (
    ConceptDocument,
    GraphDocument,
    JourneyDocument,
    LinkageDocument,
    ProjectDocument,
    VersionDocument,
)
from ..core.errors import GraphDocumentError

_graph_document_adapter: TypeAdapter[GraphDocument] = TypeAdapter(GraphDocument)


def parse_graph_document(
    payload: Mapping[str, Any],
) -> ProjectDocument | VersionDocument | JourneyDocument | ConceptDocument | LinkageDocument:
    """Parse any graph document, dispatching on its ``kind``.

    Raises:
        GraphDocumentError: If the envelope or payload does not validate
    """
    if not isinstance(payload, Mapping):
        raise GraphDocumentError(f"Graph document must be a mapping, got {type(payload).__name__}")
    try:
        return _graph_document_adapter.validate_python(dict(payload))
    except ValidationError as e:
        raise GraphDocumentError(f"Invalid graph document (kind={payload.get('kind')!r}): {e}") from e


def parse_envelope(payload: Mapping[str, Any], kind: str) -> Any:
    """Parse a graph document and require a specific ``kind``."""
    document = parse_graph_document(payload)
    if document.kind != kind:
        raise GraphDocumentError(f"Expected a '{kind}' document, got '{document.kind}'")
    return document
