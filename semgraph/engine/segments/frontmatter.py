"""Frontmatter extraction and segment spec normalization.

The frontmatter is a leading ``---`` delimited YAML block. Segment specs live
under a namespace key (``semcontext`` by default)::

    ---
    title: Payments API
    semcontext:
      segments:
        - id: intro
          type: overview
          audience_role: developer
          return:
            max_tokens: 400
    ---
"""

import logging
import re
from collections.abc import Callable, Iterable
from typing import Any

import yaml
from pydantic import ValidationError

from ...config import settings
from ...models.segments import FrontmatterConfig, SegmentSpec
from ..core.errors import FrontmatterError

logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(rb"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)", re.DOTALL)

# Deserializer for the frontmatter body; swappable for tests or other formats
FrontmatterLoader = Callable[[str], Any]


def split_frontmatter(data: bytes) -> tuple[str | None, int]:
    """Locate the frontmatter block.

    Args:
        data: UTF-8 encoded document

    Returns:
        Tuple of (frontmatter body text or None, byte offset where content begins)
    """
    match = FRONTMATTER_RE.match(data)
    if not match:
        return None, 0
    body = match.group(1) or b""
    return body.decode("utf-8"), match.end()


def parse_frontmatter_block(
    text: str,
    namespace: str | None = None,
    loader: FrontmatterLoader = yaml.safe_load,
) -> FrontmatterConfig:
    """Deserialize and normalize a frontmatter body.

    Audience roles and concepts are coerced to lists and a missing boost
    defaults to 1.0. Normalization is silent; range problems are left for
    the validator.

    Raises:
        FrontmatterError: If the body is not a mapping or specs have bad types
    """
    namespace = namespace or settings.frontmatter_namespace
    try:
        raw = loader(text)
    except (yaml.YAMLError, ValueError) as e:
        raise FrontmatterError(f"Failed to parse YAML frontmatter: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise FrontmatterError(
            f"Frontmatter must be a mapping, got {type(raw).__name__}"
        )

    data = {str(k): v for k, v in raw.items()}
    section = data.pop(namespace, None)
    if section is not None:
        data["segment_config"] = section

    try:
        return FrontmatterConfig.model_validate(data)
    except ValidationError as e:
        raise FrontmatterError(f"Invalid segment specs in frontmatter: {e}") from e


def extract_frontmatter(
    doc_text: str,
    namespace: str | None = None,
    loader: FrontmatterLoader = yaml.safe_load,
) -> tuple[FrontmatterConfig | None, int]:
    """Extract just the frontmatter without scanning segments.

    Returns:
        Tuple of (config or None when there is no block, byte offset where content begins)
    """
    body, end_byte = split_frontmatter(doc_text.encode("utf-8"))
    if body is None:
        return None, 0
    return parse_frontmatter_block(body, namespace, loader), end_byte


def build_spec_map(specs: Iterable[SegmentSpec]) -> dict[str, SegmentSpec]:
    """Map spec id to spec. The first declaration of an id wins.

    Duplicates and empty ids are not errors here; the validator reports them.
    """
    spec_map: dict[str, SegmentSpec] = {}
    for spec in specs:
        if not spec.id:
            continue
        if spec.id in spec_map:
            logger.debug(f"Duplicate segment spec '{spec.id}' ignored in spec map")
            continue
        spec_map[spec.id] = spec
    return spec_map
