"""In-memory registry of stable links.

A stable link id (e.g. ``getting-started``) maps to a ``LinkTarget`` holding
the segment/page reference and resolved URL. The registry is a plain dict
and is not safe for concurrent mutation.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from ...models.links import LinkTarget
from ..core.errors import RefError
from ..references.parser import parse_page_ref, parse_segment_ref

logger = logging.getLogger(__name__)


def _same_ref(left: str | None, right: str, parser: Callable[[str], object]) -> bool:
    """Compare refs by parsed components, falling back to string equality."""
    if left is None:
        return False
    try:
        return parser(left) == parser(right)
    except RefError:
        return left == right


class LinkRegistry:
    """Stable link id -> LinkTarget."""

    def __init__(self) -> None:
        self.links: dict[str, LinkTarget] = {}

    def __len__(self) -> int:
        return len(self.links)

    def register(self, link_id: str, target: LinkTarget | Mapping[str, Any]) -> LinkTarget:
        """Register (or replace) a link. The target's id is set to ``link_id``."""
        if isinstance(target, LinkTarget):
            link = target.model_copy(update={"id": link_id})
        else:
            link = LinkTarget.model_validate({**target, "id": link_id})
        if link_id in self.links:
            logger.debug(f"Replacing link {link_id}")
        self.links[link_id] = link
        return link

    def resolve(self, link_id: str) -> LinkTarget | None:
        return self.links.get(link_id)

    def has(self, link_id: str) -> bool:
        return link_id in self.links

    def all(self) -> list[LinkTarget]:
        """All links in registration order."""
        return list(self.links.values())

    def load_from_config(self, config: Mapping[str, Mapping[str, Any] | LinkTarget]) -> None:
        """Register every ``id -> target`` entry of a configuration mapping.

        Raises:
            pydantic.ValidationError: If an entry is not a valid target
        """
        for link_id, target in config.items():
            self.register(link_id, target)
        logger.debug(f"Loaded {len(config)} links from config")

    def find_by_segment_ref(self, segment_ref: str) -> list[LinkTarget]:
        """Links whose segment ref has the same components as ``segment_ref``."""
        return [
            link for link in self.links.values() if _same_ref(link.segment_ref, segment_ref, parse_segment_ref)
        ]

    def find_by_page_ref(self, page_ref: str) -> list[LinkTarget]:
        return [link for link in self.links.values() if _same_ref(link.page_ref, page_ref, parse_page_ref)]


def create_registry(config: Mapping[str, Mapping[str, Any] | LinkTarget] | None = None) -> LinkRegistry:
    """Create a registry, optionally pre-loaded from configuration."""
    registry = LinkRegistry()
    if config:
        registry.load_from_config(config)
    return registry
