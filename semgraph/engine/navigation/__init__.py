"""Navigation module.

Hierarchical navigation trees: normalization, flattening, breadcrumbs,
version filtering and link resolution.
"""

from .builder import (
    build_tree,
    filter_by_version,
    find_item,
    flatten_tree,
    get_breadcrumbs,
    resolve_item_links,
    validate_tree,
)

__all__ = [
    "build_tree",
    "filter_by_version",
    "find_item",
    "flatten_tree",
    "get_breadcrumbs",
    "resolve_item_links",
    "validate_tree",
]
