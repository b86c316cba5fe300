"""Navigation tree builder.

Pure tree transforms over ``NavigationTree`` models. Traversals use explicit
work-lists so deep trees cannot exhaust the interpreter stack.
"""

from collections.abc import Mapping
from typing import Any

from ...models.navigation import FlatNavigationItem, NavigationItem, NavigationTree
from ...models.validation import ValidationFinding
from ..core.errors import RefError
from ..references.parser import resolve_page_reference, resolve_reference
from ..references.types import ReferenceContext

# Item links that are plain URLs rather than references
URL_PREFIXES = ("http://", "https://", "mailto:", "/")


def build_tree(config: NavigationTree | Mapping[str, Any]) -> NavigationTree:
    """Build a navigation tree from configuration.

    Normalizes missing flags to their defaults (``no_link=False``) at every
    level. Sibling order is preserved.
    """
    tree = config if isinstance(config, NavigationTree) else NavigationTree.model_validate(config)

    items: list[NavigationItem] = []
    stack: list[tuple[list[NavigationItem], list[NavigationItem]]] = [(tree.items, items)]
    while stack:
        source, target = stack.pop()
        for item in source:
            children: list[NavigationItem] | None = [] if item.children is not None else None
            target.append(
                item.model_copy(
                    update={
                        "no_link": item.no_link if item.no_link is not None else False,
                        "children": children,
                    }
                )
            )
            if item.children:
                stack.append((item.children, children))

    return tree.model_copy(update={"items": items})


def flatten_tree(tree: NavigationTree) -> list[FlatNavigationItem]:
    """Flatten a navigation tree for rendering (pre-order).

    Each entry carries its depth (root items are level 0), the path of ids
    from the root, and its parent id.
    """
    flat: list[FlatNavigationItem] = []
    stack: list[tuple[NavigationItem, int, tuple[str, ...], str | None]] = [
        (item, 0, (), None) for item in reversed(tree.items)
    ]
    while stack:
        item, level, ancestors, parent_id = stack.pop()
        path = (*ancestors, item.id)
        flat.append(
            FlatNavigationItem(
                item=item,
                level=level,
                path=list(path),
                parent_id=parent_id,
                has_children=bool(item.children),
            )
        )
        for child in reversed(item.children or []):
            stack.append((child, level + 1, path, item.id))
    return flat


def find_item(tree: NavigationTree, item_id: str) -> NavigationItem | None:
    """Find an item by ID in the tree (first match in pre-order)."""
    stack = list(reversed(tree.items))
    while stack:
        item = stack.pop()
        if item.id == item_id:
            return item
        stack.extend(reversed(item.children or []))
    return None


def get_breadcrumbs(tree: NavigationTree, item_id: str) -> list[NavigationItem]:
    """Get the items from the root down to ``item_id`` (inclusive)."""
    flat = flatten_tree(tree)
    by_id: dict[str, FlatNavigationItem] = {}
    for entry in flat:
        by_id.setdefault(entry.id, entry)

    target = by_id.get(item_id)
    if target is None:
        return []
    return [by_id[ancestor].item for ancestor in target.path if ancestor in by_id]


def filter_by_version(tree: NavigationTree, version: str) -> NavigationTree:
    """Filter a tree down to the items that apply to ``version``.

    If the tree declares versions and ``version`` is not among them, every
    item is dropped. Otherwise an item is kept when its own constraint (or
    the tree's, when it has none) includes ``version``; a dropped item takes
    its subtree with it.
    """
    if tree.versions is not None and version not in tree.versions:
        return tree.model_copy(update={"items": []})

    def applies(item: NavigationItem) -> bool:
        versions = item.version_constraint()
        if versions is None:
            versions = tree.versions
        return versions is None or version in versions

    items: list[NavigationItem] = []
    stack: list[tuple[list[NavigationItem], list[NavigationItem]]] = [(tree.items, items)]
    while stack:
        source, target = stack.pop()
        for item in source:
            if not applies(item):
                continue
            children: list[NavigationItem] | None = [] if item.children is not None else None
            target.append(item.model_copy(update={"children": children}))
            if item.children:
                stack.append((item.children, children))

    return tree.model_copy(update={"items": items})


def _is_reference_link(link: str | None) -> bool:
    return bool(link) and not link.startswith(URL_PREFIXES)


def resolve_item_links(tree: NavigationTree, context: ReferenceContext) -> dict[str, str]:
    """Resolve reference links of every item to canonical form.

    Links containing ``#`` are segment references, other non-URL links are
    page references.

    Returns:
        Mapping of item id to canonical reference

    Raises:
        RefError: If a link is malformed or cannot be resolved
    """
    resolved: dict[str, str] = {}
    for entry in flatten_tree(tree):
        link = entry.item.link
        if not _is_reference_link(link):
            continue
        if "#" in link:
            resolved[entry.id] = resolve_reference(link, context).canonical
        else:
            resolved[entry.id] = resolve_page_reference(link, context).canonical
    return resolved


def validate_tree(
    tree: NavigationTree, context: ReferenceContext | None = None
) -> list[ValidationFinding]:
    """Validate item ids (non-empty, unique) and, given a context, item links."""
    errors: list[ValidationFinding] = []
    seen: set[str] = set()

    for entry in flatten_tree(tree):
        if not entry.id:
            errors.append(
                ValidationFinding(field="id", message=f"item at {'/'.join(entry.path)} has no id")
            )
        elif entry.id in seen:
            errors.append(
                ValidationFinding(
                    entity_id=entry.id, field="id", message="duplicate navigation item ID"
                )
            )
        seen.add(entry.id)

        link = entry.item.link
        if context is None or not _is_reference_link(link):
            continue
        try:
            if "#" in link:
                resolve_reference(link, context)
            else:
                resolve_page_reference(link, context)
        except RefError as e:
            errors.append(ValidationFinding(entity_id=entry.id, field="link", message=str(e)))

    return errors
