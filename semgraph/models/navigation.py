"""Navigation tree models."""

from typing import Any

from pydantic import BaseModel, Field


class NavigationItem(BaseModel):
    """One item of a navigation tree."""

    id: str = Field(..., description="Identifier, unique within its tree")
    title: str = Field(default="", description="Display title")
    link: str | None = Field(default=None, description="Segment ref, page ref or URL")
    children: list["NavigationItem"] | None = Field(default=None, description="Child items")
    no_link: bool | None = Field(default=None, description="Render as plain label")
    icon: str | None = None
    badge: str | None = None
    order: int | None = Field(default=None, description="Sort priority hint")
    versions: list[str] | None = Field(
        default=None, description="Version constraint (overrides the tree's)"
    )
    metadata: dict[str, Any] = Field(default_factory=dict)

    def version_constraint(self) -> list[str] | None:
        """The item's own version constraint, if it declares one."""
        if self.versions is not None:
            return self.versions
        versions = self.metadata.get("versions")
        if isinstance(versions, list):
            return [str(v) for v in versions]
        return None


class NavigationTree(BaseModel):
    """A rooted, ordered navigation tree."""

    id: str = Field(..., description="Tree identifier")
    label: str | None = None
    items: list[NavigationItem] = Field(default_factory=list, description="Root items")
    versions: list[str] | None = Field(default=None, description="Versions this tree applies to")
    default: bool = False


class FlatNavigationItem(BaseModel):
    """A navigation item flattened for rendering."""

    item: NavigationItem
    level: int = Field(..., ge=0, description="Depth (0 = root)")
    path: list[str] = Field(..., description="Ancestor ids plus own id")
    parent_id: str | None = None
    has_children: bool = False

    @property
    def id(self) -> str:
        return self.item.id
