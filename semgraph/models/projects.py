"""Project and project-version models."""

from typing import Any

from pydantic import BaseModel, Field


class Repository(BaseModel):
    id: str
    url: str
    is_primary: bool = False
    path_filter: str | None = None
    branch: str | None = None


class ProjectAsset(BaseModel):
    id: str
    type: str = "documentation"
    source: str = "filesystem"
    path: str
    is_primary: bool = False


class Project(BaseModel):
    id: str = ""
    key: str = ""
    name: str = ""
    type: str = Field(default="", description="See ProjectType")
    description: str | None = None
    status: str = "active"
    parent_project: str | None = None
    repositories: list[Repository] | None = None
    assets: list[ProjectAsset] | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class Semver(BaseModel):
    major: int | None = None
    minor: int | None = None
    patch: int | None = None
    prerelease: str | None = None
    build: str | None = None


class FreeformVersion(BaseModel):
    version: str = ""


class ProjectVersion(BaseModel):
    id: str = ""
    project: str = ""
    key: str = ""
    name: str = ""
    mode: str = Field(default="", description="See VersionMode")
    semver: Semver | None = None
    freeform: FreeformVersion | None = None
    status: str = "draft"
    type: str | None = None
    release_date: str | None = None
    eol_date: str | None = None
    is_default: bool = False
    is_latest: bool = False
    is_prerelease: bool = False
    parent_version: str | None = None
    lineage_type: str | None = None
    source_commit: str | None = None
    source_tag: str | None = None
    release_notes: str | None = None
    breaking_changes: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
