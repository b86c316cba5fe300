"""Project and project-version documents."""

from collections.abc import Mapping
from typing import Any

from ...models.enums import DocumentKind, ProjectStatus, ProjectType, VersionMode
from ...models.projects import Project, ProjectVersion, Semver
from ...models.validation import ValidationFinding
from .documents import parse_envelope

PROJECT_TYPES = {t.value for t in ProjectType}
PROJECT_STATUSES = {s.value for s in ProjectStatus}


def parse_project(payload: Mapping[str, Any]) -> Project:
    return parse_envelope(payload, DocumentKind.PROJECT).project


def parse_version(payload: Mapping[str, Any]) -> ProjectVersion:
    return parse_envelope(payload, DocumentKind.PROJECT_VERSION).project_version


def validate_project(project: Project) -> list[ValidationFinding]:
    errors: list[ValidationFinding] = []
    pid = project.id or None

    if not project.id:
        errors.append(ValidationFinding(field="id", message="Project ID is required"))
    if not project.key:
        errors.append(ValidationFinding(entity_id=pid, field="key", message="Project key is required"))
    if not project.name:
        errors.append(ValidationFinding(entity_id=pid, field="name", message="Project name is required"))
    if project.type not in PROJECT_TYPES:
        errors.append(
            ValidationFinding(entity_id=pid, field="type", message=f"Invalid project type: {project.type}")
        )
    if project.status not in PROJECT_STATUSES:
        errors.append(
            ValidationFinding(entity_id=pid, field="status", message=f"Invalid project status: {project.status}")
        )
    # An explicit empty list is an error; omitting repositories is fine
    if project.repositories is not None and not project.repositories:
        errors.append(
            ValidationFinding(
                entity_id=pid, field="repositories", message="At least one repository required"
            )
        )
    return errors


def validate_version(version: ProjectVersion) -> list[ValidationFinding]:
    errors: list[ValidationFinding] = []
    vid = version.id or None

    if not version.id:
        errors.append(ValidationFinding(field="id", message="Version ID is required"))
    if not version.key:
        errors.append(ValidationFinding(entity_id=vid, field="key", message="Version key is required"))
    if not version.mode:
        errors.append(ValidationFinding(entity_id=vid, field="mode", message="Versioning mode is required"))
    elif version.mode not in {m.value for m in VersionMode}:
        errors.append(
            ValidationFinding(entity_id=vid, field="mode", message=f"Invalid versioning mode: {version.mode}")
        )

    if version.mode == VersionMode.SEMVER:
        if version.semver is None:
            errors.append(
                ValidationFinding(entity_id=vid, field="semver", message="Semver mode requires semver fields")
            )
        else:
            for part in ("major", "minor", "patch"):
                if getattr(version.semver, part) is None:
                    errors.append(
                        ValidationFinding(
                            entity_id=vid,
                            field=f"semver.{part}",
                            message=f"{part.capitalize()} version required",
                        )
                    )

    if version.mode == VersionMode.FREEFORM and not (version.freeform and version.freeform.version):
        errors.append(
            ValidationFinding(
                entity_id=vid, field="freeform.version", message="Freeform mode requires version string"
            )
        )
    return errors


def format_semver(semver: Semver | None) -> str:
    """Render ``major.minor.patch[-prerelease][+build]``."""
    if semver is None:
        return ""
    version = f"{semver.major}.{semver.minor}.{semver.patch}"
    if semver.prerelease:
        version += f"-{semver.prerelease}"
    if semver.build:
        version += f"+{semver.build}"
    return version
