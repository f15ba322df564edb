"""Fold a parsed POM and its registry search record into catalog entities.

Everything here is pure: the same inputs always yield equal drafts, and no
settings or clocks are consulted.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Iterable, Optional

from libindex_api.domain import (
    ArtifactCoordinate,
    ProjectDraft,
    RegistrySearchRecord,
    ReleaseDraft,
    RepositoryIdentity,
)

# lib_2.12, lib_sjs0.6_2.12, lib_native0.4_2.11, lib_3
_TARGET_PATTERN = re.compile(
    r"_(?P<platform>(?:sjs|native)[0-9][0-9.]*_)?(?P<language>[0-9]+(?:\.[0-9]+)?(?:\.[0-9]+)?(?:-[A-Za-z0-9.]+)?)$"
)

RUNTIME_SCOPES = {None, "compile", "runtime"}


def parse_target(artifact_id: str) -> Optional[str]:
    """Platform suffix of a cross-built artifact id, e.g. ``sjs0.6_2.12``."""
    match = _TARGET_PATTERN.search(artifact_id)
    if not match:
        return None
    platform = match.group("platform") or ""
    return f"{platform}{match.group('language')}"


def normalize_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    cleaned = {keyword.strip() for keyword in keywords if keyword and keyword.strip()}
    return tuple(sorted(cleaned))


def build_search_record(
    coordinate: ArtifactCoordinate,
    *,
    digest: str,
    size: int,
    created: datetime,
    path: str = "",
) -> RegistrySearchRecord:
    return RegistrySearchRecord(
        sha1=digest,
        sha256=None,
        package=f"{coordinate.group_id}:{coordinate.artifact_id}",
        name=coordinate.artifact_id,
        path=path,
        size=size,
        version=coordinate.version,
        owner=coordinate.group_id,
        repo=coordinate.artifact_id,
        created=created,
    )


def convert(
    coordinate: ArtifactCoordinate,
    search_record: RegistrySearchRecord,
    *,
    repository: Optional[RepositoryIdentity] = None,
    keywords: Iterable[str] = (),
) -> tuple[ProjectDraft, ReleaseDraft]:
    repository_value = str(repository) if repository else None
    normalized_keywords = normalize_keywords(keywords)
    project = ProjectDraft(
        group_id=coordinate.group_id,
        artifact_id=coordinate.artifact_id,
        repository=repository_value,
        keywords=normalized_keywords,
        live_data=True,
    )
    dependencies = tuple(
        str(dependency)
        for dependency in coordinate.dependencies
        if dependency.scope in RUNTIME_SCOPES
    )
    release = ReleaseDraft(
        group_id=coordinate.group_id,
        artifact_id=coordinate.artifact_id,
        version=search_record.version or coordinate.version,
        repository=repository_value,
        name=coordinate.name or coordinate.artifact_id,
        description=coordinate.description,
        target=parse_target(coordinate.artifact_id),
        licenses=tuple(coordinate.licenses),
        dependencies=dependencies,
        pom_sha1=search_record.sha1,
        pom_size_bytes=search_record.size,
        released_at=search_record.created,
        keywords=normalized_keywords,
        live_data=True,
    )
    return project, release
