"""Value types shared across the ingestion pipeline."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

POM_SUFFIX = ".pom"


def is_pom_path(path: str) -> bool:
    """Checksum side files (``.pom.sha1``, ``.pom.md5``) are not POMs."""
    return path.strip().lower().endswith(POM_SUFFIX)


def compute_digest(data: bytes) -> str:
    return hashlib.sha1(data).hexdigest()


@dataclass(frozen=True)
class RepositoryIdentity:
    owner: str
    name: str

    @classmethod
    def of(cls, owner: str, name: str) -> "RepositoryIdentity":
        return cls(owner=owner.strip().lower(), name=name.strip().lower())

    @classmethod
    def parse(cls, value: str) -> "RepositoryIdentity":
        owner, sep, name = value.strip().partition("/")
        if not sep or not owner or not name or "/" in name:
            raise ValueError(f"Invalid repository identity '{value}'")
        return cls.of(owner, name)

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class GithubCredentials:
    login: str
    token: str


@dataclass(frozen=True)
class UserState:
    login: str
    repos: frozenset[RepositoryIdentity] = frozenset()
    trusted: bool = False


@dataclass(frozen=True)
class EnrichmentFlags:
    info: bool = True
    contributors: bool = True
    readme: bool = True

    def any(self) -> bool:
        return self.info or self.contributors or self.readme


@dataclass(frozen=True)
class ArtifactUpload:
    """One publish call. Lives only for the duration of the ingestion attempt."""

    path: str
    data: bytes
    credentials: GithubCredentials
    user_state: UserState
    flags: EnrichmentFlags = field(default_factory=EnrichmentFlags)
    keywords: frozenset[str] = frozenset()

    @property
    def is_pom(self) -> bool:
        return is_pom_path(self.path)

    @property
    def digest(self) -> str:
        return compute_digest(self.data)


@dataclass(frozen=True)
class ScmInfo:
    connection: Optional[str] = None
    developer_connection: Optional[str] = None
    url: Optional[str] = None

    def candidates(self) -> list[str]:
        return [value for value in (self.connection, self.developer_connection, self.url) if value]


@dataclass(frozen=True)
class DependencyCoordinate:
    group_id: str
    artifact_id: str
    version: Optional[str] = None
    scope: Optional[str] = None

    def __str__(self) -> str:
        if self.version:
            return f"{self.group_id}:{self.artifact_id}:{self.version}"
        return f"{self.group_id}:{self.artifact_id}"


@dataclass(frozen=True)
class ArtifactCoordinate:
    group_id: str
    artifact_id: str
    version: str
    scm: Optional[ScmInfo] = None
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    licenses: tuple[str, ...] = ()
    dependencies: tuple[DependencyCoordinate, ...] = ()

    @property
    def project_reference(self) -> tuple[str, str]:
        return (self.group_id, self.artifact_id)

    @property
    def release_reference(self) -> tuple[str, str, str]:
        return (self.group_id, self.artifact_id, self.version)

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True)
class RegistrySearchRecord:
    """Known facts about the binary artifact, folded into catalog entities."""

    sha1: str
    sha256: Optional[str]
    package: str
    name: str
    path: str
    size: int
    version: str
    owner: str
    repo: str
    created: datetime


@dataclass(frozen=True)
class ProjectDraft:
    group_id: str
    artifact_id: str
    repository: Optional[str]
    keywords: tuple[str, ...]
    live_data: bool = True

    @property
    def reference(self) -> tuple[str, str]:
        return (self.group_id, self.artifact_id)


@dataclass(frozen=True)
class ReleaseDraft:
    group_id: str
    artifact_id: str
    version: str
    repository: Optional[str]
    name: Optional[str]
    description: Optional[str]
    target: Optional[str]
    licenses: tuple[str, ...]
    dependencies: tuple[str, ...]
    pom_sha1: Optional[str]
    pom_size_bytes: Optional[int]
    released_at: datetime
    keywords: tuple[str, ...] = ()
    live_data: bool = True

    @property
    def reference(self) -> tuple[str, str, str]:
        return (self.group_id, self.artifact_id, self.version)

    @property
    def project_reference(self) -> tuple[str, str]:
        return (self.group_id, self.artifact_id)


class PublishOutcome(str, Enum):
    INDEXED = "indexed"
    IGNORED = "ignored"
    UNAUTHORIZED = "unauthorized"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class PublishResult:
    outcome: PublishOutcome
    reason: str
    digest: Optional[str] = None
    coordinate: Optional[ArtifactCoordinate] = None
    repository: Optional[RepositoryIdentity] = None
    project_id: Optional[str] = None
    release_id: Optional[str] = None
    message: Optional[str] = None
