"""Read-only catalog queries used by browsing and search front ends."""

from __future__ import annotations

from collections import Counter
from typing import Any

from sqlalchemy.orm import Session

from libindex_api.db.models import ProjectRecord, ReleaseRecord
from libindex_api.db.session import run_in_session
from libindex_api.repo.catalog import ProjectRepository, ReleaseRepository

JVM_TARGET = "jvm"
DEFAULT_LIMIT = 12


def _project_record(record: ProjectRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "groupId": record.group_id,
        "artifactId": record.artifact_id,
        "repository": record.repository,
        "keywords": list(record.keywords or []),
        "liveData": record.live_data,
        "createdAt": record.created_at,
        "updatedAt": record.updated_at,
    }


def _release_record(record: ReleaseRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "groupId": record.group_id,
        "artifactId": record.artifact_id,
        "version": record.version,
        "repository": record.repository,
        "name": record.name,
        "description": record.description,
        "target": record.target,
        "keywords": list(record.keywords or []),
        "licenses": list(record.licenses or []),
        "dependencies": list(record.dependencies or []),
        "pomSha1": record.pom_sha1,
        "pomSizeBytes": record.pom_size_bytes,
        "releasedAt": record.released_at,
        "liveData": record.live_data,
    }


def _dependency_reference(value: str) -> tuple[str, str] | None:
    parts = value.split(":")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None
    return (parts[0], parts[1])


class CatalogQueries:
    def __init__(self) -> None:
        self._projects = ProjectRepository()
        self._releases = ReleaseRepository()

    def find_project_by_reference(self, group_id: str, artifact_id: str) -> dict[str, Any] | None:
        def _find(session: Session) -> dict[str, Any] | None:
            record = self._projects.get_by_reference(
                group_id=group_id,
                artifact_id=artifact_id,
                session=session,
            )
            return _project_record(record) if record else None

        return run_in_session(_find)

    def find_releases_by_project_reference(self, group_id: str, artifact_id: str) -> list[dict[str, Any]]:
        def _find(session: Session) -> list[dict[str, Any]]:
            records = self._releases.list_by_project(
                group_id=group_id,
                artifact_id=artifact_id,
                session=session,
            )
            return [_release_record(record) for record in records]

        return run_in_session(_find)

    def topics(self, limit: int = 50) -> list[dict[str, Any]]:
        def _topics(session: Session) -> list[dict[str, Any]]:
            counts: Counter[str] = Counter()
            for record in self._projects.list_all(session=session):
                counts.update(set(record.keywords or []))
            ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
            return [{"name": name, "count": count} for name, count in ranked[:limit]]

        return run_in_session(_topics)

    def target_platforms(self) -> list[dict[str, Any]]:
        """Number of distinct projects released for each target."""

        def _targets(session: Session) -> list[dict[str, Any]]:
            projects_by_target: dict[str, set[tuple[str, str]]] = {}
            for record in self._releases.list_all(session=session):
                target = record.target or JVM_TARGET
                projects_by_target.setdefault(target, set()).add((record.group_id, record.artifact_id))
            ranked = sorted(
                ((target, len(projects)) for target, projects in projects_by_target.items()),
                key=lambda item: (-item[1], item[0]),
            )
            return [{"name": target, "count": count} for target, count in ranked]

        return run_in_session(_targets)

    def most_depended_upon(self, limit: int = DEFAULT_LIMIT) -> list[dict[str, Any]]:
        def _ranked(session: Session) -> list[dict[str, Any]]:
            dependents: dict[tuple[str, str], set[tuple[str, str]]] = {}
            for release in self._releases.list_all(session=session):
                source = (release.group_id, release.artifact_id)
                for dependency in release.dependencies or []:
                    reference = _dependency_reference(dependency)
                    if reference is None or reference == source:
                        continue
                    dependents.setdefault(reference, set()).add(source)
            known = {
                (record.group_id, record.artifact_id): record
                for record in self._projects.list_by_references(
                    references=list(dependents),
                    session=session,
                )
            }
            ranked = sorted(
                ((reference, len(sources)) for reference, sources in dependents.items() if reference in known),
                key=lambda item: (-item[1], item[0]),
            )
            results = []
            for reference, count in ranked[:limit]:
                payload = _project_record(known[reference])
                payload["dependents"] = count
                results.append(payload)
            return results

        return run_in_session(_ranked)

    def latest_projects(self, limit: int = DEFAULT_LIMIT) -> list[dict[str, Any]]:
        def _latest(session: Session) -> list[dict[str, Any]]:
            return [_project_record(record) for record in self._projects.list_latest(limit=limit, session=session)]

        return run_in_session(_latest)

    def latest_releases(self, limit: int = DEFAULT_LIMIT) -> list[dict[str, Any]]:
        def _latest(session: Session) -> list[dict[str, Any]]:
            return [_release_record(record) for record in self._releases.list_latest(limit=limit, session=session)]

        return run_in_session(_latest)

    def total_projects(self) -> int:
        return run_in_session(lambda session: self._projects.count(session=session))

    def total_releases(self) -> int:
        return run_in_session(lambda session: self._releases.count(session=session))

    def overview(self, limit: int = DEFAULT_LIMIT) -> dict[str, Any]:
        return {
            "topics": self.topics(),
            "targetPlatforms": self.target_platforms(),
            "mostDependedUpon": self.most_depended_upon(limit),
            "latestProjects": self.latest_projects(limit),
            "latestReleases": self.latest_releases(limit),
            "totalProjects": self.total_projects(),
            "totalReleases": self.total_releases(),
        }

