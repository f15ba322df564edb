"""Idempotent catalog upserts for projects and releases."""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from libindex_api.config.settings import get_settings
from libindex_api.db.models import ProjectRecord, ReleaseRecord
from libindex_api.db.session import run_in_session
from libindex_api.domain import ProjectDraft, ReleaseDraft
from libindex_api.errors import IndexWriteError
from libindex_api.repo.catalog import ProjectRepository, ReleaseRepository
from libindex_api.service.keyed_lock import KeyedLock

LOGGER = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _generate_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class IndexedIds:
    project_id: str
    release_id: str


class IndexWriter:
    """Sole owner of catalog mutation.

    Both upserts are query-then-branch; the store has no uniqueness constraint
    on references, so each sequence runs under a lock keyed by its reference.
    """

    def __init__(self, *, locks: KeyedLock | None = None) -> None:
        self._locks = locks or KeyedLock(warn_size=get_settings().lock_table_warn_size)
        self._projects = ProjectRepository()
        self._releases = ReleaseRepository()

    async def index(self, project: ProjectDraft, release: ReleaseDraft) -> IndexedIds:
        project_id = await self.upsert_project(project)
        release_id = await self.upsert_release(release)
        return IndexedIds(project_id=project_id, release_id=release_id)

    async def upsert_project(self, draft: ProjectDraft) -> str:
        return await self._exclusive(("project", *draft.reference), self._upsert_project, draft)

    async def upsert_release(self, draft: ReleaseDraft) -> str:
        return await self._exclusive(("release", *draft.reference), self._upsert_release, draft)

    async def _exclusive(self, key: tuple[str, ...], func, draft) -> str:
        async with self._locks.hold(key):
            write = asyncio.ensure_future(asyncio.to_thread(self._write, func, draft))
            try:
                return await asyncio.shield(write)
            except asyncio.CancelledError:
                # The thread cannot be interrupted; keep the key until it commits or fails.
                await asyncio.wait({write})
                if not write.cancelled() and write.exception() is not None:
                    LOGGER.warning("Abandoned catalog write for %s failed", key, exc_info=write.exception())
                raise

    @staticmethod
    def _write(func, draft) -> str:
        try:
            return run_in_session(lambda session: func(draft, session))
        except SQLAlchemyError as exc:
            raise IndexWriteError(f"Catalog write failed for {draft.reference}") from exc

    def _upsert_project(self, draft: ProjectDraft, session: Session) -> str:
        now = _utcnow()
        existing = self._projects.get_by_reference(
            group_id=draft.group_id,
            artifact_id=draft.artifact_id,
            session=session,
        )
        if existing is not None:
            self._projects.update(
                existing,
                keywords=list(draft.keywords),
                repository=draft.repository,
                live_data=draft.live_data,
                now=now,
                session=session,
            )
            LOGGER.debug("Updated project %s:%s (%s)", draft.group_id, draft.artifact_id, existing.id)
            return existing.id
        record = self._projects.insert(
            ProjectRecord(
                id=_generate_id(),
                group_id=draft.group_id,
                artifact_id=draft.artifact_id,
                repository=draft.repository,
                keywords=list(draft.keywords),
                live_data=draft.live_data,
                created_at=now,
                updated_at=now,
            ),
            session=session,
        )
        LOGGER.debug("Created project %s:%s (%s)", draft.group_id, draft.artifact_id, record.id)
        return record.id

    def _upsert_release(self, draft: ReleaseDraft, session: Session) -> str:
        now = _utcnow()
        releases = self._releases.list_by_project(
            group_id=draft.group_id,
            artifact_id=draft.artifact_id,
            session=session,
        )
        existing = next((item for item in releases if item.version == draft.version), None)
        if existing is not None:
            self._releases.mark_live(existing, now=now, session=session)
            LOGGER.debug("Refreshed release %s:%s:%s (%s)", *draft.reference, existing.id)
            return existing.id
        record = self._releases.insert(
            ReleaseRecord(
                id=_generate_id(),
                group_id=draft.group_id,
                artifact_id=draft.artifact_id,
                version=draft.version,
                repository=draft.repository,
                name=draft.name,
                description=draft.description,
                target=draft.target,
                keywords=list(draft.keywords),
                licenses=list(draft.licenses),
                dependencies=list(draft.dependencies),
                pom_sha1=draft.pom_sha1,
                pom_size_bytes=draft.pom_size_bytes,
                released_at=draft.released_at,
                live_data=True,
                created_at=now,
                updated_at=now,
            ),
            session=session,
        )
        LOGGER.debug("Created release %s:%s:%s (%s)", *draft.reference, record.id)
        return record.id
