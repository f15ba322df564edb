"""Repositories for catalog project and release records."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from libindex_api.db.models import ProjectRecord, ReleaseRecord


class ProjectRepository:
    def get_by_reference(
        self,
        *,
        group_id: str,
        artifact_id: str,
        session: Session,
    ) -> ProjectRecord | None:
        stmt = (
            select(ProjectRecord)
            .where(
                ProjectRecord.group_id == group_id,
                ProjectRecord.artifact_id == artifact_id,
            )
            .order_by(ProjectRecord.created_at)
        )
        return session.execute(stmt).scalars().first()

    def list_by_references(
        self,
        *,
        references: list[tuple[str, str]],
        session: Session,
    ) -> list[ProjectRecord]:
        if not references:
            return []
        groups = {group_id for group_id, _ in references}
        stmt = select(ProjectRecord).where(ProjectRecord.group_id.in_(groups))
        wanted = set(references)
        return [
            record
            for record in session.execute(stmt).scalars().all()
            if (record.group_id, record.artifact_id) in wanted
        ]

    def list_all(self, *, session: Session) -> list[ProjectRecord]:
        return list(session.execute(select(ProjectRecord)).scalars().all())

    def list_latest(self, *, limit: int, session: Session) -> list[ProjectRecord]:
        stmt = select(ProjectRecord).order_by(ProjectRecord.created_at.desc()).limit(limit)
        return list(session.execute(stmt).scalars().all())

    def count(self, *, session: Session) -> int:
        return int(session.execute(select(func.count()).select_from(ProjectRecord)).scalar_one())

    def insert(self, record: ProjectRecord, *, session: Session) -> ProjectRecord:
        session.add(record)
        session.flush()
        return record

    def update(
        self,
        record: ProjectRecord,
        *,
        keywords: list[str],
        repository: str | None,
        live_data: bool,
        now: datetime,
        session: Session,
    ) -> ProjectRecord:
        record.keywords = keywords
        if repository:
            record.repository = repository
        record.live_data = live_data
        record.updated_at = now
        session.add(record)
        session.flush()
        return record


class ReleaseRepository:
    def list_by_project(
        self,
        *,
        group_id: str,
        artifact_id: str,
        session: Session,
    ) -> list[ReleaseRecord]:
        stmt = (
            select(ReleaseRecord)
            .where(
                ReleaseRecord.group_id == group_id,
                ReleaseRecord.artifact_id == artifact_id,
            )
            .order_by(ReleaseRecord.released_at.desc())
        )
        return list(session.execute(stmt).scalars().all())

    def list_all(self, *, session: Session) -> list[ReleaseRecord]:
        return list(session.execute(select(ReleaseRecord)).scalars().all())

    def list_latest(self, *, limit: int, session: Session) -> list[ReleaseRecord]:
        stmt = select(ReleaseRecord).order_by(ReleaseRecord.released_at.desc()).limit(limit)
        return list(session.execute(stmt).scalars().all())

    def count(self, *, session: Session) -> int:
        return int(session.execute(select(func.count()).select_from(ReleaseRecord)).scalar_one())

    def insert(self, record: ReleaseRecord, *, session: Session) -> ReleaseRecord:
        session.add(record)
        session.flush()
        return record

    def mark_live(self, record: ReleaseRecord, *, now: datetime, session: Session) -> ReleaseRecord:
        record.live_data = True
        record.updated_at = now
        session.add(record)
        session.flush()
        return record
