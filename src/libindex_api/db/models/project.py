"""ORM model for catalog projects."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, Index, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from ..base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProjectRecord(Base):
    """One library in the catalog, referenced by group and artifact id."""

    __tablename__ = "catalog_projects"
    __table_args__ = (
        Index("ix_catalog_projects_reference", "group_id", "artifact_id"),
        Index("ix_catalog_projects_repository", "repository"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    group_id: Mapped[str] = mapped_column(String(255), nullable=False)
    artifact_id: Mapped[str] = mapped_column(String(255), nullable=False)
    repository: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    keywords: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    live_data: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
