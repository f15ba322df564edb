"""Create catalog projects and releases."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "catalog_projects",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("group_id", sa.String(length=255), nullable=False),
        sa.Column("artifact_id", sa.String(length=255), nullable=False),
        sa.Column("repository", sa.String(length=255), nullable=True),
        sa.Column("keywords", sa.JSON(), nullable=False),
        sa.Column("live_data", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "ix_catalog_projects_reference",
        "catalog_projects",
        ["group_id", "artifact_id"],
    )
    op.create_index("ix_catalog_projects_repository", "catalog_projects", ["repository"])

    op.create_table(
        "catalog_releases",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("group_id", sa.String(length=255), nullable=False),
        sa.Column("artifact_id", sa.String(length=255), nullable=False),
        sa.Column("version", sa.String(length=128), nullable=False),
        sa.Column("repository", sa.String(length=255), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("target", sa.String(length=64), nullable=True),
        sa.Column("keywords", sa.JSON(), nullable=False),
        sa.Column("licenses", sa.JSON(), nullable=False),
        sa.Column("dependencies", sa.JSON(), nullable=False),
        sa.Column("pom_sha1", sa.String(length=40), nullable=True),
        sa.Column("pom_size_bytes", sa.BigInteger(), nullable=True),
        sa.Column(
            "released_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("live_data", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "ix_catalog_releases_project",
        "catalog_releases",
        ["group_id", "artifact_id"],
    )
    op.create_index("ix_catalog_releases_released_at", "catalog_releases", ["released_at"])


def downgrade() -> None:
    op.drop_index("ix_catalog_releases_released_at", table_name="catalog_releases")
    op.drop_index("ix_catalog_releases_project", table_name="catalog_releases")
    op.drop_table("catalog_releases")
    op.drop_index("ix_catalog_projects_repository", table_name="catalog_projects")
    op.drop_index("ix_catalog_projects_reference", table_name="catalog_projects")
    op.drop_table("catalog_projects")
