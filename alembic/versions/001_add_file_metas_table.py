"""Add file metadata table.

Revision ID: 001_add_file_metas_table
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_add_file_metas_table"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create file_metas table."""
    op.create_table(
        "file_metas",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("company_uuid", sa.String(64), nullable=False),
        sa.Column("storage_key", sa.String(512), nullable=False),
        sa.Column("file_name", sa.String(255), nullable=False),
        sa.Column("content_type", sa.String(100), nullable=True),
        sa.Column("origin", sa.String(32), nullable=False),
        sa.Column("length", sa.BigInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("storage_key"),
    )
    op.create_index("ix_file_metas_company_uuid", "file_metas", ["company_uuid"])
    op.create_index(
        "ix_file_metas_company_name_created",
        "file_metas",
        ["company_uuid", "file_name", "created_at"],
    )


def downgrade() -> None:
    """Drop file_metas table."""
    op.drop_index("ix_file_metas_company_name_created", table_name="file_metas")
    op.drop_index("ix_file_metas_company_uuid", table_name="file_metas")
    op.drop_table("file_metas")
