"""Database models for stored file metadata.

The file bytes live in R2; this table tracks who owns each file, what it is
called and where it came from, so lookups never have to list the bucket.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import BigInteger, DateTime, Index, String, text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class FileMeta(Base):
    """Metadata for a single stored file."""

    __tablename__ = "file_metas"

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
    )
    company_uuid: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    # Storage location
    storage_key: Mapped[str] = mapped_column(
        String(512),
        nullable=False,
        unique=True,
    )

    # File metadata
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    content_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # FileOrigin value
    origin: Mapped[str] = mapped_column(String(32), nullable=False)
    length: Mapped[int] = mapped_column(BigInteger, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        # Duplicate-import lookups
        Index("ix_file_metas_company_name_created", "company_uuid", "file_name", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<FileMeta {self.id} company={self.company_uuid} key={self.storage_key}>"
