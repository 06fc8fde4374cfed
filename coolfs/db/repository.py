"""Repository for file metadata database operations."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coolfs.core.enums import FileOrigin
from coolfs.db.models import FileMeta

if TYPE_CHECKING:
    from collections.abc import Sequence


class FileMetaRepository:
    """Repository for file metadata.

    All methods are async and use the provided session; committing is left
    to the caller.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self._session = session

    async def create_file_meta(
        self,
        *,
        id: UUID,
        company_uuid: str,
        storage_key: str,
        file_name: str,
        content_type: str | None,
        origin: FileOrigin,
        length: int,
    ) -> FileMeta:
        """Create a new file metadata record.

        Args:
            id: Unique file ID (also part of the storage key).
            company_uuid: Owning company.
            storage_key: Full R2 storage key.
            file_name: Original file name.
            content_type: MIME type, if known.
            origin: Where the file came from.
            length: File size in bytes.

        Returns:
            Created FileMeta instance.
        """
        meta = FileMeta(
            id=id,
            company_uuid=company_uuid,
            storage_key=storage_key,
            file_name=file_name,
            content_type=content_type,
            origin=origin.value,
            length=length,
            # Set explicitly so the instance is usable without a refresh
            created_at=datetime.now(timezone.utc),
        )
        self._session.add(meta)
        await self._session.flush()
        return meta

    async def get_file_meta(self, file_id: UUID) -> FileMeta | None:
        """Get file metadata by ID.

        Args:
            file_id: File ID to look up.

        Returns:
            FileMeta if found, None otherwise.
        """
        return await self._session.get(FileMeta, file_id)

    async def get_file_metas(self, file_ids: Sequence[UUID]) -> Sequence[FileMeta]:
        """Get file metadata for several IDs in one query.

        Args:
            file_ids: File IDs to look up.

        Returns:
            Matching FileMeta instances, in no particular order.
        """
        if not file_ids:
            return []

        result = await self._session.execute(select(FileMeta).where(FileMeta.id.in_(file_ids)))
        return result.scalars().all()

    async def find_file_metas(
        self,
        *,
        company_uuid: str,
        file_name: str,
        created_after: datetime,
        origin: FileOrigin,
    ) -> Sequence[FileMeta]:
        """Find files a company stored under a name since a point in time.

        Args:
            company_uuid: Owning company.
            file_name: Exact file name.
            created_after: Inclusive lower bound on creation time.
            origin: Required origin.

        Returns:
            Matching FileMeta instances, oldest first.
        """
        result = await self._session.execute(
            select(FileMeta)
            .where(
                FileMeta.company_uuid == company_uuid,
                FileMeta.file_name == file_name,
                FileMeta.origin == origin.value,
                FileMeta.created_at >= created_after,
            )
            .order_by(FileMeta.created_at)
        )
        return result.scalars().all()

    async def delete_file_meta(self, file_id: UUID) -> bool:
        """Delete a file metadata record.

        Args:
            file_id: File ID to delete.

        Returns:
            True if deleted, False if not found.
        """
        meta = await self._session.get(FileMeta, file_id)
        if meta is None:
            return False

        await self._session.delete(meta)
        # Flush to ensure the delete is issued; commit is handled by caller.
        await self._session.flush()
        return True
