"""Default storage service - file bytes in a blob store, metadata in PostgreSQL."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from coolfs.core.enums import FileOrigin
from coolfs.db.repository import FileMetaRepository

from .exceptions import StorageNotFoundError, StorageValidationError
from .schemas import FileStoreData, StoredContent

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from sqlalchemy.ext.asyncio import AsyncSession

    from coolfs.db.models import FileMeta

    from .base import BlobStore
    from .schemas import FileStoreDto

logger = logging.getLogger(__name__)


def _parse_uuid(value: str) -> UUID | None:
    try:
        return UUID(value)
    except (TypeError, ValueError):
        return None


class FileStorageService:
    """Stores files across a blob store and the metadata table.

    Content goes to the blob store first; if the metadata row can't be
    written the blob is removed again so no unreferenced object is left.
    """

    def __init__(self, blob_store: BlobStore, session: AsyncSession) -> None:
        """Initialize file storage service.

        Args:
            blob_store: Backend holding file bytes.
            session: Database session for metadata operations.
        """
        self._blob_store = blob_store
        self._repo = FileMetaRepository(session)

    @staticmethod
    def build_storage_key(*, company_uuid: str, file_id: UUID) -> str:
        """Build the blob key for a file: companies/{company_uuid}/files/{file_id}."""
        return f"companies/{company_uuid}/files/{file_id}"

    async def create(self, dto: FileStoreDto) -> str:
        """Persist a new file and return its identifier."""
        company_uuid = dto.meta_data.company_uuid
        origin = dto.meta_data.origin
        if company_uuid is None:
            raise StorageValidationError("company_uuid")
        if origin is None:
            raise StorageValidationError("origin")

        data = dto.content.read()
        file_id = uuid4()
        storage_key = self.build_storage_key(company_uuid=company_uuid, file_id=file_id)

        await self._blob_store.put(
            storage_key,
            data,
            content_type=dto.content_type,
            metadata={"company-uuid": company_uuid, "origin": origin.value},
        )

        try:
            await self._repo.create_file_meta(
                id=file_id,
                company_uuid=company_uuid,
                storage_key=storage_key,
                file_name=dto.file_name,
                content_type=dto.content_type,
                origin=origin,
                length=len(data),
            )
        except Exception as e:
            logger.error(f"Metadata insert failed for {storage_key}, removing blob: {e}")
            await self._blob_store.delete(storage_key)
            raise

        logger.info(
            f"Stored file {file_id} for company {company_uuid}: "
            f"{dto.file_name} ({len(data)} bytes)"
        )
        return str(file_id)

    async def get_by_meta_uuid(self, uuid: str) -> FileStoreData:
        file_id = _parse_uuid(uuid)
        meta = await self._repo.get_file_meta(file_id) if file_id is not None else None
        if meta is None:
            raise StorageNotFoundError(f"File not found: {uuid}")
        return self._to_file_store_data(meta)

    async def get_by_meta_uuids(self, uuids: Sequence[str]) -> list[FileStoreData]:
        """Get several files; unknown identifiers are skipped, request order is kept."""
        file_ids = [file_id for file_id in map(_parse_uuid, uuids) if file_id is not None]
        metas = await self._repo.get_file_metas(file_ids)
        by_id = {meta.id: meta for meta in metas}
        return [
            self._to_file_store_data(by_id[file_id]) for file_id in file_ids if file_id in by_id
        ]

    async def delete_by_meta_uuid(self, uuid: str) -> bool:
        file_id = _parse_uuid(uuid)
        meta = await self._repo.get_file_meta(file_id) if file_id is not None else None
        if meta is None:
            return False

        # Row goes first: a failing blob delete rolls the session back with it
        await self._repo.delete_file_meta(meta.id)
        await self._blob_store.delete(meta.storage_key)
        logger.info(f"Deleted file {uuid}")
        return True

    async def get_by_company_uuid_and_file_name_and_created_after_and_origin(
        self,
        company_uuid: str,
        file_name: str,
        created_after: datetime,
        origin: FileOrigin,
    ) -> list[FileStoreData]:
        metas = await self._repo.find_file_metas(
            company_uuid=company_uuid,
            file_name=file_name,
            created_after=created_after,
            origin=origin,
        )
        return [self._to_file_store_data(meta) for meta in metas]

    def _to_file_store_data(self, meta: FileMeta) -> FileStoreData:
        return FileStoreData(
            uuid=str(meta.id),
            file_name=meta.file_name,
            content_type=meta.content_type,
            origin=FileOrigin(meta.origin),
            company_uuid=meta.company_uuid,
            length=meta.length,
            created_at=meta.created_at,
            storage_key=meta.storage_key,
            content=StoredContent(meta.storage_key, self._blob_store.get),
        )
