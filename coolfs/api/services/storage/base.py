"""Storage protocol definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from coolfs.core.enums import FileOrigin

    from .schemas import FileStoreData, FileStoreDto


@runtime_checkable
class BlobStore(Protocol):
    """Protocol for object storage backends holding raw file bytes."""

    async def put(
        self,
        storage_key: str,
        data: bytes,
        *,
        content_type: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> None:
        """Write an object.

        Raises:
            StorageUploadError: If the write fails.
        """
        ...

    async def get(self, storage_key: str) -> bytes:
        """Read an object.

        Raises:
            StorageNotFoundError: If the object doesn't exist.
            StorageDownloadError: If the read fails.
        """
        ...

    async def delete(self, storage_key: str) -> bool:
        """Delete an object.

        Returns:
            True if the object was deleted, False if it didn't exist.

        Raises:
            StorageDeleteError: If deletion fails.
        """
        ...

    async def health_check(self) -> bool:
        """Check if the backend is reachable."""
        ...

    async def close(self) -> None:
        """Close any open connections."""
        ...


@runtime_checkable
class StorageService(Protocol):
    """Persistence collaborator of the storage facade.

    Owns stored file records: creating them from a DTO, looking them up and
    deleting them. Not-found handling is the implementation's concern.
    """

    async def create(self, dto: FileStoreDto) -> str:
        """Persist a new file.

        Args:
            dto: Content, name, type and metadata of the file.

        Returns:
            Generated identifier of the stored file.
        """
        ...

    async def get_by_meta_uuid(self, uuid: str) -> FileStoreData:
        """Get one stored file.

        Raises:
            StorageNotFoundError: If no file has this identifier.
        """
        ...

    async def get_by_meta_uuids(self, uuids: Sequence[str]) -> list[FileStoreData]:
        """Get several stored files in one call."""
        ...

    async def delete_by_meta_uuid(self, uuid: str) -> bool:
        """Delete a stored file and its content.

        Returns:
            True if deleted, False if it didn't exist.
        """
        ...

    async def get_by_company_uuid_and_file_name_and_created_after_and_origin(
        self,
        company_uuid: str,
        file_name: str,
        created_after: datetime,
        origin: FileOrigin,
    ) -> list[FileStoreData]:
        """Find files a company stored under a name and origin since a point in time."""
        ...
