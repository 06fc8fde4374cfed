"""Storage service DTOs.

Plain metadata travels as msgspec structs; anything holding a byte stream or
a content handle is a dataclass.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import BinaryIO

import msgspec

from coolfs.core.enums import FileOrigin


class FileMetaDataDto(msgspec.Struct, kw_only=True):
    """Ownership and provenance attached to a file on create."""

    company_uuid: str | None = None
    origin: FileOrigin | None = None


@dataclass
class FileStoreDto:
    """Everything the storage service needs to persist a new file."""

    content: BinaryIO
    file_name: str
    content_type: str | None
    meta_data: FileMetaDataDto = field(default_factory=FileMetaDataDto)


class StoredContent:
    """Lazy handle onto the bytes of a stored file.

    Nothing is fetched until ``read`` is awaited. Two handles are equal when
    they refer to the same storage key.
    """

    def __init__(self, storage_key: str, loader: Callable[[str], Awaitable[bytes]]) -> None:
        self._storage_key = storage_key
        self._loader = loader

    @property
    def storage_key(self) -> str:
        return self._storage_key

    async def read(self) -> bytes:
        """Fetch the full file content."""
        return await self._loader(self._storage_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StoredContent):
            return NotImplemented
        return self._storage_key == other._storage_key

    def __hash__(self) -> int:
        return hash(self._storage_key)

    def __repr__(self) -> str:
        return f"<StoredContent {self._storage_key}>"


@dataclass
class FileStoreData:
    """A stored file record as returned by the storage service."""

    uuid: str
    file_name: str
    content_type: str | None
    origin: FileOrigin
    company_uuid: str
    length: int
    created_at: datetime
    storage_key: str
    content: StoredContent
