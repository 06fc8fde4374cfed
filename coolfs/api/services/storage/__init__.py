"""Storage service module.

File bytes go to Cloudflare R2, file metadata to PostgreSQL.
"""

from .base import BlobStore, StorageService
from .exceptions import (
    BlobStoreError,
    StorageDeleteError,
    StorageDownloadError,
    StorageError,
    StorageNotFoundError,
    StorageUploadError,
    StorageValidationError,
)
from .r2 import R2BlobStore, R2StorageSettings
from .schemas import (
    FileMetaDataDto,
    FileStoreData,
    FileStoreDto,
    StoredContent,
)
from .service import FileStorageService

__all__ = [
    # Protocols
    "BlobStore",
    "StorageService",
    # Implementations
    "FileStorageService",
    "R2BlobStore",
    "R2StorageSettings",
    # Schemas
    "FileMetaDataDto",
    "FileStoreData",
    "FileStoreDto",
    "StoredContent",
    # Exceptions
    "BlobStoreError",
    "StorageDeleteError",
    "StorageDownloadError",
    "StorageError",
    "StorageNotFoundError",
    "StorageUploadError",
    "StorageValidationError",
]
