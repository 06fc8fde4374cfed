"""API services module."""

from .storage import (
    FileStorageService,
    R2BlobStore,
    R2StorageSettings,
    StorageError,
    StorageNotFoundError,
    StorageService,
)

__all__ = [
    "FileStorageService",
    "R2BlobStore",
    "R2StorageSettings",
    "StorageError",
    "StorageNotFoundError",
    "StorageService",
]
