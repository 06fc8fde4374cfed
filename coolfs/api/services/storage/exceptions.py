"""Errors raised by blob stores and storage services.

Anything the HTTP layer does not map to 400/404 surfaces as a 503.
"""

from __future__ import annotations


class StorageError(Exception):
    """Base exception for file storage.

    Attributes:
        cause: Backend exception that triggered this one, if any.
        storage_key: Blob key the failing operation addressed, if any.
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        *,
        storage_key: str | None = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.storage_key = storage_key


class BlobStoreError(StorageError):
    """A blob store call failed on the backend side."""


class StorageUploadError(BlobStoreError):
    """Writing file bytes to the blob store failed."""


class StorageDownloadError(BlobStoreError):
    """Reading file bytes from the blob store failed."""


class StorageDeleteError(BlobStoreError):
    """Removing file bytes from the blob store failed."""


class StorageNotFoundError(StorageError):
    """No file meta row or blob matches the identifier."""


class StorageValidationError(StorageError):
    """A file DTO is missing a field required to persist it."""

    def __init__(self, field: str) -> None:
        super().__init__(f"File has no {field}")
        self.field = field
