"""Storage facade module."""

from .conversion import StorageFacadeConversionComponent
from .exceptions import InvalidRequestError, StorageFacadeError
from .storage import (
    DEFAULT_MAX_FILE_LENGTH,
    PendingUpload,
    StorageFacade,
    UploadPhase,
)
from .validation import StorageFacadeValidationComponent

__all__ = [
    "DEFAULT_MAX_FILE_LENGTH",
    "InvalidRequestError",
    "PendingUpload",
    "StorageFacade",
    "StorageFacadeConversionComponent",
    "StorageFacadeError",
    "StorageFacadeValidationComponent",
    "UploadPhase",
]
