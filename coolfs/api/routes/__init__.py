"""API routes module."""

from .health import HealthController
from .storage import StorageController, storage_error_handler

__all__ = [
    "HealthController",
    "StorageController",
    "storage_error_handler",
]
