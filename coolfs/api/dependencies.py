"""Dependency injection providers for Litestar."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

from litestar.di import Provide
from sqlalchemy.ext.asyncio import AsyncSession

from coolfs.api.facade import (
    StorageFacade,
    StorageFacadeConversionComponent,
    StorageFacadeValidationComponent,
)
from coolfs.api.services.storage import (
    BlobStore,
    FileStorageService,
    R2BlobStore,
    R2StorageSettings,
    StorageService,
)
from coolfs.core.config import Settings, get_settings
from coolfs.db import DatabaseManager, close_db, get_db_manager, init_db

logger = logging.getLogger(__name__)

# Global singleton instances (created at app startup)
_blob_store: BlobStore | None = None

# Stateless, shared by every request
_conversion = StorageFacadeConversionComponent()
_validation = StorageFacadeValidationComponent()


# -----------------------------------------------------------------------------
# Storage dependencies
# -----------------------------------------------------------------------------


async def get_blob_store() -> BlobStore:
    """Provide blob store instance.

    Raises:
        RuntimeError: If storage not initialized.
    """
    if _blob_store is None:
        raise RuntimeError("Blob store not initialized")
    return _blob_store


async def provide_db_manager() -> DatabaseManager:
    """Provide database manager instance.

    Raises:
        RuntimeError: If database not initialized.
    """
    return get_db_manager()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide database session for request scope.

    Yields:
        Database session that auto-commits on success.
    """
    async with get_db_manager().session() as session:
        yield session


async def get_storage_service(blob_store: BlobStore, session: AsyncSession) -> StorageService:
    """Provide storage service bound to the request's session."""
    return FileStorageService(blob_store=blob_store, session=session)


async def get_storage_facade(
    storage_service: StorageService,
    settings: Settings,
) -> StorageFacade:
    """Provide storage facade.

    Creates a new instance per request around the request-scoped storage service.
    """
    return StorageFacade(
        storage_service=storage_service,
        conversion=_conversion,
        validation=_validation,
        default_max_file_length=settings.max_file_length_bytes,
    )


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------


def provide_settings() -> Settings:
    """Provide settings instance."""
    return get_settings()


# -----------------------------------------------------------------------------
# Lifecycle management
# -----------------------------------------------------------------------------


async def init_services(settings: Settings) -> None:
    """Initialize service singletons.

    Called during application startup.

    Args:
        settings: Application settings.
    """
    global _blob_store

    init_db(settings)

    if settings.r2_configured:
        r2_settings = R2StorageSettings(
            account_id=settings.r2_account_id,
            access_key_id=settings.r2_access_key_id,
            secret_access_key=settings.r2_secret_access_key,
            bucket_name=settings.r2_bucket_name,
        )
        _blob_store = R2BlobStore(r2_settings)
        logger.info(f"R2 blob store initialized for bucket: {settings.r2_bucket_name}")
    else:
        logger.warning("R2 storage not configured - file endpoints will be unavailable")


async def shutdown_services() -> None:
    """Cleanup service resources.

    Called during application shutdown.
    """
    global _blob_store

    if _blob_store is not None:
        await _blob_store.close()
        _blob_store = None
        logger.info("Blob store closed")

    await close_db()
    logger.info("Database connections closed")


# Dependency providers for Litestar
dependencies = {
    "settings": Provide(provide_settings, sync_to_thread=False),
    "db_manager": Provide(provide_db_manager),
    "blob_store": Provide(get_blob_store),
    "session": Provide(get_db_session),
    "storage_service": Provide(get_storage_service),
    "storage_facade": Provide(get_storage_facade),
}
