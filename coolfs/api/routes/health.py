"""Health check routes."""

from __future__ import annotations

from collections.abc import Sequence

import msgspec
from litestar import Controller, get

from coolfs.api.services.storage import BlobStore
from coolfs.db import DatabaseManager


class HealthResponse(msgspec.Struct, kw_only=True):
    """Health check response."""

    status: str
    database_connected: bool
    blob_store_connected: bool


class HealthController(Controller):
    """Health check endpoints."""

    path = "/health"
    tags: Sequence[str] | None = ["Health"]

    @get("/")
    async def health_check(
        self,
        db_manager: DatabaseManager,
        blob_store: BlobStore,
    ) -> HealthResponse:
        """Check database and blob store connectivity."""
        database_connected = await db_manager.health_check()
        blob_store_connected = await blob_store.health_check()

        return HealthResponse(
            status="healthy" if database_connected and blob_store_connected else "unhealthy",
            database_connected=database_connected,
            blob_store_connected=blob_store_connected,
        )
