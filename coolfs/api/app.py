"""Litestar application factory and configuration."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from litestar import Litestar
from litestar.datastructures import UploadFile
from litestar.logging import LoggingConfig
from litestar.openapi import OpenAPIConfig
from litestar.openapi.spec import Contact, Server

from coolfs.api.dependencies import dependencies, init_services, shutdown_services
from coolfs.api.routes import HealthController, StorageController, storage_error_handler
from coolfs.api.services.storage import StorageError
from coolfs.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: Litestar) -> AsyncGenerator[None, None]:  # noqa: ARG001
    """Application lifespan manager.

    Initializes services on startup and cleans up on shutdown.
    """
    settings = get_settings()

    logger.info(f"Starting coolfs, storing files in bucket {settings.r2_bucket_name}")

    await init_services(settings)

    try:
        yield
    finally:
        logger.info("Shutting down coolfs")
        await shutdown_services()


def create_app() -> Litestar:
    """Create and configure Litestar application.

    Returns:
        Configured Litestar application instance.
    """
    settings = get_settings()

    logging_config = LoggingConfig(
        root={
            "level": "DEBUG" if settings.debug else "INFO",
            "handlers": ["console"],
        },
        formatters={
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        handlers={
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        loggers={
            "coolfs": {
                "level": "DEBUG" if settings.debug else "INFO",
                "propagate": True,
            },
            "botocore": {
                "level": "WARNING",
                "propagate": False,
            },
            "aiobotocore": {
                "level": "WARNING",
                "propagate": False,
            },
        },
    )

    openapi_config = OpenAPIConfig(
        title="coolfs File Storage API",
        version="0.1.0",
        description="Upload, look up and load stored files",
        contact=Contact(name="API Support"),
        servers=[
            Server(
                url=f"http://{settings.api_host}:{settings.api_port}",
                description="Local development server",
            ),
        ],
        path="/docs",
    )

    return Litestar(
        route_handlers=[
            HealthController,
            StorageController,
        ],
        dependencies=dependencies,
        exception_handlers={StorageError: storage_error_handler},
        lifespan=[lifespan],
        logging_config=logging_config,
        openapi_config=openapi_config,
        debug=settings.debug,
        signature_types=[UploadFile],
    )

