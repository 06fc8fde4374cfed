"""Run the coolfs file storage API."""

import logging

import uvicorn

from coolfs.core.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the app built by ``create_app`` with uvicorn."""
    settings = get_settings()

    if not settings.r2_configured:
        logger.warning("R2 credentials are not set; uploads and downloads will fail")

    uvicorn.run(
        "coolfs.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
