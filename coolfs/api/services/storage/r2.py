"""Cloudflare R2 blob store implementation."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import aioboto3
from botocore.config import Config
from botocore.exceptions import ClientError

from .exceptions import (
    StorageDeleteError,
    StorageDownloadError,
    StorageNotFoundError,
    StorageUploadError,
)

if TYPE_CHECKING:
    from types_aiobotocore_s3 import S3Client

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = ("NoSuchKey", "404")


class R2StorageSettings:
    """R2-specific configuration."""

    def __init__(
        self,
        *,
        account_id: str,
        access_key_id: str,
        secret_access_key: str,
        bucket_name: str,
    ) -> None:
        self.account_id = account_id
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.bucket_name = bucket_name

    @property
    def endpoint_url(self) -> str:
        """Cloudflare R2 endpoint URL."""
        return f"https://{self.account_id}.r2.cloudflarestorage.com"


class R2BlobStore:
    """Object storage for file bytes on Cloudflare R2.

    Speaks the S3 API through aioboto3; a client is opened per operation.
    """

    def __init__(self, settings: R2StorageSettings) -> None:
        """Initialize R2 blob store.

        Args:
            settings: R2 configuration settings.
        """
        self._settings = settings
        self._session = aioboto3.Session()
        self._client_config = Config(
            signature_version="s3v4",
            retries={"max_attempts": 3, "mode": "adaptive"},
            connect_timeout=10,
            read_timeout=30,
        )

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[S3Client]:
        """Get S3 client with context management."""
        async with self._session.client(  # type: ignore[reportGeneralTypeIssues]
            "s3",
            endpoint_url=self._settings.endpoint_url,
            aws_access_key_id=self._settings.access_key_id,
            aws_secret_access_key=self._settings.secret_access_key,
            config=self._client_config,
        ) as client:
            yield client

    async def put(
        self,
        storage_key: str,
        data: bytes,
        *,
        content_type: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> None:
        """Write an object to R2."""
        try:
            async with self._get_client() as client:
                await client.put_object(
                    Bucket=self._settings.bucket_name,
                    Key=storage_key,
                    Body=data,
                    ContentType=content_type or "application/octet-stream",
                    Metadata=metadata or {},
                )
            logger.debug(f"Wrote {len(data)} bytes to R2: {storage_key}")

        except ClientError as e:
            logger.error(f"R2 upload failed for {storage_key}: {e}")
            raise StorageUploadError(
                f"Failed to upload file: {e.response['Error']['Message']}",
                cause=e,
                storage_key=storage_key,
            ) from e

    async def get(self, storage_key: str) -> bytes:
        """Read an object from R2."""
        try:
            async with self._get_client() as client:
                response = await client.get_object(
                    Bucket=self._settings.bucket_name,
                    Key=storage_key,
                )
                data = await response["Body"].read()
                logger.debug(f"Downloaded {len(data)} bytes from R2: {storage_key}")
                return data

        except ClientError as e:
            if e.response["Error"]["Code"] in _NOT_FOUND_CODES:
                raise StorageNotFoundError(
                    f"File not found: {storage_key}", storage_key=storage_key
                ) from e
            logger.error(f"R2 download failed for {storage_key}: {e}")
            raise StorageDownloadError(
                f"Failed to download file: {e.response['Error']['Message']}",
                cause=e,
                storage_key=storage_key,
            ) from e

    async def delete(self, storage_key: str) -> bool:
        """Delete an object from R2."""
        try:
            async with self._get_client() as client:
                try:
                    await client.head_object(
                        Bucket=self._settings.bucket_name,
                        Key=storage_key,
                    )
                except ClientError as e:
                    if e.response["Error"]["Code"] in _NOT_FOUND_CODES:
                        return False
                    raise

                await client.delete_object(
                    Bucket=self._settings.bucket_name,
                    Key=storage_key,
                )
                logger.info(f"Deleted object from R2: {storage_key}")
                return True

        except ClientError as e:
            logger.error(f"R2 delete failed for {storage_key}: {e}")
            raise StorageDeleteError(
                f"Failed to delete file: {e.response['Error']['Message']}",
                cause=e,
                storage_key=storage_key,
            ) from e

    async def health_check(self) -> bool:
        """Check if the R2 bucket is accessible."""
        try:
            async with self._get_client() as client:
                await client.head_bucket(Bucket=self._settings.bucket_name)
                return True
        except Exception as e:
            logger.warning(f"R2 health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close any open connections.

        aioboto3 manages connections per client context, so there is nothing
        to release here.
        """
        pass
