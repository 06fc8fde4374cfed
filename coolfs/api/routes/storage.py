"""Storage API routes exposing the storage facade over HTTP."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Annotated, Any

import msgspec
from litestar import Controller, Request, Response, get, post
from litestar.datastructures import UploadFile
from litestar.enums import RequestEncodingType
from litestar.params import Body, Parameter
from litestar.status_codes import (
    HTTP_200_OK,
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from coolfs.api.facade import InvalidRequestError, StorageFacade
from coolfs.api.schemas.storage import (
    CheckImportAlreadyUploadedRequest,
    FileOriginModel,
    FileUploadModel,
    GetFileInfoByUuidListRequest,
    GetFileInfoByUuidRequest,
    LoadFileByUuidRequest,
    StoredFileInfoModel,
    UploadFileRequest,
)
from coolfs.api.services.storage import StorageError, StorageNotFoundError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Response schemas
# -----------------------------------------------------------------------------


class FileInfoListResponse(msgspec.Struct, kw_only=True):
    """Response for a batch file info lookup."""

    items: list[StoredFileInfoModel]
    count: int


class ImportCheckResponse(msgspec.Struct, kw_only=True):
    """Response for a duplicate import check."""

    uuids: list[str]
    already_uploaded: bool


class ErrorResponse(msgspec.Struct, kw_only=True):
    """Error response."""

    error: str
    detail: str | None = None
    errors: dict[str, Any] | None = None


def _invalid_request(e: InvalidRequestError) -> Response[ErrorResponse]:
    return Response(
        content=ErrorResponse(error="Invalid request", detail=str(e)),
        status_code=HTTP_400_BAD_REQUEST,
    )


def _not_found(e: StorageNotFoundError) -> Response[ErrorResponse]:
    return Response(
        content=ErrorResponse(error="File not found", detail=str(e)),
        status_code=HTTP_404_NOT_FOUND,
    )


def storage_error_handler(request: Request, exc: StorageError) -> Response[ErrorResponse]:
    """Map backend failures that escape a handler to 503."""
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return Response(
        content=ErrorResponse(error="Storage unavailable", detail=str(exc)),
        status_code=HTTP_503_SERVICE_UNAVAILABLE,
    )


# -----------------------------------------------------------------------------
# Controller
# -----------------------------------------------------------------------------


class StorageController(Controller):
    """File storage endpoints.

    Thin HTTP mapping over ``StorageFacade``; business-rule errors from the
    result envelope are returned as 400 with the error map.
    """

    path = "/api/v1/files"
    tags: Sequence[str] | None = ["Files"]

    # Size is enforced by the facade against the effective limit, not by the server
    @post("/upload", request_max_body_size=None)
    async def upload_file(
        self,
        storage_facade: StorageFacade,
        data: Annotated[UploadFile, Body(media_type=RequestEncodingType.MULTI_PART)],
        company_uuid: Annotated[
            str,
            Parameter(description="Owning company (will come from auth in production)"),
        ],
        origin: Annotated[FileOriginModel, Parameter(description="Where the file came from")],
        max_file_length: Annotated[
            int | None,
            Parameter(ge=1, description="Override of the default upload limit in bytes"),
        ] = None,
    ) -> Response[StoredFileInfoModel | ErrorResponse]:
        """Upload a file.

        The file is stored and then checked against the length limit; a file
        over the limit is removed again and the validation errors returned.
        """
        request = UploadFileRequest(
            company_uuid=company_uuid,
            upload_model=FileUploadModel(
                content=data.file,
                file_name=data.filename,
                content_type=data.content_type,
                origin=origin,
            ),
            max_file_length=max_file_length,
        )

        try:
            result = await storage_facade.upload(request)
        except InvalidRequestError as e:
            return _invalid_request(e)
        finally:
            await data.close()

        if result.has_errors():
            logger.warning(f"Upload of {data.filename} rejected: {list(result.errors)}")
            return Response(
                content=ErrorResponse(
                    error="Validation failed",
                    errors={error.value: value for error, value in result.errors.items()},
                ),
                status_code=HTTP_400_BAD_REQUEST,
            )

        return Response(content=result.response.file_info, status_code=HTTP_201_CREATED)

    @get("/")
    async def get_files_info(
        self,
        storage_facade: StorageFacade,
        uuids: Annotated[list[str], Parameter(description="File IDs to look up")],
    ) -> Response[FileInfoListResponse | ErrorResponse]:
        """Get info for several files.

        Unknown IDs are left out of the result.
        """
        try:
            result = await storage_facade.get_file_info_by_uuids(
                GetFileInfoByUuidListRequest(uuids=list(uuids))
            )
        except InvalidRequestError as e:
            return _invalid_request(e)

        items = result.response.files_info
        return Response(
            content=FileInfoListResponse(items=items, count=len(items)),
            status_code=HTTP_200_OK,
        )

    @get("/imports/check")
    async def check_import(
        self,
        storage_facade: StorageFacade,
        company_uuid: str,
        file_name: str,
        created_after: Annotated[
            datetime,
            Parameter(description="Only consider imports created at or after this time"),
        ],
    ) -> Response[ImportCheckResponse | ErrorResponse]:
        """Check whether a CSV import was already uploaded."""
        try:
            result = await storage_facade.check_import_already_uploaded(
                CheckImportAlreadyUploadedRequest(
                    company_uuid=company_uuid,
                    file_name=file_name,
                    created_after=created_after,
                )
            )
        except InvalidRequestError as e:
            return _invalid_request(e)

        uuids = result.response.uuid_list
        return Response(
            content=ImportCheckResponse(uuids=uuids, already_uploaded=bool(uuids)),
            status_code=HTTP_200_OK,
        )

    @get("/{file_uuid:str}")
    async def get_file_info(
        self,
        storage_facade: StorageFacade,
        file_uuid: str,
    ) -> Response[StoredFileInfoModel | ErrorResponse]:
        """Get info for one file."""
        try:
            result = await storage_facade.get_file_info_by_uuid(GetFileInfoByUuidRequest(file_uuid))
        except StorageNotFoundError as e:
            return _not_found(e)

        return Response(content=result.response.file_info, status_code=HTTP_200_OK)

    @get("/{file_uuid:str}/download")
    async def download_file(
        self,
        storage_facade: StorageFacade,
        file_uuid: str,
    ) -> Response[bytes | ErrorResponse]:
        """Download a file's content with its stored content type."""
        try:
            result = await storage_facade.load_file_by_uuid(LoadFileByUuidRequest(file_uuid))
            load_model = result.response.load_file_model
            content = await load_model.content.read()
        except StorageNotFoundError as e:
            return _not_found(e)

        return Response(
            content=content,
            status_code=HTTP_200_OK,
            media_type=load_model.content_type or "application/octet-stream",
            headers={"Content-Disposition": f'attachment; filename="{load_model.file_name}"'},
        )
