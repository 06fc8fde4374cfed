"""Storage facade - entry point for file upload, lookup and load.

Checks request shape, drives the storage service, runs business-rule
validation and wraps every outcome in a ``ResultResponseModel``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from coolfs.api.schemas.storage import (
    CheckImportAlreadyUploadedResponse,
    FileLoadModel,
    GetFileInfoByUuidListResponse,
    GetFileInfoByUuidResponse,
    LoadFileByUuidResponse,
    ResultResponseModel,
    UploadFileResponse,
)
from coolfs.core.enums import FileOrigin

from .exceptions import InvalidRequestError

if TYPE_CHECKING:
    from coolfs.api.schemas.storage import (
        CheckImportAlreadyUploadedRequest,
        FileUploadModel,
        GetFileInfoByUuidListRequest,
        GetFileInfoByUuidRequest,
        LoadFileByUuidRequest,
        StoredFileInfoModel,
        UploadFileRequest,
    )
    from coolfs.api.services.storage import FileStoreData, StorageService

    from .conversion import StorageFacadeConversionComponent
    from .validation import StorageFacadeValidationComponent

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_LENGTH = 10 * 1024 * 1024  # 10MB


def _require(value: Any, name: str) -> None:
    if value is None:
        raise InvalidRequestError(f"{name} must not be None")


class UploadPhase(str, Enum):
    """State of an upload between create and final outcome."""

    CREATED = "created"
    COMMITTED = "committed"
    COMPENSATED = "compensated"


@dataclass
class PendingUpload:
    """A file that has been stored but not yet accepted."""

    uuid: str
    file_store_data: FileStoreData
    phase: UploadPhase = UploadPhase.CREATED


class StorageFacade:
    """Orchestrates the storage service and facade components.

    Stateless between calls; build one per request around a request-scoped
    storage service.
    """

    def __init__(
        self,
        storage_service: StorageService,
        conversion: StorageFacadeConversionComponent,
        validation: StorageFacadeValidationComponent,
        *,
        default_max_file_length: int = DEFAULT_MAX_FILE_LENGTH,
    ) -> None:
        """Initialize storage facade.

        Args:
            storage_service: Persistence for stored files.
            conversion: Model/DTO conversion component.
            validation: Business-rule validation component.
            default_max_file_length: Upload limit used when a request sets none.
        """
        self._storage_service = storage_service
        self._conversion = conversion
        self._validation = validation
        self._default_max_file_length = default_max_file_length

    # -------------------------------------------------------------------------
    # Upload
    # -------------------------------------------------------------------------

    async def upload(
        self,
        request: UploadFileRequest | None,
    ) -> ResultResponseModel[UploadFileResponse]:
        """Store a file, then accept or roll it back.

        The file is created first and validated as stored. If validation
        reports errors the file is deleted again and only the errors are
        returned, so a rejected upload never leaves a record behind.

        Args:
            request: Requesting company, upload model and optional length limit.

        Returns:
            Envelope with the stored file's info, or with validation errors.

        Raises:
            InvalidRequestError: If a required field is missing.
        """
        _require(request, "request")
        _require(request.company_uuid, "company_uuid")
        upload_model = request.upload_model
        _require(upload_model, "upload_model")
        _require(upload_model.content, "upload_model.content")
        _require(upload_model.file_name, "upload_model.file_name")
        _require(upload_model.origin, "upload_model.origin")

        pending = await self._create_tentative(request.company_uuid, upload_model)

        max_file_length = (
            request.max_file_length
            if request.max_file_length is not None
            else self._default_max_file_length
        )
        errors = self._validation.validate_file_max_length(pending.file_store_data, max_file_length)
        if errors:
            await self._compensate(pending)
            return ResultResponseModel.failed(errors)

        file_info = self._commit(pending)
        return ResultResponseModel.of(UploadFileResponse(file_info=file_info))

    async def _create_tentative(
        self,
        company_uuid: str,
        upload_model: FileUploadModel,
    ) -> PendingUpload:
        dto = self._conversion.build_file_store_dto_from_upload_file_model(upload_model)
        dto.meta_data.company_uuid = company_uuid
        uuid = await self._storage_service.create(dto)
        file_store_data = await self._storage_service.get_by_meta_uuid(uuid)
        return PendingUpload(uuid=uuid, file_store_data=file_store_data)

    async def _compensate(self, pending: PendingUpload) -> None:
        await self._storage_service.delete_by_meta_uuid(pending.uuid)
        pending.phase = UploadPhase.COMPENSATED
        logger.warning(f"Upload {pending.uuid} rejected by validation, stored file removed")

    def _commit(self, pending: PendingUpload) -> StoredFileInfoModel:
        file_info = self._conversion.build_stored_file_info_model_from_file_store_data(
            pending.file_store_data
        )
        pending.phase = UploadPhase.COMMITTED
        logger.info(f"Upload {pending.uuid} accepted")
        return file_info

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    async def get_file_info_by_uuid(
        self,
        request: GetFileInfoByUuidRequest | None,
    ) -> ResultResponseModel[GetFileInfoByUuidResponse]:
        """Get the info of one stored file.

        Raises:
            InvalidRequestError: If the request or its uuid is missing.
            StorageNotFoundError: If no such file exists.
        """
        _require(request, "request")
        _require(request.uuid, "uuid")

        file_store_data = await self._storage_service.get_by_meta_uuid(request.uuid)
        file_info = self._conversion.build_stored_file_info_model_from_file_store_data(
            file_store_data
        )
        return ResultResponseModel.of(GetFileInfoByUuidResponse(file_info=file_info))

    async def get_file_info_by_uuids(
        self,
        request: GetFileInfoByUuidListRequest | None,
    ) -> ResultResponseModel[GetFileInfoByUuidListResponse]:
        """Get the info of several stored files in one storage call.

        Raises:
            InvalidRequestError: If the request, its list, or any list element is missing.
        """
        _require(request, "request")
        _require(request.uuids, "uuids")
        if any(uuid is None for uuid in request.uuids):
            raise InvalidRequestError("uuids must not contain None")

        file_store_data_list = await self._storage_service.get_by_meta_uuids(request.uuids)
        files_info = self._conversion.build_stored_file_info_models_from_file_store_data_list(
            file_store_data_list
        )
        return ResultResponseModel.of(GetFileInfoByUuidListResponse(files_info=files_info))

    async def load_file_by_uuid(
        self,
        request: LoadFileByUuidRequest | None,
    ) -> ResultResponseModel[LoadFileByUuidResponse]:
        """Get a handle on a stored file's content.

        Raises:
            InvalidRequestError: If the request or its uuid is missing.
            StorageNotFoundError: If no such file exists.
        """
        _require(request, "request")
        _require(request.uuid, "uuid")

        file_store_data = await self._storage_service.get_by_meta_uuid(request.uuid)
        load_model = FileLoadModel(
            content=file_store_data.content,
            file_name=file_store_data.file_name,
            content_type=file_store_data.content_type,
        )
        return ResultResponseModel.of(LoadFileByUuidResponse(load_file_model=load_model))

    async def check_import_already_uploaded(
        self,
        request: CheckImportAlreadyUploadedRequest | None,
    ) -> ResultResponseModel[CheckImportAlreadyUploadedResponse]:
        """List CSV imports a company already uploaded under a name.

        An empty list is a normal result, not an error.

        Raises:
            InvalidRequestError: If the request or any of its fields is missing.
        """
        _require(request, "request")
        _require(request.company_uuid, "company_uuid")
        _require(request.file_name, "file_name")
        _require(request.created_after, "created_after")

        find_imports = (
            self._storage_service.get_by_company_uuid_and_file_name_and_created_after_and_origin
        )
        matches = await find_imports(
            request.company_uuid,
            request.file_name,
            request.created_after,
            FileOrigin.IMPORT_CSV,
        )
        uuid_list = [file_store_data.uuid for file_store_data in matches]
        return ResultResponseModel.of(CheckImportAlreadyUploadedResponse(uuid_list=uuid_list))
