"""Conversion between facade models and storage service DTOs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from coolfs.api.schemas.storage import FileOriginModel, StoredFileInfoModel
from coolfs.api.services.storage import FileMetaDataDto, FileStoreDto
from coolfs.core.enums import FileOrigin

if TYPE_CHECKING:
    from collections.abc import Iterable

    from coolfs.api.schemas.storage import FileUploadModel
    from coolfs.api.services.storage import FileStoreData


class StorageFacadeConversionComponent:
    """Maps upload models to store DTOs and stored records to view models."""

    def build_file_store_dto_from_upload_file_model(
        self,
        upload_model: FileUploadModel,
    ) -> FileStoreDto:
        """Build the persistence DTO for an upload.

        The owning company is left unset; the facade stamps it from the request.
        """
        origin = FileOrigin[upload_model.origin.name] if upload_model.origin is not None else None
        return FileStoreDto(
            content=upload_model.content,
            file_name=upload_model.file_name,
            content_type=upload_model.content_type,
            meta_data=FileMetaDataDto(origin=origin),
        )

    def build_stored_file_info_model_from_file_store_data(
        self,
        file_store_data: FileStoreData,
    ) -> StoredFileInfoModel:
        return StoredFileInfoModel(
            uuid=file_store_data.uuid,
            file_name=file_store_data.file_name,
            content_type=file_store_data.content_type,
            origin=FileOriginModel[file_store_data.origin.name],
            company_uuid=file_store_data.company_uuid,
            length=file_store_data.length,
            created=file_store_data.created_at,
        )

    def build_stored_file_info_models_from_file_store_data_list(
        self,
        file_store_data_list: Iterable[FileStoreData],
    ) -> list[StoredFileInfoModel]:
        return [
            self.build_stored_file_info_model_from_file_store_data(file_store_data)
            for file_store_data in file_store_data_list
        ]
