"""API schemas module."""

from .storage import (
    CheckImportAlreadyUploadedRequest,
    CheckImportAlreadyUploadedResponse,
    FileLoadModel,
    FileOriginModel,
    FileUploadModel,
    GetFileInfoByUuidListRequest,
    GetFileInfoByUuidListResponse,
    GetFileInfoByUuidRequest,
    GetFileInfoByUuidResponse,
    LoadFileByUuidRequest,
    LoadFileByUuidResponse,
    ResultResponseModel,
    StoredFileInfoModel,
    UploadFileRequest,
    UploadFileResponse,
)

__all__ = [
    "CheckImportAlreadyUploadedRequest",
    "CheckImportAlreadyUploadedResponse",
    "FileLoadModel",
    "FileOriginModel",
    "FileUploadModel",
    "GetFileInfoByUuidListRequest",
    "GetFileInfoByUuidListResponse",
    "GetFileInfoByUuidRequest",
    "GetFileInfoByUuidResponse",
    "LoadFileByUuidRequest",
    "LoadFileByUuidResponse",
    "ResultResponseModel",
    "StoredFileInfoModel",
    "UploadFileRequest",
    "UploadFileResponse",
]
