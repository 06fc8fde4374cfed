"""Storage facade models: requests, responses and the result envelope.

Request fields are optional at the type level; the facade checks them once
on entry and raises ``InvalidRequestError`` for missing ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, BinaryIO, Generic, TypeVar

import msgspec

from coolfs.api.services.storage import StoredContent
from coolfs.core.enums import ErrorType

T = TypeVar("T")


class FileOriginModel(str, Enum):
    """Where an uploaded file came from."""

    IMPORT_CSV = "import_csv"
    EXPORT_CSV = "export_csv"
    USER_UPLOAD = "user_upload"


# -----------------------------------------------------------------------------
# Models
# -----------------------------------------------------------------------------


@dataclass
class FileUploadModel:
    """A file as handed in for upload."""

    content: BinaryIO | None
    file_name: str | None
    content_type: str | None = None
    origin: FileOriginModel | None = None


class StoredFileInfoModel(msgspec.Struct, kw_only=True):
    """Caller-facing view of a stored file."""

    uuid: str
    file_name: str
    content_type: str | None
    origin: FileOriginModel
    company_uuid: str
    length: int
    created: datetime


@dataclass
class FileLoadModel:
    """A stored file ready to be streamed back to the caller."""

    content: StoredContent
    file_name: str
    content_type: str | None


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------


@dataclass
class UploadFileRequest:
    company_uuid: str | None
    upload_model: FileUploadModel | None
    max_file_length: int | None = None


class GetFileInfoByUuidRequest(msgspec.Struct):
    uuid: str | None


class GetFileInfoByUuidListRequest(msgspec.Struct):
    uuids: list[str | None] | None


class LoadFileByUuidRequest(msgspec.Struct):
    uuid: str | None


class CheckImportAlreadyUploadedRequest(msgspec.Struct, kw_only=True):
    company_uuid: str | None
    file_name: str | None
    created_after: datetime | None


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------


class UploadFileResponse(msgspec.Struct):
    file_info: StoredFileInfoModel


class GetFileInfoByUuidResponse(msgspec.Struct):
    file_info: StoredFileInfoModel


class GetFileInfoByUuidListResponse(msgspec.Struct):
    files_info: list[StoredFileInfoModel]


@dataclass
class LoadFileByUuidResponse:
    load_file_model: FileLoadModel


class CheckImportAlreadyUploadedResponse(msgspec.Struct):
    uuid_list: list[str]


@dataclass
class ResultResponseModel(Generic[T]):
    """Uniform result of a facade operation.

    Carries either a response payload or a mapping of business-rule error
    kinds to their context, never both.
    """

    response: T | None = None
    errors: dict[ErrorType, Any] = field(default_factory=dict)

    @classmethod
    def of(cls, response: T) -> ResultResponseModel[T]:
        return cls(response=response)

    @classmethod
    def failed(cls, errors: dict[ErrorType, Any]) -> ResultResponseModel[T]:
        return cls(errors=dict(errors))

    def has_errors(self) -> bool:
        return bool(self.errors)
