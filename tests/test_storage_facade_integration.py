"""Storage facade with real components over in-memory storage."""

from __future__ import annotations

import io
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING
from uuid import uuid4

import pytest

from coolfs.api.facade import StorageFacade
from coolfs.api.schemas.storage import (
    CheckImportAlreadyUploadedRequest,
    FileOriginModel,
    FileUploadModel,
    GetFileInfoByUuidListRequest,
    GetFileInfoByUuidRequest,
    LoadFileByUuidRequest,
    UploadFileRequest,
)
from coolfs.api.services.storage import StorageNotFoundError
from coolfs.core.enums import ErrorType, FileOrigin

if TYPE_CHECKING:
    from conftest import InMemoryStorageService


async def _upload(
    facade: StorageFacade,
    company_uuid: str,
    upload_model: FileUploadModel,
    max_file_length: int | None = None,
) -> str:
    result = await facade.upload(
        UploadFileRequest(
            company_uuid=company_uuid,
            upload_model=upload_model,
            max_file_length=max_file_length,
        )
    )
    assert not result.has_errors()
    return result.response.file_info.uuid


class TestUploadFlow:
    """Upload through the real validation and conversion components."""

    @pytest.mark.asyncio
    async def test_oversized_upload_leaves_nothing_behind(
        self,
        in_memory_facade: StorageFacade,
        in_memory_storage: InMemoryStorageService,
        make_upload_model: Callable[..., FileUploadModel],
        default_max_file_length: int,
    ) -> None:
        """Test that a rejected upload is removed from storage."""
        payload = b"x" * (default_max_file_length + 1)

        result = await in_memory_facade.upload(
            UploadFileRequest(
                company_uuid=str(uuid4()),
                upload_model=make_upload_model(content=io.BytesIO(payload)),
            )
        )

        assert result.errors == {ErrorType.MAX_SIZE_EXCEEDED: len(payload)}
        assert result.response is None
        assert in_memory_storage.records == {}
        assert in_memory_storage.blobs == {}
        assert [name for name, _ in in_memory_storage.calls] == [
            "create",
            "get_by_meta_uuid",
            "delete_by_meta_uuid",
        ]

    @pytest.mark.asyncio
    async def test_upload_at_exact_limit_is_accepted(
        self,
        in_memory_facade: StorageFacade,
        in_memory_storage: InMemoryStorageService,
        make_upload_model: Callable[..., FileUploadModel],
    ) -> None:
        """Test that a file exactly at the limit is kept."""
        payload = b"x" * 100

        uuid = await _upload(
            in_memory_facade,
            str(uuid4()),
            make_upload_model(content=io.BytesIO(payload)),
            max_file_length=100,
        )

        assert uuid in in_memory_storage.records

    @pytest.mark.asyncio
    async def test_request_limit_overrides_default(
        self,
        in_memory_facade: StorageFacade,
        make_upload_model: Callable[..., FileUploadModel],
    ) -> None:
        """Test that a per-request limit is used instead of the default."""
        result = await in_memory_facade.upload(
            UploadFileRequest(
                company_uuid=str(uuid4()),
                upload_model=make_upload_model(content=io.BytesIO(b"x" * 11)),
                max_file_length=10,
            )
        )

        assert result.errors == {ErrorType.MAX_SIZE_EXCEEDED: 11}

    @pytest.mark.asyncio
    async def test_upload_then_get_and_load(
        self,
        in_memory_facade: StorageFacade,
        make_upload_model: Callable[..., FileUploadModel],
    ) -> None:
        """Test that an accepted upload can be looked up and read back."""
        company_uuid = str(uuid4())
        payload = b"name,email\njane,jane@example.com\n"

        uuid = await _upload(
            in_memory_facade, company_uuid, make_upload_model(content=io.BytesIO(payload))
        )

        info = await in_memory_facade.get_file_info_by_uuid(GetFileInfoByUuidRequest(uuid))
        file_info = info.response.file_info
        assert file_info.uuid == uuid
        assert file_info.company_uuid == company_uuid
        assert file_info.file_name == "contacts.csv"
        assert file_info.content_type == "text/csv"
        assert file_info.origin == FileOriginModel.IMPORT_CSV
        assert file_info.length == len(payload)

        loaded = await in_memory_facade.load_file_by_uuid(LoadFileByUuidRequest(uuid))
        load_model = loaded.response.load_file_model
        assert load_model.file_name == "contacts.csv"
        assert load_model.content_type == "text/csv"
        assert await load_model.content.read() == payload

    @pytest.mark.asyncio
    async def test_get_unknown_file(self, in_memory_facade: StorageFacade) -> None:
        """Test that looking up a missing file raises not found."""
        with pytest.raises(StorageNotFoundError):
            await in_memory_facade.get_file_info_by_uuid(GetFileInfoByUuidRequest(str(uuid4())))

    @pytest.mark.asyncio
    async def test_get_several_skips_unknown(
        self,
        in_memory_facade: StorageFacade,
        make_upload_model: Callable[..., FileUploadModel],
    ) -> None:
        """Test that batch lookup keeps request order and drops unknown ids."""
        company_uuid = str(uuid4())
        first = await _upload(in_memory_facade, company_uuid, make_upload_model())
        second = await _upload(in_memory_facade, company_uuid, make_upload_model())

        result = await in_memory_facade.get_file_info_by_uuids(
            GetFileInfoByUuidListRequest([second, str(uuid4()), first])
        )

        assert [info.uuid for info in result.response.files_info] == [second, first]


class TestImportCheckFlow:
    """Duplicate-import detection over stored records."""

    @pytest.mark.asyncio
    async def test_only_matching_csv_imports_are_reported(
        self,
        in_memory_facade: StorageFacade,
        make_upload_model: Callable[..., FileUploadModel],
    ) -> None:
        """Test that origin, company and file name all have to match."""
        company_uuid = str(uuid4())
        since = datetime.now(timezone.utc) - timedelta(minutes=1)
        imported = await _upload(in_memory_facade, company_uuid, make_upload_model())
        await _upload(
            in_memory_facade,
            company_uuid,
            make_upload_model(origin=FileOriginModel.EXPORT_CSV),
        )
        await _upload(in_memory_facade, str(uuid4()), make_upload_model())
        await _upload(in_memory_facade, company_uuid, make_upload_model(file_name="other.csv"))

        result = await in_memory_facade.check_import_already_uploaded(
            CheckImportAlreadyUploadedRequest(
                company_uuid=company_uuid,
                file_name="contacts.csv",
                created_after=since,
            )
        )

        assert result.response.uuid_list == [imported]

    @pytest.mark.asyncio
    async def test_imports_before_cutoff_are_ignored(
        self,
        in_memory_facade: StorageFacade,
        in_memory_storage: InMemoryStorageService,
        make_upload_model: Callable[..., FileUploadModel],
    ) -> None:
        """Test that created_after excludes older uploads."""
        company_uuid = str(uuid4())
        await _upload(in_memory_facade, company_uuid, make_upload_model())

        result = await in_memory_facade.check_import_already_uploaded(
            CheckImportAlreadyUploadedRequest(
                company_uuid=company_uuid,
                file_name="contacts.csv",
                created_after=datetime.now(timezone.utc) + timedelta(minutes=1),
            )
        )

        assert not result.has_errors()
        assert result.response.uuid_list == []
        assert in_memory_storage.calls[-1][1][3] == FileOrigin.IMPORT_CSV
