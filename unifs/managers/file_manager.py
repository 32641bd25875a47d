"""Public entry point for file operations across registered adapters."""

from __future__ import annotations

from unifs.core.cancellation import CancellationToken
from unifs.core.models import (
    AdapterAwareFileRepresentation,
    CopyFileRequest,
    DeleteFileRequest,
    FileExistsRequest,
    GetFileRequest,
    MoveFileRequest,
    ReadFileAsStringRequest,
    TouchFileRequest,
    WriteTextToFileRequest,
)
from unifs.core.validation import (
    validate_single_file_request,
    validate_source_and_destination_file_request,
    validate_write_text_request,
)
from unifs.managers.base import BaseAdapterManager
from unifs.services.adapter.registry import DEFAULT_ADAPTER


class FileManager(BaseAdapterManager):
    """Validates file requests and runs them against a named adapter.

    Paths in requests and results are relative to the adapter's root.
    """

    async def copy(
        self,
        request: CopyFileRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> AdapterAwareFileRepresentation:
        validate_source_and_destination_file_request(request)
        registration, result = await self._invoke(
            adapter,
            "copy_file",
            request,
            lambda reg, req, token: reg.adapter.copy_file(req, token),
            cancellation,
        )
        return self._file_result(registration, result)

    async def delete(
        self,
        request: DeleteFileRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> None:
        validate_single_file_request(request)
        await self._invoke(
            adapter,
            "delete_file",
            request,
            lambda reg, req, token: reg.adapter.delete_file(req, token),
            cancellation,
        )

    async def exists(
        self,
        request: FileExistsRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> bool:
        validate_single_file_request(request)
        _, result = await self._invoke(
            adapter,
            "file_exists",
            request,
            lambda reg, req, token: reg.adapter.file_exists(req, token),
            cancellation,
        )
        return result

    async def get(
        self,
        request: GetFileRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> AdapterAwareFileRepresentation:
        validate_single_file_request(request)
        registration, result = await self._invoke(
            adapter,
            "get_file",
            request,
            lambda reg, req, token: reg.adapter.get_file(req, token),
            cancellation,
        )
        return self._file_result(registration, result)

    async def move(
        self,
        request: MoveFileRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> AdapterAwareFileRepresentation:
        validate_source_and_destination_file_request(request)
        registration, result = await self._invoke(
            adapter,
            "move_file",
            request,
            lambda reg, req, token: reg.adapter.move_file(req, token),
            cancellation,
        )
        return self._file_result(registration, result)

    async def read_as_string(
        self,
        request: ReadFileAsStringRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> str:
        validate_single_file_request(request)
        _, result = await self._invoke(
            adapter,
            "read_file_as_string",
            request,
            lambda reg, req, token: reg.adapter.read_file_as_string(req, token),
            cancellation,
        )
        return result

    async def touch(
        self,
        request: TouchFileRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> AdapterAwareFileRepresentation:
        validate_single_file_request(request)
        registration, result = await self._invoke(
            adapter,
            "touch_file",
            request,
            lambda reg, req, token: reg.adapter.touch_file(req, token),
            cancellation,
        )
        return self._file_result(registration, result)

    async def write_text(
        self,
        request: WriteTextToFileRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> None:
        validate_write_text_request(request)
        await self._invoke(
            adapter,
            "write_text_to_file",
            request,
            lambda reg, req, token: reg.adapter.write_text_to_file(req, token),
            cancellation,
        )
