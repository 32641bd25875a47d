"""Public entry point for directory operations across registered adapters."""

from __future__ import annotations

from unifs.core.cancellation import CancellationToken
from unifs.core.models import (
    AdapterAwareDirectoryRepresentation,
    CopyDirectoryRequest,
    CreateDirectoryRequest,
    DeleteDirectoryRequest,
    MoveDirectoryRequest,
)
from unifs.core.validation import (
    validate_single_directory_request,
    validate_source_and_destination_directory_request,
)
from unifs.managers.base import BaseAdapterManager
from unifs.services.adapter.registry import DEFAULT_ADAPTER


class DirectoryManager(BaseAdapterManager):
    """Validates directory requests and runs them against a named adapter.

    Copy, delete and move may leave a directory partially processed when
    they fail; callers should treat any error from them as "state may have
    changed".
    """

    async def copy(
        self,
        request: CopyDirectoryRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> AdapterAwareDirectoryRepresentation:
        validate_source_and_destination_directory_request(request)
        registration, result = await self._invoke(
            adapter,
            "copy_directory",
            request,
            lambda reg, req, token: reg.adapter.copy_directory(req, token),
            cancellation,
        )
        return self._directory_result(registration, result)

    async def create(
        self,
        request: CreateDirectoryRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> AdapterAwareDirectoryRepresentation:
        validate_single_directory_request(request)
        registration, result = await self._invoke(
            adapter,
            "create_directory",
            request,
            lambda reg, req, token: reg.adapter.create_directory(req, token),
            cancellation,
        )
        return self._directory_result(registration, result)

    async def delete(
        self,
        request: DeleteDirectoryRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> None:
        validate_single_directory_request(request)
        await self._invoke(
            adapter,
            "delete_directory",
            request,
            lambda reg, req, token: reg.adapter.delete_directory(req, token),
            cancellation,
        )

    async def move(
        self,
        request: MoveDirectoryRequest,
        adapter: str = DEFAULT_ADAPTER,
        cancellation: CancellationToken | None = None,
    ) -> AdapterAwareDirectoryRepresentation:
        validate_source_and_destination_directory_request(request)
        registration, result = await self._invoke(
            adapter,
            "move_directory",
            request,
            lambda reg, req, token: reg.adapter.move_directory(req, token),
            cancellation,
        )
        return self._directory_result(registration, result)
