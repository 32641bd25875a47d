"""Observable wrapper around AdapterInterface that adds timing metrics.

Records a histogram for every adapter call, tagged with the operation name
and its outcome (``ok`` or the error kind), so latency and failure rates can
be broken down per backend operation.
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable, TypeVar

from unifs.core.cancellation import CancellationToken
from unifs.core.errors import FilesystemError
from unifs.core.models import (
    CopyDirectoryRequest,
    CopyFileRequest,
    CreateDirectoryRequest,
    DeleteDirectoryRequest,
    DeleteFileRequest,
    DirectoryRepresentation,
    FileExistsRequest,
    FileRepresentation,
    GetFileRequest,
    MoveDirectoryRequest,
    MoveFileRequest,
    ReadFileAsStringRequest,
    TouchFileRequest,
    WriteTextToFileRequest,
)
from unifs.services.adapter.interface import AdapterInterface
from unifs.services.metrics.interface import MetricsInterface

T = TypeVar("T")

_METRIC = "adapter_operation_duration_seconds"


class ObservableAdapter(AdapterInterface):
    """Transparent wrapper that records timing histograms for every adapter call."""

    def __init__(
        self, inner: AdapterInterface, metrics: MetricsInterface, label: str | None = None
    ) -> None:
        self._inner = inner
        self._metrics = metrics
        self._label = label or inner.name
        self.name = inner.name

    @property
    def inner(self) -> AdapterInterface:
        return self._inner

    def health_check(self) -> bool:
        return self._inner.health_check()

    async def _timed(self, operation: str, call: Callable[..., Awaitable[T]], *args: Any) -> T:
        outcome = "ok"
        t0 = time.perf_counter()
        try:
            return await call(*args)
        except FilesystemError as exc:
            outcome = exc.kind.value
            raise
        except BaseException:
            outcome = "error"
            raise
        finally:
            self._metrics.histogram(
                _METRIC,
                time.perf_counter() - t0,
                tags={"adapter": self._label, "operation": operation, "outcome": outcome},
            )

    # -- Files ----------------------------------------------------------------

    async def copy_file(
        self, request: CopyFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        return await self._timed("copy_file", self._inner.copy_file, request, cancellation)

    async def delete_file(
        self, request: DeleteFileRequest, cancellation: CancellationToken
    ) -> None:
        await self._timed("delete_file", self._inner.delete_file, request, cancellation)

    async def file_exists(
        self, request: FileExistsRequest, cancellation: CancellationToken
    ) -> bool:
        return await self._timed("file_exists", self._inner.file_exists, request, cancellation)

    async def get_file(
        self, request: GetFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        return await self._timed("get_file", self._inner.get_file, request, cancellation)

    async def move_file(
        self, request: MoveFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        return await self._timed("move_file", self._inner.move_file, request, cancellation)

    async def read_file_as_string(
        self, request: ReadFileAsStringRequest, cancellation: CancellationToken
    ) -> str:
        return await self._timed(
            "read_file_as_string", self._inner.read_file_as_string, request, cancellation
        )

    async def touch_file(
        self, request: TouchFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        return await self._timed("touch_file", self._inner.touch_file, request, cancellation)

    async def write_text_to_file(
        self, request: WriteTextToFileRequest, cancellation: CancellationToken
    ) -> None:
        await self._timed(
            "write_text_to_file", self._inner.write_text_to_file, request, cancellation
        )

    # -- Directories ----------------------------------------------------------

    async def copy_directory(
        self, request: CopyDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation:
        return await self._timed(
            "copy_directory", self._inner.copy_directory, request, cancellation
        )

    async def create_directory(
        self, request: CreateDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation:
        return await self._timed(
            "create_directory", self._inner.create_directory, request, cancellation
        )

    async def delete_directory(
        self, request: DeleteDirectoryRequest, cancellation: CancellationToken
    ) -> None:
        await self._timed(
            "delete_directory", self._inner.delete_directory, request, cancellation
        )

    async def move_directory(
        self, request: MoveDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation:
        return await self._timed(
            "move_directory", self._inner.move_directory, request, cancellation
        )
