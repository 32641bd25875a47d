"""The file/directory contract every storage backend implements.

Adapters receive requests whose paths already include the adapter root and
must only raise ``FilesystemError`` subclasses. Optional operations have
concrete defaults that raise ``UnsupportedOperationError`` so a backend that
cannot support them fails fast.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from unifs.core.cancellation import CancellationToken
from unifs.core.errors import UnsupportedOperationError
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


class AdapterInterface(ABC):
    name: str = "adapter"

    # -- Files ----------------------------------------------------------------

    @abstractmethod
    async def copy_file(
        self, request: CopyFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation: ...

    @abstractmethod
    async def delete_file(
        self, request: DeleteFileRequest, cancellation: CancellationToken
    ) -> None: ...

    @abstractmethod
    async def file_exists(
        self, request: FileExistsRequest, cancellation: CancellationToken
    ) -> bool: ...

    @abstractmethod
    async def get_file(
        self, request: GetFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation: ...

    async def move_file(
        self, request: MoveFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        raise UnsupportedOperationError(self.name, "move_file")

    @abstractmethod
    async def read_file_as_string(
        self, request: ReadFileAsStringRequest, cancellation: CancellationToken
    ) -> str: ...

    @abstractmethod
    async def touch_file(
        self, request: TouchFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation: ...

    @abstractmethod
    async def write_text_to_file(
        self, request: WriteTextToFileRequest, cancellation: CancellationToken
    ) -> None: ...

    # -- Directories ----------------------------------------------------------

    @abstractmethod
    async def copy_directory(
        self, request: CopyDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation: ...

    @abstractmethod
    async def create_directory(
        self, request: CreateDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation: ...

    @abstractmethod
    async def delete_directory(
        self, request: DeleteDirectoryRequest, cancellation: CancellationToken
    ) -> None: ...

    async def move_directory(
        self, request: MoveDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation:
        raise UnsupportedOperationError(self.name, "move_directory")

    def health_check(self) -> bool:
        return True
