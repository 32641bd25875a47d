"""Adapter for flat object stores, emulating directories on top of key prefixes.

A directory ``d/`` exists when at least one key starts with ``d/``. Creating
one writes a zero-length ``.keep`` marker under the prefix. Directory copy,
delete and move walk the prefix page by page; none of them are atomic and a
failure part-way leaves earlier pages applied. Two callers creating the same
directory concurrently can both pass the existence check.
"""

from __future__ import annotations

from unifs.core.cancellation import CancellationToken
from unifs.core.errors import (
    DirectoryAlreadyExistsError,
    DirectoryNotFoundError,
    FileAlreadyExistsError,
    FileNotFoundInAdapterError,
    InvalidPathError,
)
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
from unifs.core.paths import Path, combine, normalize
from unifs.services.adapter.interface import AdapterInterface
from unifs.services.adapter.pagination import DEFAULT_PAGE_SIZE, PaginatedBulkOperator
from unifs.services.adapter.translator import ErrorTranslator
from unifs.services.object_store.interface import ObjectStoreInterface

DIRECTORY_MARKER = ".keep"

_MARKER_PATH = normalize(DIRECTORY_MARKER)


class ObjectStoreAdapter(AdapterInterface):
    name = "object-store"

    def __init__(
        self, store: ObjectStoreInterface, page_size: int = DEFAULT_PAGE_SIZE
    ) -> None:
        self._store = store
        self._bulk = PaginatedBulkOperator(store, page_size=page_size)
        self._errors = ErrorTranslator(store.provider_name, store.is_not_found)

    @property
    def store(self) -> ObjectStoreInterface:
        return self._store

    def health_check(self) -> bool:
        return self._store.health_check()

    # -- Files ----------------------------------------------------------------

    async def copy_file(
        self, request: CopyFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        source, destination = self._file_key(request.source), self._file_key(request.destination)
        with self._errors.boundary(request.source):
            await self._ensure_file_exists(request.source, cancellation)
            await self._ensure_file_absent(request.destination, cancellation)
            await cancellation.run(self._store.copy_object, source, destination)
        return FileRepresentation(path=request.destination)

    async def delete_file(
        self, request: DeleteFileRequest, cancellation: CancellationToken
    ) -> None:
        key = self._file_key(request.path)
        with self._errors.boundary(request.path):
            await self._ensure_file_exists(request.path, cancellation)
            await cancellation.run(self._store.delete_object, key)

    async def file_exists(
        self, request: FileExistsRequest, cancellation: CancellationToken
    ) -> bool:
        self._file_key(request.path)
        with self._errors.boundary(request.path):
            return await self._file_exists(request.path, cancellation)

    async def get_file(
        self, request: GetFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        self._file_key(request.path)
        with self._errors.boundary(request.path):
            await self._ensure_file_exists(request.path, cancellation)
        return FileRepresentation(path=request.path)

    async def move_file(
        self, request: MoveFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        await self.copy_file(
            CopyFileRequest(source=request.source, destination=request.destination),
            cancellation,
        )
        with self._errors.boundary(request.source):
            await cancellation.run(self._store.delete_object, self._file_key(request.source))
        return FileRepresentation(path=request.destination)

    async def read_file_as_string(
        self, request: ReadFileAsStringRequest, cancellation: CancellationToken
    ) -> str:
        key = self._file_key(request.path)
        with self._errors.boundary(request.path):
            data = await cancellation.run(self._store.get_object, key)
            return data.decode("utf-8")

    async def touch_file(
        self, request: TouchFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        key = self._file_key(request.path)
        with self._errors.boundary(request.path):
            if not await self._file_exists(request.path, cancellation):
                await cancellation.run(self._store.put_object, key, b"")
        return FileRepresentation(path=request.path)

    async def write_text_to_file(
        self, request: WriteTextToFileRequest, cancellation: CancellationToken
    ) -> None:
        key = self._file_key(request.path)
        data = (request.text or "").encode("utf-8")
        with self._errors.boundary(request.path):
            await cancellation.run(self._store.put_object, key, data, request.content_type)

    # -- Directories ----------------------------------------------------------

    async def copy_directory(
        self, request: CopyDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation:
        source = self._prefix(request.source)
        destination = self._prefix(request.destination)

        async def copy_page(keys: list[str]) -> None:
            for key in keys:
                target = destination + key[len(source):]
                await cancellation.run(self._store.copy_object, key, target)

        with self._errors.boundary(request.source, "directory"):
            await self._ensure_directory_exists(request.source, cancellation)
            await self._ensure_directory_absent(request.destination, cancellation)
            await self._bulk.run(source, copy_page, cancellation)
        return DirectoryRepresentation(path=request.destination)

    async def create_directory(
        self, request: CreateDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation:
        marker = combine(request.path.as_directory(), _MARKER_PATH)
        with self._errors.boundary(request.path, "directory"):
            await self._ensure_directory_absent(request.path, cancellation)
            await cancellation.run(self._store.put_object, marker.normalized, b"")
        return DirectoryRepresentation(path=request.path)

    async def delete_directory(
        self, request: DeleteDirectoryRequest, cancellation: CancellationToken
    ) -> None:
        async def delete_page(keys: list[str]) -> None:
            await cancellation.run(self._store.delete_objects, keys)

        with self._errors.boundary(request.path, "directory"):
            await self._ensure_directory_exists(request.path, cancellation)
            await self._bulk.run(self._prefix(request.path), delete_page, cancellation)

    async def move_directory(
        self, request: MoveDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation:
        # Not atomic: a failed delete leaves both copies in place.
        result = await self.copy_directory(
            CopyDirectoryRequest(source=request.source, destination=request.destination),
            cancellation,
        )
        await self.delete_directory(DeleteDirectoryRequest(path=request.source), cancellation)
        return result

    # -- Internal -------------------------------------------------------------

    @staticmethod
    def _file_key(path: Path) -> str:
        if path.name == DIRECTORY_MARKER:
            raise InvalidPathError(path.original, f"'{DIRECTORY_MARKER}' is a reserved name")
        return path.normalized

    @staticmethod
    def _prefix(path: Path) -> str:
        return path.as_directory().normalized

    async def _file_exists(self, path: Path, cancellation: CancellationToken) -> bool:
        try:
            await cancellation.run(self._store.stat_object, path.normalized)
        except Exception as exc:
            if self._store.is_not_found(exc):
                return False
            raise
        return True

    async def _ensure_file_exists(self, path: Path, cancellation: CancellationToken) -> None:
        if not await self._file_exists(path, cancellation):
            raise FileNotFoundInAdapterError(path.normalized)

    async def _ensure_file_absent(self, path: Path, cancellation: CancellationToken) -> None:
        if await self._file_exists(path, cancellation):
            raise FileAlreadyExistsError(path.normalized)

    async def _directory_exists(self, path: Path, cancellation: CancellationToken) -> bool:
        listing = await cancellation.run(
            self._store.list_objects, self._prefix(path), None, 1
        )
        return bool(listing.keys)

    async def _ensure_directory_exists(
        self, path: Path, cancellation: CancellationToken
    ) -> None:
        if not await self._directory_exists(path, cancellation):
            raise DirectoryNotFoundError(path.normalized)

    async def _ensure_directory_absent(
        self, path: Path, cancellation: CancellationToken
    ) -> None:
        if await self._directory_exists(path, cancellation):
            raise DirectoryAlreadyExistsError(path.normalized)
