"""Adapter backed by a directory on local disk, with native directories."""

from __future__ import annotations

import asyncio
import os
import shutil
import tempfile
from pathlib import Path as FsPath

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
from unifs.core.paths import Path
from unifs.services.adapter.interface import AdapterInterface
from unifs.services.adapter.translator import ErrorTranslator
from unifs.services.secrets.interface import SecretsInterface


def _is_not_found(exc: BaseException) -> bool:
    return isinstance(exc, FileNotFoundError)


class LocalAdapter(AdapterInterface):
    """Stores files under a root directory on the local filesystem.

    Config (via secrets, ``<prefix>`` defaults to ``FS_LOCAL``):
        <prefix>_ROOT - Directory holding all files (default: /tmp/unifs)

    Blocking disk calls run in a worker thread. Directory moves use a
    native rename.
    """

    name = "local"

    def __init__(self, secrets: SecretsInterface, prefix: str = "FS_LOCAL") -> None:
        self._root = FsPath(secrets.get_or_default(f"{prefix}_ROOT", "/tmp/unifs"))
        self._errors = ErrorTranslator("local filesystem", _is_not_found)

    @property
    def root(self) -> FsPath:
        return self._root

    def health_check(self) -> bool:
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            return self._root.is_dir() and os.access(self._root, os.W_OK)
        except OSError:
            return False

    def _resolve(self, path: Path) -> FsPath:
        if path.has_traversal():
            raise InvalidPathError(path.original, "'..' segments are not allowed")
        return self._root.joinpath(*path.segments)

    async def _io(self, cancellation: CancellationToken, func, *args):
        async def call():
            return await asyncio.to_thread(func, *args)

        return await cancellation.run(call)

    # -- Files ----------------------------------------------------------------

    async def copy_file(
        self, request: CopyFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        source, destination = self._resolve(request.source), self._resolve(request.destination)
        with self._errors.boundary(request.source):
            await self._ensure_file(request.source, source, cancellation)
            if await self._io(cancellation, destination.exists):
                raise FileAlreadyExistsError(request.destination.normalized)
            await self._io(cancellation, _copy_file, source, destination)
        return FileRepresentation(path=request.destination)

    async def delete_file(
        self, request: DeleteFileRequest, cancellation: CancellationToken
    ) -> None:
        target = self._resolve(request.path)
        with self._errors.boundary(request.path):
            await self._ensure_file(request.path, target, cancellation)
            await self._io(cancellation, target.unlink)

    async def file_exists(
        self, request: FileExistsRequest, cancellation: CancellationToken
    ) -> bool:
        target = self._resolve(request.path)
        with self._errors.boundary(request.path):
            return await self._io(cancellation, target.is_file)

    async def get_file(
        self, request: GetFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        target = self._resolve(request.path)
        with self._errors.boundary(request.path):
            await self._ensure_file(request.path, target, cancellation)
        return FileRepresentation(path=request.path)

    async def move_file(
        self, request: MoveFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        source, destination = self._resolve(request.source), self._resolve(request.destination)
        with self._errors.boundary(request.source):
            await self._ensure_file(request.source, source, cancellation)
            if await self._io(cancellation, destination.exists):
                raise FileAlreadyExistsError(request.destination.normalized)
            await self._io(cancellation, _move, source, destination)
        return FileRepresentation(path=request.destination)

    async def read_file_as_string(
        self, request: ReadFileAsStringRequest, cancellation: CancellationToken
    ) -> str:
        target = self._resolve(request.path)
        with self._errors.boundary(request.path):
            return await self._io(cancellation, target.read_text, "utf-8")

    async def touch_file(
        self, request: TouchFileRequest, cancellation: CancellationToken
    ) -> FileRepresentation:
        target = self._resolve(request.path)
        with self._errors.boundary(request.path):
            await self._io(cancellation, _touch, target)
        return FileRepresentation(path=request.path)

    async def write_text_to_file(
        self, request: WriteTextToFileRequest, cancellation: CancellationToken
    ) -> None:
        target = self._resolve(request.path)
        data = (request.text or "").encode("utf-8")
        with self._errors.boundary(request.path):
            await self._io(cancellation, _atomic_write, target, data)

    # -- Directories ----------------------------------------------------------

    async def copy_directory(
        self, request: CopyDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation:
        source, destination = self._resolve(request.source), self._resolve(request.destination)
        with self._errors.boundary(request.source, "directory"):
            await self._ensure_directory(request.source, source, cancellation)
            await self._ensure_no_directory(request.destination, destination, cancellation)
            await self._io(cancellation, shutil.copytree, source, destination)
        return DirectoryRepresentation(path=request.destination)

    async def create_directory(
        self, request: CreateDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation:
        target = self._resolve(request.path)
        with self._errors.boundary(request.path, "directory"):
            await self._ensure_no_directory(request.path, target, cancellation)
            await self._io(cancellation, _mkdir, target)
        return DirectoryRepresentation(path=request.path)

    async def delete_directory(
        self, request: DeleteDirectoryRequest, cancellation: CancellationToken
    ) -> None:
        target = self._resolve(request.path)
        with self._errors.boundary(request.path, "directory"):
            await self._ensure_directory(request.path, target, cancellation)
            await self._io(cancellation, shutil.rmtree, target)

    async def move_directory(
        self, request: MoveDirectoryRequest, cancellation: CancellationToken
    ) -> DirectoryRepresentation:
        source, destination = self._resolve(request.source), self._resolve(request.destination)
        with self._errors.boundary(request.source, "directory"):
            await self._ensure_directory(request.source, source, cancellation)
            await self._ensure_no_directory(request.destination, destination, cancellation)
            await self._io(cancellation, _move, source, destination)
        return DirectoryRepresentation(path=request.destination)

    # -- Internal -------------------------------------------------------------

    async def _ensure_file(
        self, path: Path, target: FsPath, cancellation: CancellationToken
    ) -> None:
        if not await self._io(cancellation, target.is_file):
            raise FileNotFoundInAdapterError(path.normalized)

    async def _ensure_directory(
        self, path: Path, target: FsPath, cancellation: CancellationToken
    ) -> None:
        if not await self._io(cancellation, target.is_dir):
            raise DirectoryNotFoundError(path.normalized)

    async def _ensure_no_directory(
        self, path: Path, target: FsPath, cancellation: CancellationToken
    ) -> None:
        if await self._io(cancellation, target.exists):
            raise DirectoryAlreadyExistsError(path.normalized)


def _copy_file(source: FsPath, destination: FsPath) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, destination)


def _move(source: FsPath, destination: FsPath) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.move(str(source), str(destination))


def _mkdir(target: FsPath) -> None:
    target.mkdir(parents=True)


def _touch(target: FsPath) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.touch(exist_ok=True)


def _atomic_write(target: FsPath, data: bytes) -> None:
    """Write via temp file + rename so readers never see a partial file."""
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=target.parent)
    closed = False
    try:
        os.write(fd, data)
        os.fsync(fd)
        os.close(fd)
        closed = True
        os.replace(tmp, target)
    except BaseException:
        if not closed:
            os.close(fd)
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise
