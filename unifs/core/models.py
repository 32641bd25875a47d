"""Request and representation values exchanged with managers and adapters.

Requests are frozen dataclasses; ``with_root()`` returns a copy whose path
fields have the adapter root prepended. Representations are what a
successful operation hands back to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from unifs.core.paths import Path, with_root


@dataclass(frozen=True)
class SinglePathRequest:
    path: Path | None = None

    def with_root(self, root: Path | None):
        if self.path is None:
            return self
        return replace(self, path=with_root(root, self.path))


@dataclass(frozen=True)
class SourceAndDestinationRequest:
    source: Path | None = None
    destination: Path | None = None

    def with_root(self, root: Path | None):
        return replace(
            self,
            source=with_root(root, self.source) if self.source is not None else None,
            destination=(
                with_root(root, self.destination) if self.destination is not None else None
            ),
        )


# -- Directory requests -----------------------------------------------------


@dataclass(frozen=True)
class CreateDirectoryRequest(SinglePathRequest):
    pass


@dataclass(frozen=True)
class DeleteDirectoryRequest(SinglePathRequest):
    pass


@dataclass(frozen=True)
class CopyDirectoryRequest(SourceAndDestinationRequest):
    pass


@dataclass(frozen=True)
class MoveDirectoryRequest(SourceAndDestinationRequest):
    pass


# -- File requests ----------------------------------------------------------


@dataclass(frozen=True)
class GetFileRequest(SinglePathRequest):
    pass


@dataclass(frozen=True)
class TouchFileRequest(SinglePathRequest):
    pass


@dataclass(frozen=True)
class DeleteFileRequest(SinglePathRequest):
    pass


@dataclass(frozen=True)
class FileExistsRequest(SinglePathRequest):
    pass


@dataclass(frozen=True)
class ReadFileAsStringRequest(SinglePathRequest):
    pass


@dataclass(frozen=True)
class WriteTextToFileRequest(SinglePathRequest):
    text: str | None = None
    content_type: str = "text/plain"


@dataclass(frozen=True)
class CopyFileRequest(SourceAndDestinationRequest):
    pass


@dataclass(frozen=True)
class MoveFileRequest(SourceAndDestinationRequest):
    pass


# -- Representations --------------------------------------------------------


@dataclass(frozen=True)
class FileRepresentation:
    path: Path

    def to_dict(self) -> dict[str, Any]:
        return {"type": "file", "path": self.path.normalized}


@dataclass(frozen=True)
class DirectoryRepresentation:
    path: Path

    def to_dict(self) -> dict[str, Any]:
        return {"type": "directory", "path": self.path.normalized}


@dataclass(frozen=True)
class AdapterAwareFileRepresentation(FileRepresentation):
    adapter: str = "default"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "adapter": self.adapter}


@dataclass(frozen=True)
class AdapterAwareDirectoryRepresentation(DirectoryRepresentation):
    adapter: str = "default"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "adapter": self.adapter}
