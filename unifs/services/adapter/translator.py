"""Maps backend-native exceptions onto the domain error taxonomy."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator

from unifs.core.errors import (
    DirectoryNotFoundError,
    FileNotFoundInAdapterError,
    FilesystemError,
    ProviderOperationError,
)
from unifs.core.paths import Path


class ErrorTranslator:
    """Translate errors raised by one backend kind.

    *is_not_found* classifies the backend's own "no such key/file" errors;
    everything else unexpected becomes a ``ProviderOperationError`` naming
    *provider*.
    """

    def __init__(self, provider: str, is_not_found: Callable[[BaseException], bool]) -> None:
        self._provider = provider
        self._is_not_found = is_not_found

    @property
    def provider(self) -> str:
        return self._provider

    def translate(self, exc: BaseException, path: Path, entity: str = "file") -> FilesystemError:
        if isinstance(exc, FilesystemError):
            return exc
        if self._is_not_found(exc):
            if entity == "directory":
                return DirectoryNotFoundError(path.normalized)
            return FileNotFoundInAdapterError(path.normalized)
        return ProviderOperationError(self._provider)

    @contextmanager
    def boundary(self, path: Path, entity: str = "file") -> Iterator[None]:
        """Re-raise anything escaping the block as a domain error.

        Domain errors pass through untouched; translated errors keep the
        original as ``__cause__``.
        """
        try:
            yield
        except FilesystemError:
            raise
        except Exception as exc:
            raise self.translate(exc, path, entity) from exc
