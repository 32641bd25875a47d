"""Error taxonomy raised by managers and adapters.

Every error carries an ``ErrorKind`` so callers can ``match err.kind``
instead of walking the class hierarchy. Raw backend exceptions never leave
an adapter; they are translated into one of these or wrapped in
``ProviderOperationError`` with the original attached as ``__cause__``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    PATH_IS_A_DIRECTORY = "path_is_a_directory"
    PATH_IS_A_FILE = "path_is_a_file"
    ADAPTER_NOT_FOUND = "adapter_not_found"
    ADAPTER_ALREADY_REGISTERED = "adapter_already_registered"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PROVIDER_OPERATION = "provider_operation"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    CANCELLED = "cancelled"


class FilesystemError(Exception):
    """Base class for every error raised through the public API."""

    kind: ErrorKind = ErrorKind.PROVIDER_OPERATION


# -- Validation (raised before any backend call) ----------------------------


class RequestValidationError(FilesystemError, ValueError):
    kind = ErrorKind.VALIDATION


class InvalidPathError(RequestValidationError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid path '{path}': {reason}")
        self.path = path
        self.reason = reason


class PathIsADirectoryError(RequestValidationError):
    kind = ErrorKind.PATH_IS_A_DIRECTORY

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Path '{path}' is a directory path but a file path was expected"
        )
        self.path = path


class PathIsAFileError(RequestValidationError):
    kind = ErrorKind.PATH_IS_A_FILE

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Path '{path}' is a file path but a directory path was expected"
        )
        self.path = path


# -- Registry ---------------------------------------------------------------


class AdapterNotFoundError(FilesystemError, LookupError):
    kind = ErrorKind.ADAPTER_NOT_FOUND

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        listing = ", ".join(available or []) or "none"
        super().__init__(f"No adapter registered with name '{name}' (available: {listing})")
        self.name = name


class AdapterAlreadyRegisteredError(FilesystemError):
    kind = ErrorKind.ADAPTER_ALREADY_REGISTERED

    def __init__(self, name: str) -> None:
        super().__init__(f"An adapter is already registered with name '{name}'")
        self.name = name


class RegistryFrozenError(AdapterAlreadyRegisteredError):
    def __init__(self, name: str) -> None:
        FilesystemError.__init__(
            self,
            f"Cannot register adapter '{name}': the registry has already been read from",
        )
        self.name = name


# -- Presence ---------------------------------------------------------------


class NotFoundError(FilesystemError):
    kind = ErrorKind.NOT_FOUND
    entity = "entity"

    def __init__(self, path: str) -> None:
        super().__init__(f"{self.entity.capitalize()} not found: {path}")
        self.path = path


class FileNotFoundInAdapterError(NotFoundError):
    entity = "file"


class DirectoryNotFoundError(NotFoundError):
    entity = "directory"


class AlreadyExistsError(FilesystemError):
    kind = ErrorKind.ALREADY_EXISTS
    entity = "entity"

    def __init__(self, path: str) -> None:
        super().__init__(f"{self.entity.capitalize()} already exists: {path}")
        self.path = path


class FileAlreadyExistsError(AlreadyExistsError):
    entity = "file"


class DirectoryAlreadyExistsError(AlreadyExistsError):
    entity = "directory"


# -- Backend / operation ----------------------------------------------------


class ProviderOperationError(FilesystemError):
    """Catch-all for backend failures; the original error is ``__cause__``."""

    kind = ErrorKind.PROVIDER_OPERATION

    def __init__(self, provider: str, message: str | None = None) -> None:
        super().__init__(
            message
            or f"Unexpected exception thrown when communicating with the {provider} "
            "endpoint. See inner exception for details."
        )
        self.provider = provider


class UnsupportedOperationError(FilesystemError, NotImplementedError):
    kind = ErrorKind.UNSUPPORTED_OPERATION

    def __init__(self, adapter: str, operation: str) -> None:
        super().__init__(f"Adapter '{adapter}' does not support {operation}")
        self.adapter = adapter
        self.operation = operation


class OperationCancelledError(FilesystemError):
    kind = ErrorKind.CANCELLED
