"""Request validation run by the managers before an adapter is touched.

Each validator raises the first problem it finds as a
``RequestValidationError`` subclass.
"""

from __future__ import annotations

from typing import Any

from unifs.core.errors import (
    InvalidPathError,
    PathIsADirectoryError,
    PathIsAFileError,
    RequestValidationError,
)
from unifs.core.models import (
    SinglePathRequest,
    SourceAndDestinationRequest,
    WriteTextToFileRequest,
)
from unifs.core.paths import Path


def _require_request(request: Any, expected: type) -> None:
    if request is None:
        raise RequestValidationError(f"{expected.__name__} is required")
    if not isinstance(request, expected):
        raise RequestValidationError(
            f"Expected a {expected.__name__}, got {type(request).__name__}"
        )


def _require_path(path: Path | None, field: str) -> Path:
    if path is None:
        raise RequestValidationError(f"{field} is required")
    if path.has_traversal():
        raise InvalidPathError(path.original, "'..' segments are not allowed")
    return path


def _check_file_path(path: Path | None, field: str) -> None:
    path = _require_path(path, field)
    if path.is_root:
        raise InvalidPathError(path.original, f"{field} must not be empty")
    if path.is_directory:
        raise PathIsADirectoryError(path.original)


def _check_directory_path(path: Path | None, field: str) -> None:
    path = _require_path(path, field)
    if path.is_root:
        raise InvalidPathError(path.original, f"{field} must not be the root")
    if not path.is_directory:
        raise PathIsAFileError(path.original)


def _check_distinct(request: SourceAndDestinationRequest) -> None:
    if request.source == request.destination:
        raise RequestValidationError(
            f"Source and destination must differ (both are '{request.source}')"
        )


def _check_not_nested(request: SourceAndDestinationRequest) -> None:
    source = request.source.as_directory().normalized
    destination = request.destination.as_directory().normalized
    if destination.startswith(source) or source.startswith(destination):
        raise RequestValidationError(
            f"Source '{source}' and destination '{destination}' must not contain each other"
        )


def validate_single_file_request(request: SinglePathRequest | None) -> None:
    _require_request(request, SinglePathRequest)
    _check_file_path(request.path, "path")


def validate_source_and_destination_file_request(
    request: SourceAndDestinationRequest | None,
) -> None:
    _require_request(request, SourceAndDestinationRequest)
    _check_file_path(request.source, "source")
    _check_file_path(request.destination, "destination")
    _check_distinct(request)


def validate_write_text_request(request: WriteTextToFileRequest | None) -> None:
    _require_request(request, WriteTextToFileRequest)
    _check_file_path(request.path, "path")
    if request.text is None:
        raise RequestValidationError("text is required")


def validate_single_directory_request(request: SinglePathRequest | None) -> None:
    _require_request(request, SinglePathRequest)
    _check_directory_path(request.path, "path")


def validate_source_and_destination_directory_request(
    request: SourceAndDestinationRequest | None,
) -> None:
    _require_request(request, SourceAndDestinationRequest)
    _check_directory_path(request.source, "source")
    _check_directory_path(request.destination, "destination")
    _check_distinct(request)
    _check_not_nested(request)
