import pytest

from unifs.core.errors import (
    ErrorKind,
    InvalidPathError,
    PathIsADirectoryError,
    PathIsAFileError,
    RequestValidationError,
)
from unifs.core.models import (
    CopyDirectoryRequest,
    CopyFileRequest,
    CreateDirectoryRequest,
    GetFileRequest,
    WriteTextToFileRequest,
)
from unifs.core.paths import normalize
from unifs.core.validation import (
    validate_single_directory_request,
    validate_single_file_request,
    validate_source_and_destination_directory_request,
    validate_source_and_destination_file_request,
    validate_write_text_request,
)


def test_valid_file_request_passes():
    validate_single_file_request(GetFileRequest(path=normalize("a/b.txt")))


def test_missing_request_is_rejected():
    with pytest.raises(RequestValidationError):
        validate_single_file_request(None)


def test_wrong_request_type_is_rejected():
    with pytest.raises(RequestValidationError, match="SinglePathRequest"):
        validate_single_file_request(CopyFileRequest())


def test_missing_path_is_rejected():
    with pytest.raises(RequestValidationError, match="path is required"):
        validate_single_file_request(GetFileRequest())


def test_directory_path_for_file_op():
    with pytest.raises(PathIsADirectoryError) as exc_info:
        validate_single_file_request(GetFileRequest(path=normalize("a/b/")))
    assert exc_info.value.kind is ErrorKind.PATH_IS_A_DIRECTORY


def test_root_path_for_file_op():
    with pytest.raises(InvalidPathError):
        validate_single_file_request(GetFileRequest(path=normalize("")))


def test_traversal_is_rejected():
    with pytest.raises(InvalidPathError, match=r"'\.\.'"):
        validate_single_file_request(GetFileRequest(path=normalize("a/../b.txt")))


def test_file_path_for_directory_op():
    with pytest.raises(PathIsAFileError) as exc_info:
        validate_single_directory_request(CreateDirectoryRequest(path=normalize("a/b")))
    assert exc_info.value.kind is ErrorKind.PATH_IS_A_FILE


def test_root_path_for_directory_op():
    with pytest.raises(InvalidPathError, match="root"):
        validate_single_directory_request(CreateDirectoryRequest(path=normalize("/")))


def test_copy_file_checks_both_sides():
    with pytest.raises(PathIsADirectoryError):
        validate_source_and_destination_file_request(
            CopyFileRequest(source=normalize("a.txt"), destination=normalize("b/"))
        )
    with pytest.raises(RequestValidationError, match="destination is required"):
        validate_source_and_destination_file_request(CopyFileRequest(source=normalize("a.txt")))


def test_source_equal_to_destination_is_rejected():
    with pytest.raises(RequestValidationError, match="must differ"):
        validate_source_and_destination_file_request(
            CopyFileRequest(source=normalize("/a.txt"), destination=normalize("a.txt"))
        )


def test_copy_directory_request():
    validate_source_and_destination_directory_request(
        CopyDirectoryRequest(source=normalize("a/"), destination=normalize("b/"))
    )
    with pytest.raises(PathIsAFileError):
        validate_source_and_destination_directory_request(
            CopyDirectoryRequest(source=normalize("a/"), destination=normalize("b"))
        )


def test_write_text_requires_text():
    with pytest.raises(RequestValidationError, match="text is required"):
        validate_write_text_request(WriteTextToFileRequest(path=normalize("a.txt")))
    validate_write_text_request(WriteTextToFileRequest(path=normalize("a.txt"), text=""))


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        validate_single_file_request(None)


@pytest.mark.parametrize(
    "source,destination",
    [("a/", "a/b/"), ("a/b/", "a/"), ("/a//", "a/b/c/")],
)
def test_nested_directories_are_rejected(source, destination):
    with pytest.raises(RequestValidationError, match="must not contain each other"):
        validate_source_and_destination_directory_request(
            CopyDirectoryRequest(source=normalize(source), destination=normalize(destination))
        )


def test_sibling_with_shared_name_prefix_is_allowed():
    validate_source_and_destination_directory_request(
        CopyDirectoryRequest(source=normalize("a/"), destination=normalize("ab/"))
    )
