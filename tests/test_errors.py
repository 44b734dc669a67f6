from __future__ import annotations

import pytest

from docspace.core.errors import (
    CouldNotOpenFileError,
    DocspaceError,
    DocumentError,
    DocumentNotFoundError,
    ErrorKind,
    FolderNotFoundError,
    ProjectDirsNotFoundError,
    UserDirsNotFoundError,
)


@pytest.mark.parametrize("kind", list(ErrorKind))
def test_every_kind_has_a_class(kind: ErrorKind) -> None:
    error = DocumentError.from_kind(kind, "/tmp/x")
    assert error.kind is kind
    assert isinstance(error, DocumentError)
    assert isinstance(error, DocspaceError)
    assert str(error) == f"{kind.value}: /tmp/x"


def test_messages_without_path() -> None:
    assert str(UserDirsNotFoundError()) == "User directories not found"
    assert str(ProjectDirsNotFoundError()) == "Project directories not found"


def test_messages_with_path() -> None:
    assert str(DocumentNotFoundError("/data/a.txt")) == "File not found: /data/a.txt"
    assert str(CouldNotOpenFileError("/data/a.txt")) == "Could not open file: /data/a.txt"


def test_role_errors_share_a_base() -> None:
    assert issubclass(UserDirsNotFoundError, FolderNotFoundError)
    assert not issubclass(DocumentNotFoundError, FolderNotFoundError)


def test_match_on_kind() -> None:
    try:
        raise DocumentError.from_kind(ErrorKind.COULD_NOT_OPEN_FILE, "/x")
    except DocumentError as exc:
        assert exc.kind is ErrorKind.COULD_NOT_OPEN_FILE
        assert exc.path == "/x"
