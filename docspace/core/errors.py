"""Custom exceptions used across docspace."""

from __future__ import annotations

from enum import Enum


class DocspaceError(Exception):
    """Base error for the package."""


class ConfigError(DocspaceError):
    """Configuration related error."""


class ErrorKind(Enum):
    """Failure kinds shared by every step of the resolution pipeline."""

    USER_DIRS_NOT_FOUND = "User directories not found"
    PICTURES_DIR_NOT_FOUND = "Pictures directory not found"
    VIDEOS_DIR_NOT_FOUND = "Videos directory not found"
    DOWNLOADS_DIR_NOT_FOUND = "Downloads directory not found"
    DOCUMENTS_DIR_NOT_FOUND = "Documents directory not found"
    PROJECT_DIRS_NOT_FOUND = "Project directories not found"
    PROJECT_IDENTITY_NOT_FOUND = "Project identity not found"
    FILE_NOT_FOUND = "File not found"
    COULD_NOT_CREATE_FILE = "Could not create file"
    COULD_NOT_CREATE_PARENT_FOLDER = "Could not create parent folder"
    COULD_NOT_LAUNCH_FILE = "Could not launch file with default app"
    COULD_NOT_OPEN_FILE = "Could not open file"
    FILE_NOT_WRITABLE = "File not writable"
    FILE_NOT_OPEN = "File not open"


class DocumentError(DocspaceError):
    """Raised when a document cannot be located, created, opened or written.

    ``kind`` identifies the failure; ``path`` holds the file or folder path the
    failure refers to, when there is one.
    """

    kind: ErrorKind

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        super().__init__(self._render())

    def _render(self) -> str:
        if self.path is None:
            return self.kind.value
        return f"{self.kind.value}: {self.path}"

    @classmethod
    def from_kind(cls, kind: ErrorKind, path: str | None = None) -> "DocumentError":
        """Build the subclass registered for ``kind``."""

        return _BY_KIND[kind](path)


class FolderNotFoundError(DocumentError):
    """A well-known folder role has no mapping on this system."""


class UserDirsNotFoundError(FolderNotFoundError):
    kind = ErrorKind.USER_DIRS_NOT_FOUND


class PicturesDirNotFoundError(FolderNotFoundError):
    kind = ErrorKind.PICTURES_DIR_NOT_FOUND


class VideosDirNotFoundError(FolderNotFoundError):
    kind = ErrorKind.VIDEOS_DIR_NOT_FOUND


class DownloadsDirNotFoundError(FolderNotFoundError):
    kind = ErrorKind.DOWNLOADS_DIR_NOT_FOUND


class DocumentsDirNotFoundError(FolderNotFoundError):
    kind = ErrorKind.DOCUMENTS_DIR_NOT_FOUND


class ProjectDirsNotFoundError(FolderNotFoundError):
    kind = ErrorKind.PROJECT_DIRS_NOT_FOUND


class ProjectIdentityNotFoundError(FolderNotFoundError):
    kind = ErrorKind.PROJECT_IDENTITY_NOT_FOUND


class DocumentNotFoundError(DocumentError):
    """The file is still absent after the creation policy ran."""

    kind = ErrorKind.FILE_NOT_FOUND


class CouldNotCreateFileError(DocumentError):
    kind = ErrorKind.COULD_NOT_CREATE_FILE


class CouldNotCreateParentFolderError(DocumentError):
    kind = ErrorKind.COULD_NOT_CREATE_PARENT_FOLDER


class CouldNotLaunchFileError(DocumentError):
    kind = ErrorKind.COULD_NOT_LAUNCH_FILE


class CouldNotOpenFileError(DocumentError):
    kind = ErrorKind.COULD_NOT_OPEN_FILE


class FileNotWritableError(DocumentError):
    kind = ErrorKind.FILE_NOT_WRITABLE


class FileNotOpenError(DocumentError):
    kind = ErrorKind.FILE_NOT_OPEN


_BY_KIND: dict[ErrorKind, type[DocumentError]] = {
    cls.kind: cls
    for cls in (
        UserDirsNotFoundError,
        PicturesDirNotFoundError,
        VideosDirNotFoundError,
        DownloadsDirNotFoundError,
        DocumentsDirNotFoundError,
        ProjectDirsNotFoundError,
        ProjectIdentityNotFoundError,
        DocumentNotFoundError,
        CouldNotCreateFileError,
        CouldNotCreateParentFolderError,
        CouldNotLaunchFileError,
        CouldNotOpenFileError,
        FileNotWritableError,
        FileNotOpenError,
    )
}


__all__ = [
    "ConfigError",
    "CouldNotCreateFileError",
    "CouldNotCreateParentFolderError",
    "CouldNotLaunchFileError",
    "CouldNotOpenFileError",
    "DocspaceError",
    "DocumentError",
    "DocumentNotFoundError",
    "DocumentsDirNotFoundError",
    "DownloadsDirNotFoundError",
    "ErrorKind",
    "FileNotOpenError",
    "FileNotWritableError",
    "FolderNotFoundError",
    "PicturesDirNotFoundError",
    "ProjectDirsNotFoundError",
    "ProjectIdentityNotFoundError",
    "UserDirsNotFoundError",
    "VideosDirNotFoundError",
]
