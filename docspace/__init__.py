"""`docspace` resolves files in well-known folders and creates them without clobbering."""

# Module responsibilities:
# - Re-export the handle, folder, policy and session APIs as one stable surface.
# - Provide package version.

from __future__ import annotations

from .config import DocspaceSettings, LoggingSettings, ProjectIdentity, configure, get_settings, load_settings
from .core.errors import (
    ConfigError,
    CouldNotCreateFileError,
    CouldNotCreateParentFolderError,
    CouldNotLaunchFileError,
    CouldNotOpenFileError,
    DocspaceError,
    DocumentError,
    DocumentNotFoundError,
    DocumentsDirNotFoundError,
    DownloadsDirNotFoundError,
    ErrorKind,
    FileNotOpenError,
    FileNotWritableError,
    FolderNotFoundError,
    PicturesDirNotFoundError,
    ProjectDirsNotFoundError,
    ProjectIdentityNotFoundError,
    UserDirsNotFoundError,
    VideosDirNotFoundError,
)
from .core.mode import Mode
from .core.policy import CreationPolicy
from .document import Document, DocumentLines, DocumentResult
from .document_map import DocumentMap, with_documents
from .entity import FileSystemEntity, PathEntity
from .folders import Folder, PlatformRoleResolver, Role, RoleResolver
from .utils.filenames import FilenameParts, ResolvedPath, decompose_filename

__all__ = [
    "ConfigError",
    "CouldNotCreateFileError",
    "CouldNotCreateParentFolderError",
    "CouldNotLaunchFileError",
    "CouldNotOpenFileError",
    "CreationPolicy",
    "DocspaceError",
    "DocspaceSettings",
    "Document",
    "DocumentError",
    "DocumentLines",
    "DocumentMap",
    "DocumentNotFoundError",
    "DocumentResult",
    "DocumentsDirNotFoundError",
    "DownloadsDirNotFoundError",
    "ErrorKind",
    "FileNotOpenError",
    "FileNotWritableError",
    "FileSystemEntity",
    "FilenameParts",
    "Folder",
    "FolderNotFoundError",
    "LoggingSettings",
    "Mode",
    "PathEntity",
    "PicturesDirNotFoundError",
    "PlatformRoleResolver",
    "ProjectDirsNotFoundError",
    "ProjectIdentity",
    "ProjectIdentityNotFoundError",
    "ResolvedPath",
    "Role",
    "RoleResolver",
    "UserDirsNotFoundError",
    "VideosDirNotFoundError",
    "configure",
    "decompose_filename",
    "get_settings",
    "load_settings",
    "with_documents",
]

__version__ = "0.1.0"
