"""
RESPONSIBILITIES
- Describe well-known folders (user documents, pictures, ..., app config/data).
- Resolve a folder plus subdirectories to an absolute base path.
PROCESS OVERVIEW
1. Callers build a Folder, e.g. Folder.pictures("Screenshots") or
   Folder.data("Filters").with_id("com", "example", "App").
2. Folder.join() asks a RoleResolver for the role's base directory.
3. Subdirectories and the filename are appended in order.
4. Role lookups are repeated on every call; nothing is cached.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Callable, Protocol

import platformdirs

from docspace.config import ProjectIdentity, get_settings
from docspace.core.errors import (
    DocumentError,
    DocumentsDirNotFoundError,
    DownloadsDirNotFoundError,
    FolderNotFoundError,
    PicturesDirNotFoundError,
    ProjectDirsNotFoundError,
    ProjectIdentityNotFoundError,
    UserDirsNotFoundError,
    VideosDirNotFoundError,
)
from docspace.entity import path_exists, path_name, path_text


class Role(Enum):
    """Well-known folders likely to exist on most systems."""

    DOCUMENTS = "documents"
    PICTURES = "pictures"
    VIDEOS = "videos"
    DOWNLOADS = "downloads"
    HOME = "home"
    CONFIG = "config"
    DATA = "data"

    @property
    def app_scoped(self) -> bool:
        return self in (Role.CONFIG, Role.DATA)


class RoleResolver(Protocol):
    """Maps a role to its base directory or raises a FolderNotFoundError."""

    def base_dir(self, role: Role, identity: ProjectIdentity | None = None) -> Path:
        ...


_USER_LOOKUPS: dict[Role, tuple[str, type[FolderNotFoundError]]] = {
    Role.DOCUMENTS: ("user_documents_dir", DocumentsDirNotFoundError),
    Role.PICTURES: ("user_pictures_dir", PicturesDirNotFoundError),
    Role.VIDEOS: ("user_videos_dir", VideosDirNotFoundError),
    Role.DOWNLOADS: ("user_downloads_dir", DownloadsDirNotFoundError),
}

_PROJECT_LOOKUPS: dict[Role, str] = {
    Role.CONFIG: "user_config_dir",
    Role.DATA: "user_data_dir",
}


class PlatformRoleResolver:
    """Resolve roles with the operating system's conventions via platformdirs."""

    def base_dir(self, role: Role, identity: ProjectIdentity | None = None) -> Path:
        if role.app_scoped:
            return self._project_dir(role, identity)
        home = self._home()
        if role is Role.HOME:
            return home

        lookup_name, error_cls = _USER_LOOKUPS[role]
        lookup: Callable[[], str] = getattr(platformdirs, lookup_name)
        try:
            value = lookup()
        except (OSError, RuntimeError, KeyError) as exc:
            raise error_cls() from exc
        if not value:
            raise error_cls()
        return Path(value)

    @staticmethod
    def _home() -> Path:
        try:
            return Path.home()
        except (RuntimeError, KeyError) as exc:
            raise UserDirsNotFoundError() from exc

    @staticmethod
    def _project_dir(role: Role, identity: ProjectIdentity | None) -> Path:
        # platformdirs has no qualifier argument; only organization and application are used.
        if identity is None:
            raise ProjectIdentityNotFoundError()
        if not identity.application.strip():
            raise ProjectDirsNotFoundError()
        lookup: Callable[..., str] = getattr(platformdirs, _PROJECT_LOOKUPS[role])
        try:
            value = lookup(appname=identity.application, appauthor=identity.organization or None)
        except (OSError, RuntimeError, KeyError) as exc:
            raise ProjectDirsNotFoundError() from exc
        if not value:
            raise ProjectDirsNotFoundError()
        return Path(value)


DEFAULT_RESOLVER: RoleResolver = PlatformRoleResolver()


@dataclass(frozen=True, slots=True)
class Folder:
    """A well-known folder plus optional subdirectories below it.

    App-scoped roles (CONFIG, DATA) need a ProjectIdentity, given with
    ``with_id`` or taken from the ``project`` settings.
    """

    role: Role
    subdirs: tuple[str, ...] = ()
    identity: ProjectIdentity | None = None

    @classmethod
    def documents(cls, *subdirs: str) -> "Folder":
        return cls(Role.DOCUMENTS, tuple(subdirs))

    @classmethod
    def pictures(cls, *subdirs: str) -> "Folder":
        return cls(Role.PICTURES, tuple(subdirs))

    @classmethod
    def videos(cls, *subdirs: str) -> "Folder":
        return cls(Role.VIDEOS, tuple(subdirs))

    @classmethod
    def downloads(cls, *subdirs: str) -> "Folder":
        return cls(Role.DOWNLOADS, tuple(subdirs))

    @classmethod
    def home(cls, *subdirs: str) -> "Folder":
        return cls(Role.HOME, tuple(subdirs))

    @classmethod
    def config(cls, *subdirs: str) -> "Folder":
        return cls(Role.CONFIG, tuple(subdirs))

    @classmethod
    def data(cls, *subdirs: str) -> "Folder":
        return cls(Role.DATA, tuple(subdirs))

    def with_id(self, qualifier: str, organization: str, application: str) -> "Folder":
        """Attach the application identity, e.g. ("com", "example", "App") for com.example.App."""

        if not self.role.app_scoped:
            raise ValueError(f"{self.role.value} folders do not take an application identity")
        identity = ProjectIdentity(qualifier=qualifier, organization=organization, application=application)
        return replace(self, identity=identity)

    # ------------------------------------------------------------------
    def base_path(self, resolver: RoleResolver | None = None) -> Path:
        """Role directory with the subdirectories appended."""

        resolver = resolver or DEFAULT_RESOLVER
        identity = self.identity
        if self.role.app_scoped and identity is None:
            identity = get_settings().project
            if identity is None:
                raise ProjectIdentityNotFoundError()
        base = resolver.base_dir(self.role, identity)
        return base.joinpath(*self.subdirs)

    def join(self, filename: str, resolver: RoleResolver | None = None) -> Path:
        return self.base_path(resolver) / str(filename)

    def _safe_base(self) -> Path | None:
        try:
            return self.base_path()
        except DocumentError:
            return None

    # ------------------------------------------------------------------
    def path(self) -> str:
        return path_text(self._safe_base())

    def name(self) -> str:
        return path_name(self._safe_base())

    def exists(self) -> bool:
        return path_exists(self._safe_base())


__all__ = [
    "DEFAULT_RESOLVER",
    "Folder",
    "PlatformRoleResolver",
    "ProjectIdentity",
    "Role",
    "RoleResolver",
]
