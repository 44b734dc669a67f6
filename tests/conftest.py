from __future__ import annotations

import faulthandler
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

faulthandler.enable()  # Ensure crashes emit tracebacks.

from docspace.config import ProjectIdentity, configure
import docspace.core.errors as errors
from docspace.folders import Role


_ROLE_ERRORS = {
    Role.DOCUMENTS: errors.DocumentsDirNotFoundError,
    Role.PICTURES: errors.PicturesDirNotFoundError,
    Role.VIDEOS: errors.VideosDirNotFoundError,
    Role.DOWNLOADS: errors.DownloadsDirNotFoundError,
    Role.HOME: errors.UserDirsNotFoundError,
    Role.CONFIG: errors.ProjectDirsNotFoundError,
    Role.DATA: errors.ProjectDirsNotFoundError,
}


class FakeRoleResolver:
    """Maps every role to a folder below ``base`` so tests never touch real user dirs."""

    def __init__(self, base: Path, missing: tuple[Role, ...] = ()) -> None:
        self.base = base
        self.missing = set(missing)
        self.calls: list[tuple[Role, ProjectIdentity | None]] = []

    def base_dir(self, role: Role, identity: ProjectIdentity | None = None) -> Path:
        self.calls.append((role, identity))
        if role in self.missing:
            raise _ROLE_ERRORS[role]()
        if role.app_scoped:
            if identity is None:
                raise errors.ProjectIdentityNotFoundError()
            return self.base / "apps" / str(identity) / role.value
        return self.base / role.value


@pytest.fixture(autouse=True)
def _default_settings():
    """Every test starts and ends with the packaged default settings."""

    configure(None)
    yield
    configure(None)


@pytest.fixture()
def roles(tmp_path: Path) -> FakeRoleResolver:
    return FakeRoleResolver(tmp_path / "roles")

