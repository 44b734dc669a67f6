"""Common capabilities shared by documents, folders and plain paths."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemEntity(Protocol):
    """Anything that can report its path, name and whether it exists.

    Implementations never raise from these methods; they return ``""`` or
    ``False`` when the value cannot be produced.
    """

    def path(self) -> str:
        """Full path of the entity. The format differs between systems."""

    def name(self) -> str:
        """Final path component, with extension if any."""

    def exists(self) -> bool:
        """Whether the entity currently exists on disk."""


def path_name(path: Path | None) -> str:
    if path is None:
        return ""
    return path.name


def path_text(path: Path | None) -> str:
    if path is None:
        return ""
    return os.fspath(path)


def path_exists(path: Path | None) -> bool:
    if path is None:
        return False
    try:
        return path.exists()
    except OSError:
        return False


@dataclass(frozen=True, slots=True)
class PathEntity:
    """Adapter giving a plain ``pathlib.Path`` the entity capabilities."""

    location: Path

    def path(self) -> str:
        return path_text(self.location)

    def name(self) -> str:
        return path_name(self.location)

    def exists(self) -> bool:
        return path_exists(self.location)


__all__ = ["FileSystemEntity", "PathEntity", "path_exists", "path_name", "path_text"]
