"""
RESPONSIBILITIES
- Represent a file as an immutable handle: alias, resolved path, creation policy.
- Build handles from a well-known Folder or from an explicit path.
- Offer per-call read/write/append/launch helpers; no file stays open between calls.
PROCESS OVERVIEW
1. Document.at() resolves Folder + filename, Document.at_path() takes a path as-is.
2. apply_policy() creates folders/files as the CreationPolicy dictates.
3. The returned Document is handed to callers or collected into a DocumentMap.
4. DocumentResult captures a construction that may have failed, so batches can
   be assembled first and checked later.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import BinaryIO, Iterator, Mapping

import typer

from docspace.config import get_settings
from docspace.core.creation import apply_policy
from docspace.core.errors import (
    CouldNotLaunchFileError,
    CouldNotOpenFileError,
    DocumentError,
    DocumentNotFoundError,
    FileNotOpenError,
    FileNotWritableError,
)
from docspace.core.logger import get_logger
from docspace.core.mode import Mode
from docspace.core.policy import CreationPolicy
from docspace.entity import path_exists, path_name, path_text
from docspace.folders import Folder, RoleResolver
from docspace.utils.filenames import split_extension


@dataclass(frozen=True, slots=True)
class Document:
    """A file identified by ``alias``, ``filepath`` and the ``policy`` used to create it.

    A Document is not the file itself. Build it with ``Document.at`` or
    ``Document.at_path``; direct instantiation skips path resolution.
    """

    alias: str
    filepath: Path
    policy: CreationPolicy = CreationPolicy.NEVER

    @classmethod
    def at(
        cls,
        location: Folder,
        filename: str,
        policy: CreationPolicy = CreationPolicy.NEVER,
        *,
        resolver: RoleResolver | None = None,
        logger: logging.Logger | None = None,
    ) -> "Document":
        """Resolve ``filename`` inside ``location``; the filename becomes the alias.

        Raises a FolderNotFoundError subclass when the role cannot be resolved and
        any other DocumentError when the policy cannot be carried out.
        """

        requested = location.join(str(filename), resolver)
        filepath = apply_policy(requested, policy, logger=logger)
        return cls(alias=requested.name, filepath=filepath, policy=policy)

    @classmethod
    def at_path(
        cls,
        path: str | os.PathLike[str],
        alias: str,
        policy: CreationPolicy = CreationPolicy.NEVER,
        *,
        logger: logging.Logger | None = None,
    ) -> "Document":
        """Use an explicit path. Prefer ``at`` unless the path comes from elsewhere."""

        filepath = apply_policy(Path(path), policy, logger=logger)
        return cls(alias=str(alias), filepath=filepath, policy=policy)

    def with_alias(self, alias: str) -> "Document":
        """Copy with a new alias. ``"_"`` keeps the document out of a DocumentMap."""

        return replace(self, alias=str(alias))

    # ------------------------------------------------------------------
    def open_file(self, mode: Mode = Mode.READ) -> BinaryIO:
        """Open the underlying file in binary ``mode``. Never creates the file."""

        try:
            fd = os.open(self.filepath, mode.os_flags())
        except OSError as exc:
            raise CouldNotOpenFileError(self.path()) from exc
        return os.fdopen(fd, mode.file_mode())

    def append(self, content: bytes) -> "Document":
        """Add ``content`` to the end of the file."""

        return self._write(Mode.APPEND, content)

    def replace_with(self, content: bytes) -> "Document":
        """Wipe the file, then write ``content``. Irreversible."""

        return self._write(Mode.REPLACE, content)

    def _write(self, mode: Mode, content: bytes) -> "Document":
        handle = self.open_file(mode)
        try:
            with handle:
                handle.write(content)
        except OSError as exc:
            raise FileNotWritableError(self.path()) from exc
        return self

    def lines(self) -> "DocumentLines":
        """Lazy, single-pass iterator over the file's text lines."""

        return DocumentLines(self.open_file(Mode.READ), self.path(), get_settings().encoding)

    def content(self) -> str:
        """The whole file decoded as text."""

        handle = self.open_file(Mode.READ)
        try:
            with handle:
                data = handle.read()
        except OSError as exc:
            raise CouldNotOpenFileError(self.path()) from exc
        return data.decode(get_settings().encoding)

    def launch_with_default_app(self) -> "Document":
        """Open the file the way a file manager would."""

        try:
            status = typer.launch(self.path())
        except OSError as exc:
            raise CouldNotLaunchFileError(self.path()) from exc
        if status != 0:
            raise CouldNotLaunchFileError(self.path())
        return self

    # ------------------------------------------------------------------
    def extension(self) -> str:
        """Extension without the dot, or ``""``."""

        _, extension = split_extension(self.name())
        return extension[1:] if extension else ""

    def path(self) -> str:
        return path_text(self.filepath)

    def name(self) -> str:
        return path_name(self.filepath)

    def exists(self) -> bool:
        return path_exists(self.filepath)

    def __str__(self) -> str:
        return f"{self.name()} at {self.path()}"

    def to_dict(self) -> dict[str, str]:
        return {"alias": self.alias, "path": self.path(), "policy": self.policy.value}

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "Document":
        """Rebuild a handle from ``to_dict`` output without touching the disk."""

        return cls(
            alias=str(payload["alias"]),
            filepath=Path(str(payload["path"])),
            policy=CreationPolicy(payload.get("policy", CreationPolicy.NEVER.value)),
        )


class DocumentLines:
    """Forward-only text lines of an opened document.

    Line terminators are stripped. Each line is decoded as it is read, so a
    decoding error surfaces on the offending line only. The file closes once the
    lines run out; iterating after an explicit ``close()`` raises FileNotOpenError.
    """

    def __init__(self, handle: BinaryIO, path: str, encoding: str = "utf-8") -> None:
        self._handle: BinaryIO | None = handle
        self._path = path
        self._encoding = encoding
        self._exhausted = False

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._handle is None:
            if self._exhausted:
                raise StopIteration
            raise FileNotOpenError(self._path)
        raw = self._handle.readline()
        if not raw:
            self._exhausted = True
            self.close()
            raise StopIteration
        if raw.endswith(b"\r\n"):
            raw = raw[:-2]
        elif raw.endswith(b"\n"):
            raw = raw[:-1]
        return raw.decode(self._encoding)

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    @property
    def closed(self) -> bool:
        return self._handle is None

    def __enter__(self) -> "DocumentLines":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def print(self) -> None:
        """Echo every remaining line to stdout."""

        for line in self:
            typer.echo(line)


@dataclass(frozen=True, slots=True)
class DocumentResult:
    """Outcome of building a Document: either ``document`` or ``error`` is set."""

    document: Document | None = None
    error: DocumentError | None = None

    @classmethod
    def at(
        cls,
        location: Folder,
        filename: str,
        policy: CreationPolicy = CreationPolicy.NEVER,
        *,
        resolver: RoleResolver | None = None,
        logger: logging.Logger | None = None,
    ) -> "DocumentResult":
        try:
            return cls(document=Document.at(location, filename, policy, resolver=resolver, logger=logger))
        except DocumentError as exc:
            return cls(error=exc)

    @classmethod
    def at_path(
        cls,
        path: str | os.PathLike[str],
        alias: str,
        policy: CreationPolicy = CreationPolicy.NEVER,
        *,
        logger: logging.Logger | None = None,
    ) -> "DocumentResult":
        try:
            return cls(document=Document.at_path(path, alias, policy, logger=logger))
        except DocumentError as exc:
            return cls(error=exc)

    @property
    def ok(self) -> bool:
        return self.document is not None

    def unwrap(self) -> Document:
        """Return the document or raise the recorded error."""

        if self.document is None:
            raise self.error if self.error is not None else DocumentNotFoundError()
        return self.document

    def alias(self, alias: str) -> "DocumentResult":
        """Set the alias of a successful result; failures pass through unchanged.

        Use ``"_"`` to keep the document out of a DocumentMap. Aliases must be
        unique within one batch.
        """

        if self.document is None:
            return self
        return replace(self, document=self.document.with_alias(alias))

    def suggest_rename(self, *, logger: logging.Logger | None = None) -> str:
        """Path a renaming creation would pick right now, e.g. ``picture(1).png``.

        A failure that was only "file not found" returns the missing path, since
        it cannot collide. Any other failure returns ``""``.
        """

        if self.document is None:
            if isinstance(self.error, DocumentNotFoundError) and self.error.path:
                return self.error.path
            return ""
        try:
            suggested = apply_policy(
                self.document.filepath,
                CreationPolicy.CREATE_WITH_RENAME_ON_COLLISION,
                dry_run=True,
                logger=logger,
            )
        except DocumentError as exc:
            (logger or get_logger("document")).error("document.suggest_failed error=%s", exc)
            return ""
        return path_text(suggested)

    # ------------------------------------------------------------------
    def path(self) -> str:
        return self.document.path() if self.document is not None else ""

    def name(self) -> str:
        return self.document.name() if self.document is not None else ""

    def exists(self) -> bool:
        return self.document.exists() if self.document is not None else False


__all__ = ["Document", "DocumentLines", "DocumentResult"]
