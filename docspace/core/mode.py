"""Open modes describing what a caller may do with an opened document."""

from __future__ import annotations

import os
from enum import Enum


class Mode(Enum):
    """Capabilities granted when a document's file is opened.

    READ: read only. REPLACE: wipe the file and write new content. APPEND: add
    to the end of the file. READ_REPLACE and READ_APPEND add reading to the
    corresponding write mode.
    """

    READ = "read"
    REPLACE = "replace"
    APPEND = "append"
    READ_REPLACE = "read_replace"
    READ_APPEND = "read_append"

    @property
    def readable(self) -> bool:
        return self in (Mode.READ, Mode.READ_REPLACE, Mode.READ_APPEND)

    @property
    def writable(self) -> bool:
        return self is not Mode.READ

    @property
    def appendable(self) -> bool:
        return self in (Mode.APPEND, Mode.READ_APPEND)

    @property
    def truncates(self) -> bool:
        return self in (Mode.REPLACE, Mode.READ_REPLACE)

    def os_flags(self) -> int:
        """Flags for ``os.open``. O_CREAT is never set: opening must not create files."""

        if self.readable and self.writable:
            flags = os.O_RDWR
        elif self.writable:
            flags = os.O_WRONLY
        else:
            flags = os.O_RDONLY
        if self.appendable:
            flags |= os.O_APPEND
        if self.truncates:
            flags |= os.O_TRUNC
        return flags | getattr(os, "O_BINARY", 0)

    def file_mode(self) -> str:
        """Mode string for wrapping the descriptor with ``os.fdopen``."""

        return {
            Mode.READ: "rb",
            Mode.REPLACE: "wb",
            Mode.APPEND: "ab",
            Mode.READ_REPLACE: "r+b",
            Mode.READ_APPEND: "a+b",
        }[self]


__all__ = ["Mode"]
