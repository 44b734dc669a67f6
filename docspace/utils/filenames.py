"""
RESPONSIBILITIES
- Split a filename into stem, duplicate counter and extension.
- Reassemble filenames with a given duplicate counter.
PROCESS OVERVIEW
1. decompose_filename() peels the extension (last "." onwards) off the name.
2. The last "(" and last ")" of what remains bound a candidate counter.
3. The counter is kept only if "(<counter>)" is a true suffix of the stem, so
   stem + "(counter)" + extension always rebuilds the original name.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FilenameParts:
    """A filename split into ``stem``, optional ``counter`` and optional ``extension``.

    ``extension`` includes its leading dot.
    """

    stem: str
    counter: int | None = None
    extension: str | None = None

    @property
    def filename(self) -> str:
        suffix = f"({self.counter})" if self.counter is not None else ""
        return f"{self.stem}{suffix}{self.extension or ''}"

    def with_counter(self, counter: int) -> "FilenameParts":
        return replace(self, counter=counter)


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """An absolute path together with the decomposition of its last component."""

    path: Path
    parts: FilenameParts

    @property
    def stem(self) -> str:
        return self.parts.stem

    @property
    def counter(self) -> int | None:
        return self.parts.counter

    @property
    def extension(self) -> str | None:
        return self.parts.extension

    def with_counter(self, counter: int) -> "ResolvedPath":
        parts = self.parts.with_counter(counter)
        return ResolvedPath(path=self.path.with_name(parts.filename), parts=parts)


def split_extension(name: str) -> tuple[str, str | None]:
    """Return ``(name_without_extension, extension)``.

    A name without a dot, ending in a dot, or whose only dot is the leading one
    (``.bashrc``) has no extension.
    """

    index = name.rfind(".")
    if index <= 0 or index == len(name) - 1:
        return name, None
    return name[:index], name[index:]


def decompose_filename(name: str) -> FilenameParts:
    """Split ``name`` (no directory components) into its parts. Never fails."""

    stem, extension = split_extension(name)

    open_index = stem.rfind("(")
    close_index = stem.rfind(")")
    if open_index < 0 or close_index < 0:
        return FilenameParts(stem=stem, counter=None, extension=extension)

    # Bracket order is not checked; a reversed pair can never form a suffix below.
    low, high = sorted((open_index, close_index))
    try:
        counter = int(stem[low + 1 : high])
    except ValueError:
        return FilenameParts(stem=stem, counter=None, extension=extension)

    marker = f"({counter})"
    if not stem.endswith(marker):
        return FilenameParts(stem=stem, counter=None, extension=extension)
    return FilenameParts(stem=stem[: -len(marker)], counter=counter, extension=extension)


def resolve_parts(path: str | Path) -> ResolvedPath:
    """Decompose the final component of ``path``."""

    path = Path(path)
    return ResolvedPath(path=path, parts=decompose_filename(path.name))


__all__ = [
    "FilenameParts",
    "ResolvedPath",
    "decompose_filename",
    "resolve_parts",
    "split_extension",
]
