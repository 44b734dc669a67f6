"""
RESPONSIBILITIES
- Pick the path a document should use under a given creation policy.
- Walk (1), (2), ... duplicate counters until an unused filename is found.
PROCESS OVERVIEW
1. resolve_target() leaves the path alone unless the policy renames on collision.
2. next_free_path() decomposes the filename and bumps the counter while the
   candidate exists, starting from the counter already in the name (or 0).
3. Nothing here touches the disk beyond existence checks; creation lives in
   docspace.core.creation.
"""

from __future__ import annotations

from pathlib import Path

from docspace.core.errors import CouldNotCreateFileError
from docspace.core.policy import CreationPolicy
from docspace.entity import path_exists
from docspace.utils.filenames import ResolvedPath, resolve_parts


def next_free_path(path: str | Path) -> Path:
    """Return ``path`` if nothing exists there, else the first free ``stem(n).ext``.

    The loop is not guarded against other processes creating files between the
    check and the caller's create call.
    """

    candidate: ResolvedPath = resolve_parts(path)
    if not candidate.path.name:
        raise CouldNotCreateFileError(str(candidate.path))
    counter = candidate.counter if candidate.counter is not None else 0
    while path_exists(candidate.path):
        counter += 1
        candidate = candidate.with_counter(counter)
    return candidate.path


def resolve_target(path: str | Path, policy: CreationPolicy) -> Path:
    """Return the final path for ``policy`` without creating anything."""

    path = Path(path)
    if policy.renames:
        return next_free_path(path)
    return path


__all__ = ["next_free_path", "resolve_target"]
