"""
RESPONSIBILITIES
- Carry out a creation policy against a resolved path.
- Create parent folders and exclusively create new files.
- Enforce the postcondition that the final path exists.
PROCESS OVERVIEW
1. NEVER: no side effects.
2. CREATE_IF_ABSENT: ensure parent folders, create the file if it is missing.
3. CREATE_WITH_RENAME_ON_COLLISION: ensure parent folders, choose a free name via
   docspace.core.collision, create it.
4. Outside dry runs, a path that still does not exist raises DocumentNotFoundError.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from docspace.core.collision import resolve_target
from docspace.core.errors import (
    CouldNotCreateFileError,
    CouldNotCreateParentFolderError,
    DocumentNotFoundError,
)
from docspace.core.logger import get_logger
from docspace.core.policy import CreationPolicy
from docspace.entity import path_exists


def ensure_parent_folder(path: Path) -> Path:
    """Create every missing folder above ``path`` and return the parent."""

    parent = path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CouldNotCreateParentFolderError(str(parent)) from exc
    return parent


def create_exclusive(path: Path) -> None:
    """Create an empty file at ``path``; fail if anything already exists there."""

    try:
        fd = os.open(path, os.O_CREAT | os.O_EXCL | os.O_WRONLY)
    except OSError as exc:
        raise CouldNotCreateFileError(str(path)) from exc
    os.close(fd)


def apply_policy(
    path: str | Path,
    policy: CreationPolicy,
    *,
    dry_run: bool = False,
    logger: logging.Logger | None = None,
) -> Path:
    """Return the path a document resolves to under ``policy``.

    With ``dry_run`` the same name is chosen but no folder or file is created
    and the existence postcondition is skipped.
    """

    log = logger or get_logger("creation")
    requested = Path(path)
    log.debug("document.resolve path=%s policy=%s dry_run=%s", requested, policy.value, dry_run)

    if policy.creates and not dry_run:
        ensure_parent_folder(requested)

    target = resolve_target(requested, policy)
    if target != requested and not dry_run:
        log.info("document.renamed requested=%s chosen=%s", requested, target)

    if not dry_run:
        if policy.renames or (policy is CreationPolicy.CREATE_IF_ABSENT and not path_exists(target)):
            create_exclusive(target)
            log.info("document.created path=%s", target)
        if not path_exists(target):
            raise DocumentNotFoundError(str(target))
    return target


__all__ = ["apply_policy", "create_exclusive", "ensure_parent_folder"]
