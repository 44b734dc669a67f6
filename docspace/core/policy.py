"""Creation policies attached to a document when it is resolved."""

from __future__ import annotations

from enum import Enum


class CreationPolicy(Enum):
    """Whether resolving a document may create the backing file.

    NEVER: the file must already exist, otherwise resolution fails.

    CREATE_IF_ABSENT: create the file only when nothing exists at the path;
    an existing file is left untouched.

    CREATE_WITH_RENAME_ON_COLLISION: always create a new file. When the name is
    taken, append (1), (2), ... before the extension until a free name is found.
    """

    NEVER = "never"
    CREATE_IF_ABSENT = "create_if_absent"
    CREATE_WITH_RENAME_ON_COLLISION = "create_with_rename_on_collision"

    @property
    def creates(self) -> bool:
        return self is not CreationPolicy.NEVER

    @property
    def renames(self) -> bool:
        return self is CreationPolicy.CREATE_WITH_RENAME_ON_COLLISION


__all__ = ["CreationPolicy"]
