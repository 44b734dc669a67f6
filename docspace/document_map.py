"""
RESPONSIBILITIES
- Collect the documents of one unit of work behind alias lookup.
- Run that unit of work only when every document was built successfully.
PROCESS OVERVIEW
1. with_documents() walks the results in order and stops at the first failure,
   logging it; the unit of work is then never called.
2. Successful documents are keyed by alias; alias "_" is left out.
3. The unit of work receives the DocumentMap. Returning normally is success,
   raising is failure; failures are logged and never re-raised.
4. The map is closed afterwards so it cannot be used outside the unit of work.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Callable, Iterable, Iterator

from docspace.core.errors import DocumentError
from docspace.core.logger import get_logger
from docspace.document import Document, DocumentResult

SKIP_ALIAS = "_"


class DocumentMap(Mapping):
    """Read-only mapping from alias to Document.

    Any key is converted with ``str()``; an unknown alias raises KeyError.
    """

    def __init__(self, documents: Mapping[str, Document] | None = None) -> None:
        self._documents: dict[str, Document] = dict(documents or {})
        self._closed = False

    def __getitem__(self, key: object) -> Document:
        self._check_open()
        return self._documents[str(key)]

    def __iter__(self) -> Iterator[str]:
        self._check_open()
        return iter(self._documents)

    def __len__(self) -> int:
        self._check_open()
        return len(self._documents)

    def __contains__(self, key: object) -> bool:
        self._check_open()
        return str(key) in self._documents

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"{len(self._documents)} documents"
        return f"DocumentMap({state})"

    def close(self) -> None:
        self._documents.clear()
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("document map is closed")


def build_document_map(
    documents: Iterable[Document | DocumentResult],
    *,
    logger: logging.Logger | None = None,
) -> DocumentMap:
    """Key ``documents`` by alias. Raises the first recorded construction error."""

    log = logger or get_logger("session")
    entries: dict[str, Document] = {}
    for item in documents:
        document = item.unwrap() if isinstance(item, DocumentResult) else item
        if document.alias == SKIP_ALIAS:
            log.debug("session.skip alias=%s path=%s", SKIP_ALIAS, document.path())
            continue
        # Duplicate aliases: the later document wins.
        entries[document.alias] = document
    return DocumentMap(entries)


def with_documents(
    documents: Iterable[Document | DocumentResult],
    work: Callable[[DocumentMap], object],
    *,
    logger: logging.Logger | None = None,
) -> bool:
    """Run ``work`` with the documents keyed by alias.

    Returns True when ``work`` ran and returned normally. A failed document or
    an exception from ``work`` is logged and gives False.
    """

    log = logger or get_logger("session")
    try:
        document_map = build_document_map(documents, logger=log)
    except DocumentError as exc:
        log.error("session.setup_failed error=%s", exc)
        return False

    try:
        work(document_map)
    except Exception as exc:  # noqa: BLE001 - reported, never re-raised
        log.error("session.work_failed error=%s", exc, exc_info=True)
        return False
    finally:
        document_map.close()
    return True


__all__ = ["DocumentMap", "SKIP_ALIAS", "build_document_map", "with_documents"]
