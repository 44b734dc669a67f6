from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from docspace.core.policy import CreationPolicy
from docspace.document import Document, DocumentResult
from docspace.document_map import DocumentMap, build_document_map, with_documents
from docspace.folders import Folder, Role


def _result(tmp_path: Path, name: str, alias: str | None = None) -> DocumentResult:
    result = DocumentResult.at_path(tmp_path / name, alias or name, CreationPolicy.CREATE_IF_ABSENT)
    assert result.ok
    return result


def test_work_receives_documents_by_alias(tmp_path: Path) -> None:
    seen: dict[str, Path] = {}

    def work(docs: DocumentMap) -> None:
        seen["input"] = docs["input"].filepath
        seen["output"] = docs["output"].filepath

    ok = with_documents(
        [_result(tmp_path, "in.csv", "input"), _result(tmp_path, "out.csv", "output")],
        work,
        logger=MagicMock(),
    )

    assert ok is True
    assert seen == {"input": tmp_path / "in.csv", "output": tmp_path / "out.csv"}


def test_failure_in_batch_skips_work(tmp_path: Path, roles) -> None:
    roles.missing.add(Role.DOWNLOADS)
    logger = MagicMock()
    work = MagicMock()

    documents = [
        _result(tmp_path, "first.txt"),
        DocumentResult.at(Folder.downloads(), "second.txt", CreationPolicy.CREATE_IF_ABSENT, resolver=roles),
        _result(tmp_path, "third.txt"),
    ]
    ok = with_documents(documents, work, logger=logger)

    assert ok is False
    work.assert_not_called()
    logger.error.assert_called_once()
    message, error = logger.error.call_args.args
    assert message == "session.setup_failed error=%s"
    assert str(error) == "Downloads directory not found"


def test_skip_alias_is_left_out(tmp_path: Path) -> None:
    captured: list[list[str]] = []
    skipped = _result(tmp_path, "scratch.tmp").alias("_")

    with_documents(
        [_result(tmp_path, "kept.txt", "kept"), skipped],
        lambda docs: captured.append(sorted(docs)),
        logger=MagicMock(),
    )

    assert captured == [["kept"]]
    assert (tmp_path / "scratch.tmp").exists()


def test_work_failure_is_reported_not_raised(tmp_path: Path) -> None:
    logger = MagicMock()

    def work(docs: DocumentMap) -> None:
        docs["not-there"]

    ok = with_documents([_result(tmp_path, "a.txt", "a")], work, logger=logger)

    assert ok is False
    logger.error.assert_called_once()
    assert logger.error.call_args.args[0] == "session.work_failed error=%s"
    assert logger.error.call_args.kwargs == {"exc_info": True}


def test_map_is_closed_after_work(tmp_path: Path) -> None:
    leaked: list[DocumentMap] = []
    with_documents([_result(tmp_path, "a.txt", "a")], leaked.append, logger=MagicMock())

    document_map = leaked[0]
    assert document_map.closed
    with pytest.raises(RuntimeError, match="document map is closed"):
        document_map["a"]


def test_return_value_is_ignored(tmp_path: Path) -> None:
    assert with_documents([_result(tmp_path, "a.txt")], lambda docs: None, logger=MagicMock())
    assert with_documents([_result(tmp_path, "b.txt")], lambda docs: 0, logger=MagicMock())


def test_keys_are_converted_to_text(tmp_path: Path) -> None:
    document_map = build_document_map(
        [_result(tmp_path, "one.txt", "1"), Document.at_path(tmp_path / "two.txt", "two", CreationPolicy.CREATE_IF_ABSENT)],
        logger=MagicMock(),
    )

    assert document_map[1].name() == "one.txt"
    assert document_map["two"].name() == "two.txt"
    assert 1 in document_map
    assert len(document_map) == 2
    with pytest.raises(KeyError):
        document_map["three"]


def test_duplicate_alias_last_wins(tmp_path: Path) -> None:
    document_map = build_document_map(
        [_result(tmp_path, "old.txt", "report"), _result(tmp_path, "new.txt", "report")],
        logger=MagicMock(),
    )
    assert list(document_map) == ["report"]
    assert document_map["report"].name() == "new.txt"


def test_documents_can_be_written_inside_work(tmp_path: Path) -> None:
    def work(docs: DocumentMap) -> None:
        docs["log"].append(b"started\n")
        docs["log"].append(b"finished\n")

    with_documents([_result(tmp_path, "run.log", "log")], work, logger=MagicMock())

    assert (tmp_path / "run.log").read_bytes() == b"started\nfinished\n"


@pytest.mark.parametrize(
    "policy", [CreationPolicy.NEVER, CreationPolicy.CREATE_WITH_RENAME_ON_COLLISION]
)
def test_name_too_long_is_reported_not_raised(tmp_path: Path, policy: CreationPolicy) -> None:
    result = DocumentResult.at_path(tmp_path / ("x" * 300 + ".txt"), "long", policy)
    assert not result.ok

    logger = MagicMock()
    work = MagicMock()
    assert with_documents([result], work, logger=logger) is False
    work.assert_not_called()
    logger.error.assert_called_once()
