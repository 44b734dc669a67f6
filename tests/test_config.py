from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from docspace.config import (
    ProjectIdentity,
    SettingsValidationError,
    configure,
    get_settings,
    load_settings,
)
from docspace.core.errors import ConfigError
from docspace.core.logger import get_logger


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_packaged_defaults() -> None:
    settings = load_settings()
    assert settings.logging.level == "INFO"
    assert settings.logging.console is True
    assert settings.logging.directory is None
    assert settings.project is None
    assert settings.encoding == "utf-8"


def test_override_file_is_merged(tmp_path: Path) -> None:
    override = _write(
        tmp_path / "docspace.yaml",
        "logging:\n"
        "  level: debug\n"
        "project:\n"
        "  qualifier: com\n"
        "  organization: example\n"
        "  application: Spidey\n",
    )

    settings = load_settings(override)

    assert settings.logging.level == "DEBUG"
    assert settings.logging.console is True
    assert settings.project == ProjectIdentity("com", "example", "Spidey")


@pytest.mark.parametrize(
    "text",
    [
        "logging:\n  level: LOUD\n",
        "logging:\n  console: maybe\n",
        "logging: []\n",
        "project:\n  qualifier: com\n",
        "project:\n  application: 5\n",
        "text:\n  encoding: not-a-codec\n",
    ],
)
def test_invalid_settings(tmp_path: Path, text: str) -> None:
    with pytest.raises(SettingsValidationError):
        load_settings(_write(tmp_path / "bad.yaml", text))


def test_unreadable_files(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "absent.yaml")
    with pytest.raises(ConfigError):
        load_settings(_write(tmp_path / "list.yaml", "- a\n- b\n"))
    with pytest.raises(ConfigError):
        load_settings(_write(tmp_path / "broken.yaml", "logging: [unclosed\n"))


def test_configure_replaces_active_settings(tmp_path: Path) -> None:
    override = _write(tmp_path / "docspace.yaml", "text:\n  encoding: latin-1\n")
    configure(override)
    assert get_settings().encoding == "latin-1"

    configure(None)
    assert get_settings().encoding == "utf-8"


def test_log_directory_enables_file_logging(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    override = _write(
        tmp_path / "docspace.yaml",
        f"logging:\n  console: false\n  directory: {log_dir.as_posix()}\n",
    )
    configure(override)

    logger = get_logger("session")
    logger.warning("session.test value=%s", 1)
    for handler in logging.getLogger("docspace").handlers:
        handler.flush()

    log_file = log_dir / "docspace.log"
    assert log_file.exists()
    assert "session.test value=1" in log_file.read_text(encoding="utf-8")
    assert logger.name == "docspace.session"


def test_logger_level_follows_settings(tmp_path: Path) -> None:
    configure(_write(tmp_path / "docspace.yaml", "logging:\n  level: ERROR\n"))
    assert get_logger().level == logging.ERROR


def test_console_logging_goes_to_stdout() -> None:
    logger = get_logger()
    consoles = [
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)
    ]
    assert len(consoles) == 1
    assert consoles[0].stream is sys.stdout
