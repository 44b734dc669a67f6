from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from docspace.config import get_settings


_LOGGER: logging.Logger | None = None


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the configured package logger, or a child of it when ``name`` is given.

    Console output goes to stdout; a rotating ``docspace.log`` is added when the
    active settings name a log directory. Configuration happens once per process
    until ``reset_logger()`` is called.
    """
    global _LOGGER
    if _LOGGER is None:
        _LOGGER = _build_logger()
    if name:
        return _LOGGER.getChild(name)
    return _LOGGER


def reset_logger() -> None:
    """Drop handlers so the next ``get_logger()`` call rebuilds them from settings."""
    global _LOGGER
    logger = logging.getLogger("docspace")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _LOGGER = None


def _build_logger() -> logging.Logger:
    settings = get_settings().logging

    logger = logging.getLogger("docspace")
    logger.setLevel(settings.level_number)
    logger.propagate = False

    fmt = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if settings.directory is not None:
        settings.directory.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.directory / "docspace.log",
            maxBytes=2 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    if settings.console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(fmt)
        logger.addHandler(console)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
