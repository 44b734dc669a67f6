"""Configuration helpers for docspace.

Provides the loader for the YAML settings file with schema validation. The
packaged defaults are always loaded first and an optional user file is deep
merged on top, so a settings file only needs the keys it changes.
"""

from __future__ import annotations

import codecs
import logging
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from docspace.core.errors import ConfigError


CONFIG_DIR = Path(__file__).resolve().parent
DEFAULT_SETTINGS_PATH = CONFIG_DIR / "defaults.yaml"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsValidationError(ConfigError):
    """Raised when a settings file fails validation."""


@dataclass(frozen=True)
class LoggingSettings:
    """Where and how loudly the package logger writes."""

    level: str = "INFO"
    console: bool = True
    directory: Path | None = None

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass(frozen=True)
class ProjectIdentity:
    """Reverse-DNS style application identity, e.g. ``com.example.App``.

    ``qualifier`` is "com", ``organization`` is "example" and ``application``
    is "App". It should match the identity the application registers with the
    operating system.
    """

    qualifier: str
    organization: str
    application: str

    def __str__(self) -> str:
        return ".".join(part for part in (self.qualifier, self.organization, self.application) if part)


@dataclass(frozen=True)
class DocspaceSettings:
    """Normalized process-wide settings."""

    logging: LoggingSettings = field(default_factory=LoggingSettings)
    project: ProjectIdentity | None = None
    encoding: str = "utf-8"


_SETTINGS: DocspaceSettings | None = None


def load_settings(path: str | Path | None = None) -> DocspaceSettings:
    """Load packaged defaults, merge ``path`` on top and validate the result."""

    raw = _load_yaml(DEFAULT_SETTINGS_PATH)
    if path is not None:
        raw = _deep_merge(raw, _load_yaml(Path(path)))
    return _build_settings(raw)


def get_settings() -> DocspaceSettings:
    """Return the active settings, loading the packaged defaults on first use."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def configure(settings: DocspaceSettings | str | Path | None = None) -> DocspaceSettings:
    """Replace the active settings and rebuild the package logger.

    Passing ``None`` restores the packaged defaults.
    """

    global _SETTINGS
    if isinstance(settings, DocspaceSettings):
        _SETTINGS = settings
    else:
        _SETTINGS = load_settings(settings)

    from docspace.core.logger import reset_logger

    reset_logger()
    return _SETTINGS


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Settings file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Settings file is not valid YAML: {path}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file must contain a mapping: {path}")
    return data


def _deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        base_value = merged.get(key)
        if isinstance(base_value, dict) and isinstance(value, Mapping):
            merged[key] = _deep_merge(base_value, value)
        else:
            merged[key] = deepcopy(value)
    return merged


def _build_settings(data: Mapping[str, Any]) -> DocspaceSettings:
    return DocspaceSettings(
        logging=_build_logging(data.get("logging")),
        project=_build_project(data.get("project")),
        encoding=_build_encoding(data.get("text")),
    )


def _build_logging(node: Any) -> LoggingSettings:
    if not isinstance(node, Mapping):
        raise SettingsValidationError("logging must be a mapping")
    level = str(node.get("level", "INFO")).upper()
    if level not in _LEVELS:
        raise SettingsValidationError(f"logging.level must be one of {', '.join(_LEVELS)}, got {level}")
    console = node.get("console", True)
    if not isinstance(console, bool):
        raise SettingsValidationError("logging.console must be true or false")
    directory = node.get("directory")
    if directory is not None and not isinstance(directory, str):
        raise SettingsValidationError("logging.directory must be a path string or null")
    return LoggingSettings(
        level=level,
        console=console,
        directory=Path(directory).expanduser() if directory else None,
    )


def _build_project(node: Any) -> ProjectIdentity | None:
    if node is None:
        return None
    if not isinstance(node, Mapping):
        raise SettingsValidationError("project must be a mapping")
    parts = {key: node.get(key) for key in ("qualifier", "organization", "application")}
    if all(value is None for value in parts.values()):
        return None
    for key, value in parts.items():
        if value is not None and not isinstance(value, str):
            raise SettingsValidationError(f"project.{key} must be a string")
    if not parts["application"]:
        raise SettingsValidationError("project.application is required when a project identity is set")
    return ProjectIdentity(
        qualifier=parts["qualifier"] or "",
        organization=parts["organization"] or "",
        application=parts["application"],
    )


def _build_encoding(node: Any) -> str:
    if node is None:
        return "utf-8"
    if not isinstance(node, Mapping):
        raise SettingsValidationError("text must be a mapping")
    encoding = node.get("encoding", "utf-8")
    if not isinstance(encoding, str) or not encoding:
        raise SettingsValidationError("text.encoding must be a non-empty string")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise SettingsValidationError(f"text.encoding is not a known codec: {encoding}") from exc
    return encoding


__all__ = [
    "DEFAULT_SETTINGS_PATH",
    "DocspaceSettings",
    "LoggingSettings",
    "ProjectIdentity",
    "SettingsValidationError",
    "configure",
    "get_settings",
    "load_settings",
]
