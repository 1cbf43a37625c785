"""Locate the ``layerguard.toml`` in effect for an invocation.

Three sources, first match wins:

1. an explicit path (``--config``), which must exist;
2. the ``LAYERGUARD_CONFIG`` environment variable, which must exist;
3. the nearest ``layerguard.toml`` found walking up from the start directory.

An explicit path that does not exist is an error, never a fallback to
discovery.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "layerguard.toml"
CONFIG_ENV_VAR = "LAYERGUARD_CONFIG"


class ConfigNotFoundError(FileNotFoundError):
    """An explicitly requested config file does not exist."""

    def __init__(self, path: Path, source: str) -> None:
        super().__init__(f"Config file not found: {path} (from {source})")
        self.path = path
        self.source = source


def find_config(start: Path | None = None, *, explicit: str | Path | None = None) -> Path | None:
    """Return the config file to use, or None when the project has none.

    Raises:
        ConfigNotFoundError: If *explicit* or ``LAYERGUARD_CONFIG`` names a
            file that does not exist.
    """
    if explicit:
        return _require(Path(explicit), "--config")

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _require(Path(env_path), CONFIG_ENV_VAR)

    return _walk_up(start or Path.cwd())


def _require(path: Path, source: str) -> Path:
    if not path.is_file():
        raise ConfigNotFoundError(path, source)
    return path


def _walk_up(start: Path) -> Path | None:
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
