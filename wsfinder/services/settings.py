"""
Search-directory settings for workspace search.

Reads the list of search roots from the JSON settings file, e.g.::

    {"searchDirectories": ["~/workspaces", "D:/projects"]}
"""
from __future__ import annotations

import json
from pathlib import Path

from wsfinder.paths import logger


class ConfigError(ValueError):
    """Raised when the settings file exists but cannot be used."""


def load_search_directories(path: str | Path, key: str = "searchDirectories") -> list[str]:
    """Return the search roots stored under ``key``; a missing file means no roots."""
    path = Path(path).expanduser()
    if not path.exists():
        logger.debug("No settings file at %s", path)
        return []

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})") from e
    except OSError as e:
        raise ConfigError(f"{path}: cannot read settings ({e})") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")

    raw = data.get(key, [])
    if not isinstance(raw, list):
        raise ConfigError(f"{path}: '{key}' must be a list of paths")

    directories = []
    for item in raw:
        if isinstance(item, str) and item.strip():
            directories.append(str(Path(item.strip()).expanduser()))
        else:
            logger.debug("Ignoring search directory entry %r in %s", item, path)
    return directories
