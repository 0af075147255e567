"""
Directory enumeration service for workspace search.

Turns a list of root paths into the candidate snapshot handed to the matcher.
I/O problems never propagate: a missing or unreadable root just contributes no
candidates.
"""
from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from wsfinder.paths import logger
from wsfinder.types import SearchConfig


def _is_valid_utf8(name: str) -> bool:
    """False for names carrying surrogate escapes of undecodable bytes."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class DirectoryEnumerator:
    """Lists the immediate subdirectories of each configured root."""

    def __init__(self, config: SearchConfig):
        self._config = config

    def list_subdirectories(self, roots: Iterable[str | os.PathLike]) -> list[str]:
        """Base names of the subdirectories of every existing root, root by root."""
        names: list[str] = []
        for root in roots:
            if not os.fspath(root).strip():
                logger.debug("Skipping blank search root")
                continue
            names.extend(self._list_root(Path(root).expanduser()))

        limit = self._config.max_candidates
        if limit is not None and len(names) > limit:
            logger.warning("Truncating %d candidates to the first %d", len(names), limit)
            names = names[:limit]
        return names

    def _list_root(self, root: Path) -> list[str]:
        if not root.is_dir():
            logger.debug("Skipping search root %s: not an existing directory", root)
            return []

        found: list[str] = []
        try:
            with os.scandir(root) as entries:
                for entry in entries:
                    try:
                        if not entry.is_dir():
                            continue
                    except OSError as e:
                        logger.debug("Skipping %s: %s", entry.path, e)
                        continue
                    if not _is_valid_utf8(entry.name):
                        logger.debug("Skipping %r: name is not valid UTF-8", entry.name)
                        continue
                    found.append(entry.name)
        except OSError as e:
            logger.warning("Failed to list search root %s: %s", root, e)
            return []
        return sorted(found)
