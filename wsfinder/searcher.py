"""
Workspace Search Module

This module finds workspace directories by name, tolerating partial input,
separator and case differences, and Latin-letter queries against directory names
written in Chinese characters.

## Overview

The core functionality is provided by the `WorkspaceSearcher` class, which runs
a short pipeline per call:

1. **Enumeration**: list the immediate subdirectories of each search root
2. **Normalization**: derive lowercase and separator-free comparison keys
3. **Transliteration**: expand names into pinyin full spellings and initials,
   one variant per reading of every multi-pronunciation character
4. **Containment matching**: accept names whose literal, normalized or pinyin
   forms contain the query
5. **Fuzzy fallback**: when nothing is contained, rank every name by longest
   common substring, longest common subsequence and edit distance

## Usage Examples

```python
from wsfinder import WorkspaceSearcher

searcher = WorkspaceSearcher()

searcher.search_workspaces("", ["~/workspaces"])
# Returns: every subdirectory name, sorted

searcher.search_workspaces("myproject", ["~/workspaces"])
# Returns: ["My-Project"]  (separator and case insensitive)

searcher.search_workspaces("xmgl", ["~/workspaces"])
# Returns: ["项目管理"]  (pinyin initials)

searcher.search_workspaces("zhangcheng", ["~/workspaces"])
# Returns: ["长城"]  (长 reads both "chang" and "zhang")
```

## Architecture

- **PinyinCacheService**: character to pinyin readings, backed by pypinyin
- **TransliterationService**: full-spelling and initials variant expansion
- **MatchingService**: containment-first ranking with fuzzy fallback
- **DirectoryEnumerator**: search roots to candidate names
- **SearchConfig**: immutable configuration shared by all services

## Thread Safety

Every call works on its own snapshot of candidate names and keeps no state
between calls. The only shared structure is the memoized character to reading
table, which is deterministic, so a searcher can be used from several threads.
"""
from __future__ import annotations

from collections.abc import Iterable

from wsfinder.paths import logger
from wsfinder.services import (
    DirectoryEnumerator,
    MatchingService,
    NormalizationService,
    PhoneticLookup,
    PinyinCacheService,
    SearchConfig,
    SearchOutcome,
    TransliterationService,
    load_search_directories,
)

# ════════════════════════════════════════════════════════════════════════════════
# MAIN WORKSPACE SEARCHER CLASS
# ════════════════════════════════════════════════════════════════════════════════


class WorkspaceSearcher:
    """Main workspace search service."""

    def __init__(self, config: SearchConfig | None = None, lookup: PhoneticLookup | None = None):
        self._config = config or SearchConfig.create_default()
        self._lookup = lookup or PinyinCacheService()
        self._normalizer = NormalizationService()
        self._transliterator = TransliterationService(self._config, self._lookup)
        self._matcher = MatchingService(self._config, self._normalizer, self._transliterator)
        self._enumerator = DirectoryEnumerator(self._config)

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def matcher(self) -> MatchingService:
        return self._matcher

    # Public API methods
    def search_workspaces(self, query: str, directories: Iterable[str]) -> list[str]:
        """
        Main API method: names of subdirectories of ``directories`` matching ``query``.

        An empty query lists everything; an empty directory list finds nothing.
        """
        return self.search_workspaces_with_details(query, directories).as_list()

    def search_workspaces_with_details(self, query: str, directories: Iterable[str]) -> SearchOutcome:
        directories = list(directories)
        if not directories:
            return SearchOutcome.empty()
        candidates = self._enumerator.list_subdirectories(directories)
        return self._matcher.search_with_details(query, candidates)

    def search_many(self, queries: Iterable[str], directories: Iterable[str]) -> dict[str, list[str]]:
        """Answer several queries against one enumeration of ``directories``."""
        directories = list(directories)
        candidates = self._enumerator.list_subdirectories(directories) if directories else []
        return {query: self._matcher.search(query, candidates) for query in queries}

    def search_configured(self, query: str) -> list[str]:
        """Search the roots listed in the settings file."""
        directories = self.configured_directories()
        if not directories:
            logger.info("No search directories configured in %s", self._config.config_path)
        return self.search_workspaces(query, directories)

    def configured_directories(self) -> list[str]:
        return load_search_directories(self._config.config_path, self._config.directories_key)


_DEFAULT_SEARCHER: WorkspaceSearcher | None = None


def search_workspaces(query: str, directories: Iterable[str]) -> list[str]:
    """Search with a lazily created default `WorkspaceSearcher`."""
    global _DEFAULT_SEARCHER
    if _DEFAULT_SEARCHER is None:
        _DEFAULT_SEARCHER = WorkspaceSearcher()
    return _DEFAULT_SEARCHER.search_workspaces(query, directories)
