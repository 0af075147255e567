"""
Shared fixtures for the wsfinder test suite.
"""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import wsfinder
sys.path.insert(0, str(Path(__file__).parent.parent))

from wsfinder import WorkspaceSearcher
from wsfinder.types import SearchConfig


class FakeLookup:
    """Deterministic phonetic table for tests that need exact reading sets."""

    def __init__(self, table: dict[str, list[str]]):
        self._table = table

    def __call__(self, ch: str) -> list[str]:
        return self._table.get(ch, [])


FAKE_TABLE = {
    "长": ["chang", "zhang"],
    "城": ["cheng"],
    "乐": ["le", "yue"],
    "行": ["xing", "hang", "heng"],
    "银": ["yin"],
}


@pytest.fixture(scope="session")
def searcher():
    return WorkspaceSearcher()


@pytest.fixture
def fake_lookup():
    return FakeLookup(FAKE_TABLE)


@pytest.fixture
def fake_searcher(fake_lookup):
    """Searcher over a small fixed table of heteronyms."""
    return WorkspaceSearcher(SearchConfig.create_default(), lookup=fake_lookup)


@pytest.fixture
def make_tree(tmp_path):
    """Create subdirectories (and optionally plain files) under a fresh root."""

    def _make(dirs, files=(), name="root"):
        root = tmp_path / name
        root.mkdir()
        for d in dirs:
            (root / d).mkdir()
        for f in files:
            (root / f).write_text("x", encoding="utf-8")
        return root

    return _make
