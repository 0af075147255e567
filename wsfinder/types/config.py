"""
Configuration for workspace search.

All tunables live in one immutable object that is injected into every service.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from wsfinder.paths import resolve_config_path


@dataclass(frozen=True)
class SearchConfig:
    """Immutable search configuration."""

    # Number of names kept by the fuzzy fallback phase
    fallback_limit: int

    # Cap on enumerated candidates; None means no cap
    max_candidates: int | None

    # Names expanding past this many pinyin variants are logged
    variant_warning_threshold: int

    # JSON settings file holding the search roots
    config_path: Path
    directories_key: str

    @classmethod
    def create_default(cls) -> SearchConfig:
        """Factory method for the default configuration."""
        return cls(
            fallback_limit=5,
            max_candidates=None,
            variant_warning_threshold=256,
            config_path=resolve_config_path(),
            directories_key="searchDirectories",
        )

    def with_fallback_limit(self, limit: int) -> SearchConfig:
        if limit < 0:
            raise ValueError(f"fallback limit must be >= 0, got {limit}")
        return replace(self, fallback_limit=limit)

    def with_max_candidates(self, max_candidates: int | None) -> SearchConfig:
        if max_candidates is not None and max_candidates < 0:
            raise ValueError(f"max_candidates must be >= 0, got {max_candidates}")
        return replace(self, max_candidates=max_candidates)

    def with_config_path(self, path: str | Path) -> SearchConfig:
        return replace(self, config_path=Path(path).expanduser())
