"""
Result types for workspace search.

Immutable records describing how a search was answered.
"""
from __future__ import annotations

from dataclasses import dataclass

PHASE_EMPTY = "empty"
PHASE_ALL = "all"
PHASE_CONTAINMENT = "containment"
PHASE_FUZZY = "fuzzy"


@dataclass(frozen=True)
class CandidateScore:
    """Best fuzzy scores of one candidate name against a query."""

    name: str
    substring: int
    subsequence: int
    edit_distance: int

    def sort_key(self) -> tuple[int, int, int, str]:
        """Longest run first, then most shared characters, then fewest edits, then name."""
        return (-self.substring, -self.subsequence, self.edit_distance, self.name)


@dataclass(frozen=True)
class SearchOutcome:
    """Names returned by a search together with the phase that produced them."""

    names: tuple[str, ...]
    phase: str
    scores: tuple[CandidateScore, ...] = ()

    @classmethod
    def empty(cls) -> SearchOutcome:
        return cls(names=(), phase=PHASE_EMPTY)

    @classmethod
    def listing(cls, names: list[str]) -> SearchOutcome:
        return cls(names=tuple(sorted(names)), phase=PHASE_ALL)

    @classmethod
    def containment(cls, names: list[str]) -> SearchOutcome:
        return cls(names=tuple(sorted(names)), phase=PHASE_CONTAINMENT)

    @classmethod
    def fuzzy(cls, scores: list[CandidateScore]) -> SearchOutcome:
        return cls(names=tuple(s.name for s in scores), phase=PHASE_FUZZY, scores=tuple(scores))

    def as_list(self) -> list[str]:
        return list(self.names)
