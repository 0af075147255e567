"""
Matching service for workspace search.

Ranks candidate directory names against a query in two phases:

1. **Containment**: a name is accepted when its lowercase form, its normalized
   form, or any of its pinyin variants contains the query. Any hit ends the
   search; accepted names come back in lexicographic order.
2. **Fuzzy fallback**: only when containment finds nothing. Every candidate is
   scored by longest common substring, longest common subsequence and edit
   distance, each taken at its best across the literal and pinyin forms, and
   the top entries are returned.

The phases never blend: a precise hit is never ranked against fuzzy noise.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from wsfinder.paths import logger
from wsfinder.services.normalization import NormalizationService
from wsfinder.services.similarity import (
    levenshtein_distance,
    longest_common_subsequence_len,
    longest_common_substring_len,
)
from wsfinder.services.transliteration import TransliterationService
from wsfinder.types import CandidateScore, SearchConfig, SearchOutcome


@dataclass(frozen=True)
class CandidateForms:
    """Derived comparison forms of one candidate name, built per call."""

    name: str
    lower: str
    key: str
    full: frozenset[str]
    initials: frozenset[str]


@dataclass(frozen=True)
class QueryForms:
    raw: str
    lower: str
    key: str


class MatchingService:
    """Containment-first, fuzzy-fallback ranking over a candidate snapshot."""

    def __init__(
        self,
        config: SearchConfig,
        normalizer: NormalizationService,
        transliterator: TransliterationService,
    ):
        self._config = config
        self._normalizer = normalizer
        self._transliterator = transliterator

    # ---------- public API ----------
    def search(self, query: str, candidates: Iterable[str]) -> list[str]:
        """Ordered names matching ``query``."""
        return self.search_with_details(query, candidates).as_list()

    def search_with_details(self, query: str, candidates: Iterable[str]) -> SearchOutcome:
        """Ordered names matching ``query`` plus the phase that produced them."""
        names = list(candidates)
        if not names:
            return SearchOutcome.empty()

        if not query:
            return SearchOutcome.listing(names)

        q = self._query_forms(query)
        forms = [self.candidate_forms(name) for name in names]

        accepted = [f.name for f in forms if self._contains(f, q)]
        if accepted:
            logger.debug("'%s': %d containment matches", query, len(accepted))
            return SearchOutcome.containment(accepted)

        top = rank_scores([self._score(f, q) for f in forms], self._config.fallback_limit)
        logger.debug("'%s': no containment match, fuzzy fallback over %d names", query, len(forms))
        return SearchOutcome.fuzzy(top)

    def score_candidate(self, query: str, name: str) -> CandidateScore:
        """Fuzzy score of a single name, as used by the fallback phase."""
        return self._score(self.candidate_forms(name), self._query_forms(query))

    def candidate_forms(self, name: str) -> CandidateForms:
        return CandidateForms(
            name=name,
            lower=self._normalizer.lower(name),
            key=self._normalizer.key(name),
            full=frozenset(self._transliterator.full_spellings(name)),
            initials=frozenset(self._transliterator.initials(name)),
        )

    # ---------- internal ----------
    def _query_forms(self, query: str) -> QueryForms:
        return QueryForms(raw=query, lower=self._normalizer.lower(query), key=self._normalizer.key(query))

    def _contains(self, forms: CandidateForms, q: QueryForms) -> bool:
        if q.lower in forms.lower:
            return True
        if q.key and q.key in forms.key:
            return True
        if any(q.lower in variant for variant in forms.full):
            return True
        return any(q.lower in variant for variant in forms.initials)

    def _score(self, forms: CandidateForms, q: QueryForms) -> CandidateScore:
        pairs: list[tuple[str, str]] = [(forms.key, q.key)]
        pairs.extend((variant, q.lower) for variant in forms.full)
        pairs.extend((variant, q.lower) for variant in forms.initials)

        # Each best value is taken independently; they may come from different forms.
        return CandidateScore(
            name=forms.name,
            substring=max(longest_common_substring_len(a, b) for a, b in pairs),
            subsequence=max(longest_common_subsequence_len(a, b) for a, b in pairs),
            edit_distance=min(levenshtein_distance(a, b) for a, b in pairs),
        )


def rank_scores(scores: Sequence[CandidateScore], limit: int) -> list[CandidateScore]:
    """Order scores the way the fallback phase does and keep the first ``limit``."""
    return sorted(scores, key=CandidateScore.sort_key)[:limit]
