"""
Services package for workspace search.

This package contains all service classes used by the workspace
searcher, organized by domain responsibility.
"""

from wsfinder.services.cache import PhoneticLookup, PinyinCacheService
from wsfinder.services.enumeration import DirectoryEnumerator
from wsfinder.services.matching import CandidateForms, MatchingService, rank_scores
from wsfinder.services.normalization import NormalizationService, normalize
from wsfinder.services.settings import ConfigError, load_search_directories
from wsfinder.services.similarity import (
    levenshtein_distance,
    longest_common_subsequence_len,
    longest_common_substring_len,
)
from wsfinder.services.transliteration import TransliterationService
from wsfinder.types import CandidateScore, SearchConfig, SearchOutcome

__all__ = [
    "CandidateForms",
    # Types (re-exported for convenience)
    "CandidateScore",
    "ConfigError",
    "DirectoryEnumerator",
    "MatchingService",
    "NormalizationService",
    "PhoneticLookup",
    # Services
    "PinyinCacheService",
    "SearchConfig",
    "SearchOutcome",
    "TransliterationService",
    # Pure functions
    "levenshtein_distance",
    "load_search_directories",
    "longest_common_subsequence_len",
    "longest_common_substring_len",
    "normalize",
    "rank_scores",
]
