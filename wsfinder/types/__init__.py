"""
Types package for workspace search.

This package contains result types and the configuration class
used throughout the search services.
"""

from wsfinder.types.config import SearchConfig
from wsfinder.types.results import CandidateScore, SearchOutcome

__all__ = [
    "CandidateScore",
    "SearchConfig",
    "SearchOutcome",
]
