"""
Normalization service for workspace search.

Reduces a name to a separator- and punctuation-insensitive comparison key so
that "my-project", "my_project" and "My Project" compare alike once lowercased.
"""
from __future__ import annotations


def normalize(text: str) -> str:
    """
    Keep only ASCII letters and digits, in their original order.

    No case folding happens here; callers lowercase first. Non-ASCII characters
    (Han ideographs included) are dropped, so the key is only meaningful for
    Latin matching.
    """
    return "".join(ch for ch in text if ch.isascii() and ch.isalnum())


class NormalizationService:
    """Derives the comparison forms of queries and candidate names."""

    def lower(self, text: str) -> str:
        return text.lower()

    def key(self, text: str) -> str:
        """Lowercased, normalized form."""
        return normalize(text.lower())
