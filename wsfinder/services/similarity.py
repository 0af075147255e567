"""
String similarity metrics for workspace search.

All three metrics compare code points (Python ``str`` items), so Han text is
handled per character rather than per byte. Each keeps a single rolling row
sized by the shorter argument.
"""
from __future__ import annotations


def _shorter_last(a: str, b: str) -> tuple[str, str]:
    return (a, b) if len(a) >= len(b) else (b, a)


def longest_common_substring_len(a: str, b: str) -> int:
    """Length of the longest contiguous run shared by ``a`` and ``b``."""
    if not a or not b:
        return 0
    a, b = _shorter_last(a, b)
    row = [0] * (len(b) + 1)
    best = 0
    for ca in a:
        prev = 0  # diagonal: run length ending at the previous pair
        for j, cb in enumerate(b, 1):
            above = row[j]
            if ca == cb:
                row[j] = prev + 1
                if row[j] > best:
                    best = row[j]
            else:
                row[j] = 0
            prev = above
    return best


def longest_common_subsequence_len(a: str, b: str) -> int:
    """Length of the longest common, not necessarily contiguous, character ordering."""
    if not a or not b:
        return 0
    a, b = _shorter_last(a, b)
    prev = [0] * (len(b) + 1)
    curr = [0] * (len(b) + 1)
    for ca in a:
        for j, cb in enumerate(b, 1):
            if ca == cb:
                curr[j] = prev[j - 1] + 1
            else:
                curr[j] = max(prev[j], curr[j - 1])
        prev, curr = curr, prev
    return prev[len(b)]


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character inserts, deletes and substitutions."""
    if not a:
        return len(b)
    if not b:
        return len(a)
    a, b = _shorter_last(a, b)
    prev = list(range(len(b) + 1))
    curr = [0] * (len(b) + 1)
    for i, ca in enumerate(a, 1):
        curr[0] = i
        for j, cb in enumerate(b, 1):
            cost = 0 if ca == cb else 1
            curr[j] = min(
                prev[j] + 1,  # deletion
                curr[j - 1] + 1,  # insertion
                prev[j - 1] + cost,  # substitution
            )
        prev, curr = curr, prev
    return prev[len(b)]
