"""
Similarity Metrics Test Suite

Known values plus the properties every pair of strings must satisfy:
- identity: a string fully matches itself
- symmetry
- subsequence length never below substring length
- empty-string boundaries
"""

import itertools

from wsfinder.services import (
    levenshtein_distance,
    longest_common_subsequence_len,
    longest_common_substring_len,
)

SAMPLE_STRINGS = ["", "a", "kitten", "sitting", "my-project", "myproject", "长城", "长江大桥", "ABCBDAB", "BDCABA", "xmgl"]

KNOWN_VALUES = [
    # (a, b, substring, subsequence, edit distance)
    ("kitten", "sitting", 3, 4, 3),
    ("ABCBDAB", "BDCABA", 2, 4, 5),
    ("abcdef", "zcdemf", 3, 4, 3),
    ("flaw", "lawn", 3, 3, 2),
    ("长江大桥", "长江", 2, 2, 2),
    ("项目管理", "管理项目", 2, 2, 4),
    ("abc", "xyz", 0, 0, 3),
]


def test_known_values():
    """Metrics agree with hand-computed values."""
    passed = 0
    failed = 0

    for a, b, substring, subsequence, edit in KNOWN_VALUES:
        got = (
            longest_common_substring_len(a, b),
            longest_common_subsequence_len(a, b),
            levenshtein_distance(a, b),
        )
        if got == (substring, subsequence, edit):
            passed += 1
        else:
            failed += 1
            print(f"FAILED: {a!r} vs {b!r}: expected {(substring, subsequence, edit)}, got {got}")

    assert failed == 0, f"Similarity tests: {failed} failures out of {len(KNOWN_VALUES)} tests"
    print(f"Similarity tests: {passed} passed, {failed} failed")


def test_identity():
    for s in SAMPLE_STRINGS:
        assert longest_common_substring_len(s, s) == len(s)
        assert longest_common_subsequence_len(s, s) == len(s)
        assert levenshtein_distance(s, s) == 0


def test_pairwise_properties():
    for a, b in itertools.product(SAMPLE_STRINGS, repeat=2):
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)
        assert longest_common_substring_len(a, b) == longest_common_substring_len(b, a)
        assert longest_common_subsequence_len(a, b) == longest_common_subsequence_len(b, a)
        assert longest_common_subsequence_len(a, b) >= longest_common_substring_len(a, b)
        assert levenshtein_distance(a, b) >= abs(len(a) - len(b))


def test_empty_boundaries():
    for s in SAMPLE_STRINGS:
        assert longest_common_substring_len(s, "") == 0
        assert longest_common_substring_len("", s) == 0
        assert longest_common_subsequence_len(s, "") == 0
        assert longest_common_subsequence_len("", s) == 0
        assert levenshtein_distance(s, "") == len(s)
        assert levenshtein_distance("", s) == len(s)


def test_code_point_granularity():
    """Han characters count as one unit each, not as their UTF-8 bytes."""
    assert levenshtein_distance("长城", "长江") == 1
    assert longest_common_substring_len("长城", "城") == 1
    assert longest_common_subsequence_len("长a城", "长城") == 2


if __name__ == "__main__":
    test_known_values()
