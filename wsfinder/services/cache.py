"""
Phonetic lookup service for workspace search.

This module provides Han character to pinyin readings with per-character
memoisation. Multi-pronunciation characters yield every reading pypinyin knows.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cache

import pypinyin

PhoneticLookup = Callable[[str], Iterable[str]]


@cache  # one entry per unique character
def _char_to_readings(ch: str) -> tuple[str, ...]:
    rows = pypinyin.pinyin(ch, style=pypinyin.Style.NORMAL, heteronym=True, errors="ignore")
    if not rows:
        return ()
    readings: list[str] = []
    for reading in rows[0]:
        reading = reading.lower()
        if reading and reading not in readings:
            readings.append(reading)
    return tuple(readings)


class PinyinCacheService:
    """
    * deterministic, thread-safe, O(1) repeated look-ups
    * the memo only mirrors the static pypinyin dictionary; no search state
    """

    # ---------- public API ----------
    def readings(self, ch: str) -> tuple[str, ...]:
        """Plain (toneless) pinyin readings of one character, empty if unknown."""
        if ch.isascii():
            return ()
        return _char_to_readings(ch)

    def __call__(self, ch: str) -> tuple[str, ...]:
        return self.readings(ch)

    @property
    def cache_size(self) -> int:
        return _char_to_readings.cache_info().currsize
