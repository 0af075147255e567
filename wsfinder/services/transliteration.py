"""
Transliteration service for workspace search.

Expands a directory name into every plausible pinyin rendering, in two flavours:

- **full**: each Han character rendered as its complete spelling ("长江" -> "changjiang")
- **initials**: each Han character rendered as its first letter ("长江" -> "cj")

Characters with several readings fan out into one variant per reading, so the
number of variants is the product of the per-character reading counts. Names are
short in practice, but a name made of many heteronyms grows combinatorially;
``variant_count`` reports that product without building the variants.

ASCII letters are kept (lowercased) by both flavours. Other ASCII characters are
kept verbatim by the full flavour and skipped by the initials flavour. Non-ASCII
characters without a reading vanish.
"""
from __future__ import annotations

from wsfinder.paths import logger
from wsfinder.services.cache import PhoneticLookup
from wsfinder.types import SearchConfig


def _full_reading(reading: str) -> str:
    return reading


def _initial_reading(reading: str) -> str:
    return reading[:1]


class TransliterationService:
    """Pinyin variant expansion over an injected phonetic lookup."""

    def __init__(self, config: SearchConfig, lookup: PhoneticLookup):
        self._config = config
        self._lookup = lookup

    def full_spellings(self, text: str) -> set[str]:
        """All full-spelling renderings of ``text``, lowercase."""
        return self._expand(text, _full_reading, keep_ascii_symbols=True)

    def initials(self, text: str) -> set[str]:
        """All initials-only renderings of ``text``, lowercase."""
        return self._expand(text, _initial_reading, keep_ascii_symbols=False)

    def variant_count(self, text: str) -> int:
        """Number of variants ``text`` expands to (upper bound before deduplication)."""
        count = 1
        for ch in text:
            if not ch.isascii():
                count *= max(1, len(self._readings(ch)))
        return count

    def _readings(self, ch: str) -> list[str]:
        return [r.lower() for r in self._lookup(ch) if r]

    def _expand(self, text: str, render, *, keep_ascii_symbols: bool) -> set[str]:
        partials = {""}
        for ch in text:
            if ch.isascii():
                if ch.isalpha():
                    suffix = ch.lower()
                elif keep_ascii_symbols:
                    suffix = ch
                else:
                    continue
                partials = {p + suffix for p in partials}
                continue

            pieces = {render(r) for r in self._readings(ch)}
            pieces.discard("")
            combined = {p + piece for p in partials for piece in pieces}
            if combined:
                partials = combined

        if len(partials) > self._config.variant_warning_threshold:
            logger.debug("'%s' expanded to %d pinyin variants", text, len(partials))
        return {p.lower() for p in partials}
