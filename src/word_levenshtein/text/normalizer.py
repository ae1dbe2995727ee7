"""TextNormalizer: turns raw input text into a ``WordSequence``.

Processing pipeline (applied in order):

1. Lower-case the text (plain mode with IGNORE_CASE only; phonetic symbols
   are case-sensitive).
2. Remove special characters when STRIP is selected.  Character classes are
   ASCII-only, so anything outside ``[A-Za-z0-9_]`` and whitespace counts as
   special.  Phonetic mode keeps the XSAMPA marks ``: \\ } @ & ` ?`` and
   removes the silence glyph ``0`` instead.
3. Split on whitespace runs, or collapse the whole text into one word when
   ONE_WORD is selected.

Empty or whitespace-only text yields an empty sequence.
"""

from __future__ import annotations

import re

from word_levenshtein.algorithm.config import ComparisonConfig
from word_levenshtein.text.words import WordSequence

__all__ = ["TextNormalizer"]

_PLAIN_SPECIAL = re.compile(r"[^\w\s]", re.ASCII)

_PHONETIC_SPECIAL = re.compile(r"0|[^\w\s:\\}@&`?]", re.ASCII)

_WHITESPACE = re.compile(r"\s+", re.ASCII)


class TextNormalizer:
    """Normalises texts according to one ``ComparisonConfig``.

    Example usage:
        normalizer = TextNormalizer(ComparisonConfig(case=CaseMode.IGNORE_CASE))
        normalizer.normalize("A bird, in the hand!").words
        # ('a', 'bird', 'in', 'the', 'hand')
    """

    def __init__(self, config: ComparisonConfig) -> None:
        self._config = config

    def normalize(self, text: str) -> WordSequence:
        cleaned = text
        if not self._config.use_phonetic and not self._config.mind_case:
            cleaned = cleaned.lower()
        if self._config.ignore_special:
            pattern = _PHONETIC_SPECIAL if self._config.use_phonetic else _PLAIN_SPECIAL
            cleaned = pattern.sub("", cleaned)

        cleaned = cleaned.strip()
        if not cleaned:
            return WordSequence(text, ())
        if self._config.one_word:
            return WordSequence(text, (_WHITESPACE.sub(" ", cleaned),))
        return WordSequence(text, tuple(_WHITESPACE.split(cleaned)))
