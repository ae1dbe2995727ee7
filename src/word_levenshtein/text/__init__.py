"""Input normalisation: case folding, special characters, word splitting."""

from __future__ import annotations

from word_levenshtein.text.normalizer import TextNormalizer
from word_levenshtein.text.words import WordSequence

__all__ = ["TextNormalizer", "WordSequence"]
