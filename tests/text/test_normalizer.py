"""Tests for TextNormalizer and WordSequence.

Covers:
- whitespace tokenisation and ONE_WORD collapsing
- case folding (plain mode with IGNORE_CASE only)
- ASCII-only special character stripping, plain and phonetic
- empty and whitespace-only input
"""

from __future__ import annotations

import pytest

from word_levenshtein.algorithm.config import (
    CaseMode,
    ComparisonConfig,
    SpecialCharacters,
    SymbolMode,
    Tokenization,
)
from word_levenshtein.text.normalizer import TextNormalizer
from word_levenshtein.text.words import WordSequence


def _words(text: str, **options: object) -> tuple[str, ...]:
    return TextNormalizer(ComparisonConfig(**options)).normalize(text).words  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Tokenisation
# ---------------------------------------------------------------------------


class TestTokenization:
    def test_splits_on_whitespace_runs(self) -> None:
        assert _words("  A bird\t in\nthe   hand ") == ("A", "bird", "in", "the", "hand")

    def test_one_word_collapses_whitespace(self) -> None:
        assert _words("a  bird\tin ", tokenization=Tokenization.ONE_WORD) == ("a bird in",)

    def test_empty_text(self) -> None:
        assert _words("") == ()

    def test_whitespace_only(self) -> None:
        assert _words(" \t\n ") == ()
        assert _words(" \t ", tokenization=Tokenization.ONE_WORD) == ()

    def test_only_special_characters(self) -> None:
        assert _words("!!! ???") == ()

    def test_keeps_original_text(self) -> None:
        normalizer = TextNormalizer(ComparisonConfig(case=CaseMode.IGNORE_CASE))
        sequence = normalizer.normalize("The Quill!")
        assert sequence.text == "The Quill!"
        assert sequence.words == ("the", "quill")


# ---------------------------------------------------------------------------
# Case handling
# ---------------------------------------------------------------------------


class TestCase:
    def test_use_case_keeps_case(self) -> None:
        assert _words("BIrD tHE") == ("BIrD", "tHE")

    def test_ignore_case_folds(self) -> None:
        assert _words("BIrD tHE", case=CaseMode.IGNORE_CASE) == ("bird", "the")

    def test_phonetic_never_folds(self) -> None:
        words = _words("gudmO:nIN", symbols=SymbolMode.PHONETIC, case=CaseMode.IGNORE_CASE)
        assert words == ("gudmO:nIN",)


# ---------------------------------------------------------------------------
# Special characters
# ---------------------------------------------------------------------------


class TestSpecialCharacters:
    def test_strip(self) -> None:
        text = "A bird! in %the% han&&d (is worth)"
        assert _words(text) == ("A", "bird", "in", "the", "hand", "is", "worth")

    def test_keep(self) -> None:
        assert _words("bird! (is)", special=SpecialCharacters.KEEP) == ("bird!", "(is)")

    def test_underscore_and_digits_are_word_characters(self) -> None:
        assert _words("snake_case 42") == ("snake_case", "42")

    @pytest.mark.parametrize(("text", "expected"), [("café", "caf"), ("naïve", "nave")])
    def test_non_ascii_is_special(self, text: str, expected: str) -> None:
        assert _words(text) == (expected,)

    def test_phonetic_keeps_xsampa_marks(self) -> None:
        words = _words("r\\`a: @} E&? t`", symbols=SymbolMode.PHONETIC)
        assert words == ("r\\`a:", "@}", "E&?", "t`")

    def test_phonetic_strips_silence_and_punctuation(self) -> None:
        assert _words("p0a, !ba", symbols=SymbolMode.PHONETIC) == ("pa", "ba")

    def test_phonetic_keep(self) -> None:
        words = _words(
            "p0a,", symbols=SymbolMode.PHONETIC, special=SpecialCharacters.KEEP
        )
        assert words == ("p0a,",)


# ---------------------------------------------------------------------------
# WordSequence
# ---------------------------------------------------------------------------


class TestWordSequence:
    def test_sequence_protocol(self) -> None:
        sequence = WordSequence("a bird", ("a", "bird"))
        assert len(sequence) == 2
        assert sequence[1] == "bird"
        assert list(sequence) == ["a", "bird"]

    def test_lengths(self) -> None:
        assert WordSequence("a bird", ("a", "bird")).lengths() == [1, 4]
