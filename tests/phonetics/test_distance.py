"""Tests for PhoneticFeatureDistance over the shared toy feature table."""

from __future__ import annotations

import pytest

from word_levenshtein.algorithm.config import OperationCosts
from word_levenshtein.errors import (
    FeatureProviderUnavailableError,
    PhoneticError,
    UndefinedPhoneticSymbolError,
)
from word_levenshtein.phonetics.distance import (
    INCOMPATIBLE,
    Comparable,
    Incompatible,
    PhoneticFeatureDistance,
)
from word_levenshtein.phonetics.features import FeatureTable


@pytest.fixture
def calculator(feature_table: FeatureTable) -> PhoneticFeatureDistance:
    return PhoneticFeatureDistance(feature_table, OperationCosts())


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ("a", "i", 5.0),
        ("i", "u", 3.0),
        ("a", "a:", 1.0),
        ("p", "b", 1.0),
        ("p", "t", 2.0),
        ("b", "m", 2.0),
        ("j", "w", 2.0),
        ("a", "j", 5.0),
        ("p", "j", 8.0),
    ],
)
def test_comparable_distances(
    calculator: PhoneticFeatureDistance, first: str, second: str, expected: float
) -> None:
    assert calculator.distance(first, second) == Comparable(expected)


def test_equal_symbols_are_free(calculator: PhoneticFeatureDistance) -> None:
    assert calculator.distance("a", "a") == Comparable(0.0)


def test_equal_undefined_symbols_are_free(calculator: PhoneticFeatureDistance) -> None:
    assert calculator.distance("x", "x") == Comparable(0.0)


def test_vowel_against_consonant_is_incompatible(calculator: PhoneticFeatureDistance) -> None:
    result = calculator.distance("a", "p")
    assert result is INCOMPATIBLE
    assert isinstance(result, Incompatible)


@pytest.mark.parametrize(
    ("symbol", "expected"),
    [("a", 1.0), ("a:", 2.0), ("i", 1.0), ("u", 1.0), ("p", 2.0), ("b", 2.0), ("m", 2.0)],
)
def test_silence_distance(
    calculator: PhoneticFeatureDistance, symbol: str, expected: float
) -> None:
    assert calculator.silence_distance(symbol) == pytest.approx(expected)


def test_silence_distance_falls_back_to_max_diff(calculator: PhoneticFeatureDistance) -> None:
    # "j" is both vowel and consonant, so it shares no class with silence.
    assert calculator.silence_distance("j") == pytest.approx(20.0)


def test_silence_fallback_follows_costs(feature_table: FeatureTable) -> None:
    calculator = PhoneticFeatureDistance(feature_table, OperationCosts(phonetic_max_diff=7.0))
    assert calculator.silence_distance("j") == pytest.approx(7.0)


def test_silence_of_silence(calculator: PhoneticFeatureDistance) -> None:
    assert calculator.silence_distance("0") == 0.0


def test_undefined_symbol(calculator: PhoneticFeatureDistance) -> None:
    with pytest.raises(UndefinedPhoneticSymbolError) as excinfo:
        calculator.distance("a", "x")
    assert excinfo.value.symbol == "x"
    assert str(excinfo.value) == "undefined phonetic symbol: 'x'"


def test_symbol_missing_mandatory_feature(calculator: PhoneticFeatureDistance) -> None:
    with pytest.raises(UndefinedPhoneticSymbolError, match="lacks mandatory features"):
        calculator.distance("q", "p")


def test_undefined_symbol_error_family(calculator: PhoneticFeatureDistance) -> None:
    with pytest.raises(PhoneticError):
        calculator.silence_distance("x")
    with pytest.raises(KeyError):
        calculator.silence_distance("x")


def test_requires_provider() -> None:
    with pytest.raises(FeatureProviderUnavailableError):
        PhoneticFeatureDistance(None, OperationCosts())  # type: ignore[arg-type]
