"""PhoneticFeatureDistance: feature-based distance between two XSAMPA symbols.

Two symbols are comparable unless they disagree on *both* class flags
(a pure vowel against a pure consonant).  For comparable symbols the
distance is the sum of absolute coordinate differences inside every class
both belong to, plus a weighted length term:

- both symbols are vowel *and* consonant: the coordinate sum is halved and
  both lengths are weighted 1.5;
- both are vowels, or neither is the silence symbol and the second is a
  consonant: both lengths are weighted 1;
- otherwise a vowel's length is weighted 1 and a non-vowel's 2.

Incompatible pairs are reported as ``INCOMPATIBLE``; callers price them as
deleting one symbol and inserting the other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from word_levenshtein.errors import FeatureProviderUnavailableError, UndefinedPhoneticSymbolError
from word_levenshtein.phonetics.symbols import SILENCE

if TYPE_CHECKING:
    from word_levenshtein.algorithm.config import OperationCosts
    from word_levenshtein.phonetics.features import FeatureVector
    from word_levenshtein.protocols import FeatureProvider

__all__ = [
    "INCOMPATIBLE",
    "Comparable",
    "Incompatible",
    "PhoneticFeatureDistance",
    "SymbolDistance",
]


@dataclass(frozen=True, slots=True)
class Comparable:
    """A finite, non-negative distance between two symbols."""

    distance: float


@dataclass(frozen=True, slots=True)
class Incompatible:
    """The two symbols share no phonetic class."""


INCOMPATIBLE = Incompatible()

SymbolDistance = Comparable | Incompatible


def _coordinate_sum(
    first: tuple[float | None, ...],
    second: tuple[float | None, ...],
) -> float:
    return sum(
        abs(a - b) for a, b in zip(first, second, strict=True) if a is not None and b is not None
    )


class PhoneticFeatureDistance:
    """Distance calculator over a ``FeatureProvider``.

    Args:
        provider: Source of feature vectors.  Must define the silence
            symbol ``"0"`` for ``silence_distance`` to work.
        costs: Operation costs; ``phonetic_max_diff`` prices a symbol whose
            classes are both incompatible with silence.
    """

    def __init__(self, provider: FeatureProvider, costs: OperationCosts) -> None:
        if provider is None:
            msg = "phonetic comparison requires a feature provider"
            raise FeatureProviderUnavailableError(msg)
        self._provider = provider
        self._costs = costs

    def features(self, symbol: str) -> FeatureVector:
        """Return the features of ``symbol`` with all mandatory slots defined."""
        vector = self._provider.features(symbol)
        if vector is None:
            raise UndefinedPhoneticSymbolError(symbol)
        if vector.vowel is None or vector.consonant is None or vector.length is None:
            raise UndefinedPhoneticSymbolError(symbol, "phonetic symbol lacks mandatory features")
        return vector

    def distance(self, first: str, second: str) -> SymbolDistance:
        """Return the feature distance from ``first`` to ``second``.

        Raises:
            UndefinedPhoneticSymbolError: A symbol is unknown or incomplete.
        """
        if first == second:
            return Comparable(0.0)

        a = self.features(first)
        b = self.features(second)

        if a.vowel != b.vowel and a.consonant != b.consonant:
            return INCOMPATIBLE

        total = 0.0
        if a.is_vowel and b.is_vowel:
            total += _coordinate_sum(a.vowel_coordinates, b.vowel_coordinates)
        if a.is_consonant and b.is_consonant:
            total += _coordinate_sum(a.consonant_coordinates, b.consonant_coordinates)

        if a.is_vowel and a.is_consonant and b.is_vowel and b.is_consonant:
            total /= 2.0
            weight_a = weight_b = 1.5
        elif (a.is_vowel and b.is_vowel) or (
            first != SILENCE and second != SILENCE and b.is_consonant
        ):
            weight_a = weight_b = 1.0
        else:
            weight_a = 1.0 if a.is_vowel else 2.0
            weight_b = 1.0 if b.is_vowel else 2.0

        # features() guarantees both lengths are defined.
        total += abs(a.length * weight_a - b.length * weight_b)  # type: ignore[operator]
        return Comparable(total)

    def silence_distance(self, symbol: str) -> float:
        """Return the cost of inserting or deleting ``symbol``."""
        result = self.distance(symbol, SILENCE)
        if isinstance(result, Incompatible):
            return self._costs.phonetic_max_diff
        return result.distance
