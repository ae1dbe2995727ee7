"""Character and phonetic aligners: weighted Damerau-Levenshtein matrices.

Both aligners return the full ``(n + 1) x (m + 1)`` float matrix for a
pair of words, where ``n`` and ``m`` are the symbol counts (characters in
plain mode, XSAMPA symbols in phonetic mode).  The bottom-right cell is
the word distance.  The whole matrix is kept so the edit path can be
reconstructed afterwards.

Fill order::

    M[i][0] = cumulative deletion cost of first[:i]
    M[0][j] = cumulative insertion cost of second[:j]
    M[i][j] = min(M[i-1][j] + delete(first[i-1]),
                  M[i][j-1] + insert(second[j-1]),
                  cross(i, j),          # match / substitution / swap
                  swap(i, j))           # phonetic transposition only
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import numpy as np

from word_levenshtein.algorithm.costs import (
    SymbolDistanceSource,
    phonetic_cross_cost,
    phonetic_swap_cost,
    plain_cross_cost,
)
from word_levenshtein.errors import UndefinedPhoneticSymbolError
from word_levenshtein.phonetics.symbols import split_symbols

if TYPE_CHECKING:
    from word_levenshtein.algorithm.config import ComparisonConfig

__all__ = ["Aligner", "CharacterAligner", "PhoneticAligner"]


class Aligner(Protocol):
    def align(self, first: str, second: str) -> np.ndarray: ...


class CharacterAligner:
    """Aligns two words character by character.

    Example::

        aligner = CharacterAligner(ComparisonConfig())
        aligner.align("kitten", "sitting")[-1, -1]   # 5.0
    """

    def __init__(self, config: ComparisonConfig) -> None:
        self._config = config

    def align(self, first: str, second: str) -> np.ndarray:
        indel = self._config.costs.indel
        n = len(first)
        m = len(second)

        matrix = np.zeros((n + 1, m + 1), dtype=float)
        matrix[:, 0] = np.arange(n + 1) * indel
        matrix[0, :] = np.arange(m + 1) * indel

        for i in range(1, n + 1):
            for j in range(1, m + 1):
                matrix[i, j] = min(
                    matrix[i - 1, j] + indel,  # delete
                    matrix[i, j - 1] + indel,  # insert
                    plain_cross_cost(matrix, first, second, i, j, self._config),
                )
        return matrix


class PhoneticAligner:
    """Aligns two words written in XSAMPA, symbol by symbol.

    Insertion and deletion of a symbol cost its silence distance;
    substitutions cost the feature distance (see ``phonetic_cross_cost``).

    Args:
        config: Comparison options; ``allow_swap`` enables transpositions.
        distances: Feature distance source, usually a
            ``PhoneticDistanceCache`` around a ``PhoneticFeatureDistance``.
    """

    def __init__(self, config: ComparisonConfig, distances: SymbolDistanceSource) -> None:
        self._config = config
        self._distances = distances

    def symbols(self, word: str) -> list[str]:
        """Split ``word`` into symbols, rejecting words without any."""
        symbols = split_symbols(word)
        if not symbols:
            raise UndefinedPhoneticSymbolError(word, "word contains no phonetic symbols")
        return symbols

    def align(self, first: str, second: str) -> np.ndarray:
        first_symbols = self.symbols(first)
        second_symbols = self.symbols(second)
        silence = self._distances.silence_distance
        n = len(first_symbols)
        m = len(second_symbols)

        # Resolving every silence distance up front surfaces undefined symbols
        # before any cell is filled.
        delete_costs = [silence(s) for s in first_symbols]
        insert_costs = [silence(s) for s in second_symbols]

        matrix = np.zeros((n + 1, m + 1), dtype=float)
        matrix[1:, 0] = np.cumsum(delete_costs)
        matrix[0, 1:] = np.cumsum(insert_costs)

        for i in range(1, n + 1):
            for j in range(1, m + 1):
                matrix[i, j] = min(
                    matrix[i - 1, j] + delete_costs[i - 1],
                    matrix[i, j - 1] + insert_costs[j - 1],
                    phonetic_cross_cost(
                        matrix, first_symbols, second_symbols, i, j, self._distances
                    ),
                    phonetic_swap_cost(
                        matrix, first_symbols, second_symbols, i, j, self._config
                    ),
                )
        return matrix
