"""Per-cell cost rules for the weighted Damerau-Levenshtein alignment.

A cell ``(i, j)`` of an alignment matrix holds the cheapest cost of turning
the first ``i`` symbols of one word into the first ``j`` symbols of the
other.  Insertions and deletions come from the left and upper neighbours;
the functions here price the remaining "cross" move, which is a match, a
substitution, or a transposition jumping back two rows and two columns.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

import numpy as np

from word_levenshtein.phonetics.distance import Incompatible
from word_levenshtein.phonetics.symbols import SILENCE

if TYPE_CHECKING:
    from word_levenshtein.algorithm.config import ComparisonConfig
    from word_levenshtein.phonetics.distance import SymbolDistance


class SymbolDistanceSource(Protocol):
    """Anything exposing the phonetic distance calculator surface."""

    def distance(self, first: str, second: str) -> SymbolDistance: ...

    def silence_distance(self, symbol: str) -> float: ...


def _transposed(
    first: Sequence[str],
    second: Sequence[str],
    i: int,
    j: int,
    fold: bool = False,
) -> bool:
    """True when symbols i-1, i-2 of ``first`` equal j-2, j-1 of ``second``."""
    if i < 2 or j < 2:
        return False
    pairs = ((first[i - 1], second[j - 2]), (first[i - 2], second[j - 1]))
    if fold:
        return all(a.lower() == b.lower() for a, b in pairs)
    return all(a == b for a, b in pairs)


def plain_cross_cost(
    matrix: np.ndarray,
    first: str,
    second: str,
    i: int,
    j: int,
    config: ComparisonConfig,
) -> float:
    """Cost of reaching cell ``(i, j)`` through a match, substitution or swap.

    Rules, first applicable wins:

    1. equal characters: free;
    2. swapping allowed and the characters are transposed: ``swap``;
    3. case-sensitive and the characters differ only in case: ``case_swap``;
    4. case-sensitive and the characters are transposed ignoring case:
       ``case_swap`` from two cells back;
    5. otherwise: ``substitution``.
    """
    costs = config.costs
    a = first[i - 1]
    b = second[j - 1]

    if a == b:
        return float(matrix[i - 1, j - 1])
    if config.allow_swap and _transposed(first, second, i, j):
        return float(matrix[i - 2, j - 2]) + costs.swap
    if config.mind_case:
        if a.lower() == b.lower():
            return float(matrix[i - 1, j - 1]) + costs.case_swap
        if _transposed(first, second, i, j, fold=True):
            return float(matrix[i - 2, j - 2]) + costs.case_swap
    return float(matrix[i - 1, j - 1]) + costs.substitution


def phonetic_cross_cost(
    matrix: np.ndarray,
    first: Sequence[str],
    second: Sequence[str],
    i: int,
    j: int,
    distances: SymbolDistanceSource,
) -> float:
    """Cost of reaching cell ``(i, j)`` through a symbol match or substitution.

    A substitution costs the feature distance of the two symbols.  The
    silence symbol costs the other symbol's silence distance, and an
    incompatible pair costs deleting one symbol plus inserting the other.
    """
    a = first[i - 1]
    b = second[j - 1]
    diagonal = float(matrix[i - 1, j - 1])

    if a == b:
        return diagonal
    if a == SILENCE:
        return diagonal + distances.silence_distance(b)
    if b == SILENCE:
        return diagonal + distances.silence_distance(a)

    result = distances.distance(a, b)
    if isinstance(result, Incompatible):
        return diagonal + distances.silence_distance(a) + distances.silence_distance(b)
    return diagonal + result.distance


def phonetic_swap_cost(
    matrix: np.ndarray,
    first: Sequence[str],
    second: Sequence[str],
    i: int,
    j: int,
    config: ComparisonConfig,
) -> float:
    """Cost of a phonetic transposition into ``(i, j)``; ``inf`` when not applicable."""
    if config.allow_swap and _transposed(first, second, i, j):
        return float(matrix[i - 2, j - 2]) + config.costs.phonetic_swap
    return float("inf")
