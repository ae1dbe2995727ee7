"""Alignment index: rescales a word distance into a similarity in [0, 1].

The raw distance in the bottom-right cell of an alignment matrix is divided
by the worst case for the two symbol counts ``n`` and ``m`` (the matrix is
``(n + 1) x (m + 1)``)::

    plain:    worst = substitution * min(n, m) + indel * |n - m|
    phonetic: worst = max_diff * 2 * min(n, m) + max_diff * |n - m|

    index = 1 - distance / worst

A zero worst case (both words empty, or all relevant costs zero) yields
1.0 for a zero distance and 0.0 otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np

    from word_levenshtein.algorithm.config import ComparisonConfig


def worst_case_distance(n: int, m: int, config: ComparisonConfig) -> float:
    """Largest distance the alignment of ``n`` and ``m`` symbols is normalised by."""
    costs = config.costs
    shorter = min(n, m)
    difference = abs(n - m)
    if config.use_phonetic:
        return costs.phonetic_max_diff * 2.0 * shorter + costs.phonetic_max_diff * difference
    return costs.substitution * shorter + costs.indel * difference


def normalize_distance(distance: float, n: int, m: int, config: ComparisonConfig) -> float:
    """Convert a raw word distance to the alignment index."""
    worst = worst_case_distance(n, m, config)
    if worst == 0.0:
        return 1.0 if distance == 0.0 else 0.0
    return 1.0 - distance / worst


def alignment_index(matrix: np.ndarray, config: ComparisonConfig) -> float:
    """Alignment index of a filled alignment matrix."""
    rows, columns = matrix.shape
    return normalize_distance(float(matrix[-1, -1]), rows - 1, columns - 1, config)
