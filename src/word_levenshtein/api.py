"""Public API functions for word-levenshtein.

This module provides the four user-facing functions: compare,
compare_detailed, similarity_index and is_similar.  Each call creates a
fresh LevenshteinComparator to guarantee zero global state mutation
between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from word_levenshtein.algorithm.config import ComparisonConfig
from word_levenshtein.comparator import LevenshteinComparator
from word_levenshtein.result import DetailedComparison

if TYPE_CHECKING:
    from word_levenshtein.protocols import FeatureProvider

__all__ = ["compare", "compare_detailed", "is_similar", "similarity_index"]


def compare(
    first: str,
    second: str,
    config: ComparisonConfig | None = None,
    feature_provider: FeatureProvider | None = None,
) -> float:
    """Compare two texts and return one number.

    Args:
        first:  First text.
        second: Second text.
        config: Comparison options. Defaults to ``ComparisonConfig()`` when None.
        feature_provider: Phonetic feature source; required in phonetic mode.

    Returns:
        The similarity index (1.0 means identical) in RELATIVE output mode,
        the weighted distance in ABSOLUTE output mode.
    """
    comparator = LevenshteinComparator(config=config, feature_provider=feature_provider)
    return comparator.compare(first, second)


def compare_detailed(
    first: str,
    second: str,
    config: ComparisonConfig | None = None,
    feature_provider: FeatureProvider | None = None,
) -> DetailedComparison:
    """Compare two texts and keep every intermediate.

    Returns:
        A ``DetailedComparison`` exposing the index, the distance, the word
        mapping in both directions, per-pair indices and edit paths.
    """
    comparator = LevenshteinComparator(config=config, feature_provider=feature_provider)
    return comparator.compare_detailed(first, second)


def similarity_index(
    first: str,
    second: str,
    config: ComparisonConfig | None = None,
    feature_provider: FeatureProvider | None = None,
) -> float:
    """Return the similarity index whatever the configured output mode."""
    comparator = LevenshteinComparator(config=config, feature_provider=feature_provider)
    return comparator.compare_result(first, second).index


def is_similar(
    first: str,
    second: str,
    threshold: float = 0.85,
    config: ComparisonConfig | None = None,
    feature_provider: FeatureProvider | None = None,
) -> bool:
    """Return True if the two texts are similar enough.

    Args:
        first:     First text.
        second:    Second text.
        threshold: Minimum similarity index. Defaults to 0.85, which lets a
                   handful of typos through but rejects different sentences.
        config:    Comparison options. Defaults to ``ComparisonConfig()`` when None.
        feature_provider: Phonetic feature source; required in phonetic mode.

    Returns:
        True if ``similarity_index(first, second) >= threshold``.
    """
    return similarity_index(first, second, config, feature_provider) >= threshold
