"""LevenshteinComparator: orchestrator that wires normalisation, alignment and matching.

This is the central wiring layer between the raw algorithm and the public
API.

Architecture:
- ``compare()`` / ``compare_detailed()`` validate both inputs, normalise
  them into ``WordSequence`` objects with ``TextNormalizer``, and hand them
  to a ``WordSequenceMatcher``.
- The matcher is built around a ``CharacterAligner`` in plain mode and a
  ``PhoneticAligner`` in phonetic mode.  The phonetic aligner reads symbol
  distances through a per-instance ``PhoneticDistanceCache`` (LRU).
- Identical inputs short-circuit to index 1.0 and distance 0.0.  The
  detailed variant still computes the word mapping and matrices.
- The comparator holds a frozen ``ComparisonConfig``; it never mutates it,
  so one comparator may be shared between threads.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from word_levenshtein.algorithm.alignment import Aligner, CharacterAligner, PhoneticAligner
from word_levenshtein.algorithm.config import ComparisonConfig
from word_levenshtein.algorithm.sequence import SequenceMatch, WordSequenceMatcher
from word_levenshtein.cache import PhoneticDistanceCache
from word_levenshtein.errors import FeatureProviderUnavailableError, InvalidInputError
from word_levenshtein.phonetics.distance import PhoneticFeatureDistance
from word_levenshtein.result import ComparisonResult, DetailedComparison
from word_levenshtein.text.normalizer import TextNormalizer

if TYPE_CHECKING:
    from word_levenshtein.protocols import FeatureProvider
    from word_levenshtein.text.words import WordSequence

__all__ = ["LevenshteinComparator"]

logger = logging.getLogger(__name__)


def _validate(value: Any, name: str) -> str:
    if value is None:
        msg = f"{name} text is not set"
        raise InvalidInputError(msg)
    if not isinstance(value, str):
        msg = f"{name} text must be a str, got {type(value).__name__}"
        raise InvalidInputError(msg)
    return value


class LevenshteinComparator:
    """Orchestrator for weighted Damerau-Levenshtein text comparison.

    Example::

        from word_levenshtein.comparator import LevenshteinComparator

        cmp = LevenshteinComparator()
        cmp.compare("A bird in the hand", "A brid in teh hand")   # ~0.9
        detail = cmp.compare_detailed("the quill", "the sword")
        detail.match_first(1)                                     # 1

    Two separate comparators never share cache state.
    """

    def __init__(
        self,
        config: ComparisonConfig | None = None,
        feature_provider: FeatureProvider | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Comparison options and costs.  Defaults to
                ``ComparisonConfig()`` when None.
            feature_provider: Phonetic feature source.  Required only when
                ``config`` selects phonetic mode.
            max_cache_size: Maximum number of symbol distances held in the
                per-instance LRU cache.  Infrastructure only; it does not
                change any result.

        Raises:
            FeatureProviderUnavailableError: Phonetic mode without a provider.
        """
        self._config: ComparisonConfig = config if config is not None else ComparisonConfig()
        self._normalizer = TextNormalizer(self._config)
        self._matcher = WordSequenceMatcher(
            self._config, self._build_aligner(feature_provider, max_cache_size)
        )

    @property
    def config(self) -> ComparisonConfig:
        return self._config

    def _build_aligner(
        self, feature_provider: FeatureProvider | None, max_cache_size: int
    ) -> Aligner:
        if not self._config.use_phonetic:
            return CharacterAligner(self._config)
        if feature_provider is None:
            msg = "phonetic comparison requires a feature provider (see load_feature_table)"
            raise FeatureProviderUnavailableError(msg)
        distances = PhoneticDistanceCache(
            PhoneticFeatureDistance(feature_provider, self._config.costs),
            max_size=max_cache_size,
        )
        return PhoneticAligner(self._config, distances)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, first: str, second: str) -> float:
        """Return the similarity index, or the distance in ABSOLUTE output mode.

        Raises:
            InvalidInputError: An input is None or not a string.
            UndefinedPhoneticSymbolError: Phonetic input with unknown symbols.
        """
        return self.compare_result(first, second).value(self._config.output)

    def compare_result(self, first: str, second: str) -> ComparisonResult:
        """Return index, distance and word mapping without intermediates."""
        first = _validate(first, "first")
        second = _validate(second, "second")
        if first == second:
            return ComparisonResult(index=1.0, distance=0.0)

        match = self._match(first, second)
        return ComparisonResult(
            index=match.index,
            distance=match.distance,
            first_mapping=match.first_mapping,
            second_mapping=match.second_mapping,
            swapped=match.swapped,
        )

    def compare_detailed(self, first: str, second: str) -> DetailedComparison:
        """Return the full comparison, with word pairs, matrices and paths available.

        Raises:
            InvalidInputError: An input is None or not a string.
            UndefinedPhoneticSymbolError: Phonetic input with unknown symbols.
        """
        first = _validate(first, "first")
        second = _validate(second, "second")
        first_words = self._normalizer.normalize(first)
        second_words = self._normalizer.normalize(second)
        match = self._match_words(first_words, second_words)

        identical = first == second
        return DetailedComparison(
            index=1.0 if identical else match.index,
            distance=0.0 if identical else match.distance,
            first_mapping=match.first_mapping,
            second_mapping=match.second_mapping,
            swapped=match.swapped,
            first_words=first_words,
            second_words=second_words,
            similarity=match.similarity,
            matrices=match.matrices,
            config=self._config,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _match(self, first: str, second: str) -> SequenceMatch:
        return self._match_words(
            self._normalizer.normalize(first), self._normalizer.normalize(second)
        )

    def _match_words(self, first: WordSequence, second: WordSequence) -> SequenceMatch:
        t0 = time.perf_counter()
        match = self._matcher.match(first, second)
        logger.debug(
            "compared %d and %d words: index=%.4f distance=%.4f in %.2f ms",
            len(first),
            len(second),
            match.index,
            match.distance,
            (time.perf_counter() - t0) * 1000.0,
        )
        return match
