"""PhoneticDistanceCache: LRU-backed caching proxy for symbol distances.

Sentences repeat the same handful of symbols many times, so the pairwise
feature distances and silence distances are memoised.  LRU eviction occurs
silently when ``max_size`` is exceeded -- no error is raised.

Each ``PhoneticDistanceCache`` instance owns its own ``LRUCache``; two
comparators never share entries.  ``LRUCache`` is not thread-safe by
itself, so every access goes through a per-instance lock.

Example::

    from word_levenshtein.cache import PhoneticDistanceCache
    from word_levenshtein.phonetics import PhoneticFeatureDistance

    cache = PhoneticDistanceCache(PhoneticFeatureDistance(table, costs), max_size=512)
    cache.distance("a", "e")        # computed
    cache.distance("a", "e")        # served from memory
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from word_levenshtein.phonetics.distance import PhoneticFeatureDistance, SymbolDistance


class PhoneticDistanceCache:
    """LRU-backed caching proxy around a ``PhoneticFeatureDistance``.

    Exposes the same ``distance`` / ``silence_distance`` surface as the
    wrapped calculator.  Lookups that raise (undefined symbols) are not
    cached.

    Args:
        calculator: The distance calculator to wrap.
        max_size: Maximum number of cached results.  Defaults to 512.
    """

    def __init__(self, calculator: PhoneticFeatureDistance, max_size: int = 512) -> None:
        self._calculator = calculator
        self._cache: LRUCache[tuple[str, ...], Any] = LRUCache(maxsize=max_size)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Calculator surface
    # ------------------------------------------------------------------

    def distance(self, first: str, second: str) -> SymbolDistance:
        key = ("pair", first, second)
        with self._lock:
            if key in self._cache:
                return self._cache[key]
        result = self._calculator.distance(first, second)
        with self._lock:
            self._cache[key] = result
        return result

    def silence_distance(self, symbol: str) -> float:
        key = ("silence", symbol)
        with self._lock:
            if key in self._cache:
                return float(self._cache[key])
        result = self._calculator.silence_distance(symbol)
        with self._lock:
            self._cache[key] = result
        return result
