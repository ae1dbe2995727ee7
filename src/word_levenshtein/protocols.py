"""FeatureProvider Protocol for the phonetic extension point.

The phonetic comparison needs one thing from the outside world: the
nine-slot feature vector of an XSAMPA symbol.  Any object with a
conformant ``features`` method passes ``isinstance`` checks, so a table
backed by a database or a web service can replace the bundled
``FeatureTable`` without inheriting from it.

Example::

    from word_levenshtein.phonetics.features import FeatureVector
    from word_levenshtein.protocols import FeatureProvider

    class OneVowel:
        def features(self, symbol: str) -> FeatureVector | None:
            if symbol == "a":
                return FeatureVector.from_slots([1, 3, 1, 1, 0, None, None, None, 1])
            return None

    assert isinstance(OneVowel(), FeatureProvider)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from word_levenshtein.phonetics.features import FeatureVector


@runtime_checkable
class FeatureProvider(Protocol):
    """Structural protocol for phonetic feature lookups.

    ``features`` must return the symbol's ``FeatureVector`` or ``None``
    when the symbol is not defined.  The silence symbol ``"0"`` must be
    defined for insertions and deletions to be priced.
    """

    def features(self, symbol: str) -> FeatureVector | None: ...
