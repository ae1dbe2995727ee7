"""Exception hierarchy for word-levenshtein.

Every error raised by the package derives from ``LevenshteinError`` so that
callers can catch the whole family at once.  Configuration mistakes are
plain ``ValueError`` (raised by the frozen config dataclasses) and are not
part of this hierarchy.
"""

from __future__ import annotations

__all__ = [
    "FeatureProviderUnavailableError",
    "InvalidInputError",
    "LevenshteinError",
    "PhoneticError",
    "UndefinedPhoneticSymbolError",
]


class LevenshteinError(Exception):
    """Base class for all word-levenshtein errors."""


class InvalidInputError(LevenshteinError, ValueError):
    """A text argument is missing (``None``) or is not a string."""


class PhoneticError(LevenshteinError):
    """Base class for failures of the phonetic comparison mode."""


class UndefinedPhoneticSymbolError(PhoneticError, KeyError):
    """A symbol is unknown to the feature provider or lacks mandatory features.

    Attributes:
        symbol: The offending XSAMPA symbol (or word, when no symbol at all
            could be read from it).
    """

    def __init__(self, symbol: str, reason: str = "undefined phonetic symbol") -> None:
        super().__init__(symbol)
        self.symbol = symbol
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.reason}: {self.symbol!r}"


class FeatureProviderUnavailableError(PhoneticError):
    """Phonetic mode was requested but no usable feature table is available."""
