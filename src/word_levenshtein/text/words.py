"""WordSequence: the normalised words of one input text."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["WordSequence"]


@dataclass(frozen=True, slots=True)
class WordSequence:
    """Ordered words of a text after case folding and special-character removal.

    Attributes:
        text: The original, unmodified input.
        words: The normalised words; never contains empty strings.
    """

    text: str
    words: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def lengths(self) -> list[int]:
        """Character length of every word."""
        return [len(word) for word in self.words]
