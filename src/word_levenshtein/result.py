"""Result types returned by comparisons.

``ComparisonResult`` carries the aggregate numbers and the word mapping.
``DetailedComparison`` adds everything needed to explain them: the
normalised words, the decayed similarity matrix and every word-pair
alignment matrix, from which per-pair indices and edit paths are derived.
All orientations follow the argument order: rows belong to the first text.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from word_levenshtein.algorithm.config import ComparisonConfig, OutputMode
from word_levenshtein.algorithm.normalizer import alignment_index
from word_levenshtein.algorithm.path import EditAction, reconstruct_path
from word_levenshtein.text.words import WordSequence

__all__ = ["AlignmentSet", "ComparisonResult", "DetailedComparison"]


def _checked(words: WordSequence, index: int) -> int:
    if not 0 <= index < len(words):
        msg = f"word index {index} out of range for {len(words)} words"
        raise IndexError(msg)
    return index


class AlignmentSet:
    """Fixed-size 2-D arena of alignment matrices indexed by ``(i, j)``.

    Slot ``(i, j)`` holds the matrix aligning word ``i`` of the first text
    (rows) with word ``j`` of the second (columns).

    Example::

        matrices = AlignmentSet(2, 3)
        matrices[0, 2] = np.zeros((4, 5))
        matrices[0, 2].shape   # (4, 5)
        (1, 1) in matrices     # False -- never filled
    """

    __slots__ = ("_cells", "_columns", "_rows")

    def __init__(self, rows: int, columns: int) -> None:
        self._rows = rows
        self._columns = columns
        self._cells: list[np.ndarray | None] = [None] * (rows * columns)

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    def _slot(self, key: tuple[int, int]) -> int:
        i, j = key
        if not (0 <= i < self._rows and 0 <= j < self._columns):
            msg = f"word pair {key} outside {self._rows}x{self._columns} alignment set"
            raise IndexError(msg)
        return i * self._columns + j

    def __getitem__(self, key: tuple[int, int]) -> np.ndarray:
        matrix = self._cells[self._slot(key)]
        if matrix is None:
            msg = f"no alignment stored for word pair {key}"
            raise KeyError(msg)
        return matrix

    def __setitem__(self, key: tuple[int, int], matrix: np.ndarray) -> None:
        self._cells[self._slot(key)] = matrix

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        i, j = key
        return (
            0 <= i < self._rows
            and 0 <= j < self._columns
            and self._cells[i * self._columns + j] is not None
        )

    def __len__(self) -> int:
        return sum(1 for cell in self._cells if cell is not None)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        for slot, cell in enumerate(self._cells):
            if cell is not None:
                yield divmod(slot, self._columns)


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Aggregate outcome of comparing two texts.

    Attributes:
        index: Similarity index; 1.0 means identical.
        distance: Weighted distance value.  For a single pair of words this
            is the edit cost; for word sequences it is the similarity-weighted
            mass the index is computed from.
        first_mapping: Word index in the first text -> matched word index in
            the second.  Unmatched words are absent.
        second_mapping: The inverse mapping.
        swapped: True when the second text was processed as the row sequence
            (it had more words, or sorts after the first on equal counts).
    """

    index: float
    distance: float
    first_mapping: dict[int, int] = field(default_factory=dict)
    second_mapping: dict[int, int] = field(default_factory=dict)
    swapped: bool = False

    def value(self, output: OutputMode = OutputMode.RELATIVE) -> float:
        """The number ``compare()`` reports for ``output``."""
        return self.distance if output is OutputMode.ABSOLUTE else self.index


@dataclass(frozen=True, slots=True, eq=False)
class DetailedComparison(ComparisonResult):
    """Comparison outcome with every intermediate kept for inspection.

    Attributes:
        first_words: Normalised words of the first text (``.text`` is the input).
        second_words: Normalised words of the second text.
        similarity: Decayed word similarities, shape
            ``(len(first_words), len(second_words))``.
        matrices: Alignment matrix of every word pair.
        config: The configuration snapshot used.
    """

    first_words: WordSequence = field(default_factory=lambda: WordSequence("", ()))
    second_words: WordSequence = field(default_factory=lambda: WordSequence("", ()))
    similarity: np.ndarray = field(default_factory=lambda: np.zeros((0, 0)))
    matrices: AlignmentSet = field(default_factory=lambda: AlignmentSet(0, 0))
    config: ComparisonConfig = field(default_factory=ComparisonConfig)

    @property
    def first(self) -> str:
        return self.first_words.text

    @property
    def second(self) -> str:
        return self.second_words.text

    # ------------------------------------------------------------------
    # Word lookups
    # ------------------------------------------------------------------

    def word_first(self, i: int) -> str:
        return self.first_words[_checked(self.first_words, i)]

    def word_second(self, j: int) -> str:
        return self.second_words[_checked(self.second_words, j)]

    def match_first(self, i: int) -> int | None:
        """Index of the second-text word matched to first-text word ``i``."""
        return self.first_mapping.get(_checked(self.first_words, i))

    def match_second(self, j: int) -> int | None:
        """Index of the first-text word matched to second-text word ``j``."""
        return self.second_mapping.get(_checked(self.second_words, j))

    # ------------------------------------------------------------------
    # Per-pair lookups
    # ------------------------------------------------------------------

    def pair_distance(self, i: int, j: int) -> float:
        """Edit distance between first-text word ``i`` and second-text word ``j``."""
        return float(self.matrices[i, j][-1, -1])

    def pair_index(self, i: int, j: int) -> float:
        """Alignment index of the word pair, before position decay."""
        return alignment_index(self.matrices[i, j], self.config)

    def pair_similarity(self, i: int, j: int) -> float:
        """Alignment index of the word pair after position decay."""
        return float(
            self.similarity[_checked(self.first_words, i), _checked(self.second_words, j)]
        )

    def ideal_path(self, i: int, j: int) -> dict[tuple[int, int], EditAction] | None:
        """Cheapest edit path turning first-text word ``i`` into second-text word ``j``."""
        return reconstruct_path(
            self.matrices[i, j], allow_swap=self.config.transpositions_possible
        )
