"""WordSequenceMatcher: aligns two word sequences and aggregates the result.

Architecture:

- The sequence with more words becomes the row sequence.  On equal word
  counts the lexicographically greater word tuple does, so swapping the
  arguments never changes the numbers.
- Every (row word, column word) pair is aligned; its alignment index is
  multiplied by ``position_decay ** |row - column|`` to form the similarity
  matrix.
- Two single words are scored by their alignment directly.  Longer
  sequences are paired by ``greedy_match`` and aggregated with
  length-dependent weights::

      weight(a, b) = substitution * min(len a, len b) + indel * |len a - len b|

      distance = sum(similarity * weight over pairs) + substitution * (k - 1)
      total    = sum(weight over pairs) + indel * len(w) for unmatched rows w
                 + substitution * (k - 1) + indel * (rows - columns)
      index    = distance / total

  where ``k = min(rows, columns)``.  The ``k - 1`` terms account for the
  whitespace separators between matched words.
- Everything handed back is re-oriented to the caller's argument order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from word_levenshtein.algorithm.matcher import greedy_match
from word_levenshtein.algorithm.normalizer import alignment_index
from word_levenshtein.result import AlignmentSet

if TYPE_CHECKING:
    from word_levenshtein.algorithm.alignment import Aligner
    from word_levenshtein.algorithm.config import ComparisonConfig
    from word_levenshtein.text.words import WordSequence

__all__ = ["SequenceMatch", "WordSequenceMatcher"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class SequenceMatch:
    """Outcome of matching two word sequences, in argument orientation.

    Attributes:
        index: Aggregate similarity index.
        distance: Aggregate weighted value (edit cost for two single words).
        pairs: ``(first word, second word)`` index pairs in assignment order.
        similarity: Decayed similarity matrix, rows = first sequence.
        matrices: Alignment matrices, rows = first-sequence words.
        swapped: True when the second sequence was used as the row sequence.
    """

    index: float
    distance: float
    pairs: tuple[tuple[int, int], ...] = ()
    similarity: np.ndarray = field(default_factory=lambda: np.zeros((0, 0)))
    matrices: AlignmentSet = field(default_factory=lambda: AlignmentSet(0, 0))
    swapped: bool = False

    @property
    def first_mapping(self) -> dict[int, int]:
        return {i: j for i, j in self.pairs}

    @property
    def second_mapping(self) -> dict[int, int]:
        return {j: i for i, j in self.pairs}


def _rows_are_second(first: WordSequence, second: WordSequence) -> bool:
    return (len(first), first.words) < (len(second), second.words)


class WordSequenceMatcher:
    """Word-level matcher parameterised by an aligner.

    Example::

        config = ComparisonConfig()
        matcher = WordSequenceMatcher(config, CharacterAligner(config))
        normalizer = TextNormalizer(config)
        match = matcher.match(normalizer.normalize("a b"), normalizer.normalize("b a"))
        match.first_mapping    # {0: 1, 1: 0}
    """

    def __init__(self, config: ComparisonConfig, aligner: Aligner) -> None:
        self._config = config
        self._aligner = aligner

    def match(self, first: WordSequence, second: WordSequence) -> SequenceMatch:
        if not len(first) or not len(second):
            both_empty = not len(first) and not len(second)
            return SequenceMatch(
                index=1.0 if both_empty else 0.0,
                distance=0.0,
                similarity=np.zeros((len(first), len(second))),
                matrices=AlignmentSet(len(first), len(second)),
            )

        swapped = _rows_are_second(first, second)
        rows, columns = (second, first) if swapped else (first, second)
        logger.debug(
            "matching %d words against %d words (swapped=%s)", len(rows), len(columns), swapped
        )

        similarity, matrices = self.similarity_matrix(rows, columns)

        if len(rows) == 1 and len(columns) == 1:
            index, distance = similarity[0, 0], matrices[0, 0][-1, -1]
            assignment = [(0, 0)]
        else:
            assignment = greedy_match(similarity)
            index, distance = self._aggregate(rows, columns, similarity, assignment)

        if swapped:
            similarity = similarity.T
            pairs = tuple((c, r) for r, c in assignment)
            oriented = AlignmentSet(len(first), len(second))
            for r, c in matrices:
                oriented[c, r] = matrices[r, c].T
            matrices = oriented
        else:
            pairs = tuple(assignment)

        return SequenceMatch(
            index=float(index),
            distance=float(distance),
            pairs=pairs,
            similarity=similarity,
            matrices=matrices,
            swapped=swapped,
        )

    def similarity_matrix(
        self, rows: WordSequence, columns: WordSequence
    ) -> tuple[np.ndarray, AlignmentSet]:
        """Align every word pair and return the decayed similarities and the matrices."""
        decay = self._config.costs.position_decay
        similarity = np.zeros((len(rows), len(columns)), dtype=float)
        matrices = AlignmentSet(len(rows), len(columns))

        for r, row_word in enumerate(rows):
            for c, column_word in enumerate(columns):
                matrix = self._aligner.align(row_word, column_word)
                matrices[r, c] = matrix
                similarity[r, c] = alignment_index(matrix, self._config) * decay ** abs(r - c)
        return similarity, matrices

    def _aggregate(
        self,
        rows: WordSequence,
        columns: WordSequence,
        similarity: np.ndarray,
        assignment: list[tuple[int, int]],
    ) -> tuple[float, float]:
        costs = self._config.costs
        row_lengths = rows.lengths()
        column_lengths = columns.lengths()
        weighted = 0.0
        total = 0.0

        for r, c in assignment:
            a = row_lengths[r]
            b = column_lengths[c]
            weight = costs.substitution * min(a, b) + costs.indel * abs(a - b)
            weighted += float(similarity[r, c]) * weight
            total += weight

        matched_rows = {r for r, _ in assignment}
        for r, length in enumerate(row_lengths):
            if r not in matched_rows:
                total += costs.indel * length

        separators = min(len(rows), len(columns)) - 1
        weighted += costs.substitution * separators
        total += costs.substitution * separators + costs.indel * (len(rows) - len(columns))

        if total == 0.0:
            return 1.0, weighted
        return weighted / total, weighted
