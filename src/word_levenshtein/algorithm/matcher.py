"""Greedy word assignment by relative matching factor.

Given a similarity matrix (rows = words of the longer sequence, columns =
words of the shorter one), words are paired one at a time.  In every round
each unassigned row proposes its best still-free column, and the row whose
proposal stands out most from its other free options wins:

    factor(row, col) = similarity[row][col] - mean(similarity[row][other free cols])

The mean divides by 1 when no other free column exists.  Ties between
columns go to the lower column index, and ties between rows to the lower
row index, so the assignment is fully deterministic.  This is a heuristic:
it does not minimise total cost the way a bipartite matching would.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence

import numpy as np

__all__ = [
    "best_remaining_column",
    "greedy_match",
    "rank_columns",
    "relative_matching_factor",
]

logger = logging.getLogger(__name__)


def rank_columns(row: Sequence[float] | np.ndarray) -> list[int]:
    """Column indices ordered by similarity descending, then index ascending."""
    return sorted(range(len(row)), key=lambda column: (-float(row[column]), column))


def best_remaining_column(ranking: Sequence[int], used_columns: Collection[int]) -> int | None:
    """First column of ``ranking`` not in ``used_columns`` (``None`` if all are used)."""
    for column in ranking:
        if column not in used_columns:
            return column
    return None


def relative_matching_factor(
    row: Sequence[float] | np.ndarray,
    column: int,
    used_columns: Collection[int],
) -> float:
    """How much ``row[column]`` exceeds the mean of the row's other free columns."""
    others = [
        float(value)
        for index, value in enumerate(row)
        if index != column and index not in used_columns
    ]
    mean = sum(others) / (len(others) or 1)
    return float(row[column]) - mean


def greedy_match(similarity: np.ndarray) -> list[tuple[int, int]]:
    """Assign rows to columns greedily.

    Args:
        similarity: 2-D matrix of shape ``(rows, columns)``.  Every row and
            column is used at most once; ``min(rows, columns)`` pairs result.

    Returns:
        ``(row, column)`` pairs in the order they were assigned.
    """
    rows, columns = similarity.shape
    rankings = [rank_columns(similarity[r]) for r in range(rows)]
    used_rows: set[int] = set()
    used_columns: set[int] = set()
    assignment: list[tuple[int, int]] = []

    for _ in range(min(rows, columns)):
        best: tuple[int, int] | None = None
        best_factor = 0.0
        for r in range(rows):
            if r in used_rows:
                continue
            column = best_remaining_column(rankings[r], used_columns)
            if column is None:
                continue
            factor = relative_matching_factor(similarity[r], column, used_columns)
            if best is None or factor > best_factor:
                best = (r, column)
                best_factor = factor

        if best is None:
            break
        row, column = best
        logger.debug(
            "matched row %d to column %d (similarity %.4f, factor %.4f)",
            row,
            column,
            similarity[row, column],
            best_factor,
        )
        used_rows.add(row)
        used_columns.add(column)
        assignment.append(best)

    return assignment
