"""Ideal edit path through a filled alignment matrix.

The path is recovered by backward induction from the bottom-right cell.
Coordinates are ``(row, column)``: a row step consumes a symbol of the
first word, a column step a symbol of the second.  At each cell, first
applicable wins:

1. SWAP when transpositions are enabled, both coordinates exceed 1 and the
   diagonal predecessor is *more* expensive than the current cell (only a
   transposition can make a cell cheaper than its diagonal); jump two back.
2. INSERT when on the top row, or the left neighbour is strictly cheaper
   than both the diagonal and the upper neighbour; step left.
3. DELETE when in the first column, or the upper neighbour is strictly
   cheaper than both the diagonal and the left neighbour; step up.
4. Otherwise a diagonal step: UNCHANGED when the value did not change,
   SUBSTITUTE when it did.

Each visited cell is tagged with the action that reaches it and the origin
``(0, 0)`` with START.  The returned dict runs from the origin to the
final cell.
"""

from __future__ import annotations

from enum import StrEnum, auto

import numpy as np

__all__ = ["EditAction", "reconstruct_path"]


class EditAction(StrEnum):
    """Edit operation that leads into a path cell."""

    START = auto()
    INSERT = auto()
    DELETE = auto()
    SUBSTITUTE = auto()
    SWAP = auto()
    UNCHANGED = auto()


def reconstruct_path(
    matrix: np.ndarray | None,
    allow_swap: bool = True,
) -> dict[tuple[int, int], EditAction] | None:
    """Return the ideal path through ``matrix`` (``None`` for ``None``).

    Args:
        matrix: A filled alignment matrix.
        allow_swap: Whether cells may be explained as transpositions.  Pass
            ``ComparisonConfig.transpositions_possible``.
    """
    if matrix is None:
        return None

    row = matrix.shape[0] - 1
    column = matrix.shape[1] - 1
    steps: list[tuple[tuple[int, int], EditAction]] = []

    while row > 0 or column > 0:
        cell = (row, column)
        current = matrix[row, column]

        if allow_swap and row > 1 and column > 1 and matrix[row - 1, column - 1] > current:
            steps.append((cell, EditAction.SWAP))
            row -= 2
            column -= 2
        elif row == 0 or (
            column > 0
            and matrix[row, column - 1]
            < min(matrix[row - 1, column - 1], matrix[row - 1, column])
        ):
            steps.append((cell, EditAction.INSERT))
            column -= 1
        elif column == 0 or (
            matrix[row - 1, column]
            < min(matrix[row - 1, column - 1], matrix[row, column - 1])
        ):
            steps.append((cell, EditAction.DELETE))
            row -= 1
        else:
            row -= 1
            column -= 1
            if matrix[row, column] == current:
                steps.append((cell, EditAction.UNCHANGED))
            else:
                steps.append((cell, EditAction.SUBSTITUTE))

    path: dict[tuple[int, int], EditAction] = {(0, 0): EditAction.START}
    for cell, action in reversed(steps):
        path[cell] = action
    return path
