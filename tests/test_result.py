"""Tests for the result types.

Covers:
- AlignmentSet: shape, filled slots, IndexError and KeyError
- ComparisonResult: frozen, value() per output mode
- DetailedComparison lookups: words, matches, per-pair numbers, edit paths
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from word_levenshtein import (
    CaseMode,
    ComparisonConfig,
    DetailedComparison,
    EditAction,
    SwapMode,
    compare_detailed,
)
from word_levenshtein.algorithm.config import OutputMode
from word_levenshtein.result import AlignmentSet, ComparisonResult

# ---------------------------------------------------------------------------
# AlignmentSet
# ---------------------------------------------------------------------------


class TestAlignmentSet:
    def test_shape(self) -> None:
        assert AlignmentSet(2, 3).shape == (2, 3)

    def test_store_and_read(self) -> None:
        matrices = AlignmentSet(2, 3)
        matrices[1, 2] = np.zeros((4, 5))
        assert matrices[1, 2].shape == (4, 5)
        assert (1, 2) in matrices
        assert (0, 0) not in matrices
        assert len(matrices) == 1
        assert list(matrices) == [(1, 2)]

    def test_unset_slot_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            AlignmentSet(2, 2)[0, 1]

    @pytest.mark.parametrize("key", [(2, 0), (0, 2), (-1, 0)])
    def test_out_of_range_raises_index_error(self, key: tuple[int, int]) -> None:
        with pytest.raises(IndexError, match="outside 2x2"):
            AlignmentSet(2, 2)[key]

    def test_contains_rejects_non_pairs(self) -> None:
        matrices = AlignmentSet(1, 1)
        matrices[0, 0] = np.zeros((1, 1))
        assert "x" not in matrices
        assert (0, 0, 0) not in matrices
        assert (5, 5) not in matrices

    def test_iterates_row_major(self) -> None:
        matrices = AlignmentSet(2, 2)
        for key in [(1, 1), (0, 1), (1, 0)]:
            matrices[key] = np.zeros((1, 1))
        assert list(matrices) == [(0, 1), (1, 0), (1, 1)]


# ---------------------------------------------------------------------------
# ComparisonResult
# ---------------------------------------------------------------------------


class TestComparisonResult:
    def test_defaults(self) -> None:
        result = ComparisonResult(index=0.5, distance=3.0)
        assert result.first_mapping == {}
        assert result.second_mapping == {}
        assert result.swapped is False

    def test_frozen(self) -> None:
        result = ComparisonResult(index=0.5, distance=3.0)
        with pytest.raises(FrozenInstanceError):
            result.index = 1.0  # type: ignore[misc]

    def test_value_by_output_mode(self) -> None:
        result = ComparisonResult(index=0.5, distance=3.0)
        assert result.value() == 0.5
        assert result.value(OutputMode.RELATIVE) == 0.5
        assert result.value(OutputMode.ABSOLUTE) == 3.0

    def test_equality(self) -> None:
        assert ComparisonResult(0.5, 3.0, {0: 0}, {0: 0}) == ComparisonResult(
            0.5, 3.0, {0: 0}, {0: 0}
        )


# ---------------------------------------------------------------------------
# DetailedComparison
# ---------------------------------------------------------------------------


@pytest.fixture
def quill_sword() -> DetailedComparison:
    return compare_detailed("the quill", "the sword")


class TestDetailedLookups:
    def test_texts(self, quill_sword: DetailedComparison) -> None:
        assert quill_sword.first == "the quill"
        assert quill_sword.second == "the sword"

    def test_words(self, quill_sword: DetailedComparison) -> None:
        assert quill_sword.word_first(1) == "quill"
        assert quill_sword.word_second(1) == "sword"

    def test_word_index_out_of_range(self, quill_sword: DetailedComparison) -> None:
        with pytest.raises(IndexError, match="out of range for 2 words"):
            quill_sword.word_first(2)
        with pytest.raises(IndexError):
            quill_sword.word_second(-1)

    def test_matches(self, quill_sword: DetailedComparison) -> None:
        assert quill_sword.match_first(0) == 0
        assert quill_sword.match_first(1) == 1
        assert quill_sword.match_second(1) == 1

    def test_match_out_of_range(self, quill_sword: DetailedComparison) -> None:
        with pytest.raises(IndexError):
            quill_sword.match_first(7)

    def test_aggregate(self, quill_sword: DetailedComparison) -> None:
        # the/the weighs 6 at similarity 1, quill/sword weighs 10 at 0,
        # one separator weighs 2 on both sides.
        assert quill_sword.index == pytest.approx(8.0 / 18.0)
        assert quill_sword.distance == pytest.approx(8.0)
        assert quill_sword.swapped is True

    def test_pair_numbers(self, quill_sword: DetailedComparison) -> None:
        assert quill_sword.pair_distance(1, 1) == pytest.approx(10.0)
        assert quill_sword.pair_index(1, 1) == pytest.approx(0.0)
        assert quill_sword.pair_index(0, 0) == pytest.approx(1.0)
        assert quill_sword.pair_similarity(0, 0) == pytest.approx(1.0)

    def test_matrices_follow_argument_order(self, quill_sword: DetailedComparison) -> None:
        assert quill_sword.similarity.shape == (2, 2)
        assert quill_sword.matrices.shape == (2, 2)
        # "the" (4 rows) against "sword" (6 columns)
        assert quill_sword.matrices[0, 1].shape == (4, 6)

    def test_pair_out_of_range(self, quill_sword: DetailedComparison) -> None:
        with pytest.raises(IndexError):
            quill_sword.pair_distance(5, 0)
        with pytest.raises(IndexError):
            quill_sword.pair_similarity(0, 5)

    def test_ideal_path(self, quill_sword: DetailedComparison) -> None:
        path = quill_sword.ideal_path(0, 0)
        assert path == {
            (0, 0): EditAction.START,
            (1, 1): EditAction.UNCHANGED,
            (2, 2): EditAction.UNCHANGED,
            (3, 3): EditAction.UNCHANGED,
        }

    def test_frozen(self, quill_sword: DetailedComparison) -> None:
        with pytest.raises(FrozenInstanceError):
            quill_sword.index = 0.0  # type: ignore[misc]


class TestIdealPathTranspositions:
    def test_swap_allowed(self) -> None:
        path = compare_detailed("ab", "ba").ideal_path(0, 0)
        assert path == {(0, 0): EditAction.START, (2, 2): EditAction.SWAP}

    def test_case_transposition_still_possible(self) -> None:
        config = ComparisonConfig(swap=SwapMode.DISALLOW)
        detail = compare_detailed("aB", "ba", config=config)
        assert detail.pair_distance(0, 0) == pytest.approx(1.5)
        path = detail.ideal_path(0, 0)
        assert path is not None
        assert path[(2, 2)] is EditAction.SWAP

    def test_no_transpositions(self) -> None:
        config = ComparisonConfig(swap=SwapMode.DISALLOW, case=CaseMode.IGNORE_CASE)
        detail = compare_detailed("ab", "ba", config=config)
        assert detail.pair_distance(0, 0) == pytest.approx(2.0)
        path = detail.ideal_path(0, 0)
        assert path is not None
        assert EditAction.SWAP not in path.values()
