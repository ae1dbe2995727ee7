"""pytest plugin providing the ``assert_text_similar`` fixture.

Registered through the ``pytest11`` entry point in pyproject.toml, so any
project that installs word-levenshtein can request the fixture by name.
"""

from __future__ import annotations

from typing import Any

import pytest

from word_levenshtein import ComparisonConfig, compare_detailed


@pytest.fixture(scope="session")
def assert_text_similar() -> Any:
    """Fixture that returns a callable text similarity asserter.

    Session scope is safe: every call builds its own comparator through
    ``compare_detailed()``.

    Usage in tests::

        def test_transcript(assert_text_similar):
            assert_text_similar("A bird in the hand", "A brid in the hand")

        def test_different_sentence(assert_text_similar):
            with pytest.raises(AssertionError, match=r"index="):
                assert_text_similar("A bird in the hand", "Duh!")

    Returns:
        A callable ``_assert(actual, expected, threshold=0.85, config=None) -> None``
        that raises ``AssertionError`` when the similarity index is below threshold.
    """

    def _assert(
        actual: str,
        expected: str,
        threshold: float = 0.85,
        config: ComparisonConfig | None = None,
    ) -> None:
        """Assert that two texts are similar.

        Args:
            actual:    The text produced by the code under test.
            expected:  The reference text.
            threshold: Minimum similarity index. Defaults to 0.85.
            config:    Optional ComparisonConfig (plain mode only; phonetic
                       mode needs a feature provider).

        Raises:
            AssertionError: When the index is below threshold, with a message
                including the index, threshold, both texts and the word mapping.
        """
        result = compare_detailed(actual, expected, config=config)
        if result.index < threshold:
            mapping = [
                (result.word_first(i), result.word_second(j))
                for i, j in sorted(result.first_mapping.items())
            ]
            raise AssertionError(
                f"texts not similar: "
                f"index={result.index:.4f} < threshold={threshold}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}\n"
                f"  word_mapping: {mapping}"
            )

    return _assert
