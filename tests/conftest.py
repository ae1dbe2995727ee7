"""Shared fixtures: a small XSAMPA feature table with hand-checkable distances."""

from __future__ import annotations

import pytest

from word_levenshtein import FeatureTable, parse_feature_table

FEATURE_TABLE_TEXT = """\
# sym  vow adv hei rnd  con pla man voi  len
0      0   _   _   _    0   _   _   _    0
a      1   3   1   1    0   _   _   _    1
a:     1   3   1   1    0   _   _   _    2
i      1   1   4   1    0   _   _   _    1
u      1   3   4   2    0   _   _   _    1
p      0   _   _   _    1   1   1   0    1
b      0   _   _   _    1   1   1   1    1
t      0   _   _   _    1   3   1   0    1
m      0   _   _   _    1   1   3   1    1
j      1   1   4   1    1   5   4   1    1
w      1   2   4   1    1   5   4   1    2
q      _   _   _   _    1   2   2   0    1
"""


@pytest.fixture
def feature_table() -> FeatureTable:
    return parse_feature_table(FEATURE_TABLE_TEXT)


@pytest.fixture
def feature_table_text() -> str:
    return FEATURE_TABLE_TEXT
