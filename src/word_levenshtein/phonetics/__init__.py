"""XSAMPA symbol grammar, feature tables and feature distances."""

from __future__ import annotations

from word_levenshtein.phonetics.distance import (
    INCOMPATIBLE,
    Comparable,
    Incompatible,
    PhoneticFeatureDistance,
    SymbolDistance,
)
from word_levenshtein.phonetics.features import (
    FeatureTable,
    FeatureVector,
    load_feature_table,
    parse_feature_table,
)
from word_levenshtein.phonetics.symbols import SILENCE, split_symbols

__all__ = [
    "INCOMPATIBLE",
    "SILENCE",
    "Comparable",
    "FeatureTable",
    "FeatureVector",
    "Incompatible",
    "PhoneticFeatureDistance",
    "SymbolDistance",
    "load_feature_table",
    "parse_feature_table",
    "split_symbols",
]
