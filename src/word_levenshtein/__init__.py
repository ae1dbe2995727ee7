"""Word-level weighted Damerau-Levenshtein similarity for plain and phonetic text."""

from __future__ import annotations

from word_levenshtein.algorithm.config import (
    CaseMode,
    ComparisonConfig,
    OperationCosts,
    OutputMode,
    SpecialCharacters,
    SwapMode,
    SymbolMode,
    Tokenization,
)
from word_levenshtein.algorithm.path import EditAction
from word_levenshtein.api import compare, compare_detailed, is_similar, similarity_index
from word_levenshtein.comparator import LevenshteinComparator
from word_levenshtein.errors import (
    FeatureProviderUnavailableError,
    InvalidInputError,
    LevenshteinError,
    PhoneticError,
    UndefinedPhoneticSymbolError,
)
from word_levenshtein.phonetics.features import (
    FeatureTable,
    FeatureVector,
    load_feature_table,
    parse_feature_table,
)
from word_levenshtein.protocols import FeatureProvider
from word_levenshtein.result import ComparisonResult, DetailedComparison

__version__: str = "0.1.0"
__all__: list[str] = [
    "CaseMode",
    "ComparisonConfig",
    "ComparisonResult",
    "DetailedComparison",
    "EditAction",
    "FeatureProvider",
    "FeatureProviderUnavailableError",
    "FeatureTable",
    "FeatureVector",
    "InvalidInputError",
    "LevenshteinComparator",
    "LevenshteinError",
    "OperationCosts",
    "OutputMode",
    "PhoneticError",
    "SpecialCharacters",
    "SwapMode",
    "SymbolMode",
    "Tokenization",
    "UndefinedPhoneticSymbolError",
    "compare",
    "compare_detailed",
    "is_similar",
    "load_feature_table",
    "parse_feature_table",
    "similarity_index",
]
