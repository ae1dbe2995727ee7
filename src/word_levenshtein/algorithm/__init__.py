"""Alignment, matching and normalisation algorithms."""

from __future__ import annotations

from word_levenshtein.algorithm.alignment import CharacterAligner, PhoneticAligner
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
from word_levenshtein.algorithm.matcher import greedy_match
from word_levenshtein.algorithm.normalizer import alignment_index
from word_levenshtein.algorithm.path import EditAction, reconstruct_path
from word_levenshtein.algorithm.sequence import SequenceMatch, WordSequenceMatcher

__all__ = [
    "CaseMode",
    "CharacterAligner",
    "ComparisonConfig",
    "EditAction",
    "OperationCosts",
    "OutputMode",
    "PhoneticAligner",
    "SequenceMatch",
    "SpecialCharacters",
    "SwapMode",
    "SymbolMode",
    "Tokenization",
    "WordSequenceMatcher",
    "alignment_index",
    "greedy_match",
    "reconstruct_path",
]
