"""ComparisonConfig, OperationCosts and the comparison option enums.

ComparisonConfig is a frozen (immutable) dataclass holding one value per
comparison option plus the operation cost vector.  Each option is a
single StrEnum, so contradictory combinations (e.g. "phonetic" and
"plain" at once) cannot be expressed.  Reconfiguring means building a new
snapshot with ``replace()``; a snapshot is never mutated, so it can be
shared freely between threads.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from enum import StrEnum, auto

__all__ = [
    "CaseMode",
    "ComparisonConfig",
    "OperationCosts",
    "OutputMode",
    "SpecialCharacters",
    "SwapMode",
    "SymbolMode",
    "Tokenization",
]


class Tokenization(StrEnum):
    """How the input text is cut into words.

    - WORDS:    Split on whitespace runs; each word is aligned separately.
    - ONE_WORD: Treat the whole text as a single word (spaces included).
    """

    WORDS = auto()
    ONE_WORD = auto()


class SymbolMode(StrEnum):
    """Alphabet the words are written in.

    - PLAIN:    Ordinary characters with unit-ish edit costs.
    - PHONETIC: XSAMPA symbols compared through a feature table.
    """

    PLAIN = auto()
    PHONETIC = auto()


class CaseMode(StrEnum):
    """Whether letter case is significant (plain mode only)."""

    USE_CASE = auto()
    IGNORE_CASE = auto()


class SpecialCharacters(StrEnum):
    """Whether punctuation and other special characters are removed first."""

    STRIP = auto()
    KEEP = auto()


class SwapMode(StrEnum):
    """Whether transpositions of adjacent symbols are priced as one swap."""

    ALLOW = auto()
    DISALLOW = auto()


class OutputMode(StrEnum):
    """Which number ``compare()`` returns.

    - RELATIVE: The normalised similarity index (1.0 means identical).
    - ABSOLUTE: The weighted distance value.
    """

    RELATIVE = auto()
    ABSOLUTE = auto()


@dataclass(frozen=True, slots=True)
class OperationCosts:
    """Immutable cost vector for the edit operations.

    Attributes:
        substitution: Cost of replacing one character by another (plain mode).
        indel: Cost of inserting or deleting one character (plain mode).
        swap: Cost of transposing two adjacent characters.
        case_swap: Cost of a case-only substitution, and of a transposition
            that only matches when case is ignored.
        phonetic_swap: Cost of transposing two adjacent phonetic symbols.
        position_decay: Per-position factor applied to word similarities by
            their distance in the sentence, in (0, 1].
        phonetic_max_diff: Largest feature distance two symbols can have;
            used to normalise phonetic alignments.
    """

    substitution: float = 2.0
    indel: float = 1.0
    swap: float = 1.0
    case_swap: float = 1.5
    phonetic_swap: float = 1.5
    position_decay: float = 0.95
    phonetic_max_diff: float = 20.0

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value) or value < 0.0:
                msg = f"{f.name} must be a finite value >= 0.0, got {value}"
                raise ValueError(msg)
        if not 0.0 < self.position_decay <= 1.0:
            msg = f"position_decay must be in (0, 1], got {self.position_decay}"
            raise ValueError(msg)

    def as_vector(self) -> tuple[float, ...]:
        """Return the costs in canonical order (substitution first, max diff last)."""
        return dataclasses.astuple(self)


@dataclass(frozen=True, slots=True)
class ComparisonConfig:
    """Immutable snapshot of every option that influences a comparison.

    Attributes:
        tokenization: Split into words or compare as one word.
        symbols: Plain characters or XSAMPA phonetic symbols.
        case: Whether case is significant.  Ignored in phonetic mode, where
            case always distinguishes symbols.
        special: Strip or keep special characters before comparing.
        swap: Allow or forbid transpositions.  ``None`` picks the mode
            default: allowed for plain text, forbidden for phonetic text.
        output: Which number ``compare()`` returns.
        costs: The operation cost vector.
    """

    tokenization: Tokenization = Tokenization.WORDS
    symbols: SymbolMode = SymbolMode.PLAIN
    case: CaseMode = CaseMode.USE_CASE
    special: SpecialCharacters = SpecialCharacters.STRIP
    swap: SwapMode | None = None
    output: OutputMode = OutputMode.RELATIVE
    costs: OperationCosts = field(default_factory=OperationCosts)

    def __post_init__(self) -> None:
        checks = (
            ("tokenization", Tokenization),
            ("symbols", SymbolMode),
            ("case", CaseMode),
            ("special", SpecialCharacters),
            ("output", OutputMode),
        )
        # Plain strings such as "phonetic" are accepted and coerced.
        for name, enum_type in checks:
            value = getattr(self, name)
            if not isinstance(value, enum_type):
                try:
                    object.__setattr__(self, name, enum_type(value))
                except ValueError:
                    msg = f"{name} must be a {enum_type.__name__}, got {value!r}"
                    raise ValueError(msg) from None
        if self.swap is not None and not isinstance(self.swap, SwapMode):
            try:
                object.__setattr__(self, "swap", SwapMode(self.swap))
            except ValueError:
                msg = f"swap must be a SwapMode or None, got {self.swap!r}"
                raise ValueError(msg) from None
        if not isinstance(self.costs, OperationCosts):
            msg = f"costs must be an OperationCosts, got {self.costs!r}"
            raise ValueError(msg)

    # ------------------------------------------------------------------
    # Derived flags
    # ------------------------------------------------------------------

    @property
    def one_word(self) -> bool:
        return self.tokenization is Tokenization.ONE_WORD

    @property
    def use_phonetic(self) -> bool:
        return self.symbols is SymbolMode.PHONETIC

    @property
    def mind_case(self) -> bool:
        return self.case is CaseMode.USE_CASE

    @property
    def ignore_special(self) -> bool:
        return self.special is SpecialCharacters.STRIP

    @property
    def allow_swap(self) -> bool:
        if self.swap is None:
            return not self.use_phonetic
        return self.swap is SwapMode.ALLOW

    @property
    def absolute_output(self) -> bool:
        return self.output is OutputMode.ABSOLUTE

    @property
    def transpositions_possible(self) -> bool:
        """True when an alignment cell can be reached by a transposition.

        Besides the ordinary swap, plain case-sensitive alignments price a
        transposition that only matches case-insensitively, even when
        swapping is disallowed.
        """
        return self.allow_swap or (not self.use_phonetic and self.mind_case)

    def replace(self, **changes: object) -> ComparisonConfig:
        """Return a new snapshot with ``changes`` applied."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]
