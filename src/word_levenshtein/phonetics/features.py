"""FeatureVector and FeatureTable: the phonetic feature lookup.

Every XSAMPA symbol is described by nine optional numbers::

    vowel  advancement  height  roundness  consonant  place  manner  voice  length

``vowel`` and ``consonant`` are class flags (1 when the symbol belongs to
the class), the three numbers after each flag locate the symbol inside
that class, and ``length`` is the duration.  A ``None`` slot is undefined.

Feature tables are plain text, one symbol per line::

    # sym  vow adv hei rnd  con pla man voi  len
    a      1   3   1   1    0   _   _   _    1
    a:     1   3   1   1    0   _   _   _    2
    p      0   _   _   _    1   1   1   0    1

Lines that do not fit this shape (comments, headers, blanks) are skipped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import astuple, dataclass
from pathlib import Path

from word_levenshtein.errors import FeatureProviderUnavailableError

__all__ = [
    "FeatureTable",
    "FeatureVector",
    "load_feature_table",
    "parse_feature_table",
]

logger = logging.getLogger(__name__)

_VALUE = r"((?:\d{1,2}(?:\.\d)?)|_)(?:\s+|$)"

# Symbol (1-3 chars), optional length mark glued to the key, then nine values.
_ROW = re.compile(r"\s*(\S{1,3})\s*(:\\?)?\s+" + _VALUE * 9)


@dataclass(frozen=True, slots=True)
class FeatureVector:
    """Nine-slot phonetic description of one symbol.

    Attributes:
        vowel: 1 when the symbol is a vowel, 0 otherwise.
        advancement, height, roundness: Vowel coordinates.
        consonant: 1 when the symbol is a consonant, 0 otherwise.
        place, manner, voice: Consonant coordinates.
        length: Duration of the symbol.
    """

    vowel: float | None
    advancement: float | None
    height: float | None
    roundness: float | None
    consonant: float | None
    place: float | None
    manner: float | None
    voice: float | None
    length: float | None

    @classmethod
    def from_slots(cls, slots: Iterable[float | None]) -> FeatureVector:
        """Build a vector from exactly nine values in table order."""
        values = [None if v is None else float(v) for v in slots]
        if len(values) != 9:
            msg = f"a feature vector needs exactly 9 slots, got {len(values)}"
            raise ValueError(msg)
        return cls(*values)

    @property
    def is_vowel(self) -> bool:
        return self.vowel == 1

    @property
    def is_consonant(self) -> bool:
        return self.consonant == 1

    @property
    def vowel_coordinates(self) -> tuple[float | None, float | None, float | None]:
        return (self.advancement, self.height, self.roundness)

    @property
    def consonant_coordinates(self) -> tuple[float | None, float | None, float | None]:
        return (self.place, self.manner, self.voice)

    def as_slots(self) -> tuple[float | None, ...]:
        return astuple(self)


class FeatureTable:
    """In-memory symbol-to-features mapping; satisfies ``FeatureProvider``.

    Example::

        table = FeatureTable({"0": FeatureVector.from_slots([0, None, None, None, 0, None, None, None, 0])})
        table.features("0")   # FeatureVector(vowel=0.0, ...)
        table.features("x")   # None
    """

    def __init__(self, vectors: Mapping[str, FeatureVector] | None = None) -> None:
        self._vectors: dict[str, FeatureVector] = dict(vectors or {})

    def features(self, symbol: str) -> FeatureVector | None:
        return self._vectors.get(symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._vectors

    def __len__(self) -> int:
        return len(self._vectors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._vectors)


def parse_feature_table(lines: Iterable[str]) -> FeatureTable:
    """Parse feature-table text into a ``FeatureTable``.

    Args:
        lines: The table text, one symbol per line.  A single string is
            accepted and split into lines.

    Returns:
        The parsed table.  Later rows for the same symbol replace earlier ones.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()

    vectors: dict[str, FeatureVector] = {}
    for number, line in enumerate(lines, start=1):
        match = _ROW.search(line)
        if match is None:
            if line.strip():
                logger.debug("skipping feature table line %d: %r", number, line)
            continue
        symbol = match.group(1) + (match.group(2) or "")
        slots = [None if v == "_" else float(v) for v in match.groups()[2:]]
        vectors[symbol] = FeatureVector.from_slots(slots)
    return FeatureTable(vectors)


def load_feature_table(path: str | Path) -> FeatureTable:
    """Read and parse a UTF-8 feature-table file.

    Raises:
        FeatureProviderUnavailableError: The file cannot be read, is not
            UTF-8 text, or holds no feature rows.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"cannot read phonetic feature table {str(path)!r}: {exc}"
        raise FeatureProviderUnavailableError(msg) from exc

    table = parse_feature_table(text)
    if not len(table):
        msg = f"phonetic feature table {str(path)!r} contains no symbols"
        raise FeatureProviderUnavailableError(msg)
    logger.info("loaded %d phonetic symbols from %s", len(table), path)
    return table
