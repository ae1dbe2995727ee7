"""XSAMPA symbol grammar.

A phonetic word is read as a run of symbols.  A symbol is one non-space
character, optionally followed by up to two diacritic marks (backslash or
backtick), optionally followed by a length mark (``:`` or ``:\\``).

Examples::

    split_symbols("gudmO:nIN")   # ['g', 'u', 'd', 'm', 'O:', 'n', 'I', 'N']
    split_symbols("r\\`a:")       # ['r\\`', 'a:']
"""

from __future__ import annotations

import re

__all__ = ["SILENCE", "split_symbols"]

# The silence glyph: the feature table row every other symbol is measured
# against when it is inserted or deleted.
SILENCE = "0"

_SYMBOL = re.compile(r"\S[\\`]{0,2}(?::\\?)?")


def split_symbols(word: str) -> list[str]:
    """Return the XSAMPA symbols of ``word`` in order (empty for blank input)."""
    return _SYMBOL.findall(word)
