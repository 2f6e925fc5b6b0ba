# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Notation matching.

Scans raw text for the four color grammars in a single left-to-right pass:

    hex       #RGB | #RRGGBB | #RRGGBBAA        (not followed by a hex digit)
    rgbcall   rgb(INT, INT, INT[, ALPHA])       rgba( accepted too
    hslcall   hsl(NUM[,] NUM%[,] NUM%[ ,|/ ALPHA])
    oklchcall oklch(NUM% NUM NUM[ / ALPHA])

    ALPHA := 0 | 1 | 0?.DIGITS

Every grammar starts with a distinct literal prefix, so the alternation never
yields overlapping matches. Numeric ranges are not checked here; see
colorextract.core.parser.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterator, Optional


class Grammar(Enum):
    """Which textual grammar produced a match."""
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"


_ALPHA = r"(?:0|1|0?\.\d+)"
_NUM = r"\d{1,3}(?:\.\d+)?"

# Fragments use named groups prefixed by grammar so they can share one regex
_FRAGMENTS = {
    Grammar.HEX: r"""
        \#(?P<hex_digits>[0-9A-Fa-f]{8}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})
        (?![0-9A-Fa-f])
    """,
    Grammar.RGB: rf"""
        rgba?\s*\(\s*
        (?P<rgb_r>\d{{1,3}})\s*,\s*
        (?P<rgb_g>\d{{1,3}})\s*,\s*
        (?P<rgb_b>\d{{1,3}})
        (?:\s*,\s*(?P<rgb_a>{_ALPHA}))?
        \s*\)
    """,
    Grammar.HSL: rf"""
        hsla?\s*\(\s*
        (?P<hsl_h>{_NUM})\s*,?\s*
        (?P<hsl_s>{_NUM})%\s*,?\s*
        (?P<hsl_l>{_NUM})%
        (?:\s*[,/]\s*(?P<hsl_a>{_ALPHA}))?
        \s*\)
    """,
    Grammar.OKLCH: rf"""
        oklch\s*\(\s*
        (?P<oklch_l>{_NUM})%\s+
        (?P<oklch_c>\d+(?:\.\d+)?)\s+
        (?P<oklch_h>{_NUM})
        (?:\s*/\s*(?P<oklch_a>{_ALPHA}))?
        \s*\)
    """,
}

# Captured groups per grammar, in component order
_GROUPS = {
    Grammar.HEX: ("hex_digits",),
    Grammar.RGB: ("rgb_r", "rgb_g", "rgb_b", "rgb_a"),
    Grammar.HSL: ("hsl_h", "hsl_s", "hsl_l", "hsl_a"),
    Grammar.OKLCH: ("oklch_l", "oklch_c", "oklch_h", "oklch_a"),
}


@dataclass(frozen=True, slots=True)
class NotationMatch:
    """
    One candidate color span found in text.

    Attributes:
        grammar: Grammar that matched
        text: Matched substring
        span: (start, end) character offsets
        groups: Captured component strings in order; optional alpha is None
            when absent
    """
    grammar: Grammar
    text: str
    span: tuple[int, int]
    groups: tuple[Optional[str], ...]


@dataclass(frozen=True)
class ColorPatterns:
    """
    Compiled grammar set.

    Stateless once built; share one instance freely between calls and
    threads. Build with default_patterns() or from a subset of grammars.
    """
    grammars: tuple[Grammar, ...]
    combined: re.Pattern

    @classmethod
    def compile(cls, grammars: tuple[Grammar, ...] = tuple(Grammar)) -> ColorPatterns:
        if not grammars:
            raise ValueError("At least one grammar is required")
        source = "|".join(f"(?:{_FRAGMENTS[g]})" for g in grammars)
        return cls(grammars=tuple(grammars), combined=re.compile(source, re.VERBOSE))

    def grammar_of(self, match: re.Match) -> Grammar:
        for grammar in self.grammars:
            if match.group(_GROUPS[grammar][0]) is not None:
                return grammar
        # Unreachable: every fragment captures its first group
        raise ValueError(f"Match {match.group(0)!r} has no grammar")


@lru_cache(maxsize=None)
def default_patterns() -> ColorPatterns:
    """The full grammar set, compiled once per process."""
    return ColorPatterns.compile()


def scan(text: str, patterns: Optional[ColorPatterns] = None) -> Iterator[NotationMatch]:
    """
    Lazily yield non-overlapping color candidates in text order.

    Args:
        text: Arbitrary input text
        patterns: Compiled grammar set (default: all four grammars)

    Yields:
        NotationMatch for each candidate span. Component values are not
        validated yet.
    """
    patterns = patterns or default_patterns()
    for match in patterns.combined.finditer(text):
        grammar = patterns.grammar_of(match)
        yield NotationMatch(
            grammar=grammar,
            text=match.group(0),
            span=match.span(),
            groups=tuple(match.group(name) for name in _GROUPS[grammar]),
        )
