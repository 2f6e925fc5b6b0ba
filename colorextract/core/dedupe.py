# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Normalization and deduplication.

Every color maps to one canonical key:
- Hex, RGB and HSL families: uppercase hex, #RRGGBB or #RRGGBBAA
- OKLCH family: oklch(L.LL% C.CCCC H.HH[ / A.AA]), never converted to hex

Deduplication keeps the first occurrence of each case-folded key, in input
order. Keys are compared as strings, so:
- #F00, #ff0000 and rgb(255, 0, 0) collapse to one color
- An OKLCH color does not collapse with a hex color of the same chromaticity
- #FF0000 and #FF0000FF stay distinct (alpha is part of the key)
"""

from __future__ import annotations

from typing import Iterable

from colorextract.schema import ExtractedColor, ParsedColor


def canonical_key(color: ParsedColor) -> str:
    """Canonical string identity of a parsed color."""
    return color.normalized


def deduplicate(colors: Iterable[ExtractedColor]) -> list[ExtractedColor]:
    """
    Order-preserving set insertion over canonical keys.

    Args:
        colors: Records in original text order (may be a lazy iterator)

    Returns:
        First occurrence of each case-folded canonical key, in input order
    """
    seen: set[str] = set()
    unique: list[ExtractedColor] = []

    for color in colors:
        if color.identity in seen:
            continue
        seen.add(color.identity)
        unique.append(color)

    return unique
