# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Component parsing and validation.

Turns captured component strings into validated color variants. A candidate
that fails to convert or falls outside its range is dropped: the parse
functions return None and never raise. Extraction is best-effort over noisy
text, so one malformed token must not abort a run.
"""

from __future__ import annotations

import logging
from typing import Optional

from colorextract.core.dedupe import canonical_key
from colorextract.core.patterns import Grammar, NotationMatch
from colorextract.schema import (
    ExtractedColor,
    HexColor,
    HSLColor,
    OKLCHColor,
    ParsedColor,
    RGBColor,
)

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _parse_alpha(alpha: Optional[str]) -> Optional[float]:
    return None if alpha is None else float(alpha)


def parse_hex(value: str) -> Optional[HexColor]:
    """
    Parse a hex color string.

    Accepts "#RGB", "#RRGGBB", "#RRGGBBAA" with or without the leading '#'.
    3-digit forms are expanded by digit doubling (F00 → FF0000).

    Returns:
        HexColor, or None if the string is not a valid hex color
    """
    digits = value[1:] if value.startswith("#") else value

    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)

    if len(digits) not in (6, 8) or not set(digits) <= _HEX_DIGITS:
        return None

    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    alpha = channels[3] if len(channels) == 4 else None
    return HexColor(channels[0], channels[1], channels[2], alpha)


def parse_rgb(
    red: str,
    green: str,
    blue: str,
    alpha: Optional[str] = None,
) -> Optional[RGBColor]:
    """Parse rgb()/rgba() components. Channels 0-255, alpha 0-1."""
    try:
        return RGBColor(int(red), int(green), int(blue), _parse_alpha(alpha))
    except ValueError as e:
        logger.debug("Rejected rgb(%s, %s, %s, %s): %s", red, green, blue, alpha, e)
        return None


def parse_hsl(
    hue: str,
    saturation: str,
    lightness: str,
    alpha: Optional[str] = None,
) -> Optional[HSLColor]:
    """Parse hsl()/hsla() components. Hue 0-360, saturation/lightness 0-100."""
    try:
        return HSLColor(
            float(hue), float(saturation), float(lightness), _parse_alpha(alpha),
        )
    except ValueError as e:
        logger.debug(
            "Rejected hsl(%s, %s%%, %s%%, %s): %s",
            hue, saturation, lightness, alpha, e,
        )
        return None


def parse_oklch(
    lightness: str,
    chroma: str,
    hue: str,
    alpha: Optional[str] = None,
) -> Optional[OKLCHColor]:
    """Parse oklch() components. Lightness 0-100%, chroma >= 0, hue 0-360."""
    try:
        return OKLCHColor(
            float(lightness), float(chroma), float(hue), _parse_alpha(alpha),
        )
    except ValueError as e:
        logger.debug(
            "Rejected oklch(%s%% %s %s / %s): %s", lightness, chroma, hue, alpha, e,
        )
        return None


def parse_components(match: NotationMatch) -> Optional[ParsedColor]:
    """Dispatch a match to the parser for its grammar."""
    if match.grammar is Grammar.HEX:
        parsed = parse_hex(match.groups[0])
        if parsed is None:
            logger.debug("Rejected hex %r", match.text)
        return parsed
    if match.grammar is Grammar.RGB:
        return parse_rgb(*match.groups)
    if match.grammar is Grammar.HSL:
        return parse_hsl(*match.groups)
    return parse_oklch(*match.groups)


def parse_match(match: NotationMatch) -> Optional[ExtractedColor]:
    """
    Build an ExtractedColor from a matched span.

    Returns:
        The record with its canonical key, or None if any component is
        invalid (the whole match is dropped)
    """
    parsed = parse_components(match)
    if parsed is None:
        return None
    return ExtractedColor(
        original=match.text,
        notation=parsed.notation,
        canonical_key=canonical_key(parsed),
        source_range=match.span,
    )
