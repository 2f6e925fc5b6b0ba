# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Format conversion.

Renders an extracted color in any of 13 target notations. The source color
is resolved from its canonical key:

- Hex keys are used directly.
- OKLCH keys are converted OKLCH → OKLab → Linear RGB → sRGB and clamped to
  8 bits. The oklch target returns the key unchanged.
- Any other key cannot be resolved; every target then returns the key
  unchanged instead of failing.

Alpha suffixes appear only when the source color carries alpha.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable, Optional, Union

import numpy as np

from colorextract.core import colorspace as cs
from colorextract.core.parser import parse_hex, parse_oklch
from colorextract.schema import ExtractedColor, HexColor

logger = logging.getLogger(__name__)


class TargetFormat(Enum):
    """Notation a color can be converted to."""
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HWB = "hwb"
    LCH = "lch"
    LAB = "lab"
    OKLAB = "oklab"
    OKLCH = "oklch"
    SWIFTUI = "swiftui"
    UICOLOR = "uicolor"
    CGCOLOR = "cgcolor"


# =============================================================================
# Source Resolution
# =============================================================================


# Canonical oklch key as written by OKLCHColor.normalized. Alpha is printed
# with two decimals, so "1.00" must be accepted here.
_OKLCH_KEY = re.compile(
    r"oklch\(\s*(\d+(?:\.\d+)?)%\s+(\d+(?:\.\d+)?)\s+(\d+(?:\.\d+)?)"
    r"(?:\s*/\s*(\d+(?:\.\d+)?))?\s*\)"
)


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


def resolve_hex(color: ExtractedColor) -> Optional[HexColor]:
    """
    Resolve a color to 8-bit sRGB.

    Returns:
        HexColor, or None if the canonical key is neither hex nor oklch
    """
    parsed = parse_hex(color.canonical_key)
    if parsed is not None:
        return parsed

    match = _OKLCH_KEY.fullmatch(color.canonical_key)
    if match is None:
        return None
    oklch = parse_oklch(*match.groups())
    if oklch is None:
        return None

    srgb = cs.oklch_to_srgb([oklch.lightness / 100.0, oklch.chroma, oklch.hue])
    r, g, b = (int(v) for v in cs.quantize_channel(srgb))
    alpha = None if oklch.alpha is None else int(oklch.alpha * 255.0)
    return HexColor(r, g, b, alpha)


# =============================================================================
# Renderers
# =============================================================================


def _alpha_suffix(hex_color: HexColor, template: str) -> str:
    if hex_color.alpha is None:
        return ""
    return template.format(hex_color.alpha_fraction)


def _to_hex(c: HexColor) -> str:
    return c.normalized


def _to_rgb(c: HexColor) -> str:
    return f"rgb({c.red}, {c.green}, {c.blue})"


def _to_rgba(c: HexColor) -> str:
    if c.alpha is None:
        return _to_rgb(c)
    return f"rgba({c.red}, {c.green}, {c.blue}, {c.alpha_fraction:.2f})"


def _hsl_parts(c: HexColor) -> tuple[int, int, int]:
    # Truncated; hwb() rounds instead
    h, s, l = cs.rgb_to_hsl(c.channels())
    return int(h) % 360, int(s * 100.0), int(l * 100.0)


def _to_hsl(c: HexColor) -> str:
    h, s, l = _hsl_parts(c)
    return f"hsl({h}, {s}%, {l}%)"


def _to_hsla(c: HexColor) -> str:
    if c.alpha is None:
        return _to_hsl(c)
    h, s, l = _hsl_parts(c)
    return f"hsla({h}, {s}%, {l}%, {c.alpha_fraction:.2f})"


def _to_hwb(c: HexColor) -> str:
    h, w, b = cs.rgb_to_hwb(c.channels())
    body = f"{_round_half_up(h) % 360} {_round_half_up(w * 100.0)}% {_round_half_up(b * 100.0)}%"
    return f"hwb({body}{_alpha_suffix(c, ' / {:.2f}')})"


def _to_lch(c: HexColor) -> str:
    L, C, H = cs.srgb_to_lch(c.channels())
    return f"lch({L:.2f}% {C:.2f} {H:.2f}{_alpha_suffix(c, ' / {:.2f}')})"


def _to_lab(c: HexColor) -> str:
    L, a, b = cs.srgb_to_lab(c.channels())
    return f"lab({L:.2f}% {a:.2f} {b:.2f}{_alpha_suffix(c, ' / {:.2f}')})"


def _to_oklab(c: HexColor) -> str:
    L, a, b = cs.srgb_to_oklab(c.channels())
    return f"oklab({L:.4f} {a:.4f} {b:.4f}{_alpha_suffix(c, ' / {:.2f}')})"


def _to_oklch(c: HexColor) -> str:
    L, C, H = cs.srgb_to_oklch(c.channels())
    return f"oklch({L * 100.0:.2f}% {C:.4f} {H:.2f}{_alpha_suffix(c, ' / {:.2f}')})"


def _to_swiftui(c: HexColor) -> str:
    r, g, b = c.channels()
    opacity = _alpha_suffix(c, ", opacity: {:.3f}")
    return f"Color(red: {r:.3f}, green: {g:.3f}, blue: {b:.3f}{opacity})"


def _platform_constructor(name: str) -> Callable[[HexColor], str]:
    def render(c: HexColor) -> str:
        r, g, b = c.channels()
        alpha = "1.0" if c.alpha is None else f"{c.alpha_fraction:.3f}"
        return f"{name}(red: {r:.3f}, green: {g:.3f}, blue: {b:.3f}, alpha: {alpha})"
    return render


_RENDERERS: dict[TargetFormat, Callable[[HexColor], str]] = {
    TargetFormat.HEX: _to_hex,
    TargetFormat.RGB: _to_rgb,
    TargetFormat.RGBA: _to_rgba,
    TargetFormat.HSL: _to_hsl,
    TargetFormat.HSLA: _to_hsla,
    TargetFormat.HWB: _to_hwb,
    TargetFormat.LCH: _to_lch,
    TargetFormat.LAB: _to_lab,
    TargetFormat.OKLAB: _to_oklab,
    TargetFormat.OKLCH: _to_oklch,
    TargetFormat.SWIFTUI: _to_swiftui,
    TargetFormat.UICOLOR: _platform_constructor("UIColor"),
    TargetFormat.CGCOLOR: _platform_constructor("CGColor"),
}


# =============================================================================
# Public API
# =============================================================================


def convert(color: ExtractedColor, target: Union[TargetFormat, str]) -> str:
    """
    Render a color in the target notation.

    Args:
        color: Extracted color
        target: TargetFormat member or its value ("hex", "rgb", ..., "cgcolor")

    Returns:
        Formatted color string. Falls back to the canonical key when the
        color cannot be resolved to sRGB.

    Raises:
        ValueError: If target is not a known format name

    Example:
        >>> convert(ExtractedColor("#F00", ColorNotation.HEX, "#FF0000"), "hsl")
        'hsl(0, 100%, 50%)'
    """
    target = TargetFormat(target)

    if target is TargetFormat.OKLCH and color.notation.is_oklch_family:
        return color.canonical_key

    hex_color = resolve_hex(color)
    if hex_color is None:
        logger.debug(
            "Cannot resolve %r to sRGB; returning it unchanged for %s",
            color.canonical_key, target.value,
        )
        return color.canonical_key

    return _RENDERERS[target](hex_color)
