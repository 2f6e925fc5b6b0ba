# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
colorextract -- Find, normalize and convert color literals in text.

Locates hex, rgb(), hsl() and oklch() colors in arbitrary text, removes
duplicates written in different notations, and converts between sRGB,
HSL, HWB, CIE LAB/LCH, OKLab/OKLCH and platform color constructors.

Quick start::

    from colorextract import extract, convert

    colors = extract("a { color: #F00 } b { color: rgb(255, 0, 0) }")
    colors[0].canonical_key          # '#FF0000'
    convert(colors[0], "oklch")      # 'oklch(62.80% 0.2577 29.23)'
"""

from __future__ import annotations

__version__ = "1.0.0"

from colorextract.core import (
    ExtractionConfig,
    TargetFormat,
    convert,
    extract,
    order_for_layout,
)
from colorextract.schema import ColorNotation, ExtractedColor

__all__ = [
    # Core API
    "extract",
    "convert",
    "order_for_layout",
    "ExtractionConfig",
    # Types (commonly needed)
    "ExtractedColor",
    "ColorNotation",
    "TargetFormat",
    # Version
    "__version__",
]
