# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Schema definitions for extracted colors.

All types in this module are immutable (frozen dataclasses).
A parsed color variant is validated once, at construction; a record built
from it is a fact for the lifetime of the result set.
"""

from colorextract.schema.extracted_color import (
    ColorNotation,
    ExtractedColor,
    HexColor,
    HSLColor,
    OKLCHColor,
    ParsedColor,
    RGBColor,
)

__all__ = [
    # Notation tag
    "ColorNotation",
    # Parsed color variants (closed set)
    "HexColor",
    "RGBColor",
    "HSLColor",
    "OKLCHColor",
    "ParsedColor",
    # Pipeline record
    "ExtractedColor",
]
