# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from colorextract.core.convert import TargetFormat, convert
from colorextract.schema import ExtractedColor


class OutputFormat(Enum):
    """Output format for a result set."""

    STANDARD = "standard"
    JSON = "json"
    TOML = "toml"
    CLEAN = "clean"
    SVG = "svg"


def format_color(
    color: ExtractedColor,
    target: Optional[Union[TargetFormat, str]] = None,
) -> str:
    """Converted value of a color, or its canonical key when no target is set."""
    if target is None:
        return color.canonical_key
    return convert(color, target)
