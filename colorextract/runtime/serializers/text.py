# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Plain-text serializers.

- Report: numbered, human-readable listing with the source name
- Clean: one converted value per line, for piping into other tools
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from colorextract.core.convert import TargetFormat
from colorextract.runtime.serializers.base import format_color
from colorextract.schema import ExtractedColor


def to_report(
    colors: Sequence[ExtractedColor],
    source: str,
    *,
    target: Optional[Union[TargetFormat, str]] = None,
) -> str:
    """Serialize colors as a numbered report.

    Example::

        Found 2 unique color(s) in style.css:

        1. #F00 [hex] -> #FF0000
        2. rgba(0, 0, 255, 0.5) [rgba] -> #0000FF7F
    """
    if not colors:
        return f"No colors found in {source}"

    lines = [f"Found {len(colors)} unique color(s) in {source}:", ""]
    for index, color in enumerate(colors, start=1):
        converted = format_color(color, target)
        lines.append(
            f"{index}. {color.original} [{color.notation.value}] -> {converted}"
        )
    return "\n".join(lines) + "\n"


def to_clean(
    colors: Sequence[ExtractedColor],
    *,
    target: Optional[Union[TargetFormat, str]] = None,
) -> str:
    """One converted value per line, nothing else."""
    return "\n".join(format_color(color, target) for color in colors)
