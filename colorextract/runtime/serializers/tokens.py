# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Structured serializers: design tokens (JSON) and TOML.

JSON follows the Design Tokens Community Group format::

    {
      "color": {
        "color-1": { "$type": "color", "$value": "#FF5733" }
      }
    }
"""

from __future__ import annotations

import json
from typing import Optional, Sequence, Union

from colorextract.core.convert import TargetFormat
from colorextract.runtime.serializers.base import format_color
from colorextract.schema import ExtractedColor


def to_tokens_json(
    colors: Sequence[ExtractedColor],
    *,
    target: Optional[Union[TargetFormat, str]] = None,
    indent: Optional[int] = 2,
) -> str:
    """Serialize colors as a DTCG design-token document."""
    tokens = {
        f"color-{index}": {
            "$type": "color",
            "$value": format_color(color, target),
        }
        for index, color in enumerate(colors, start=1)
    }
    return json.dumps({"color": tokens}, indent=indent, sort_keys=True)


def _toml_string(value: str) -> str:
    """TOML basic string with escapes."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def to_toml(
    colors: Sequence[ExtractedColor],
    source: str,
    *,
    target: Optional[Union[TargetFormat, str]] = None,
) -> str:
    """Serialize colors as a TOML document with one [[colors]] table each."""
    lines = [
        f"source = {_toml_string(source)}",
        f"count = {len(colors)}",
    ]
    for color in colors:
        lines += [
            "",
            "[[colors]]",
            f"original = {_toml_string(color.original)}",
            f"format = {_toml_string(color.notation.value)}",
            f"normalized = {_toml_string(color.canonical_key)}",
            f"converted = {_toml_string(format_color(color, target))}",
        ]
    return "\n".join(lines) + "\n"
