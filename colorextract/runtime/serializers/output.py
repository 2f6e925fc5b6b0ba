# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""Dispatch a result set to the serializer for an output format."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from colorextract.core.convert import TargetFormat
from colorextract.runtime.serializers.base import OutputFormat
from colorextract.runtime.serializers.svg import SwatchLayout, to_svg
from colorextract.runtime.serializers.text import to_clean, to_report
from colorextract.runtime.serializers.tokens import to_tokens_json, to_toml
from colorextract.schema import ExtractedColor


def serialize(
    colors: Sequence[ExtractedColor],
    source: str,
    *,
    format: OutputFormat = OutputFormat.STANDARD,
    target: Optional[Union[TargetFormat, str]] = None,
    layout: Optional[SwatchLayout] = None,
) -> str:
    """Serialize a result set.

    Args:
        colors: Extracted colors, in output order
        source: Name of the input ("stdin" or a file path)
        format: Output format
        target: Notation each color is converted to (default: canonical key)
        layout: Swatch geometry, used by the SVG format only

    Returns:
        Serialized text.
    """
    format = OutputFormat(format)

    if format == OutputFormat.JSON:
        return to_tokens_json(colors, target=target)
    elif format == OutputFormat.TOML:
        return to_toml(colors, source, target=target)
    elif format == OutputFormat.CLEAN:
        return to_clean(colors, target=target)
    elif format == OutputFormat.SVG:
        return to_svg(colors, target=target, layout=layout)
    else:
        return to_report(colors, source, target=target)
