# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
SVG swatch sheet serializer.

Lays colors out as a grid of square swatches, each with a white label band
underneath. Colors are placed in similarity order (order_for_layout), so
related shades end up next to each other.

    ┌────────┐ ┌────────┐ ┌────────┐
    │ swatch │ │ swatch │ │ swatch │
    ├────────┤ ├────────┤ ├────────┤
    │ label  │ │ label  │ │ label  │
    └────────┘ └────────┘ └────────┘
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Union
from xml.sax.saxutils import escape, quoteattr

from colorextract.core.convert import TargetFormat, resolve_hex
from colorextract.core.ordering import order_for_layout
from colorextract.runtime.serializers.base import format_color
from colorextract.schema import ExtractedColor


@dataclass(frozen=True)
class SwatchLayout:
    """Geometry of the swatch sheet, in SVG user units."""

    swatch_size: int = 120
    label_height: int = 28
    columns: int = 6
    gap: int = 16
    padding: int = 24
    background: str = "#FFFFFF"
    label_fill: str = "#FFFFFF"
    text_fill: str = "#111111"
    font_size: int = 12

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise ValueError(f"Columns must be >= 1, got {self.columns}")
        if self.swatch_size <= 0:
            raise ValueError(f"Swatch size must be > 0, got {self.swatch_size}")


def _swatch_fill(color: ExtractedColor) -> tuple[str, Optional[float]]:
    """Fill color (opaque hex) and optional opacity for a swatch."""
    resolved = resolve_hex(color)
    if resolved is None:
        # Let the renderer interpret the raw key as a CSS color
        return color.canonical_key, None
    opaque = f"#{resolved.red:02X}{resolved.green:02X}{resolved.blue:02X}"
    return opaque, resolved.alpha_fraction


def to_svg(
    colors: Sequence[ExtractedColor],
    *,
    target: Optional[Union[TargetFormat, str]] = None,
    layout: Optional[SwatchLayout] = None,
) -> str:
    """Serialize colors as an SVG swatch sheet.

    Args:
        colors: Colors to draw (reordered for layout)
        target: Notation used for the labels (default: canonical key)
        layout: Sheet geometry (uses defaults if None)

    Returns:
        A standalone SVG document.
    """
    lay = layout or SwatchLayout()
    ordered = order_for_layout(colors)

    n = len(ordered)
    cols = max(1, min(lay.columns, n))
    rows = math.ceil(n / cols) if n else 0
    cell_height = lay.swatch_size + lay.label_height

    width = 2 * lay.padding + cols * lay.swatch_size + (cols - 1) * lay.gap
    height = 2 * lay.padding + rows * cell_height + max(0, rows - 1) * lay.gap

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" viewBox="0 0 {width} {height}">',
        f'  <rect x="0" y="0" width="{width}" height="{height}" '
        f'fill="{lay.background}"/>',
    ]

    for index, color in enumerate(ordered):
        row, col = divmod(index, cols)
        x = lay.padding + col * (lay.swatch_size + lay.gap)
        y = lay.padding + row * (cell_height + lay.gap)

        fill, opacity = _swatch_fill(color)
        opacity_attr = f' fill-opacity="{opacity:.3f}"' if opacity is not None else ""
        label = format_color(color, target)

        lines += [
            "  <g>",
            f'    <rect x="{x}" y="{y}" width="{lay.swatch_size}" '
            f'height="{lay.swatch_size}" fill={quoteattr(fill)}{opacity_attr}/>',
            f'    <rect x="{x}" y="{y + lay.swatch_size}" width="{lay.swatch_size}" '
            f'height="{lay.label_height}" fill="{lay.label_fill}"/>',
            f'    <text x="{x + lay.swatch_size // 2}" '
            f'y="{y + lay.swatch_size + lay.label_height // 2}" '
            f'font-family="monospace" font-size="{lay.font_size}" '
            f'fill="{lay.text_fill}" text-anchor="middle" '
            f'dominant-baseline="middle">{escape(label)}</text>',
            "  </g>",
        ]

    lines.append("</svg>")
    return "\n".join(lines)
