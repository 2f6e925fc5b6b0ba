# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Output runtime for colorextract.

Serialization of extracted colors for downstream consumers:

1. Report -- Numbered, human-readable listing
2. Clean -- One value per line
3. Design tokens -- DTCG JSON
4. TOML -- One table per color
5. SVG -- Swatch sheet in similarity order

The runtime never modifies extraction results.
"""

from colorextract.runtime.serializers import (
    OutputFormat,
    SwatchLayout,
    serialize,
    to_clean,
    to_report,
    to_svg,
    to_tokens_json,
    to_toml,
)

__all__ = [
    "serialize",
    "to_report",
    "to_clean",
    "to_tokens_json",
    "to_toml",
    "to_svg",
    "OutputFormat",
    "SwatchLayout",
]
