# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Serializers for extracted color results.

Each serializer formats a result set for one consumer. All serializers
render colors exactly as extracted and converted; none reorder except SVG,
which lays swatches out in similarity order.
"""

from colorextract.runtime.serializers.base import OutputFormat, format_color
from colorextract.runtime.serializers.output import serialize
from colorextract.runtime.serializers.svg import SwatchLayout, to_svg
from colorextract.runtime.serializers.text import to_clean, to_report
from colorextract.runtime.serializers.tokens import to_tokens_json, to_toml

__all__ = [
    "OutputFormat",
    "SwatchLayout",
    "serialize",
    "format_color",
    "to_report",
    "to_clean",
    "to_tokens_json",
    "to_toml",
    "to_svg",
]
