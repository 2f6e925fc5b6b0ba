# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Extraction core for colorextract.

Pure functions over immutable inputs: no I/O and no shared mutable state,
so independent texts can be processed in parallel without coordination.
"""

from colorextract.core.convert import TargetFormat, convert
from colorextract.core.extract import ExtractionConfig, extract, iter_colors
from colorextract.core.ordering import order_for_layout
from colorextract.core.patterns import ColorPatterns, Grammar, default_patterns, scan

__all__ = [
    "extract",
    "iter_colors",
    "ExtractionConfig",
    "convert",
    "TargetFormat",
    "order_for_layout",
    "scan",
    "ColorPatterns",
    "Grammar",
    "default_patterns",
]
