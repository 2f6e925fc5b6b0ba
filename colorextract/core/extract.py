# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Main extraction API.

This is the primary entry point for colorextract's core:

    text ─► scan ─► parse_match ─► deduplicate ─► [order_for_layout] ─► convert
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from colorextract.core.dedupe import deduplicate
from colorextract.core.parser import parse_match
from colorextract.core.patterns import ColorPatterns, default_patterns, scan
from colorextract.schema import ColorNotation, ExtractedColor


@dataclass(frozen=True)
class ExtractionConfig:
    """Configuration for extraction."""

    # Notations to keep; matches in any other notation are skipped
    notations: frozenset[ColorNotation] = frozenset(ColorNotation)

    # Drop later occurrences of an already-seen canonical key
    deduplicate: bool = True


def iter_colors(
    text: str,
    patterns: Optional[ColorPatterns] = None,
) -> Iterator[ExtractedColor]:
    """
    Lazily yield every valid color in text order, duplicates included.

    Candidates with invalid components are skipped.
    """
    for match in scan(text, patterns):
        color = parse_match(match)
        if color is not None:
            yield color


def extract(
    source: Union[str, Iterable[str]],
    *,
    config: Optional[ExtractionConfig] = None,
    patterns: Optional[ColorPatterns] = None,
) -> list[ExtractedColor]:
    """
    Extract colors from a text or a batch of texts.

    Args:
        source: One text, or an iterable of texts treated as one batch.
            Deduplication spans the whole batch.
        config: Extraction settings (uses defaults if None)
        patterns: Compiled grammar set (default: all four grammars)

    Returns:
        Colors in first-occurrence order. Each record's source_range is
        relative to the text it was found in.

    Example:
        >>> from colorextract import extract
        >>> [c.canonical_key for c in extract("#FF5733 #ff5733 rgb(255,87,51)")]
        ['#FF5733']
    """
    cfg = config or ExtractionConfig()
    patterns = patterns or default_patterns()

    texts = [source] if isinstance(source, str) else source

    colors = (
        color
        for text in texts
        for color in iter_colors(text, patterns)
        if color.notation in cfg.notations
    )

    if cfg.deduplicate:
        return deduplicate(colors)
    return list(colors)
