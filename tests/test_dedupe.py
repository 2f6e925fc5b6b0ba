# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""Tests for canonical keys and order-preserving deduplication."""

from colorextract.core.dedupe import canonical_key, deduplicate
from colorextract.schema import (
    ColorNotation,
    ExtractedColor,
    HexColor,
    HSLColor,
    OKLCHColor,
    RGBColor,
)


def _color(original, key, notation=ColorNotation.HEX):
    return ExtractedColor(original, notation, key)


class TestCanonicalKey:

    def test_rgb_and_hex_share_key(self):
        assert canonical_key(RGBColor(255, 87, 51)) == canonical_key(HexColor(0xFF, 0x57, 0x33))

    def test_hsl_normalizes_to_hex(self):
        assert canonical_key(HSLColor(0, 100, 50)) == "#FF0000"

    def test_oklch_keeps_own_form(self):
        assert canonical_key(OKLCHColor(62.8, 0.2577, 29.23)).startswith("oklch(")


class TestDeduplicate:

    def test_first_occurrence_wins(self):
        first = _color("#ff5733", "#FF5733")
        second = _color("rgb(255,87,51)", "#FF5733", ColorNotation.RGB)
        result = deduplicate([first, second])
        assert len(result) == 1
        assert result[0].original == "#ff5733"

    def test_preserves_input_order(self):
        colors = [
            _color("#00F", "#0000FF"),
            _color("#F00", "#FF0000"),
            _color("#0000ff", "#0000FF"),
            _color("#0F0", "#00FF00"),
        ]
        assert [c.original for c in deduplicate(colors)] == ["#00F", "#F00", "#0F0"]

    def test_case_folded_keys_collapse(self):
        colors = [_color("a", "#aabbcc"), _color("b", "#AABBCC")]
        assert len(deduplicate(colors)) == 1

    def test_oklch_never_collapses_with_hex(self):
        colors = [
            _color("#FF0000", "#FF0000"),
            _color("oklch(62.8% 0.2577 29.23)", "oklch(62.80% 0.2577 29.23)", ColorNotation.OKLCH),
        ]
        assert len(deduplicate(colors)) == 2

    def test_alpha_keeps_variants_distinct(self):
        colors = [_color("#F00", "#FF0000"), _color("#F00F", "#FF0000FF")]
        assert len(deduplicate(colors)) == 2

    def test_accepts_iterator(self):
        colors = iter([_color("#F00", "#FF0000"), _color("#f00", "#FF0000")])
        assert len(deduplicate(colors)) == 1

    def test_empty(self):
        assert deduplicate([]) == []

    def test_idempotent(self):
        colors = [_color("#F00", "#FF0000"), _color("#f00", "#FF0000"), _color("#0F0", "#00FF00")]
        once = deduplicate(colors)
        assert deduplicate(once) == once
