# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""Tests for component parsing and range validation."""

import logging

import pytest

from colorextract.core.dedupe import canonical_key
from colorextract.core.parser import (
    parse_hex,
    parse_hsl,
    parse_match,
    parse_oklch,
    parse_rgb,
)
from colorextract.core.patterns import scan
from colorextract.schema import ColorNotation, HexColor


class TestParseHex:

    def test_short_form_expands(self):
        assert parse_hex("#F00") == HexColor(255, 0, 0)

    def test_without_hash(self):
        assert parse_hex("FF5733") == HexColor(0xFF, 0x57, 0x33)

    def test_eight_digit_alpha(self):
        color = parse_hex("#FF5733AA")
        assert color.alpha == 0xAA
        assert color.normalized == "#FF5733AA"

    @pytest.mark.parametrize("value", ["#GGGGGG", "#FFFF", "#12345", "", "#", "oklch(1% 0 0)"])
    def test_invalid(self, value):
        assert parse_hex(value) is None


class TestParseRGB:

    def test_valid(self):
        color = parse_rgb("255", "87", "51")
        assert (color.red, color.green, color.blue, color.alpha) == (255, 87, 51, None)

    def test_alpha(self):
        assert parse_rgb("0", "0", "0", ".5").alpha == 0.5

    @pytest.mark.parametrize("r, g, b", [("300", "0", "0"), ("0", "256", "0"), ("0", "0", "999")])
    def test_channel_out_of_range(self, r, g, b):
        assert parse_rgb(r, g, b) is None

    def test_logs_rejection_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="colorextract.core.parser")
        assert parse_rgb("300", "400", "500") is None
        assert "Rejected rgb" in caplog.text


class TestParseHSL:

    def test_bounds_inclusive(self):
        assert parse_hsl("360", "100", "100") is not None
        assert parse_hsl("0", "0", "0") is not None

    @pytest.mark.parametrize("h, s, l", [("400", "50", "50"), ("10", "150", "50"), ("10", "50", "200")])
    def test_out_of_range(self, h, s, l):
        assert parse_hsl(h, s, l) is None

    def test_fractional_values(self):
        color = parse_hsl("120.5", "50.25", "25.5", "0.8")
        assert color.hue == 120.5
        assert color.alpha == 0.8


class TestParseOKLCH:

    def test_valid(self):
        color = parse_oklch("62.8", "0.25768", "29.23")
        assert color.lightness == 62.8
        assert color.chroma == 0.25768

    def test_chroma_unbounded_above(self):
        assert parse_oklch("50", "5", "10") is not None

    @pytest.mark.parametrize("l, c, h", [("101", "0.1", "10"), ("50", "0.1", "361")])
    def test_out_of_range(self, l, c, h):
        assert parse_oklch(l, c, h) is None


class TestParseMatch:

    def _parse(self, text):
        (match,) = scan(text)
        return parse_match(match)

    def test_hex_record(self):
        color = self._parse("#f00")
        assert color.original == "#f00"
        assert color.notation is ColorNotation.HEX
        assert color.canonical_key == "#FF0000"
        assert color.source_range == (0, 4)

    def test_rgb_vs_rgba_notation_follows_alpha(self):
        assert self._parse("rgb(1, 2, 3)").notation is ColorNotation.RGB
        assert self._parse("rgba(1, 2, 3)").notation is ColorNotation.RGB
        assert self._parse("rgb(1, 2, 3, 0.5)").notation is ColorNotation.RGBA

    def test_hsl_normalizes_to_hex(self):
        color = self._parse("hsl(240, 100%, 50%)")
        assert color.notation is ColorNotation.HSL
        assert color.canonical_key == "#0000FF"

    def test_hsla_notation(self):
        assert self._parse("hsla(9, 100%, 60%, 0.8)").notation is ColorNotation.HSLA

    def test_oklch_keeps_own_key(self):
        color = self._parse("oklch(62.8% 0.25768 29.23)")
        assert color.notation is ColorNotation.OKLCH
        assert color.canonical_key == "oklch(62.80% 0.2577 29.23)"

    def test_oklcha(self):
        color = self._parse("oklch(62.8% 0.25768 29.23 / 0.5)")
        assert color.notation is ColorNotation.OKLCHA
        assert color.canonical_key == "oklch(62.80% 0.2577 29.23 / 0.50)"

    def test_key_matches_canonical_key(self):
        color = self._parse("rgba(255, 87, 51, 0.5)")
        assert color.canonical_key == canonical_key(parse_rgb("255", "87", "51", "0.5"))
        assert color.canonical_key == "#FF57337F"

    def test_invalid_match_dropped(self):
        assert self._parse("hsl(400, 150%, 200%)") is None
