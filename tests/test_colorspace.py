# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (sRGB, XYZ, LAB/LCH, OKLab/OKLCH, HSL, HWB)."""

import numpy as np
import pytest

from colorextract.core.colorspace import (
    srgb_to_linear,
    linear_to_srgb,
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
    linear_rgb_to_oklab,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    rgb_to_hue,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hwb,
    hwb_to_rgb,
    srgb_to_lab,
    lab_to_srgb,
    srgb_to_lch,
    lch_to_srgb,
    srgb_to_oklab,
    oklab_to_srgb,
    srgb_to_oklch,
    oklch_to_srgb,
    quantize_channel,
    truncate_channel,
)


def _all_uint8_samples(step=17):
    """Grid over the 8-bit RGB cube, normalized to [0, 1]."""
    values = np.arange(0, 256, step)
    grid = np.stack(np.meshgrid(values, values, values, indexing="ij"), axis=-1)
    return grid.reshape(-1, 3) / 255.0


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_roundtrip_black_and_white(self):
        srgb = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-12)

    def test_inverse_clamps_overshoot(self):
        srgb = linear_to_srgb(np.array([-0.01, 0.5, 1.02]))
        assert srgb[0] == 0.0
        assert srgb[2] == 1.0

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)


class TestXYZ:

    def test_white_is_d65(self):
        xyz = linear_rgb_to_xyz(np.array([1.0, 1.0, 1.0]))
        np.testing.assert_allclose(xyz, [0.95047, 1.0, 1.08883], atol=1e-4)

    def test_matrix_roundtrip(self):
        rgb = np.random.RandomState(7).random((50, 3))
        recovered = xyz_to_linear_rgb(linear_rgb_to_xyz(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-6)


class TestLAB:

    def test_white(self):
        lab = srgb_to_lab(np.array([1.0, 1.0, 1.0]))
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=0.01)

    def test_black(self):
        lab = srgb_to_lab(np.array([0.0, 0.0, 0.0]))
        np.testing.assert_allclose(lab, [0.0, 0.0, 0.0], atol=1e-9)

    def test_red_reference_value(self):
        lab = srgb_to_lab(np.array([1.0, 0.0, 0.0]))
        np.testing.assert_allclose(lab, [53.24, 80.09, 67.20], atol=0.05)

    def test_xyz_roundtrip_dark_values(self):
        """Values below the (6/29)^3 break point use the linear segment."""
        xyz = np.array([0.001, 0.002, 0.0015])
        np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz)), xyz, atol=1e-12)

    def test_roundtrip_within_one_step(self):
        srgb = _all_uint8_samples()
        recovered = lab_to_srgb(srgb_to_lab(srgb))
        assert np.max(np.abs(recovered - srgb)) <= 1.0 / 255.0

    def test_lch_roundtrip(self):
        lab = np.array([60.0, -20.0, 35.0])
        np.testing.assert_allclose(lch_to_lab(lab_to_lch(lab)), lab, atol=1e-10)

    def test_lch_full_chain(self):
        srgb = np.array([0.2, 0.4, 0.8])
        np.testing.assert_allclose(lch_to_srgb(srgb_to_lch(srgb)), srgb, atol=1e-6)


class TestOKLab:

    def test_white_lightness_is_one(self):
        lab = linear_rgb_to_oklab(np.array([1.0, 1.0, 1.0]))
        assert lab[0] == pytest.approx(1.0, abs=1e-6)
        assert abs(lab[1]) < 1e-4
        assert abs(lab[2]) < 1e-4

    def test_black_lightness_is_zero(self):
        lab = linear_rgb_to_oklab(np.array([0.0, 0.0, 0.0]))
        assert lab[0] == pytest.approx(0.0, abs=1e-9)

    def test_red_reference_value(self):
        lab = srgb_to_oklab(np.array([1.0, 0.0, 0.0]))
        np.testing.assert_allclose(lab, [0.62796, 0.22486, 0.12585], atol=1e-4)

    def test_linear_roundtrip(self):
        rgb = np.random.RandomState(42).random((50, 3))
        recovered = oklab_to_linear_rgb(linear_rgb_to_oklab(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-6)

    def test_roundtrip_within_one_step(self):
        srgb = _all_uint8_samples()
        recovered = oklab_to_srgb(srgb_to_oklab(srgb))
        assert np.max(np.abs(recovered - srgb)) <= 1.0 / 255.0


class TestOKLCH:

    def test_chroma_calculation(self):
        lch = oklab_to_oklch(np.array([0.5, 0.3, 0.4]))
        assert lch[1] == pytest.approx(0.5, abs=1e-12)

    def test_polar_roundtrip(self):
        lab = np.array([0.7, 0.1, -0.05])
        np.testing.assert_allclose(oklch_to_oklab(oklab_to_oklch(lab)), lab, atol=1e-12)

    def test_red_reference_value(self):
        lch = srgb_to_oklch(np.array([1.0, 0.0, 0.0]))
        np.testing.assert_allclose(lch, [0.62796, 0.25768, 29.234], atol=1e-3)

    def test_out_of_gamut_is_clamped(self):
        srgb = oklch_to_srgb(np.array([0.7, 0.5, 150.0]))
        assert np.all(srgb >= 0.0)
        assert np.all(srgb <= 1.0)


class TestHueWraparound:
    """Every hue must land in [0, 360)."""

    def test_negative_angle_is_wrapped(self):
        lch = lab_to_lch(np.array([50.0, 10.0, -10.0]))
        assert lch[2] == pytest.approx(315.0)

    def test_tiny_negative_angle_does_not_become_360(self):
        lch = lab_to_lch(np.array([50.0, 10.0, -1e-20]))
        assert 0.0 <= lch[2] < 360.0

    def test_magenta_hue_from_negative_sector(self):
        assert rgb_to_hue(np.array([1.0, 0.0, 1.0])) == pytest.approx(300.0)

    def test_batch_hues_in_range(self):
        srgb = np.random.RandomState(3).random((200, 3))
        for hues in (rgb_to_hue(srgb), srgb_to_lch(srgb)[:, 2], srgb_to_oklch(srgb)[:, 2]):
            assert np.all(hues >= 0.0)
            assert np.all(hues < 360.0)


class TestHSL:

    @pytest.mark.parametrize("hsl, rgb", [
        ([0.0, 1.0, 0.5], [1.0, 0.0, 0.0]),
        ([120.0, 1.0, 0.5], [0.0, 1.0, 0.0]),
        ([240.0, 1.0, 0.25], [0.0, 0.0, 0.5]),
        ([360.0, 1.0, 0.5], [1.0, 0.0, 0.0]),
        ([200.0, 0.0, 0.4], [0.4, 0.4, 0.4]),
    ])
    def test_hsl_to_rgb(self, hsl, rgb):
        np.testing.assert_allclose(hsl_to_rgb(np.array(hsl)), rgb, atol=1e-12)

    def test_rgb_to_hsl_red(self):
        np.testing.assert_allclose(rgb_to_hsl(np.array([1.0, 0.0, 0.0])), [0.0, 1.0, 0.5])

    def test_achromatic_has_zero_hue_and_saturation(self):
        hsl = rgb_to_hsl(np.array([0.3, 0.3, 0.3]))
        assert hsl[0] == 0.0
        assert hsl[1] == 0.0
        assert hsl[2] == pytest.approx(0.3)

    def test_roundtrip(self):
        srgb = np.random.RandomState(11).random((100, 3))
        np.testing.assert_allclose(hsl_to_rgb(rgb_to_hsl(srgb)), srgb, atol=1e-9)


class TestHWB:

    def test_red(self):
        np.testing.assert_allclose(rgb_to_hwb(np.array([1.0, 0.0, 0.0])), [0.0, 0.0, 0.0])

    def test_gray(self):
        np.testing.assert_allclose(rgb_to_hwb(np.array([0.5, 0.5, 0.5])), [0.0, 0.5, 0.5])

    def test_hwb_to_rgb(self):
        rgb = hwb_to_rgb(np.array([120.0, 0.2, 0.3]))
        np.testing.assert_allclose(rgb, [0.2, 0.7, 0.2], atol=1e-12)

    def test_whiteness_blackness_over_one_is_normalized(self):
        rgb = hwb_to_rgb(np.array([45.0, 0.6, 0.6]))
        np.testing.assert_allclose(rgb, [0.5, 0.5, 0.5], atol=1e-12)

    def test_roundtrip(self):
        srgb = np.random.RandomState(5).random((100, 3))
        np.testing.assert_allclose(hwb_to_rgb(rgb_to_hwb(srgb)), srgb, atol=1e-9)


class TestQuantize:

    def test_round_half_up(self):
        np.testing.assert_array_equal(quantize_channel([0.0, 0.5, 1.0]), [0, 128, 255])

    def test_clamps(self):
        np.testing.assert_array_equal(quantize_channel([-0.2, 1.3]), [0, 255])

    def test_truncate(self):
        np.testing.assert_array_equal(truncate_channel([0.0, 0.5, 0.999, 1.0]), [0, 127, 254, 255])

    def test_truncate_clamps(self):
        np.testing.assert_array_equal(truncate_channel([-0.2, 1.3]), [0, 255])
