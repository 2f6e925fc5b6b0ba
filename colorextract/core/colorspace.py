# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion graph (every edge is bidirectional):

    sRGB ── Linear RGB ── XYZ (D65) ── CIE LAB ── CIE LCH
     │           └──────── OKLab ── OKLCH
     ├── HSL
     └── HWB

References:
- sRGB transfer curve and D65 matrices: IEC 61966-2-1
- OKLab: https://bottosson.github.io/posts/oklab/
- HWB: CSS Color Module Level 4

All functions take and return arrays of shape (..., 3). RGB-family values
are floats in [0, 1]; hues are degrees in [0, 360). Inverse transforms that
land in sRGB are clipped to [0, 1]: matrix round-trips overshoot slightly and
out-of-gamut inputs are clamped rather than mapped.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


# =============================================================================
# Helpers
# =============================================================================


def _as_array(values: ArrayLike) -> NDArray[np.float64]:
    return np.asarray(values, dtype=np.float64)


def _wrap_hue(hue: NDArray[np.float64]) -> NDArray[np.float64]:
    """Wrap degrees into [0, 360)."""
    hue = np.mod(hue, 360.0)
    # mod of a tiny negative rounds up to exactly 360.0
    return np.where(hue >= 360.0, 0.0, hue)


def _apply_matrix(
    values: NDArray[np.float64],
    matrix: NDArray[np.float64],
) -> NDArray[np.float64]:
    return np.einsum('...j,ij->...i', values, matrix)


def _to_polar(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = _wrap_hue(np.degrees(np.arctan2(b, a)))

    return np.stack([L, C, H], axis=-1)


def _from_polar(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Decode sRGB [0,1] to linear light.

    Below 0.04045 the curve is linear (v / 12.92); above it follows
    ((v + 0.055) / 1.055) ^ 2.4.
    """
    srgb = _as_array(srgb)
    curved = ((np.maximum(srgb, 0.04045) + 0.055) / 1.055) ** 2.4
    return np.where(srgb <= 0.04045, srgb / 12.92, curved)


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """Encode linear light to sRGB, clipped to [0, 1]."""
    # Negative bases would make the fractional power NaN
    linear = np.clip(_as_array(linear), 0.0, None)
    encoded = np.where(
        linear <= 0.0031308,
        12.92 * linear,
        1.055 * linear ** (1.0 / 2.4) - 0.055,
    )
    return np.clip(encoded, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ XYZ (D65)
# =============================================================================

_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_RGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
], dtype=np.float64)

# D65 reference white
D65_WHITE = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)


def linear_rgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """Convert linear RGB to CIE XYZ under D65."""
    return _apply_matrix(_as_array(rgb), _RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: ArrayLike) -> NDArray[np.float64]:
    """Convert CIE XYZ (D65) to linear RGB. Not clipped."""
    return _apply_matrix(_as_array(xyz), _XYZ_TO_RGB)


# =============================================================================
# XYZ ↔ CIE LAB ↔ CIE LCH
# =============================================================================

_LAB_DELTA = 6.0 / 29.0


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(
        t > _LAB_DELTA ** 3,
        np.cbrt(t),
        t / (3.0 * _LAB_DELTA ** 2) + 4.0 / 29.0,
    )


def _lab_f_inv(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(
        t > _LAB_DELTA,
        t ** 3,
        3.0 * _LAB_DELTA ** 2 * (t - 4.0 / 29.0),
    )


def xyz_to_lab(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE XYZ (D65) to CIE LAB.

    Returns:
        Array of shape (..., 3) with L in [0, 100] and unbounded a, b
    """
    scaled = _as_array(xyz) / D65_WHITE
    f = _lab_f(scaled)

    L = 116.0 * f[..., 1] - 16.0
    a = 500.0 * (f[..., 0] - f[..., 1])
    b = 200.0 * (f[..., 1] - f[..., 2])

    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: ArrayLike) -> NDArray[np.float64]:
    """Convert CIE LAB to CIE XYZ (D65)."""
    lab = _as_array(lab)

    fy = (lab[..., 0] + 16.0) / 116.0
    fx = lab[..., 1] / 500.0 + fy
    fz = fy - lab[..., 2] / 200.0

    f = np.stack([fx, fy, fz], axis=-1)
    return _lab_f_inv(f) * D65_WHITE


def lab_to_lch(lab: ArrayLike) -> NDArray[np.float64]:
    """Convert CIE LAB to CIE LCH. H is in degrees [0, 360)."""
    return _to_polar(_as_array(lab))


def lch_to_lab(lch: ArrayLike) -> NDArray[np.float64]:
    """Convert CIE LCH (H in degrees) to CIE LAB."""
    return _from_polar(_as_array(lch))


# =============================================================================
# Linear RGB ↔ OKLab ↔ OKLCH
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS (cube root) to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lms = _apply_matrix(_as_array(rgb), _M1)

    # cbrt keeps the sign for out-of-gamut inputs
    return _apply_matrix(np.cbrt(lms), _M2)


def oklab_to_linear_rgb(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB. Not clipped.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lms_cbrt = _apply_matrix(_as_array(lab), _M2_INV)
    return _apply_matrix(lms_cbrt ** 3, _M1_INV)


def oklab_to_oklch(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees [0, 360)
    """
    return _to_polar(_as_array(lab))


def oklch_to_oklab(lch: ArrayLike) -> NDArray[np.float64]:
    """Convert OKLCH (H in degrees) to OKLab."""
    return _from_polar(_as_array(lch))


# =============================================================================
# sRGB ↔ HSL / HWB
# =============================================================================


def rgb_to_hue(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Hue in degrees [0, 360) from sRGB using the max-channel branch formula.

    Achromatic colors (max == min) get hue 0.
    """
    rgb = _as_array(rgb)
    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]

    max_val = rgb.max(axis=-1)
    min_val = rgb.min(axis=-1)
    delta = max_val - min_val
    safe_delta = np.where(delta == 0.0, 1.0, delta)

    sector = np.where(
        max_val == r,
        np.mod((g - b) / safe_delta, 6.0),
        np.where(
            max_val == g,
            (b - r) / safe_delta + 2.0,
            (r - g) / safe_delta + 4.0,
        ),
    )
    return _wrap_hue(np.where(delta == 0.0, 0.0, sector * 60.0))


def rgb_to_hsl(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSL.

    Returns:
        Array of shape (..., 3): hue in degrees, saturation and lightness in [0, 1]
    """
    rgb = _as_array(rgb)
    max_val = rgb.max(axis=-1)
    min_val = rgb.min(axis=-1)
    delta = max_val - min_val

    lightness = (max_val + min_val) / 2.0
    denom = np.where(
        lightness < 0.5,
        max_val + min_val,
        2.0 - max_val - min_val,
    )
    saturation = np.where(
        delta == 0.0,
        0.0,
        delta / np.where(denom == 0.0, 1.0, denom),
    )
    return np.stack([rgb_to_hue(rgb), saturation, lightness], axis=-1)


def _hue_to_channel(
    p: NDArray[np.float64],
    q: NDArray[np.float64],
    t: NDArray[np.float64],
) -> NDArray[np.float64]:
    t = np.where(t < 0.0, t + 1.0, t)
    t = np.where(t > 1.0, t - 1.0, t)
    return np.select(
        [t < 1.0 / 6.0, t < 1.0 / 2.0, t < 2.0 / 3.0],
        [p + (q - p) * 6.0 * t, q, p + (q - p) * (2.0 / 3.0 - t) * 6.0],
        default=p,
    )


def hsl_to_rgb(hsl: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSL (hue degrees, saturation/lightness [0,1]) to sRGB [0,1].
    """
    hsl = _as_array(hsl)
    h = _wrap_hue(hsl[..., 0]) / 360.0
    s = hsl[..., 1]
    l = hsl[..., 2]

    q = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    p = 2.0 * l - q

    rgb = np.stack([
        _hue_to_channel(p, q, h + 1.0 / 3.0),
        _hue_to_channel(p, q, h),
        _hue_to_channel(p, q, h - 1.0 / 3.0),
    ], axis=-1)
    return np.clip(rgb, 0.0, 1.0)


def rgb_to_hwb(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HWB.

    Returns:
        Array of shape (..., 3): hue in degrees, whiteness and blackness in [0, 1]
    """
    rgb = _as_array(rgb)
    whiteness = rgb.min(axis=-1)
    blackness = 1.0 - rgb.max(axis=-1)
    return np.stack([rgb_to_hue(rgb), whiteness, blackness], axis=-1)


def hwb_to_rgb(hwb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HWB (hue degrees, whiteness/blackness [0,1]) to sRGB [0,1].

    Whiteness and blackness summing past 1 are rescaled to sum to 1,
    which yields a gray.
    """
    hwb = _as_array(hwb)
    w = hwb[..., 1]
    b = hwb[..., 2]

    total = w + b
    scale = np.where(total > 1.0, total, 1.0)
    w = w / scale
    b = b / scale

    pure = hsl_to_rgb(np.stack([
        hwb[..., 0],
        np.ones_like(w),
        np.full_like(w, 0.5),
    ], axis=-1))
    rgb = pure * np.expand_dims(1.0 - w - b, -1) + np.expand_dims(w, -1)
    return np.clip(rgb, 0.0, 1.0)


# =============================================================================
# Convenience: sRGB ↔ LAB / LCH / OKLab / OKLCH (full chains)
# =============================================================================


def srgb_to_lab(srgb: ArrayLike) -> NDArray[np.float64]:
    """Full chain: sRGB → Linear RGB → XYZ → LAB"""
    return xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(srgb)))


def lab_to_srgb(lab: ArrayLike) -> NDArray[np.float64]:
    """Full chain: LAB → XYZ → Linear RGB → sRGB, clipped to [0, 1]"""
    return linear_to_srgb(xyz_to_linear_rgb(lab_to_xyz(lab)))


def srgb_to_lch(srgb: ArrayLike) -> NDArray[np.float64]:
    """Full chain: sRGB → Linear RGB → XYZ → LAB → LCH"""
    return lab_to_lch(srgb_to_lab(srgb))


def lch_to_srgb(lch: ArrayLike) -> NDArray[np.float64]:
    return lab_to_srgb(lch_to_lab(lch))


def srgb_to_oklab(srgb: ArrayLike) -> NDArray[np.float64]:
    """Full chain: sRGB → Linear RGB → OKLab"""
    return linear_rgb_to_oklab(srgb_to_linear(srgb))


def oklab_to_srgb(lab: ArrayLike) -> NDArray[np.float64]:
    """Full chain: OKLab → Linear RGB → sRGB, clipped to [0, 1]"""
    return linear_to_srgb(oklab_to_linear_rgb(lab))


def srgb_to_oklch(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        - L: Lightness [0, 1]
        - C: Chroma [0, ~0.4 for sRGB gamut]
        - H: Hue in degrees [0, 360)
    """
    return oklab_to_oklch(srgb_to_oklab(srgb))


def oklch_to_srgb(lch: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB [0,1].

    Full chain: OKLCH → OKLab → Linear RGB → sRGB
    Values are clipped to [0, 1].
    """
    return oklab_to_srgb(oklch_to_oklab(lch))


# =============================================================================
# 8-bit quantization
# =============================================================================


def quantize_channel(value: ArrayLike) -> NDArray[np.int64]:
    """Map [0,1] floats to 0-255 integers (round half up, clamped)."""
    scaled = np.floor(np.clip(_as_array(value), 0.0, 1.0) * 255.0 + 0.5)
    return scaled.astype(np.int64)


def truncate_channel(value: ArrayLike) -> NDArray[np.int64]:
    """Map [0,1] floats to 0-255 integers by truncation (clamped)."""
    scaled = np.floor(np.clip(_as_array(value), 0.0, 1.0) * 255.0)
    return scaled.astype(np.int64)
