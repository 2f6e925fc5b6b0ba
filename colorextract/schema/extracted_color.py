# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
ExtractedColor: canonical records for colors found in text.

Design principles:
- Immutable: All types are frozen dataclasses
- Validated: Parsed color variants reject out-of-range components at construction
- Canonical: Every color carries one string key that alone defines its identity

Parsed color variants form a closed set:

    HexColor    #RGB, #RRGGBB, #RRGGBBAA
    RGBColor    rgb(r, g, b) / rgba(r, g, b, a)
    HSLColor    hsl(h, s%, l%) / hsla(h, s%, l%, a)
    OKLCHColor  oklch(l% c h) / oklch(l% c h / a)

Hex, RGB and HSL normalize to uppercase hex (#RRGGBB or #RRGGBBAA).
OKLCH keeps its own canonical form, oklch(L.LL% C.CCCC H.HH[ / A.AA]), and
is therefore never deduplicated against an equal hex color.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class ColorNotation(Enum):
    """Textual notation a color was written in. Fixed at parse time."""
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    OKLCH = "oklch"
    OKLCHA = "oklcha"

    @property
    def is_oklch_family(self) -> bool:
        return self in (ColorNotation.OKLCH, ColorNotation.OKLCHA)


def _check_alpha(alpha: Optional[float]) -> None:
    if alpha is not None and not 0.0 <= alpha <= 1.0:
        raise ValueError(f"Alpha must be 0-1, got {alpha}")


def _alpha_to_byte(alpha: float) -> int:
    # Truncated, as are hsl() channels
    return int(alpha * 255.0)


def _format_hex(red: int, green: int, blue: int, alpha: Optional[int] = None) -> str:
    if alpha is None:
        return f"#{red:02X}{green:02X}{blue:02X}"
    return f"#{red:02X}{green:02X}{blue:02X}{alpha:02X}"


# =============================================================================
# Parsed Color Variants
# =============================================================================


@dataclass(frozen=True, slots=True)
class HexColor:
    """
    An 8-bit sRGB color with an optional 8-bit alpha.

    Attributes:
        red, green, blue: Channels 0-255
        alpha: Alpha byte 0-255, or None when the source had no alpha
    """
    red: int
    green: int
    blue: int
    alpha: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name.capitalize()} must be 0-255, got {value}")
        if self.alpha is not None and not 0 <= self.alpha <= 255:
            raise ValueError(f"Alpha must be 0-255, got {self.alpha}")

    @property
    def notation(self) -> ColorNotation:
        return ColorNotation.HEX

    @property
    def normalized(self) -> str:
        return _format_hex(self.red, self.green, self.blue, self.alpha)

    @property
    def alpha_fraction(self) -> Optional[float]:
        """Alpha as a 0-1 float, or None."""
        return None if self.alpha is None else self.alpha / 255.0

    def channels(self) -> tuple[float, float, float]:
        """Channels normalized to [0, 1]."""
        return self.red / 255.0, self.green / 255.0, self.blue / 255.0


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    rgb()/rgba() color: integer channels 0-255, float alpha 0-1.
    """
    red: int
    green: int
    blue: int
    alpha: Optional[float] = None

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name.capitalize()} must be 0-255, got {value}")
        _check_alpha(self.alpha)

    @property
    def notation(self) -> ColorNotation:
        return ColorNotation.RGB if self.alpha is None else ColorNotation.RGBA

    def to_hex(self) -> HexColor:
        alpha = None if self.alpha is None else _alpha_to_byte(self.alpha)
        return HexColor(self.red, self.green, self.blue, alpha)

    @property
    def normalized(self) -> str:
        return self.to_hex().normalized


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    hsl()/hsla() color.

    Attributes:
        hue: Degrees 0-360
        saturation: Percent 0-100
        lightness: Percent 0-100
        alpha: 0-1 or None
    """
    hue: float
    saturation: float
    lightness: float
    alpha: Optional[float] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.hue <= 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.hue}")
        if not 0.0 <= self.saturation <= 100.0:
            raise ValueError(f"Saturation must be 0-100, got {self.saturation}")
        if not 0.0 <= self.lightness <= 100.0:
            raise ValueError(f"Lightness must be 0-100, got {self.lightness}")
        _check_alpha(self.alpha)

    @property
    def notation(self) -> ColorNotation:
        return ColorNotation.HSL if self.alpha is None else ColorNotation.HSLA

    def to_rgb(self) -> RGBColor:
        from colorextract.core.colorspace import hsl_to_rgb, truncate_channel
        rgb = hsl_to_rgb([self.hue, self.saturation / 100.0, self.lightness / 100.0])
        r, g, b = (int(v) for v in truncate_channel(rgb))
        return RGBColor(r, g, b, self.alpha)

    @property
    def normalized(self) -> str:
        return self.to_rgb().normalized


@dataclass(frozen=True, slots=True)
class OKLCHColor:
    """
    oklch() color, kept in its own space.

    Attributes:
        lightness: Percent 0-100
        chroma: >= 0, unbounded above (sRGB tops out near 0.37)
        hue: Degrees 0-360
        alpha: 0-1 or None
    """
    lightness: float
    chroma: float
    hue: float
    alpha: Optional[float] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.lightness <= 100.0:
            raise ValueError(f"Lightness must be 0-100, got {self.lightness}")
        if self.chroma < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.chroma}")
        if not 0.0 <= self.hue <= 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.hue}")
        _check_alpha(self.alpha)

    @property
    def notation(self) -> ColorNotation:
        return ColorNotation.OKLCH if self.alpha is None else ColorNotation.OKLCHA

    @property
    def normalized(self) -> str:
        body = f"{self.lightness:.2f}% {self.chroma:.4f} {self.hue:.2f}"
        if self.alpha is not None:
            body += f" / {self.alpha:.2f}"
        return f"oklch({body})"


ParsedColor = Union[HexColor, RGBColor, HSLColor, OKLCHColor]


# =============================================================================
# Extracted Color Record
# =============================================================================


@dataclass(frozen=True, slots=True, eq=False)
class ExtractedColor:
    """
    A color found in text.

    Equality and hashing use only the case-folded canonical key: two records
    with different original spellings or notations but the same key are the
    same color.

    Attributes:
        original: Matched text span, as written
        notation: Notation the span was written in
        canonical_key: Normalized string identity (hex or oklch form)
        source_range: (start, end) character offsets within the source text
    """
    original: str
    notation: ColorNotation
    canonical_key: str
    source_range: Optional[tuple[int, int]] = field(default=None)

    @property
    def identity(self) -> str:
        """The dedup identity: canonical key, case-folded."""
        return self.canonical_key.casefold()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtractedColor):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {
            "original": self.original,
            "notation": self.notation.value,
            "canonical_key": self.canonical_key,
        }
        if self.source_range is not None:
            d["source_range"] = list(self.source_range)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ExtractedColor:
        """Deserialize from dictionary."""
        source_range = data.get("source_range")
        return cls(
            original=data["original"],
            notation=ColorNotation(data["notation"]),
            canonical_key=data["canonical_key"],
            source_range=tuple(source_range) if source_range is not None else None,
        )
