# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: 8-bit RGB → hex / HSL / CMYK, plus HSL → RGB for
slider-driven adjustment.

All functions are pure and operate on plain integers. Inputs outside the
documented ranges are a caller error: behavior there is undefined, and the
schema types reject any resulting out-of-range record rather than carrying
it forward.

Rounding is half-up (0.5 → 1), so a value like 238.5° becomes 239°.
"""

from __future__ import annotations

import math
import re

from pixelhue.schema import CMYK, HSL, RGB, ColorData

_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]{6}")


def _round(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(math.floor(value + 0.5))


# =============================================================================
# RGB ↔ Hex
# =============================================================================


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Format 8-bit channels as a lowercase hex string.

    Returns:
        Hex string like "#6366f1"
    """
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """
    Parse a hex color string.

    Args:
        hex_color: "#6366f1", "6366F1", or shorthand "#abc"

    Returns:
        Tuple of (r, g, b) integers in [0, 255]
    """
    value = hex_color.strip().removeprefix("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Expected 3 or 6 hex digits, got {hex_color!r}")
    if not _HEX_DIGITS_RE.fullmatch(value):
        raise ValueError(f"Invalid hex color {hex_color!r}")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """
    Convert 8-bit RGB to rounded HSL.

    Hue is computed as a fraction of a turn, scaled by 360 and rounded.
    A result of exactly 360 wraps to 0 so hue stays in [0, 360).
    Achromatic colors (max == min) get hue 0 and saturation 0.
    """
    r_, g_, b_ = r / 255, g / 255, b / 255
    hi = max(r_, g_, b_)
    lo = min(r_, g_, b_)
    h = s = 0.0
    l = (hi + lo) / 2

    if hi != lo:
        d = hi - lo
        s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
        if hi == r_:
            h = (g_ - b_) / d + (6 if g_ < b_ else 0)
        elif hi == g_:
            h = (b_ - r_) / d + 2
        else:
            h = (r_ - g_) / d + 4
        h /= 6

    return HSL(h=_round(h * 360) % 360, s=_round(s * 100), l=_round(l * 100))


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to 8-bit RGB.

    Each channel samples a clamped triangular wave of the hue with phase
    offsets 0 (red), 8 (green) and 4 (blue), scaled by chroma
    ``a = s * min(l, 1 - l)``.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation percent [0, 100]
        l: Lightness percent [0, 100]

    Returns:
        Tuple of (r, g, b) integers in [0, 255]
    """
    s_ = s / 100
    l_ = l / 100
    a = s_ * min(l_, 1 - l_)

    def channel(n: int) -> int:
        k = (n + h / 30) % 12
        value = l_ - a * max(min(k - 3, 9 - k, 1), -1)
        return min(255, max(0, _round(value * 255)))

    return channel(0), channel(8), channel(4)


# =============================================================================
# RGB → CMYK
# =============================================================================


def rgb_to_cmyk(r: int, g: int, b: int) -> CMYK:
    """
    Convert 8-bit RGB to naive CMYK percentages.

    K = 1 - max(channel). When K = 1 (pure black) C, M and Y are 0.
    """
    r_, g_, b_ = r / 255, g / 255, b / 255
    k = 1 - max(r_, g_, b_)

    if k == 1:
        c = m = y = 0.0
    else:
        c = (1 - r_ - k) / (1 - k)
        m = (1 - g_ - k) / (1 - k)
        y = (1 - b_ - k) / (1 - k)

    return CMYK(c=_round(c * 100), m=_round(m * 100), y=_round(y * 100), k=_round(k * 100))


# =============================================================================
# Convenience: RGB → full ColorData record
# =============================================================================


def rgb_to_color_data(r: int, g: int, b: int) -> ColorData:
    """
    Derive every representation of an 8-bit RGB color.

    Args:
        r, g, b: Channel values, each in [0, 255]

    Returns:
        ColorData with hex, rgb, hsl and cmyk fields
    """
    return ColorData(
        hex=rgb_to_hex(r, g, b),
        rgb=RGB(r=r, g=g, b=b),
        hsl=rgb_to_hsl(r, g, b),
        cmyk=rgb_to_cmyk(r, g, b),
    )


def hsl_to_color_data(h: float, s: float, l: float) -> ColorData:
    """Convert HSL to RGB and derive the full record from the result."""
    return rgb_to_color_data(*hsl_to_rgb(h, s, l))
