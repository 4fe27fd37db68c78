# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
WCAG relative luminance and contrast ratios.

References:
- WCAG 2.x relative luminance: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
- WCAG 2.x contrast ratio: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio

Contrast against black is (L + 0.05) / 0.05 and grows with lightness;
contrast against white is 1.05 / (L + 0.05) and shrinks with lightness.
Both are in [1, 21].
"""

from __future__ import annotations

from typing import Union

from pixelhue.schema import RGB, ColorData, ContrastReport

RGBLike = Union[RGB, ColorData, tuple[int, int, int]]

# Channel weights for relative luminance
_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Minimum ratios for WCAG ratings
AAA_RATIO = 7.0
AA_RATIO = 4.5
AA_LARGE_RATIO = 3.0


def _channels(color: RGBLike) -> tuple[int, int, int]:
    if isinstance(color, ColorData):
        return color.rgb.as_tuple()
    if isinstance(color, RGB):
        return color.as_tuple()
    r, g, b = color
    return r, g, b


def _linearize(channel: int) -> float:
    """
    Linearize an 8-bit sRGB channel.

    WCAG uses a piecewise curve:
    - For values <= 0.03928: value / 12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    s = channel / 255
    if s <= 0.03928:
        return s / 12.92
    return ((s + 0.055) / 1.055) ** 2.4


def relative_luminance(color: RGBLike) -> float:
    """
    Relative luminance of an sRGB color.

    Args:
        color: RGB, ColorData, or (r, g, b) tuple of 8-bit channels

    Returns:
        Luminance in [0, 1]
    """
    r, g, b = _channels(color)
    wr, wg, wb = _WEIGHTS
    return wr * _linearize(r) + wg * _linearize(g) + wb * _linearize(b)


def contrast_ratio(color_a: RGBLike, color_b: RGBLike) -> float:
    """
    WCAG contrast ratio between two colors, unrounded.

    The lighter color is always the numerator, so the ratio is >= 1
    regardless of argument order.
    """
    la = relative_luminance(color_a)
    lb = relative_luminance(color_b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def compute_contrast(color: RGBLike) -> ContrastReport:
    """
    Contrast of a color against pure black and pure white.

    Ratios are rounded to two decimal places.

    Args:
        color: RGB, ColorData, or (r, g, b) tuple of 8-bit channels

    Returns:
        ContrastReport with both ratios and the is_dark flag
    """
    lum = relative_luminance(color)
    return ContrastReport(
        luminance=lum,
        ratio_vs_black=round((lum + 0.05) / 0.05, 2),
        ratio_vs_white=round(1.05 / (lum + 0.05), 2),
        is_dark=lum < 0.5,
    )


def wcag_level(ratio: float) -> str:
    """
    Rate a contrast ratio against WCAG text thresholds.

    Returns:
        "AAA" (>= 7), "AA" (>= 4.5), "AA Large" (>= 3, large text only)
        or "Fail"
    """
    if ratio >= AAA_RATIO:
        return "AAA"
    if ratio >= AA_RATIO:
        return "AA"
    if ratio >= AA_LARGE_RATIO:
        return "AA Large"
    return "Fail"
