# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Color report serializer for the clipboard.

Formats a ColorData and its contrast against black and white as plain
text or JSON. Values are copied verbatim from the record.
"""

from __future__ import annotations

import json

from pixelhue.measure.contrast import compute_contrast
from pixelhue.runtime.serializers.base import ReportFormat
from pixelhue.schema import ColorData


def to_report(
    color: ColorData,
    *,
    format: ReportFormat = ReportFormat.TEXT,
    include_contrast: bool = True,
) -> str:
    """Serialize a color and its accessibility metrics.

    Args:
        color: The color to describe.
        format: TEXT (one field per line) or JSON.
        include_contrast: Include contrast against black and white.

    Returns:
        Report string.

    Example (TEXT)::

        HEX   #6366f1
        RGB   99, 102, 241
        HSL   239°, 84%, 67%
        CMYK  59, 58, 0, 5
        vs black  4.70:1 (AA)
        vs white  4.47:1 (AA Large)
    """
    if format == ReportFormat.JSON:
        return _to_json(color, include_contrast)
    return _to_text(color, include_contrast)


def _to_text(color: ColorData, include_contrast: bool) -> str:
    rgb, hsl = color.rgb, color.hsl
    lines = [
        f"HEX   {color.hex}",
        f"RGB   {rgb.r}, {rgb.g}, {rgb.b}",
        f"HSL   {hsl.h}°, {hsl.s}%, {hsl.l}%",
        f"CMYK  {color.cmyk_string}",
    ]

    if include_contrast:
        contrast = compute_contrast(color)
        lines.append(f"vs black  {contrast.ratio_vs_black:.2f}:1 ({contrast.level_vs_black})")
        lines.append(f"vs white  {contrast.ratio_vs_white:.2f}:1 ({contrast.level_vs_white})")

    return "\n".join(lines)


def _to_json(color: ColorData, include_contrast: bool) -> str:
    data = color.to_dict()
    if include_contrast:
        data["contrast"] = compute_contrast(color).to_dict()
    return json.dumps(data, indent=2)
