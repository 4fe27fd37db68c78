# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Export snippets for design tokens and platform code.

Only the hex value of a color is exported. Snippets are plain text ready
to paste into the target file.
"""

from __future__ import annotations

from typing import Union

from pixelhue.runtime.serializers.base import ExportTarget
from pixelhue.schema import ColorData


def _hex(color: Union[ColorData, str]) -> str:
    if isinstance(color, ColorData):
        return color.hex
    return ColorData.from_hex(color).hex


def to_snippet(
    color: Union[ColorData, str],
    target: ExportTarget,
    *,
    name: str | None = None,
) -> str:
    """Render a color as a code snippet.

    Args:
        color: ColorData or hex string.
        target: Which snippet to produce.
        name: Token name. Defaults to ``brand`` for Tailwind and
            ``color-primary`` for CSS; unused for SwiftUI.

    Returns:
        Snippet text.

    Example::

        >>> to_snippet("#6366f1", ExportTarget.CSS_VARIABLE)
        '--color-primary: #6366f1;'
        >>> to_snippet("#6366f1", ExportTarget.TAILWIND)
        "'brand': '#6366f1',"
        >>> to_snippet("#6366f1", ExportTarget.SWIFTUI)
        'Color(hex: "#6366f1")'
    """
    hex_value = _hex(color)
    if target == ExportTarget.TAILWIND:
        return f"'{name or 'brand'}': '{hex_value}',"
    elif target == ExportTarget.CSS_VARIABLE:
        return f"--{name or 'color-primary'}: {hex_value};"
    else:
        return f'Color(hex: "{hex_value}")'


def to_snippets(color: Union[ColorData, str]) -> dict[ExportTarget, str]:
    """Render a color for every export target, with default names."""
    return {target: to_snippet(color, target) for target in ExportTarget}
