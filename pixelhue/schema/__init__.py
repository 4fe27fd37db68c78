# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Schema definitions for picked colors.

All types in this module are immutable (frozen dataclasses).
"""

from pixelhue.schema.color_data import (
    CMYK,
    HSL,
    RGB,
    ColorData,
    ContrastReport,
)

__all__ = [
    # Color space values
    "RGB",
    "HSL",
    "CMYK",
    # Picked color record
    "ColorData",
    # Accessibility
    "ContrastReport",
]
