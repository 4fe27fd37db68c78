# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Pixelhue -- Pixel color picker engine.

Loads an image, reads exact colors from single pixels and describes them
in hex, RGB, HSL and CMYK with WCAG contrast, a fixed-point palette and a
bounded pick history.

Quick start::

    from pixelhue import new_session, load_image, pick

    state = load_image(new_session(), "image.png")
    state = pick(state, 120, 45)
    state.color.hex          # "#6366f1"
    state.color.cmyk_string  # "59, 58, 0, 5"
    state.contrast.ratio_vs_white
"""

from __future__ import annotations

__version__ = "1.0.0"

from pixelhue.measure import compute_contrast, extract_palette, rgb_to_color_data
from pixelhue.measure.session import (
    SessionConfig,
    SessionState,
    adjust_hsl,
    load_image,
    new_session,
    pick,
    pick_display,
    reset,
    select_hex,
)
from pixelhue.schema import (
    CMYK,
    HSL,
    RGB,
    ColorData,
    ContrastReport,
)

__all__ = [
    # Session API
    "new_session",
    "load_image",
    "pick",
    "pick_display",
    "adjust_hsl",
    "select_hex",
    "reset",
    "SessionState",
    "SessionConfig",
    # Engine (commonly needed)
    "rgb_to_color_data",
    "compute_contrast",
    "extract_palette",
    # Types
    "ColorData",
    "ContrastReport",
    "RGB",
    "HSL",
    "CMYK",
    # Version
    "__version__",
]
