# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Single-pixel sampling from a decoded image.

Pixel buffers are NumPy arrays of shape (H, W, 3) or (H, W, 4) with uint8
values, addressed in native image space (row = y, column = x). Images are
usually displayed at a scaled size, so pointer positions must be mapped to
native coordinates with ``display_to_native`` before sampling.

Sampling never mutates the buffer; concurrent reads are safe.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pixelhue.schema import RGB


def display_to_native(
    display_x: float,
    display_y: float,
    display_size: tuple[float, float],
    native_size: tuple[int, int],
) -> tuple[float, float]:
    """
    Map a position on the rendered image to native pixel coordinates.

    Args:
        display_x, display_y: Pointer position relative to the rendered
            image's top-left corner
        display_size: (width, height) the image is rendered at
        native_size: (width, height) of the decoded pixel grid

    Returns:
        (x, y) in native pixel space, unrounded

    Example:
        >>> display_to_native(50, 25, (100, 50), (400, 200))
        (200.0, 100.0)
    """
    display_w, display_h = display_size
    native_w, native_h = native_size
    if display_w <= 0 or display_h <= 0:
        raise ValueError(f"Display size must be positive, got {display_size}")
    return (display_x / display_w) * native_w, (display_y / display_h) * native_h


def sample(pixels: NDArray[np.uint8], x: float, y: float) -> RGB:
    """
    Read the RGB value of one pixel.

    Fractional coordinates are truncated, so (10.9, 3.2) reads pixel
    (10, 3). Alpha, when present, is ignored. Coordinates must lie inside
    the image; out-of-bounds reads are a caller error.

    Args:
        pixels: Array of shape (H, W, 3) or (H, W, 4), uint8
        x: Column in native pixel space
        y: Row in native pixel space

    Returns:
        RGB of the pixel
    """
    r, g, b = pixels[int(y), int(x), :3]
    return RGB(r=int(r), g=int(g), b=int(b))
