# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Palette extraction from fixed sample points.

The palette is read at a hand-picked set of normalized positions rather
than by clustering or histogram binning. Every sample point yields exactly
one hex value, in sample-point order, and duplicates are kept: a uniform
image produces the same color at every position.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from pixelhue.measure.colorspace import rgb_to_hex
from pixelhue.measure.sampler import sample

logger = logging.getLogger(__name__)

# Normalized (x, y) positions, left→right / top→bottom in [0, 1)
SAMPLE_POINTS: tuple[tuple[float, float], ...] = (
    (0.2, 0.2),
    (0.5, 0.2),
    (0.8, 0.5),
    (0.3, 0.8),
    (0.7, 0.7),
)


def extract_palette(
    pixels: NDArray[np.uint8],
    width: Optional[int] = None,
    height: Optional[int] = None,
    *,
    sample_points: Sequence[tuple[float, float]] = SAMPLE_POINTS,
) -> tuple[str, ...]:
    """
    Extract a palette by sampling fixed normalized positions.

    Args:
        pixels: Array of shape (H, W, 3) or (H, W, 4), uint8
        width: Native width in pixels (default: from array shape)
        height: Native height in pixels (default: from array shape)
        sample_points: Normalized (x, y) positions, each coordinate in [0, 1)

    Returns:
        Tuple of lowercase hex strings, one per sample point, in order
    """
    if width is None:
        width = pixels.shape[1]
    if height is None:
        height = pixels.shape[0]

    palette = []
    for px, py in sample_points:
        rgb = sample(pixels, width * px, height * py)
        palette.append(rgb_to_hex(*rgb.as_tuple()))

    logger.debug("Extracted %d-color palette from %dx%d image", len(palette), width, height)
    return tuple(palette)
