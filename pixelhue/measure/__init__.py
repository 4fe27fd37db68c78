# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Colorimetry engine for Pixelhue.

Deterministic color-space conversion, WCAG contrast, single-pixel sampling,
fixed-point palette extraction and bounded pick history.
"""

from pixelhue.measure.colorspace import (
    hex_to_rgb,
    hsl_to_color_data,
    hsl_to_rgb,
    rgb_to_cmyk,
    rgb_to_color_data,
    rgb_to_hex,
    rgb_to_hsl,
)
from pixelhue.measure.contrast import (
    compute_contrast,
    contrast_ratio,
    relative_luminance,
    wcag_level,
)
from pixelhue.measure.history import HISTORY_CAPACITY, record
from pixelhue.measure.image import is_image_mime, load_image
from pixelhue.measure.palette import SAMPLE_POINTS, extract_palette
from pixelhue.measure.sampler import display_to_native, sample

__all__ = [
    # Conversion
    "rgb_to_color_data",
    "hsl_to_rgb",
    "hsl_to_color_data",
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "rgb_to_cmyk",
    # Contrast
    "compute_contrast",
    "contrast_ratio",
    "relative_luminance",
    "wcag_level",
    # Sampling
    "sample",
    "display_to_native",
    "extract_palette",
    "SAMPLE_POINTS",
    # History
    "record",
    "HISTORY_CAPACITY",
    # Acquisition
    "load_image",
    "is_image_mime",
]
