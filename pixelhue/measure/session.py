# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Interactive picking session.

A session is an immutable ``SessionState``. Every operation takes the
current state and returns a new one, so the host UI swaps whole values
and never observes a half-updated session. A failed operation raises and
leaves the caller holding its previous state.

Typical flow::

    state = new_session()
    state = load_image(state, "photo.png")      # palette extracted once
    state = pick_display(state, 120, 80, (640, 480))
    state.color.hex, state.contrast.ratio_vs_white
    state = adjust_hsl(state, l=40)              # slider, history untouched
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from pixelhue.schema import ColorData, ContrastReport
from pixelhue.measure.colorspace import (
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_color_data,
)
from pixelhue.measure.contrast import compute_contrast
from pixelhue.measure.history import HISTORY_CAPACITY, record
from pixelhue.measure.image import ImageSource
from pixelhue.measure.image import load_image as _decode_image
from pixelhue.measure.palette import SAMPLE_POINTS, extract_palette
from pixelhue.measure.sampler import display_to_native, sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionConfig:
    """Configuration for a picking session."""

    # Normalized (x, y) palette sample positions
    sample_points: tuple[tuple[float, float], ...] = SAMPLE_POINTS

    # Maximum number of colors kept in the pick history
    history_capacity: int = HISTORY_CAPACITY

    # Color shown before anything has been picked
    default_hex: str = "#6366f1"

    def __post_init__(self) -> None:
        if self.history_capacity < 1:
            raise ValueError(f"history_capacity must be >= 1, got {self.history_capacity}")
        if not self.sample_points:
            raise ValueError("sample_points cannot be empty")
        for px, py in self.sample_points:
            if not (0.0 <= px < 1.0 and 0.0 <= py < 1.0):
                raise ValueError(f"Sample point ({px}, {py}) must lie in [0, 1)")


@dataclass(frozen=True, eq=False)
class SessionState:
    """
    Everything the picker knows at one moment.

    Attributes:
        color: Current selection
        palette: Hex colors from the loaded image's sample points
        history: Picked hex colors, newest first
        pixels: Decoded (H, W, 3) buffer, or None before an image is loaded
        width: Native image width in pixels (0 without an image)
        height: Native image height in pixels (0 without an image)
        config: Session settings
    """
    color: ColorData
    palette: tuple[str, ...] = ()
    history: tuple[str, ...] = ()
    pixels: Optional[NDArray[np.uint8]] = field(default=None, repr=False)
    width: int = 0
    height: int = 0
    config: SessionConfig = field(default_factory=SessionConfig)

    @property
    def has_image(self) -> bool:
        return self.pixels is not None

    @property
    def contrast(self) -> ContrastReport:
        """Contrast of the current color against black and white."""
        return compute_contrast(self.color)


def new_session(config: Optional[SessionConfig] = None) -> SessionState:
    """Start an empty session showing the default color."""
    config = config or SessionConfig()
    return SessionState(color=ColorData.from_hex(config.default_hex), config=config)


def reset(state: SessionState) -> SessionState:
    """Discard the image, palette and history, keeping the configuration."""
    return new_session(state.config)


def load_image(state: SessionState, image: ImageSource) -> SessionState:
    """
    Load a new image and start a fresh history.

    The palette is extracted once here and is not recomputed on picks.
    The current color carries over until the next pick.

    Raises:
        ValueError, TypeError: From decoding; ``state`` remains valid
    """
    pixels, height, width = _decode_image(image)
    palette = extract_palette(
        pixels, width, height, sample_points=state.config.sample_points,
    )
    logger.info("Session loaded %dx%d image, palette %s", width, height, ", ".join(palette))
    return replace(
        state,
        pixels=pixels,
        width=width,
        height=height,
        palette=palette,
        history=(),
    )


def pick(state: SessionState, x: float, y: float) -> SessionState:
    """
    Pick the pixel at native coordinates and record it in the history.

    Raises:
        RuntimeError: If no image is loaded
    """
    if state.pixels is None:
        raise RuntimeError("No image loaded; call load_image() before picking")

    rgb = sample(state.pixels, x, y)
    color = rgb_to_color_data(*rgb.as_tuple())
    logger.debug("Picked %s at (%.1f, %.1f)", color.hex, x, y)
    return replace(
        state,
        color=color,
        history=record(state.history, color.hex, state.config.history_capacity),
    )


def pick_display(
    state: SessionState,
    display_x: float,
    display_y: float,
    display_size: tuple[float, float],
) -> SessionState:
    """
    Pick using a pointer position on the rendered image.

    Args:
        display_x, display_y: Position relative to the rendered image
        display_size: (width, height) the image is rendered at
    """
    x, y = display_to_native(
        display_x, display_y, display_size, (state.width, state.height),
    )
    return pick(state, x, y)


def adjust_hsl(
    state: SessionState,
    h: Optional[float] = None,
    s: Optional[float] = None,
    l: Optional[float] = None,
) -> SessionState:
    """
    Move one or more HSL sliders. Unset components keep their current value.

    The adjusted color is not recorded in the history.
    """
    hsl = state.color.hsl
    rgb = hsl_to_rgb(
        hsl.h if h is None else h,
        hsl.s if s is None else s,
        hsl.l if l is None else l,
    )
    return replace(state, color=rgb_to_color_data(*rgb))


def select_hex(state: SessionState, hex_color: str) -> SessionState:
    """
    Make a palette or history swatch the current color.

    The history is not changed.
    """
    return replace(state, color=rgb_to_color_data(*hex_to_rgb(hex_color)))


def pick_palette(state: SessionState, index: int) -> SessionState:
    """Select the palette swatch at ``index``."""
    return select_hex(state, state.palette[index])


def pick_history(state: SessionState, index: int) -> SessionState:
    """Select the history swatch at ``index`` (0 = newest)."""
    return select_hex(state, state.history[index])
