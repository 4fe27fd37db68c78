# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""Integration tests for the interactive session."""

import numpy as np
import pytest

from pixelhue import (
    SessionConfig,
    adjust_hsl,
    load_image,
    new_session,
    pick,
    pick_display,
    reset,
    select_hex,
)
from pixelhue.measure.session import pick_history, pick_palette


def _solid_image(r, g, b, height=100, width=100):
    """Create a solid-color image."""
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


def _coordinate_image(height=10, width=10):
    """Red encodes the column and green the row (20 per step)."""
    img = np.zeros((height, width, 3), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            img[y, x] = [x * 20, y * 20, 0]
    return img


@pytest.fixture
def loaded():
    return load_image(new_session(), _coordinate_image())


class TestNewSession:

    def test_default_color(self):
        state = new_session()
        assert state.color.hex == "#6366f1"
        assert state.color.hsl.as_tuple() == (239, 84, 67)

    def test_empty(self):
        state = new_session()
        assert not state.has_image
        assert state.palette == ()
        assert state.history == ()

    def test_custom_default(self):
        state = new_session(SessionConfig(default_hex="#000000"))
        assert state.color.hex == "#000000"
        assert state.contrast.is_dark

    def test_invalid_config(self):
        with pytest.raises(ValueError, match="history_capacity"):
            SessionConfig(history_capacity=0)
        with pytest.raises(ValueError, match="Sample point"):
            SessionConfig(sample_points=((1.0, 0.5),))


class TestLoadImage:

    def test_extracts_palette(self, loaded):
        assert loaded.has_image
        assert (loaded.width, loaded.height) == (10, 10)
        assert loaded.palette == ("#282800", "#642800", "#a06400", "#3ca000", "#8c8c00")

    def test_palette_not_recomputed_on_pick(self, loaded):
        picked = pick(loaded, 1, 1)
        assert picked.palette is loaded.palette

    def test_new_image_starts_new_history(self, loaded):
        picked = pick(loaded, 1, 1)
        reloaded = load_image(picked, _solid_image(5, 5, 5))
        assert reloaded.history == ()
        assert set(reloaded.palette) == {"#050505"}

    def test_failed_decode_keeps_prior_state(self, loaded):
        picked = pick(loaded, 3, 3)
        with pytest.raises(ValueError):
            load_image(picked, b"not an image")
        assert picked.history == ("#3c3c00",)
        assert picked.palette == loaded.palette
        assert picked.has_image

    def test_source_array_changes_do_not_leak(self):
        img = _solid_image(0, 0, 0, height=4, width=4)
        state = load_image(new_session(), img)
        img[:] = 255
        assert set(state.palette) == {"#000000"}
        assert pick(state, 0, 0).color.hex == "#000000"

    def test_buffer_is_read_only(self, loaded):
        with pytest.raises(ValueError):
            loaded.pixels[0, 0] = [1, 2, 3]

    def test_custom_sample_points(self):
        config = SessionConfig(sample_points=((0.0, 0.0),))
        state = load_image(new_session(config), _coordinate_image())
        assert state.palette == ("#000000",)


class TestPick:

    def test_pick_sets_color_and_history(self, loaded):
        state = pick(loaded, 2, 7)
        assert state.color.hex == "#288c00"
        assert state.history == ("#288c00",)

    def test_pick_leaves_old_state_untouched(self, loaded):
        pick(loaded, 2, 7)
        assert loaded.history == ()
        assert loaded.color.hex == "#6366f1"

    def test_same_color_twice(self, loaded):
        state = pick(pick(loaded, 2, 7), 2, 7)
        assert state.history == ("#288c00",)

    def test_repick_does_not_reorder(self, loaded):
        state = pick(pick(pick(loaded, 1, 1), 2, 2), 1, 1)
        assert state.history == ("#282800", "#141400")
        assert state.color.hex == "#141400"

    def test_history_capacity(self, loaded):
        state = loaded
        for x in range(10):
            state = pick(state, x, 0)
        for y in range(1, 4):
            state = pick(state, 0, y)
        assert len(state.history) == 12
        assert state.history[0] == "#003c00"
        assert "#000000" not in state.history

    def test_configured_capacity(self):
        state = load_image(new_session(SessionConfig(history_capacity=2)), _coordinate_image())
        for x in range(4):
            state = pick(state, x, 0)
        assert state.history == ("#3c0000", "#280000")

    def test_pick_without_image(self):
        with pytest.raises(RuntimeError, match="No image"):
            pick(new_session(), 0, 0)

    def test_pick_display_maps_to_native(self, loaded):
        state = pick_display(loaded, 55, 25, (100, 100))
        assert state.color.rgb.as_tuple() == (100, 40, 0)

    def test_contrast_follows_color(self, loaded):
        dark = pick(loaded, 0, 0)
        assert dark.contrast.ratio_vs_black == 1.0
        assert dark.contrast.is_dark


class TestAdjustAndSelect:

    def test_adjust_lightness(self):
        state = adjust_hsl(new_session(), l=50)
        assert abs(state.color.hsl.l - 50) <= 1
        assert abs(state.color.hsl.h - 239) <= 1

    def test_adjust_to_gray(self):
        state = adjust_hsl(new_session(), s=0)
        assert state.color.hsl.s == 0
        assert state.color.rgb.r == state.color.rgb.g == state.color.rgb.b

    def test_adjust_does_not_record(self, loaded):
        state = adjust_hsl(pick(loaded, 5, 5), h=200)
        assert state.history == ("#646400",)

    def test_select_hex(self, loaded):
        state = select_hex(pick(loaded, 5, 5), "#FF0000")
        assert state.color.hex == "#ff0000"
        assert state.history == ("#646400",)

    def test_select_palette_and_history(self, loaded):
        state = pick(loaded, 9, 9)
        assert pick_palette(state, 2).color.hex == "#a06400"
        assert pick_history(state, 0).color.hex == "#b4b400"

    def test_select_invalid_hex(self):
        with pytest.raises(ValueError):
            select_hex(new_session(), "#nothex")


class TestReset:

    def test_reset_clears_everything(self, loaded):
        state = reset(pick(loaded, 4, 4))
        assert not state.has_image
        assert state.history == ()
        assert state.palette == ()
        assert state.color.hex == "#6366f1"

    def test_reset_keeps_config(self):
        config = SessionConfig(history_capacity=3)
        state = reset(load_image(new_session(config), _coordinate_image()))
        assert state.config is config
