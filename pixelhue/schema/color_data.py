# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
ColorData -- Canonical schema for a picked color.

Design principles:
- Immutable: All types are frozen dataclasses
- Consistent: hex, rgb, hsl and cmyk describe the same color
- Derived: ColorData is produced by the converter, never assembled by hand
- Serializable: JSON-ready for clipboard and export layers

Value ranges:
- RGB: integers 0-255 per channel
- HSL: hue 0-359 degrees, saturation and lightness 0-100 percent
- CMYK: integers 0-100 percent per channel
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Parsing Helpers
# =============================================================================

_HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} must be {low}-{high}, got {value}")


# =============================================================================
# Color Space Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """
    A color in 8-bit sRGB.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channel values are within 0-255."""
        _check_range("Red", self.r, 0, 255)
        _check_range("Green", self.g, 0, 255)
        _check_range("Blue", self.b, 0, 255)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSL:
    """
    A color in the HSL cylinder, rounded to whole units.

    Attributes:
        h: Hue in degrees (0-359). 0 for achromatic colors.
        s: Saturation percent (0-100)
        l: Lightness percent (0-100)
    """
    h: int
    s: int
    l: int

    def __post_init__(self) -> None:
        """Validate hue, saturation and lightness ranges."""
        _check_range("Hue", self.h, 0, 359)
        _check_range("Saturation", self.s, 0, 100)
        _check_range("Lightness", self.l, 0, 100)

    @property
    def is_achromatic(self) -> bool:
        """True for grays, black and white (no saturation)."""
        return self.s == 0

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.h, self.s, self.l)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSL:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


@dataclass(frozen=True, slots=True)
class CMYK:
    """
    A color in naive (profile-free) CMYK, as whole percentages.

    Attributes:
        c: Cyan percent (0-100)
        m: Magenta percent (0-100)
        y: Yellow percent (0-100)
        k: Key (black) percent (0-100)
    """
    c: int
    m: int
    y: int
    k: int

    def __post_init__(self) -> None:
        """Validate channel percentages."""
        _check_range("Cyan", self.c, 0, 100)
        _check_range("Magenta", self.m, 0, 100)
        _check_range("Yellow", self.y, 0, 100)
        _check_range("Key", self.k, 0, 100)

    def __str__(self) -> str:
        return f"{self.c}, {self.m}, {self.y}, {self.k}"

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.c, self.m, self.y, self.k)

    @classmethod
    def parse(cls, text: str) -> CMYK:
        """Parse the ``"C, M, Y, K"`` string form."""
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 4:
            raise ValueError(f"CMYK string must have 4 components, got {text!r}")
        try:
            c, m, y, k = (int(p) for p in parts)
        except ValueError as e:
            raise ValueError(f"CMYK components must be integers, got {text!r}") from e
        return cls(c=c, m=m, y=y, k=k)


# =============================================================================
# Picked Color Record
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorData:
    """
    Full description of a single picked color.

    Produced by ``rgb_to_color_data``. Every field is a re-derivation of
    the same 8-bit RGB value, so the record is internally consistent.

    Attributes:
        hex: Lowercase ``#rrggbb`` string
        rgb: Channel values
        hsl: Rounded hue/saturation/lightness
        cmyk: Rounded CMYK percentages

    Usage:
        >>> from pixelhue.measure import rgb_to_color_data
        >>> c = rgb_to_color_data(99, 102, 241)
        >>> c.hex
        '#6366f1'
        >>> c.cmyk_string
        '59, 58, 0, 5'
    """
    hex: str
    rgb: RGB
    hsl: HSL
    cmyk: CMYK

    def __post_init__(self) -> None:
        """Validate hex format and that hex, hsl and cmyk all derive from rgb."""
        from pixelhue.measure.colorspace import rgb_to_cmyk, rgb_to_hsl

        if not _HEX_RE.match(self.hex):
            raise ValueError(f"Hex must be lowercase #rrggbb, got {self.hex!r}")
        expected = "#{:02x}{:02x}{:02x}".format(*self.rgb.as_tuple())
        if self.hex != expected:
            raise ValueError(f"Hex {self.hex} does not match rgb {expected}")
        expected_hsl = rgb_to_hsl(*self.rgb.as_tuple())
        if self.hsl != expected_hsl:
            raise ValueError(f"HSL {self.hsl.as_tuple()} does not match rgb {expected}")
        expected_cmyk = rgb_to_cmyk(*self.rgb.as_tuple())
        if self.cmyk != expected_cmyk:
            raise ValueError(f"CMYK ({self.cmyk}) does not match rgb {expected}")

    @property
    def cmyk_string(self) -> str:
        """CMYK formatted as ``"C, M, Y, K"``."""
        return str(self.cmyk)

    @classmethod
    def from_hex(cls, hex_color: str) -> ColorData:
        """Build a ColorData by re-deriving every field from a hex string."""
        from pixelhue.measure.colorspace import hex_to_rgb, rgb_to_color_data
        return rgb_to_color_data(*hex_to_rgb(hex_color))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hsl": self.hsl.to_dict(),
            "cmyk": self.cmyk_string,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ColorData:
        """
        Deserialize from dictionary.

        Only ``rgb`` is trusted; the other fields are re-derived and must
        agree with the stored values.
        """
        from pixelhue.measure.colorspace import rgb_to_color_data

        rgb = RGB.from_dict(data["rgb"])
        derived = rgb_to_color_data(*rgb.as_tuple())
        if "hex" in data and data["hex"].lower() != derived.hex:
            raise ValueError(f"Inconsistent color record: hex {data['hex']} vs rgb {derived.hex}")
        if "hsl" in data and HSL.from_dict(data["hsl"]) != derived.hsl:
            raise ValueError(f"Inconsistent color record: hsl {data['hsl']} for {derived.hex}")
        if "cmyk" in data and CMYK.parse(data["cmyk"]) != derived.cmyk:
            raise ValueError(f"Inconsistent color record: cmyk {data['cmyk']} for {derived.hex}")
        return derived

    @classmethod
    def from_json(cls, json_str: str) -> ColorData:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


# =============================================================================
# Accessibility
# =============================================================================


@dataclass(frozen=True, slots=True)
class ContrastReport:
    """
    WCAG contrast of a color against pure black and pure white.

    Attributes:
        luminance: Relative luminance (0.0 = black, 1.0 = white)
        ratio_vs_black: (L + 0.05) / 0.05, rounded to 2 decimals (1.0-21.0)
        ratio_vs_white: 1.05 / (L + 0.05), rounded to 2 decimals (1.0-21.0)
        is_dark: True when L < 0.5; light text reads better on this color
    """
    luminance: float
    ratio_vs_black: float
    ratio_vs_white: float
    is_dark: bool

    @property
    def level_vs_black(self) -> str:
        """WCAG rating of this color against black."""
        from pixelhue.measure.contrast import wcag_level
        return wcag_level(self.ratio_vs_black)

    @property
    def level_vs_white(self) -> str:
        """WCAG rating of this color against white."""
        from pixelhue.measure.contrast import wcag_level
        return wcag_level(self.ratio_vs_white)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "luminance": round(self.luminance, 4),
            "vs_black": {"ratio": self.ratio_vs_black, "level": self.level_vs_black},
            "vs_white": {"ratio": self.ratio_vs_white, "level": self.level_vs_white},
            "is_dark": self.is_dark,
        }
