"""Color parsing and interpolation for hex, rgb() and rgba() color strings.

Colors are normalized to (r, g, b, a) tuples with r, g, b in [0, 255] and a in [0, 1].
Recognized strings are "#rgb", "#rrggbb", "rgb(r,g,b)" and "rgba(r,g,b,a)".
"""

from __future__ import annotations

import logging
import math
import re
from typing import List, Optional, Sequence, Union

import numpy as np

from arcmap.common import ColorFormat, Rgba, coerce_number
from arcmap.consts import ALPHA_DECIMALS, DEFAULT_ALPHA, PERCENT_FULL

logger = logging.getLogger(__name__)

_HEX6_RE = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)
_HEX3_RE = re.compile(r"#[0-9a-f]{3}", re.IGNORECASE)
_RGB_RE = re.compile(r"rgb\(( ?\d{1,3},){2} ?\d{1,3}\)", re.IGNORECASE)
_RGBA_RE = re.compile(r"rgba\(( ?\d{1,3},){3}( ?\d(\.\d+)?)\)", re.IGNORECASE)
_CHANNEL_RE = re.compile(r"\d{1,3}(?:\.\d+)?")
_HEX_PREFIX_RE = re.compile(r"\s*([+-]?[0-9a-f]+)", re.IGNORECASE)

ColorValue = Union[str, Sequence[float]]


class ColorFormatError(ValueError):
    """Raised when a color string cannot be parsed."""


class ColorUtils:
    """Class to provide static methods for parsing, classifying and blending colors."""

    ###########################################################################
    # Classification
    ###########################################################################

    @staticmethod
    def is_hex_color(value: str) -> bool:
        """True for "#rgb" and "#rrggbb" strings."""
        return (len(value) == 7 and _HEX6_RE.match(value) is not None) or (
            len(value) == 4 and _HEX3_RE.match(value) is not None
        )

    @staticmethod
    def is_rgb(value: str) -> bool:
        """True for strings starting with "rgb(r,g,b)"."""
        return _RGB_RE.match(value) is not None

    @staticmethod
    def is_rgba(value: str) -> bool:
        """True for strings starting with "rgba(r,g,b,a)" with a single digit alpha integer part."""
        return _RGBA_RE.match(value) is not None

    @classmethod
    def is_color(cls, value: str) -> bool:
        """True for any of the recognized color strings."""
        return cls.is_hex_color(value) or cls.is_rgb(value) or cls.is_rgba(value)

    @classmethod
    def classify(cls, value: ColorValue) -> ColorFormat:
        """Tell which of the recognized formats the given color string is in."""
        if not isinstance(value, str):
            return ColorFormat.INVALID
        if cls.is_rgba(value):
            return ColorFormat.RGBA
        if cls.is_rgb(value):
            return ColorFormat.RGB
        if cls.is_hex_color(value):
            return ColorFormat.HEX
        return ColorFormat.INVALID

    @staticmethod
    def is_not_negative_number(value) -> bool:
        """True if value converts to a number >= 0.

        None and the empty string are not numbers and give False.
        """
        return coerce_number(value, default=math.nan) >= 0

    ###########################################################################
    # Parsing
    ###########################################################################

    @staticmethod
    def _parse_hex(digits: str) -> float:
        """Parse the leading hex digits of _digits_, nan if there are none."""
        match = _HEX_PREFIX_RE.match(digits)
        if match is None:
            return math.nan
        return int(match.group(1), 16)

    @classmethod
    def hex_to_rgba(cls, color: str, opacity: Optional[float] = None) -> Rgba:
        """
        Convert a "#rgb" or "#rrggbb" string to (r, g, b, a).

        Strings of any other length give black. Invalid hex digits give nan channels.

        Args:
            color: the hex color string
            opacity: alpha to use instead of 1, 0 included

        Returns:
            Tuple (r, g, b, a)
        """
        red: float = 0
        green: float = 0
        blue: float = 0
        if len(color) == 4:
            red = cls._parse_hex(color[1] * 2)
            green = cls._parse_hex(color[2] * 2)
            blue = cls._parse_hex(color[3] * 2)
        elif len(color) == 7:
            red = cls._parse_hex(color[1:3])
            green = cls._parse_hex(color[3:5])
            blue = cls._parse_hex(color[5:])

        alpha = DEFAULT_ALPHA if opacity is None else opacity
        return (red, green, blue, alpha)

    @staticmethod
    def rgb_to_rgba(color: str) -> Rgba:
        """
        Convert an "rgb(...)" or "rgba(...)" string to (r, g, b, a).

        The first four numeric tokens are used. A fourth token of exactly "0" gives
        alpha 0, any other fourth token its numeric value if non-zero, otherwise 1.

        Raises:
            ColorFormatError: If the string holds fewer than three numeric tokens
        """
        tokens: List[str] = _CHANNEL_RE.findall(color)
        if len(tokens) < 3:
            raise ColorFormatError(f"Expected at least 3 color channels in '{color}', found {len(tokens)}")

        alpha = DEFAULT_ALPHA
        if len(tokens) > 3:
            alpha = 0.0 if tokens[3] == "0" else (float(tokens[3]) or DEFAULT_ALPHA)
        return (float(tokens[0]), float(tokens[1]), float(tokens[2]), alpha)

    @classmethod
    def parse_color(cls, value: ColorValue) -> Rgba:
        """
        Normalize a color to (r, g, b, a).

        Strings are parsed according to their format. Sequences of 3 or 4 numbers are
        taken as channels already (alpha defaults to 1).

        Raises:
            ColorFormatError: If value is a string in none of the recognized formats
        """
        if not isinstance(value, str):
            channels = [float(channel) for channel in value]
            if len(channels) not in (3, 4):
                raise ColorFormatError(f"Expected 3 or 4 color channels, got {len(channels)}")
            if len(channels) == 3:
                channels.append(DEFAULT_ALPHA)
            return (channels[0], channels[1], channels[2], channels[3])

        color_format = cls.classify(value)
        if color_format in (ColorFormat.RGB, ColorFormat.RGBA):
            return cls.rgb_to_rgba(value)
        if color_format == ColorFormat.HEX:
            return cls.hex_to_rgba(value)

        logger.warning("Unrecognized color format: %r", value)
        raise ColorFormatError(f"Unrecognized color format: '{value}'")

    ###########################################################################
    # Interpolation
    ###########################################################################

    @staticmethod
    def _round_half_up(value: float) -> int:
        return math.floor(value + 0.5)

    @staticmethod
    def _format_number(value: float) -> str:
        if float(value).is_integer():
            return str(int(value))
        return f"{value:.{ALPHA_DECIMALS}f}".rstrip("0").rstrip(".")

    @classmethod
    def format_rgba(cls, rgba: Rgba) -> str:
        """Format channels as "rgba(r,g,b,a)" in plain notation without trailing zeros."""
        return "rgba(" + ",".join(cls._format_number(channel) for channel in rgba) + ")"

    @classmethod
    def interpolate_color(cls, start: ColorValue, end: ColorValue, shift: float) -> str:
        """
        Blend two colors linearly.

        Red, green and blue are rounded to integers, alpha to ALPHA_DECIMALS decimals.

        Args:
            start: color at shift 0
            end: color at shift 100
            shift: position in percent (0..100)

        Returns:
            str: the blended color as "rgba(r,g,b,a)"

        Raises:
            ColorFormatError: If start or end is not a recognized color
        """
        start_rgba = cls.parse_color(start)
        end_rgba = cls.parse_color(end)

        channels = [
            cls._round_half_up(start_rgba[i] + (end_rgba[i] - start_rgba[i]) / PERCENT_FULL * shift) for i in range(3)
        ]
        alpha = round(start_rgba[3] + (end_rgba[3] - start_rgba[3]) / PERCENT_FULL * shift, ALPHA_DECIMALS) + 0.0
        return cls.format_rgba((channels[0], channels[1], channels[2], alpha))

    ###########################################################################
    # Random colors
    ###########################################################################

    @staticmethod
    def random_int(minimum: int, maximum: int, rng: Optional[np.random.Generator] = None) -> int:
        """Random integer in [minimum, maximum], both inclusive."""
        rng = rng or np.random.default_rng()
        return int(rng.integers(minimum, maximum + 1))

    @classmethod
    def random_rgb(cls, minimum: int, maximum: int, rng: Optional[np.random.Generator] = None) -> str:
        """Random "rgb(r,g,b)" string with every channel in [minimum, maximum]."""
        rng = rng or np.random.default_rng()
        red, green, blue = (cls.random_int(minimum, maximum, rng) for _ in range(3))
        return f"rgb({red},{green},{blue})"


def main():
    """Main"""
    print(ColorUtils.interpolate_color("#ff0000", "rgba(0,0,255,0.5)", 25))
    print(ColorUtils.random_rgb(0, 255))


if __name__ == "__main__":
    main()
