"""Conversion between hex strings, RGB triples and CMYK quadruples."""

import string
from typing import Union

from ..errors import InvalidFormatError
from .color import CMYK, RGB, ColorSpace, round_channel

HEX_DIGITS = frozenset(string.hexdigits)


def decode_hex(code: str) -> RGB:
    """
    Parse a #rrggbb color code.

    Args:
        code: The hex string, with leading '#', case-insensitive

    Returns:
        The decoded RGB color

    Raises:
        InvalidFormatError: If the code is not exactly '#' plus 6 hex digits
    """
    if not isinstance(code, str):
        raise InvalidFormatError(f"Color code must be a string: {code!r}")
    if len(code) != 7 or code[0] != "#":
        raise InvalidFormatError(f"Color code must look like #rrggbb: {code!r}")

    digits = code[1:]
    if not all(ch in HEX_DIGITS for ch in digits):
        raise InvalidFormatError(f"Invalid hex digits in color code: {code!r}")

    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def encode_hex(r: float, g: float, b: float) -> str:
    """Round and clamp three channel values and encode them as #rrggbb."""
    return RGB.from_floats(r, g, b).to_hex()


def rgb_to_cmyk(rgb: RGB) -> CMYK:
    """Convert RGB to CMYK percentages. Black is always (0, 0, 0, 100)."""
    if rgb.is_black():
        return CMYK(0.0, 0.0, 0.0, 100.0)

    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    k = 1 - max(r, g, b)
    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return CMYK(c * 100, m * 100, y * 100, k * 100)


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    """Convert CMYK percentages back to rounded RGB channels."""
    white = 1 - cmyk.k / 100
    return RGB(
        round_channel(255 * (1 - cmyk.c / 100) * white),
        round_channel(255 * (1 - cmyk.m / 100) * white),
        round_channel(255 * (1 - cmyk.y / 100) * white),
    )


def hex_to_cmyk(code: str) -> CMYK:
    return rgb_to_cmyk(decode_hex(code))


def cmyk_to_hex(cmyk: CMYK) -> str:
    return cmyk_to_rgb(cmyk).to_hex()


def as_rgb(color: Union[str, RGB]) -> RGB:
    """Accept either a hex string or an RGB value."""
    if isinstance(color, RGB):
        return color
    return decode_hex(color)


def format_color(color: Union[str, RGB], space: ColorSpace = ColorSpace.RGB) -> str:
    """
    Format a color for display in the given color space.

    RGB colors are shown as their hex code, CMYK colors as
    "C: 12.34%, M: 56.78%, Y: 0.00%, K: 10.00%".
    """
    rgb = as_rgb(color)
    if space == ColorSpace.CMYK:
        return str(rgb_to_cmyk(rgb))
    return rgb.to_hex()
