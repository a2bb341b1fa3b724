"""Color representation and conversion module."""

from .color import RGB, CMYK, ColorSpace
from .codec import (
    decode_hex,
    encode_hex,
    rgb_to_cmyk,
    cmyk_to_rgb,
    hex_to_cmyk,
    cmyk_to_hex,
    format_color,
)

__all__ = [
    "RGB",
    "CMYK",
    "ColorSpace",
    "decode_hex",
    "encode_hex",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "hex_to_cmyk",
    "cmyk_to_hex",
    "format_color",
]
