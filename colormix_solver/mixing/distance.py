"""Euclidean color distance."""

from typing import Union

import numpy as np

from ..colors.color import RGB, ColorSpace
from ..colors.codec import as_rgb, rgb_to_cmyk

# Largest possible distance in each space
MAX_DISTANCE = {
    ColorSpace.RGB: float(np.sqrt(3 * 255 ** 2)),
    ColorSpace.CMYK: 200.0,
}


def channels(color: Union[str, RGB], space: ColorSpace) -> np.ndarray:
    """Get the channel vector of a color in the given space."""
    rgb = as_rgb(color)
    if space == ColorSpace.CMYK:
        return np.array(rgb_to_cmyk(rgb).as_tuple(), dtype=float)
    return np.array(rgb.as_tuple(), dtype=float)


def distance(
    color_a: Union[str, RGB],
    color_b: Union[str, RGB],
    space: ColorSpace = ColorSpace.RGB,
) -> float:
    """
    Euclidean distance between two colors.

    Uses the 3 RGB channels or the 4 CMYK channels, all unweighted.
    """
    return float(np.linalg.norm(channels(color_a, space) - channels(color_b, space)))
