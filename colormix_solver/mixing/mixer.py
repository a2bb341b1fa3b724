"""Blending a list of colors by percentage."""

from typing import Sequence, Union

import numpy as np

from ..errors import ArityMismatchError
from ..colors.color import CMYK, RGB, ColorSpace
from ..colors.codec import as_rgb, cmyk_to_rgb, rgb_to_cmyk


def mix(
    colors: Sequence[Union[str, RGB]],
    percentages: Sequence[float],
    space: ColorSpace = ColorSpace.RGB,
) -> RGB:
    """
    Mix colors according to their percentages.

    In RGB space each channel is the percentage-weighted sum of the input
    channels (additive light mixing). In CMYK space the weights are first
    scaled to sum to 1 and the CMYK channels are averaged (pigment-like
    mixing), then converted back to RGB.

    Args:
        colors: Colors to mix, as RGB values or hex strings
        percentages: One weight per color, in percent
        space: Color space to mix in

    Returns:
        The mixed color

    Raises:
        ArityMismatchError: If there is not exactly one percentage per color
    """
    if len(colors) != len(percentages):
        raise ArityMismatchError(len(colors), len(percentages))

    if not colors:
        return RGB.black()

    weights = np.asarray(percentages, dtype=float)
    rgbs = [as_rgb(color) for color in colors]

    if space == ColorSpace.CMYK:
        return _mix_cmyk(rgbs, weights)

    channels = np.array([rgb.as_tuple() for rgb in rgbs], dtype=float)
    r, g, b = (weights / 100) @ channels
    return RGB.from_floats(r, g, b)


def _mix_cmyk(rgbs: Sequence[RGB], weights: np.ndarray) -> RGB:
    total = weights.sum()
    # No paint at all mixes to black, as it does in RGB space
    if total == 0:
        return RGB.black()

    channels = np.array([rgb_to_cmyk(rgb).as_tuple() for rgb in rgbs], dtype=float)
    c, m, y, k = (weights / total) @ channels
    return cmyk_to_rgb(CMYK(float(c), float(m), float(y), float(k)))
