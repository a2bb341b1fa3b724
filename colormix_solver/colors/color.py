"""Core color data structures."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


def round_channel(value: float) -> int:
    """Round to the nearest integer, halves going up, and clamp to 0..255."""
    return max(0, min(255, int(math.floor(value + 0.5))))


class ColorSpace(Enum):
    """Color models the mixer and distance metric can work in."""
    RGB = "rgb"
    CMYK = "cmyk"

    @classmethod
    def from_flag(cls, use_cmyk: bool) -> "ColorSpace":
        """Map the boolean model selector to a color space."""
        return cls.CMYK if use_cmyk else cls.RGB


@dataclass(frozen=True)
class RGB:
    """A color as three 8-bit channels."""
    r: int
    g: int
    b: int

    @classmethod
    def from_floats(cls, r: float, g: float, b: float) -> "RGB":
        """Build a color from unrounded channel values."""
        return cls(round_channel(r), round_channel(g), round_channel(b))

    @classmethod
    def black(cls) -> "RGB":
        return cls(0, 0, 0)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def is_black(self) -> bool:
        return self.r == 0 and self.g == 0 and self.b == 0

    def to_hex(self) -> str:
        """Encode as a lowercase #rrggbb string."""
        return "#{:02x}{:02x}{:02x}".format(
            round_channel(self.r), round_channel(self.g), round_channel(self.b)
        )

    def __str__(self) -> str:
        return self.to_hex()


@dataclass(frozen=True)
class CMYK:
    """A color as cyan, magenta, yellow and key percentages (0-100)."""
    c: float
    m: float
    y: float
    k: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.c, self.m, self.y, self.k)

    def __str__(self) -> str:
        return (
            f"C: {self.c:.2f}%, M: {self.m:.2f}%, "
            f"Y: {self.y:.2f}%, K: {self.k:.2f}%"
        )
