"""Color mixing and distance module."""

from .mixer import mix
from .distance import distance, MAX_DISTANCE

__all__ = [
    "mix",
    "distance",
    "MAX_DISTANCE",
]
