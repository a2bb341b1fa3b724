"""Color blend solver: find percentages of available colors that mix to a target."""

from .evolution.algorithm import BlendResult, optimize

__all__ = [
    "BlendResult",
    "optimize",
]
