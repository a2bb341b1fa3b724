"""Fitness functions for evaluating percentage vectors."""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple, Union

from ..colors.color import RGB, ColorSpace
from ..colors.codec import as_rgb
from ..mixing.mixer import mix
from ..mixing.distance import distance


class FitnessFunction(ABC):
    """Abstract base class for fitness functions."""

    @abstractmethod
    def evaluate(self, percentages: Sequence[float]) -> Tuple[str, float]:
        """
        Evaluate a percentage vector.

        Args:
            percentages: One weight per available color

        Returns:
            Tuple of (mixed hex color, distance to target); lower is better
        """
        pass


class BlendDistanceFitness(FitnessFunction):
    """Fitness measured as the distance between the mixed color and the target."""

    def __init__(
        self,
        colors: Sequence[Union[str, RGB]],
        target: Union[str, RGB],
        space: ColorSpace = ColorSpace.RGB,
    ):
        """
        Initialize the fitness function.

        Args:
            colors: Available colors, in the order of the percentage vectors
            target: The color to approximate
            space: Color space used for both mixing and distance
        """
        self.colors = tuple(as_rgb(color) for color in colors)
        self.target = as_rgb(target)
        self.space = space

    def evaluate(self, percentages: Sequence[float]) -> Tuple[str, float]:
        mixed = mix(self.colors, percentages, self.space)
        return mixed.to_hex(), distance(mixed, self.target, self.space)
