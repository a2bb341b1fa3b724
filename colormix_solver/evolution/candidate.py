"""Candidate solution representation."""

import math
from dataclasses import dataclass, field
from typing import List


@dataclass
class Candidate:
    """A percentage vector in the evolutionary algorithm, with its evaluation."""
    percentages: List[float]
    color: str = ""
    distance: float = math.inf
    generation: int = 0
    evaluated: bool = field(default=False, compare=False)

    def copy(self) -> "Candidate":
        """Create a copy of this candidate."""
        return Candidate(
            percentages=list(self.percentages),
            color=self.color,
            distance=self.distance,
            generation=self.generation,
            evaluated=self.evaluated,
        )

    def __repr__(self) -> str:
        return (
            f"Candidate(color={self.color}, distance={self.distance:.4f}, "
            f"gen={self.generation})"
        )
