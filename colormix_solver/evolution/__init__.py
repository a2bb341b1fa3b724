"""Evolution module for genetic algorithm-based blend search."""

from .algorithm import EvolutionaryAlgorithm, EvolutionConfig, BlendResult, optimize
from .fitness import FitnessFunction, BlendDistanceFitness
from .operators import (
    MutationOperator,
    CrossoverOperator,
    GeneDeltaMutation,
    SinglePointCrossover,
    normalize_percentages,
    random_percentages,
    tournament_select,
)
from .candidate import Candidate

__all__ = [
    "EvolutionaryAlgorithm",
    "EvolutionConfig",
    "BlendResult",
    "optimize",
    "FitnessFunction",
    "BlendDistanceFitness",
    "MutationOperator",
    "CrossoverOperator",
    "GeneDeltaMutation",
    "SinglePointCrossover",
    "normalize_percentages",
    "random_percentages",
    "tournament_select",
    "Candidate",
]
