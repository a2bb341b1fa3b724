"""Genetic operators for percentage vectors."""

import random
from abc import ABC, abstractmethod
from typing import List, Sequence

from .candidate import Candidate


def normalize_percentages(percentages: Sequence[float]) -> List[float]:
    """
    Scale a vector so it sums to 100, then clamp each component to 0..100.

    The clamp is not followed by a second scaling pass, so vectors with
    negative components can end up summing to slightly more or less than 100.
    An empty or zero-sum vector becomes an all-zero vector.
    """
    total = sum(percentages)
    if total == 0:
        return [0.0] * len(percentages)
    return [max(0.0, min(100.0, p / total * 100)) for p in percentages]


def random_percentages(length: int, rng: random.Random) -> List[float]:
    """Create a random normalized percentage vector."""
    return normalize_percentages([rng.random() for _ in range(length)])


def tournament_select(
    population: Sequence[Candidate],
    tournament_size: int,
    rng: random.Random,
) -> Candidate:
    """Pick the lowest-distance candidate of a random sample drawn with replacement."""
    tournament = [rng.choice(population) for _ in range(tournament_size)]
    return min(tournament, key=lambda c: c.distance)


class CrossoverOperator(ABC):
    """Abstract base class for crossover operators."""

    @abstractmethod
    def crossover(
        self,
        parent1: Sequence[float],
        parent2: Sequence[float],
        rng: random.Random,
    ) -> List[float]:
        """
        Combine two parent vectors into a child vector.

        Args:
            parent1: First parent's percentages
            parent2: Second parent's percentages
            rng: Random source

        Returns:
            A new normalized percentage vector
        """
        pass


class SinglePointCrossover(CrossoverOperator):
    """Take parent1's genes before a random cut and parent2's genes from it on."""

    def crossover(
        self,
        parent1: Sequence[float],
        parent2: Sequence[float],
        rng: random.Random,
    ) -> List[float]:
        if not parent1:
            return []
        cut = rng.randrange(len(parent1))
        child = list(parent1[:cut]) + list(parent2[cut:])
        return normalize_percentages(child)


class MutationOperator(ABC):
    """Abstract base class for mutation operators."""

    @abstractmethod
    def mutate(
        self,
        percentages: Sequence[float],
        mutation_rate: float,
        rng: random.Random,
    ) -> List[float]:
        """
        Apply mutation to a percentage vector.

        Args:
            percentages: The vector to mutate
            mutation_rate: Probability of mutation (0.0 to 1.0)
            rng: Random source

        Returns:
            A mutated copy of the vector
        """
        pass


class GeneDeltaMutation(MutationOperator):
    """Mutation that nudges one random gene by up to +/- step percent."""

    def __init__(self, step: float = 5.0):
        self.step = step

    def mutate(
        self,
        percentages: Sequence[float],
        mutation_rate: float,
        rng: random.Random,
    ) -> List[float]:
        if rng.random() >= mutation_rate or not percentages:
            return list(percentages)

        mutated = list(percentages)
        index = rng.randrange(len(mutated))
        mutated[index] += rng.uniform(-self.step, self.step)
        return normalize_percentages(mutated)
