"""Main evolutionary algorithm implementation."""

import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from ..colors.color import RGB, ColorSpace
from ..colors.codec import decode_hex
from ..mixing.distance import distance
from .candidate import Candidate
from .fitness import FitnessFunction, BlendDistanceFitness
from .operators import (
    CrossoverOperator,
    MutationOperator,
    SinglePointCrossover,
    GeneDeltaMutation,
    random_percentages,
    tournament_select,
)


@dataclass
class EvolutionConfig:
    """Configuration for the evolutionary algorithm."""
    population_size: int = 100
    generations: int = 100
    mutation_rate: float = 0.1
    tournament_size: int = 5
    mutation_step: float = 5.0
    seed: Optional[int] = None

    def __post_init__(self):
        if self.population_size < 1:
            raise ValueError(f"population_size must be at least 1, got {self.population_size}")
        if self.generations < 0:
            raise ValueError(f"generations must not be negative, got {self.generations}")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValueError(f"mutation_rate must be in [0, 1], got {self.mutation_rate}")
        if self.tournament_size < 1:
            raise ValueError(f"tournament_size must be at least 1, got {self.tournament_size}")


@dataclass
class BlendResult:
    """The best blend found by a run."""
    color: str
    percentages: List[float]
    distance: float

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> "BlendResult":
        return cls(
            color=candidate.color,
            percentages=list(candidate.percentages),
            distance=candidate.distance,
        )

    def to_dict(self) -> Dict:
        return {
            "color": self.color,
            "percentages": list(self.percentages),
            "distance": self.distance,
        }


class EvolutionaryAlgorithm:
    """Evolutionary algorithm for finding the blend closest to a target color."""

    def __init__(
        self,
        num_colors: int,
        fitness_function: FitnessFunction,
        config: Optional[EvolutionConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the evolutionary algorithm.

        Args:
            num_colors: Length of each percentage vector
            fitness_function: Scores a percentage vector against the target
            config: Evolution configuration
            rng: Random source; defaults to one seeded from config.seed
        """
        self.num_colors = num_colors
        self.fitness_function = fitness_function
        self.config = config or EvolutionConfig()
        self.rng = rng or random.Random(self.config.seed)

        self.crossover_operator: CrossoverOperator = SinglePointCrossover()
        self.mutation_operator: MutationOperator = GeneDeltaMutation(self.config.mutation_step)

        # State
        self.population: List[Candidate] = []
        self.generation = 0
        self.best_candidate: Optional[Candidate] = None
        self.history: List[Dict] = []

        # Callbacks
        self.on_generation: Optional[Callable[[int, List[Candidate]], None]] = None
        self.on_new_best: Optional[Callable[[Candidate], None]] = None

    def initialize_population(self) -> None:
        """Initialize the population with random percentage vectors."""
        self.generation = 0
        self.best_candidate = None
        self.history = []
        self.population = [
            Candidate(percentages=random_percentages(self.num_colors, self.rng), generation=0)
            for _ in range(self.config.population_size)
        ]

    def _evaluate_population(self) -> None:
        """Evaluate the mixed color and distance of every unevaluated candidate."""
        for candidate in self.population:
            if not candidate.evaluated:
                candidate.color, candidate.distance = self.fitness_function.evaluate(
                    candidate.percentages
                )
                candidate.evaluated = True

        generation_best = min(self.population, key=lambda c: c.distance)

        # Generation 0 seeds the tracker with its first individual, then
        # competes against it like any later generation
        if self.best_candidate is None:
            self._set_best(self.population[0])
        if generation_best.distance < self.best_candidate.distance:
            self._set_best(generation_best)

    def _set_best(self, candidate: Candidate) -> None:
        self.best_candidate = candidate.copy()
        if self.on_new_best:
            self.on_new_best(self.best_candidate)

    def evolve_generation(self) -> None:
        """Evaluate the current generation and breed the next one from it."""
        self._evaluate_population()

        distances = [c.distance for c in self.population]
        self.history.append({
            'generation': self.generation,
            'best_distance': min(distances),
            'avg_distance': sum(distances) / len(distances),
            'best_ever_distance': self.best_candidate.distance,
        })

        if self.on_generation:
            self.on_generation(self.generation, self.population)

        evaluated = self.population
        self.generation += 1

        new_population = []
        for _ in range(self.config.population_size):
            parent1 = tournament_select(evaluated, self.config.tournament_size, self.rng)
            parent2 = tournament_select(evaluated, self.config.tournament_size, self.rng)
            child = self.crossover_operator.crossover(
                parent1.percentages, parent2.percentages, self.rng
            )
            new_population.append(child)

        self.population = [
            Candidate(
                percentages=self.mutation_operator.mutate(
                    child, self.config.mutation_rate, self.rng
                ),
                generation=self.generation,
            )
            for child in new_population
        ]

    def run(
        self,
        callback: Optional[Callable[[int, float], bool]] = None,
        verbose: bool = False,
    ) -> Candidate:
        """
        Run the evolutionary algorithm.

        Args:
            callback: Optional callback called each generation with
                     (generation, best_distance). Return False to stop early.
            verbose: Whether to print progress

        Returns:
            The best candidate found
        """
        self.initialize_population()

        for gen in range(self.config.generations):
            self.evolve_generation()

            if verbose and (gen % 10 == 0 or gen == self.config.generations - 1):
                self._print_progress()

            if callback:
                should_continue = callback(self.generation, self.best_candidate.distance)
                if not should_continue:
                    break

        # With zero generations the initial population still gets scored
        if self.best_candidate is None:
            self._evaluate_population()

        return self.best_candidate

    def _print_progress(self) -> None:
        """Print evolution progress."""
        latest = self.history[-1]
        print(f"\n{'=' * 60}")
        print(f"Generation {latest['generation']}")
        print(f"{'=' * 60}")
        print(f"Best Distance: {latest['best_distance']:.2f}")
        print(f"Avg Distance: {latest['avg_distance']:.2f}")
        if self.best_candidate:
            percentages = ", ".join(f"{p:.2f}%" for p in self.best_candidate.percentages)
            print(f"Best Ever: {self.best_candidate.color} "
                  f"(distance {self.best_candidate.distance:.2f}) [{percentages}]")

    def get_statistics(self) -> Dict:
        """Get statistics about the evolution run."""
        return {
            'generation': self.generation,
            'population_size': len(self.population),
            'best_distance': self.best_candidate.distance if self.best_candidate else None,
            'history': self.history,
        }


def optimize(
    available_colors: Sequence[str],
    target_color: str,
    use_cmyk: bool = False,
    config: Optional[EvolutionConfig] = None,
    rng: Optional[random.Random] = None,
    verbose: bool = False,
) -> BlendResult:
    """
    Find the blend of the available colors that best approximates the target.

    Args:
        available_colors: Hex colors to mix from
        target_color: Hex color to approximate
        use_cmyk: Mix and measure distance in CMYK instead of RGB
        config: Evolution configuration
        rng: Random source, for reproducible runs
        verbose: Whether to print progress

    Returns:
        The best blend found: its hex color, percentages (same order as
        available_colors) and distance to the target

    Raises:
        InvalidFormatError: If any color is not a well-formed hex code
    """
    colors = [decode_hex(color) for color in available_colors]
    target = decode_hex(target_color)
    space = ColorSpace.from_flag(use_cmyk)

    if not colors:
        black = RGB.black()
        return BlendResult(
            color=black.to_hex(),
            percentages=[],
            distance=distance(black, target, space),
        )

    algorithm = EvolutionaryAlgorithm(
        num_colors=len(colors),
        fitness_function=BlendDistanceFitness(colors, target, space),
        config=config,
        rng=rng,
    )
    best = algorithm.run(verbose=verbose)
    return BlendResult.from_candidate(best)
