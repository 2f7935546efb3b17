"""Population engine: initialization, evaluation and generational replacement.

The caller drives the cycle::

    pop = create_population(20, 5, fitness_fn, 0.1, 0.7)
    for _ in range(generations):
        evaluate(pop)
        report(read(pop))
        advance(pop)

``evaluate`` scores and sorts the population; ``advance`` replaces it with
offspring bred by roulette-wheel selection, uniform crossover and mutation.
There is no elitism: the previous generation is discarded wholesale.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from rvga.config import EvolutionParams
from rvga.evolution.genotype import Individual, IndividualView
from rvga.evolution.operators import mutate, random_individual, uniform_crossover
from rvga.evolution.selection import (
    normalize_underflow_policy,
    select_parents,
    selection_weights,
)
from rvga.utils.rng_manager import RNGManager
from rvga.utils.validation import (
    EvolutionStateError,
    InvalidParameterError,
    validate_fitness_value,
)


@dataclass
class EvolutionHistory:
    """Per-evaluation metrics collected over a run."""

    metrics: list[dict[str, Any]] = field(default_factory=list)

    def add_metrics(self, metrics: dict[str, Any]) -> None:
        self.metrics.append(dict(metrics))

    def best_fitness(self) -> list[float]:
        return [m['best_fitness'] for m in self.metrics]


class Population:
    """Owns the individuals, the fitness function and the run parameters."""

    def __init__(self, size: int, gene_count: int,
                 fitness_fn: Callable[[Sequence[float]], float],
                 mutation_rate: float, crossover_rate: float,
                 rng_manager: RNGManager | None = None,
                 config: dict | None = None) -> None:
        if not callable(fitness_fn):
            raise InvalidParameterError(f"fitness_fn must be callable, got {fitness_fn!r}")
        config = config or {}

        self.params = EvolutionParams(
            population_size=size,
            gene_count=gene_count,
            mutation_rate=mutation_rate,
            crossover_rate=crossover_rate,
        )
        self.fitness_fn = fitness_fn
        self.rng_manager = rng_manager if rng_manager is not None else RNGManager()
        self.selection_underflow = normalize_underflow_policy(config.get('selection_underflow', 'UNIFORM'))
        self.generation = 0
        self.history = EvolutionHistory()

        rng = self.rng_manager.get_context_rng('init')
        self._individuals: list[Individual] = [
            random_individual(self.params.gene_count, rng) for _ in range(self.params.population_size)
        ]
        self._evaluated = False
        logging.debug("Population initialized: %s seed=%s", self.params, self.rng_manager.seed)

    @classmethod
    def from_config(cls, config: dict, fitness_fn: Callable[[Sequence[float]], float],
                    rng_manager: RNGManager | None = None) -> "Population":
        params = EvolutionParams.from_config(config)
        return cls(
            params.population_size,
            params.gene_count,
            fitness_fn,
            params.mutation_rate,
            params.crossover_rate,
            rng_manager=rng_manager,
            config=config,
        )

    @property
    def size(self) -> int:
        return len(self._individuals)

    @property
    def is_evaluated(self) -> bool:
        return self._evaluated

    def evaluate(self) -> None:
        """Score every individual and sort the population by descending fitness.

        All scores are computed and validated before any individual is
        touched, so a NonFiniteFitnessError leaves the population unchanged.
        Ties keep their current relative order.
        """
        scores = [validate_fitness_value(self.fitness_fn(list(ind.genes))) for ind in self._individuals]
        for ind, score in zip(self._individuals, scores):
            ind.fitness = score
            ind.evaluated = True
        self._individuals.sort(key=lambda ind: ind.fitness, reverse=True)
        self._evaluated = True

        metrics = {
            'generation': self.generation,
            'best_fitness': self._individuals[0].fitness,
            'worst_fitness': self._individuals[-1].fitness,
            'mean_fitness': sum(s / len(scores) for s in scores),
        }
        self.history.add_metrics(metrics)
        logging.debug("Generation %d evaluated: best=%.4f mean=%.4f",
                      self.generation, metrics['best_fitness'], metrics['mean_fitness'])

    def advance(self) -> None:
        """Replace the population with a new generation of offspring."""
        if not self._evaluated:
            raise EvolutionStateError("advance() requires an evaluated population; call evaluate() first")

        parents = list(self._individuals)
        weights = selection_weights(parents)
        if sum(weights) <= 0.0 and self.selection_underflow == 'UNIFORM':
            logging.warning(
                "Generation %d: total fitness is not positive; selecting parents uniformly at random",
                self.generation,
            )

        selection_rng = self.rng_manager.get_context_rng('selection')
        crossover_rng = self.rng_manager.get_context_rng('crossover')
        mutation_rng = self.rng_manager.get_context_rng('mutation')

        offspring: list[Individual] = []
        while len(offspring) < self.params.population_size:
            parent1, parent2 = select_parents(parents, selection_rng, self.selection_underflow, weights)
            child = uniform_crossover(parent1, parent2, self.params.crossover_rate, crossover_rng)
            mutate(child, self.params.mutation_rate, mutation_rng)
            offspring.append(child)

        self._individuals = offspring
        self._evaluated = False
        self.generation += 1

    def read(self) -> tuple[IndividualView, ...]:
        return tuple(IndividualView.from_individual(rank, ind) for rank, ind in enumerate(self._individuals, start=1))

    def best(self) -> IndividualView:
        if not self._evaluated:
            raise EvolutionStateError("best() requires an evaluated population")
        return IndividualView.from_individual(1, self._individuals[0])


def create_population(size: int, gene_count: int, fitness_fn: Callable[[Sequence[float]], float],
                      mutation_rate: float, crossover_rate: float, *,
                      rng_manager: RNGManager | None = None,
                      config: dict | None = None) -> Population:
    return Population(size, gene_count, fitness_fn, mutation_rate, crossover_rate,
                      rng_manager=rng_manager, config=config)


def evaluate(population: Population) -> None:
    population.evaluate()


def advance(population: Population) -> None:
    population.advance()


def read(population: Population) -> tuple[IndividualView, ...]:
    return population.read()


__all__ = [
    "EvolutionHistory",
    "Population",
    "create_population",
    "evaluate",
    "advance",
    "read",
]
