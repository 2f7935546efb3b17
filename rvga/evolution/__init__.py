"""Evolutionary engine for RVGA."""

from .genotype import Individual, IndividualView
from .operators import mutate, random_individual, uniform_crossover
from .population import (
    EvolutionHistory,
    Population,
    advance,
    create_population,
    evaluate,
    read,
)
from .selection import roulette_select, select_parents, selection_weights

__all__ = [
    "Individual",
    "IndividualView",
    "random_individual",
    "uniform_crossover",
    "mutate",
    "roulette_select",
    "select_parents",
    "selection_weights",
    "EvolutionHistory",
    "Population",
    "create_population",
    "evaluate",
    "advance",
    "read",
]
