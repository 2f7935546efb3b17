"""Fitness-proportional (roulette-wheel) parent selection."""

from __future__ import annotations

import math
import random
from typing import Sequence

from rvga.evolution.genotype import Individual
from rvga.utils.validation import (
    InvalidParameterError,
    NonFiniteFitnessError,
    SelectionUnderflowError,
)

UNDERFLOW_POLICIES = ('UNIFORM', 'ERROR')


def normalize_underflow_policy(policy: str) -> str:
    value = str(policy).upper()
    if value not in UNDERFLOW_POLICIES:
        raise InvalidParameterError(
            f"selection_underflow must be one of {UNDERFLOW_POLICIES}, got {policy!r}"
        )
    return value


def selection_weights(individuals: Sequence[Individual]) -> list[float]:
    """Fitness clamped to be non-negative; stored fitness is left as-is."""
    return [max(0.0, float(ind.fitness)) for ind in individuals]


def roulette_select(individuals: Sequence[Individual], weights: Sequence[float],
                    rng: random.Random, policy: str = 'UNIFORM') -> Individual:
    """Select one individual with probability proportional to its weight.

    Draws a target in [0, total) and walks the population in order until the
    running sum reaches the target. Zero-weight individuals are never picked
    unless every weight is zero, in which case ``policy`` decides: UNIFORM
    picks uniformly at random, ERROR raises SelectionUnderflowError.
    """
    if not individuals:
        raise ValueError("Cannot select from an empty population")
    if len(weights) != len(individuals):
        raise ValueError("weights must align with individuals")

    total = sum(weights)
    if not math.isfinite(total):
        # Finite weights whose sum overflows; scale into [0, 1]
        peak = max(weights)
        if not math.isfinite(peak):
            raise NonFiniteFitnessError(f"Selection weight must be finite, got {peak}")
        weights = [w / peak for w in weights]
        total = sum(weights)
    if total <= 0.0:
        if policy == 'ERROR':
            raise SelectionUnderflowError(
                f"Total selection weight is {total}; fitness-proportional selection is undefined"
            )
        return rng.choice(list(individuals))

    target = rng.random() * total
    cumulative = 0.0
    for ind, weight in zip(individuals, weights):
        cumulative += weight
        if weight > 0.0 and cumulative >= target:
            return ind

    # Rounding left the running sum just short of the target
    for ind, weight in zip(reversed(individuals), reversed(weights)):
        if weight > 0.0:
            return ind
    raise AssertionError("unreachable: positive total with no positive weight")  # pragma: no cover


def select_parents(individuals: Sequence[Individual], rng: random.Random,
                   policy: str = 'UNIFORM',
                   weights: Sequence[float] | None = None) -> tuple[Individual, Individual]:
    """Two independent draws with replacement; both parents may be the same individual."""
    if weights is None:
        weights = selection_weights(individuals)
    first = roulette_select(individuals, weights, rng, policy)
    second = roulette_select(individuals, weights, rng, policy)
    return first, second


__all__ = [
    "UNDERFLOW_POLICIES",
    "normalize_underflow_policy",
    "selection_weights",
    "roulette_select",
    "select_parents",
]
