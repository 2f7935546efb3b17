"""Example fitness functions, addressable by name from configs and the CLI.

All of them are non-negative on [0, 1) genes, which keeps roulette-wheel
selection well defined. User-supplied functions with negative values are
accepted; negative scores count as zero selection weight.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

from rvga.utils.validation import InvalidParameterError

FitnessFn = Callable[[Sequence[float]], float]


def gene_sum(genes: Sequence[float]) -> float:
    return float(sum(genes))


def gene_mean(genes: Sequence[float]) -> float:
    if not genes:
        return 0.0
    return float(sum(genes)) / len(genes)


def center_peak(genes: Sequence[float]) -> float:
    """Peaks at 1.0 when every gene is 0.5."""
    dist_sq = sum((g - 0.5) ** 2 for g in genes)
    return 1.0 / (1.0 + dist_sq)


def wave(genes: Sequence[float]) -> float:
    """Multimodal: sum of x*sin(10*pi*x) + 1 per gene."""
    return float(sum(g * math.sin(10 * math.pi * g) + 1.0 for g in genes))


FITNESS_FUNCTIONS: dict[str, FitnessFn] = {
    'sum': gene_sum,
    'mean': gene_mean,
    'center_peak': center_peak,
    'wave': wave,
}


def get_fitness_function(name: str) -> FitnessFn:
    try:
        return FITNESS_FUNCTIONS[name]
    except KeyError:
        raise InvalidParameterError(f"Unknown fitness function {name!r}; choose from {sorted(FITNESS_FUNCTIONS)}") from None


__all__ = ["FitnessFn", "FITNESS_FUNCTIONS", "get_fitness_function", "gene_sum", "gene_mean", "center_peak", "wave"]
