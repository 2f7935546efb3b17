"""Run parameters and presets.

Configs are plain dicts read with ``config.get(key, default)``; the presets
below are complete examples. ``EvolutionParams`` is the validated, immutable
view the engine works with.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from rvga.utils.validation import validate_count, validate_rate

# Reference run: 10 generations of 20 five-gene individuals.
PRESET_DEFAULT: dict[str, Any] = {
    'generations': 10,
    'population_size': 20,
    'gene_count': 5,
    'mutation_rate': 0.1,
    'crossover_rate': 0.7,
    'fitness': 'sum',
    'selection_underflow': 'UNIFORM',
}

# Pure copying: offspring always equal their first parent.
PRESET_MINIMAL: dict[str, Any] = {
    'generations': 5,
    'population_size': 4,
    'gene_count': 2,
    'mutation_rate': 0.0,
    'crossover_rate': 0.0,
    'fitness': 'sum',
    'selection_underflow': 'UNIFORM',
}

PRESETS: dict[str, dict[str, Any]] = {
    'default': PRESET_DEFAULT,
    'minimal': PRESET_MINIMAL,
}


@dataclass(frozen=True)
class EvolutionParams:
    population_size: int
    gene_count: int
    mutation_rate: float
    crossover_rate: float

    def __post_init__(self) -> None:
        validate_count('population_size', self.population_size)
        validate_count('gene_count', self.gene_count)
        # store coerced float rates on the frozen instance
        object.__setattr__(self, 'mutation_rate', validate_rate('mutation_rate', self.mutation_rate))
        object.__setattr__(self, 'crossover_rate', validate_rate('crossover_rate', self.crossover_rate))

    @classmethod
    def from_config(cls, config: dict) -> "EvolutionParams":
        return cls(
            population_size=config.get('population_size', PRESET_DEFAULT['population_size']),
            gene_count=config.get('gene_count', PRESET_DEFAULT['gene_count']),
            mutation_rate=config.get('mutation_rate', PRESET_DEFAULT['mutation_rate']),
            crossover_rate=config.get('crossover_rate', PRESET_DEFAULT['crossover_rate']),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = ["PRESET_DEFAULT", "PRESET_MINIMAL", "PRESETS", "EvolutionParams"]
