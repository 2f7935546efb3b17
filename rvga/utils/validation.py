"""Error taxonomy and parameter checks."""

from __future__ import annotations

import math
from typing import Any


class ValidationError(ValueError):
    """Base class for rejected inputs."""


class InvalidParameterError(ValidationError):
    """Population size, gene count, rate or fitness function is unusable."""


class NonFiniteFitnessError(ValidationError):
    """The fitness function returned NaN, infinity or a non-number."""


class SelectionUnderflowError(ValidationError):
    """Total selection weight is not positive and the policy is ERROR."""


class EvolutionStateError(RuntimeError):
    """Operation called in the wrong phase (e.g. advance on a stale population)."""


def validate_count(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidParameterError(f"{name} must be >= 1, got {value}")
    return value


def validate_rate(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    rate = float(value)
    if not math.isfinite(rate) or rate < 0.0 or rate > 1.0:
        raise InvalidParameterError(f"{name} must be in [0, 1], got {value}")
    return rate


def validate_fitness_value(value: Any) -> float:
    """Coerce a fitness result to float, rejecting anything that cannot be ordered."""
    if isinstance(value, (bool, str, bytes)):
        raise NonFiniteFitnessError(f"Fitness must be a number, got {value!r}")
    try:
        fitness = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise NonFiniteFitnessError(f"Fitness must be a number, got {value!r}") from exc
    if not math.isfinite(fitness):
        raise NonFiniteFitnessError(f"Fitness must be finite, got {fitness}")
    return fitness


__all__ = [
    "ValidationError",
    "InvalidParameterError",
    "NonFiniteFitnessError",
    "SelectionUnderflowError",
    "EvolutionStateError",
    "validate_count",
    "validate_rate",
    "validate_fitness_value",
]
