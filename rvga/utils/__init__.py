"""Utilities for RVGA."""

from .observability import assert_determinism_equivalence, determinism_signature, population_report
from .rng_manager import RNGManager
from .validation import (
    EvolutionStateError,
    InvalidParameterError,
    NonFiniteFitnessError,
    SelectionUnderflowError,
    ValidationError,
)

__all__ = [
    'RNGManager',
    'ValidationError',
    'InvalidParameterError',
    'NonFiniteFitnessError',
    'SelectionUnderflowError',
    'EvolutionStateError',
    'population_report',
    'determinism_signature',
    'assert_determinism_equivalence',
]
