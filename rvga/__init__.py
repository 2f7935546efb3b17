"""
RVGA - Real-Vector Genetic Algorithm

Evolves a fixed-size population of fixed-length real-valued chromosomes
toward higher fitness using roulette-wheel selection, uniform per-gene
crossover and uniform-reset mutation.
"""

__version__ = "0.1.0"

from .config import PRESET_DEFAULT, PRESET_MINIMAL, EvolutionParams  # noqa: F401
from .evolution import *  # noqa: F401,F403
from .utils import *  # noqa: F401,F403
