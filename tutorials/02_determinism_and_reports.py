"""
Determinism & Reports Tutorial

Goals:
- Run the minimal preset twice from the same seed
- Build population reports and compare determinism signatures
"""

from rvga.config import PRESET_MINIMAL
from rvga.evolution.population import Population
from rvga.fitness import gene_sum
from rvga.utils.observability import determinism_signature, population_report
from rvga.utils.rng_manager import RNGManager


def run_once(seed):
    pop = Population.from_config(PRESET_MINIMAL, gene_sum, rng_manager=RNGManager(seed=seed))
    for _ in range(PRESET_MINIMAL['generations']):
        pop.evaluate()
        pop.advance()
    pop.evaluate()
    return population_report(pop)


def main():
    rep_a = run_once(11)
    rep_b = run_once(11)
    rep_c = run_once(12)
    print('schema_version:', rep_a['schema_version'])
    print('same_seed_match:', determinism_signature(rep_a) == determinism_signature(rep_b))
    print('other_seed_match:', determinism_signature(rep_a) == determinism_signature(rep_c))
    print('best_fitness_per_generation:', [round(m['best_fitness'], 3) for m in rep_a['metrics']])


if __name__ == '__main__':
    main()
