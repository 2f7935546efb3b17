"""
Command-line driver.

Runs a fixed number of generations and prints every individual's rank,
fitness and genes after each evaluation. Flags override the chosen preset.

    rvga --generations 10 --population-size 20 --gene-count 5 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from rvga.config import PRESETS
from rvga.evolution.genotype import IndividualView
from rvga.evolution.population import Population
from rvga.fitness import FITNESS_FUNCTIONS, get_fitness_function
from rvga.utils.rng_manager import RNGManager
from rvga.utils.validation import ValidationError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog='rvga', description='Evolve real-valued chromosomes with a genetic algorithm.')
    ap.add_argument('--preset', choices=sorted(PRESETS), default='default')
    ap.add_argument('--generations', type=int, default=None)
    ap.add_argument('--population-size', type=int, default=None)
    ap.add_argument('--gene-count', type=int, default=None)
    ap.add_argument('--mutation-rate', type=float, default=None)
    ap.add_argument('--crossover-rate', type=float, default=None)
    ap.add_argument('--fitness', choices=sorted(FITNESS_FUNCTIONS), default=None)
    ap.add_argument('--selection-underflow', choices=['UNIFORM', 'ERROR'], default=None)
    ap.add_argument('--seed', type=int, default=None, help='seed for a reproducible run')
    ap.add_argument('--log-level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return ap


def resolve_config(args: argparse.Namespace) -> dict:
    config = dict(PRESETS[args.preset])
    overrides = {
        'generations': args.generations,
        'population_size': args.population_size,
        'gene_count': args.gene_count,
        'mutation_rate': args.mutation_rate,
        'crossover_rate': args.crossover_rate,
        'fitness': args.fitness,
        'selection_underflow': args.selection_underflow,
    }
    config.update({k: v for k, v in overrides.items() if v is not None})
    return config


def format_individual(view: IndividualView) -> str:
    genes = ', '.join(f"{g:.4f}" for g in view.genes)
    return f"  #{view.rank:<3d} fitness={view.fitness:.2f} genes=[{genes}]"


def report_generation(generation: int, views: Sequence[IndividualView], out: TextIO) -> None:
    print(f"Generation {generation}:", file=out)
    for view in views:
        print(format_individual(view), file=out)


def run(config: dict, rng_manager: RNGManager | None = None, out: TextIO | None = None) -> Population:
    """Evaluate, report and advance for ``config['generations']`` generations.

    The last generation is evaluated and reported but not advanced, so the
    returned population is in the evaluated state.
    """
    out = out if out is not None else sys.stdout
    generations = int(config.get('generations', 10))
    if generations < 1:
        raise ValidationError(f"generations must be >= 1, got {generations}")
    fitness_fn = get_fitness_function(config.get('fitness', 'sum'))
    population = Population.from_config(config, fitness_fn, rng_manager=rng_manager)

    for gen in range(generations):
        population.evaluate()
        report_generation(gen, population.read(), out)
        if gen < generations - 1:
            population.advance()

    best = population.best()
    print(f"best_fitness={best.fitness:.2f} seed={population.rng_manager.seed}", file=out)
    return population


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format='%(levelname)s %(name)s: %(message)s')

    config = resolve_config(args)
    try:
        run(config, rng_manager=RNGManager(seed=args.seed))
    except ValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
