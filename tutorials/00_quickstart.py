"""
Quickstart Tutorial

Goals:
- Create a population with a user-supplied fitness function
- Drive the evaluate -> read -> advance cycle for a few generations
- Print the best individual of each generation
"""

from rvga.evolution import advance, create_population, evaluate, read
from rvga.utils.rng_manager import RNGManager


def closeness_to_target(genes):
    # Maximized when genes approach (0.2, 0.4, 0.6, 0.8)
    target = [0.2, 0.4, 0.6, 0.8]
    return 1.0 / (1.0 + sum((g - t) ** 2 for g, t in zip(genes, target)))


def main():
    pop = create_population(
        30,  # population size
        4,  # genes per individual
        closeness_to_target,
        0.05,  # mutation rate
        0.5,  # crossover rate
        rng_manager=RNGManager(seed=2024),
    )

    for gen in range(8):
        evaluate(pop)
        best = read(pop)[0]
        genes = ', '.join(f"{g:.3f}" for g in best.genes)
        print(f"gen={gen} best_fitness={best.fitness:.3f} genes=[{genes}]")
        advance(pop)


if __name__ == '__main__':
    main()
