"""
Operators & Selection Tutorial

Goals:
- Breed one offspring with uniform crossover and mutation
- Inspect roulette-wheel selection frequencies
- See the uniform fallback when every fitness is zero
"""

from collections import Counter

from rvga.evolution.genotype import Individual
from rvga.evolution.operators import mutate, uniform_crossover
from rvga.evolution.selection import roulette_select, selection_weights
from rvga.utils.rng_manager import RNGManager


def main():
    rng = RNGManager(seed=7)

    parent1 = Individual(genes=[0.1, 0.1, 0.1, 0.1], fitness=9.0, evaluated=True)
    parent2 = Individual(genes=[0.9, 0.9, 0.9, 0.9], fitness=1.0, evaluated=True)

    # Each gene comes from parent2 with probability 0.5
    child = uniform_crossover(parent1, parent2, 0.5, rng.get_context_rng('crossover'))
    print("child_genes:", child.genes)

    # Every gene is redrawn with probability 0.25
    replaced = mutate(child, 0.25, rng.get_context_rng('mutation'))
    print("mutated_genes:", replaced, "evaluated:", child.evaluated)

    # Fitness 9:1 -> parent1 is picked about 90% of the time
    pop = [parent1, parent2]
    weights = selection_weights(pop)
    sel_rng = rng.get_context_rng('selection')
    counts = Counter('parent1' if roulette_select(pop, weights, sel_rng) is parent1 else 'parent2' for _ in range(1000))
    print("selection_counts:", dict(counts))

    # All-zero weights: uniform choice instead of an undefined draw
    for ind in pop:
        ind.fitness = 0.0
    zero_counts = Counter(
        'parent1' if roulette_select(pop, selection_weights(pop), sel_rng) is parent1 else 'parent2'
        for _ in range(1000)
    )
    print("uniform_fallback_counts:", dict(zero_counts))


if __name__ == '__main__':
    main()
