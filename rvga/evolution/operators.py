"""Crossover and mutation operators for real-valued chromosomes."""

from __future__ import annotations

import random

from rvga.evolution.genotype import Individual


def random_individual(gene_count: int, rng: random.Random) -> Individual:
    """Create an individual with genes drawn uniformly from [0.0, 1.0)."""
    return Individual(genes=[rng.random() for _ in range(gene_count)])


def uniform_crossover(parent1: Individual, parent2: Individual, crossover_rate: float,
                      rng: random.Random) -> Individual:
    """Discrete per-gene crossover producing a single offspring.

    Each position independently takes parent2's allele with probability
    ``crossover_rate`` and parent1's allele otherwise. Parents are left
    untouched; the offspring starts unevaluated with fitness 0.0.
    """
    if len(parent1.genes) != len(parent2.genes):
        raise ValueError(
            f"Parents must have the same gene count ({len(parent1.genes)} != {len(parent2.genes)})"
        )

    genes = [
        g2 if rng.random() < crossover_rate else g1
        for g1, g2 in zip(parent1.genes, parent2.genes)
    ]
    return Individual(
        genes=genes,
        history={'parents': (parent1.genotype_id, parent2.genotype_id)},
    )


def mutate(individual: Individual, mutation_rate: float, rng: random.Random) -> int:
    """Uniform-reset mutation, applied in place.

    Each gene is replaced by a fresh draw from [0.0, 1.0) with probability
    ``mutation_rate``. Returns the number of replaced genes.
    """
    replaced = 0
    for idx in range(len(individual.genes)):
        if rng.random() < mutation_rate:
            individual.genes[idx] = rng.random()
            replaced += 1

    if replaced:
        individual.evaluated = False
        individual.fitness = 0.0
    individual.history['mutated_genes'] = individual.history.get('mutated_genes', 0) + replaced
    return replaced


__all__ = ["random_individual", "uniform_crossover", "mutate"]
