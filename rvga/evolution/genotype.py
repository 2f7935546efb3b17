"""Individual (chromosome) data model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


@dataclass
class Individual:
    """Fixed-length real-valued chromosome.

    Attributes:
        genes: Gene values, each drawn from [0.0, 1.0) by the generating operator
        fitness: Cached fitness score; 0.0 until evaluated
        evaluated: True only while ``fitness`` reflects the current genes
        genotype_id: Unique identifier for this individual
        history: Bookkeeping data (parent ids, mutated gene count)
    """

    genes: list[float] = field(default_factory=list)
    fitness: float = 0.0
    evaluated: bool = False
    genotype_id: uuid.UUID = field(default_factory=uuid.uuid4)
    history: dict = field(default_factory=dict)

    @property
    def gene_count(self) -> int:
        return len(self.genes)


@dataclass(frozen=True)
class IndividualView:
    """Read-only snapshot of an individual for reporting."""

    rank: int
    genes: tuple[float, ...]
    fitness: float
    evaluated: bool
    genotype_id: uuid.UUID
    parent_ids: tuple[uuid.UUID, ...] = ()

    @classmethod
    def from_individual(cls, rank: int, individual: Individual) -> "IndividualView":
        return cls(
            rank=rank,
            genes=tuple(individual.genes),
            fitness=individual.fitness,
            evaluated=individual.evaluated,
            genotype_id=individual.genotype_id,
            parent_ids=tuple(individual.history.get('parents', ())),
        )


__all__ = ["Individual", "IndividualView"]
