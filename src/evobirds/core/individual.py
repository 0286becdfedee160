"""Core individual abstraction and population helpers.

An :class:`Individual` is anything the genetic algorithm can breed: it
reports a fitness, exposes its chromosome and can be rebuilt from one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import NewType

from evobirds.core.chromosome import Chromosome

Population = NewType("Population", list["Individual"])


class Individual(ABC):
    """Capability interface binding a domain entity to the genetic algorithm."""

    __slots__ = ()

    @abstractmethod
    def fitness(self) -> float:
        """Return the non-negative fitness score used for selection."""
        pass

    @abstractmethod
    def chromosome(self) -> Chromosome:
        """Return the genetic material of this individual."""
        pass

    @classmethod
    @abstractmethod
    def create(cls, chromosome: Chromosome) -> Individual:
        """Build a fresh individual carrying ``chromosome``."""
        pass


class BasicIndividual(Individual):
    """Plain individual holding a chromosome and a fitness value.

    Parameters
    ----------
    chromosome : Chromosome
        Underlying genetic representation.
    fitness : float, default 0.0
        Raw fitness value. Higher means more likely to reproduce.
    """

    __slots__ = ("_chromosome", "_fitness")

    def __init__(self, chromosome: Chromosome, fitness: float = 0.0) -> None:
        self._chromosome: Chromosome = chromosome
        self._fitness: float = float(fitness)

    def fitness(self) -> float:
        return self._fitness

    def chromosome(self) -> Chromosome:
        return self._chromosome

    @classmethod
    def create(cls, chromosome: Chromosome) -> BasicIndividual:
        return cls(chromosome)

    # ------------------------------------------------------------------
    # Core protocol helpers
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, BasicIndividual):
            return False
        return self._chromosome == other._chromosome and self._fitness == other._fitness

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BasicIndividual(chromosome=Chromosome(len={len(self._chromosome)}), fitness={self._fitness:.4f})"

    # ------------------------------------------------------------------
    # Population utilities
    # ------------------------------------------------------------------
    @staticmethod
    def create_population(chromosome_factory: Callable[[], Chromosome], size: int) -> Population:
        """Create a new population of individuals.

        Parameters
        ----------
        chromosome_factory : Callable[[], Chromosome]
            Factory returning a freshly randomized chromosome.
        size : int
            Number of individuals to create (must be > 0).
        """
        if size <= 0:
            raise ValueError("size must be > 0")
        return Population([BasicIndividual(chromosome_factory()) for _ in range(size)])

    @staticmethod
    def from_chromosomes(chromosomes: Iterable[Chromosome], fitness: Iterable[float] | None = None) -> Population:
        """Create a population directly from chromosomes and optional fitness values."""
        if fitness is None:
            return Population([BasicIndividual(c) for c in chromosomes])
        return Population([BasicIndividual(c, f) for c, f in zip(chromosomes, fitness, strict=True)])
