"""
evobirds.operators.crossover
============================

Crossover (recombination) operators fusing two parent chromosomes into a
single child chromosome.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from evobirds.core.chromosome import Chromosome


# =============================================================================
# Base class
# =============================================================================
class CrossoverOperator(ABC):
    """Abstract base class for crossover operators."""

    @abstractmethod
    def crossover(self, rng: np.random.Generator, parent_a: Chromosome, parent_b: Chromosome) -> Chromosome:
        """Return one child created from parent_a and parent_b."""
        pass

    @staticmethod
    def _validate(parent_a: Chromosome, parent_b: Chromosome) -> None:
        if len(parent_a) != len(parent_b):
            raise ValueError(f"Parents must have equal length, got {len(parent_a)} and {len(parent_b)}.")


# =============================================================================
# Real-valued crossovers
# =============================================================================
class UniformCrossover(CrossoverOperator):
    """
    Uniform crossover: each gene is taken from either parent with equal probability,
    independently of its neighbours.
    """

    def crossover(self, rng: np.random.Generator, parent_a: Chromosome, parent_b: Chromosome) -> Chromosome:
        self._validate(parent_a, parent_b)
        mask = rng.random(len(parent_a)) < 0.5
        return Chromosome(np.where(mask, parent_a.genes, parent_b.genes))
